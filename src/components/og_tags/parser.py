"""
Meta tag parser.

Pattern scan over raw text, no DOM construction. Tolerant of malformed
surrounding markup: anything that is not a recognizable <meta> tag with a
property/name and a content attribute is skipped.
"""

from __future__ import annotations

import html
import logging
import re
from typing import Any

from .models import DEFAULT_THRESHOLDS, OGRecord

logger = logging.getLogger(__name__)

# Property name -> record attribute for single-valued tags (last one wins).
PROPERTY_FIELDS: dict[str, str] = {
    # Open Graph
    "og:title": "title",
    "og:description": "description",
    "og:image": "image",
    "og:image:width": "image_width",
    "og:image:height": "image_height",
    "og:url": "url",
    "og:type": "type",
    "og:site_name": "site_name",
    "og:locale": "locale",
    # Twitter Cards
    "twitter:card": "twitter_card",
    "twitter:site": "twitter_site",
    "twitter:creator": "twitter_creator",
    "twitter:title": "twitter_title",
    "twitter:description": "twitter_description",
    "twitter:image": "twitter_image",
    # Article
    "article:author": "article_author",
    "article:published_time": "article_published_time",
    "article:modified_time": "article_modified_time",
    "article:section": "article_section",
    # Product
    "product:price:amount": "product_price",
    "product:price:currency": "product_currency",
    "product:availability": "product_availability",
    "product:condition": "product_condition",
}

# Repeatable tags accumulate in source order.
LIST_PROPERTY_FIELDS: dict[str, str] = {
    "article:tag": "article_tag",
    "og:locale:alternate": "alternate_locale",
}

# A whole <meta ...> tag. Quoted runs are consumed as units so a '>' inside
# an attribute value does not end the tag. A nested '<meta' ends every
# attempt, so a failed match never scans past the next tag start.
_META_TAG_RE = re.compile(
    r"""<meta\b((?:[^<>"']|<(?!meta\b)|"(?:[^"<]|<(?!meta\b))*"|'(?:[^'<]|<(?!meta\b))*')*)>""",
    re.IGNORECASE,
)

# One attribute with its optional value. Every value is consumed whole, so
# text inside a quoted value is never read as another attribute.
_ATTRIBUTE_RE = re.compile(
    r"""([^\s"'=<>/]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|[^\s"'<>]+))?""",
)

_INTERESTING_ATTRIBUTES = frozenset({"property", "name", "content"})


def _tag_attributes(body: str) -> dict[str, str]:
    """First quoted occurrence of each interesting attribute in a tag body."""
    attrs: dict[str, str] = {}
    for match in _ATTRIBUTE_RE.finditer(body):
        attr = match.group(1).lower()
        if attr not in _INTERESTING_ATTRIBUTES:
            continue
        value = match.group(2) if match.group(2) is not None else match.group(3)
        # Unquoted values are not recognized
        if value is not None:
            attrs.setdefault(attr, value)
    return attrs


def extract_meta_pairs(text: str) -> list[tuple[str, str]]:
    """
    Extract (property, decoded content) pairs in source order.

    Tags without a name, or with an empty content value, are skipped.
    """
    pairs: list[tuple[str, str]] = []
    for tag in _META_TAG_RE.finditer(text):
        attrs = _tag_attributes(tag.group(1))
        name = attrs.get("property") or attrs.get("name")
        content = attrs.get("content")
        if not name or not content:
            continue
        pairs.append((name, html.unescape(content)))
    return pairs


def parse_og_tags(
    text: str, max_input_length: int = DEFAULT_THRESHOLDS.max_input_length
) -> OGRecord:
    """
    Parse raw meta tag markup into an OGRecord.

    Input longer than max_input_length yields an empty record without any
    scanning. Unrecognized properties are ignored.
    """
    if len(text) > max_input_length:
        logger.debug(
            "Skipping parse: input is %d characters (limit %d)", len(text), max_input_length
        )
        return OGRecord()

    values: dict[str, Any] = {}
    matched = 0
    for name, content in extract_meta_pairs(text):
        if name in PROPERTY_FIELDS:
            values[PROPERTY_FIELDS[name]] = content
        elif name in LIST_PROPERTY_FIELDS:
            values.setdefault(LIST_PROPERTY_FIELDS[name], []).append(content)
        else:
            continue
        matched += 1

    logger.debug("Parsed %d recognized meta tags", matched)
    return OGRecord(**values)
