"""Serialize form fields back into canonical meta tag markup."""

from __future__ import annotations

from .escape import escape_html
from .models import OGRecord

# (record attribute, tag attribute, property name) in emission order.
GENERATED_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("title", "property", "og:title"),
    ("description", "property", "og:description"),
    ("image", "property", "og:image"),
    ("url", "property", "og:url"),
    ("type", "property", "og:type"),
    ("site_name", "property", "og:site_name"),
    ("twitter_card", "name", "twitter:card"),
    ("twitter_title", "name", "twitter:title"),
    ("twitter_description", "name", "twitter:description"),
    ("twitter_image", "name", "twitter:image"),
)


def generate_og_tags(record: OGRecord) -> str:
    """
    Emit one self-closed <meta> tag per present generated field.

    Article, product and locale fields are never emitted. Returns an empty
    string when nothing is present.
    """
    tags: list[str] = []
    for attr, tag_attr, prop in GENERATED_FIELDS:
        value = getattr(record, attr)
        if value:
            tags.append(f'<meta {tag_attr}="{prop}" content="{escape_html(value)}" />')
    return "\n".join(tags)
