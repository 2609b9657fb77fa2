"""
OG tag validator.

Checks a parsed record against social platform best practices and returns
issues in a fixed rule order (not sorted by severity):

1. og:title presence and length
2. og:description presence and length
3. og:image presence, absolute URL, dimensions
4. og:url presence
5. og:type presence
6. twitter:card value
7. twitter:card recommendation when an image exists
8. article:* metadata when og:type is "article"

Every suggestion that embeds record content goes through escape_html so it
can be pasted as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .escape import escape_html
from .models import (
    DEFAULT_THRESHOLDS,
    OGRecord,
    Severity,
    ValidationIssue,
    ValidationSummary,
    ValidationThresholds,
)

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


def shorten(text: str, limit: int) -> str:
    """First `limit` characters, trailing whitespace trimmed, plus an ellipsis."""
    return text[:limit].rstrip() + ELLIPSIS


def _meta_tag(prop: str, content: str) -> str:
    return f'<meta property="{prop}" content="{escape_html(content)}" />'


def _check_title(title: str | None, t: ValidationThresholds) -> list[ValidationIssue]:
    if not title:
        return [
            ValidationIssue(
                severity=Severity.ERROR,
                property="og:title",
                message="Title is required for proper social media sharing",
                suggestion='Add <meta property="og:title" content="Your page title" />',
            )
        ]

    length = len(title)
    if length > t.title_max_length:
        return [
            ValidationIssue(
                severity=Severity.WARNING,
                property="og:title",
                message=f"Title is {length} characters (recommended: 40-{t.title_max_length})",
                suggestion=_meta_tag("og:title", shorten(title, t.title_truncate_at)),
            )
        ]
    if length < t.title_min_length:
        return [
            ValidationIssue(
                severity=Severity.INFO,
                property="og:title",
                message=f"Title is {length} characters (could be more descriptive)",
                suggestion=(
                    "Consider expanding your title to be more descriptive while staying "
                    f"under {t.title_max_length} characters"
                ),
            )
        ]
    return []


def _check_description(description: str | None, t: ValidationThresholds) -> list[ValidationIssue]:
    if not description:
        return [
            ValidationIssue(
                severity=Severity.ERROR,
                property="og:description",
                message="Description is required for proper social media sharing",
                suggestion='Add <meta property="og:description" content="Your page description" />',
            )
        ]

    length = len(description)
    if length > t.description_max_length:
        return [
            ValidationIssue(
                severity=Severity.WARNING,
                property="og:description",
                message=f"Description is {length} characters (recommended: 120-160)",
                suggestion=_meta_tag(
                    "og:description", shorten(description, t.description_truncate_at)
                ),
            )
        ]
    if length < t.description_min_length:
        return [
            ValidationIssue(
                severity=Severity.INFO,
                property="og:description",
                message=f"Description is {length} characters (could be more detailed)",
                suggestion=(
                    "Consider expanding your description to be more informative while staying "
                    f"under {t.description_max_length} characters"
                ),
            )
        ]
    return []


def _check_image(record: OGRecord) -> list[ValidationIssue]:
    if not record.image:
        return [
            ValidationIssue(
                severity=Severity.ERROR,
                property="og:image",
                message="Image is required for rich social media previews",
                suggestion='Add <meta property="og:image" content="https://example.com/image.jpg" />',
            )
        ]

    issues: list[ValidationIssue] = []
    if not record.image.startswith("http"):
        issues.append(
            ValidationIssue(
                severity=Severity.ERROR,
                property="og:image",
                message="Image URL must be absolute (start with http/https)",
                suggestion='<meta property="og:image" content="https://example.com/og-image.jpg" />',
            )
        )
    if not record.image_width or not record.image_height:
        issues.append(
            ValidationIssue(
                severity=Severity.INFO,
                property="og:image",
                message="Image dimensions recommended for optimal display",
                suggestion=(
                    '<meta property="og:image:width" content="1200" />\n'
                    '<meta property="og:image:height" content="630" />'
                ),
            )
        )
    return issues


def _check_twitter_card(record: OGRecord, t: ValidationThresholds) -> list[ValidationIssue]:
    if record.twitter_card and record.twitter_card not in t.twitter_card_types:
        return [
            ValidationIssue(
                severity=Severity.WARNING,
                property="twitter:card",
                message="Invalid Twitter card type",
                suggestion='<meta name="twitter:card" content="summary_large_image" />',
            )
        ]
    if not record.twitter_card and record.image:
        return [
            ValidationIssue(
                severity=Severity.INFO,
                property="twitter:card",
                message="Twitter card type recommended for better Twitter sharing",
                suggestion='<meta name="twitter:card" content="summary_large_image" />',
            )
        ]
    return []


def _check_article(record: OGRecord) -> list[ValidationIssue]:
    if record.type != "article":
        return []

    issues: list[ValidationIssue] = []
    if not record.article_author:
        issues.append(
            ValidationIssue(
                severity=Severity.INFO,
                property="article:author",
                message="Author information recommended for articles",
                suggestion='Add <meta property="article:author" content="Author Name" />',
            )
        )
    if not record.article_published_time:
        issues.append(
            ValidationIssue(
                severity=Severity.INFO,
                property="article:published_time",
                message="Published time recommended for articles",
                suggestion=(
                    'Add <meta property="article:published_time" '
                    'content="2024-01-01T00:00:00Z" />'
                ),
            )
        )
    return issues


def validate_og_tags(
    record: OGRecord, thresholds: ValidationThresholds = DEFAULT_THRESHOLDS
) -> list[ValidationIssue]:
    """
    Validate a record and return issues in rule order.

    Pure: the same record always yields the same list.
    """
    issues: list[ValidationIssue] = []
    issues.extend(_check_title(record.title, thresholds))
    issues.extend(_check_description(record.description, thresholds))
    issues.extend(_check_image(record))

    if not record.url:
        issues.append(
            ValidationIssue(
                severity=Severity.WARNING,
                property="og:url",
                message="URL helps platforms identify canonical content",
                suggestion='Add <meta property="og:url" content="https://example.com/page" />',
            )
        )

    if not record.type:
        issues.append(
            ValidationIssue(
                severity=Severity.INFO,
                property="og:type",
                message="Type helps platforms understand content context",
                suggestion=(
                    'Add <meta property="og:type" content="website" /> '
                    "(or article, product, etc.)"
                ),
            )
        )

    issues.extend(_check_twitter_card(record, thresholds))
    issues.extend(_check_article(record))

    if logger.isEnabledFor(logging.DEBUG):
        summary = summarize_issues(issues)
        logger.debug(
            "Validation found %d errors, %d warnings, %d infos",
            summary.errors,
            summary.warnings,
            summary.infos,
        )
    return issues


def summarize_issues(issues: Iterable[ValidationIssue]) -> ValidationSummary:
    """Count issues per severity."""
    counts = {severity: 0 for severity in Severity}
    for issue in issues:
        counts[issue.severity] += 1
    return ValidationSummary(
        errors=counts[Severity.ERROR],
        warnings=counts[Severity.WARNING],
        infos=counts[Severity.INFO],
    )
