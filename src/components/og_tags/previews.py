"""
Link card previews per social platform.

Only derives display values from the record; drawing the cards is left to
the UI.
"""

from __future__ import annotations

from .models import OGRecord, PreviewCard

PLATFORMS = ("facebook", "twitter", "linkedin", "discord")

PLACEHOLDER_TITLE = "Page Title"
PLACEHOLDER_DESCRIPTION = "Page description would appear here."
PLACEHOLDER_SITE = "example.com"


def has_displayable_image(record: OGRecord) -> bool:
    return bool(record.image and record.image.startswith("http"))


def build_preview(record: OGRecord, platform: str) -> PreviewCard:
    """
    Build the card one platform would show.

    Raises:
        ValueError: If the platform is not supported.
    """
    if platform not in PLATFORMS:
        raise ValueError(f"Unknown preview platform: {platform}")

    has_image = has_displayable_image(record)
    title = record.title or PLACEHOLDER_TITLE
    description = record.description or PLACEHOLDER_DESCRIPTION
    site_label = record.site_name or record.url or PLACEHOLDER_SITE
    large_image = has_image

    if platform == "facebook":
        site_label = site_label.upper()
    elif platform == "discord":
        site_label = record.site_name or record.url or PLACEHOLDER_SITE.upper()
    elif platform == "twitter":
        title = record.twitter_title or title
        description = record.twitter_description or description
        site_label = record.url or PLACEHOLDER_SITE
        large_image = record.twitter_card == "summary_large_image" or (
            not record.twitter_card and has_image
        )

    return PreviewCard(
        platform=platform,
        site_label=site_label,
        title=title,
        description=description,
        image=record.image,
        has_image=has_image,
        large_image=large_image,
    )


def build_previews(record: OGRecord) -> dict[str, PreviewCard]:
    """Cards for every supported platform, in tab order."""
    return {platform: build_preview(record, platform) for platform in PLATFORMS}
