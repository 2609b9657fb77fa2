"""
OG tags component input/output models.

The record is a derived, disposable value: it is rebuilt from raw markup on
every parse and never mutated by the validator.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

# --- Types ---


class Severity(str, Enum):
    """Diagnostic severity."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# Attribute name -> external (camelCase) name used by previews and forms.
FIELD_ALIASES: dict[str, str] = {
    "title": "title",
    "description": "description",
    "image": "image",
    "image_width": "imageWidth",
    "image_height": "imageHeight",
    "url": "url",
    "type": "type",
    "site_name": "siteName",
    "locale": "locale",
    "alternate_locale": "alternateLocale",
    "twitter_card": "twitterCard",
    "twitter_site": "twitterSite",
    "twitter_creator": "twitterCreator",
    "twitter_title": "twitterTitle",
    "twitter_description": "twitterDescription",
    "twitter_image": "twitterImage",
    "article_author": "articleAuthor",
    "article_published_time": "articlePublishedTime",
    "article_modified_time": "articleModifiedTime",
    "article_section": "articleSection",
    "article_tag": "articleTag",
    "product_price": "productPrice",
    "product_currency": "productCurrency",
    "product_availability": "productAvailability",
    "product_condition": "productCondition",
}

LIST_FIELDS = frozenset({"article_tag", "alternate_locale"})

_ATTRIBUTES_BY_ALIAS = {alias: attr for attr, alias in FIELD_ALIASES.items()}


# --- Record ---


@dataclass(frozen=True)
class OGRecord:
    """
    Structured Open Graph / Twitter Card data.

    Every field is None unless an explicit tag was found. The two list
    fields keep source order and duplicates.
    """

    title: str | None = None
    description: str | None = None
    image: str | None = None
    image_width: str | None = None
    image_height: str | None = None
    url: str | None = None
    type: str | None = None
    site_name: str | None = None
    locale: str | None = None
    alternate_locale: list[str] | None = None

    # Twitter Cards
    twitter_card: str | None = None
    twitter_site: str | None = None
    twitter_creator: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None

    # Article specific
    article_author: str | None = None
    article_published_time: str | None = None
    article_modified_time: str | None = None
    article_section: str | None = None
    article_tag: list[str] | None = None

    # Product specific
    product_price: str | None = None
    product_currency: str | None = None
    product_availability: str | None = None
    product_condition: str | None = None

    def is_empty(self) -> bool:
        """True when no field is present."""
        return not self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        """Present fields only, keyed by their camelCase names."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            data[FIELD_ALIASES[f.name]] = list(value) if f.name in LIST_FIELDS else value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OGRecord:
        """
        Build a record from camelCase or snake_case keys.

        Empty strings, empty lists and None are treated as absent.

        Raises:
            ValueError: If a key does not name a record field.
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            attr = _ATTRIBUTES_BY_ALIAS.get(key, key)
            if attr not in FIELD_ALIASES:
                raise ValueError(f"Unknown OG field: {key}")
            if value is None or value == "" or value == []:
                continue
            if attr in LIST_FIELDS:
                if isinstance(value, str):
                    value = [value]
                kwargs[attr] = [str(v) for v in value]
            else:
                kwargs[attr] = str(value)
        return cls(**kwargs)


# --- Diagnostics ---


@dataclass(frozen=True)
class ValidationIssue:
    """One diagnostic entry, optionally with pastable fix markup."""

    severity: Severity
    property: str
    message: str
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "severity": self.severity.value,
            "property": self.property,
            "message": self.message,
        }
        if self.suggestion is not None:
            data["suggestion"] = self.suggestion
        return data


@dataclass(frozen=True)
class ValidationSummary:
    """Issue counts for the diagnostics panel."""

    errors: int
    warnings: int
    infos: int

    @property
    def is_clean(self) -> bool:
        return self.errors == 0 and self.warnings == 0

    @property
    def headline(self) -> str:
        if self.is_clean:
            return "Your Open Graph tags look great! No critical issues found."
        return "Fix the issues below to improve your social media sharing experience."


@dataclass(frozen=True)
class ValidationThresholds:
    """
    Length rules for validation and the parser input cap.

    Defaults are product-tuning values; tests pin them.
    """

    max_input_length: int = 50_000
    title_max_length: int = 60
    title_min_length: int = 30
    title_truncate_at: int = 55
    description_max_length: int = 200
    description_min_length: int = 50
    description_truncate_at: int = 155
    twitter_card_types: tuple[str, ...] = ("summary", "summary_large_image", "app", "player")


DEFAULT_THRESHOLDS = ValidationThresholds()


# --- Component Errors ---


@dataclass(frozen=True)
class OGTagsError:
    """OG tags component error."""

    code: str
    message: str
    field_name: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ParseInput:
    """Input for parsing raw markup."""

    html: str


@dataclass(frozen=True)
class ValidateInput:
    """Input for validating a record."""

    record: OGRecord


@dataclass(frozen=True)
class GenerateInput:
    """Input for generating markup from form fields."""

    record: OGRecord
    require_title: bool = True


@dataclass(frozen=True)
class InspectInput:
    """Input for the full parse -> validate -> preview pipeline."""

    html: str


# --- Output Models ---


@dataclass(frozen=True)
class ParseOutput:
    record: OGRecord
    errors: list[OGTagsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ValidateOutput:
    issues: list[ValidationIssue]
    summary: ValidationSummary
    errors: list[OGTagsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class GenerateOutput:
    html: str
    errors: list[OGTagsError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class PreviewCard:
    """What a platform shows for a shared link."""

    platform: str
    site_label: str
    title: str
    description: str
    image: str | None
    has_image: bool
    large_image: bool


@dataclass(frozen=True)
class InspectOutput:
    record: OGRecord
    issues: list[ValidationIssue]
    summary: ValidationSummary
    previews: dict[str, PreviewCard]
    errors: list[OGTagsError] = field(default_factory=list)
    success: bool = True
