"""
Unit tests for OG tag validation.

Tests:
- Required field errors and their order
- Length thresholds and truncation suggestions
- Image, URL, type, Twitter card and article rules
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from ..models import OGRecord, Severity, ValidationIssue, ValidationThresholds
from ..parser import parse_og_tags
from ..validator import shorten, summarize_issues, validate_og_tags

GOOD_TITLE = "A perfectly reasonable page title here"  # 38 chars
GOOD_DESCRIPTION = (
    "A description long enough to sit comfortably inside the recommended range for sharing."
)


@pytest.fixture
def valid_record() -> OGRecord:
    """A record that produces no issues at all."""
    return OGRecord(
        title=GOOD_TITLE,
        description=GOOD_DESCRIPTION,
        image="https://example.com/og.jpg",
        image_width="1200",
        image_height="630",
        url="https://example.com/page",
        type="website",
        twitter_card="summary_large_image",
    )


def _for(issues: list[ValidationIssue], prop: str) -> list[ValidationIssue]:
    return [i for i in issues if i.property == prop]


class TestRequiredFields:
    """Tests for missing title, description and image."""

    def test_empty_record_yields_three_errors_in_order(self) -> None:
        issues = validate_og_tags(OGRecord())
        errors = [i for i in issues if i.severity is Severity.ERROR]
        assert [i.property for i in errors] == ["og:title", "og:description", "og:image"]

    def test_empty_record_issue_order(self) -> None:
        issues = validate_og_tags(OGRecord())
        assert [(i.severity, i.property) for i in issues] == [
            (Severity.ERROR, "og:title"),
            (Severity.ERROR, "og:description"),
            (Severity.ERROR, "og:image"),
            (Severity.WARNING, "og:url"),
            (Severity.INFO, "og:type"),
        ]

    def test_valid_record_has_no_issues(self, valid_record: OGRecord) -> None:
        assert validate_og_tags(valid_record) == []

    def test_missing_title_suggestion(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, title=None))
        assert issues == [
            ValidationIssue(
                severity=Severity.ERROR,
                property="og:title",
                message="Title is required for proper social media sharing",
                suggestion='Add <meta property="og:title" content="Your page title" />',
            )
        ]


class TestTitleLength:
    """Tests for title length thresholds."""

    def test_long_title_warning_names_count(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, title="A" * 65))
        assert len(issues) == 1
        issue = issues[0]
        assert issue.severity is Severity.WARNING
        assert issue.property == "og:title"
        assert "65 characters" in issue.message

    def test_long_title_truncated_suggestion(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, title="A" * 65))
        assert issues[0].suggestion == f'<meta property="og:title" content="{"A" * 55}..." />'

    def test_truncation_trims_trailing_whitespace(self, valid_record: OGRecord) -> None:
        title = "B" * 50 + "     " + "C" * 20
        issues = validate_og_tags(replace(valid_record, title=title))
        assert issues[0].suggestion == f'<meta property="og:title" content="{"B" * 50}..." />'

    def test_truncated_suggestion_is_escaped(self, valid_record: OGRecord) -> None:
        title = 'Tom & Jerry "say" <hi> ' + "x" * 50
        issues = validate_og_tags(replace(valid_record, title=title))
        suggestion = issues[0].suggestion
        assert suggestion is not None
        assert "Tom &amp; Jerry &quot;say&quot; &lt;hi&gt;" in suggestion
        assert parse_og_tags(suggestion).title == shorten(title, 55)

    def test_short_title_info(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, title="Short"))
        assert len(issues) == 1
        assert issues[0].severity is Severity.INFO
        assert "5 characters" in issues[0].message

    @pytest.mark.parametrize("length", [30, 45, 60])
    def test_title_in_range_has_no_issue(self, valid_record: OGRecord, length: int) -> None:
        assert validate_og_tags(replace(valid_record, title="T" * length)) == []

    def test_title_boundaries(self, valid_record: OGRecord) -> None:
        assert validate_og_tags(replace(valid_record, title="T" * 29))[0].severity is Severity.INFO
        assert (
            validate_og_tags(replace(valid_record, title="T" * 61))[0].severity
            is Severity.WARNING
        )


class TestDescriptionLength:
    """Tests for description length thresholds."""

    def test_long_description_warning(self, valid_record: OGRecord) -> None:
        description = "D" * 210
        issues = validate_og_tags(replace(valid_record, description=description))
        assert len(issues) == 1
        assert issues[0].severity is Severity.WARNING
        assert "210 characters" in issues[0].message
        assert issues[0].suggestion == (
            f'<meta property="og:description" content="{"D" * 155}..." />'
        )

    def test_short_description_info(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, description="Too short"))
        assert [(i.severity, i.property) for i in issues] == [
            (Severity.INFO, "og:description")
        ]

    @pytest.mark.parametrize("length", [50, 120, 200])
    def test_description_in_range(self, valid_record: OGRecord, length: int) -> None:
        assert validate_og_tags(replace(valid_record, description="d" * length)) == []


class TestImageRules:
    """Tests for og:image checks."""

    def test_relative_image_is_error(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, image="/images/og.jpg"))
        assert [(i.severity, i.message) for i in issues] == [
            (Severity.ERROR, "Image URL must be absolute (start with http/https)")
        ]

    def test_missing_dimensions_info(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, image_height=None))
        assert len(issues) == 1
        assert issues[0].severity is Severity.INFO
        assert issues[0].suggestion == (
            '<meta property="og:image:width" content="1200" />\n'
            '<meta property="og:image:height" content="630" />'
        )

    def test_relative_image_and_missing_dimensions_both_fire(self) -> None:
        record = OGRecord(
            title=GOOD_TITLE,
            description=GOOD_DESCRIPTION,
            image="og.jpg",
            url="https://example.com",
            type="website",
            twitter_card="summary",
        )
        issues = _for(validate_og_tags(record), "og:image")
        assert [i.severity for i in issues] == [Severity.ERROR, Severity.INFO]


class TestOtherRules:
    """Tests for url, type, twitter card and article rules."""

    def test_missing_url_is_warning(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, url=None))
        assert [(i.severity, i.property) for i in issues] == [(Severity.WARNING, "og:url")]

    def test_missing_type_is_info(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, type=None))
        assert [(i.severity, i.property) for i in issues] == [(Severity.INFO, "og:type")]
        assert 'content="website"' in (issues[0].suggestion or "")

    @pytest.mark.parametrize("card", ["summary", "summary_large_image", "app", "player"])
    def test_valid_twitter_cards(self, valid_record: OGRecord, card: str) -> None:
        assert validate_og_tags(replace(valid_record, twitter_card=card)) == []

    def test_invalid_twitter_card_warning(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, twitter_card="Summary"))
        assert [(i.severity, i.property) for i in issues] == [
            (Severity.WARNING, "twitter:card")
        ]
        assert issues[0].message == "Invalid Twitter card type"

    def test_missing_twitter_card_with_image_info(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, twitter_card=None))
        assert [(i.severity, i.property) for i in issues] == [(Severity.INFO, "twitter:card")]

    def test_no_twitter_card_recommendation_without_image(self) -> None:
        issues = validate_og_tags(OGRecord())
        assert _for(issues, "twitter:card") == []

    def test_article_without_author_or_time(self, valid_record: OGRecord) -> None:
        issues = validate_og_tags(replace(valid_record, type="article"))
        assert [(i.severity, i.property) for i in issues] == [
            (Severity.INFO, "article:author"),
            (Severity.INFO, "article:published_time"),
        ]

    def test_complete_article(self, valid_record: OGRecord) -> None:
        record = replace(
            valid_record,
            type="article",
            article_author="Jane",
            article_published_time="2024-01-01T00:00:00Z",
        )
        assert validate_og_tags(record) == []

    def test_article_rules_need_exact_type(self, valid_record: OGRecord) -> None:
        assert validate_og_tags(replace(valid_record, type="Article")) == []


class TestValidatorBehavior:
    """Tests for determinism, thresholds and summaries."""

    def test_deterministic(self) -> None:
        record = OGRecord(title="x" * 70, image="rel.jpg", type="article")
        assert validate_og_tags(record) == validate_og_tags(record)

    def test_record_not_mutated(self, valid_record: OGRecord) -> None:
        before = replace(valid_record)
        validate_og_tags(valid_record)
        assert valid_record == before

    def test_custom_thresholds(self, valid_record: OGRecord) -> None:
        thresholds = ValidationThresholds(
            title_max_length=20, title_min_length=5, title_truncate_at=10
        )
        issues = validate_og_tags(valid_record, thresholds)
        assert issues[0].severity is Severity.WARNING
        assert issues[0].suggestion == (
            f'<meta property="og:title" content="{shorten(GOOD_TITLE, 10)}" />'
        )

    def test_summary_counts(self) -> None:
        summary = summarize_issues(validate_og_tags(OGRecord()))
        assert (summary.errors, summary.warnings, summary.infos) == (3, 1, 1)
        assert not summary.is_clean
        assert summary.headline.startswith("Fix the issues")

    def test_clean_summary(self, valid_record: OGRecord) -> None:
        summary = summarize_issues(validate_og_tags(replace(valid_record, type=None)))
        assert summary.is_clean
        assert summary.infos == 1
        assert "look great" in summary.headline
