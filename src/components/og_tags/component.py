"""
OG tags component - meta tag parser, validator and generator.

Pipeline driven by the editor:
- edit -> parse -> validate -> preview (run_inspect)
- form -> generate -> edit (run_generate)

Invariants:
- Parsing never raises on user markup; oversized input yields an empty record
- Issues come back in fixed rule order, recomputed in full on every call
- Generated and suggested markup is always HTML-escaped
"""

from __future__ import annotations

from .generator import generate_og_tags
from .models import (
    DEFAULT_THRESHOLDS,
    GenerateInput,
    GenerateOutput,
    InspectInput,
    InspectOutput,
    OGTagsError,
    ParseInput,
    ParseOutput,
    ValidateInput,
    ValidateOutput,
    ValidationThresholds,
)
from .parser import parse_og_tags
from .ports import OGRulesPort
from .previews import build_previews
from .validator import summarize_issues, validate_og_tags


def thresholds_from_rules(rules: OGRulesPort | None) -> ValidationThresholds:
    """Resolve thresholds from a rules port, falling back to defaults."""
    if rules is None:
        return DEFAULT_THRESHOLDS

    title_min, title_max, title_cut = rules.get_title_limits()
    desc_min, desc_max, desc_cut = rules.get_description_limits()
    return ValidationThresholds(
        max_input_length=rules.get_max_input_length(),
        title_max_length=title_max,
        title_min_length=title_min,
        title_truncate_at=title_cut,
        description_max_length=desc_max,
        description_min_length=desc_min,
        description_truncate_at=desc_cut,
        twitter_card_types=tuple(rules.get_twitter_card_types()),
    )


# --- Component Entry Points ---


def run_parse(inp: ParseInput, *, rules: OGRulesPort | None = None) -> ParseOutput:
    """Parse raw markup into a record."""
    thresholds = thresholds_from_rules(rules)
    record = parse_og_tags(inp.html, max_input_length=thresholds.max_input_length)
    return ParseOutput(record=record)


def run_validate(inp: ValidateInput, *, rules: OGRulesPort | None = None) -> ValidateOutput:
    """Validate a record and summarize the issues."""
    issues = validate_og_tags(inp.record, thresholds_from_rules(rules))
    return ValidateOutput(issues=issues, summary=summarize_issues(issues))


def run_generate(inp: GenerateInput) -> GenerateOutput:
    """
    Generate markup from form fields.

    The form refuses to generate without a title unless require_title is off.
    """
    if inp.require_title and not (inp.record.title and inp.record.title.strip()):
        return GenerateOutput(
            html="",
            errors=[
                OGTagsError(
                    code="TITLE_REQUIRED",
                    message="Title is required",
                    field_name="title",
                )
            ],
            success=False,
        )
    return GenerateOutput(html=generate_og_tags(inp.record))


def run_inspect(inp: InspectInput, *, rules: OGRulesPort | None = None) -> InspectOutput:
    """Parse, validate and build previews in one pass."""
    thresholds = thresholds_from_rules(rules)
    record = parse_og_tags(inp.html, max_input_length=thresholds.max_input_length)
    issues = validate_og_tags(record, thresholds)
    return InspectOutput(
        record=record,
        issues=issues,
        summary=summarize_issues(issues),
        previews=build_previews(record),
    )


def run(
    inp: ParseInput | ValidateInput | GenerateInput | InspectInput,
    *,
    rules: OGRulesPort | None = None,
) -> ParseOutput | ValidateOutput | GenerateOutput | InspectOutput:
    """
    Main entry point for the OG tags component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, ParseInput):
        return run_parse(inp, rules=rules)
    elif isinstance(inp, ValidateInput):
        return run_validate(inp, rules=rules)
    elif isinstance(inp, GenerateInput):
        return run_generate(inp)
    elif isinstance(inp, InspectInput):
        return run_inspect(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
