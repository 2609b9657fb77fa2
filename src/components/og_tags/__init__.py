"""
OG tags component - Open Graph / Twitter Card parsing, validation and generation.
"""

from .component import (
    run,
    run_generate,
    run_inspect,
    run_parse,
    run_validate,
    thresholds_from_rules,
)
from .escape import escape_html
from .generator import GENERATED_FIELDS, generate_og_tags
from .models import (
    DEFAULT_THRESHOLDS,
    FIELD_ALIASES,
    GenerateInput,
    GenerateOutput,
    InspectInput,
    InspectOutput,
    OGRecord,
    OGTagsError,
    ParseInput,
    ParseOutput,
    PreviewCard,
    Severity,
    ValidateInput,
    ValidateOutput,
    ValidationIssue,
    ValidationSummary,
    ValidationThresholds,
)
from .parser import LIST_PROPERTY_FIELDS, PROPERTY_FIELDS, parse_og_tags
from .ports import OGRulesPort
from .previews import PLATFORMS, build_preview, build_previews
from .templates import (
    DEFAULT_MARKUP,
    TEMPLATES,
    OGTemplate,
    UnknownTemplateError,
    get_template,
    list_templates,
)
from .validator import shorten, summarize_issues, validate_og_tags

__all__ = [
    # Entry points
    "run",
    "run_parse",
    "run_validate",
    "run_generate",
    "run_inspect",
    "thresholds_from_rules",
    # Pure functions
    "parse_og_tags",
    "validate_og_tags",
    "generate_og_tags",
    "escape_html",
    "summarize_issues",
    "shorten",
    "build_preview",
    "build_previews",
    "get_template",
    "list_templates",
    # Constants
    "PROPERTY_FIELDS",
    "LIST_PROPERTY_FIELDS",
    "GENERATED_FIELDS",
    "FIELD_ALIASES",
    "DEFAULT_THRESHOLDS",
    "DEFAULT_MARKUP",
    "PLATFORMS",
    "TEMPLATES",
    # Models
    "OGRecord",
    "Severity",
    "ValidationIssue",
    "ValidationSummary",
    "ValidationThresholds",
    "PreviewCard",
    "OGTemplate",
    "OGTagsError",
    "UnknownTemplateError",
    "ParseInput",
    "ParseOutput",
    "ValidateInput",
    "ValidateOutput",
    "GenerateInput",
    "GenerateOutput",
    "InspectInput",
    "InspectOutput",
    # Ports
    "OGRulesPort",
]
