"""
OG tag endpoints for the editor UI.

The editor holds raw markup as the single source of truth; every change is
posted to /inspect, and the form posts to /generate.
"""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from src.adapters.rules_port import RulesOGAdapter
from src.api.deps import get_og_rules
from src.api.schemas import (
    DataRequest,
    ErrorResponse,
    GenerateResponse,
    InspectResponse,
    IssueSchema,
    MarkupRequest,
    ParseResponse,
    PreviewSchema,
    SummarySchema,
    TemplateSchema,
    ValidateResponse,
)
from src.components.og_tags import (
    GenerateInput,
    InspectInput,
    OGRecord,
    ParseInput,
    UnknownTemplateError,
    ValidateInput,
    ValidationIssue,
    ValidationSummary,
    get_template,
    list_templates,
    run_generate,
    run_inspect,
    run_parse,
    run_validate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Helpers ---


def _record_from_request(request: DataRequest) -> OGRecord:
    return OGRecord.from_dict(request.data.model_dump(exclude_none=True))


def _issues(issues: list[ValidationIssue]) -> list[IssueSchema]:
    return [IssueSchema(**issue.to_dict()) for issue in issues]


def _summary(summary: ValidationSummary) -> SummarySchema:
    return SummarySchema(
        errors=summary.errors,
        warnings=summary.warnings,
        infos=summary.infos,
        is_clean=summary.is_clean,
        headline=summary.headline,
    )


# --- Endpoints ---


@router.post("/parse", response_model=ParseResponse, summary="Parse meta tag markup")
def parse_endpoint(
    request: MarkupRequest, rules: RulesOGAdapter = Depends(get_og_rules)
) -> ParseResponse:
    result = run_parse(ParseInput(html=request.html), rules=rules)
    return ParseResponse(data=result.record.to_dict())


@router.post("/validate", response_model=ValidateResponse, summary="Validate OG fields")
def validate_endpoint(
    request: DataRequest, rules: RulesOGAdapter = Depends(get_og_rules)
) -> ValidateResponse:
    result = run_validate(ValidateInput(record=_record_from_request(request)), rules=rules)
    return ValidateResponse(issues=_issues(result.issues), summary=_summary(result.summary))


@router.post(
    "/inspect",
    response_model=InspectResponse,
    summary="Parse, validate and preview markup",
)
def inspect_endpoint(
    request: MarkupRequest, rules: RulesOGAdapter = Depends(get_og_rules)
) -> InspectResponse:
    result = run_inspect(InspectInput(html=request.html), rules=rules)
    return InspectResponse(
        data=result.record.to_dict(),
        issues=_issues(result.issues),
        summary=_summary(result.summary),
        previews={
            platform: PreviewSchema(**asdict(card)) for platform, card in result.previews.items()
        },
    )


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse, "description": "Title missing"}},
    summary="Generate meta tag markup from form fields",
)
def generate_endpoint(request: DataRequest) -> GenerateResponse:
    result = run_generate(GenerateInput(record=_record_from_request(request)))
    if not result.success:
        logger.info("Rejected generate request: %s", result.errors[0].code)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.errors[0].message,
        )
    return GenerateResponse(html=result.html)


@router.get("/templates", response_model=list[TemplateSchema], summary="List starter templates")
def list_templates_endpoint() -> list[TemplateSchema]:
    return [TemplateSchema(**asdict(t)) for t in list_templates()]


@router.get(
    "/templates/{key}",
    response_model=TemplateSchema,
    responses={404: {"model": ErrorResponse, "description": "Template not found"}},
    summary="Get a starter template",
)
def get_template_endpoint(key: str) -> TemplateSchema:
    try:
        template = get_template(key)
    except UnknownTemplateError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Template '{key}' not found",
        ) from None
    return TemplateSchema(**asdict(template))
