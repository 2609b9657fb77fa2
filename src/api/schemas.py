from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OGData(BaseModel):
    """Structured OG fields as sent by the form UI (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

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
    twitter_card: str | None = None
    twitter_site: str | None = None
    twitter_creator: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None
    article_author: str | None = None
    article_published_time: str | None = None
    article_modified_time: str | None = None
    article_section: str | None = None
    article_tag: list[str] | None = None
    product_price: str | None = None
    product_currency: str | None = None
    product_availability: str | None = None
    product_condition: str | None = None


class MarkupRequest(BaseModel):
    html: str = Field(..., description="Raw meta tag markup")


class DataRequest(BaseModel):
    data: OGData = Field(default_factory=OGData)


class IssueSchema(BaseModel):
    severity: str
    property: str
    message: str
    suggestion: str | None = None


class SummarySchema(BaseModel):
    errors: int
    warnings: int
    infos: int
    is_clean: bool
    headline: str


class PreviewSchema(BaseModel):
    platform: str
    site_label: str
    title: str
    description: str
    image: str | None
    has_image: bool
    large_image: bool


class ParseResponse(BaseModel):
    data: dict[str, Any]


class ValidateResponse(BaseModel):
    issues: list[IssueSchema]
    summary: SummarySchema


class InspectResponse(BaseModel):
    data: dict[str, Any]
    issues: list[IssueSchema]
    summary: SummarySchema
    previews: dict[str, PreviewSchema]


class GenerateResponse(BaseModel):
    html: str


class TemplateSchema(BaseModel):
    key: str
    name: str
    content: str


class ErrorResponse(BaseModel):
    detail: str
