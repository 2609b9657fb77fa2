from pydantic import BaseModel, ConfigDict, Field, model_validator


class LengthRule(BaseModel):
    min_length: int = Field(ge=0)
    max_length: int = Field(gt=0)
    truncate_at: int = Field(gt=0)

    @model_validator(mode="after")
    def check_order(self) -> "LengthRule":
        if self.min_length > self.max_length:
            raise ValueError("min_length must not exceed max_length")
        if self.truncate_at > self.max_length:
            raise ValueError("truncate_at must not exceed max_length")
        return self


class OGTagRules(BaseModel):
    max_input_length: int = Field(default=50_000, gt=0)
    title: LengthRule = LengthRule(min_length=30, max_length=60, truncate_at=55)
    description: LengthRule = LengthRule(min_length=50, max_length=200, truncate_at=155)
    twitter_card_types: list[str] = Field(
        default_factory=lambda: ["summary", "summary_large_image", "app", "player"],
        min_length=1,
    )

class ApiRules(BaseModel):
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

class LoggingRules(BaseModel):
    level: str = "INFO"

class Rules(BaseModel):
    og_tags: OGTagRules = Field(default_factory=OGTagRules)
    api: ApiRules = Field(default_factory=ApiRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)

    model_config = ConfigDict(extra="forbid")
