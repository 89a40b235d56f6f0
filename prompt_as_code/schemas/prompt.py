from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PromptDefinition(BaseModel):
    """A named prompt template plus its default generation parameters."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Unique key used to find the prompt's samples")
    template: str = Field(..., min_length=1, description="Template text with {{variable}} placeholders")
    version: str | None = Field(None, description="Informational prompt version")
    description: str | None = Field(None, description="Informational description")
    model: str | None = Field(None, description="Model to run the prompt against")
    temperature: float | None = Field(None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(None, ge=1)

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value: Any) -> Any:
        # YAML reads `version: 1.0` as a float
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class GenerationParams(BaseModel):
    """Resolved parameters handed to the model invocation capability."""
    model_config = ConfigDict(frozen=True)

    model: str
    temperature: float
    max_tokens: int
