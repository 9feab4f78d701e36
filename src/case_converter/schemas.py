"""Pydantic schemas for runtime validation of conversion requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic_core import PydanticCustomError

from case_converter.errors import NO_INPUT_MESSAGE

NO_INPUT_ERROR_TYPE = "no_input"


class ConversionRequest(BaseModel):
    """Validated text for a single conversion request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: StrictStr | None = Field(default=None, validate_default=True)

    @field_validator("text")
    @classmethod
    def _require_text(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise PydanticCustomError(NO_INPUT_ERROR_TYPE, NO_INPUT_MESSAGE)
        return value
