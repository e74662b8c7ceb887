from enum import Enum

from pydantic import BaseModel, Field, StrictStr, field_validator


class Direction(str, Enum):
    TO_STANDARD = "to-standard"
    TO_DIALECT = "to-dialect"

    @property
    def opposite(self) -> "Direction":
        if self is Direction.TO_STANDARD:
            return Direction.TO_DIALECT
        return Direction.TO_STANDARD


class TranslateRequest(BaseModel):
    text: StrictStr = Field(..., description="The text to translate")

    @field_validator("text")
    def validate_text(cls, v):
        if not v:
            raise ValueError("text must not be empty")
        return v
