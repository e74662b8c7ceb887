from pydantic import BaseModel, ConfigDict, Field


class TranslationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(
        ..., alias="translatedText", description="The translated text"
    )


class ErrorResponse(BaseModel):
    error: str = Field(..., description="The error message")
