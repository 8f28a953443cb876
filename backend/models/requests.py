from pydantic import BaseModel, ConfigDict, Field, field_validator


class VerifyRequest(BaseModel):
    """Request body for claim verification with validation."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "claim": "The Eiffel Tower was completed in 1889."
            }
        }
    )

    claim: str = Field(..., min_length=3, max_length=5000)

    @field_validator('claim')
    @classmethod
    def sanitize_claim(cls, v):
        from utils.validation import InputValidator

        return InputValidator.sanitize_claim(v)


class AnalyzeUrlRequest(BaseModel):
    url: str = Field(..., min_length=8, max_length=2048)

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        from utils.validation import InputValidator

        return InputValidator.sanitize_url(v)


class PreprocessRequest(BaseModel):
    content: str = Field(..., min_length=1)

    @field_validator('content')
    @classmethod
    def strip_content(cls, v):
        from utils.validation import InputValidator

        return InputValidator.sanitize_content(v)
