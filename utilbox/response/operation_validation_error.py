"""Field-level validation error carried by an ApiResponse."""

from pydantic import BaseModel, ConfigDict, Field


class OperationValidationError(BaseModel):
    """A single field validation failure.

    Attributes:
        field: Name of the offending field.
        message: Human-readable explanation.
        code: Optional machine-readable code.
    """

    field: str = Field(..., description="Field that failed validation")
    message: str = Field(..., description="Human-readable error message")
    code: str | None = Field(default=None, description="Machine-readable error code")

    model_config = ConfigDict(frozen=True)
