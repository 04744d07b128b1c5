from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys"""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# ============================================================================
# Response Envelope
# ============================================================================


class MessageResponse(BaseModel):
    success: bool = Field(True, description="Always true for successful calls")
    message: str = Field(..., description="Human readable outcome")


class SuccessResponse(BaseModel, Generic[DataT]):
    success: bool = Field(True, description="Always true for successful calls")
    message: str = Field(..., description="Human readable outcome")
    data: DataT


class ErrorResponse(CamelModel):
    success: bool = Field(False, description="Always false for failed calls")
    error: str = Field(..., description="User-safe error message")
    is_form_error: Optional[bool] = Field(
        None, description="True when the error relates to submitted form fields"
    )
