from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import CamelModel

# ============================================================================
# Request Schemas
# ============================================================================


class ChatMessageForm(BaseModel):
    """A single chat message as submitted by the user"""

    role: str = Field(..., description="Message role, normally 'user'", min_length=1, max_length=50)
    content: str = Field(..., description="Message text")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        if not v or not v.strip():
            raise ValueError("Content cannot be empty")
        return v


# ============================================================================
# Response Schemas
# ============================================================================


class ChatReply(BaseModel):
    role: str = Field(..., description="Always 'assistant'")
    content: str = Field(..., description="Completion text")


class ChatHistoryItem(CamelModel):
    id: str
    session_id: str
    role: str
    content: str
    created_at: datetime
