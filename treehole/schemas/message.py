"""
Message Pydantic schemas for request/response validation
"""
from pydantic import BaseModel, Field, field_validator
from typing import Literal

from treehole.schemas.common import ORMConfig, SuccessResponse


# ============ Request Schemas ============

class MessageCreate(BaseModel):
    """Body of POST /api/messages"""
    # Emptiness after trimming is checked by the service so the
    # error message stays specific
    content: str = Field(..., description="Message text")


class LikeRequest(BaseModel):
    """Body of PUT /api/messages/{id}/like"""
    action: Literal["like", "unlike"]


# ============ Response Schemas ============

class MessageCreated(BaseModel):
    """Returned after a message is stored"""
    id: int
    content: str
    time: str

    model_config = ORMConfig


class MessageOut(MessageCreated):
    """One entry of the message list"""
    likes: int = 0

    @field_validator("likes", mode="before")
    @classmethod
    def null_likes_as_zero(cls, value):
        # legacy rows may carry NULL in the likes column
        return 0 if value is None else value


class LikeResponse(SuccessResponse):
    """Counter value after a like/unlike"""
    likes: int = Field(..., ge=0)
    action: Literal["liked", "unliked"]
