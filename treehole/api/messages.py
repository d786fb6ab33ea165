"""
Messages API endpoints
Post, list, delete and like treehole messages
"""
from fastapi import APIRouter, Depends, Path
from typing import List
import logging

from treehole.core.dependencies import get_message_service
from treehole.schemas.common import ErrorResponse, SuccessResponse
from treehole.schemas.message import (
    LikeRequest,
    LikeResponse,
    MessageCreate,
    MessageCreated,
    MessageOut,
)
from treehole.services.message_service import MessageService

router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    404: {"model": ErrorResponse, "description": "Message not found"},
    500: {"model": ErrorResponse, "description": "Store failure"},
}


@router.get("/messages", response_model=List[MessageOut], responses={500: ERROR_RESPONSES[500]})
def list_messages(service: MessageService = Depends(get_message_service)):
    """
    Get all messages

    Returns every message, newest first. No pagination.
    """
    logger.info("GET /api/messages")
    return service.list_messages()


@router.post(
    "/messages",
    response_model=MessageCreated,
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]}
)
def create_message(
    message_data: MessageCreate,
    service: MessageService = Depends(get_message_service)
):
    """
    Post a new message

    - **content**: Message text (must not be blank)

    Returns the stored message; fetch the list again to see it in place
    """
    logger.info(f"POST /api/messages ({len(message_data.content)} chars)")
    return service.create_message(message_data.content)


@router.delete("/messages/{message_id}", response_model=SuccessResponse, responses=ERROR_RESPONSES)
def delete_message(
    message_id: int = Path(..., description="Message ID"),
    service: MessageService = Depends(get_message_service)
):
    """
    Delete a message permanently

    - **message_id**: Message ID
    """
    logger.info(f"DELETE /api/messages/{message_id}")
    return service.delete_message(message_id)


@router.put("/messages/{message_id}/like", response_model=LikeResponse, responses=ERROR_RESPONSES)
def toggle_like(
    like_data: LikeRequest,
    message_id: int = Path(..., description="Message ID"),
    service: MessageService = Depends(get_message_service)
):
    """
    Like or unlike a message

    - **message_id**: Message ID
    - **action**: "like" or "unlike"

    Returns the updated like count
    """
    logger.info(f"PUT /api/messages/{message_id}/like, action: {like_data.action}")
    return service.toggle_like(message_id, like_data.action)
