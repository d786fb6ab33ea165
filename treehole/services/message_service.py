"""
Message Service
Business logic for posting, listing, deleting and liking messages
"""
from datetime import datetime
from typing import Callable, List, Optional
import logging

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError

from treehole.core.database import Database
from treehole.core.exceptions import InvalidInputError, NotFoundError, StoreError
from treehole.models.message import Message
from treehole.schemas.common import SuccessResponse
from treehole.schemas.message import LikeResponse, MessageCreated, MessageOut

logger = logging.getLogger(__name__)

# SQLite INTEGER range; larger ids cannot exist in the table
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1

LIKE_ACTIONS = {
    "like": "liked",
    "unlike": "unliked",
}


class MessageService:
    """Service for message operations"""

    def __init__(
        self,
        db: Database,
        time_format: str = "%Y/%m/%d %H:%M:%S",
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.db = db
        self.time_format = time_format
        self._clock = clock or datetime.now

    def _now(self) -> str:
        # local wall-clock time, stored verbatim
        return self._clock().strftime(self.time_format)

    def list_messages(self) -> List[MessageOut]:
        """
        Get every message, newest first

        Returns:
            List of messages ordered by id descending
        """
        try:
            with self.db.session() as session:
                rows = session.scalars(
                    select(Message).order_by(Message.id.desc())
                ).all()
                messages = [MessageOut.model_validate(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Failed to list messages: {e}", exc_info=True)
            raise StoreError("Failed to load messages")

        logger.info(f"Listed {len(messages)} messages")
        return messages

    def create_message(self, content: str) -> MessageCreated:
        """
        Store a new message

        Args:
            content: Message text, must not be blank

        Returns:
            The stored message (id, content, time)

        Raises:
            InvalidInputError: If content is empty after trimming
        """
        if content is None or not content.strip():
            raise InvalidInputError("Content must not be empty")

        message = Message(content=content, time=self._now(), likes=0)
        try:
            with self.db.session() as session:
                session.add(message)
                session.commit()
                session.refresh(message)
                created = MessageCreated.model_validate(message)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create message: {e}", exc_info=True)
            raise StoreError("Failed to save message")

        logger.info(f"Created message {created.id}")
        return created

    def delete_message(self, message_id: int) -> SuccessResponse:
        """
        Permanently delete a message

        Raises:
            NotFoundError: If no message has this id
        """
        if not MIN_ID <= message_id <= MAX_ID:
            raise NotFoundError("Message not found")

        try:
            with self.db.session() as session:
                result = session.execute(
                    delete(Message).where(Message.id == message_id)
                )
                session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete message {message_id}: {e}", exc_info=True)
            raise StoreError("Failed to delete message")

        if result.rowcount == 0:
            raise NotFoundError("Message not found")

        logger.info(f"Deleted message {message_id}")
        return SuccessResponse()

    def toggle_like(self, message_id: int, action: str) -> LikeResponse:
        """
        Like or unlike a message

        The counter changes in one UPDATE statement so concurrent likes on
        the same message are never lost. Unlike stops at zero and still
        succeeds.

        Args:
            message_id: Message ID
            action: "like" or "unlike"

        Returns:
            Updated like count and the applied action ("liked"/"unliked")

        Raises:
            InvalidInputError: If action is not like/unlike
            NotFoundError: If no message has this id
        """
        if action not in LIKE_ACTIONS:
            raise InvalidInputError("Invalid action", detail="action must be 'like' or 'unlike'")
        if not MIN_ID <= message_id <= MAX_ID:
            raise NotFoundError("Message not found")

        if action == "like":
            new_value = func.coalesce(Message.likes, 0) + 1
        else:
            new_value = case((Message.likes > 0, Message.likes - 1), else_=0)

        try:
            with self.db.session() as session:
                result = session.execute(
                    update(Message)
                    .where(Message.id == message_id)
                    .values(likes=new_value)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 0:
                    raise NotFoundError("Message not found")

                # Same transaction: the write lock is still held
                likes = session.scalar(
                    select(Message.likes).where(Message.id == message_id)
                )
                session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action} message {message_id}: {e}", exc_info=True)
            raise StoreError(f"Failed to {action} message")

        logger.info(f"Message {message_id} {LIKE_ACTIONS[action]}, likes={likes}")
        return LikeResponse(likes=likes, action=LIKE_ACTIONS[action])
