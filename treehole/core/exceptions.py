"""
Domain exceptions raised by the service layer.

Each carries the HTTP status it maps to; the handler registered in
treehole.main turns them into the standard error envelope.
"""
from typing import Optional

from fastapi import status


class TreeholeError(Exception):
    """Base class for all expected request failures"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidInputError(TreeholeError):
    """Malformed or missing input (empty content, unknown action)"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(TreeholeError):
    """Referenced message does not exist"""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(TreeholeError):
    """The database failed or is unavailable"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
