"""
Common/Shared Pydantic schemas
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class ErrorResponse(BaseModel):
    """Error response schema"""
    ok: bool = False
    error: str
    detail: Optional[str] = None


class SuccessResponse(BaseModel):
    """Bare acknowledgement"""
    success: bool = True


class HealthResponse(BaseModel):
    """Health check payload"""
    status: str
    app: str
    environment: str


# Config for all schemas
ORMConfig = ConfigDict(from_attributes=True)
