"""Pydantic request/response schemas."""

from app.schemas.admin import UserDetail, UserSummary
from app.schemas.auth import CurrentUser
from app.schemas.health import HealthResponse
from app.schemas.page import PageResponse
from app.schemas.post import (
    PostCreatedResponse,
    PostCreateRequest,
    PostDetail,
    PostModifyRequest,
    PostSummary,
)

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "PageResponse",
    "PostCreatedResponse",
    "PostCreateRequest",
    "PostDetail",
    "PostModifyRequest",
    "PostSummary",
    "UserDetail",
    "UserSummary",
]
