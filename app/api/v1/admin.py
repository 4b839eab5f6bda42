"""Admin endpoints: paged user list and user detail (admin role required)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.database import get_db
from app.schemas.admin import UserDetail, UserSummary
from app.schemas.auth import CurrentUser
from app.schemas.page import PageResponse
from app.services import admin as admin_service
from app.services.admin import UserNotFoundError
from app.services.common import EmptyResultError, ServiceError

router = APIRouter()


@router.get(
    "/users",
    response_model=PageResponse[UserSummary],
    responses={204: {"description": "No users on this page"}},
)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
):
    """List users one page at a time (admin only)."""
    try:
        return admin_service.find_user_list(db, page)
    except EmptyResultError:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except ServiceError as e:
        raise HTTPException(status_code=500, detail=e.message) from e


@router.get("/users/{user_id}", response_model=UserDetail)
def get_user(
    user_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserDetail:
    """Return one user with their post count (admin only). 400 when the user does not exist."""
    try:
        return admin_service.find_user(db, user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
