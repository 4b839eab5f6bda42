"""Board endpoints: paged listing and search, detail, create, authority check, edit, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.page import PageResponse
from app.schemas.post import (
    PostCreatedResponse,
    PostCreateRequest,
    PostDetail,
    PostModifyRequest,
    PostSummary,
)
from app.services import board as board_service
from app.services.board import (
    ForbiddenError,
    PostNotFoundError,
    RequesterNotFoundError,
)
from app.services.common import EmptyResultError, PageUnavailableError, ServiceError

router = APIRouter()

# Service outcome -> HTTP status. EmptyResultError is handled separately (204, no body).
ERROR_STATUS: dict[type[ServiceError], int] = {
    PostNotFoundError: status.HTTP_400_BAD_REQUEST,
    RequesterNotFoundError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    PageUnavailableError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

PageNumber = Annotated[int, Query(ge=1, description="1-based page number.")]


def _http_error(e: ServiceError) -> HTTPException:
    code = ERROR_STATUS.get(type(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=code, detail=e.message)


@router.get(
    "",
    response_model=PageResponse[PostSummary],
    responses={204: {"description": "No posts on this page"}},
)
def list_posts(
    db: Annotated[Session, Depends(get_db)],
    page: PageNumber = 1,
):
    """Return one page of all posts, oldest first. 204 when the page is empty."""
    try:
        return board_service.find_all_list(db, page)
    except EmptyResultError:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except ServiceError as e:
        raise _http_error(e) from e


@router.get(
    "/search",
    response_model=PageResponse[PostSummary],
    responses={204: {"description": "No matching posts on this page"}},
)
def search_posts(
    db: Annotated[Session, Depends(get_db)],
    keyword: Annotated[str, Query(min_length=1, max_length=255)],
    page: PageNumber = 1,
):
    """Return one page of posts whose title contains the keyword."""
    try:
        return board_service.search_post(db, keyword, page)
    except EmptyResultError:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except ServiceError as e:
        raise _http_error(e) from e


@router.get("/{post_id}", response_model=PostDetail)
def get_post(
    post_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> PostDetail:
    """Return a single post. 400 when it does not exist."""
    try:
        return board_service.find_detail_info(db, post_id)
    except ServiceError as e:
        raise _http_error(e) from e


@router.post("", response_model=PostCreatedResponse, status_code=201)
def create_post(
    body: PostCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PostCreatedResponse:
    """Create a post owned by the requester. 401 when the requester is not a registered user."""
    try:
        post = board_service.add_post(db, user, body)
    except ServiceError as e:
        raise _http_error(e) from e
    return PostCreatedResponse(id=post.id)


@router.get("/{post_id}/authority")
def get_post_authority(
    post_id: int,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> dict[str, bool]:
    """
    Check whether the requester may edit or delete the post.

    Clients call this before showing edit/delete controls; PUT and DELETE run
    the same check themselves.
    """
    try:
        board_service.check_authority(db, user, post_id)
    except ServiceError as e:
        raise _http_error(e) from e
    return {"authorized": True}


@router.put("/{post_id}", response_model=PostDetail)
def update_post(
    post_id: int,
    body: PostModifyRequest,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PostDetail:
    """Edit title and/or content. Owner or admin only."""
    try:
        intent = board_service.check_authority(db, user, post_id)
        post = board_service.modify_post(db, intent, body)
    except ServiceError as e:
        raise _http_error(e) from e
    return PostDetail.from_entity(post)


@router.delete("/{post_id}")
def remove_post(
    post_id: int,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[CurrentUser, Depends(get_current_user)],
) -> dict[str, int]:
    """
    Delete a post. Owner or admin only.

    Deleting a post that is already gone succeeds, so repeated calls return 200.
    """
    try:
        intent = board_service.check_authority(db, user, post_id)
    except PostNotFoundError:
        return {"deleted": post_id}
    except ServiceError as e:
        raise _http_error(e) from e
    board_service.delete_post(db, intent)
    return {"deleted": post_id}
