"""Board service: paged listing and search, post detail, create/edit/delete with an authority gate.

Edit and delete accept only the AuthorizedPost returned by check_authority, so a
mutation cannot be reached without the role/ownership check having passed first.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.crud import posts as post_store
from app.crud import users as user_store
from app.crud.pagination import PageRequest
from app.models import Post
from app.schemas.auth import CurrentUser
from app.schemas.page import PageResponse
from app.schemas.post import (
    PostCreateRequest,
    PostDetail,
    PostModifyRequest,
    PostSummary,
)
from app.services.common import ServiceError, to_page_response

logger = logging.getLogger(__name__)


class PostNotFoundError(ServiceError):
    """No post exists with the requested id."""


class RequesterNotFoundError(ServiceError):
    """The requester's email does not belong to any user."""


class ForbiddenError(ServiceError):
    """The requester is known but may not act on the post."""


@dataclass(frozen=True)
class AuthorizedPost:
    """Proof from check_authority that actor may modify or delete post_id."""

    post_id: int
    actor: CurrentUser


def find_all_list(db: Session, page_number: int) -> PageResponse[PostSummary]:
    """Return the given 1-based page of all posts in id order."""
    page_request = PageRequest.of(page_number, get_settings().BOARD_LIST_SIZE)
    page = post_store.find_all(db, page_request)
    return to_page_response(page, PostSummary)


def find_detail_info(db: Session, post_id: int) -> PostDetail:
    post = post_store.find_by_id(db, post_id)
    if post is None:
        raise PostNotFoundError(f"Post {post_id} not found.")
    return PostDetail.from_entity(post)


def add_post(db: Session, actor: CurrentUser, payload: PostCreateRequest) -> Post:
    """Create a post owned by the requester. Any existing user may post."""
    user = user_store.find_by_email(db, actor.email)
    if user is None:
        raise RequesterNotFoundError("Requester is not a registered user.")
    post = post_store.save(db, payload.to_entity(owner_id=user.id))
    logger.info(
        "Post created",
        extra={"post_id": post.id, "user_id": user.id},
    )
    return post


def check_authority(db: Session, actor: CurrentUser, post_id: int) -> AuthorizedPost:
    """
    Allow admins on any post and members on their own posts.

    Raises PostNotFoundError or ForbiddenError; never mutates.
    """
    post = post_store.find_by_id(db, post_id)
    if post is None:
        raise PostNotFoundError(f"Post {post_id} not found.")
    if not actor.is_admin and actor.email != post.owner.email:
        logger.warning(
            "Post access refused",
            extra={"post_id": post_id, "role": actor.role},
        )
        raise ForbiddenError("Only the owner or an admin may change this post.")
    return AuthorizedPost(post_id=post.id, actor=actor)


def modify_post(
    db: Session, intent: AuthorizedPost, payload: PostModifyRequest
) -> Post:
    """
    Apply title/content changes in one transaction.

    The row is locked on read so a concurrent edit or delete of the same post
    cannot interleave between the read and the write.
    """
    try:
        post = post_store.find_by_id_for_update(db, intent.post_id)
        if post is None:
            raise PostNotFoundError(f"Post {intent.post_id} not found.")
        post.update(title=payload.title, content=payload.content)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(post)
    logger.info(
        "Post modified",
        extra={"post_id": post.id, "actor": intent.actor.email},
    )
    return post


def delete_post(db: Session, intent: AuthorizedPost) -> None:
    """Delete the post. Deleting an id that no longer exists is a no-op."""
    deleted = post_store.delete_by_id(db, intent.post_id)
    logger.info(
        "Post deleted",
        extra={
            "post_id": intent.post_id,
            "rows_deleted": deleted,
            "actor": intent.actor.email,
        },
    )


def search_post(
    db: Session, keyword: str, page_number: int
) -> PageResponse[PostSummary]:
    """Return the given 1-based page of posts whose title contains keyword."""
    page_request = PageRequest.of(page_number, get_settings().BOARD_LIST_SIZE)
    page = post_store.find_by_title_containing(db, keyword, page_request)
    return to_page_response(page, PostSummary)
