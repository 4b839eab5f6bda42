"""Admin user lookup: paged user list and single-user detail."""

from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.crud import users as user_store
from app.crud.pagination import PageRequest
from app.schemas.admin import UserDetail, UserSummary
from app.schemas.page import PageResponse
from app.services.common import ServiceError, to_page_response


class UserNotFoundError(ServiceError):
    """No user exists with the requested id."""


def find_user_list(db: Session, page_number: int) -> PageResponse[UserSummary]:
    """Return the given 1-based page of users in id order."""
    page_request = PageRequest.of(page_number, get_settings().ADMIN_USER_LIST_SIZE)
    page = user_store.find_all(db, page_request)
    return to_page_response(page, UserSummary)


def find_user(db: Session, user_id: int) -> UserDetail:
    user = user_store.find_by_id(db, user_id)
    if user is None:
        raise UserNotFoundError(f"User {user_id} not found.")
    return UserDetail.from_entity(user)
