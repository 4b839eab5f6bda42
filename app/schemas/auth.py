"""Schemas for the authenticated requester."""

from pydantic import BaseModel

from app.core.security import ROLE_ADMIN


class CurrentUser(BaseModel):
    """Requester identity (email, role) taken from a verified access token."""

    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
