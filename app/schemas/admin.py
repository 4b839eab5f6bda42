"""Response schemas for admin user lookup."""

from pydantic import BaseModel, ConfigDict

from app.models import User


class UserSummary(BaseModel):
    """User entry for the admin list."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    role: str

    @classmethod
    def from_entity(cls, user: User) -> "UserSummary":
        return cls.model_validate(user)


class UserDetail(UserSummary):
    """Single user with the number of posts they own."""

    post_count: int = 0

    @classmethod
    def from_entity(cls, user: User) -> "UserDetail":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            post_count=len(user.posts),
        )
