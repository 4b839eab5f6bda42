"""Request/response schemas for board posts."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from app.models import Post

TITLE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 20_000


class PostCreateRequest(BaseModel):
    """Body for creating a post; the owner comes from the access token."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., min_length=1, max_length=CONTENT_MAX_LENGTH)

    def to_entity(self, owner_id: int) -> Post:
        return Post(title=self.title, content=self.content, user_id=owner_id)


class PostModifyRequest(BaseModel):
    """Body for editing a post. Omitted fields keep their current value."""

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str | None = Field(
        default=None, min_length=1, max_length=CONTENT_MAX_LENGTH
    )

    @model_validator(mode="after")
    def require_some_field(self) -> "PostModifyRequest":
        if self.title is None and self.content is None:
            raise ValueError("At least one of title or content must be provided")
        return self


class PostSummary(BaseModel):
    """List entry for a post (no content)."""

    id: int
    title: str
    writer: str
    created_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostSummary":
        return cls(
            id=post.id,
            title=post.title,
            writer=post.owner.name,
            created_at=post.created_at,
        )


class PostDetail(BaseModel):
    """Full post for the detail view."""

    id: int
    title: str
    content: str
    writer: str
    writer_email: str
    created_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostDetail":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            writer=post.owner.name,
            writer_email=post.owner.email,
            created_at=post.created_at,
        )


class PostCreatedResponse(BaseModel):
    """Returned with 201 after a post is stored."""

    id: int
