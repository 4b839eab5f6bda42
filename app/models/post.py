"""ORM model for board posts."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class Post(Base):
    """
    A single board entry owned by exactly one user.

    Only title and content change after creation.
    """

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    owner = relationship(
        "User", back_populates="posts", lazy="joined", innerjoin=True
    )

    def update(self, title: str | None = None, content: str | None = None) -> None:
        """Apply title/content changes in place; None leaves a field unchanged."""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
