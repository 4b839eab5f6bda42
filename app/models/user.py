"""ORM model for board members and administrators."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class User(Base):
    """
    Registered user, identified by email.

    role: 'member' or 'admin'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(100), nullable=False, default="")
    role = Column(String(32), nullable=False, default="member")

    posts = relationship("Post", back_populates="owner")
