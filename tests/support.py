"""Shared helpers for tests: in-memory SQLite sessions and seed data."""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import enable_case_sensitive_like
from app.models import Base, Post, User
from app.schemas.auth import CurrentUser


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with all tables; usable from TestClient threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_case_sensitive_like(engine)
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def add_user(db: Session, email: str, role: str = "member", name: str | None = None) -> User:
    user = User(email=email, name=name or email.split("@")[0], role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def add_posts(db: Session, owner: User, count: int, title: str = "Post") -> list[Post]:
    """Insert count posts titled '<title> 1'..'<title> count' in id order."""
    posts = [
        Post(title=f"{title} {i}", content=f"Body {i}", user_id=owner.id)
        for i in range(1, count + 1)
    ]
    db.add_all(posts)
    db.commit()
    for post in posts:
        db.refresh(post)
    return posts


def actor(email: str, role: str = "member") -> CurrentUser:
    return CurrentUser(email=email, role=role)
