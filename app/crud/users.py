"""Store queries for users."""

from sqlalchemy.orm import Session

from app.crud.pagination import Page, PageRequest, paginate
from app.models import User


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def find_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def find_all(db: Session, page_request: PageRequest) -> Page[User]:
    return paginate(db.query(User).order_by(User.id), page_request)


def create(db: Session, email: str, name: str, role: str = "member") -> User:
    user = User(email=email, name=name, role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
