"""Store queries for board posts."""

from sqlalchemy.orm import Session

from app.crud.pagination import Page, PageRequest, paginate
from app.models import Post


def find_by_id(db: Session, post_id: int) -> Post | None:
    return db.query(Post).filter(Post.id == post_id).first()


def find_by_id_for_update(db: Session, post_id: int) -> Post | None:
    """Load a post and lock its row until the current transaction ends."""
    return (
        db.query(Post)
        .filter(Post.id == post_id)
        .with_for_update()
        .populate_existing()
        .first()
    )


def find_all(db: Session, page_request: PageRequest) -> Page[Post]:
    return paginate(db.query(Post).order_by(Post.id), page_request)


def find_by_title_containing(
    db: Session, keyword: str, page_request: PageRequest
) -> Page[Post]:
    """Posts whose title contains keyword as a literal substring."""
    query = (
        db.query(Post)
        .filter(Post.title.contains(keyword, autoescape=True))
        .order_by(Post.id)
    )
    return paginate(query, page_request)


def save(db: Session, post: Post) -> Post:
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def delete_by_id(db: Session, post_id: int) -> int:
    """Delete a post by id; returns the number of rows removed (0 when absent)."""
    deleted = (
        db.query(Post)
        .filter(Post.id == post_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
