import logging
from typing import List
from sqlalchemy import desc, or_
from sqlalchemy.orm import Session
from flutterblog.core.config import TRENDING_LIMIT
from flutterblog.core.errors import NotFound
from flutterblog.models import Post

logger = logging.getLogger(__name__)

# Свежие посты сверху; при одинаковой дате выше тот, что создан позже
NEWEST_FIRST = (desc(Post.date), desc(Post.id))


def list_posts(db: Session) -> List[Post]:
    """Все посты, от новых к старым."""
    return db.query(Post).order_by(*NEWEST_FIRST).all()


def trending_posts(db: Session, limit: int = TRENDING_LIMIT) -> List[Post]:
    """
    Самые популярные посты по количеству лайков.
    При равном числе лайков первым идёт более новый пост.
    """
    return (
        db.query(Post)
        .order_by(desc(Post.likes), *NEWEST_FIRST)
        .limit(limit)
        .all()
    )


def search_post_ids(db: Session, term: str) -> List[int]:
    """
    Возвращает id постов, у которых автор, текст или хэштег содержат term
    (без учёта регистра). Символы % и _ ищутся буквально.
    """
    rows = (
        db.query(Post.id)
        .filter(
            or_(
                Post.post.icontains(term, autoescape=True),
                Post.hashtag.icontains(term, autoescape=True),
                Post.user.icontains(term, autoescape=True),
            )
        )
        .order_by(Post.id)
        .all()
    )
    return [row.id for row in rows]


def user_posts(db: Session, username: str) -> List[Post]:
    posts = (
        db.query(Post)
        .filter(Post.user == username)
        .order_by(*NEWEST_FIRST)
        .all()
    )
    if not posts:
        logger.warning(f"No posts found for user {username!r}")
        raise NotFound("Yikes. User does not exist.")
    return posts
