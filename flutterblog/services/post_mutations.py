import logging
from sqlalchemy.orm import Session
from flutterblog.core.avatars import is_known_avatar
from flutterblog.core.errors import InvalidArgument, NotFound, UnknownAvatar
from flutterblog.models import Post
from flutterblog.services.hashtags import parse_post

logger = logging.getLogger(__name__)

# posts.id объявлен как Integer (int4 в PostgreSQL), больших id в базе быть не может
MAX_POST_ID = 2 ** 31 - 1


def create_post(db: Session, user: str | None, post: str | None, avatar: str | None) -> Post:
    """
    Сохраняет новый пост и возвращает запись из БД вместе с id и датой,
    которые проставила база.
    """
    if not user or not post or not avatar:
        raise InvalidArgument()
    if not is_known_avatar(avatar):
        raise UnknownAvatar()

    message, hashtag = parse_post(post)
    new_post = Post(user=user, post=message, hashtag=hashtag, likes=0, avatar=avatar)

    db.add(new_post)
    db.commit()
    db.refresh(new_post)

    logger.info(f"User {user!r} created post {new_post.id}")
    return new_post


def like_post(db: Session, post_id: str | int | None) -> int:
    """
    Добавляет посту один лайк и возвращает новое количество лайков.
    Увеличение делается одним UPDATE, поэтому параллельные лайки не теряются.
    """
    if post_id is None or post_id == "":
        raise InvalidArgument()

    try:
        post_id = int(post_id)
    except (TypeError, ValueError):
        raise NotFound("Yikes. ID does not exist.")
    if not 0 < post_id <= MAX_POST_ID:
        raise NotFound("Yikes. ID does not exist.")

    updated = (
        db.query(Post)
        .filter(Post.id == post_id)
        .update({Post.likes: Post.likes + 1}, synchronize_session=False)
    )
    if updated == 0:
        db.rollback()
        logger.warning(f"Like for unknown post {post_id}")
        raise NotFound("Yikes. ID does not exist.")

    # Читаем до коммита: строка ещё заблокирована нашей транзакцией
    likes = db.query(Post.likes).filter(Post.id == post_id).scalar()
    db.commit()

    logger.info(f"Post {post_id} now has {likes} likes")
    return likes
