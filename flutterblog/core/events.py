from sqlalchemy import event
from flutterblog.models.post import Post
import logging

logger = logging.getLogger(__name__)

# Каждую новую запись в posts пишем в лог, id уже выдан базой
@event.listens_for(Post, "after_insert")
def log_new_post(mapper, connection, target):
    logger.info(f"📝 Post {target.id} inserted for user {target.user!r} (hashtag: {target.hashtag or '-'})")
