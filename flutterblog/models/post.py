from sqlalchemy import Column, Integer, String, DateTime, func
from flutterblog.core.db import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user = Column(String, nullable=False, index=True)
    post = Column(String, nullable=False)
    hashtag = Column(String, nullable=False, default="")
    likes = Column(Integer, nullable=False, default=0)
    date = Column(DateTime, nullable=False, server_default=func.now())
    avatar = Column(String, nullable=False)

    def __repr__(self):
        return f"<Post id={self.id} user={self.user!r} likes={self.likes}>"
