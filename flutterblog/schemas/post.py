from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict

class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user: str
    post: str
    hashtag: str
    likes: int
    date: datetime
    avatar: str

class PostsResponse(BaseModel):
    posts: List[PostResponse]

class PostIdResponse(BaseModel):
    id: int

class PostIdsResponse(BaseModel):
    posts: List[PostIdResponse]
