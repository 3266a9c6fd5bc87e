from fastapi import APIRouter, Depends, Form, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from flutterblog.core.db import get_db
from flutterblog.schemas.post import PostIdResponse, PostIdsResponse, PostResponse, PostsResponse
from flutterblog.services.post_mutations import create_post, like_post
from flutterblog.services.post_queries import list_posts, search_post_ids, trending_posts, user_posts

router = APIRouter()


@router.get("/posts")
def get_posts(
    search: str | None = Query(None, description="Подстрока для поиска по автору, тексту и хэштегу"),
    trending: str | None = Query(None, description="\"true\": топ постов по лайкам"),
    db: Session = Depends(get_db)
):
    """
    Лента постов. Без параметров отдаёт все посты от новых к старым,
    с trending=true самые популярные, с search=... только id найденных постов.
    """
    if trending == "true":
        posts = trending_posts(db)
    elif search:
        ids = search_post_ids(db, search)
        return PostIdsResponse(posts=[PostIdResponse(id=post_id) for post_id in ids])
    else:
        posts = list_posts(db)

    return PostsResponse(posts=[PostResponse.model_validate(p) for p in posts])


@router.post("/post", response_model=PostResponse)
def add_post(
    user: str | None = Form(None),
    post: str | None = Form(None),
    avatar: str | None = Form(None),
    db: Session = Depends(get_db)
):
    """Создаёт пост и возвращает его целиком (с id, датой и лайками)."""
    return create_post(db, user, post, avatar)


@router.post("/likes", response_class=PlainTextResponse)
def add_like(id: str | None = Form(None), db: Session = Depends(get_db)):
    """Ставит лайк и возвращает новое количество лайков обычным текстом."""
    return PlainTextResponse(str(like_post(db, id)))


@router.get("/users/{username}", response_model=PostsResponse)
def get_user_posts(username: str, db: Session = Depends(get_db)):
    return PostsResponse(posts=[PostResponse.model_validate(p) for p in user_posts(db, username)])
