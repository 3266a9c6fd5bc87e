from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from flutterblog.core.avatars import Avatar
from flutterblog.core.db import get_db
from main import app

SERVER_ERROR = "An error occurred on the server. Try again later."


def make_post(client, user="lauren", post="hello world", avatar="bear"):
    res = client.post("/flutter/post", data={"user": user, "post": post, "avatar": avatar})
    assert res.status_code == 200, res.text
    return res.json()


def test_create_post_returns_full_record(client):
    body = make_post(client, post="hello world #tag", avatar="dolphin")

    assert set(body) == {"id", "user", "post", "hashtag", "likes", "date", "avatar"}
    assert body["post"] == "hello world"
    assert body["hashtag"] == "tag"
    assert body["likes"] == 0
    assert body["avatar"] == "dolphin"


def test_round_trip_through_list(client):
    make_post(client, user="vibes", post="just vibing #chill", avatar="cat")

    res = client.get("/flutter/posts")

    assert res.status_code == 200
    posts = res.json()["posts"]
    assert any(
        p["post"] == "just vibing" and p["hashtag"] == "chill"
        and p["avatar"] == "cat" and p["likes"] == 0
        for p in posts
    )


def test_list_posts_newest_first(client):
    ids = [make_post(client, post=f"post {i}")["id"] for i in range(3)]

    posts = client.get("/flutter/posts").json()["posts"]

    assert [p["id"] for p in posts] == list(reversed(ids))


def test_list_posts_empty(client):
    res = client.get("/flutter/posts")
    assert res.status_code == 200
    assert res.json() == {"posts": []}


def test_create_post_missing_field(client, count_posts):
    make_post(client)
    before = count_posts()

    res = client.post("/flutter/post", data={"user": "lauren"})

    assert res.status_code == 400
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "Missing one or more of the required params."
    assert count_posts() == before


def test_create_post_unknown_avatar(client, count_posts):
    res = client.post("/flutter/post", data={"user": "u", "post": "hi", "avatar": "dragon"})

    assert res.status_code == 400
    assert res.text == "Yikes. Avatar does not exist."
    assert count_posts() == 0


def test_like_returns_plain_count(client):
    post_id = make_post(client)["id"]

    first = client.post("/flutter/likes", data={"id": post_id})
    second = client.post("/flutter/likes", data={"id": str(post_id)})

    assert first.status_code == 200
    assert first.headers["content-type"].startswith("text/plain")
    assert first.text == "1"
    assert second.text == "2"


def test_like_missing_id(client):
    res = client.post("/flutter/likes", data={})
    assert res.status_code == 400
    assert res.text == "Missing one or more of the required params."


def test_like_unknown_id(client):
    res = client.post("/flutter/likes", data={"id": "12345"})
    assert res.status_code == 400
    assert res.text == "Yikes. ID does not exist."


def test_like_id_out_of_range(client):
    make_post(client)

    res = client.post("/flutter/likes", data={"id": "9" * 30})

    assert res.status_code == 400
    assert res.text == "Yikes. ID does not exist."


def test_trending(client):
    ids = [make_post(client, post=f"post {i}")["id"] for i in range(7)]
    for post_id, likes in zip(ids, [1, 6, 0, 3, 2, 5, 4]):
        for _ in range(likes):
            client.post("/flutter/likes", data={"id": post_id})

    res = client.get("/flutter/posts", params={"trending": "true"})

    assert res.status_code == 200
    likes = [p["likes"] for p in res.json()["posts"]]
    assert likes == [6, 5, 4, 3, 2]


def test_search_returns_ids(client):
    match = make_post(client, user="birdwatcher", post="morning walk", avatar="bird")
    make_post(client, user="someone", post="nothing here")
    tagged = make_post(client, user="x", post="look #BIRDS")

    res = client.get("/flutter/posts", params={"search": "bird"})

    assert res.status_code == 200
    assert res.json() == {"posts": [{"id": match["id"]}, {"id": tagged["id"]}]}


def test_user_posts(client):
    first = make_post(client, user="anna", post="one")
    make_post(client, user="ben", post="other")
    second = make_post(client, user="anna", post="two")

    res = client.get("/flutter/users/anna")

    assert res.status_code == 200
    assert [p["id"] for p in res.json()["posts"]] == [second["id"], first["id"]]


def test_unknown_user(client):
    make_post(client, user="anna")

    res = client.get("/flutter/users/nonexistent_xyz")

    assert res.status_code == 400
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "Yikes. User does not exist."


def test_avatars_endpoint(client):
    res = client.get("/flutter/avatars")

    assert res.status_code == 200
    avatars = res.json()["avatars"]
    assert [a["name"] for a in avatars] == [a.value for a in Avatar]
    assert {"name": "cat", "image": "/img/cat.png"} in avatars


def test_storage_fault_is_server_error():
    # База без таблиц: любой запрос к posts падает
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    broken_session = sessionmaker(bind=engine)

    def override_get_db():
        session = broken_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        client = TestClient(app)

        for res in (
            client.get("/flutter/posts"),
            client.post("/flutter/post", data={"user": "u", "post": "hi", "avatar": "cat"}),
            client.post("/flutter/likes", data={"id": "1"}),
            client.get("/flutter/users/anna"),
        ):
            assert res.status_code == 500
            assert res.text == SERVER_ERROR
    finally:
        app.dependency_overrides.clear()
        engine.dispose()


def test_unexpected_error_is_plain_server_error(caplog):
    def failing_get_db():
        raise RuntimeError("boom")
        yield

    app.dependency_overrides[get_db] = failing_get_db
    try:
        client = TestClient(app, raise_server_exceptions=False)
        with caplog.at_level("ERROR", logger="main"):
            res = client.get("/flutter/posts")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.text == SERVER_ERROR
    # Трейсбек пишет сервер, сам обработчик ничего не логирует
    assert [r for r in caplog.records if r.name == "main"] == []
