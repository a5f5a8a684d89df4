from fastapi.testclient import TestClient

from post_api.main import app
from post_api.security import get_settings
from post_api.settings import Settings


def test_root_endpoint():
    with TestClient(app) as client:
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "Post Authoring API is running"}


def test_create_post_route_is_mounted(tmp_path):
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[get_settings] = lambda: Settings(CONTENT_ROOT=str(tmp_path))
    try:
        with TestClient(app) as client:
            res = client.post(
                "/api/create-post",
                json={
                    "title": "Hello World",
                    "pubDate": "2023-10-26T10:00:00Z",
                    "postType": "article",
                },
            )
        assert res.status_code == 201
        assert res.json()["filename"] == "hello-world.mdx"
        assert (tmp_path / "src/content/blog/hello-world.mdx").exists()
    finally:
        app.dependency_overrides = original_overrides


def test_create_post_route_refused_in_production(tmp_path):
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[get_settings] = lambda: Settings(
        CONTENT_ROOT=str(tmp_path), APP_ENV="production"
    )
    try:
        with TestClient(app) as client:
            res = client.post(
                "/api/create-post",
                json={
                    "title": "Hello World",
                    "pubDate": "2023-10-26",
                    "postType": "article",
                },
            )
        assert res.status_code == 403
        assert res.json() == {"message": "Not available in production"}
        assert not (tmp_path / "src").exists()
    finally:
        app.dependency_overrides = original_overrides
