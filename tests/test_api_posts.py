"""
End-to-end tests for /api/posts
"""

import logging
import uuid

import pytest


def _post_body(author_id: str, **overrides) -> dict:
    body = {
        "title": "Hello world",
        "slug": "hello-world",
        "content": "First post",
        "tags": ["intro", " news ", ""],
        "author": author_id,
    }
    body.update(overrides)
    return body


class TestCreatePost:
    async def test_requires_token(self, client, make_author):
        author = await make_author("Ada")
        response = await client.post("/api/posts", json=_post_body(author.id))
        assert response.status_code == 401

    async def test_requires_admin_role(self, client, make_author, session):
        from app.core.security import create_access_token, hash_password
        from app.domain.user import User

        reader = User(name="Reader", email="reader@example.com", password_hash=hash_password("x" * 8), role="user")
        session.add(reader)
        await session.commit()
        author = await make_author("Ada")

        response = await client.post(
            "/api/posts",
            json=_post_body(author.id),
            headers={"Authorization": f"Bearer {create_access_token(reader.id, reader.role)}"},
        )
        assert response.status_code == 403

    async def test_draft_has_no_published_at(self, client, make_author, admin_headers):
        author = await make_author("Ada")
        response = await client.post(
            "/api/posts",
            json=_post_body(author.id, publishedAt="2024-05-01T00:00:00Z"),
            headers=admin_headers,
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "draft"
        assert data["publishedAt"] is None
        assert data["tags"] == ["intro", "news"]
        assert data["author"] == {"id": author.id, "name": "Ada", "email": author.email}

    async def test_published_gets_published_at(self, client, make_author, admin_headers):
        author = await make_author("Ada")
        response = await client.post(
            "/api/posts", json=_post_body(author.id, status="published"), headers=admin_headers
        )
        assert response.status_code == 201
        assert response.json()["data"]["publishedAt"] is not None

    async def test_unknown_author(self, client, admin_headers):
        response = await client.post(
            "/api/posts", json=_post_body(str(uuid.uuid4())), headers=admin_headers
        )
        assert response.status_code == 404

    async def test_duplicate_slug(self, client, make_author, make_post, admin_headers):
        author = await make_author("Ada")
        await make_post(author, "Hello world", slug="hello-world")
        response = await client.post("/api/posts", json=_post_body(author.id), headers=admin_headers)
        assert response.status_code == 409


class TestUpdateDeletePost:
    async def test_publish_then_unpublish(self, client, make_author, make_post, admin_headers):
        author = await make_author("Ada")
        post = await make_post(author, "Draft one", tags=["a", "b"])

        response = await client.patch(
            f"/api/posts/{post.id}", json={"status": "published", "tags": ["b", "c"]}, headers=admin_headers
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["publishedAt"] is not None
        assert data["tags"] == ["b", "c"]

        response = await client.patch(
            f"/api/posts/{post.id}", json={"status": "draft"}, headers=admin_headers
        )
        assert response.json()["data"]["publishedAt"] is None
        assert response.json()["data"]["tags"] == ["b", "c"]

    async def test_update_requires_token(self, client, make_author, make_post):
        author = await make_author("Ada")
        post = await make_post(author, "Draft one")
        response = await client.patch(f"/api/posts/{post.id}", json={"title": "New"})
        assert response.status_code == 401

    async def test_delete(self, client, make_author, make_post, admin_headers):
        author = await make_author("Ada")
        post = await make_post(author, "Doomed", tags=["x"])

        response = await client.delete(f"/api/posts/{post.id}", headers=admin_headers)
        assert response.status_code == 204

        response = await client.get(f"/api/posts/{post.id}")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Post not found"

    async def test_deleting_author_removes_posts(self, client, make_author, make_post):
        author = await make_author("Ada")
        post = await make_post(author, "Orphan")

        await client.delete(f"/api/authors/{author.id}")

        response = await client.get(f"/api/posts/{post.id}")
        assert response.status_code == 404


class TestListPosts:
    async def test_filters_and_search(self, client, make_author, make_post):
        ada = await make_author("Ada")
        bob = await make_author("Bob")
        await make_post(ada, "Food truck", status="published", tags=["food"], minutes=1)
        await make_post(ada, "Weekly notes", content="More FOO", tags=["notes"], minutes=2)
        await make_post(bob, "Gardening", status="published", tags=["food"], minutes=3)

        body = (await client.get("/api/posts", params={"q": "foo"})).json()
        assert [p["title"] for p in body["data"]] == ["Weekly notes", "Food truck"]

        body = (await client.get("/api/posts", params={"status": "published", "tag": "food"})).json()
        assert [p["title"] for p in body["data"]] == ["Gardening", "Food truck"]

        body = (await client.get("/api/posts", params={"author": bob.id})).json()
        assert [p["title"] for p in body["data"]] == ["Gardening"]

    @pytest.mark.parametrize("spelling", [str.upper, lambda value: "{" + value + "}"])
    async def test_author_filter_accepts_any_uuid_spelling(self, client, make_author, make_post, spelling):
        ada = await make_author("Ada")
        bob = await make_author("Bob")
        await make_post(ada, "Ada one")
        await make_post(bob, "Bob one")

        body = (await client.get("/api/posts", params={"author": spelling(bob.id)})).json()
        assert [p["title"] for p in body["data"]] == ["Bob one"]

    async def test_missing_post_is_logged(self, client, caplog):
        missing = str(uuid.uuid4())
        with caplog.at_level(logging.DEBUG, logger="app.services.post"):
            response = await client.get(f"/api/posts/{missing}")

        assert response.status_code == 404
        assert f"Post {missing} not found" in caplog.text

    async def test_sort_by_title_ascending(self, client, make_author, make_post):
        ada = await make_author("Ada")
        for title in ("Charlie", "Alpha", "Bravo"):
            await make_post(ada, title)

        body = (await client.get("/api/posts", params={"sort": "title", "order": "asc"})).json()
        assert [p["title"] for p in body["data"]] == ["Alpha", "Bravo", "Charlie"]


class TestPostsByAuthor:
    async def test_only_that_authors_posts(self, client, make_author, make_post):
        ada = await make_author("Ada")
        bob = await make_author("Bob")
        await make_post(ada, "Ada one", status="published", minutes=1)
        await make_post(ada, "Ada two", minutes=2)
        await make_post(bob, "Bob one", status="published")

        response = await client.get(f"/api/posts/author/{ada.id}")
        body = response.json()
        assert response.status_code == 200
        assert body["author"] == ada.id
        assert body["total"] == 2
        assert [p["title"] for p in body["data"]] == ["Ada two", "Ada one"]

    async def test_author_param_cannot_widen_scope(self, client, make_author, make_post):
        ada = await make_author("Ada")
        bob = await make_author("Bob")
        await make_post(bob, "Bob one")

        body = (await client.get(f"/api/posts/author/{ada.id}", params={"author": bob.id})).json()
        assert body["total"] == 0
        assert body["totalPages"] == 1
        assert body["data"] == []

    async def test_status_filter(self, client, make_author, make_post):
        ada = await make_author("Ada")
        await make_post(ada, "Ada one", status="published")
        await make_post(ada, "Ada two")

        body = (await client.get(f"/api/posts/author/{ada.id}", params={"status": "draft"})).json()
        assert [p["title"] for p in body["data"]] == ["Ada two"]

    async def test_malformed_author_id(self, client):
        response = await client.get("/api/posts/author/12345")
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid author id"
