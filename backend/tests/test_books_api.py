"""
Bookshelf API — Book Endpoint Tests
====================================

What:  /books behaves like /authors with its own envelope and collection.
"""

import pytest


class TestBooks:

    @pytest.mark.asyncio
    async def test_round_trip(self, test_client):
        fields = {"title": "The Dispossessed", "isbn": "9780061054884", "published_year": 1974}

        created = await test_client.post("/books", json={"book": fields})
        assert created.status_code == 201
        book = created.json()["book"]

        fetched = await test_client.get(f"/books/{book['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == {"book": {"id": book["id"], **fields}}

    @pytest.mark.asyncio
    async def test_list_uses_plural_key(self, test_client):
        await test_client.post("/books", json={"book": {"title": "Emma"}})

        response = await test_client.get("/books")

        assert list(response.json()) == ["books"]
        assert [b["title"] for b in response.json()["books"]] == ["Emma"]

    @pytest.mark.asyncio
    async def test_book_requires_book_envelope(self, test_client):
        response = await test_client.post("/books", json={"author": {"name": "Ada"}})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_books_and_authors_are_separate(self, test_client):
        author = (await test_client.post("/authors", json={"author": {"name": "Jane Austen"}})).json()["author"]
        book = (
            await test_client.post("/books", json={"book": {"title": "Emma", "author_id": author["id"]}})
        ).json()["book"]

        assert (await test_client.get(f"/authors/{book['id']}")).status_code == 404
        assert (await test_client.get(f"/books/{author['id']}")).status_code == 404
        assert (await test_client.get("/authors")).json()["authors"] == [author]
        assert (await test_client.get("/books")).json()["books"] == [book]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, test_client):
        book = (await test_client.post("/books", json={"book": {"title": "Emma"}})).json()["book"]

        patched = await test_client.patch(
            f"/books/{book['id']}", json={"book": {"title": "", "summary": "Matchmaking"}}
        )
        assert patched.status_code == 204
        stored = (await test_client.get(f"/books/{book['id']}")).json()["book"]
        assert stored == {"id": book["id"], "title": "Emma", "summary": "Matchmaking"}

        assert (await test_client.delete(f"/books/{book['id']}")).status_code == 204
        assert (await test_client.delete(f"/books/{book['id']}")).status_code == 404
