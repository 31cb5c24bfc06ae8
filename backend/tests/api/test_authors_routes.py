"""Author Routes: HTTP behaviour of /books/{book_id}/authors."""

import pytest


@pytest.fixture
async def ed(client, bible):
    res = await client.post(
        f"/books/{bible['id']}/authors", json={"first": "Ed", "last": "Phelps"},
    )
    assert res.status_code == 201
    return res.json()


async def test_create_author(client, bible, ed, stored):
    assert ed["id"]
    assert ed["first"] == "Ed" and ed["last"] == "Phelps"
    assert stored()[0]["authors"] == [ed]


async def test_create_duplicate_author(client, bible, ed, stored):
    res = await client.post(
        f"/books/{bible['id']}/authors", json={"first": "Ed", "last": "Phelps"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "author already exists: Ed Phelps"
    assert stored()[0]["authors"] == [ed]


async def test_create_author_unknown_book(client):
    res = await client.post(
        "/books/missing/authors", json={"first": "Ed", "last": "Phelps"},
    )
    assert res.status_code == 404


async def test_create_author_missing_last(client, bible, stored):
    res = await client.post(f"/books/{bible['id']}/authors", json={"first": "Ed"})
    assert res.status_code == 400
    assert "last" in res.json()["error"]["message"]
    assert stored()[0]["authors"] == []


async def test_list_authors(client, bible, ed):
    wendy = (await client.post(
        f"/books/{bible['id']}/authors", json={"first": "Wendy", "last": "Dubow"},
    )).json()
    res = await client.get(f"/books/{bible['id']}/authors")
    assert res.status_code == 200
    assert res.json() == [ed, wendy]


async def test_list_authors_unknown_book(client):
    res = await client.get("/books/missing/authors")
    assert res.status_code == 404


async def test_get_author(client, bible, ed):
    res = await client.get(f"/books/{bible['id']}/authors/{ed['id']}")
    assert res.status_code == 200
    assert res.json() == ed


async def test_get_unknown_author(client, bible):
    res = await client.get(f"/books/{bible['id']}/authors/ghost")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "author not found: ghost"


async def test_update_author(client, bible, ed, stored):
    res = await client.put(
        f"/books/{bible['id']}/authors/{ed['id']}",
        json={"first": "Wendy", "last": "Dubow"},
    )
    assert res.status_code == 201
    assert res.json() == {"id": ed["id"], "first": "Wendy", "last": "Dubow"}
    assert stored()[0]["authors"] == [res.json()]


async def test_update_author_missing_fields(client, bible, ed, stored):
    res = await client.put(f"/books/{bible['id']}/authors/{ed['id']}", json={})
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert fields == ["first", "last"]
    assert stored()[0]["authors"] == [ed]


async def test_update_unknown_author(client, bible):
    res = await client.put(
        f"/books/{bible['id']}/authors/ghost", json={"first": "a", "last": "b"},
    )
    assert res.status_code == 404


async def test_delete_author(client, bible, ed, stored):
    res = await client.delete(f"/books/{bible['id']}/authors/{ed['id']}")
    assert res.status_code == 200
    assert res.json() == ed
    assert stored()[0]["authors"] == []

    res = await client.get(f"/books/{bible['id']}/authors/{ed['id']}")
    assert res.status_code == 404


async def test_authors_unreachable_after_book_delete(client, bible, ed):
    await client.delete(f"/books/{bible['id']}")
    res = await client.get(f"/books/{bible['id']}/authors/{ed['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == f"book not found: {bible['id']}"
