from http import HTTPStatus


def _sub_category(client) -> int:
    category_id = client.post("/categories", json={}).json()["id"]
    return client.post(f"/categories/{category_id}/subcategories", json={}).json()["id"]


def test_items_crud_lifecycle(client, languages) -> None:
    sub_category_id = _sub_category(client)

    # Create
    created = client.post(
        "/items",
        json={
            "sub_category_ids": [sub_category_id],
            "translations": [{"language_id": languages["en"], "name": "Newton's laws"}],
        },
    )
    assert created.status_code == HTTPStatus.CREATED
    item = created.json()
    item_id = item["id"]
    assert item["sub_category_ids"] == [sub_category_id]
    assert item["name"] == "Newton's laws"

    # Update
    updated = client.put(
        f"/items/{item_id}",
        json={"translations": [{"language_id": languages["fr"], "name": "Lois de Newton"}]},
    )
    assert updated.status_code == HTTPStatus.OK
    assert updated.json() is True

    detail = client.get(f"/items/{item_id}", params={"lang": "fr"}).json()
    assert detail["name"] == "Lois de Newton"
    assert len(detail["translations"]) == 2

    # Delete
    deleted = client.delete(f"/items/{item_id}")
    assert deleted.status_code == HTTPStatus.OK

    assert client.get(f"/items/{item_id}").status_code == HTTPStatus.NOT_FOUND
    assert client.get(f"/subcategories/{sub_category_id}/items").json()["total"] == 0


def test_item_in_several_sub_categories(client) -> None:
    first, second = _sub_category(client), _sub_category(client)
    item_id = client.post("/items", json={"sub_category_ids": [second, first, second]}).json()["id"]

    assert client.get(f"/items/{item_id}").json()["sub_category_ids"] == sorted([first, second])
    for sub_category_id in (first, second):
        page = client.get(f"/subcategories/{sub_category_id}/items").json()
        assert [i["id"] for i in page["items"]] == [item_id]


def test_create_item_with_missing_sub_category_persists_nothing(client) -> None:
    existing = _sub_category(client)
    resp = client.post("/items", json={"sub_category_ids": [existing, 6060]})
    assert resp.status_code == HTTPStatus.NOT_FOUND
    assert "6060" in resp.json()["detail"]
    assert client.get("/items").json() == []


def test_create_item_requires_a_sub_category(client) -> None:
    resp = client.post("/items", json={"sub_category_ids": []})
    assert resp.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_missing_item_returns_404(client) -> None:
    assert client.get("/items/1234").status_code == HTTPStatus.NOT_FOUND
    assert client.put("/items/1234", json={"translations": []}).status_code == HTTPStatus.NOT_FOUND
    assert client.delete("/items/1234").status_code == HTTPStatus.NOT_FOUND


def test_create_item_sets_content_language(client, languages) -> None:
    resp = client.post(
        "/items",
        params={"lang": "fr"},
        json={
            "sub_category_ids": [_sub_category(client)],
            "translations": [{"language_id": languages["fr"], "name": "Atome"}],
        },
    )
    assert resp.status_code == HTTPStatus.CREATED
    assert resp.headers["Content-Language"] == "fr"
    assert resp.json()["name"] == "Atome"


def test_out_of_range_ids_on_items_are_not_found(client) -> None:
    huge = 10**20
    assert client.get(f"/items/{huge}").status_code == HTTPStatus.NOT_FOUND
    assert client.delete(f"/items/{huge}").status_code == HTTPStatus.NOT_FOUND

    resp = client.post("/items", json={"sub_category_ids": [_sub_category(client), huge]})
    assert resp.status_code == HTTPStatus.NOT_FOUND
    assert client.get("/items").json() == []
