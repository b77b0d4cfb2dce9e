"""Integration test walking the whole Category → SubCategory → Item hierarchy."""

from http import HTTPStatus


def test_catalog_hierarchy_lifecycle(client) -> None:
    """Create, translate, page through and tear down a small catalog."""
    # LANGUAGES
    en = client.post("/languages", json={"locale": "en"}).json()["id"]
    ta = client.post("/languages", json={"locale": "ta"}).json()["id"]

    # CATEGORY
    created = client.post("/categories", json={"translations": [{"language_id": en, "name": "Science"}]})
    assert created.status_code == HTTPStatus.CREATED
    category_id = created.json()["id"]

    # SUBCATEGORY under it
    sub = client.post(
        f"/categories/{category_id}/subcategories",
        json={"translations": [{"language_id": en, "name": "Physics"}]},
    )
    assert sub.status_code == HTTPStatus.CREATED
    sub_category_id = sub.json()["id"]

    # ITEMS under the subcategory
    item_ids = []
    for name in ("Optics", "Mechanics", "Acoustics"):
        resp = client.post(
            "/items",
            json={"sub_category_ids": [sub_category_id], "translations": [{"language_id": en, "name": name}]},
        )
        assert resp.status_code == HTTPStatus.CREATED
        item_ids.append(resp.json()["id"])

    page = client.get(f"/subcategories/{sub_category_id}/items", params={"page": 0, "size": 10}).json()
    assert sorted(i["id"] for i in page["items"]) == sorted(item_ids)
    assert {i["name"] for i in page["items"]} == {"Optics", "Mechanics", "Acoustics"}

    # TRANSLATE each level into Tamil
    for path, name in (
        (f"/categories/{category_id}", "அறிவியல்"),
        (f"/subcategories/{sub_category_id}", "இயற்பியல்"),
        (f"/items/{item_ids[0]}", "ஒளியியல்"),
    ):
        resp = client.put(path, json={"translations": [{"language_id": ta, "name": name}]})
        assert resp.status_code == HTTPStatus.OK
        assert resp.json() is True

    assert client.get(f"/categories/{category_id}", params={"lang": "ta"}).json()["name"] == "அறிவியல்"
    assert client.get(f"/categories/{category_id}", params={"lang": "en"}).json()["name"] == "Science"
    children = client.get(f"/categories/{category_id}/subcategories", params={"lang": "ta"}).json()
    assert [c["name"] for c in children] == ["இயற்பியல்"]
    page_ta = client.get(f"/subcategories/{sub_category_id}/items", params={"lang": "ta"}).json()
    names = {i["id"]: i["name"] for i in page_ta["items"]}
    assert names[item_ids[0]] == "ஒளியியல்"
    # Fallback to the default locale where Tamil is missing
    assert names[item_ids[1]] == "Mechanics"

    # DELETE the root: subcategories go with it, items stay but lose the link
    assert client.delete(f"/categories/{category_id}").json() is True
    assert client.get(f"/subcategories/{sub_category_id}").status_code == HTTPStatus.NOT_FOUND
    for item_id in item_ids:
        item = client.get(f"/items/{item_id}")
        assert item.status_code == HTTPStatus.OK
        assert item.json()["sub_category_ids"] == []
