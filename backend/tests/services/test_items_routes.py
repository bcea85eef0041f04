"""Item Routes: derived totals, owner listings, search and parent resolution.

Invariants:
    - totalAmount == baseAmount - discount on create and update
    - Client-supplied totalAmount is ignored
    - GET /items/search answers a bare array, case-insensitive substring match
    - Update replaces: omitted update fields come back absent
"""

from uuid import uuid4

from tests.services.payloads import API, item_payload


async def _create_item(client, **kwargs) -> dict:
    model_id = kwargs.pop("model_id", str(uuid4()))
    res = await client.post(f"{API}/items", json=item_payload(model_id, **kwargs))
    assert res.status_code == 201
    return res.json()["data"]


async def test_create_item_computes_total_amount(client, category):
    res = await client.post(f"{API}/items", json=item_payload(category["id"]))

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Item created successfully"
    assert body["data"]["totalAmount"] == 90
    assert body["data"]["onModel"] == "Category"
    assert body["data"]["modelId"] == category["id"]


async def test_create_item_ignores_client_total(client):
    item = await _create_item(client, totalAmount=5000)
    assert item["totalAmount"] == 90


async def test_create_item_allows_discount_above_base(client):
    item = await _create_item(client, baseAmount=10, discount=25)
    assert item["totalAmount"] == -15


async def test_create_item_rejects_unknown_on_model(client):
    res = await client.post(
        f"{API}/items", json=item_payload(str(uuid4()), on_model="Brand"),
    )

    assert res.status_code == 400
    assert res.json()["message"].startswith("onModel:")


async def test_list_items(client):
    item = await _create_item(client)

    res = await client.get(f"{API}/items")

    assert res.status_code == 200
    assert res.json()["message"] == "Items found successfully"
    assert [i["id"] for i in res.json()["data"]] == [item["id"]]


async def test_list_items_by_category_and_subcategory(client, category, subcategory):
    in_category = await _create_item(
        client, model_id=category["id"], name="Rye Loaf",
    )
    in_subcategory = await _create_item(
        client, model_id=subcategory["id"], on_model="Subcategory", name="Baguette",
    )

    by_category = await client.get(f"{API}/items/category/{category['id']}")
    by_subcategory = await client.get(
        f"{API}/items/subcategory/{subcategory['id']}",
    )

    assert [i["id"] for i in by_category.json()["data"]] == [in_category["id"]]
    assert [i["id"] for i in by_subcategory.json()["data"]] == [in_subcategory["id"]]


async def test_items_by_subcategory_does_not_match_category_tag(client, category):
    await _create_item(client, model_id=category["id"])

    res = await client.get(f"{API}/items/subcategory/{category['id']}")

    assert res.status_code == 200
    assert res.json()["data"] == []


async def test_search_items_returns_bare_array(client):
    cake = await _create_item(client, name="Chocolate Cake")
    await _create_item(client, name="Cupcake")
    await _create_item(client, name="Baguette")

    res = await client.get(f"{API}/items/search", params={"name": "CAKE"})

    assert res.status_code == 200
    body = res.json()
    assert isinstance(body, list)
    assert {i["name"] for i in body} == {"Chocolate Cake", "Cupcake"}
    assert cake["id"] in {i["id"] for i in body}


async def test_search_items_treats_wildcards_literally(client):
    await _create_item(client, name="100% Rye")
    await _create_item(client, name="Rye Loaf")

    res = await client.get(f"{API}/items/search", params={"name": "%"})

    assert [i["name"] for i in res.json()] == ["100% Rye"]


async def test_search_items_without_name_returns_all(client):
    await _create_item(client, name="Cupcake")
    await _create_item(client, name="Baguette")

    res = await client.get(f"{API}/items/search")

    assert len(res.json()) == 2


async def test_get_item_by_id_and_name(client):
    item = await _create_item(client)

    by_id = await client.get(f"{API}/items/{item['id']}")
    by_name = await client.get(f"{API}/items/Chocolate Cake")

    assert by_id.json()["data"]["id"] == item["id"]
    assert by_name.json()["data"]["id"] == item["id"]
    assert by_id.json()["message"] == "Item found successfully"


async def test_get_item_not_found(client):
    by_id = await client.get(f"{API}/items/{uuid4()}")
    by_name = await client.get(f"{API}/items/Nothing Here")

    assert by_id.status_code == 404
    assert by_name.status_code == 404
    assert by_id.json() == {"statusCode": 404, "message": "Item not found."}


async def test_update_item_with_only_name_clears_description(client):
    item = await _create_item(client)

    res = await client.put(f"{API}/items/{item['id']}", json={"name": "X"})

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["name"] == "X"
    assert "description" not in data
    assert "baseAmount" not in data
    assert data["totalAmount"] == 0
    assert data["onModel"] == item["onModel"]
    assert data["modelId"] == item["modelId"]


async def test_update_item_recomputes_total(client):
    item = await _create_item(client)

    res = await client.put(
        f"{API}/items/{item['id']}", json={"baseAmount": 40, "discount": 15},
    )

    assert res.json()["message"] == "Item updated successfully"
    assert res.json()["data"]["totalAmount"] == 25


async def test_update_item_not_found(client):
    res = await client.put(f"{API}/items/{uuid4()}", json={"name": "X"})
    assert res.status_code == 404


async def test_item_parent_resolves_category(client, category):
    item = await _create_item(client, model_id=category["id"])

    res = await client.get(f"{API}/items/{item['id']}/parent")

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["onModel"] == "Category"
    assert data["category"]["id"] == category["id"]
    assert "subcategory" not in data


async def test_item_parent_resolves_subcategory(client, subcategory):
    item = await _create_item(
        client, model_id=subcategory["id"], on_model="Subcategory",
    )

    res = await client.get(f"{API}/items/{item['id']}/parent")

    data = res.json()["data"]
    assert data["onModel"] == "Subcategory"
    assert data["subcategory"]["categoryId"] == subcategory["categoryId"]


async def test_item_parent_dangling_reference_returns_404(client):
    item = await _create_item(client, model_id=str(uuid4()))

    res = await client.get(f"{API}/items/{item['id']}/parent")

    assert res.status_code == 404
    assert res.json()["message"] == "Category not found."


async def test_create_item_accepts_long_name_and_model_id(client):
    item = await _create_item(client, model_id="m" * 100, name="n" * 300)

    assert item["modelId"] == "m" * 100
    assert len(item["name"]) == 300


async def test_create_item_accepts_empty_model_id(client):
    item = await _create_item(client, model_id="")
    assert item["modelId"] == ""
