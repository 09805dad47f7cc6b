import pytest

BASE = "/api/public/categories"
ADMIN = "/api/admin/categories"


def create(client, name):
    response = client.post(BASE, json={"categoryName": name})
    assert response.status_code == 201, response.text
    return response.json()


def test_list_empty_store(client):
    response = client.get(BASE)

    assert response.status_code == 200
    assert response.json() == {
        "content": [],
        "pageNumber": 0,
        "pageSize": 50,
        "totalElements": 0,
        "totalPages": 0,
        "lastPage": True,
    }


def test_create_then_list_round_trip(client):
    created = create(client, "Shoes")

    body = client.get(BASE, params={"pageNumber": 0, "pageSize": 5}).json()

    assert body["content"] == [{"categoryId": created["categoryId"], "categoryName": "Shoes"}]
    assert body["totalElements"] == 1
    assert body["totalPages"] == 1


def test_create_ignores_body_id(client):
    created = client.post(BASE, json={"categoryId": 42, "categoryName": "Shoes"}).json()

    assert created["categoryId"] != 42


def test_list_paging_and_sorting(client):
    for name in ("Charlie cat", "Alpha cat", "Bravo cat"):
        create(client, name)

    body = client.get(
        BASE, params={"pageNumber": 0, "pageSize": 2, "sortBy": "categoryName", "sortOrder": "ASC"}
    ).json()

    assert [c["categoryName"] for c in body["content"]] == ["Alpha cat", "Bravo cat"]
    assert body["totalPages"] == 2
    assert body["lastPage"] is False


def test_list_unrecognised_sort_order_is_descending(client):
    first = create(client, "First one")
    second = create(client, "Second one")

    body = client.get(BASE, params={"sortOrder": "whatever"}).json()

    assert [c["categoryId"] for c in body["content"]] == [second["categoryId"], first["categoryId"]]


@pytest.mark.parametrize(
    "params,field",
    [({"pageNumber": -1}, "pageNumber"), ({"pageSize": 0}, "pageSize"), ({"sortBy": "nope"}, "sortBy")],
)
def test_list_bad_parameters(client, params, field):
    response = client.get(BASE, params=params)

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidArgument"
    assert response.json()["field"] == field


def test_list_non_integer_page_number(client):
    response = client.get(BASE, params={"pageNumber": "abc"})

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidArgument"
    assert response.json()["field"] == "pageNumber"


def test_create_duplicate_is_conflict(client):
    create(client, "Shoes")

    response = client.post(BASE, json={"categoryName": "Shoes"})

    assert response.status_code == 409
    assert response.json()["error"] == "Conflict"
    assert response.json()["message"] == "Category with the name Shoes already exists !!!"


@pytest.mark.parametrize("payload", [{"categoryName": "Shoe"}, {}])
def test_create_invalid_name(client, payload):
    response = client.post(BASE, json=payload)

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"
    assert response.json()["field"] == "categoryName"


def test_get_single_category(client):
    created = create(client, "Shoes")

    response = client.get(f"{BASE}/{created['categoryId']}")

    assert response.status_code == 200
    assert response.json() == created


def test_update_full_replace(client):
    created = create(client, "Shoes")

    response = client.put(f"{BASE}/{created['categoryId']}", json={"categoryName": "Sneakers"})

    assert response.status_code == 200
    assert response.json() == {"categoryId": created["categoryId"], "categoryName": "Sneakers"}
    assert client.get(f"{BASE}/{created['categoryId']}").json()["categoryName"] == "Sneakers"


def test_update_missing_is_not_found(client):
    response = client.put(f"{BASE}/9999", json={"categoryName": "Sneakers"})

    assert response.status_code == 404
    assert response.json()["error"] == "NotFound"


def test_delete_missing_is_not_found(client):
    response = client.delete(f"{ADMIN}/9999")

    assert response.status_code == 404
    assert response.json() == {
        "error": "NotFound",
        "message": "Category not found with categoryId: 9999",
        "field": "categoryId",
        "value": 9999,
    }


def test_delete_cascades_products(client):
    created = create(client, "Shoes")
    category_id = created["categoryId"]
    for name in ("Boot", "Sandal"):
        response = client.post(f"{ADMIN}/{category_id}/products", json={"productName": name, "quantity": 3})
        assert response.status_code == 201
    assert len(client.get(f"{BASE}/{category_id}/products").json()) == 2

    response = client.delete(f"{ADMIN}/{category_id}")

    assert response.status_code == 200
    assert response.json() == created
    assert client.get(f"{BASE}/{category_id}/products").status_code == 404
    assert client.get(BASE).json()["totalElements"] == 0


def test_product_for_missing_category_is_not_found(client):
    response = client.post(f"{ADMIN}/9999/products", json={"productName": "Boot"})

    assert response.status_code == 404


def test_list_without_sort_order_is_descending(client):
    first = create(client, "First one")
    second = create(client, "Second one")

    body = client.get(BASE).json()

    assert [c["categoryId"] for c in body["content"]] == [second["categoryId"], first["categoryId"]]


def test_list_page_number_beyond_64_bit_offset(client):
    response = client.get(BASE, params={"pageNumber": 9223372036854775808, "pageSize": 1})

    assert response.status_code == 400
    assert response.json()["error"] == "InvalidArgument"
    assert response.json()["field"] == "pageNumber"


def test_create_name_longer_than_column(client):
    response = client.post(BASE, json={"categoryName": "x" * 150})

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"
    assert client.get(BASE).json()["totalElements"] == 0
