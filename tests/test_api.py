import httpx

from storefront.models.cart import MAX_LINE_QUANTITY
from storefront.routes.deps import SESSION_HEADER

from tests.fakes import connection_refused


def start_session(client) -> dict[str, str]:
    response = client.get("/api/cart")
    return {SESSION_HEADER: response.headers[SESSION_HEADER]}


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_new_session_gets_empty_cart(client) -> None:
    response = client.get("/api/cart")

    assert response.status_code == 200
    assert response.headers[SESSION_HEADER]
    assert response.json()["cart"]["lines"] == []
    assert response.json()["line_count"] == 0


def test_list_products_returns_catalog(client) -> None:
    response = client.get("/api/products")

    data = response.json()
    assert [p["id"] for p in data["products"]] == ["1", "2"]
    assert data["total"] == 2
    assert data["from_search"] is False


def test_search_replaces_listing_for_session(client) -> None:
    headers = start_session(client)

    searched = client.get("/api/products", params={"query": "shoes"}, headers=headers).json()
    listed = client.get("/api/products", headers=headers).json()

    assert [p["id"] for p in searched["products"]] == ["api-0", "api-1", "api-2"]
    assert {p["name"] for p in searched["products"]} == {"shoes"}
    assert listed["products"] == searched["products"]
    assert listed["from_search"] is True


def test_search_results_are_per_session(client) -> None:
    first = start_session(client)
    second = start_session(client)

    client.get("/api/products", params={"query": "shoes"}, headers=first)

    assert [p["id"] for p in client.get("/api/products", headers=second).json()["products"]] == ["1", "2"]


def test_failed_search_keeps_listing(client, search_api) -> None:
    search_api.handler = connection_refused

    response = client.get("/api/products", params={"query": "shoes"})

    assert response.status_code == 200
    assert [p["id"] for p in response.json()["products"]] == ["1", "2"]


def test_invalid_thumbnail_keeps_listing(client, search_api) -> None:
    headers = start_session(client)
    client.get("/api/products", params={"query": "shoes"}, headers=headers)
    search_api.handler = lambda request: httpx.Response(200, json={"results": [{"urls": {"small": 12}}]})

    response = client.get("/api/products", params={"query": "hats"}, headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data["products"]] == ["api-0", "api-1", "api-2"]
    assert {p["name"] for p in data["products"]} == {"shoes"}
    assert data["from_search"] is True


def test_get_product(client) -> None:
    headers = start_session(client)
    assert client.get("/api/products/1", headers=headers).json()["name"] == "Mug"
    assert client.get("/api/products/api-0", headers=headers).status_code == 404

    client.get("/api/products", params={"query": "shoes"}, headers=headers)

    assert client.get("/api/products/api-0", headers=headers).json()["name"] == "shoes"


def test_add_to_cart(client) -> None:
    headers = start_session(client)

    response = client.post("/api/cart/items", json={"product_id": "1"}, headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert data["line_count"] == 1
    assert data["cart"]["lines"][0]["quantity"] == 1
    assert data["message"] == "Added Mug to cart"


def test_add_twice_keeps_single_line(client) -> None:
    headers = start_session(client)
    client.post("/api/cart/items", json={"product_id": "1"}, headers=headers)

    response = client.post("/api/cart/items", json={"product_id": "1"}, headers=headers)

    assert response.json()["line_count"] == 1
    assert response.json()["cart"]["lines"][0]["quantity"] == 1


def test_add_unknown_product(client) -> None:
    response = client.post("/api/cart/items", json={"product_id": "nope"})

    assert response.status_code == 404


def test_update_quantity_limit(client) -> None:
    headers = start_session(client)
    client.post("/api/cart/items", json={"product_id": "1"}, headers=headers)
    for _ in range(MAX_LINE_QUANTITY - 1):
        assert client.patch("/api/cart/items/1", json={"delta": 1}, headers=headers).status_code == 200

    response = client.patch("/api/cart/items/1", json={"delta": 1}, headers=headers)

    assert response.status_code == 409
    assert "Limit Exceeded" in response.json()["detail"]
    cart = client.get("/api/cart", headers=headers).json()["cart"]
    assert cart["lines"][0]["quantity"] == MAX_LINE_QUANTITY


def test_decrement_floor(client) -> None:
    headers = start_session(client)
    client.post("/api/cart/items", json={"product_id": "1"}, headers=headers)

    client.patch("/api/cart/items/1", json={"delta": -1}, headers=headers)
    response = client.patch("/api/cart/items/1", json={"delta": -1}, headers=headers)

    assert response.status_code == 200
    assert response.json()["cart"]["lines"][0]["quantity"] == 0
    assert response.json()["line_count"] == 1


def test_update_quantity_errors(client) -> None:
    headers = start_session(client)
    client.post("/api/cart/items", json={"product_id": "1"}, headers=headers)

    assert client.patch("/api/cart/items/2", json={"delta": 1}, headers=headers).status_code == 404
    assert client.patch("/api/cart/items/1", json={"delta": 0}, headers=headers).status_code == 422
    assert client.patch("/api/cart/items/1", json={"delta": 3}, headers=headers).status_code == 422


def test_bill(client) -> None:
    headers = start_session(client)
    client.post("/api/cart/items", json={"product_id": "1"}, headers=headers)
    client.post("/api/cart/items", json={"product_id": "2"}, headers=headers)
    client.patch("/api/cart/items/1", json={"delta": 1}, headers=headers)
    client.patch("/api/cart/items/2", json={"delta": 1}, headers=headers)
    client.patch("/api/cart/items/2", json={"delta": 1}, headers=headers)

    bill = client.get("/api/cart/bill", headers=headers).json()

    assert [(line["quantity"], float(line["line_total"])) for line in bill["lines"]] == [(2, 200.0), (3, 150.0)]
    assert float(bill["grand_total"]) == 350.0


def test_empty_bill(client) -> None:
    bill = client.get("/api/cart/bill").json()

    assert bill["lines"] == []
    assert float(bill["grand_total"]) == 0


def test_contact(client, email_api) -> None:
    response = client.post(
        "/api/contact",
        json={"name": "Ada", "email": "ada@example.com", "subject": "Hi", "message": "Hello"},
    )

    assert response.status_code == 202
    assert len(email_api.requests) == 1


def test_contact_delivery_failure(client, email_api) -> None:
    email_api.handler = lambda request: httpx.Response(500, text="boom")

    response = client.post(
        "/api/contact",
        json={"name": "Ada", "email": "ada@example.com", "subject": "Hi", "message": "Hello"},
    )

    assert response.status_code == 502


def test_contact_validation(client, email_api) -> None:
    response = client.post("/api/contact", json={"name": "Ada", "email": "nope"})

    assert response.status_code == 422
    assert email_api.requests == []
