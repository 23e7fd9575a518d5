from fastapi.testclient import TestClient


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_list_products_empty(client: TestClient):
    response = client.get("/api/products")
    assert response.status_code == 200
    assert response.json() == {"success": True, "count": 0, "products": []}


def test_list_products_ordered_by_name(seeded_client: TestClient):
    data = seeded_client.get("/api/products").json()
    names = [p["name"] for p in data["products"]]
    assert data["count"] == 6
    assert names == sorted(names)


def test_name_filter_is_case_insensitive_substring(seeded_client: TestClient):
    data = seeded_client.get("/api/products", params={"name": "LOTION"}).json()
    assert [p["name"] for p in data["products"]] == ["Body Lotion Smooth"]


def test_name_filter_wildcards_are_literal(seeded_client: TestClient):
    data = seeded_client.get("/api/products", params={"name": "%"}).json()
    assert data["count"] == 0


def test_type_and_category_filters(seeded_client: TestClient):
    by_type = seeded_client.get("/api/products", params={"type": "perfume"}).json()
    assert {p["category"] for p in by_type["products"]} == {"gucci", "victoria_secret"}

    by_category = seeded_client.get("/api/products", params={"category": "shampoo"}).json()
    assert [p["name"] for p in by_category["products"]] == ["Shampoo Pro"]


def test_filters_are_combined_with_and(seeded_client: TestClient):
    data = seeded_client.get("/api/products", params={"name": "plus", "type": "hair"}).json()
    assert [p["name"] for p in data["products"]] == ["Conditioner Plus"]

    data = seeded_client.get("/api/products", params={"name": "plus", "type": "skin"}).json()
    assert data["count"] == 0


def test_unknown_type_filter_rejected(client: TestClient):
    response = client.get("/api/products", params={"type": "shoes"})
    assert response.status_code == 422


def test_add_product(client: TestClient):
    payload = {
        "name": "Argan Oil",
        "type": "hair",
        "category": "hair_oil",
        "cost": 21.5,
        "sales_per_day": 4,
    }
    response = client.post("/api/products", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Product added successfully"
    product = data["product"]
    assert "id" in product
    assert product["category"] == "hair_oil"
    assert product["created_at"] is not None

    listed = client.get("/api/products").json()
    assert [p["id"] for p in listed["products"]] == [product["id"]]


def test_add_product_validation(client: TestClient):
    base = {"name": "X", "type": "hair", "category": "shampoo", "cost": 1, "sales_per_day": 1}

    assert client.post("/api/products", json={**base, "type": "shoes"}).status_code == 422
    assert client.post("/api/products", json={**base, "cost": -1}).status_code == 422
    assert client.post("/api/products", json={**base, "sales_per_day": -0.5}).status_code == 422
    missing = {k: v for k, v in base.items() if k != "category"}
    assert client.post("/api/products", json=missing).status_code == 422


def test_add_product_rejects_non_finite_numbers(client: TestClient):
    headers = {"Content-Type": "application/json"}
    for cost, sales in (("1e309", "1"), ("1", "1e309")):
        raw = f'{{"name": "Huge", "type": "hair", "category": "x", "cost": {cost}, "sales_per_day": {sales}}}'
        assert client.post("/api/products", content=raw, headers=headers).status_code == 422

    listed = client.get("/api/products")
    assert listed.status_code == 200
    assert listed.json()["count"] == 0
    assert client.get("/api/costs/average").status_code == 200


def test_update_product_rejects_non_finite_numbers(seeded_client: TestClient):
    response = seeded_client.put(
        "/api/products/1",
        content='{"sales_per_day": 1e309}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert seeded_client.get("/api/sales/weekly").status_code == 200


def test_update_product_partial(seeded_client: TestClient):
    gucci = next(p for p in seeded_client.get("/api/products").json()["products"] if p["name"] == "Gucci Bloom")

    response = seeded_client.put(f"/api/products/{gucci['id']}", json={"sales_per_day": 11})

    assert response.status_code == 200
    updated = response.json()["product"]
    assert updated["sales_per_day"] == 11
    assert updated["cost"] == gucci["cost"]
    assert updated["name"] == "Gucci Bloom"


def test_update_without_fields_is_rejected(seeded_client: TestClient):
    response = seeded_client.put("/api/products/1", json={})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NoFieldsToUpdateError"
    assert body["error"]["message"] == "No fields to update"


def test_update_missing_product(client: TestClient):
    response = client.put("/api/products/999", json={"name": "Ghost"})
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Product not found"


def test_delete_product(seeded_client: TestClient):
    target = seeded_client.get("/api/products", params={"name": "moisturizer"}).json()["products"][0]

    response = seeded_client.delete(f"/api/products/{target['id']}")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Product deleted successfully"
    assert data["deleted_product"]["name"] == "Moisturizer Daily"

    assert seeded_client.delete(f"/api/products/{target['id']}").status_code == 404
    assert seeded_client.get("/api/products").json()["count"] == 5


def test_root_serves_ui(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert "Shop Manager" in response.text



def test_ui_script_escapes_rendered_values(client: TestClient):
    script = client.get("/static/app.js").text
    assert "const escapeHTML" in script
    assert "escapeHTML(err.message)" in script
    assert "c instanceof Raw ? c.html : escapeHTML(c)" in script

def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert "X-Request-ID" in response.headers
