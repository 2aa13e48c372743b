def create_category(client, name="Electronics"):
    r = client.post("/data/categorias", json={"name": name, "description": "Devices"})
    assert r.status_code == 201
    return r.json()


def create_product(client, name="Laptop HP", price=1299.99, category_id=None):
    return client.post("/data/productos", json={
        "name": name,
        "description": "Laptop 16GB RAM",
        "price": price,
        "category_id": category_id,
    })


def test_create_product_persists_with_nested_category(data_client):
    category = create_category(data_client)
    r = create_product(data_client, category_id=category["id"])
    assert r.status_code == 201
    body = r.json()
    assert body["id"] > 0
    assert body["name"] == "Laptop HP"
    assert body["price"] == 1299.99
    assert body["category"]["name"] == "Electronics"

    r2 = data_client.get(f"/data/productos/{body['id']}")
    assert r2.status_code == 200
    assert r2.json()["name"] == "Laptop HP"


def test_create_duplicate_product_name_is_case_insensitive(data_client):
    assert create_product(data_client, name="Mouse").status_code == 201
    r = create_product(data_client, name="MOUSE")
    assert r.status_code == 409
    assert r.json() == {"error": "Product already registered: MOUSE"}


def test_get_missing_product_returns_404(data_client):
    r = data_client.get("/data/productos/999")
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found with ID: 999"}


def test_list_products(data_client):
    create_product(data_client, name="A")
    create_product(data_client, name="B")
    r = data_client.get("/data/productos")
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["A", "B"]


def test_update_product_overwrites_whole_record(data_client):
    category = create_category(data_client)
    product = create_product(data_client, category_id=category["id"]).json()

    r = data_client.put(f"/data/productos/{product['id']}", json={
        "name": "Laptop HP Pro",
        "price": 1500,
    })
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == product["id"]
    assert body["name"] == "Laptop HP Pro"
    assert body["description"] is None
    assert body["category_id"] is None
    assert body["price"] == 1500


def test_update_missing_product_returns_404(data_client):
    r = data_client.put("/data/productos/999", json={"name": "X", "price": 10})
    assert r.status_code == 404


def test_update_product_to_existing_name_returns_409(data_client):
    create_product(data_client, name="A")
    b = create_product(data_client, name="B").json()
    r = data_client.put(f"/data/productos/{b['id']}", json={"name": "A", "price": 10})
    assert r.status_code == 409


def test_delete_product(data_client):
    product = create_product(data_client).json()
    r = data_client.delete(f"/data/productos/{product['id']}")
    assert r.status_code == 204
    assert r.content == b""
    assert data_client.get(f"/data/productos/{product['id']}").status_code == 404


def test_delete_missing_product_returns_404(data_client):
    r = data_client.delete("/data/productos/999")
    assert r.status_code == 404


def test_products_by_category_name(data_client):
    electronics = create_category(data_client, "Electronics")
    office = create_category(data_client, "Office")
    create_product(data_client, name="Laptop", category_id=electronics["id"])
    create_product(data_client, name="Stapler", category_id=office["id"])

    r = data_client.get("/data/productos/categoria/Electronics")
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Laptop"]

    assert data_client.get("/data/productos/categoria/Garden").json() == []


def test_create_product_with_unknown_category_returns_404(data_client):
    r = create_product(data_client, category_id=42)
    assert r.status_code == 404
    assert r.json() == {"error": "Category not found with ID: 42"}


def test_negative_price_is_rejected_by_schema(data_client):
    r = create_product(data_client, price=-1)
    assert r.status_code == 422
    assert "error" in r.json()


def test_update_product_to_existing_name_in_other_case_returns_409(data_client):
    create_product(data_client, name="Laptop")
    mouse = create_product(data_client, name="Mouse").json()

    r = data_client.put(f"/data/productos/{mouse['id']}", json={"name": "laptop", "price": 10})

    assert r.status_code == 409
    assert r.json() == {"error": "Product already registered: laptop"}
    assert [p["name"] for p in data_client.get("/data/productos").json()] == ["Laptop", "Mouse"]


def test_update_product_may_change_case_of_its_own_name(data_client):
    mouse = create_product(data_client, name="Mouse").json()

    r = data_client.put(f"/data/productos/{mouse['id']}", json={"name": "MOUSE", "price": 10})

    assert r.status_code == 200
    assert r.json()["name"] == "MOUSE"
