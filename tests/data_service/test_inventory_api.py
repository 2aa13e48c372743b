import pytest

from shared.core.config import settings


@pytest.fixture
def product(data_client):
    return data_client.post("/data/productos", json={"name": "Laptop", "price": 100}).json()


def create_inventory(client, product_id, quantity, min_stock=None):
    r = client.post("/data/inventario", json={
        "product_id": product_id, "quantity": quantity, "min_stock": min_stock})
    assert r.status_code == 201
    return r.json()


def test_create_inventory_stamps_timestamp_and_default_threshold(data_client, product):
    inventory = create_inventory(data_client, product["id"], 5)
    assert inventory["updated_at"] is not None
    assert inventory["min_stock"] == settings.DEFAULT_MIN_STOCK
    assert inventory["product"]["name"] == "Laptop"


def test_update_inventory_restamps_timestamp(data_client, product):
    inventory = create_inventory(data_client, product["id"], 5, 2)
    r = data_client.put(f"/data/inventario/{inventory['id']}", json={
        "product_id": product["id"], "quantity": 8, "min_stock": 3})
    assert r.status_code == 200
    body = r.json()
    assert body["quantity"] == 8
    assert body["min_stock"] == 3
    assert body["updated_at"] is not None


def test_low_stock_uses_quantity_at_or_below_threshold(data_client):
    ids = []
    for name, quantity, min_stock in [("A", 3, 10), ("B", 10, 10), ("C", 11, 10)]:
        p = data_client.post("/data/productos", json={"name": name, "price": 1}).json()
        ids.append(create_inventory(data_client, p["id"], quantity, min_stock)["id"])

    r = data_client.get("/data/inventario/stock-bajo")
    assert r.status_code == 200
    assert [i["id"] for i in r.json()] == ids[:2]


def test_out_of_stock_lists_zero_quantity(data_client):
    p1 = data_client.post("/data/productos", json={"name": "A", "price": 1}).json()
    p2 = data_client.post("/data/productos", json={"name": "B", "price": 1}).json()
    empty = create_inventory(data_client, p1["id"], 0)
    create_inventory(data_client, p2["id"], 4)

    assert [i["id"] for i in data_client.get("/data/inventario/sin-stock").json()] == [empty["id"]]


def test_inventory_by_product_and_quantity_update(data_client, product):
    create_inventory(data_client, product["id"], 5)

    r = data_client.get(f"/data/inventario/producto/{product['id']}")
    assert r.status_code == 200
    assert r.json()["quantity"] == 5

    r = data_client.patch(f"/data/inventario/producto/{product['id']}/cantidad", json={"quantity": 12})
    assert r.status_code == 200
    assert r.json()["quantity"] == 12


def test_negative_quantity_update_is_rejected(data_client, product):
    create_inventory(data_client, product["id"], 5)
    r = data_client.patch(f"/data/inventario/producto/{product['id']}/cantidad", json={"quantity": -1})
    assert r.status_code == 409
    assert r.json() == {"error": "quantity cannot be negative"}


def test_sufficient_stock(data_client, product):
    create_inventory(data_client, product["id"], 5)
    url = f"/data/inventario/producto/{product['id']}/stock-suficiente"
    assert data_client.get(url, params={"cantidad": 5}).json() is True
    assert data_client.get(url, params={"cantidad": 6}).json() is False
    assert data_client.get("/data/inventario/producto/999/stock-suficiente",
                           params={"cantidad": 1}).json() is False


def test_missing_inventory_returns_404(data_client):
    assert data_client.get("/data/inventario/5").status_code == 404
    assert data_client.get("/data/inventario/producto/5").status_code == 404
    assert data_client.put("/data/inventario/5", json={"quantity": 1}).status_code == 404
    assert data_client.delete("/data/inventario/5").status_code == 404


def test_deleting_product_leaves_inventory_without_product(data_client, product):
    inventory = create_inventory(data_client, product["id"], 5)
    assert data_client.delete(f"/data/productos/{product['id']}").status_code == 204

    body = data_client.get(f"/data/inventario/{inventory['id']}").json()
    assert body["product_id"] is None
    assert body["product"] is None


def test_delete_inventory(data_client, product):
    inventory = create_inventory(data_client, product["id"], 5)
    assert data_client.delete(f"/data/inventario/{inventory['id']}").status_code == 204
    assert data_client.get("/data/inventario").json() == []
