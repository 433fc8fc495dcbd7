import pytest

NEW_SUPPLIER = {
    "name": "Nordic Metals",
    "category": "Raw Materials",
    "status": "active",
    "location": "Oslo, Norway",
    "contactName": "Ingrid Berg",
    "contactEmail": "ingrid@nordicmetals.no",
    "contactPhone": "+47 22 00 00 00",
    "ordersThisMonth": 4,
    "onTimeDelivery": 91.5,
    "totalSpend": "20400.50",
    "productCategories": 1,
    "logoInitials": "NM",
    "logoColor": "teal",
}

def test_list_suppliers(client):
    r = client.get("/api/suppliers")
    assert r.status_code == 200
    names = [s["name"] for s in r.json()]
    assert names == ["Acme Corp", "TechCore Inc", "Global Logistics", "Stellar Systems"]

def test_get_supplier_uses_camel_case_fields(client):
    body = client.get("/api/suppliers/1").json()
    assert body["contactName"] == "John Reynolds"
    assert body["onTimeDelivery"] == 96.4
    assert body["totalSpend"] == 128450
    assert "contact_name" not in body

@pytest.mark.parametrize("path,status", [
    ("/api/suppliers/abc", 400),
    ("/api/suppliers/1_0", 400),
    ("/api/suppliers/%201", 400),
    ("/api/suppliers/1%20", 400),
    ("/api/suppliers/1.5", 400),
    ("/api/suppliers/999", 404),
])
def test_get_supplier_errors(client, path, status):
    r = client.get(path)
    assert r.status_code == status
    assert "message" in r.json()

def test_create_supplier(client):
    r = client.post("/api/suppliers", json=NEW_SUPPLIER)
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["id"] == 5
    assert body["totalSpend"] == 20400.5
    assert client.get("/api/suppliers/5").json()["name"] == "Nordic Metals"

def test_create_supplier_bad_status_is_400(client):
    r = client.post("/api/suppliers", json={**NEW_SUPPLIER, "status": "blacklisted"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["status"]

def test_partial_update_supplier(client):
    r = client.put("/api/suppliers/3", json={"status": "suspended"})
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "suspended"
    assert body["name"] == "Global Logistics"
    assert body["onTimeDelivery"] == 88.7

def test_update_supplier_errors(client):
    assert client.put("/api/suppliers/nope", json={"status": "active"}).status_code == 400
    assert client.put("/api/suppliers/42", json={"status": "active"}).status_code == 404
    assert client.put("/api/suppliers/1", json={"ordersThisMonth": "many"}).status_code == 400

def test_delete_supplier_then_get_is_404(client):
    assert client.delete("/api/suppliers/1").status_code == 204
    r = client.get("/api/suppliers/1")
    assert r.status_code == 404
    assert r.json() == {"message": "Supplier not found"}

def test_delete_supplier_keeps_its_orders(client):
    client.delete("/api/suppliers/1")
    orphans = [o for o in client.get("/api/orders").json() if o["supplierId"] == 1]
    assert len(orphans) == 3

def test_supplier_orders(client):
    r = client.get("/api/suppliers/1/orders")
    assert r.status_code == 200
    assert [o["orderId"] for o in r.json()] == ["#ORD-7352", "#ORD-7345", "#ORD-7338"]

def test_supplier_orders_empty_list_for_supplier_without_orders(client):
    created = client.post("/api/suppliers", json=NEW_SUPPLIER).json()
    r = client.get(f"/api/suppliers/{created['id']}/orders")
    assert r.status_code == 200
    assert r.json() == []

def test_supplier_orders_unknown_supplier_is_404(client):
    r = client.get("/api/suppliers/999/orders")
    assert r.status_code == 404
    assert client.get("/api/suppliers/x/orders").status_code == 400

def test_supplier_orders_rejects_loose_integer_forms(client):
    # "1_0" must not be read as supplier 10
    r = client.get("/api/suppliers/1_0/orders")
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid supplier ID"}
