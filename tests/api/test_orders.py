
NEW_ORDER = {
    "orderId": "#ORD-7400",
    "supplierId": 2,
    "date": "2023-08-20",
    "time": "08:05 AM",
    "status": "pending",
    "amount": 999.99,
    "products": "Heat Sinks (x40)",
}

def test_list_and_get_orders(client):
    orders = client.get("/api/orders").json()
    assert len(orders) == 6
    first = client.get("/api/orders/1").json()
    assert first["orderId"] == "#ORD-7352"
    assert first["date"] == "2023-08-12"
    assert first["amount"] == 12480

def test_create_order(client):
    r = client.post("/api/orders", json=NEW_ORDER)
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["id"] == 7
    assert body["amount"] == 999.99
    assert body["status"] == "pending"

def test_create_order_for_unknown_supplier_is_accepted(client):
    r = client.post("/api/orders", json={**NEW_ORDER, "supplierId": 12345})
    assert r.status_code == 201

def test_create_order_bad_date_is_400(client):
    r = client.post("/api/orders", json={**NEW_ORDER, "date": "yesterday"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["date"]

def test_duplicate_order_id(client, lax_client):
    dup = {**NEW_ORDER, "orderId": "#ORD-7352"}
    assert client.post("/api/orders", json=dup).status_code == 409
    assert lax_client.post("/api/orders", json=dup).status_code == 201

def test_status_transitions_are_not_guarded(client):
    r = client.put("/api/orders/1", json={"status": "pending"})
    assert r.status_code == 200
    assert r.json()["status"] == "pending"
    assert r.json()["products"] == "Microprocessors (x200), Circuit Boards (x50)"

def test_update_order_errors(client):
    assert client.put("/api/orders/1.5", json={}).status_code == 400
    assert client.put("/api/orders/77", json={"status": "delivered"}).status_code == 404
    assert client.put("/api/orders/1", json={"status": "lost"}).status_code == 400

def test_rename_order_to_existing_order_id_is_409(client):
    r = client.put("/api/orders/2", json={"orderId": "#ORD-7352"})
    assert r.status_code == 409
    assert client.get("/api/orders/2").json()["orderId"] == "#ORD-7351"

def test_delete_order(client):
    assert client.delete("/api/orders/6").status_code == 204
    assert client.get("/api/orders/6").status_code == 404
    assert len(client.get("/api/suppliers/1/orders").json()) == 2
