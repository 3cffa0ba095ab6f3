"""HTTP surface for /api/customers: status codes and camelCase payloads."""

NEW_CUSTOMER = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
    "phone": "+441234567",
}


async def test_create_returns_201_with_camel_case_fields(client):
    res = await client.post("/api/customers", json=NEW_CUSTOMER)

    assert res.status_code == 201
    body = res.json()
    assert body["firstName"] == "Ada"
    assert body["lastName"] == "Lovelace"
    assert body["balance"] == 0
    assert body["address"] is None
    assert {"id", "createdAt", "updatedAt"} <= body.keys()


async def test_create_invalid_email_is_validation_failure(client):
    res = await client.post("/api/customers", json={**NEW_CUSTOMER, "email": "not-an-email"})

    assert res.status_code == 422
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_FAILURE"
    assert any("email" in d["field"] for d in error["details"])


async def test_create_missing_name_is_validation_failure(client):
    res = await client.post("/api/customers", json={"first_name": "Ada"})

    assert res.status_code == 422
    assert res.json()["error"]["code"] == "VALIDATION_FAILURE"


async def test_get_by_id(client):
    created = (await client.post("/api/customers", json=NEW_CUSTOMER)).json()

    res = await client.get(f"/api/customers/{created['id']}")

    assert res.status_code == 200
    assert res.json()["email"] == "ada@example.com"


async def test_get_missing_returns_404(client):
    res = await client.get("/api/customers/4242")

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


async def test_put_updates_only_sent_fields(client):
    created = (await client.post("/api/customers", json=NEW_CUSTOMER)).json()

    res = await client.put(f"/api/customers/{created['id']}", json={"notes": "vip"})

    assert res.status_code == 200
    body = res.json()
    assert body["notes"] == "vip"
    assert body["firstName"] == "Ada"
    assert body["phone"] == "+441234567"


async def test_put_missing_returns_404(client):
    res = await client.put("/api/customers/4242", json={"notes": "vip"})

    assert res.status_code == 404


async def test_delete_by_query_param(client):
    created = (await client.post("/api/customers", json=NEW_CUSTOMER)).json()

    res = await client.delete("/api/customers", params={"id": created["id"]})

    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Customer deleted successfully"}
    assert (await client.get(f"/api/customers/{created['id']}")).status_code == 404
    assert (await client.delete("/api/customers", params={"id": created["id"]})).status_code == 404


async def test_list_includes_order_totals(client, seed_order):
    first = (await client.post("/api/customers", json=NEW_CUSTOMER)).json()
    second = (await client.post("/api/customers", json={**NEW_CUSTOMER, "first_name": "Grace"})).json()
    await seed_order(first["id"], 12.5)

    res = await client.get("/api/customers")

    assert res.status_code == 200
    rows = res.json()
    assert [r["id"] for r in rows] == [second["id"], first["id"]]
    assert rows[1]["name"] == "Ada Lovelace"
    assert rows[1]["totalOrders"] == 1
    assert rows[1]["totalSpent"] == 12.5
    assert rows[0]["totalOrders"] == 0
    assert rows[0]["lastOrderDate"] is None


async def test_page_endpoint(client):
    for i in range(3):
        await client.post("/api/customers", json={**NEW_CUSTOMER, "first_name": f"C{i}"})

    res = await client.get("/api/customers/page", params={"page": 1})

    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["hasPrev"] is False


async def test_customer_stats_endpoint(client, seed_order):
    created = (await client.post("/api/customers", json=NEW_CUSTOMER)).json()
    await seed_order(created["id"], 4.0)

    res = await client.get(f"/api/customers/{created['id']}/stats")

    assert res.status_code == 200
    assert res.json()["totalSpent"] == 4.0


async def test_out_of_range_id_returns_404_on_every_route(client):
    huge = 2**63

    assert (await client.get(f"/api/customers/{huge}")).status_code == 404
    assert (await client.get(f"/api/customers/{huge}/stats")).status_code == 404
    res = await client.put(f"/api/customers/{huge}", json={"notes": "vip"})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"
    assert (await client.delete("/api/customers", params={"id": huge})).status_code == 404


async def test_put_invalid_email_is_validation_failure(client):
    created = (await client.post("/api/customers", json=NEW_CUSTOMER)).json()

    res = await client.put(f"/api/customers/{created['id']}", json={"email": "not-an-email"})

    assert res.status_code == 422
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_FAILURE"
    assert any("email" in d["field"] for d in error["details"])
    assert (await client.get(f"/api/customers/{created['id']}")).json()["email"] == "ada@example.com"
