"""
Inventory endpoints: receiving, editing, stock counts, ordering, deletion
"""
import pytest

from conftest import as_naive_utc

BOOSTER_BOX = {
    "sku": "SV-151-BB",
    "catId": "sealed",
    "name": "Scarlet & Violet 151 Booster Box",
    "description": "36 packs",
    "price": 129.99,
    "units": 10,
    "unitsPerBox": 1,
    "boxesPerCase": 6,
    "supplier": "Card Distro Inc",
    "carrier": "UPS",
    "tracking": "1Z999AA10123456784",
    "inboundType": "case",
    "unitTypeRcv": "box",
    "invoiceCost": 100,
}


async def _create(client, **overrides):
    r = await client.post("/api/inventory", json={**BOOSTER_BOX, **overrides})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["success"] is True
    return body["id"]


async def _get(db, item_id):
    return await db.fetch_one("SELECT * FROM inventory WHERE id = :id", {"id": item_id})


@pytest.mark.asyncio
async def test_create_stores_receiving_details_and_unit_cost(client, db):
    item_id = await _create(client)
    assert item_id.isalnum()

    row = await _get(db, item_id)
    assert row["sku"] == "SV-151-BB"
    assert row["category_id"] == "sealed"
    assert row["units_per_box"] == 1
    assert row["boxes_per_case"] == 6
    assert row["supplier"] == "Card Distro Inc"
    assert row["tracking"] == "1Z999AA10123456784"
    assert row["inbound_type"] == "case"
    assert row["unit_type_rcv"] == "box"
    assert float(row["invoice_cost"]) == 100
    assert float(row["unit_cost"]) == 10
    assert row["last_mod"] is not None


@pytest.mark.asyncio
async def test_create_with_zero_units_has_zero_unit_cost(client, db):
    item_id = await _create(client, units=0)
    assert float((await _get(db, item_id))["unit_cost"]) == 0


@pytest.mark.asyncio
async def test_create_without_invoice_cost_has_zero_unit_cost(client, db):
    payload = {k: v for k, v in BOOSTER_BOX.items() if k != "invoiceCost"}
    r = await client.post("/api/inventory", json=payload)
    row = await _get(db, r.json()["id"])
    assert float(row["unit_cost"]) == 0
    assert row["invoice_cost"] is None


@pytest.mark.asyncio
async def test_update_changes_general_fields_only(client, db):
    item_id = await _create(client)
    before = await _get(db, item_id)

    r = await client.post(
        "/api/inventory",
        json={
            "id": item_id,
            "sku": "SV-151-BB",
            "catId": "sealed-en",
            "name": "151 Booster Box (EN)",
            "description": "36 packs, English",
            "price": 139.99,
            "units": 4,
            "unitsPerBox": 1,
            "boxesPerCase": 6,
            "supplier": "Someone Else",
            "invoiceCost": 999,
        },
    )
    assert r.status_code == 200
    assert r.json() == {"success": True}

    after = await _get(db, item_id)
    assert after["name"] == "151 Booster Box (EN)"
    assert after["category_id"] == "sealed-en"
    assert after["units"] == 4
    assert float(after["price"]) == pytest.approx(139.99)
    # write-once receiving fields
    assert after["supplier"] == "Card Distro Inc"
    assert float(after["invoice_cost"]) == 100
    assert float(after["unit_cost"]) == 10
    assert as_naive_utc(after["last_mod"]) >= as_naive_utc(before["last_mod"])


@pytest.mark.asyncio
async def test_stock_update_sets_units(client, db):
    item_id = await _create(client)

    r = await client.put("/api/inventory/stock", json={"id": item_id, "units": 42})
    assert r.status_code == 200
    assert r.json() == {"success": True}

    row = await _get(db, item_id)
    assert row["units"] == 42
    assert float(row["unit_cost"]) == 10


@pytest.mark.asyncio
async def test_negative_stock_is_rejected_by_the_store(client, db):
    item_id = await _create(client)

    r = await client.put("/api/inventory/stock", json={"id": item_id, "units": -1})
    assert r.status_code == 500
    assert "error" in r.json()
    assert (await _get(db, item_id))["units"] == 10


@pytest.mark.asyncio
async def test_list_is_ordered_by_sku(client):
    for sku in ["PKM-300", "MTG-010", "YGO-777", "LOR-001", "MTG-002"]:
        await _create(client, sku=sku)

    r = await client.get("/api/inventory")
    assert r.status_code == 200
    skus = [row["sku"] for row in r.json()]
    assert skus == sorted(skus)
    assert len(skus) == 5


@pytest.mark.asyncio
async def test_delete_item_and_nonexistent_item(client):
    item_id = await _create(client)

    r = await client.delete(f"/api/inventory/{item_id}")
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert (await client.get("/api/inventory")).json() == []

    r = await client.delete("/api/inventory/doesnotexist")
    assert r.status_code == 200
    assert r.json() == {"success": True}
