"""Tests API / API tests."""

from datetime import datetime, timezone

import pytest


async def _create_car(client, brand="Peugeot", model="308", year=2017):
    resp = await client.post("/api/cars/", json={"brand": brand, "model": model, "year": year})
    assert resp.status_code == 201
    return resp.json()


async def _fill(client, car_id, odometer, liters=10.0, price=15.0, timestamp=None):
    body = {"liters": liters, "price": price, "odometer": odometer}
    if timestamp is not None:
        body["timestamp"] = timestamp
    return await client.post(f"/api/cars/{car_id}/fuel", json=body)


@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "running"
    assert "X-Request-ID" in resp.headers


# ─── Vehicules / Cars ───

@pytest.mark.asyncio
async def test_create_and_get_car(client):
    car = await _create_car(client)
    assert car["brand"] == "Peugeot"
    assert "id" in car

    resp = await client.get(f"/api/cars/{car['id']}")
    assert resp.status_code == 200
    assert resp.json()["model"] == "308"

    resp = await client.get("/api/cars/")
    assert [c["id"] for c in resp.json()] == [car["id"]]


@pytest.mark.asyncio
async def test_car_not_found(client):
    resp = await client.get("/api/cars/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Car with ID 999 not found"


@pytest.mark.asyncio
async def test_create_car_future_year(client):
    next_year = datetime.now(timezone.utc).year + 1
    resp = await client.post("/api/cars/", json={"brand": "Tesla", "model": "Y", "year": next_year})
    assert resp.status_code == 400
    assert "Year cannot exceed current year" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_create_car_invalid_body(client):
    resp = await client.post("/api/cars/", json={"brand": "  ", "model": "X", "year": 2010})
    assert resp.status_code == 422
    resp = await client.post("/api/cars/", json={"brand": "Ford", "model": "T", "year": 1800})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_car(client):
    car = await _create_car(client)
    resp = await client.put(f"/api/cars/{car['id']}", json={"brand": "Citroen", "model": "C3", "year": 2021})
    assert resp.status_code == 200
    assert resp.json() == {"id": car["id"], "brand": "Citroen", "model": "C3", "year": 2021}


@pytest.mark.asyncio
async def test_delete_car_removes_fuel_entries(client):
    car = await _create_car(client)
    entry = (await _fill(client, car["id"], 1200)).json()

    resp = await client.delete(f"/api/cars/{car['id']}")
    assert resp.status_code == 204
    assert (await client.get(f"/api/cars/{car['id']}")).status_code == 404
    assert (await client.get(f"/api/fuel-entries/{entry['id']}")).status_code == 404


# ─── Pleins / Fuel ───

@pytest.mark.asyncio
async def test_add_fuel(client):
    car = await _create_car(client)
    resp = await _fill(client, car["id"], 500, liters=40, price=60)
    assert resp.status_code == 201
    data = resp.json()
    assert data["vehicle_id"] == car["id"]
    assert data["odometer"] == 500
    assert data["timestamp"]


@pytest.mark.asyncio
async def test_add_fuel_unknown_car(client):
    resp = await _fill(client, 404, 500)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_add_fuel_invalid_values(client):
    car = await _create_car(client)
    assert (await _fill(client, car["id"], 500, liters=0)).status_code == 422
    assert (await _fill(client, car["id"], 500, price=-1)).status_code == 422
    assert (await _fill(client, car["id"], 0)).status_code == 422


@pytest.mark.asyncio
async def test_add_fuel_odometer_decrease_conflict(client):
    car = await _create_car(client)
    assert (await _fill(client, car["id"], 100)).status_code == 201

    resp = await _fill(client, car["id"], 5)
    assert resp.status_code == 409
    detail = resp.json()["detail"]
    assert "100" in detail and "New: 5" in detail

    # Egalite acceptee / Ties accepted
    assert (await _fill(client, car["id"], 100)).status_code == 201


@pytest.mark.asyncio
async def test_edit_respects_timestamp_neighbours(client):
    car = await _create_car(client)
    ids = []
    for day, odometer in [(1, 100), (2, 200), (3, 300)]:
        resp = await _fill(client, car["id"], odometer, timestamp=f"2024-03-0{day}T08:00:00Z")
        assert resp.status_code == 201
        ids.append(resp.json()["id"])
    middle = ids[1]

    resp = await client.put(f"/api/fuel-entries/{middle}", json={"liters": 10, "price": 15, "odometer": 50})
    assert resp.status_code == 409
    assert "Previous odometer: 100" in resp.json()["detail"]

    resp = await client.put(f"/api/fuel-entries/{middle}", json={"liters": 10, "price": 15, "odometer": 350})
    assert resp.status_code == 409
    assert "Next odometer: 300" in resp.json()["detail"]

    resp = await client.put(f"/api/fuel-entries/{middle}", json={"liters": 12, "price": 18, "odometer": 250})
    assert resp.status_code == 200
    assert resp.json()["odometer"] == 250
    assert resp.json()["liters"] == 12

    log = (await client.get(f"/api/cars/{car['id']}/fuel")).json()
    assert [e["odometer"] for e in log] == [100, 250, 300]


@pytest.mark.asyncio
async def test_add_fuel_backdated_conflict(client):
    car = await _create_car(client)
    assert (await _fill(client, car["id"], 100, timestamp="2024-03-05T08:00:00Z")).status_code == 201
    resp = await _fill(client, car["id"], 200, timestamp="2024-03-01T08:00:00Z")
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_fuel_entry_crud(client):
    car = await _create_car(client)
    entry = (await _fill(client, car["id"], 700)).json()

    resp = await client.get("/api/fuel-entries/")
    assert [e["id"] for e in resp.json()] == [entry["id"]]
    assert (await client.get(f"/api/fuel-entries/{entry['id']}")).json()["odometer"] == 700

    assert (await client.delete(f"/api/fuel-entries/{entry['id']}")).status_code == 204
    assert (await client.get(f"/api/fuel-entries/{entry['id']}")).status_code == 404
    assert (await client.put("/api/fuel-entries/12345", json={"liters": 1, "price": 1, "odometer": 1})).status_code == 404


# ─── Statistiques / Stats ───

@pytest.mark.asyncio
async def test_stats_empty(client):
    car = await _create_car(client)
    resp = await client.get(f"/api/cars/{car['id']}/fuel/stats")
    assert resp.status_code == 200
    assert resp.json() == {"total_liters": 0.0, "total_price": 0.0, "avg_per_100km": 0.0}


@pytest.mark.asyncio
async def test_stats_single_entry(client):
    car = await _create_car(client)
    await _fill(client, car["id"], 500, liters=40, price=60)
    stats = (await client.get(f"/api/cars/{car['id']}/fuel/stats")).json()
    assert stats == {"total_liters": 40.0, "total_price": 60.0, "avg_per_100km": 8.0}


@pytest.mark.asyncio
async def test_stats_multiple_entries(client):
    car = await _create_car(client)
    for day, odometer, liters in [(1, 100, 10), (2, 300, 15), (3, 500, 20)]:
        await _fill(client, car["id"], odometer, liters=liters, price=liters * 2,
                    timestamp=f"2024-04-0{day}T10:00:00Z")
    first = (await client.get(f"/api/cars/{car['id']}/fuel/stats")).json()
    assert first == {"total_liters": 45.0, "total_price": 90.0, "avg_per_100km": 6.25}
    assert (await client.get(f"/api/cars/{car['id']}/fuel/stats")).json() == first


@pytest.mark.asyncio
async def test_stats_unknown_car(client):
    resp = await client.get("/api/cars/31/fuel/stats")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_add_fuel_without_timestamp_after_future_fill(client):
    car = await _create_car(client)
    assert (await _fill(client, car["id"], 100, timestamp="2099-01-01T00:00:00Z")).status_code == 201

    resp = await _fill(client, car["id"], 500)
    assert resp.status_code == 409
    assert "Timestamp cannot precede" in resp.json()["detail"]

    log = (await client.get(f"/api/cars/{car['id']}/fuel")).json()
    readings = [e["odometer"] for e in log]
    assert readings == sorted(readings) == [100]


@pytest.mark.asyncio
async def test_conflict_body_carries_context(client):
    car = await _create_car(client)
    first = (await _fill(client, car["id"], 100, timestamp="2024-05-01T08:00:00Z")).json()
    second = (await _fill(client, car["id"], 200, timestamp="2024-05-02T08:00:00Z")).json()

    resp = await client.put(f"/api/fuel-entries/{second['id']}", json={"liters": 10, "price": 15, "odometer": 90})
    assert resp.status_code == 409
    assert resp.json()["context"] == {
        "neighbor": "previous",
        "neighbor_id": first["id"],
        "neighbor_odometer": 100,
        "odometer": 90,
    }

    resp = await client.get("/api/cars/999")
    assert "context" not in resp.json()


@pytest.mark.asyncio
async def test_legacy_stats_address(client):
    car = await _create_car(client)
    await _fill(client, car["id"], 500, liters=40, price=60)

    resp = await client.get("/servlet/fuel-stats", params={"carId": car["id"]})
    assert resp.status_code == 200
    assert resp.json() == (await client.get(f"/api/cars/{car['id']}/fuel/stats")).json()

    assert (await client.get("/servlet/fuel-stats", params={"carId": 999})).status_code == 404
    assert (await client.get("/servlet/fuel-stats")).status_code == 422
