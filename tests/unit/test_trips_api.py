"""HTTP tests for the trips and profiles routes."""

import pytest
from fastapi.testclient import TestClient

from tripwizard.auth.clerk_auth import get_current_user_id
from tripwizard.db.trip_store import get_trip_store
from tripwizard.main import app


@pytest.fixture
def client(store):
    app.dependency_overrides[get_trip_store] = lambda: store
    app.dependency_overrides[get_current_user_id] = lambda: "host_1"
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def wizard_body(wizard_state):
    return wizard_state.model_dump(mode="json")


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/").status_code == 200


def test_options(client):
    body = client.get("/api/v1/trips/options").json()
    assert {"id": "female-only", "name": "Female Only"} in body["categories"]
    assert "Hostel" in body["accommodation_types"]
    assert body["default_currency"] == "EUR"


def test_quote(client, wizard_body):
    response = client.post("/api/v1/trips/quote", json=wizard_body["cost"])

    assert response.status_code == 200
    body = response.json()
    assert body["subtotal"] == 1200
    assert body["buffer_amount"] == 120
    assert body["total"] == 1370
    assert body["category_totals"] == {"accommodation": 800, "transportation": 300, "activities": 100}


def test_quote_rejects_negative_fee(client):
    response = client.post("/api/v1/trips/quote", json={"your_fee": -5})
    assert response.status_code == 422


def test_create_trip(client, store, wizard_body):
    response = client.post("/api/v1/trips", json=wizard_body)

    assert response.status_code == 201
    body = response.json()
    assert body["warnings"] == []
    trip = body["trip"]
    assert trip["user_id"] == "host_1"
    assert trip["status"] == "published"
    assert trip["total_cost"] == 1370
    assert [s["sequence_number"] for s in trip["stops"]] == [1, 2]
    assert len(store.tables["trips"]) == 1


def test_create_trip_reports_partial_failure_as_warning(client, store, wizard_body):
    store.fail("insert_many", "trip_stops")

    response = client.post("/api/v1/trips", json=wizard_body)

    assert response.status_code == 201
    assert len(response.json()["warnings"]) == 1


def test_create_trip_backend_failure(client, store, wizard_body):
    store.fail("insert_one", "trips")

    response = client.post("/api/v1/trips", json=wizard_body)

    assert response.status_code == 502
    assert response.json()["detail"] == {
        "code": "BACKEND_WRITE_FAILED",
        "message": "Failed to create trip. Please try again.",
    }


def test_create_trip_missing_name(client, store, wizard_body):
    wizard_body["details"]["trip_name"] = ""

    response = client.post("/api/v1/trips", json=wizard_body)

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "VALIDATION_ERROR"
    assert store.calls == []


def test_create_trip_requires_auth(store, wizard_body):
    app.dependency_overrides[get_trip_store] = lambda: store
    try:
        response = TestClient(app).post("/api/v1/trips", json=wizard_body)
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 401


def test_browse_and_detail(client, store, wizard_body):
    store.add("profiles", {"id": "host_1", "full_name": "Ada"})
    trip_id = client.post("/api/v1/trips", json=wizard_body).json()["trip"]["id"]

    cards = client.get("/api/v1/trips").json()
    assert [(c["trip"]["id"], c["host"]["full_name"]) for c in cards] == [(trip_id, "Ada")]

    detail = client.get(f"/api/v1/trips/{trip_id}").json()
    assert detail["total_nights"] == 5
    assert detail["host"]["full_name"] == "Ada"
    assert [s["location"] for s in detail["trip"]["stops"]] == ["Paris, France", "Amsterdam, Netherlands"]


def test_detail_not_found(client):
    response = client.get("/api/v1/trips/missing")
    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "TRIP_NOT_FOUND"


def test_my_trips(client, store, wizard_body):
    client.post("/api/v1/trips", json=wizard_body)
    store.add("trips", {**store.tables["trips"][0], "id": "other", "user_id": "someone"})

    trips = client.get("/api/v1/trips/mine").json()
    assert [t["user_id"] for t in trips] == ["host_1"]


def test_owner_can_change_status(client, store, wizard_body):
    trip_id = client.post("/api/v1/trips", json=wizard_body).json()["trip"]["id"]

    response = client.patch(f"/api/v1/trips/{trip_id}/status", json={"status": "cancelled"})

    assert response.status_code == 204
    assert store.tables["trips"][0]["status"] == "cancelled"


def test_other_users_cannot_change_status(client, store, wizard_body):
    trip_id = client.post("/api/v1/trips", json=wizard_body).json()["trip"]["id"]
    app.dependency_overrides[get_current_user_id] = lambda: "intruder"

    response = client.patch(f"/api/v1/trips/{trip_id}/status", json={"status": "draft"})

    assert response.status_code == 403
    assert store.tables["trips"][0]["status"] == "published"


def test_status_must_be_known(client, store, wizard_body):
    trip_id = client.post("/api/v1/trips", json=wizard_body).json()["trip"]["id"]
    response = client.patch(f"/api/v1/trips/{trip_id}/status", json={"status": "archived"})
    assert response.status_code == 422


def test_profile_trips(client, store):
    store.add("profiles", {"id": "host_1", "full_name": "Ada"})
    store.add("trips", {
        "user_id": "host_1",
        "trip_name": "Next year",
        "departure_date": "2030-01-01",
        "status": "published",
        "total_cost": 0,
    })

    body = client.get("/api/v1/profiles/host_1/trips", params={"today": "2029-06-01"}).json()

    assert body["host"]["full_name"] == "Ada"
    assert [t["trip_name"] for t in body["upcoming"]] == ["Next year"]
    assert body["past"] == []


def test_profile_not_found(client):
    assert client.get("/api/v1/profiles/nobody/trips").status_code == 404
