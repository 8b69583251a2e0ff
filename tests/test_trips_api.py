from datetime import date, timedelta

import pytest


def test_create_and_get_trip(client, user_headers, trip_id):
    response = client.get(f"/api/trips/{trip_id}", headers=user_headers)

    assert response.status_code == 200
    trip = response.json()
    assert trip["description"] == "Client visit in Milan"
    assert trip["start_date"] == "2024-03-01"
    assert trip["end_date"] == "2024-03-05"
    assert trip["status"] == "SCHEDULED"
    assert trip["status_label"] == "Programmato"
    assert trip["employee_ids"] == []


def test_status_defaults_to_scheduled(client, admin_headers, trip_payload):
    del trip_payload["status"]

    trip_id = client.post("/api/trips", json=trip_payload, headers=admin_headers).json()["id"]

    assert client.get(f"/api/trips/{trip_id}", headers=admin_headers).json()["status"] == "SCHEDULED"


def test_single_day_trip_is_allowed(client, admin_headers, trip_payload):
    trip_payload["end_date"] = trip_payload["start_date"]

    assert client.post("/api/trips", json=trip_payload, headers=admin_headers).status_code == 201


@pytest.mark.parametrize("start,days_before", [
    (date(2024, 1, 10), 5),
    (date(2024, 1, 1), 1),
    (date(2023, 12, 31), 365),
])
def test_start_after_end_is_rejected(client, admin_headers, trip_payload, start, days_before):
    trip_payload["start_date"] = start.isoformat()
    trip_payload["end_date"] = (start - timedelta(days=days_before)).isoformat()

    response = client.post("/api/trips", json=trip_payload, headers=admin_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Bad Request"
    assert body["message"] == "Start date must be before end date"
    assert client.get("/api/trips", headers=admin_headers).json() == []


def test_update_with_inverted_dates_is_rejected(client, admin_headers, trip_payload, trip_id):
    trip_payload["start_date"], trip_payload["end_date"] = trip_payload["end_date"], trip_payload["start_date"]

    response = client.put(f"/api/trips/{trip_id}", json=trip_payload, headers=admin_headers)

    assert response.status_code == 400


def test_update_trip_changes_status_and_dates(client, admin_headers, trip_payload, trip_id):
    trip_payload.update({"status": "IN_PROGRESS", "end_date": "2024-03-07"})

    response = client.put(f"/api/trips/{trip_id}", json=trip_payload, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "IN_PROGRESS"
    assert response.json()["end_date"] == "2024-03-07"


def test_unknown_status_fails_validation(client, admin_headers, trip_payload):
    trip_payload["status"] = "POSTPONED"

    response = client.post("/api/trips", json=trip_payload, headers=admin_headers)

    assert response.status_code == 400
    assert "status" in response.json()["error"]


def test_short_description_fails_validation(client, admin_headers, trip_payload):
    trip_payload["description"] = "Milan"

    response = client.post("/api/trips", json=trip_payload, headers=admin_headers)

    assert response.status_code == 400
    assert "description" in response.json()["error"]


def test_missing_trip_is_not_found(client, admin_headers, trip_payload):
    assert client.get("/api/trips/42", headers=admin_headers).status_code == 404
    assert client.put("/api/trips/42", json=trip_payload, headers=admin_headers).status_code == 404


def test_non_admin_cannot_create_trips(client, user_headers, trip_payload):
    assert client.post("/api/trips", json=trip_payload, headers=user_headers).status_code == 403


def test_list_trips_paginates(client, admin_headers, trip_payload):
    for i in range(3):
        trip_payload["description"] = f"Conference day number {i}"
        client.post("/api/trips", json=trip_payload, headers=admin_headers)

    response = client.get("/api/trips", params={"skip": 1, "limit": 1}, headers=admin_headers)

    assert [t["description"] for t in response.json()] == ["Conference day number 1"]
