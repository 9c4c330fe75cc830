"""
Tests for the vital signs endpoints.
"""
from datetime import datetime

import pytest

from medtracker.core.clock import utc_now
from medtracker.vitals.models import Vital

READING = {
    "blood_pressure": "120/80",
    "heart_rate": 72,
    "temperature": 36.8,
    "blood_sugar": 95.5,
}


def add_vital(client, **fields):
    response = client.post("/api/vitals", json=fields)
    assert response.status_code == 201
    return response.json()["id"]


def seed(db, *readings):
    for recorded_date, heart_rate in readings:
        db.add(Vital(heart_rate=heart_rate, recorded_date=recorded_date))
    db.commit()


def test_create_and_get_round_trip(client):
    response = client.post("/api/vitals", json=READING)
    assert response.status_code == 201
    assert response.json()["message"] == "Vital signs recorded successfully"

    vital = client.get(f"/api/vitals/{response.json()['id']}").json()
    for field, value in READING.items():
        assert vital[field] == value
    assert vital["recorded_date"]
    assert vital["created_at"]


def test_single_measurement_is_enough(client):
    vital_id = add_vital(client, heart_rate=64)
    vital = client.get(f"/api/vitals/{vital_id}").json()
    assert vital["heart_rate"] == 64
    assert vital["blood_pressure"] is None
    assert vital["temperature"] is None
    assert vital["blood_sugar"] is None


@pytest.mark.parametrize("payload", [
    {},
    {"blood_pressure": None, "heart_rate": None, "temperature": None, "blood_sugar": None},
    {"blood_pressure": ""},
])
def test_reading_without_measurements_is_rejected(client, payload):
    response = client.post("/api/vitals", json=payload)
    assert response.status_code == 400
    assert "At least one vital sign is required" in response.json()["error"]


def test_update_replaces_measurements(client):
    vital_id = add_vital(client, **READING)

    response = client.put(f"/api/vitals/{vital_id}", json={"heart_rate": 80})
    assert response.status_code == 200

    vital = client.get(f"/api/vitals/{vital_id}").json()
    assert vital["heart_rate"] == 80
    assert vital["blood_pressure"] is None
    assert vital["temperature"] is None


def test_update_requires_a_measurement(client):
    vital_id = add_vital(client, **READING)
    assert client.put(f"/api/vitals/{vital_id}", json={}).status_code == 400


def test_update_unknown_vital_is_404(client):
    response = client.put("/api/vitals/55", json={"heart_rate": 70})
    assert response.status_code == 404
    assert response.json() == {"error": "Vital record not found"}


def test_delete_then_get_is_404(client):
    vital_id = add_vital(client, temperature=37.2)
    assert client.delete(f"/api/vitals/{vital_id}").status_code == 200
    assert client.get(f"/api/vitals/{vital_id}").status_code == 404
    assert client.delete(f"/api/vitals/{vital_id}").status_code == 404


def test_list_is_most_recent_first(client, db):
    seed(
        db,
        (datetime(2026, 10, 1, 8, 0), 60),
        (datetime(2026, 10, 3, 8, 0), 62),
        (datetime(2026, 10, 2, 8, 0), 61),
    )
    heart_rates = [v["heart_rate"] for v in client.get("/api/vitals").json()]
    assert heart_rates == [62, 61, 60]


def test_latest_record(client, db):
    assert client.get("/api/vitals/latest/record").status_code == 404

    seed(db, (datetime(2026, 10, 1, 8, 0), 60), (datetime(2026, 10, 5, 21, 30), 75))
    latest = client.get("/api/vitals/latest/record").json()
    assert latest["heart_rate"] == 75


def test_range_includes_both_end_dates(client, db):
    seed(
        db,
        (datetime(2026, 9, 30, 23, 59), 59),
        (datetime(2026, 10, 1, 0, 0), 60),
        (datetime(2026, 10, 3, 23, 59), 63),
        (datetime(2026, 10, 4, 0, 0), 64),
    )
    response = client.get("/api/vitals/range/dates", params={"start_date": "2026-10-01", "end_date": "2026-10-03"})
    assert response.status_code == 200
    assert [v["heart_rate"] for v in response.json()] == [63, 60]


def test_range_includes_reading_recorded_today(client):
    add_vital(client, heart_rate=70)
    today = utc_now().date().isoformat()
    response = client.get("/api/vitals/range/dates", params={"start_date": today, "end_date": today})
    assert [v["heart_rate"] for v in response.json()] == [70]


@pytest.mark.parametrize("params", [
    {},
    {"start_date": "2026-10-01"},
    {"end_date": "2026-10-01"},
    {"start_date": "not-a-date", "end_date": "2026-10-01"},
    {"start_date": "2026-10-05", "end_date": "2026-10-01"},
])
def test_range_requires_valid_dates(client, params):
    response = client.get("/api/vitals/range/dates", params=params)
    assert response.status_code == 400
    assert "error" in response.json()


def test_stats_ignore_missing_measurements(client):
    add_vital(client, heart_rate=60, temperature=36.5)
    add_vital(client, heart_rate=80)
    add_vital(client, blood_sugar=100.0)
    add_vital(client, blood_pressure="130/85")

    stats = client.get("/api/vitals/stats/summary").json()
    assert stats["total_records"] == 3
    assert stats["avg_heart_rate"] == pytest.approx(70.0)
    assert stats["min_heart_rate"] == 60
    assert stats["max_heart_rate"] == 80
    assert stats["avg_temperature"] == pytest.approx(36.5)
    assert stats["min_temperature"] == pytest.approx(36.5)
    assert stats["avg_blood_sugar"] == pytest.approx(100.0)
    assert stats["max_blood_sugar"] == pytest.approx(100.0)


def test_stats_on_empty_collection(client):
    stats = client.get("/api/vitals/stats/summary").json()
    assert stats["total_records"] == 0
    assert stats["avg_heart_rate"] is None
    assert stats["max_blood_sugar"] is None
