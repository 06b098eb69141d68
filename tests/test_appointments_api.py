from datetime import datetime, timedelta, timezone

import pytest


def _days_ahead(days):
    return (datetime.now(timezone.utc) + timedelta(days=days)).replace(microsecond=0).isoformat()


@pytest.fixture
def service_id(client):
    response = client.post("/api/admin/services", json={
        "name": "Garden Maintenance", "description": "Weeding and pruning", "price": "From $120/month",
    })
    return response.json()["service"]["id"]


@pytest.fixture
def appointment(client, service_id):
    response = client.post("/api/admin/appointments", json={
        "name": "Sam Green",
        "email": "sam@example.com",
        "phone": "07700900123",
        "buildingName": "Rose Cottage",
        "streetName": "High Street",
        "houseNumber": "12",
        "city": "Springfield",
        "county": "Greenshire",
        "postalCode": "GS1 2AB",
        "serviceId": service_id,
        "date": _days_ahead(3),
        "priority": "Urgent",
        "notes": "Gate code 1234",
    })
    assert response.status_code == 201
    return response.json()["appointment"]


def test_public_booking_201(client, service_id):
    response = client.post("/api/appointments", json={
        "name": "Sam Green",
        "email": "sam@example.com",
        "phone": "07700900123",
        "serviceId": service_id,
        "date": _days_ahead(2),
    })
    assert response.status_code == 201
    appointment = response.json()["appointment"]
    assert appointment["status"] == "Scheduled"
    assert appointment["priority"] == "Normal"
    assert appointment["streetName"] is None


def test_public_booking_same_day_400(client, service_id):
    response = client.post("/api/appointments", json={
        "name": "Sam Green",
        "email": "sam@example.com",
        "phone": "07700900123",
        "serviceId": service_id,
        "date": datetime.now(timezone.utc).isoformat(),
    })
    assert response.status_code == 400
    assert "date" in response.json()["errors"]


def test_public_booking_short_phone_and_missing_service_400(client):
    response = client.post("/api/appointments", json={
        "name": "Sam Green",
        "email": "sam@example.com",
        "phone": "123",
        "date": _days_ahead(2),
    })
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "phone" in errors
    assert "serviceId" in errors


def test_admin_booking_requires_address_400(client, service_id):
    response = client.post("/api/admin/appointments", json={
        "name": "Sam Green",
        "email": "sam@example.com",
        "phone": "07700900123",
        "serviceId": service_id,
        "date": _days_ahead(3),
    })
    assert response.status_code == 400
    errors = response.json()["errors"]
    for field in ("streetName", "houseNumber", "city", "county", "postalCode"):
        assert field in errors
    assert "buildingName" not in errors


def test_status_update_changes_only_status_200(client, appointment):
    response = client.put(f"/api/admin/appointments/{appointment['id']}", json={"status": "Completed"})
    assert response.status_code == 200
    updated = response.json()["appointment"]

    assert updated["status"] == "Completed"
    assert updated["updatedAt"] >= appointment["updatedAt"]
    unchanged = {k: v for k, v in appointment.items() if k not in ("status", "updatedAt")}
    assert {k: updated[k] for k in unchanged} == unchanged


def test_null_status_update_rejected_400(client, appointment):
    response = client.put(
        f"/api/admin/appointments/{appointment['id']}",
        json={"status": None, "date": None},
    )
    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"status", "date"}

    stored = client.get(f"/api/admin/appointments/{appointment['id']}").json()["appointment"]
    assert stored == appointment


def test_admin_list_sorted_by_date_200(client, service_id, appointment):
    client.post("/api/appointments", json={
        "name": "Early Bird",
        "email": "early@example.com",
        "phone": "07700900999",
        "serviceId": service_id,
        "date": _days_ahead(1),
    })
    names = [a["name"] for a in client.get("/api/admin/appointments").json()["appointments"]]
    assert names == ["Early Bird", "Sam Green"]


def test_get_and_delete_appointment(client, appointment):
    assert client.get(f"/api/admin/appointments/{appointment['id']}").status_code == 200
    response = client.delete(f"/api/admin/appointments/{appointment['id']}")
    assert response.json() == {"success": True, "message": f"Appointment '{appointment['id']}' deleted"}
    assert client.get(f"/api/admin/appointments/{appointment['id']}").status_code == 404
