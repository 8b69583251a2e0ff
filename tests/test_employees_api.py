import pytest

from tripbook.core.exceptions import EntityExistsError
from tripbook.crud import employee as employee_repo
from tripbook.models import Employee
from tripbook.schemas import EmployeeCreate
from tripbook.services import employee_service


def test_create_employee_normalizes_username_and_email(client, admin_headers, employee_id):
    response = client.get(f"/api/employees/{employee_id}", headers=admin_headers)

    assert response.status_code == 200
    employee = response.json()
    assert employee["username"] == "lucabianchi"
    assert employee["email"] == "luca.bianchi@example.com"
    assert employee["trip_ids"] == []


def test_list_employees_for_any_authenticated_account(client, user_headers, employee_id):
    response = client.get("/api/employees", headers=user_headers)

    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [employee_id]


def test_list_employees_requires_authentication(client):
    response = client.get("/api/employees")

    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"


def test_duplicate_employee_username_conflicts(client, admin_headers, employee_payload, employee_id):
    employee_payload["username"] = "LUCA BIANCHI"
    employee_payload["email"] = "other@example.com"

    response = client.post("/api/employees", json=employee_payload, headers=admin_headers)

    assert response.status_code == 409


def test_create_employee_validates_fields(client, admin_headers, employee_payload):
    employee_payload["first_name"] = "L"
    employee_payload["email"] = "bad"

    response = client.post("/api/employees", json=employee_payload, headers=admin_headers)

    assert response.status_code == 400
    errors = response.json()["error"]
    assert set(errors) == {"first_name", "email"}


def test_non_admin_cannot_mutate_employees(client, user_headers, employee_payload, employee_id):
    assert client.post("/api/employees", json=employee_payload, headers=user_headers).status_code == 403
    assert client.put(f"/api/employees/{employee_id}", json=employee_payload, headers=user_headers).status_code == 403
    assert client.delete(f"/api/employees/{employee_id}", headers=user_headers).status_code == 403


def test_update_employee(client, admin_headers, employee_payload, employee_id):
    employee_payload["last_name"] = "Verdi"
    employee_payload["avatar_url"] = "https://cdn.example.com/luca.png"

    response = client.put(f"/api/employees/{employee_id}", json=employee_payload, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["last_name"] == "Verdi"
    assert response.json()["avatar_url"] == "https://cdn.example.com/luca.png"


def test_update_employee_to_taken_username_conflicts(client, admin_headers, employee_payload, employee_id):
    other = dict(employee_payload, username="giulia", email="giulia@example.com")
    other_id = client.post("/api/employees", json=other, headers=admin_headers).json()["id"]

    response = client.put(f"/api/employees/{other_id}", json=employee_payload, headers=admin_headers)

    assert response.status_code == 409


def test_missing_employee_is_not_found(client, admin_headers):
    response = client.get("/api/employees/999", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Employee not found with id: 999"
    assert client.delete("/api/employees/999", headers=admin_headers).status_code == 404


def test_delete_employee(client, admin_headers, employee_id):
    assert client.delete(f"/api/employees/{employee_id}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/employees/{employee_id}", headers=admin_headers).status_code == 404


@pytest.mark.parametrize("username", ["  ", "a '", "'' x", " ' "])
def test_username_too_short_after_normalizing_is_rejected(client, admin_headers, employee_payload, username):
    employee_payload["username"] = username

    response = client.post("/api/employees", json=employee_payload, headers=admin_headers)

    assert response.status_code == 400
    assert set(response.json()["error"]) == {"username"}
    assert client.get("/api/employees", headers=admin_headers).json() == []


def test_username_is_normalized_before_validation(employee_payload):
    employee_payload["username"] = "D'Angelo Rossi"

    assert EmployeeCreate(**employee_payload).username == "dangelorossi"


def test_unique_constraint_catches_username_missed_by_lookup(db, monkeypatch, employee_payload, employee_id):
    monkeypatch.setattr(employee_repo, "get_by_username", lambda *args, **kwargs: None)

    with pytest.raises(EntityExistsError):
        employee_service.create_employee(db, EmployeeCreate(**employee_payload))

    assert not db.new
    assert db.query(Employee).count() == 1
