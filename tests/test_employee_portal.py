"""API tests for the employee portal, profiles and portal accounts."""

import pytest
from fastapi import status


HEADERS_LISA = {"X-Employee-Id": "emp-006"}


class TestEmployeeDashboard:

    def test_defaults_to_first_employee(self, client):
        body = client.get("/api/employee/dashboard").json()
        assert body["employee"]["id"] == "emp-001"
        assert body["employee"]["name"] == "John Martinez"
        assert [i["id"] for i in body["incidents"]] == ["inc-002"]

    def test_header_selects_employee(self, client):
        body = client.get("/api/employee/dashboard", headers=HEADERS_LISA).json()
        assert body["employee"]["name"] == "Lisa Anderson"
        assert body["training"]["overdue"] == 3

    def test_unknown_employee_is_404(self, client):
        response = client.get("/api/employee/dashboard", headers={"X-Employee-Id": "emp-404"})
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Employee not found"


class TestMyTraining:

    def test_overdue_first_completed_last(self, client):
        body = client.get("/api/employee/training").json()
        assert body["stats"] == {"total": 3, "completed": 1, "pending": 1, "overdue": 1}
        assert [t["id"] for t in body["training"]] == ["ta-003", "ta-002", "ta-001"]
        assert body["training"][0]["days_until_due"] == -32
        assert body["training"][0]["training"]["title"] == "PPE Selection & Use"

    @pytest.mark.parametrize("filter_value,expected", [
        ("pending", ["ta-002"]),
        ("complete", ["ta-001"]),
        ("overdue", ["ta-003"]),
    ])
    def test_status_filter(self, client, filter_value, expected):
        body = client.get("/api/employee/training", params={"status": filter_value}).json()
        assert [t["id"] for t in body["training"]] == expected

    def test_overdue_sorted_by_due_date(self, client):
        body = client.get("/api/employee/training", headers=HEADERS_LISA).json()
        assert [t["id"] for t in body["training"]] == ["ta-012", "ta-014", "ta-013"]

    def test_bad_filter_is_422(self, client):
        response = client.get("/api/employee/training", params={"status": "archived"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestMyCertifications:

    def test_sorted_by_urgency(self, client):
        body = client.get("/api/employee/certifications").json()
        assert body["stats"] == {"total": 2, "valid": 1, "expiring_soon": 1, "expired": 0}
        assert [c["id"] for c in body["certifications"]] == ["cert-002", "cert-001"]
        assert body["certifications"][0]["days_until_expiration"] == 50

    def test_expired_first(self, client):
        body = client.get("/api/employee/certifications", headers=HEADERS_LISA).json()
        assert [c["id"] for c in body["certifications"]] == ["cert-013", "cert-014"]

    def test_status_filter(self, client):
        body = client.get("/api/employee/certifications", params={"status": "valid"}).json()
        assert [c["id"] for c in body["certifications"]] == ["cert-001"]


class TestReportIncident:

    def test_reporter_is_involved(self, client):
        response = client.post("/api/employee/incidents", headers=HEADERS_LISA, json={
            "title": "Spilled sample tray",
            "type": "Slip/Fall",
            "severity": "Minor",
            "department": "Grain Handling",
            "location": "QC Lab",
        })
        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["ok"] is True
        assert body["reference_id"] == "INC-008"
        assert body["incident"]["reported_by"] == "emp-006"
        assert body["incident"]["involved_employee_ids"] == ["emp-006"]
        assert body["incident"]["status"] == "Reported"

        mine = client.get("/api/employee/incidents", headers=HEADERS_LISA).json()
        assert "inc-008" in [i["id"] for i in mine]

    def test_visible_to_supervisor(self, client):
        client.post("/api/employee/incidents", json={
            "title": "Ladder wobble",
            "type": "Other",
            "severity": "Minor",
            "department": "Grain Handling",
        })
        body = client.get("/api/supervisor/incidents", params={"status": "Reported"}).json()
        assert [i["id"] for i in body["incidents"]] == ["inc-008"]


class TestMyCalendar:

    def test_month_view(self, client):
        body = client.get("/api/employee/calendar", params={"month": "2025-01"}).json()
        assert body["month"] == "2025-01"
        assert [e["id"] for e in body["events"]] == ["training-ta-002"]
        assert body["upcoming"][0]["id"] == "training-ta-002"

    def test_bad_month_is_400(self, client):
        response = client.get("/api/employee/calendar", params={"month": "January"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestProfilesAndSettings:

    def test_employee_profile(self, client):
        body = client.get("/api/employee/profile").json()
        assert body["id"] == "emp-001"
        assert body["supervisor_id"] == "sup-001"
        assert body["summary"]["training"]["total"] == 3

    def test_profile_created_on_first_visit(self, client):
        body = client.get("/api/employee/profile", headers={"X-Employee-Id": "emp-002"}).json()
        assert body["id"] == "emp-002"
        assert body["name"] == "Sarah Chen"
        assert body["portal"] == "employee"
        settings = client.get("/api/employee/settings", headers={"X-Employee-Id": "emp-002"}).json()
        assert settings["theme"] == "light"

    def test_update_employee_settings(self, client):
        response = client.patch("/api/employee/settings", json={
            "theme": "dark",
            "notifications": {"training_reminders": False},
        })
        body = response.json()
        assert body["ok"] is True
        assert body["settings"]["theme"] == "dark"
        assert body["settings"]["notifications"]["training_reminders"] is False
        assert body["settings"]["notifications"]["email_alerts"] is True

    def test_invalid_theme_is_422(self, client):
        response = client.patch("/api/employee/settings", json={"theme": "neon"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_supervisor_profile(self, client):
        body = client.get("/api/supervisor/profile").json()
        assert body["id"] == "sup-001"
        assert body["name"] == "Sarah Johnson"
        assert body["team_size"] == 12
        assert "OSHA 30-Hour" in body["certifications"]

    def test_update_supervisor_settings(self, client):
        body = client.patch("/api/supervisor/settings", json={"phone": "(555) 000-0000", "language": "es"}).json()
        assert body["profile"]["phone"] == "(555) 000-0000"
        assert client.get("/api/supervisor/settings").json()["language"] == "es"


class TestPortalAccounts:

    def test_supervisor_roles_get_both_portals(self, client):
        accounts = {a["id"]: a for a in client.get("/api/portal/accounts").json()}
        assert len(accounts) == 12
        supervisors = {i for i, a in accounts.items() if "supervisor" in a["portals"]}
        assert supervisors == {"emp-002", "emp-003", "emp-005", "emp-009"}
        assert accounts["emp-001"]["portals"] == ["employee"]
        assert accounts["emp-002"]["portals"] == ["supervisor", "employee"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_api_responses_are_not_cached(client):
    response = client.get("/api/portal/accounts")
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
