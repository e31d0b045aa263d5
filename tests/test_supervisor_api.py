"""API tests for the supervisor dashboard, roster, training, insights and calendar screens."""

from fastapi import status


class TestDashboard:

    def test_stats(self, client):
        body = client.get("/api/supervisor/dashboard", params={"month": "2024-12"}).json()
        assert body["stats"]["total_employees"] == 12
        assert body["stats"]["training_modules"] == 10
        assert body["stats"]["active_incidents"] == 3
        assert [i["id"] for i in body["active_incidents"]] == ["inc-004", "inc-002", "inc-001"]
        assert body["heatmap"]["month"] == "2024-12"
        assert len(body["heatmap"]["days"]) == 31

    def test_default_month_follows_clock(self, client):
        body = client.get("/api/supervisor/dashboard").json()
        assert body["heatmap"]["month"] == "2025-01"

    def test_heatmap_day(self, client):
        body = client.get("/api/supervisor/dashboard/heatmap/18", params={"month": "2024-12"}).json()
        assert body["date"] == "2024-12-18"
        assert [i["id"] for i in body["incidents"]] == ["inc-002"]

    def test_heatmap_invalid_day_is_400(self, client):
        response = client.get("/api/supervisor/dashboard/heatmap/31", params={"month": "2024-11"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_bad_month_is_400(self, client):
        response = client.get("/api/supervisor/dashboard", params={"month": "2024-13"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestEmployees:

    def test_at_risk(self, client):
        ids = {e["id"] for e in client.get("/api/supervisor/employees/at-risk").json()}
        assert ids == {"emp-001", "emp-002", "emp-006", "emp-007"}

    def test_filter_by_department(self, client):
        body = client.get("/api/supervisor/employees", params={"department": "Grain Handling"}).json()
        assert body["total"] == len(body["employees"])
        assert {e["department"] for e in body["employees"]} == {"Grain Handling"}

    def test_detail(self, client):
        body = client.get("/api/supervisor/employees/emp-001").json()
        assert body["at_risk"] is True
        assert [i["id"] for i in body["incidents"]] == ["inc-002"]
        assert body["summary"]["training"]["total"] == 3

    def test_unknown_is_404(self, client):
        response = client.get("/api/supervisor/employees/emp-404")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Employee not found"


class TestTraining:

    def test_stats(self, client):
        body = client.get("/api/supervisor/training").json()
        assert body["stats"]["total"] == 10
        assert body["stats"]["outdated"] == 2
        assert body["stats"]["current"] == 8
        tm7 = next(m for m in body["modules"] if m["id"] == "tm-007")
        assert tm7["assignments"]["total"] == 5

    def test_outdated_only(self, client):
        body = client.get("/api/supervisor/training", params={"outdated_only": True}).json()
        assert [m["id"] for m in body["modules"]] == ["tm-002", "tm-005"]

    def test_overdue(self, client):
        rows = client.get("/api/supervisor/training/overdue").json()
        assert [r["assignment"]["id"] for r in rows] == ["ta-003", "ta-012", "ta-013", "ta-014"]

    def test_detail_and_404(self, client):
        body = client.get("/api/supervisor/training/tm-006").json()
        assert body["stats"]["overdue"] == 2
        assert all(a["employee_name"] for a in body["assignments"])
        assert client.get("/api/supervisor/training/tm-404").status_code == status.HTTP_404_NOT_FOUND


class TestInsights:

    def test_overview(self, client):
        body = client.get("/api/supervisor/insights").json()
        assert body["overall_compliance"] == 67
        assert len(body["at_risk_employees"]) == 4
        assert {c["certification"]["id"] for c in body["expiring_certifications"]} == {"cert-002", "cert-016"}

    def test_status_drift_is_empty_on_pinned_date(self, client):
        body = client.get("/api/supervisor/insights/status-drift").json()
        assert body["as_of"] == "2025-01-01"
        assert body["certifications"] == []
        assert body["training_assignments"] == []

    def test_thresholds(self, client):
        assert client.get("/api/supervisor/insights/thresholds").json() == {
            "cert_expiring_soon_days": 90,
            "training_at_risk_days": 7,
            "at_risk_overdue_threshold": 3,
            "at_risk_incident_threshold": 2,
        }


class TestCalendar:

    def test_type_filter(self, client):
        body = client.get(
            "/api/supervisor/calendar", params={"month": "2024-12", "type": "incident"}
        ).json()
        assert body["types"] == ["incident"]
        assert body["events"]
        assert {e["type"] for e in body["events"]} == {"incident"}
        assert all(e["date"].startswith("2024-12") for e in body["events"])

    def test_unknown_types_are_ignored(self, client):
        body = client.get("/api/supervisor/calendar", params={"type": "party"}).json()
        assert body["types"] == []
        assert body["events"] == []
