"""API tests for the supervisor incident and report workflows."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import status


NEW_INCIDENT = {
    "title": "Loose guard rail on dock 3",
    "description": "Rail came away when leaned on.",
    "type": "Equipment Malfunction",
    "severity": "Moderate",
    "department": "Logistics",
    "location": "Loading Dock 3",
    "date_time": "2025-01-01T09:30:00",
    "involved_employee_ids": ["emp-002"],
    "witness_names": "Mike Thompson",
}


def _audit_actions(report):
    return [entry["action"] for entry in report["audit_trail"]]


class TestIncidentWorkflow:

    def test_create_starts_reported(self, client):
        response = client.post("/api/supervisor/incidents", json=NEW_INCIDENT)
        assert response.status_code == status.HTTP_201_CREATED
        incident = response.json()
        assert incident["id"] == "inc-008"
        assert incident["status"] == "Reported"
        assert incident["actions"] == ["review"]
        assert incident["involved_employee_ids"] == ["emp-002"]
        assert incident["reported_by"] is None
        assert "Witnesses: Mike Thompson" in incident["description"]

    def test_offset_timestamp_is_converted_to_local(self, client):
        body = {**NEW_INCIDENT, "date_time": "2025-01-01T10:00:00+05:00"}
        incident = client.post("/api/supervisor/incidents", json=body).json()
        aware = datetime(2025, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=5)))
        assert incident["date_time"] == aware.astimezone().replace(tzinfo=None).isoformat()

    def test_naive_timestamp_is_kept(self, client):
        incident = client.post("/api/supervisor/incidents", json=NEW_INCIDENT).json()
        assert incident["date_time"] == "2025-01-01T09:30:00"

    def test_unknown_employee_is_404(self, client):
        body = {**NEW_INCIDENT, "involved_employee_ids": ["emp-404"]}
        response = client.post("/api/supervisor/incidents", json=body)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize("field,value", [
        ("type", "Flood"),
        ("severity", "Catastrophic"),
        ("department", "Finance"),
        ("title", ""),
    ])
    def test_invalid_fields_are_422(self, client, field, value):
        response = client.post("/api/supervisor/incidents", json={**NEW_INCIDENT, field: value})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_review_then_close(self, client):
        incident_id = client.post("/api/supervisor/incidents", json=NEW_INCIDENT).json()["id"]

        reviewed = client.post(f"/api/supervisor/incidents/{incident_id}/actions/review").json()
        assert reviewed["status"] == "Under Review"
        assert reviewed["actions"] == ["close"]

        closed = client.post(f"/api/supervisor/incidents/{incident_id}/actions/close").json()
        assert closed["status"] == "Closed"
        assert closed["actions"] == []

        again = client.post(f"/api/supervisor/incidents/{incident_id}/actions/close")
        assert again.status_code == status.HTTP_409_CONFLICT
        assert again.json()["status"] == "Closed"
        assert again.json()["allowed_actions"] == []

    def test_cannot_review_twice(self, client):
        response = client.post("/api/supervisor/incidents/inc-001/actions/review")
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["allowed_actions"] == ["close"]

    def test_unknown_incident_is_404(self, client):
        assert client.get("/api/supervisor/incidents/inc-404").status_code == status.HTTP_404_NOT_FOUND
        response = client.post("/api/supervisor/incidents/inc-404/actions/review")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_detail_includes_reports(self, client):
        incident = client.get("/api/supervisor/incidents/inc-001").json()
        assert incident["report_ids"] == ["rep-001", "rep-002"]
        assert [r["id"] for r in incident["reports"]] == ["rep-001", "rep-002"]


class TestIncidentListing:

    def test_filters_from_query_params(self, client):
        body = client.get(
            "/api/supervisor/incidents", params={"severity": "Minor", "status": "Closed"}
        ).json()
        assert body["total"] == 3
        assert {i["id"] for i in body["incidents"]} == {"inc-003", "inc-005", "inc-007"}

    def test_repeated_params_are_or_within_a_filter(self, client):
        body = client.get(
            "/api/supervisor/incidents", params=[("department", "Logistics"), ("department", "Admin")]
        ).json()
        assert body["total"] == 3

    def test_stats(self, client):
        stats = client.get("/api/supervisor/incidents/stats").json()
        assert stats["total"] == 7
        assert stats["reported"] == 0
        assert stats["under_review"] == 3
        assert stats["closed"] == 4
        assert stats["days_since_last_incident"] in (26, 27)


class TestReportGeneration:

    def test_generated_report_is_draft(self, client):
        response = client.post("/api/supervisor/incidents/inc-002/reports", json={})
        assert response.status_code == status.HTTP_201_CREATED
        report = response.json()
        assert report["id"] == "rep-008"
        assert report["status"] == "Draft"
        assert report["type"] == "Company Safety"
        assert report["content"].startswith("## Incident Summary")
        assert _audit_actions(report) == ["Created"]
        assert report["audit_trail"][0]["details"] == "Initial report generated"
        assert report["actions"] == ["edit", "submit"]

    def test_osha_template(self, client):
        report = client.post(
            "/api/supervisor/incidents/inc-002/reports", json={"type": "OSHA", "user": "Sarah Johnson"}
        ).json()
        assert report["content"].startswith("## OSHA Form 301")
        assert "**Case Number:** INC-002" in report["content"]
        assert report["title"].endswith("- OSHA Compliance")
        assert report["audit_trail"][0]["user"] == "Sarah Johnson"

    def test_report_listed_under_incident(self, client):
        client.post("/api/supervisor/incidents/inc-002/reports", json={})
        reports = client.get("/api/supervisor/incidents/inc-002/reports").json()
        assert [r["id"] for r in reports] == ["rep-007", "rep-008"]


class TestReportWorkflow:

    def test_full_lifecycle(self, client):
        report = client.get("/api/supervisor/reports/rep-002").json()
        assert report["status"] == "Draft"
        history = _audit_actions(report)

        for action, expected in [
            ("submit", "Under Review"),
            ("approve", "Approved"),
            ("close", "Closed"),
            ("reopen", "Draft"),
        ]:
            response = client.post(f"/api/supervisor/reports/rep-002/actions/{action}", json={"user": "Sarah Johnson"})
            assert response.status_code == status.HTTP_200_OK, action
            report = response.json()
            assert report["status"] == expected

        assert _audit_actions(report) == history + ["Submitted for Review", "Approved", "Closed", "Reopened"]

    def test_deny_then_reopen(self, client):
        denied = client.post("/api/supervisor/reports/rep-001/actions/deny", json={"details": "Missing root cause"})
        assert denied.json()["status"] == "Denied"
        assert denied.json()["audit_trail"][-1]["details"] == "Missing root cause"
        assert denied.json()["actions"] == ["reopen"]
        reopened = client.post("/api/supervisor/reports/rep-001/actions/reopen")
        assert reopened.json()["status"] == "Draft"

    def test_cannot_approve_draft(self, client):
        response = client.post("/api/supervisor/reports/rep-002/actions/approve")
        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["allowed_actions"] == ["edit", "submit"]
        assert client.get("/api/supervisor/reports/rep-002").json()["status"] == "Draft"

    def test_edit_keeps_status(self, client):
        response = client.patch("/api/supervisor/reports/rep-001", json={"title": "Arc Flash - Revised"})
        report = response.json()
        assert report["title"] == "Arc Flash - Revised"
        assert report["status"] == "Under Review"
        assert _audit_actions(report)[-1] == "Updated"

    def test_edit_closed_report_is_409(self, client):
        response = client.patch("/api/supervisor/reports/rep-003", json={"content": "x"})
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_edit_via_action_route_is_400(self, client):
        response = client.post("/api/supervisor/reports/rep-002/actions/edit")
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_report_is_404(self, client):
        assert client.get("/api/supervisor/reports/rep-404").status_code == status.HTTP_404_NOT_FOUND


class TestReportListing:

    def test_stats_and_type_filter(self, client):
        body = client.get("/api/supervisor/reports", params={"type": "OSHA"}).json()
        assert body["stats"] == {"total": 7, "draft": 1, "under_review": 3, "approved": 1, "closed": 2}
        assert {r["id"] for r in body["reports"]} == {"rep-002", "rep-004"}

    def test_status_filter(self, client):
        body = client.get("/api/supervisor/reports", params={"status": "Under Review"}).json()
        assert {r["id"] for r in body["reports"]} == {"rep-001", "rep-005", "rep-007"}
