"""Tests for lookups and aggregation helpers over the seeded dataset."""

from datetime import date, datetime

import pytest

from safetyboard.models.models import Department, Incident, IncidentStatus, Severity
from safetyboard.services import queries

from conftest import TODAY, NOW


class TestLookups:

    def test_found_and_missing(self, db):
        assert queries.get_employee_by_id(db, "emp-001").name == "John Martinez"
        assert queries.get_employee_by_id(db, "emp-999") is None
        assert queries.get_training_by_id(db, "tm-002").is_outdated
        assert queries.get_incident_by_id(db, "inc-404") is None
        assert queries.get_report_by_id(db, "rep-003").incident_id == "inc-003"

    def test_reports_by_incident(self, db):
        reports = queries.get_reports_by_incident_id(db, "inc-001")
        assert [r.id for r in reports] == ["rep-001", "rep-002"]

    def test_by_department(self, db):
        logistics = queries.get_employees_by_department(db, Department.LOGISTICS)
        assert all(e.department == Department.LOGISTICS for e in logistics)
        incidents = queries.get_incidents_by_department(db, Department.GRAIN_HANDLING)
        assert [i.id for i in incidents] == ["inc-002", "inc-007"]

    def test_active_incidents_exclude_closed(self, db):
        assert [i.id for i in queries.get_active_incidents(db)] == ["inc-001", "inc-002", "inc-004"]


class TestComplianceQueries:

    def test_overdue_training(self, db):
        rows = queries.get_overdue_training(db)
        assert [(e.id, a.id) for e, a, m in rows] == [
            ("emp-001", "ta-003"),
            ("emp-006", "ta-012"),
            ("emp-006", "ta-013"),
            ("emp-006", "ta-014"),
        ]
        assert rows[0][2].id == "tm-006"

    def test_expired_certifications(self, db):
        assert [c.id for e, c in queries.get_expired_certifications(db)] == ["cert-005", "cert-013"]

    def test_expiring_certifications(self, db):
        ids = [c.id for e, c in queries.get_expiring_certifications(db, 90, TODAY)]
        assert ids == ["cert-002", "cert-016"]

    def test_expiring_is_monotonic_in_days(self, db):
        sizes = [len(queries.get_expiring_certifications(db, d, TODAY)) for d in (0, 30, 90, 120, 365)]
        assert sizes == sorted(sizes)
        assert sizes[0] == 2
        assert sizes[3] == 3

    def test_expired_never_counted_as_expiring(self, db):
        ids = {c.id for e, c in queries.get_expiring_certifications(db, 10000, TODAY)}
        assert "cert-005" not in ids
        assert "cert-013" not in ids

    def test_outdated_modules(self, db):
        assert [m.id for m in queries.get_outdated_modules(db)] == ["tm-002", "tm-005"]

    def test_at_risk_employees(self, db):
        ids = {e.id for e in queries.get_at_risk_employees(db)}
        assert ids == {"emp-001", "emp-002", "emp-006", "emp-007"}

    def test_incident_threshold_is_configurable(self, db, monkeypatch):
        monkeypatch.setattr("safetyboard.core.config.AT_RISK_INCIDENT_THRESHOLD", 1)
        ids = {e.id for e in queries.get_at_risk_employees(db)}
        # everyone involved in any incident now qualifies
        assert {"emp-003", "emp-004", "emp-010"} <= ids


class TestIncidentTiming:

    def test_days_since_last_closed_incident(self, db):
        assert queries.get_days_since_last_incident(db, NOW) == 27
        assert queries.get_days_since_last_incident(db, datetime(2025, 1, 1)) == 26

    def test_zero_without_closed_incident(self, db):
        for incident in db.query(Incident).all():
            incident.status = IncidentStatus.UNDER_REVIEW
        db.commit()
        assert queries.get_days_since_last_incident(db, NOW) == 0

    def test_never_negative(self, db):
        assert queries.get_days_since_last_incident(db, datetime(2024, 1, 1)) == 0

    def test_incidents_by_date(self, db):
        assert [i.id for i in queries.get_incidents_by_date(db, 2024, 12, 18)] == ["inc-002"]
        assert queries.get_incidents_by_date(db, 2024, 12, 19) == []


class TestFilters:

    def test_incident_search_matches_location(self, db):
        incidents = queries.filter_incidents(db, search="electrical room")
        assert [i.id for i in incidents] == ["inc-001"]

    def test_incident_filters_combine(self, db):
        incidents = queries.filter_incidents(
            db, severities=[Severity.MINOR], statuses=[IncidentStatus.CLOSED]
        )
        assert {i.id for i in incidents} == {"inc-003", "inc-005", "inc-007"}

    def test_incidents_sorted_newest_first(self, db):
        dates = [i.occurred_at for i in queries.filter_incidents(db)]
        assert dates == sorted(dates, reverse=True)

    def test_incident_employee_and_date_range(self, db):
        assert [i.id for i in queries.filter_incidents(db, employee_ids=["emp-006"])] == ["inc-002"]
        ranged = queries.filter_incidents(db, date_from=date(2024, 12, 10), date_to=date(2024, 12, 18))
        assert [i.id for i in ranged] == ["inc-002", "inc-001"]

    def test_employee_filters(self, db):
        assert [e.id for e in queries.filter_employees(db, search="forklift")] == ["emp-012"]
        at_risk = queries.filter_employees(db, compliance_status="at-risk")
        assert [e.id for e in at_risk] == ["emp-001", "emp-002"]

    def test_training_filters(self, db):
        assert [m.id for m in queries.filter_training_modules(db, outdated_only=True)] == ["tm-002", "tm-005"]
        assert [m.id for m in queries.filter_training_modules(db, department="All")] == ["tm-005", "tm-006", "tm-007"]

    def test_report_filters(self, db):
        osha = queries.filter_reports(db, report_type="OSHA")
        assert {r.id for r in osha} == {"rep-002", "rep-004"}
        assert [r.id for r in queries.filter_reports(db, search="grain bin")] == ["rep-007"]
