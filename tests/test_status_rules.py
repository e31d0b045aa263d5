"""Tests for badge lookup, status derivation and the incident/report workflows."""

from datetime import date
from types import SimpleNamespace

import pytest

from safetyboard.models.models import (
    CertificationStatus, TrainingStatus, ComplianceStatus, IncidentStatus, ReportStatus
)
from safetyboard.services.status_rules import (
    WorkflowError, badge_for, derive_certification_status, derive_training_status,
    derive_compliance_status, incident_actions, next_incident_status, next_report_status,
    refresh_statuses, report_actions, status_drift
)

from conftest import TODAY


def _assignment(status, due, completed=None):
    return SimpleNamespace(status=status, due_date=due, completed_date=completed)


class TestBadges:

    def test_certification_badge(self):
        assert badge_for(CertificationStatus.EXPIRED) == {"label": "Expired", "color": "red"}

    def test_kind_disambiguates_shared_values(self):
        assert badge_for("in-progress", "training")["color"] == "blue"
        assert badge_for("in-progress", "compliance")["color"] == "yellow"

    def test_report_and_severity_badges(self):
        assert badge_for("Approved", "report")["color"] == "green"
        assert badge_for("Critical", "severity")["color"] == "red"

    def test_unknown_value_falls_back_to_grey(self):
        assert badge_for("archived") == {"label": "archived", "color": "slate"}


class TestCertificationDerivation:

    def test_past_expiration_is_expired(self):
        assert derive_certification_status(date(2024, 12, 31), TODAY) == CertificationStatus.EXPIRED

    def test_expiration_today_is_expiring_soon(self):
        assert derive_certification_status(TODAY, TODAY) == CertificationStatus.EXPIRING_SOON

    def test_window_boundary(self):
        assert derive_certification_status(date(2025, 4, 1), TODAY, 90) == CertificationStatus.EXPIRING_SOON
        assert derive_certification_status(date(2025, 4, 2), TODAY, 90) == CertificationStatus.VALID


class TestTrainingDerivation:

    def test_completed_date_wins(self):
        a = _assignment("overdue", date(2024, 10, 1), completed=date(2024, 9, 25))
        assert derive_training_status(a, TODAY) == TrainingStatus.COMPLETE

    def test_past_due_is_overdue(self):
        a = _assignment("in-progress", date(2024, 12, 15))
        assert derive_training_status(a, TODAY) == TrainingStatus.OVERDUE

    def test_not_started_close_to_due_is_at_risk(self):
        a = _assignment("not-started", date(2025, 1, 5))
        assert derive_training_status(a, TODAY, at_risk_days=7) == TrainingStatus.AT_RISK

    def test_not_started_far_from_due_is_kept(self):
        a = _assignment("not-started", date(2025, 1, 15))
        assert derive_training_status(a, TODAY, at_risk_days=7) == TrainingStatus.NOT_STARTED

    def test_in_progress_is_kept(self):
        a = _assignment("in-progress", date(2025, 1, 3))
        assert derive_training_status(a, TODAY) == TrainingStatus.IN_PROGRESS

    def test_stale_overdue_falls_back_to_in_progress(self):
        a = _assignment("overdue", date(2025, 2, 1))
        assert derive_training_status(a, TODAY) == TrainingStatus.IN_PROGRESS


class TestComplianceDerivation:

    def test_reproduces_every_seeded_employee(self, db):
        from safetyboard.models.models import Employee
        for employee in db.query(Employee).all():
            derived = derive_compliance_status(employee.certifications, employee.training_assignments)
            assert derived == ComplianceStatus(employee.compliance_status), employee.id

    def test_three_overdue_is_non_compliant(self):
        overdue = [SimpleNamespace(status="overdue")] * 3
        assert derive_compliance_status([], overdue) == ComplianceStatus.NON_COMPLIANT

    def test_nothing_outstanding_is_compliant(self):
        assert derive_compliance_status([], []) == ComplianceStatus.COMPLIANT


class TestDrift:

    def test_no_drift_on_reference_date(self, db):
        drift = status_drift(db, TODAY)
        assert drift["certifications"] == []
        assert drift["training_assignments"] == []

    def test_drift_a_year_later(self, db):
        drift = status_drift(db, date(2026, 1, 1))
        ids = {row["id"]: row for row in drift["certifications"]}
        assert ids["cert-002"]["stored"] == "expiring-soon"
        assert ids["cert-002"]["derived"] == "expired"

    def test_refresh_writes_derived_values(self, db):
        changed = refresh_statuses(db, date(2026, 1, 1))
        assert changed > 0
        assert status_drift(db, date(2026, 1, 1))["certifications"] == []


class TestIncidentWorkflow:

    def test_actions_per_status(self):
        assert incident_actions(IncidentStatus.REPORTED) == ["review"]
        assert incident_actions(IncidentStatus.UNDER_REVIEW) == ["close"]
        assert incident_actions(IncidentStatus.CLOSED) == []

    def test_forward_path(self):
        status = next_incident_status(IncidentStatus.REPORTED, "review")
        assert status == IncidentStatus.UNDER_REVIEW
        assert next_incident_status(status, "close") == IncidentStatus.CLOSED

    @pytest.mark.parametrize("status,action", [
        (IncidentStatus.REPORTED, "close"),
        (IncidentStatus.UNDER_REVIEW, "review"),
        (IncidentStatus.CLOSED, "review"),
    ])
    def test_illegal_transitions(self, status, action):
        with pytest.raises(WorkflowError) as exc:
            next_incident_status(status, action)
        assert exc.value.status == status.value


class TestReportWorkflow:

    def test_actions_per_status(self):
        assert report_actions("Draft") == ["edit", "submit"]
        assert report_actions("Under Review") == ["edit", "approve", "deny"]
        assert report_actions("Approved") == ["close"]
        assert report_actions("Denied") == ["reopen"]
        assert report_actions("Closed") == ["reopen"]

    def test_reopen_returns_to_draft(self):
        assert next_report_status(ReportStatus.CLOSED, "reopen") == ReportStatus.DRAFT

    def test_cannot_approve_draft(self):
        with pytest.raises(WorkflowError) as exc:
            next_report_status(ReportStatus.DRAFT, "approve")
        assert exc.value.allowed == ["edit", "submit"]
