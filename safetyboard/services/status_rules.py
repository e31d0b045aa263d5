import logging
from datetime import date, timedelta
from sqlalchemy.orm import Session
from safetyboard.core import config
from safetyboard.models.models import (
    Certification, TrainingAssignment, Employee,
    CertificationStatus, TrainingStatus, ComplianceStatus,
    IncidentStatus, ReportStatus, ReportType, Severity
)

logger = logging.getLogger(__name__)


def _badge(label: str, color: str) -> dict:
    return {"label": label, "color": color}


BADGES = {
    "certification": {
        CertificationStatus.VALID.value: _badge("Valid", "green"),
        CertificationStatus.EXPIRING_SOON.value: _badge("Expiring Soon", "amber"),
        CertificationStatus.EXPIRED.value: _badge("Expired", "red"),
    },
    "training": {
        TrainingStatus.NOT_STARTED.value: _badge("Not Started", "slate"),
        TrainingStatus.IN_PROGRESS.value: _badge("In Progress", "blue"),
        TrainingStatus.AT_RISK.value: _badge("At Risk", "amber"),
        TrainingStatus.OVERDUE.value: _badge("Overdue", "red"),
        TrainingStatus.COMPLETE.value: _badge("Complete", "green"),
    },
    "compliance": {
        ComplianceStatus.COMPLIANT.value: _badge("Compliant", "green"),
        ComplianceStatus.IN_PROGRESS.value: _badge("In Progress", "yellow"),
        ComplianceStatus.AT_RISK.value: _badge("At Risk", "orange"),
        ComplianceStatus.NON_COMPLIANT.value: _badge("Non-Compliant", "red"),
    },
    "incident": {
        IncidentStatus.REPORTED.value: _badge("Reported", "blue"),
        IncidentStatus.UNDER_REVIEW.value: _badge("Under Review", "amber"),
        IncidentStatus.CLOSED.value: _badge("Closed", "slate"),
    },
    "report": {
        ReportStatus.DRAFT.value: _badge("Draft", "slate"),
        ReportStatus.UNDER_REVIEW.value: _badge("Under Review", "amber"),
        ReportStatus.APPROVED.value: _badge("Approved", "green"),
        ReportStatus.DENIED.value: _badge("Denied", "red"),
        ReportStatus.CLOSED.value: _badge("Closed", "slate"),
    },
    "report_type": {
        ReportType.COMPANY_SAFETY.value: _badge("Company Safety", "orange"),
        ReportType.OSHA.value: _badge("OSHA", "blue"),
    },
    "severity": {
        Severity.MINOR.value: _badge("Minor", "green"),
        Severity.MODERATE.value: _badge("Moderate", "yellow"),
        Severity.SEVERE.value: _badge("Severe", "orange"),
        Severity.CRITICAL.value: _badge("Critical", "red"),
    },
}


def badge_for(status, kind: str | None = None) -> dict:
    """Label/color pair for a stored status value.

    "in-progress" and "at-risk" mean different things for training and
    compliance, so pass ``kind`` when the caller knows which table applies.
    Without it the tables are searched in declaration order.
    """
    value = status.value if hasattr(status, "value") else str(status)
    tables = [BADGES[kind]] if kind in BADGES else BADGES.values()
    for table in tables:
        if value in table:
            return dict(table[value])
    return _badge(value, "slate")


def derive_certification_status(expiration: date, today: date, window: int = None) -> CertificationStatus:
    window = config.CERT_EXPIRING_SOON_DAYS if window is None else window
    if expiration < today:
        return CertificationStatus.EXPIRED
    if expiration <= today + timedelta(days=window):
        return CertificationStatus.EXPIRING_SOON
    return CertificationStatus.VALID


def derive_training_status(assignment: TrainingAssignment, today: date, at_risk_days: int = None) -> TrainingStatus:
    at_risk_days = config.TRAINING_AT_RISK_DAYS if at_risk_days is None else at_risk_days
    stored = TrainingStatus(assignment.status) if assignment.status else TrainingStatus.NOT_STARTED

    if assignment.completed_date:
        return TrainingStatus.COMPLETE
    if assignment.due_date < today:
        return TrainingStatus.OVERDUE
    if stored == TrainingStatus.NOT_STARTED and (assignment.due_date - today).days <= at_risk_days:
        return TrainingStatus.AT_RISK
    # not complete and not past due, so these stored values no longer hold
    if stored in (TrainingStatus.OVERDUE, TrainingStatus.COMPLETE):
        return TrainingStatus.IN_PROGRESS
    return stored


def derive_compliance_status(certifications, assignments) -> ComplianceStatus:
    cert_statuses = [CertificationStatus(c.status) for c in certifications]
    training_statuses = [TrainingStatus(a.status) for a in assignments]

    expired = cert_statuses.count(CertificationStatus.EXPIRED)
    expiring = cert_statuses.count(CertificationStatus.EXPIRING_SOON)
    overdue = training_statuses.count(TrainingStatus.OVERDUE)
    at_risk = training_statuses.count(TrainingStatus.AT_RISK)

    if (expired and overdue) or overdue >= 3:
        return ComplianceStatus.NON_COMPLIANT
    if expired or overdue:
        return ComplianceStatus.AT_RISK
    if at_risk or expiring:
        return ComplianceStatus.IN_PROGRESS
    return ComplianceStatus.COMPLIANT


def status_drift(db: Session, today: date) -> dict:
    certifications = []
    for cert in db.query(Certification).order_by(Certification.id).all():
        derived = derive_certification_status(cert.expiration_date, today)
        if CertificationStatus(cert.status) != derived:
            certifications.append({
                "id": cert.id,
                "employee_id": cert.employee_id,
                "name": cert.name,
                "expiration_date": str(cert.expiration_date),
                "stored": CertificationStatus(cert.status).value,
                "derived": derived.value,
            })

    assignments = []
    for a in db.query(TrainingAssignment).order_by(TrainingAssignment.id).all():
        derived = derive_training_status(a, today)
        if TrainingStatus(a.status) != derived:
            assignments.append({
                "id": a.id,
                "employee_id": a.employee_id,
                "training_id": a.training_id,
                "due_date": str(a.due_date),
                "stored": TrainingStatus(a.status).value,
                "derived": derived.value,
            })

    return {
        "as_of": str(today),
        "certifications": certifications,
        "training_assignments": assignments,
    }


def refresh_statuses(db: Session, today: date) -> int:
    changed = 0
    for cert in db.query(Certification).all():
        derived = derive_certification_status(cert.expiration_date, today)
        if CertificationStatus(cert.status) != derived:
            cert.status = derived
            changed += 1
    for a in db.query(TrainingAssignment).all():
        derived = derive_training_status(a, today)
        if TrainingStatus(a.status) != derived:
            a.status = derived
            changed += 1
    db.flush()

    for emp in db.query(Employee).all():
        derived = derive_compliance_status(emp.certifications, emp.training_assignments)
        if ComplianceStatus(emp.compliance_status) != derived:
            emp.compliance_status = derived
            changed += 1

    db.commit()
    logger.info("Refreshed statuses as of %s: %d changed", today, changed)
    return changed


class WorkflowError(Exception):
    def __init__(self, entity: str, status: str, action: str, allowed: list[str]):
        self.entity = entity
        self.status = status
        self.action = action
        self.allowed = allowed
        super().__init__(f"Cannot {action} a {entity} that is {status}")


INCIDENT_TRANSITIONS = {
    IncidentStatus.REPORTED: {"review": IncidentStatus.UNDER_REVIEW},
    IncidentStatus.UNDER_REVIEW: {"close": IncidentStatus.CLOSED},
    IncidentStatus.CLOSED: {},
}

# edit keeps the status; it is listed so callers can offer it
REPORT_TRANSITIONS = {
    ReportStatus.DRAFT: {"edit": ReportStatus.DRAFT, "submit": ReportStatus.UNDER_REVIEW},
    ReportStatus.UNDER_REVIEW: {
        "edit": ReportStatus.UNDER_REVIEW,
        "approve": ReportStatus.APPROVED,
        "deny": ReportStatus.DENIED,
    },
    ReportStatus.APPROVED: {"close": ReportStatus.CLOSED},
    ReportStatus.DENIED: {"reopen": ReportStatus.DRAFT},
    ReportStatus.CLOSED: {"reopen": ReportStatus.DRAFT},
}

REPORT_AUDIT_ACTIONS = {
    "edit": "Updated",
    "submit": "Submitted for Review",
    "approve": "Approved",
    "deny": "Denied",
    "close": "Closed",
    "reopen": "Reopened",
}


def incident_actions(status) -> list[str]:
    return list(INCIDENT_TRANSITIONS[IncidentStatus(status)])


def report_actions(status) -> list[str]:
    return list(REPORT_TRANSITIONS[ReportStatus(status)])


def next_incident_status(status, action: str) -> IncidentStatus:
    current = IncidentStatus(status)
    allowed = INCIDENT_TRANSITIONS[current]
    if action not in allowed:
        raise WorkflowError("incident", current.value, action, list(allowed))
    return allowed[action]


def next_report_status(status, action: str) -> ReportStatus:
    current = ReportStatus(status)
    allowed = REPORT_TRANSITIONS[current]
    if action not in allowed:
        raise WorkflowError("report", current.value, action, list(allowed))
    return allowed[action]
