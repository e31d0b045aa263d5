import json
import logging
from datetime import datetime
from sqlalchemy.orm import Session
from safetyboard.core import clock
from safetyboard.models.models import (
    Employee, Incident, Report, AuditEntry, ReportType, ReportStatus, IncidentStatus, next_id
)
from safetyboard.services.status_rules import (
    next_incident_status, next_report_status, REPORT_AUDIT_ACTIONS
)

logger = logging.getLogger(__name__)


def _local_naive(dt: datetime) -> datetime:
    # stored datetimes are naive local time, like clock.now()
    if dt.tzinfo is not None:
        return dt.astimezone().replace(tzinfo=None)
    return dt


def create_incident(db: Session, data, reported_by: str | None = None) -> Incident:
    description = data.description
    extras = [
        ("Witnesses", data.witness_names),
        ("Injury", data.injury_description),
        ("Property damage", data.property_damage_description),
    ]
    for label, text in extras:
        if text:
            description = f"{description}\n\n{label}: {text}".strip()

    employee_ids = list(data.involved_employee_ids)
    if reported_by and reported_by not in employee_ids:
        employee_ids.insert(0, reported_by)
    involved = db.query(Employee).filter(Employee.id.in_(employee_ids)).all() if employee_ids else []
    missing = set(employee_ids) - {e.id for e in involved}
    if missing:
        raise LookupError(f"Unknown employee ids: {', '.join(sorted(missing))}")

    now = clock.now()
    incident = Incident(
        id=next_id(db, Incident, "inc"),
        title=data.title,
        description=description,
        incident_type=data.type,
        severity=data.severity,
        department=data.department,
        location=data.location,
        occurred_at=_local_naive(data.date_time) if data.date_time else now,
        status=IncidentStatus.REPORTED,
        photos=json.dumps(data.photos),
        documents=json.dumps(data.documents),
        immediate_actions=data.immediate_actions,
        reported_by=reported_by,
        created_at=now,
        updated_at=now,
        involved_employees=sorted(involved, key=lambda e: e.id),
    )
    db.add(incident)
    db.commit()
    db.refresh(incident)
    logger.info("Incident %s reported by %s", incident.id, reported_by or "supervisor")
    return incident


def transition_incident(db: Session, incident: Incident, action: str) -> Incident:
    previous = IncidentStatus(incident.status)
    incident.status = next_incident_status(previous, action)
    incident.updated_at = clock.now()
    db.commit()
    db.refresh(incident)
    logger.info("Incident %s: %s -> %s", incident.id, previous.value, incident.status.value)
    return incident


def _report_template(incident: Incident, report_type: ReportType) -> str:
    names = ", ".join(f"{e.name} ({e.role})" for e in incident.involved_employees) or "None recorded"
    when = incident.occurred_at.strftime("%B %d, %Y %H:%M")
    if report_type == ReportType.OSHA:
        return "\n".join([
            "## OSHA Form 301 - Injury and Illness Incident Report",
            "",
            f"**Case Number:** {incident.id.upper()}",
            "",
            "**Employee Information:**",
            f"- Involved: {names}",
            "",
            "**Incident Details:**",
            f"- Date: {when}",
            f"- Location: {incident.location}",
            f"- Type: {incident.incident_type.value}",
            f"- Severity: {incident.severity.value}",
            "",
            "**Description:**",
            incident.description or "",
            "",
            "**Classification:**",
            "Pending review",
        ])
    return "\n".join([
        "## Incident Summary",
        incident.description or "",
        "",
        "## Details",
        f"- Department: {incident.department.value}",
        f"- Location: {incident.location}",
        f"- Date: {when}",
        f"- Severity: {incident.severity.value}",
        f"- Involved employees: {names}",
        "",
        "## Immediate Actions",
        incident.immediate_actions or "None recorded",
        "",
        "## Root Cause Analysis",
        "Pending investigation",
        "",
        "## Corrective Actions",
        "To be determined",
    ])


def generate_report(db: Session, incident: Incident, report_type: ReportType, title: str | None = None,
                    user: str = "System") -> Report:
    now = clock.now()
    default_title = f"{incident.title} - {'OSHA Compliance' if report_type == ReportType.OSHA else 'Safety Analysis'}"
    report = Report(
        id=next_id(db, Report, "rep"),
        incident_id=incident.id,
        report_type=report_type,
        title=title or default_title,
        content=_report_template(incident, report_type),
        status=ReportStatus.DRAFT,
        created_at=now,
    )
    report.audit_trail.append(AuditEntry(
        timestamp=now, action="Created", user=user, details="Initial report generated"
    ))
    db.add(report)
    db.commit()
    db.refresh(report)
    logger.info("Generated %s report %s for incident %s", report_type.value, report.id, incident.id)
    return report


def apply_report_action(db: Session, report: Report, action: str, user: str,
                        details: str | None = None, title: str | None = None,
                        content: str | None = None) -> Report:
    previous = ReportStatus(report.status)
    report.status = next_report_status(previous, action)
    if action == "edit":
        if title is not None:
            report.title = title
        if content is not None:
            report.content = content
    report.audit_trail.append(AuditEntry(
        timestamp=clock.now(),
        action=REPORT_AUDIT_ACTIONS[action],
        user=user,
        details=details,
    ))
    db.commit()
    db.refresh(report)
    logger.info("Report %s: %s by %s (%s -> %s)", report.id, action, user, previous.value, report.status.value)
    return report
