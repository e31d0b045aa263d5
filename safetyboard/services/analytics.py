import calendar
from datetime import date
from sqlalchemy import desc
from sqlalchemy.orm import Session
from safetyboard.core import clock
from safetyboard.models.models import (
    Employee, TrainingModule, TrainingAssignment, Incident,
    ComplianceStatus, CertificationStatus, TrainingStatus, Severity
)
from safetyboard.services import queries
from safetyboard.services.seed_data import INCIDENT_TYPE_COLORS

CALENDAR_EVENT_TYPES = ("training-due", "certification-expiring", "certification-expired", "incident")


def _fmt(d) -> str:
    return f"{d:%b} {d.day}, {d.year}"


def incident_heatmap(db: Session, year: int, month: int) -> list[dict]:
    days_in_month = calendar.monthrange(year, month)[1]
    counts = {}
    for incident in queries.get_incidents_by_month(db, year, month):
        counts[incident.occurred_at.day] = counts.get(incident.occurred_at.day, 0) + 1
    return [{"day": day, "count": counts.get(day, 0)} for day in range(1, days_in_month + 1)]


def overall_compliance(db: Session) -> int:
    employees = db.query(Employee).all()
    if not employees:
        return 0
    compliant = sum(1 for e in employees if ComplianceStatus(e.compliance_status) == ComplianceStatus.COMPLIANT)
    return round(compliant / len(employees) * 100)


def incident_distribution(db: Session) -> list[dict]:
    counts = {}
    for incident in db.query(Incident).all():
        name = incident.incident_type.value
        counts[name] = counts.get(name, 0) + 1
    return [
        {"name": name, "value": counts[name], "color": color}
        for name, color in INCIDENT_TYPE_COLORS.items() if counts.get(name)
    ]


def department_incident_ranking(db: Session) -> list[dict]:
    counts = {}
    for incident in db.query(Incident).order_by(Incident.id).all():
        dept = incident.department.value
        counts[dept] = counts.get(dept, 0) + 1
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [{"department": dept, "incidents": n} for dept, n in ranked]


def training_incident_links(db: Session) -> list[dict]:
    incidents = db.query(Incident).order_by(Incident.id).all()
    links = []
    for module in db.query(TrainingModule).order_by(TrainingModule.id).all():
        keyword = module.title.lower().split(" ")[0]
        related = [
            i for i in incidents
            if i.department.value == module.department or keyword in (i.description or "").lower()
        ]
        links.append({
            "module_id": module.id,
            "title": module.title,
            "department": module.department,
            "incident_count": len(related),
            "incident_ids": [i.id for i in related],
        })
    links.sort(key=lambda link: link["incident_count"], reverse=True)
    return links


def module_assignment_stats(db: Session, module_id: str) -> dict:
    assignments = db.query(TrainingAssignment).filter(TrainingAssignment.training_id == module_id).all()
    statuses = [TrainingStatus(a.status) for a in assignments]
    return {
        "total": len(statuses),
        "complete": statuses.count(TrainingStatus.COMPLETE),
        "in_progress": statuses.count(TrainingStatus.IN_PROGRESS) + statuses.count(TrainingStatus.AT_RISK),
        "overdue": statuses.count(TrainingStatus.OVERDUE),
        "not_started": statuses.count(TrainingStatus.NOT_STARTED),
    }


def priority_alerts(db: Session) -> list[dict]:
    alerts = []
    for employee, cert in queries.get_expired_certifications(db):
        alerts.append({
            "id": f"cert-{cert.id}",
            "type": "error",
            "title": "Expired Certification",
            "description": f"{employee.name}'s {cert.name} expired on {_fmt(cert.expiration_date)}",
            "link": f"/employees/{employee.id}",
        })
    for employee, assignment, module in queries.get_overdue_training(db):
        alerts.append({
            "id": f"training-{assignment.id}",
            "type": "warning",
            "title": "Overdue Training",
            "description": f"{employee.name} - {module.title} was due {_fmt(assignment.due_date)}",
            "link": f"/employees/{employee.id}",
        })
    for module in queries.get_outdated_modules(db):
        updated = _fmt(module.last_updated) if module.last_updated else "unknown"
        alerts.append({
            "id": f"module-{module.id}",
            "type": "info",
            "title": "Outdated Training Module",
            "description": f"{module.title} - Last updated {updated}",
            "link": f"/training/{module.id}",
        })
    return alerts


def _training_severity(status: TrainingStatus) -> str:
    if status == TrainingStatus.OVERDUE:
        return "high"
    if status == TrainingStatus.AT_RISK:
        return "medium"
    return "low"


def _certification_severity(status: CertificationStatus) -> str:
    if status == CertificationStatus.EXPIRED:
        return "high"
    if status == CertificationStatus.EXPIRING_SOON:
        return "medium"
    return "low"


def _incident_severity(severity: Severity) -> str:
    if severity in (Severity.CRITICAL, Severity.SEVERE):
        return "high"
    if severity == Severity.MODERATE:
        return "medium"
    return "low"


def calendar_events(
    db: Session,
    types=None,
    employee: Employee = None,
    year: int = None,
    month: int = None,
) -> list[dict]:
    """Training due dates, certification expirations and incidents as dated events.

    Scoped to one employee when ``employee`` is given: completed training stays
    on that calendar and incidents are left out. ``year``/``month`` narrow the
    result to a single month.
    """
    types = set(CALENDAR_EVENT_TYPES if types is None else types)
    employees = [employee] if employee else db.query(Employee).order_by(Employee.id).all()
    modules = {m.id: m for m in db.query(TrainingModule).all()}
    events = []

    if "training-due" in types:
        for emp in employees:
            for a in emp.training_assignments:
                status = TrainingStatus(a.status)
                if status == TrainingStatus.COMPLETE and not employee:
                    continue
                module = modules.get(a.training_id)
                title = module.title if module else "Training"
                events.append({
                    "id": f"training-{a.id}",
                    "title": title if employee else f"{emp.name}: {title}",
                    "date": a.due_date,
                    "type": "training-due",
                    "status": status.value,
                    "severity": _training_severity(status),
                    "link": "/employee/training" if employee else f"/employees/{emp.id}",
                    "details": f"Due: {_fmt(a.due_date)}",
                })

    for emp in employees:
        for cert in emp.certifications:
            status = CertificationStatus(cert.status)
            event_type = "certification-expired" if status == CertificationStatus.EXPIRED else "certification-expiring"
            if event_type not in types:
                continue
            verb = "Expired" if status == CertificationStatus.EXPIRED else "Expires"
            events.append({
                "id": f"cert-{cert.id}",
                "title": cert.name if employee else f"{emp.name}: {cert.name}",
                "date": cert.expiration_date,
                "type": event_type,
                "status": status.value,
                "severity": _certification_severity(status),
                "link": "/employee/certifications" if employee else f"/employees/{emp.id}",
                "details": f"{verb}: {_fmt(cert.expiration_date)}",
            })

    if "incident" in types and not employee:
        for incident in db.query(Incident).order_by(Incident.id).all():
            events.append({
                "id": f"incident-{incident.id}",
                "title": incident.title,
                "date": incident.occurred_at.date(),
                "type": "incident",
                "status": incident.status.value,
                "severity": _incident_severity(incident.severity),
                "link": f"/incidents/{incident.id}",
                "details": f"{incident.incident_type.value} - {incident.severity.value}",
            })

    if year and month:
        events = [e for e in events if e["date"].year == year and e["date"].month == month]
    events.sort(key=lambda e: (e["date"], e["id"]))
    return events


def upcoming_events(events: list[dict], today: date = None, limit: int = 5) -> list[dict]:
    today = today or clock.today()
    upcoming = [e for e in events if e["date"] >= today and e["status"] != TrainingStatus.COMPLETE.value]
    return upcoming[:limit]


def recent_activity(db: Session, limit: int = 3) -> dict:
    incidents = db.query(Incident).order_by(desc(Incident.occurred_at)).limit(limit).all()
    completed = db.query(Employee, TrainingAssignment, TrainingModule).join(
        TrainingAssignment, TrainingAssignment.employee_id == Employee.id
    ).join(
        TrainingModule, TrainingModule.id == TrainingAssignment.training_id
    ).filter(
        TrainingAssignment.status == TrainingStatus.COMPLETE,
        TrainingAssignment.completed_date.isnot(None)
    ).order_by(desc(TrainingAssignment.completed_date)).limit(limit).all()
    return {
        "incidents": [{
            "id": i.id,
            "title": i.title,
            "department": i.department.value,
            "severity": i.severity.value,
            "occurred_at": i.occurred_at.isoformat(),
        } for i in incidents],
        "training_completed": [{
            "employee_id": e.id,
            "employee_name": e.name,
            "assignment_id": a.id,
            "training_id": m.id,
            "training_title": m.title,
            "completed_date": str(a.completed_date),
        } for e, a, m in completed],
    }


def employee_summary(employee: Employee, today: date = None) -> dict:
    today = today or clock.today()
    training = [TrainingStatus(a.status) for a in employee.training_assignments]
    certs = [CertificationStatus(c.status) for c in employee.certifications]

    upcoming_training = sorted([
        {
            "assignment_id": a.id,
            "training_id": a.training_id,
            "title": a.module.title if a.module else "Training",
            "due_date": str(a.due_date),
            "status": TrainingStatus(a.status).value,
            "days_until_due": (a.due_date - today).days,
        }
        for a in employee.training_assignments if TrainingStatus(a.status) != TrainingStatus.COMPLETE
    ], key=lambda item: item["days_until_due"])

    expiring_certs = sorted([
        {
            "certification_id": c.id,
            "name": c.name,
            "expiration_date": str(c.expiration_date),
            "status": CertificationStatus(c.status).value,
            "days_until_expiration": (c.expiration_date - today).days,
        }
        for c in employee.certifications if CertificationStatus(c.status) != CertificationStatus.EXPIRED
    ], key=lambda item: item["days_until_expiration"])

    return {
        "employee_id": employee.id,
        "compliance_status": ComplianceStatus(employee.compliance_status).value,
        "training": {
            "total": len(training),
            "completed": training.count(TrainingStatus.COMPLETE),
            "pending": len(training) - training.count(TrainingStatus.COMPLETE),
            "overdue": training.count(TrainingStatus.OVERDUE),
        },
        "certifications": {
            "total": len(certs),
            "valid": certs.count(CertificationStatus.VALID),
            "expiring_soon": certs.count(CertificationStatus.EXPIRING_SOON),
            "expired": certs.count(CertificationStatus.EXPIRED),
        },
        "incident_ids": [i.id for i in employee.incidents],
        "upcoming_training": upcoming_training,
        "expiring_certifications": expiring_certs,
    }
