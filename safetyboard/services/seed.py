import json
import logging
from datetime import date, datetime
from sqlalchemy.orm import Session
from safetyboard.models.models import (
    Employee, Certification, TrainingModule, TrainingAssignment,
    Incident, Report, AuditEntry, ChatConversation, ChatMessage, PortalProfile,
    IncidentTrendPoint, DepartmentComplianceSnapshot,
    Department, ComplianceStatus, CertificationStatus, TrainingStatus,
    IncidentType, Severity, IncidentStatus, ReportType, ReportStatus, ChatRole, Portal
)
from safetyboard.services import seed_data

logger = logging.getLogger(__name__)


def _date(value):
    return date.fromisoformat(value) if value else None


def _datetime(value):
    return datetime.fromisoformat(value) if value else None


def _seed_modules(db: Session):
    for m in seed_data.TRAINING_MODULES:
        db.add(TrainingModule(
            id=m["id"],
            title=m["title"],
            description=m["description"],
            content=m["content"],
            duration=m["duration"],
            department=m["department"],
            created_date=_date(m["created_date"]),
            last_updated=_date(m["last_updated"]),
            is_outdated=m["is_outdated"],
            version=m["version"],
        ))


def _seed_employees(db: Session):
    for e in seed_data.EMPLOYEES:
        employee = Employee(
            id=e["id"],
            name=e["name"],
            email=e["email"],
            phone=e["phone"],
            department=Department(e["department"]),
            role=e["role"],
            hire_date=_date(e["hire_date"]),
            compliance_status=ComplianceStatus(e["compliance_status"]),
        )
        for c in e["certifications"]:
            employee.certifications.append(Certification(
                id=c["id"],
                name=c["name"],
                issued_date=_date(c["issued_date"]),
                expiration_date=_date(c["expiration_date"]),
                status=CertificationStatus(c["status"]),
            ))
        for a in e["training_assignments"]:
            employee.training_assignments.append(TrainingAssignment(
                id=a["id"],
                training_id=a["training_id"],
                assigned_date=_date(a["assigned_date"]),
                due_date=_date(a["due_date"]),
                completed_date=_date(a.get("completed_date")),
                status=TrainingStatus(a["status"]),
            ))
        db.add(employee)


def _seed_incidents(db: Session):
    employees = {e.id: e for e in db.query(Employee).all()}
    for i in seed_data.INCIDENTS:
        occurred_at = _datetime(i["date_time"])
        db.add(Incident(
            id=i["id"],
            title=i["title"],
            description=i["description"],
            incident_type=IncidentType(i["type"]),
            severity=Severity(i["severity"]),
            department=Department(i["department"]),
            location=i["location"],
            occurred_at=occurred_at,
            status=IncidentStatus(i["status"]),
            photos=json.dumps(i["photos"]),
            documents=json.dumps(i["documents"]),
            created_at=occurred_at,
            updated_at=occurred_at,
            involved_employees=[employees[eid] for eid in i["involved_employee_ids"] if eid in employees],
        ))


def _seed_reports(db: Session):
    for r in seed_data.REPORTS:
        report = Report(
            id=r["id"],
            incident_id=r["incident_id"],
            report_type=ReportType(r["type"]),
            title=r["title"],
            content=r["content"],
            status=ReportStatus(r["status"]),
            created_at=_datetime(r["created_at"]),
        )
        for entry in r["audit_trail"]:
            report.audit_trail.append(AuditEntry(
                timestamp=_datetime(entry["timestamp"]),
                action=entry["action"],
                user=entry["user"],
                details=entry.get("details"),
            ))
        db.add(report)


def _seed_conversations(db: Session, portal: Portal, conversations: list):
    for c in conversations:
        conversation = ChatConversation(
            id=c["id"],
            portal=portal,
            title=c["title"],
            created_at=_datetime(c["created_at"]),
            updated_at=_datetime(c["updated_at"]),
        )
        for m in c["messages"]:
            conversation.messages.append(ChatMessage(
                id=m["id"],
                role=ChatRole(m["role"]),
                content=m["content"],
                timestamp=_datetime(m["timestamp"]),
            ))
        db.add(conversation)


def _seed_profiles(db: Session):
    for p in (seed_data.SUPERVISOR_PROFILE, seed_data.EMPLOYEE_PROFILE):
        db.add(PortalProfile(
            id=p["id"],
            portal=Portal(p["portal"]),
            name=p["name"],
            email=p["email"],
            phone=p.get("phone"),
            role=p.get("role"),
            department=Department(p["department"]) if p.get("department") else None,
            hire_date=_date(p.get("hire_date")),
            last_login=_datetime(p.get("last_login")),
            employees_managed=p.get("employees_managed"),
            certifications=json.dumps(p["certifications"]) if p.get("certifications") else None,
            supervisor_id=p.get("supervisor_id"),
            compliance_status=ComplianceStatus(p["compliance_status"]) if p.get("compliance_status") else None,
            **seed_data.DEFAULT_SETTINGS,
        ))


def _seed_trends(db: Session):
    for point in seed_data.INCIDENT_TREND_DATA:
        db.add(IncidentTrendPoint(
            month=point["date"],
            incidents=point["incidents"],
            compliance=point["compliance"],
        ))
    for row in seed_data.DEPARTMENT_COMPLIANCE_DATA:
        for dept in Department:
            if dept.value in row:
                db.add(DepartmentComplianceSnapshot(
                    month=row["date"],
                    department=dept,
                    compliance=row[dept.value],
                ))


def seed_defaults(db: Session) -> bool:
    """Load the shipped dataset into an empty database.

    Returns False without touching anything when employees already exist.
    """
    if db.query(Employee).count() > 0:
        return False

    _seed_modules(db)
    _seed_employees(db)
    db.flush()
    _seed_incidents(db)
    db.flush()
    _seed_reports(db)
    _seed_conversations(db, Portal.SUPERVISOR, seed_data.SUPERVISOR_CHAT_CONVERSATIONS)
    _seed_conversations(db, Portal.EMPLOYEE, seed_data.EMPLOYEE_CHAT_CONVERSATIONS)
    _seed_profiles(db)
    _seed_trends(db)
    db.commit()

    logger.info(
        "Seeded %d employees, %d training modules, %d incidents, %d reports",
        len(seed_data.EMPLOYEES), len(seed_data.TRAINING_MODULES),
        len(seed_data.INCIDENTS), len(seed_data.REPORTS),
    )
    return True
