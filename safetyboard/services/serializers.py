import json
from safetyboard.models.models import (
    Employee, Certification, TrainingModule, TrainingAssignment,
    Incident, Report, AuditEntry, ChatConversation, ChatMessage, PortalProfile
)
from safetyboard.services.status_rules import badge_for, incident_actions, report_actions


def _value(v):
    return v.value if hasattr(v, "value") else v


def _iso(dt):
    return dt.isoformat() if dt else None


def _json_list(raw) -> list:
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return parsed if isinstance(parsed, list) else []


def serialize_certification(c: Certification) -> dict:
    return {
        "id": c.id,
        "employee_id": c.employee_id,
        "name": c.name,
        "issued_date": _iso(c.issued_date),
        "expiration_date": _iso(c.expiration_date),
        "status": _value(c.status),
        "badge": badge_for(c.status, "certification"),
    }


def serialize_assignment(a: TrainingAssignment) -> dict:
    return {
        "id": a.id,
        "training_id": a.training_id,
        "training_title": a.module.title if a.module else None,
        "employee_id": a.employee_id,
        "assigned_date": _iso(a.assigned_date),
        "due_date": _iso(a.due_date),
        "completed_date": _iso(a.completed_date),
        "status": _value(a.status),
        "badge": badge_for(a.status, "training"),
    }


def serialize_employee(e: Employee, detail: bool = False) -> dict:
    data = {
        "id": e.id,
        "name": e.name,
        "email": e.email,
        "phone": e.phone,
        "department": _value(e.department),
        "role": e.role,
        "hire_date": _iso(e.hire_date),
        "compliance_status": _value(e.compliance_status),
        "badge": badge_for(e.compliance_status, "compliance"),
        "training_completed": sum(1 for a in e.training_assignments if _value(a.status) == "complete"),
        "training_total": len(e.training_assignments),
        "incident_ids": [i.id for i in e.incidents],
    }
    if detail:
        data["certifications"] = [serialize_certification(c) for c in e.certifications]
        data["training_assignments"] = [serialize_assignment(a) for a in e.training_assignments]
    return data


def serialize_module(m: TrainingModule, detail: bool = False) -> dict:
    data = {
        "id": m.id,
        "title": m.title,
        "description": m.description,
        "duration": m.duration,
        "department": m.department,
        "created_date": _iso(m.created_date),
        "last_updated": _iso(m.last_updated),
        "is_outdated": bool(m.is_outdated),
        "version": m.version,
    }
    if detail:
        data["content"] = m.content
    return data


def serialize_incident(i: Incident, detail: bool = False) -> dict:
    data = {
        "id": i.id,
        "title": i.title,
        "description": i.description,
        "type": _value(i.incident_type),
        "severity": _value(i.severity),
        "severity_badge": badge_for(i.severity, "severity"),
        "department": _value(i.department),
        "location": i.location,
        "date_time": _iso(i.occurred_at),
        "status": _value(i.status),
        "badge": badge_for(i.status, "incident"),
        "involved_employee_ids": [e.id for e in i.involved_employees],
        "report_ids": [r.id for r in i.reports],
        "photos": _json_list(i.photos),
        "documents": _json_list(i.documents),
        "reported_by": i.reported_by,
    }
    if detail:
        data["immediate_actions"] = i.immediate_actions
        data["involved_employees"] = [
            {"id": e.id, "name": e.name, "role": e.role, "department": _value(e.department)}
            for e in i.involved_employees
        ]
        data["reports"] = [serialize_report(r) for r in i.reports]
        data["actions"] = incident_actions(i.status)
    return data


def serialize_audit_entry(entry: AuditEntry) -> dict:
    return {
        "timestamp": _iso(entry.timestamp),
        "action": entry.action,
        "user": entry.user,
        "details": entry.details,
    }


def serialize_report(r: Report, detail: bool = False) -> dict:
    data = {
        "id": r.id,
        "incident_id": r.incident_id,
        "type": _value(r.report_type),
        "type_badge": badge_for(r.report_type, "report_type"),
        "title": r.title,
        "status": _value(r.status),
        "badge": badge_for(r.status, "report"),
        "created_at": _iso(r.created_at),
    }
    if detail:
        data["content"] = r.content
        data["incident_title"] = r.incident.title if r.incident else None
        data["audit_trail"] = [serialize_audit_entry(a) for a in r.audit_trail]
        data["actions"] = report_actions(r.status)
    return data


def serialize_message(m: ChatMessage) -> dict:
    return {
        "id": m.id,
        "role": _value(m.role),
        "content": m.content,
        "timestamp": _iso(m.timestamp),
    }


def serialize_conversation(c: ChatConversation, detail: bool = False) -> dict:
    data = {
        "id": c.id,
        "portal": _value(c.portal),
        "title": c.title,
        "created_at": _iso(c.created_at),
        "updated_at": _iso(c.updated_at),
        "message_count": len(c.messages),
    }
    if detail:
        data["messages"] = [serialize_message(m) for m in c.messages]
    return data


def serialize_settings(p: PortalProfile) -> dict:
    return {
        "notifications": {
            "email_alerts": p.email_alerts,
            "incident_notifications": p.incident_notifications,
            "training_reminders": p.training_reminders,
            "certification_expiry": p.certification_expiry,
        },
        "theme": p.theme,
        "language": p.language,
    }


def serialize_profile(p: PortalProfile) -> dict:
    data = {
        "id": p.id,
        "portal": _value(p.portal),
        "name": p.name,
        "email": p.email,
        "phone": p.phone,
        "role": p.role,
        "department": _value(p.department),
        "hire_date": _iso(p.hire_date),
        "last_login": _iso(p.last_login),
    }
    if p.employees_managed is not None:
        data["employees_managed"] = p.employees_managed
    if p.certifications:
        data["certifications"] = _json_list(p.certifications)
    if p.supervisor_id:
        data["supervisor_id"] = p.supervisor_id
    if p.compliance_status:
        data["compliance_status"] = _value(p.compliance_status)
    return data
