import json
import logging
from datetime import date
from openai import OpenAI
from sqlalchemy.orm import Session
from safetyboard.core import clock, config
from safetyboard.models.models import (
    Employee, TrainingModule, Incident, Report, IncidentTrendPoint, DepartmentComplianceSnapshot
)
from safetyboard.services import queries, analytics
from safetyboard.services.serializers import (
    serialize_employee, serialize_module, serialize_incident, serialize_report,
    serialize_certification, serialize_assignment
)

logger = logging.getLogger(__name__)

INSTRUCTIONS = """## INSTRUCTIONS
- Provide accurate, data-driven answers based on the above information
- Use specific employee names, dates, and numbers from the data
- Format responses with markdown for readability (use **bold**, bullet points, etc.)
- When discussing compliance rates, calculate percentages accurately
- Always cite specific data points (employee names, incident IDs, dates)
- Provide actionable recommendations when appropriate
- If asked about trends, reference the trend data
- Be professional and safety-focused
- If you don't have specific data to answer a question, be honest about it"""


class ChatNotConfigured(Exception):
    pass


def _dump(data) -> str:
    return json.dumps(data, indent=2, default=str)


def _department_compliance(db: Session) -> list[dict]:
    rows = {}
    for snap in db.query(DepartmentComplianceSnapshot).order_by(DepartmentComplianceSnapshot.month).all():
        rows.setdefault(snap.month, {"date": snap.month})[snap.department.value] = snap.compliance
    return list(rows.values())


def build_data_context(db: Session, today: date = None) -> str:
    """System prompt carrying a full snapshot of the dataset."""
    today = today or clock.today()
    window = config.CERT_EXPIRING_SOON_DAYS

    employees = db.query(Employee).order_by(Employee.id).all()
    modules = db.query(TrainingModule).order_by(TrainingModule.id).all()
    incidents = db.query(Incident).order_by(Incident.id).all()
    reports = db.query(Report).order_by(Report.id).all()
    trends = db.query(IncidentTrendPoint).order_by(IncidentTrendPoint.month).all()

    overdue = queries.get_overdue_training(db)
    expired = queries.get_expired_certifications(db)
    expiring = queries.get_expiring_certifications(db, window, today)
    at_risk = queries.get_at_risk_employees(db)

    sections = [
        "You are an AI safety assistant for DeLong Safety Management System. "
        "You have access to complete company safety data.",
        f"CURRENT DATE: {today.isoformat()}",
        f"## EMPLOYEES ({len(employees)} total)\n{_dump([serialize_employee(e, detail=True) for e in employees])}",
        f"## TRAINING MODULES ({len(modules)} total)\n{_dump([serialize_module(m, detail=True) for m in modules])}",
        f"## INCIDENTS ({len(incidents)} total)\n{_dump([serialize_incident(i) for i in incidents])}",
        f"## REPORTS ({len(reports)} total)\n{_dump([serialize_report(r, detail=True) for r in reports])}",
        "## INCIDENT TRENDS\n" + _dump([
            {"date": t.month, "incidents": t.incidents, "compliance": t.compliance} for t in trends
        ]),
        f"## DEPARTMENT COMPLIANCE DATA\n{_dump(_department_compliance(db))}",
        f"## INCIDENT DISTRIBUTION BY TYPE\n{_dump(analytics.incident_distribution(db))}",
        "\n".join([
            "## CURRENT STATISTICS",
            f"- Days since last incident: {queries.get_days_since_last_incident(db)}",
            f"- Active incidents: {len(queries.get_active_incidents(db))}",
            f"- Overdue training assignments: {len(overdue)}",
            f"- Expired certifications: {len(expired)}",
            f"- Certifications expiring in {window} days: {len(expiring)}",
            f"- Outdated training modules: {len(queries.get_outdated_modules(db))}",
            f"- At-risk employees: {len(at_risk)}",
        ]),
        "## OVERDUE TRAINING DETAILS\n" + _dump([
            {"employee": e.name, "employee_id": e.id, "assignment": serialize_assignment(a), "training": m.title}
            for e, a, m in overdue
        ]),
        "## EXPIRED CERTIFICATIONS\n" + _dump([
            {"employee": e.name, "employee_id": e.id, "certification": serialize_certification(c)}
            for e, c in expired
        ]),
        f"## EXPIRING CERTIFICATIONS (next {window} days)\n" + _dump([
            {"employee": e.name, "employee_id": e.id, "certification": serialize_certification(c)}
            for e, c in expiring
        ]),
        f"## AT-RISK EMPLOYEES\n{_dump([serialize_employee(e) for e in at_risk])}",
        INSTRUCTIONS,
    ]
    return "\n\n".join(sections)


def _history(messages: list[dict]) -> list[dict]:
    return [
        {"role": "user" if m.get("role") == "user" else "assistant", "content": str(m.get("content", ""))}
        for m in messages
    ]


def complete_chat(system_prompt: str, messages: list[dict]) -> str:
    api_key = config.get_chat_api_key()
    if not api_key or api_key == config.PLACEHOLDER_API_KEY:
        raise ChatNotConfigured("Please add your Google API key to the .env file as GOOGLE_API_KEY")

    client = OpenAI(api_key=api_key, base_url=config.CHAT_BASE_URL)
    logger.info("Chat completion: %d messages, model %s", len(messages), config.CHAT_MODEL)
    resp = client.chat.completions.create(
        model=config.CHAT_MODEL,
        messages=[{"role": "system", "content": system_prompt}] + _history(messages),
        max_tokens=config.CHAT_MAX_TOKENS,
    )
    return resp.choices[0].message.content or ""
