from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, Body
from sqlalchemy import func
from sqlalchemy.orm import Session
from safetyboard.db.session import get_db
from safetyboard.models.models import Incident, Department, Severity, IncidentStatus
from safetyboard.schemas.schemas import IncidentCreate, ReportCreate
from safetyboard.services import queries, workflow
from safetyboard.services.serializers import serialize_incident, serialize_report

router = APIRouter(prefix="/api/supervisor", tags=["supervisor-incidents"])


def _get_incident_or_404(db: Session, incident_id: str) -> Incident:
    incident = queries.get_incident_by_id(db, incident_id)
    if not incident:
        raise HTTPException(status_code=404, detail="Incident not found")
    return incident


@router.get("/incidents")
def list_incidents(
    search: str = Query(None),
    department: list[Department] = Query(None),
    severity: list[Severity] = Query(None),
    status: list[IncidentStatus] = Query(None),
    employee_id: list[str] = Query(None),
    date_from: date = Query(None),
    date_to: date = Query(None),
    db: Session = Depends(get_db)
):
    incidents = queries.filter_incidents(
        db, search, department, severity, status, employee_id, date_from, date_to
    )
    return {
        "total": len(incidents),
        "incidents": [serialize_incident(i) for i in incidents],
    }


@router.get("/incidents/stats")
def get_incident_stats(db: Session = Depends(get_db)):
    by_status = {s.value: 0 for s in IncidentStatus}
    for s, c in db.query(Incident.status, func.count(Incident.id)).group_by(Incident.status).all():
        by_status[s.value if hasattr(s, "value") else str(s)] = c
    return {
        "total": sum(by_status.values()),
        "reported": by_status[IncidentStatus.REPORTED.value],
        "under_review": by_status[IncidentStatus.UNDER_REVIEW.value],
        "closed": by_status[IncidentStatus.CLOSED.value],
        "days_since_last_incident": queries.get_days_since_last_incident(db),
    }


@router.post("/incidents", status_code=201)
def create_incident(data: IncidentCreate, db: Session = Depends(get_db)):
    try:
        incident = workflow.create_incident(db, data)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return serialize_incident(incident, detail=True)


@router.get("/incidents/{incident_id}")
def get_incident(incident_id: str, db: Session = Depends(get_db)):
    return serialize_incident(_get_incident_or_404(db, incident_id), detail=True)


@router.post("/incidents/{incident_id}/actions/{action}")
def run_incident_action(incident_id: str, action: str, db: Session = Depends(get_db)):
    incident = _get_incident_or_404(db, incident_id)
    incident = workflow.transition_incident(db, incident, action)
    return serialize_incident(incident, detail=True)


@router.get("/incidents/{incident_id}/reports")
def list_incident_reports(incident_id: str, db: Session = Depends(get_db)):
    _get_incident_or_404(db, incident_id)
    return [serialize_report(r) for r in queries.get_reports_by_incident_id(db, incident_id)]


@router.post("/incidents/{incident_id}/reports", status_code=201)
def generate_incident_report(incident_id: str, data: ReportCreate = Body(ReportCreate()), db: Session = Depends(get_db)):
    incident = _get_incident_or_404(db, incident_id)
    report = workflow.generate_report(db, incident, data.type, data.title, data.user)
    return serialize_report(report, detail=True)
