from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from safetyboard.core import clock, config
from safetyboard.db.session import get_db
from safetyboard.models.models import IncidentTrendPoint, DepartmentComplianceSnapshot
from safetyboard.services import queries, analytics
from safetyboard.services.serializers import serialize_employee, serialize_certification
from safetyboard.services.status_rules import status_drift
from safetyboard.api.dashboard import parse_month

router = APIRouter(prefix="/api/supervisor", tags=["supervisor-insights"])


@router.get("/insights")
def get_insights(
    cert_lookahead: int = Query(30, ge=0),
    db: Session = Depends(get_db)
):
    trends = db.query(IncidentTrendPoint).order_by(IncidentTrendPoint.month).all()
    department_compliance = {}
    for snap in db.query(DepartmentComplianceSnapshot).order_by(DepartmentComplianceSnapshot.month).all():
        department_compliance.setdefault(snap.month, {"date": snap.month})[snap.department.value] = snap.compliance

    return {
        "overall_compliance": analytics.overall_compliance(db),
        "incident_trends": [
            {"date": t.month, "incidents": t.incidents, "compliance": t.compliance} for t in trends
        ],
        "department_compliance": list(department_compliance.values()),
        "incident_distribution": analytics.incident_distribution(db),
        "department_incidents": analytics.department_incident_ranking(db),
        "training_incident_links": analytics.training_incident_links(db),
        "at_risk_employees": [serialize_employee(e) for e in queries.get_at_risk_employees(db)],
        "expiring_certifications": [{
            "employee_id": e.id,
            "employee_name": e.name,
            "certification": serialize_certification(c),
        } for e, c in queries.get_expiring_certifications(db, cert_lookahead, clock.today())],
    }


@router.get("/insights/heatmap")
def get_heatmap(month: str = Query(None), db: Session = Depends(get_db)):
    year, mon = parse_month(month)
    return {
        "month": f"{year:04d}-{mon:02d}",
        "days": analytics.incident_heatmap(db, year, mon),
    }


@router.get("/insights/status-drift")
def get_status_drift(db: Session = Depends(get_db)):
    return status_drift(db, clock.today())


@router.get("/insights/thresholds")
def get_thresholds():
    return {
        "cert_expiring_soon_days": config.CERT_EXPIRING_SOON_DAYS,
        "training_at_risk_days": config.TRAINING_AT_RISK_DAYS,
        "at_risk_overdue_threshold": config.AT_RISK_OVERDUE_THRESHOLD,
        "at_risk_incident_threshold": config.AT_RISK_INCIDENT_THRESHOLD,
    }
