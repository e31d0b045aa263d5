from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import desc
from sqlalchemy.orm import Session
from safetyboard.core import clock
from safetyboard.db.session import get_db
from safetyboard.models.models import Employee, TrainingModule, Incident, IncidentStatus
from safetyboard.services import queries, analytics
from safetyboard.services.serializers import serialize_incident

router = APIRouter(prefix="/api/supervisor", tags=["supervisor-dashboard"])


def parse_month(month: str | None) -> tuple[int, int]:
    if not month:
        today = clock.today()
        return today.year, today.month
    try:
        year, mon = (int(part) for part in month.split("-", 1))
    except ValueError:
        raise HTTPException(status_code=400, detail="month must be YYYY-MM")
    if not 1 <= mon <= 12:
        raise HTTPException(status_code=400, detail="month must be YYYY-MM")
    return year, mon


@router.get("/dashboard")
def get_dashboard(month: str = Query(None), db: Session = Depends(get_db)):
    year, mon = parse_month(month)
    active = db.query(Incident).filter(
        Incident.status != IncidentStatus.CLOSED
    ).order_by(desc(Incident.occurred_at)).all()

    return {
        "stats": {
            "total_employees": db.query(Employee).count(),
            "training_modules": db.query(TrainingModule).count(),
            "active_incidents": len(active),
            "days_since_last_incident": queries.get_days_since_last_incident(db),
        },
        "active_incidents": [serialize_incident(i) for i in active],
        "alerts": analytics.priority_alerts(db),
        "recent_activity": analytics.recent_activity(db),
        "heatmap": {
            "month": f"{year:04d}-{mon:02d}",
            "days": analytics.incident_heatmap(db, year, mon),
        },
    }


@router.get("/dashboard/heatmap/{day}")
def get_heatmap_day(day: int, month: str = Query(None), db: Session = Depends(get_db)):
    year, mon = parse_month(month)
    try:
        incidents = queries.get_incidents_by_date(db, year, mon, day)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid day")
    return {
        "date": f"{year:04d}-{mon:02d}-{day:02d}",
        "incidents": [serialize_incident(i) for i in incidents],
    }
