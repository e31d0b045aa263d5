from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from safetyboard.db.session import get_db
from safetyboard.services import analytics
from safetyboard.api.dashboard import parse_month

router = APIRouter(prefix="/api/supervisor", tags=["supervisor-calendar"])


def _serialize_event(event: dict) -> dict:
    return {**event, "date": event["date"].isoformat()}


@router.get("/calendar")
def get_calendar(
    month: str = Query(None),
    type: list[str] = Query(None),
    db: Session = Depends(get_db)
):
    year, mon = parse_month(month)
    types = [t for t in (type or analytics.CALENDAR_EVENT_TYPES) if t in analytics.CALENDAR_EVENT_TYPES]
    events = analytics.calendar_events(db, types, year=year, month=mon)
    return {
        "month": f"{year:04d}-{mon:02d}",
        "types": types,
        "events": [_serialize_event(e) for e in events],
    }
