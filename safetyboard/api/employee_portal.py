from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from safetyboard.core import clock
from safetyboard.core.portal import get_current_employee, get_portal_profile, update_profile_settings
from safetyboard.db.session import get_db
from safetyboard.models.models import (
    Employee, Portal, TrainingStatus, CertificationStatus
)
from safetyboard.schemas.schemas import IncidentCreate, SettingsUpdate
from safetyboard.services import analytics, workflow
from safetyboard.services.serializers import (
    serialize_assignment, serialize_certification, serialize_incident,
    serialize_profile, serialize_settings, serialize_module
)
from safetyboard.api.dashboard import parse_month

router = APIRouter(prefix="/api/employee", tags=["employee-portal"])

CERT_SORT = {
    CertificationStatus.EXPIRED: 0,
    CertificationStatus.EXPIRING_SOON: 1,
    CertificationStatus.VALID: 2,
}


@router.get("/dashboard")
def get_dashboard(employee: Employee = Depends(get_current_employee)):
    summary = analytics.employee_summary(employee, clock.today())
    return {
        "employee": {
            "id": employee.id,
            "name": employee.name,
            "role": employee.role,
            "department": employee.department.value,
        },
        **summary,
        "incidents": [serialize_incident(i) for i in employee.incidents],
    }


@router.get("/training")
def get_my_training(
    status: str = Query("all", pattern="^(all|pending|complete|overdue)$"),
    employee: Employee = Depends(get_current_employee)
):
    today = clock.today()
    items = []
    for a in employee.training_assignments:
        current = TrainingStatus(a.status)
        if status == "pending" and current in (TrainingStatus.COMPLETE, TrainingStatus.OVERDUE):
            continue
        if status == "complete" and current != TrainingStatus.COMPLETE:
            continue
        if status == "overdue" and current != TrainingStatus.OVERDUE:
            continue
        items.append({
            **serialize_assignment(a),
            "training": serialize_module(a.module, detail=True) if a.module else None,
            "days_until_due": (a.due_date - today).days,
        })

    # overdue first, completed last, then by due date
    items.sort(key=lambda t: (
        t["status"] == TrainingStatus.COMPLETE.value,
        t["status"] != TrainingStatus.OVERDUE.value,
        t["days_until_due"],
    ))
    statuses = [TrainingStatus(a.status) for a in employee.training_assignments]
    return {
        "stats": {
            "total": len(statuses),
            "completed": statuses.count(TrainingStatus.COMPLETE),
            "pending": sum(1 for s in statuses if s not in (TrainingStatus.COMPLETE, TrainingStatus.OVERDUE)),
            "overdue": statuses.count(TrainingStatus.OVERDUE),
        },
        "training": items,
    }


@router.get("/certifications")
def get_my_certifications(
    status: CertificationStatus = Query(None),
    employee: Employee = Depends(get_current_employee)
):
    today = clock.today()
    certs = [
        {**serialize_certification(c), "days_until_expiration": (c.expiration_date - today).days}
        for c in employee.certifications
        if status is None or CertificationStatus(c.status) == status
    ]
    certs.sort(key=lambda c: (CERT_SORT[CertificationStatus(c["status"])], c["days_until_expiration"]))
    statuses = [CertificationStatus(c.status) for c in employee.certifications]
    return {
        "stats": {
            "total": len(statuses),
            "valid": statuses.count(CertificationStatus.VALID),
            "expiring_soon": statuses.count(CertificationStatus.EXPIRING_SOON),
            "expired": statuses.count(CertificationStatus.EXPIRED),
        },
        "certifications": certs,
    }


@router.get("/incidents")
def get_my_incidents(employee: Employee = Depends(get_current_employee)):
    return [serialize_incident(i) for i in employee.incidents]


@router.post("/incidents", status_code=201)
def report_incident(
    data: IncidentCreate,
    employee: Employee = Depends(get_current_employee),
    db: Session = Depends(get_db)
):
    try:
        incident = workflow.create_incident(db, data, reported_by=employee.id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"ok": True, "reference_id": incident.id.upper(), "incident": serialize_incident(incident, detail=True)}


@router.get("/calendar")
def get_my_calendar(
    month: str = Query(None),
    employee: Employee = Depends(get_current_employee),
    db: Session = Depends(get_db)
):
    year, mon = parse_month(month)
    all_events = analytics.calendar_events(db, employee=employee)
    month_events = [e for e in all_events if e["date"].year == year and e["date"].month == mon]
    return {
        "month": f"{year:04d}-{mon:02d}",
        "events": [{**e, "date": e["date"].isoformat()} for e in month_events],
        "upcoming": [{**e, "date": e["date"].isoformat()} for e in analytics.upcoming_events(all_events)],
    }


@router.get("/profile")
def get_my_profile(employee: Employee = Depends(get_current_employee), db: Session = Depends(get_db)):
    profile = get_portal_profile(db, Portal.EMPLOYEE, employee.id)
    data = serialize_profile(profile)
    data["summary"] = analytics.employee_summary(employee, clock.today())
    return data


@router.get("/settings")
def get_my_settings(employee: Employee = Depends(get_current_employee), db: Session = Depends(get_db)):
    return serialize_settings(get_portal_profile(db, Portal.EMPLOYEE, employee.id))


@router.patch("/settings")
def update_my_settings(
    data: SettingsUpdate,
    employee: Employee = Depends(get_current_employee),
    db: Session = Depends(get_db)
):
    profile = update_profile_settings(db, get_portal_profile(db, Portal.EMPLOYEE, employee.id), data)
    return {"ok": True, "profile": serialize_profile(profile), "settings": serialize_settings(profile)}
