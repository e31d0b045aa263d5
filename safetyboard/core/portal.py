from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session
from safetyboard.core.config import DEFAULT_EMPLOYEE_ID, SUPERVISOR_PROFILE_ID
from safetyboard.db.session import get_db
from safetyboard.models.models import Employee, PortalProfile, Portal
from safetyboard.services.seed_data import DEFAULT_SETTINGS

SUPERVISOR_ROLE_KEYWORDS = ("Supervisor", "Coordinator", "Lead")


def is_supervisor_role(role: str | None) -> bool:
    return bool(role) and any(keyword in role for keyword in SUPERVISOR_ROLE_KEYWORDS)


def get_current_employee(
    x_employee_id: str | None = Header(None),
    db: Session = Depends(get_db)
) -> Employee:
    employee_id = x_employee_id or DEFAULT_EMPLOYEE_ID
    employee = db.query(Employee).filter(Employee.id == employee_id).first()
    if employee is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


def get_portal_profile(db: Session, portal: Portal, employee_id: str | None = None) -> PortalProfile:
    q = db.query(PortalProfile).filter(PortalProfile.portal == portal)
    if portal == Portal.SUPERVISOR:
        profile = q.filter(PortalProfile.id == SUPERVISOR_PROFILE_ID).first() or q.first()
        if profile is None:
            raise HTTPException(status_code=404, detail="Profile not found")
        return profile

    employee_id = employee_id or DEFAULT_EMPLOYEE_ID
    profile = q.filter(PortalProfile.id == employee_id).first()
    if profile is None:
        # employees without a stored profile get one built from their record
        employee = db.query(Employee).filter(Employee.id == employee_id).first()
        if employee is None:
            raise HTTPException(status_code=404, detail="Profile not found")
        profile = PortalProfile(
            id=employee.id,
            portal=Portal.EMPLOYEE,
            name=employee.name,
            email=employee.email,
            phone=employee.phone,
            role=employee.role,
            department=employee.department,
            hire_date=employee.hire_date,
            supervisor_id=SUPERVISOR_PROFILE_ID,
            compliance_status=employee.compliance_status,
            **DEFAULT_SETTINGS,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
    return profile


def list_portal_accounts(db: Session) -> list[dict]:
    """Who can sign in to which portal.

    Roles mentioning Supervisor, Coordinator or Lead get the supervisor
    portal, everyone gets the employee portal.
    """
    accounts = []
    for e in db.query(Employee).order_by(Employee.id).all():
        portals = [Portal.EMPLOYEE.value]
        if is_supervisor_role(e.role):
            portals.insert(0, Portal.SUPERVISOR.value)
        accounts.append({
            "id": e.id,
            "name": e.name,
            "email": e.email,
            "role": e.role,
            "department": e.department.value,
            "portals": portals,
        })
    return accounts


def update_profile_settings(db: Session, profile: PortalProfile, data) -> PortalProfile:
    for field in ("name", "email", "phone", "theme", "language"):
        value = getattr(data, field)
        if value is not None:
            setattr(profile, field, value)
    if data.notifications:
        for field, value in data.notifications.model_dump(exclude_none=True).items():
            setattr(profile, field, value)
    db.commit()
    db.refresh(profile)
    return profile
