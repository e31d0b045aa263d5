from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from safetyboard.core.portal import get_portal_profile, update_profile_settings, list_portal_accounts
from safetyboard.db.session import get_db
from safetyboard.models.models import Portal, Employee
from safetyboard.schemas.schemas import SettingsUpdate
from safetyboard.services.serializers import serialize_profile, serialize_settings

router = APIRouter(prefix="/api/supervisor", tags=["supervisor-profile"])
accounts_router = APIRouter(prefix="/api/portal", tags=["portal"])


@router.get("/profile")
def get_profile(db: Session = Depends(get_db)):
    profile = get_portal_profile(db, Portal.SUPERVISOR)
    data = serialize_profile(profile)
    data["team_size"] = db.query(Employee).count()
    return data


@router.get("/settings")
def get_settings(db: Session = Depends(get_db)):
    return serialize_settings(get_portal_profile(db, Portal.SUPERVISOR))


@router.patch("/settings")
def update_settings(data: SettingsUpdate, db: Session = Depends(get_db)):
    profile = update_profile_settings(db, get_portal_profile(db, Portal.SUPERVISOR), data)
    return {"ok": True, "profile": serialize_profile(profile), "settings": serialize_settings(profile)}


@accounts_router.get("/accounts")
def get_accounts(db: Session = Depends(get_db)):
    return list_portal_accounts(db)
