from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from safetyboard.models.models import (
    Department, IncidentType, Severity, ReportType
)


class IncidentCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    type: IncidentType
    severity: Severity
    department: Department
    location: str = ""
    date_time: Optional[datetime] = None
    involved_employee_ids: list[str] = []
    immediate_actions: Optional[str] = None
    witness_names: Optional[str] = None
    injury_description: Optional[str] = None
    property_damage_description: Optional[str] = None
    photos: list[str] = []
    documents: list[str] = []


class ReportCreate(BaseModel):
    type: ReportType = ReportType.COMPANY_SAFETY
    title: Optional[str] = None
    user: str = "System"


class ReportAction(BaseModel):
    user: str = "Sarah Johnson"
    details: Optional[str] = None


class ReportEdit(ReportAction):
    title: Optional[str] = None
    content: Optional[str] = None


class NotificationSettings(BaseModel):
    email_alerts: Optional[bool] = None
    incident_notifications: Optional[bool] = None
    training_reminders: Optional[bool] = None
    certification_expiry: Optional[bool] = None


class SettingsUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    notifications: Optional[NotificationSettings] = None
    theme: Optional[str] = Field(None, pattern="^(light|dark|system)$")
    language: Optional[str] = None


class ConversationCreate(BaseModel):
    title: str = "New Conversation"


class ConversationRename(BaseModel):
    title: str = Field(min_length=1)


class MessageCreate(BaseModel):
    content: str = Field(min_length=1)
