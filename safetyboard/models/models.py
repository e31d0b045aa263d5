import re
import enum
from datetime import datetime
from sqlalchemy import (
    Column, String, Integer, Boolean, Text, Date, DateTime, ForeignKey, Table,
    Enum as SAEnum, Index, UniqueConstraint
)
from sqlalchemy.orm import relationship
from safetyboard.models.base import Base

__all__ = [
    "Department", "ComplianceStatus", "CertificationStatus", "TrainingStatus",
    "IncidentType", "Severity", "IncidentStatus", "ReportType", "ReportStatus",
    "ChatRole", "Portal", "ALL_DEPARTMENTS",
    "Employee", "Certification", "TrainingModule", "TrainingAssignment",
    "Incident", "incident_employees", "Report", "AuditEntry",
    "ChatConversation", "ChatMessage", "PortalProfile",
    "IncidentTrendPoint", "DepartmentComplianceSnapshot", "next_id",
]


class Department(str, enum.Enum):
    GRAIN_HANDLING = "Grain Handling"
    LOGISTICS = "Logistics"
    MAINTENANCE = "Maintenance"
    AGRONOMY = "Agronomy"
    ADMIN = "Admin"


ALL_DEPARTMENTS = "All"


class ComplianceStatus(str, enum.Enum):
    COMPLIANT = "compliant"
    IN_PROGRESS = "in-progress"
    AT_RISK = "at-risk"
    NON_COMPLIANT = "non-compliant"


class CertificationStatus(str, enum.Enum):
    VALID = "valid"
    EXPIRING_SOON = "expiring-soon"
    EXPIRED = "expired"


class TrainingStatus(str, enum.Enum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    AT_RISK = "at-risk"
    OVERDUE = "overdue"
    COMPLETE = "complete"


class IncidentType(str, enum.Enum):
    SLIP_FALL = "Slip/Fall"
    EQUIPMENT_MALFUNCTION = "Equipment Malfunction"
    CHEMICAL_EXPOSURE = "Chemical Exposure"
    ERGONOMIC_INJURY = "Ergonomic Injury"
    FIRE_EXPLOSION = "Fire/Explosion"
    VEHICLE_INCIDENT = "Vehicle Incident"
    OTHER = "Other"


class Severity(str, enum.Enum):
    MINOR = "Minor"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    CRITICAL = "Critical"


class IncidentStatus(str, enum.Enum):
    REPORTED = "Reported"
    UNDER_REVIEW = "Under Review"
    CLOSED = "Closed"


class ReportType(str, enum.Enum):
    COMPANY_SAFETY = "Company Safety"
    OSHA = "OSHA"


class ReportStatus(str, enum.Enum):
    DRAFT = "Draft"
    UNDER_REVIEW = "Under Review"
    APPROVED = "Approved"
    DENIED = "Denied"
    CLOSED = "Closed"


class ChatRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Portal(str, enum.Enum):
    SUPERVISOR = "supervisor"
    EMPLOYEE = "employee"


def _enum_column(enum_cls, name, **kwargs):
    # store the display value ("Under Review"), not the member name
    return Column(
        SAEnum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e]),
        **kwargs
    )


def next_id(db, model, prefix: str) -> str:
    pattern = re.compile(rf"^{re.escape(prefix)}-(\d+)$")
    highest = 0
    for (existing,) in db.query(model.id).filter(model.id.like(f"{prefix}-%")).all():
        match = pattern.match(existing)
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{prefix}-{highest + 1:03d}"


incident_employees = Table(
    "incident_employees",
    Base.metadata,
    Column("incident_id", String(50), ForeignKey("incidents.id", ondelete="CASCADE"), primary_key=True),
    Column("employee_id", String(50), ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True),
)


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    department = _enum_column(Department, "department_enum", nullable=False)
    role = Column(String(255), nullable=False)
    hire_date = Column(Date, nullable=True)
    compliance_status = _enum_column(ComplianceStatus, "compliance_status_enum", default=ComplianceStatus.COMPLIANT)

    certifications = relationship(
        "Certification", back_populates="employee",
        cascade="all, delete-orphan", order_by="Certification.id"
    )
    training_assignments = relationship(
        "TrainingAssignment", back_populates="employee",
        cascade="all, delete-orphan", order_by="TrainingAssignment.id"
    )
    incidents = relationship(
        "Incident", secondary=incident_employees,
        back_populates="involved_employees", order_by="Incident.id"
    )

    __table_args__ = (
        Index("idx_employee_department", "department"),
    )


class Certification(Base):
    __tablename__ = "certifications"

    id = Column(String(50), primary_key=True)
    employee_id = Column(String(50), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    issued_date = Column(Date, nullable=True)
    expiration_date = Column(Date, nullable=False)
    status = _enum_column(CertificationStatus, "certification_status_enum", default=CertificationStatus.VALID)

    employee = relationship("Employee", back_populates="certifications")

    __table_args__ = (
        Index("idx_certification_employee", "employee_id"),
        Index("idx_certification_expiration", "expiration_date"),
    )


class TrainingModule(Base):
    __tablename__ = "training_modules"

    id = Column(String(50), primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    duration = Column(String(50), nullable=True)
    # a Department value or "All"
    department = Column(String(50), nullable=False, default=ALL_DEPARTMENTS)
    created_date = Column(Date, nullable=True)
    last_updated = Column(Date, nullable=True)
    is_outdated = Column(Boolean, default=False)
    version = Column(String(20), nullable=True)

    assignments = relationship("TrainingAssignment", back_populates="module", order_by="TrainingAssignment.id")


class TrainingAssignment(Base):
    __tablename__ = "training_assignments"

    id = Column(String(50), primary_key=True)
    training_id = Column(String(50), ForeignKey("training_modules.id"), nullable=False)
    employee_id = Column(String(50), ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    assigned_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=False)
    completed_date = Column(Date, nullable=True)
    status = _enum_column(TrainingStatus, "training_status_enum", default=TrainingStatus.NOT_STARTED)

    employee = relationship("Employee", back_populates="training_assignments")
    module = relationship("TrainingModule", back_populates="assignments")

    __table_args__ = (
        Index("idx_assignment_employee", "employee_id"),
        Index("idx_assignment_training", "training_id"),
        Index("idx_assignment_status", "status"),
    )


class Incident(Base):
    __tablename__ = "incidents"

    id = Column(String(50), primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    incident_type = _enum_column(IncidentType, "incident_type_enum", nullable=False)
    severity = _enum_column(Severity, "severity_enum", nullable=False)
    department = _enum_column(Department, "department_enum", nullable=False)
    location = Column(String(255), nullable=True)
    occurred_at = Column(DateTime, nullable=False)
    status = _enum_column(IncidentStatus, "incident_status_enum", default=IncidentStatus.REPORTED)
    photos = Column(Text, nullable=True)
    documents = Column(Text, nullable=True)
    immediate_actions = Column(Text, nullable=True)
    reported_by = Column(String(50), ForeignKey("employees.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    involved_employees = relationship(
        "Employee", secondary=incident_employees,
        back_populates="incidents", order_by="Employee.id"
    )
    reports = relationship("Report", back_populates="incident", order_by="Report.id")
    reporter = relationship("Employee", foreign_keys=[reported_by])

    __table_args__ = (
        Index("idx_incident_status", "status"),
        Index("idx_incident_department", "department"),
        Index("idx_incident_date", "occurred_at"),
    )


class Report(Base):
    __tablename__ = "reports"

    id = Column(String(50), primary_key=True)
    incident_id = Column(String(50), ForeignKey("incidents.id", ondelete="CASCADE"), nullable=False)
    report_type = _enum_column(ReportType, "report_type_enum", nullable=False)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    status = _enum_column(ReportStatus, "report_status_enum", default=ReportStatus.DRAFT)
    created_at = Column(DateTime, default=datetime.utcnow)

    incident = relationship("Incident", back_populates="reports")
    audit_trail = relationship(
        "AuditEntry", back_populates="report",
        cascade="all, delete-orphan", order_by=lambda: [AuditEntry.timestamp, AuditEntry.id]
    )

    __table_args__ = (
        Index("idx_report_incident", "incident_id"),
        Index("idx_report_status", "status"),
    )


class AuditEntry(Base):
    __tablename__ = "report_audit_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    report_id = Column(String(50), ForeignKey("reports.id", ondelete="CASCADE"), nullable=False)
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow)
    action = Column(String(100), nullable=False)
    user = Column(String(255), nullable=False)
    details = Column(Text, nullable=True)

    report = relationship("Report", back_populates="audit_trail")


class ChatConversation(Base):
    __tablename__ = "chat_conversations"

    id = Column(String(50), primary_key=True)
    portal = _enum_column(Portal, "portal_enum", nullable=False, default=Portal.SUPERVISOR)
    title = Column(String(255), nullable=False, default="New Conversation")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    messages = relationship(
        "ChatMessage", back_populates="conversation",
        cascade="all, delete-orphan", order_by=lambda: [ChatMessage.timestamp, ChatMessage.id]
    )

    __table_args__ = (
        Index("idx_chat_conversation_portal", "portal"),
    )


class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(String(50), primary_key=True)
    conversation_id = Column(String(50), ForeignKey("chat_conversations.id", ondelete="CASCADE"), nullable=False)
    role = _enum_column(ChatRole, "chat_role_enum", nullable=False)
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime, default=datetime.utcnow)

    conversation = relationship("ChatConversation", back_populates="messages")


class PortalProfile(Base):
    __tablename__ = "portal_profiles"

    id = Column(String(50), primary_key=True)
    portal = _enum_column(Portal, "portal_enum", nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    role = Column(String(255), nullable=True)
    department = _enum_column(Department, "department_enum", nullable=True)
    hire_date = Column(Date, nullable=True)
    last_login = Column(DateTime, nullable=True)
    employees_managed = Column(Integer, nullable=True)
    certifications = Column(Text, nullable=True)
    supervisor_id = Column(String(50), nullable=True)
    compliance_status = _enum_column(ComplianceStatus, "compliance_status_enum", nullable=True)
    email_alerts = Column(Boolean, default=True)
    incident_notifications = Column(Boolean, default=True)
    training_reminders = Column(Boolean, default=True)
    certification_expiry = Column(Boolean, default=True)
    theme = Column(String(20), default="light")
    language = Column(String(10), default="en")


class IncidentTrendPoint(Base):
    __tablename__ = "incident_trend_points"

    id = Column(Integer, primary_key=True, autoincrement=True)
    month = Column(String(7), nullable=False, unique=True)
    incidents = Column(Integer, nullable=False, default=0)
    compliance = Column(Integer, nullable=False, default=0)


class DepartmentComplianceSnapshot(Base):
    __tablename__ = "department_compliance_snapshots"

    id = Column(Integer, primary_key=True, autoincrement=True)
    month = Column(String(7), nullable=False)
    department = _enum_column(Department, "department_enum", nullable=False)
    compliance = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("month", "department", name="uq_department_month"),
    )
