from datetime import date, datetime, timedelta
from sqlalchemy import or_, desc, extract
from sqlalchemy.orm import Session
from safetyboard.core import clock, config
from safetyboard.models.models import (
    Employee, Certification, TrainingModule, TrainingAssignment,
    Incident, Report, IncidentStatus, CertificationStatus, TrainingStatus
)


def get_employee_by_id(db: Session, employee_id: str) -> Employee | None:
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_training_by_id(db: Session, training_id: str) -> TrainingModule | None:
    return db.query(TrainingModule).filter(TrainingModule.id == training_id).first()


def get_incident_by_id(db: Session, incident_id: str) -> Incident | None:
    return db.query(Incident).filter(Incident.id == incident_id).first()


def get_report_by_id(db: Session, report_id: str) -> Report | None:
    return db.query(Report).filter(Report.id == report_id).first()


def get_reports_by_incident_id(db: Session, incident_id: str) -> list[Report]:
    return db.query(Report).filter(Report.incident_id == incident_id).order_by(Report.id).all()


def get_employees_by_department(db: Session, department) -> list[Employee]:
    return db.query(Employee).filter(Employee.department == department).order_by(Employee.id).all()


def get_incidents_by_department(db: Session, department) -> list[Incident]:
    return db.query(Incident).filter(Incident.department == department).order_by(Incident.id).all()


def get_active_incidents(db: Session) -> list[Incident]:
    return db.query(Incident).filter(Incident.status != IncidentStatus.CLOSED).order_by(Incident.id).all()


def get_overdue_training(db: Session) -> list[tuple[Employee, TrainingAssignment, TrainingModule]]:
    rows = db.query(Employee, TrainingAssignment, TrainingModule).join(
        TrainingAssignment, TrainingAssignment.employee_id == Employee.id
    ).join(
        # inner join drops assignments whose module is missing
        TrainingModule, TrainingModule.id == TrainingAssignment.training_id
    ).filter(
        TrainingAssignment.status == TrainingStatus.OVERDUE
    ).order_by(Employee.id, TrainingAssignment.id).all()
    return [tuple(r) for r in rows]


def get_expired_certifications(db: Session) -> list[tuple[Employee, Certification]]:
    rows = db.query(Employee, Certification).join(
        Certification, Certification.employee_id == Employee.id
    ).filter(
        Certification.status == CertificationStatus.EXPIRED
    ).order_by(Employee.id, Certification.id).all()
    return [tuple(r) for r in rows]


def get_expiring_certifications(db: Session, days: int = None, today: date = None) -> list[tuple[Employee, Certification]]:
    days = config.CERT_EXPIRING_SOON_DAYS if days is None else days
    today = today or clock.today()
    cutoff = today + timedelta(days=days)
    rows = db.query(Employee, Certification).join(
        Certification, Certification.employee_id == Employee.id
    ).filter(
        or_(
            Certification.status == CertificationStatus.EXPIRING_SOON,
            (Certification.expiration_date <= cutoff) & (Certification.status != CertificationStatus.EXPIRED),
        )
    ).order_by(Employee.id, Certification.id).all()
    return [tuple(r) for r in rows]


def get_outdated_modules(db: Session) -> list[TrainingModule]:
    return db.query(TrainingModule).filter(TrainingModule.is_outdated == True).order_by(TrainingModule.id).all()


def is_at_risk(employee: Employee) -> bool:
    overdue = sum(1 for a in employee.training_assignments if TrainingStatus(a.status) == TrainingStatus.OVERDUE)
    expired = sum(1 for c in employee.certifications if CertificationStatus(c.status) == CertificationStatus.EXPIRED)
    expiring = sum(1 for c in employee.certifications if CertificationStatus(c.status) == CertificationStatus.EXPIRING_SOON)
    return (
        overdue >= config.AT_RISK_OVERDUE_THRESHOLD
        or expired > 0
        or expiring > 0
        or len(employee.incidents) >= config.AT_RISK_INCIDENT_THRESHOLD
    )


def get_at_risk_employees(db: Session) -> list[Employee]:
    return [e for e in db.query(Employee).order_by(Employee.id).all() if is_at_risk(e)]


def get_days_since_last_incident(db: Session, now: datetime = None) -> int:
    now = now or clock.now()
    last = db.query(Incident).filter(
        Incident.status == IncidentStatus.CLOSED
    ).order_by(desc(Incident.occurred_at)).first()
    if not last:
        return 0
    return max((now - last.occurred_at).days, 0)


def get_incidents_by_date(db: Session, year: int, month: int, day: int) -> list[Incident]:
    start = datetime(year, month, day)
    return db.query(Incident).filter(
        Incident.occurred_at >= start,
        Incident.occurred_at < start + timedelta(days=1)
    ).order_by(Incident.occurred_at).all()


def get_incidents_by_month(db: Session, year: int, month: int) -> list[Incident]:
    return db.query(Incident).filter(
        extract("year", Incident.occurred_at) == year,
        extract("month", Incident.occurred_at) == month
    ).order_by(Incident.occurred_at).all()


def _contains(column, text: str):
    return column.ilike(f"%{text}%")


def filter_incidents(
    db: Session,
    search: str = None,
    departments: list = None,
    severities: list = None,
    statuses: list = None,
    employee_ids: list = None,
    date_from: date = None,
    date_to: date = None,
) -> list[Incident]:
    q = db.query(Incident)
    if search:
        q = q.filter(or_(
            _contains(Incident.title, search),
            _contains(Incident.description, search),
            _contains(Incident.location, search),
        ))
    if departments:
        q = q.filter(Incident.department.in_(departments))
    if severities:
        q = q.filter(Incident.severity.in_(severities))
    if statuses:
        q = q.filter(Incident.status.in_(statuses))
    if employee_ids:
        q = q.filter(Incident.involved_employees.any(Employee.id.in_(employee_ids)))
    if date_from:
        q = q.filter(Incident.occurred_at >= datetime.combine(date_from, datetime.min.time()))
    if date_to:
        # whole day inclusive
        q = q.filter(Incident.occurred_at < datetime.combine(date_to + timedelta(days=1), datetime.min.time()))
    return q.order_by(desc(Incident.occurred_at)).all()


def filter_employees(db: Session, search: str = None, department=None, compliance_status=None) -> list[Employee]:
    q = db.query(Employee)
    if search:
        q = q.filter(or_(
            _contains(Employee.name, search),
            _contains(Employee.email, search),
            _contains(Employee.role, search),
        ))
    if department:
        q = q.filter(Employee.department == department)
    if compliance_status:
        q = q.filter(Employee.compliance_status == compliance_status)
    return q.order_by(Employee.id).all()


def filter_training_modules(db: Session, search: str = None, department: str = None, outdated_only: bool = False) -> list[TrainingModule]:
    q = db.query(TrainingModule)
    if search:
        q = q.filter(or_(
            _contains(TrainingModule.title, search),
            _contains(TrainingModule.description, search),
        ))
    if department:
        q = q.filter(TrainingModule.department == department)
    if outdated_only:
        q = q.filter(TrainingModule.is_outdated == True)
    return q.order_by(TrainingModule.id).all()


def filter_reports(db: Session, search: str = None, report_type=None, status=None) -> list[Report]:
    q = db.query(Report)
    if search:
        q = q.filter(_contains(Report.title, search))
    if report_type:
        q = q.filter(Report.report_type == report_type)
    if status:
        q = q.filter(Report.status == status)
    return q.order_by(desc(Report.created_at)).all()
