from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from safetyboard.core import clock
from safetyboard.db.session import get_db
from safetyboard.models.models import Department, ComplianceStatus
from safetyboard.services import queries, analytics
from safetyboard.services.serializers import serialize_employee, serialize_incident

router = APIRouter(prefix="/api/supervisor", tags=["supervisor-employees"])


@router.get("/employees")
def list_employees(
    search: str = Query(None),
    department: Department = Query(None),
    compliance_status: ComplianceStatus = Query(None),
    db: Session = Depends(get_db)
):
    employees = queries.filter_employees(db, search, department, compliance_status)
    return {
        "total": len(employees),
        "employees": [serialize_employee(e) for e in employees],
    }


@router.get("/employees/at-risk")
def list_at_risk_employees(db: Session = Depends(get_db)):
    return [serialize_employee(e) for e in queries.get_at_risk_employees(db)]


@router.get("/employees/{employee_id}")
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    employee = queries.get_employee_by_id(db, employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    data = serialize_employee(employee, detail=True)
    data["at_risk"] = queries.is_at_risk(employee)
    data["incidents"] = [serialize_incident(i) for i in employee.incidents]
    data["summary"] = analytics.employee_summary(employee, clock.today())
    return data
