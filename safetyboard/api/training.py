from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from safetyboard.db.session import get_db
from safetyboard.models.models import TrainingAssignment, TrainingModule, TrainingStatus
from safetyboard.services import queries, analytics
from safetyboard.services.serializers import serialize_module, serialize_assignment

router = APIRouter(prefix="/api/supervisor", tags=["supervisor-training"])


@router.get("/training")
def list_training(
    search: str = Query(None),
    department: str = Query(None),
    outdated_only: bool = Query(False),
    db: Session = Depends(get_db)
):
    modules = queries.filter_training_modules(db, search, department, outdated_only)
    all_count = db.query(TrainingModule).count()
    outdated = db.query(TrainingModule).filter(TrainingModule.is_outdated == True).count()
    pending = db.query(TrainingAssignment).filter(TrainingAssignment.status != TrainingStatus.COMPLETE).count()
    return {
        "stats": {
            "total": all_count,
            "current": all_count - outdated,
            "outdated": outdated,
            "pending_assignments": pending,
        },
        "modules": [
            {**serialize_module(m), "assignments": analytics.module_assignment_stats(db, m.id)}
            for m in modules
        ],
    }


@router.get("/training/overdue")
def list_overdue_training(db: Session = Depends(get_db)):
    return [{
        "employee_id": e.id,
        "employee_name": e.name,
        "department": e.department.value,
        "assignment": serialize_assignment(a),
        "training_title": m.title,
    } for e, a, m in queries.get_overdue_training(db)]


@router.get("/training/{training_id}")
def get_training(training_id: str, db: Session = Depends(get_db)):
    module = queries.get_training_by_id(db, training_id)
    if not module:
        raise HTTPException(status_code=404, detail="Training module not found")
    data = serialize_module(module, detail=True)
    data["stats"] = analytics.module_assignment_stats(db, module.id)
    data["assignments"] = [{
        **serialize_assignment(a),
        "employee_name": a.employee.name if a.employee else None,
    } for a in module.assignments]
    return data
