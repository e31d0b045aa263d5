from fastapi import APIRouter, Depends, HTTPException, Query, Body
from sqlalchemy.orm import Session
from safetyboard.db.session import get_db
from safetyboard.models.models import Report, ReportType, ReportStatus
from safetyboard.schemas.schemas import ReportAction, ReportEdit
from safetyboard.services import queries, workflow
from safetyboard.services.serializers import serialize_report

router = APIRouter(prefix="/api/supervisor", tags=["supervisor-reports"])


def _get_report_or_404(db: Session, report_id: str) -> Report:
    report = queries.get_report_by_id(db, report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return report


@router.get("/reports")
def list_reports(
    search: str = Query(None),
    type: ReportType = Query(None),
    status: ReportStatus = Query(None),
    db: Session = Depends(get_db)
):
    reports = queries.filter_reports(db, search, type, status)
    counts = {s.value: 0 for s in ReportStatus}
    for r in db.query(Report.status).all():
        counts[r.status.value] += 1
    return {
        "stats": {
            "total": sum(counts.values()),
            "draft": counts[ReportStatus.DRAFT.value],
            "under_review": counts[ReportStatus.UNDER_REVIEW.value],
            "approved": counts[ReportStatus.APPROVED.value],
            "closed": counts[ReportStatus.CLOSED.value],
        },
        "reports": [serialize_report(r) for r in reports],
    }


@router.get("/reports/{report_id}")
def get_report(report_id: str, db: Session = Depends(get_db)):
    return serialize_report(_get_report_or_404(db, report_id), detail=True)


@router.patch("/reports/{report_id}")
def edit_report(report_id: str, data: ReportEdit, db: Session = Depends(get_db)):
    report = _get_report_or_404(db, report_id)
    report = workflow.apply_report_action(
        db, report, "edit", data.user, data.details, title=data.title, content=data.content
    )
    return serialize_report(report, detail=True)


@router.post("/reports/{report_id}/actions/{action}")
def run_report_action(report_id: str, action: str, data: ReportAction = Body(ReportAction()), db: Session = Depends(get_db)):
    report = _get_report_or_404(db, report_id)
    if action == "edit":
        raise HTTPException(status_code=400, detail="Use PATCH to edit a report")
    report = workflow.apply_report_action(db, report, action, data.user, data.details)
    return serialize_report(report, detail=True)
