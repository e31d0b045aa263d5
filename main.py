import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from safetyboard.core import clock
from safetyboard.core.config import CORS_ORIGINS, LOG_LEVEL, RECOMPUTE_STATUSES_ON_STARTUP
from safetyboard.db.session import engine
from safetyboard.models.base import Base
from safetyboard.models import models  # noqa: F401
from safetyboard.services.status_rules import WorkflowError, refresh_statuses
from safetyboard.api import (
    dashboard, employees, training, incidents, reports, insights, calendar_view, profile, employee_portal, chat
)

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="DeLong Safety Management", version="0.1.0")


class NoCacheMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
        return response


app.add_middleware(NoCacheMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dashboard.router)
app.include_router(employees.router)
app.include_router(training.router)
app.include_router(incidents.router)
app.include_router(reports.router)
app.include_router(insights.router)
app.include_router(calendar_view.router)
app.include_router(profile.router)
app.include_router(profile.accounts_router)
app.include_router(employee_portal.router)
app.include_router(chat.router)
app.include_router(chat.supervisor_chat_router)
app.include_router(chat.employee_chat_router)


@app.exception_handler(WorkflowError)
async def workflow_error_handler(request: Request, exc: WorkflowError):
    return JSONResponse(status_code=409, content={
        "detail": str(exc),
        "status": exc.status,
        "allowed_actions": exc.allowed,
    })


@app.on_event("startup")
def startup():
    Base.metadata.create_all(bind=engine)
    _seed_defaults()


def _seed_defaults():
    from safetyboard.db.session import SessionLocal
    from safetyboard.services.seed import seed_defaults
    db = SessionLocal()
    try:
        seeded = seed_defaults(db)
        if seeded and RECOMPUTE_STATUSES_ON_STARTUP:
            refresh_statuses(db, clock.today())
    except Exception:
        db.rollback()
        logger.exception("Seed error")
    finally:
        db.close()


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=5000)
