import os
import json


def _parse_cors_origins(value: str | None) -> list[str]:
    if not value:
        return ["*"]

    cleaned = value.strip()
    if not cleaned:
        return ["*"]

    if cleaned.startswith("["):
        try:
            parsed = json.loads(cleaned)
            if isinstance(parsed, list):
                origins = [str(item).strip() for item in parsed if str(item).strip()]
                if origins:
                    return origins
        except json.JSONDecodeError:
            pass

    origins = [item.strip() for item in cleaned.split(",") if item.strip()]
    return origins or ["*"]


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite://")
CORS_ORIGINS = _parse_cors_origins(os.environ.get("CORS_ORIGINS"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

PLACEHOLDER_API_KEY = "YOUR_COMPLETE_API_KEY_HERE"
CHAT_BASE_URL = os.environ.get("CHAT_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")
CHAT_MODEL = os.environ.get("CHAT_MODEL", "gemini-2.0-flash-exp")
CHAT_MAX_TOKENS = int(os.environ.get("CHAT_MAX_TOKENS", "2000"))

CERT_EXPIRING_SOON_DAYS = int(os.environ.get("CERT_EXPIRING_SOON_DAYS", "90"))
TRAINING_AT_RISK_DAYS = int(os.environ.get("TRAINING_AT_RISK_DAYS", "7"))
AT_RISK_OVERDUE_THRESHOLD = int(os.environ.get("AT_RISK_OVERDUE_THRESHOLD", "3"))
AT_RISK_INCIDENT_THRESHOLD = int(os.environ.get("AT_RISK_INCIDENT_THRESHOLD", "2"))

DEFAULT_EMPLOYEE_ID = os.environ.get("DEFAULT_EMPLOYEE_ID", "emp-001")
SUPERVISOR_PROFILE_ID = os.environ.get("SUPERVISOR_PROFILE_ID", "sup-001")

CLOCK_DATE = os.environ.get("CLOCK_DATE")
RECOMPUTE_STATUSES_ON_STARTUP = _parse_bool(os.environ.get("RECOMPUTE_STATUSES_ON_STARTUP"))


def get_chat_api_key() -> str | None:
    # read per call so a key exported after import is still picked up
    return os.environ.get("GOOGLE_API_KEY") or os.environ.get("NEXT_PUBLIC_GOOGLE_API_KEY")
