from datetime import date, datetime
from safetyboard.core import config


def today() -> date:
    if config.CLOCK_DATE:
        return date.fromisoformat(config.CLOCK_DATE)
    return date.today()


def now() -> datetime:
    if config.CLOCK_DATE:
        pinned = date.fromisoformat(config.CLOCK_DATE)
        current = datetime.now()
        return datetime.combine(pinned, current.time())
    return datetime.now()
