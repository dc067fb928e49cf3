import logging
import os
from datetime import date, datetime
from typing import Optional

from .errors import InvalidDateError

# Accepted non-ISO date layouts, tried in order after datetime.fromisoformat.
DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
)


def setup_logging() -> None:
    level_str = (os.getenv("LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_str, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def normalize_site_url(raw: str) -> str:
    if not raw:
        return ""
    return raw if raw.endswith("/") else raw + "/"


def parse_date(value: str, directory: Optional[str] = None) -> date:
    """Parse a front-matter date string into a calendar date.

    Datetimes keep their own calendar day; no timezone conversion happens.
    """
    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise InvalidDateError(value, directory)


def canonical_date(value: str, directory: Optional[str] = None) -> str:
    d = parse_date(value, directory)
    return f"{d.year:04d}/{d.month:02d}/{d.day:02d}"


def fmt_lastmod(d: Optional[date]) -> Optional[str]:
    if not d:
        return None
    return d.isoformat()
