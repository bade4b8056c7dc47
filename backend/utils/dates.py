"""
Date helpers for report and list endpoints.

Query parameters arrive as ``MM/DD/YYYY`` (the format the frontend sends) or ISO
``YYYY-MM-DD``. A range only filters when both bounds are given in order; a lone
or reversed bound is parsed for validity and otherwise ignored.
"""
import re
from datetime import date, datetime
from typing import NamedTuple, Optional

from fastapi import Query

from exceptions import InputError

US_DATE_PATTERN = re.compile(r"^(0?[1-9]|1[0-2])/(0?[1-9]|[12][0-9]|3[01])/\d{4}$")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class DateRange(NamedTuple):
    start: date
    end: date

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end


def parse_date(value: str) -> date:
    """Parse ``MM/DD/YYYY`` or ``YYYY-MM-DD`` into a date, raising InputError otherwise."""
    value = value.strip()
    try:
        if US_DATE_PATTERN.match(value):
            return datetime.strptime(value, "%m/%d/%Y").date()
        if ISO_DATE_PATTERN.match(value):
            return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        # matches the shape but not the calendar, e.g. 02/30/2024
        pass
    raise InputError(
        f"Invalid date '{value}'. Use MM/DD/YYYY.",
        details={"expected": "MM/DD/YYYY", "actual": value},
    )


def build_date_range(start: Optional[str], end: Optional[str]) -> Optional[DateRange]:
    start_date = parse_date(start) if start else None
    end_date = parse_date(end) if end else None

    # a partial or reversed range does not filter
    if start_date is None or end_date is None or start_date > end_date:
        return None
    return DateRange(start_date, end_date)


def get_date_range(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
) -> Optional[DateRange]:
    """FastAPI dependency turning ``startDate``/``endDate`` into an optional DateRange."""
    return build_date_range(start_date, end_date)
