"""
Period and field filters over sheet records.

Every filter returns a new list and keeps the order of the input rows.
"""
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from models.booking import Period, Record
from services.value_parser import parse_date
from settings import columns

_NON_DIGIT = re.compile(r"\D")


@dataclass(frozen=True)
class PeriodBounds:
    now: datetime
    start_of_today: datetime
    end_of_today: datetime
    one_week_ago: datetime
    start_of_month: datetime
    end_of_month: datetime


def period_bounds(now: Optional[datetime] = None) -> PeriodBounds:
    """Date windows relative to ``now``; today and month are half-open"""
    now = now or datetime.now()
    start_of_today = datetime(now.year, now.month, now.day)
    start_of_month = datetime(now.year, now.month, 1)
    if now.month == 12:
        end_of_month = datetime(now.year + 1, 1, 1)
    else:
        end_of_month = datetime(now.year, now.month + 1, 1)
    return PeriodBounds(
        now=now,
        start_of_today=start_of_today,
        end_of_today=start_of_today + timedelta(days=1),
        one_week_ago=now - timedelta(days=7),
        start_of_month=start_of_month,
        end_of_month=end_of_month,
    )


def in_period(value: datetime, period: Optional[str], bounds: PeriodBounds) -> bool:
    if period == Period.TODAY:
        return bounds.start_of_today <= value < bounds.end_of_today
    if period == Period.THIS_WEEK:
        return bounds.one_week_ago <= value <= bounds.now
    if period == Period.THIS_MONTH:
        return bounds.start_of_month <= value < bounds.end_of_month
    return True


def filter_by_period(
    records: List[Record],
    period: Optional[str],
    date_field: str = columns.booking_date,
    now: Optional[datetime] = None,
) -> List[Record]:
    """Keep rows whose ``date_field`` falls in ``period``.

    Rows without a parseable date are dropped for every period, including
    an unknown or empty one, which otherwise keeps all dated rows.
    """
    bounds = period_bounds(now)
    filtered = []
    for row in records:
        value = parse_date(row.get(date_field))
        if value is None:
            continue
        if in_period(value, period, bounds):
            filtered.append(row)
    return filtered


def filter_by_cluster(records: List[Record], cluster: str, field: str = columns.cluster) -> List[Record]:
    wanted = cluster.lower()
    return [r for r in records if (r.get(field) or "").lower() == wanted]


def filter_by_status(records: List[Record], status: str, field: str = columns.sold_status) -> List[Record]:
    wanted = status.lower()
    return [r for r in records if wanted in (r.get(field) or "").lower()]


def filter_by_mobile(records: List[Record], mobile: str, field: str = columns.mobile) -> List[Record]:
    wanted = _NON_DIGIT.sub("", mobile)
    return [r for r in records if wanted in _NON_DIGIT.sub("", str(r.get(field) or ""))]


def filter_by_unit(records: List[Record], unit: str, field: str = columns.unit_no) -> List[Record]:
    wanted = unit.lower()
    return [r for r in records if (r.get(field) or "").lower() == wanted]
