# lcstats/services/windows.py
import calendar
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from lcstats.models import SubmissionRecord, WindowCounts

DAY = timedelta(days=1)
WEEK = timedelta(days=7)


def one_month_before(dt: datetime) -> datetime:
    """
    Cofa o jeden miesiąc kalendarzowy; dzień przycinany do ostatniego
    dnia poprzedniego miesiąca (31 marca -> 28/29 lutego).
    """
    year, month = (dt.year, dt.month - 1) if dt.month > 1 else (dt.year - 1, 12)
    last_day = calendar.monthrange(year, month)[1]
    return dt.replace(year=year, month=month, day=min(dt.day, last_day))


def submitted_at(record: SubmissionRecord) -> Optional[datetime]:
    """Sekundy unix, ułamek obcinany. None gdy timestamp nie da się sparsować (rekord nie trafia do żadnego okna)."""
    try:
        return datetime.fromtimestamp(int(float(record.timestamp)), tz=timezone.utc)
    except (ValueError, TypeError, OverflowError, OSError):
        return None


def count_solved_in_windows(
    submissions: Iterable[SubmissionRecord],
    now: Optional[datetime] = None,
) -> WindowCounts:
    now = now or datetime.now(timezone.utc)
    day_ago = now - DAY
    week_ago = now - WEEK
    month_ago = one_month_before(now)

    daily = weekly = monthly = 0
    for sub in submissions:
        if not sub.accepted:
            continue
        at = submitted_at(sub)
        if at is None:
            continue
        if at > day_ago:
            daily += 1
        if at > week_ago:
            weekly += 1
        if at > month_ago:
            monthly += 1

    return WindowCounts(daily=daily, weekly=weekly, monthly=monthly)
