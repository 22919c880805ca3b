# journals/helpers.py
from __future__ import annotations
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from django.conf import settings
from django.utils import timezone

SUMMARY_BULLET = "-"
REPORT_DATE_FORMAT = "%a %b %d %Y"  # "Mon Oct 19 2026"


def parse_summary(summary: Optional[str], delimiter: str = SUMMARY_BULLET) -> List[str]:
    """
    "- a - b - c" -> ["a", "b", "c"]
    앞/뒤/연속 구분자로 생긴 빈 조각은 버린다.
    """
    if not summary:
        return []
    return [part.strip() for part in summary.split(delimiter) if part.strip()]


def get_week_bounds(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """
    이번 주 [시작, 끝] (둘 다 포함). 시작 요일은 settings.WEEK_START_DAY (월=0 ... 일=6).
    TIME_ZONE 기준 자정으로 자른다.
    """
    local_now = timezone.localtime(now) if now else timezone.localtime()
    days_since_start = (local_now.weekday() - settings.WEEK_START_DAY) % 7
    start = (local_now - timedelta(days=days_since_start)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    # DST 경계에서도 로컬 자정이 되도록 naive 로 계산 후 다시 aware
    start = timezone.make_aware(start.replace(tzinfo=None))
    end = timezone.make_aware(
        start.replace(tzinfo=None) + timedelta(days=7) - timedelta(microseconds=1)
    )
    return start, end


def format_report_date(value: datetime) -> str:
    return timezone.localtime(value).strftime(REPORT_DATE_FORMAT)
