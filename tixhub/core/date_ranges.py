# tixhub/core/date_ranges.py
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Callable, Dict, Optional


@dataclass(frozen=True)
class DateRange:
    """Fenêtre de jours, bornes incluses."""
    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


class DateFilter(str, Enum):
    ALL = "all"
    TODAY = "today"
    THIS_WEEKEND = "this-weekend"
    THIS_WEEK = "this-week"
    THIS_MONTH = "this-month"

    def resolve(self, today: Optional[date] = None) -> Optional[DateRange]:
        """None pour ALL (aucune restriction)."""
        return _RESOLVERS[self](today or date.today())

    def matches(self, day: date, today: Optional[date] = None) -> bool:
        window = self.resolve(today)
        return window is None or day in window


def _weekday(d: date) -> int:
    # dimanche=0 ... samedi=6
    return (d.weekday() + 1) % 7


def _all(today: date) -> Optional[DateRange]:
    return None


def _today(today: date) -> DateRange:
    return DateRange(today, today)


def _this_weekend(today: date) -> DateRange:
    # vendredi à venir (aujourd'hui si on est vendredi) → dimanche
    friday = today + timedelta(days=(5 - _weekday(today) + 7) % 7)
    return DateRange(friday, friday + timedelta(days=2))


def _this_week(today: date) -> DateRange:
    return DateRange(today, today + timedelta(days=6 - _weekday(today)))


def _this_month(today: date) -> DateRange:
    last_day = calendar.monthrange(today.year, today.month)[1]
    return DateRange(today, today.replace(day=last_day))


_RESOLVERS: Dict[DateFilter, Callable[[date], Optional[DateRange]]] = {
    DateFilter.ALL: _all,
    DateFilter.TODAY: _today,
    DateFilter.THIS_WEEKEND: _this_weekend,
    DateFilter.THIS_WEEK: _this_week,
    DateFilter.THIS_MONTH: _this_month,
}
