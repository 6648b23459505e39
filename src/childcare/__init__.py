"""
childcare
~~~~~~~~~

UK childcare cost estimation.  Two modes are provided:

- calendar-aware (term-time-only billing): costs are worked out week by week
  against school term dates, bank holidays and the Christmas closure, then
  folded into month or year totals;
- standard (stretched billing): flat annual hours times rate.

Basic usage::

    from datetime import date
    from childcare import PeriodAggregator, Schedule

    schedule = Schedule(days_per_week=4, hours_per_day=11, cost_per_hour=6.5)
    month = PeriodAggregator().month_breakdown(date(2025, 9, 1), schedule)
    month.net_cost   # → 544.0
"""

from __future__ import annotations

from childcare._exceptions import ChildcareError, ReferenceDataError, ScheduleError
from childcare.calendar import UK_REFERENCE, CalendarClassifier, DayStatus, ReferenceData
from childcare.costs import (
    CalendarWeek,
    PeriodAggregator,
    PeriodBreakdown,
    Schedule,
    StandardBreakdown,
    StandardCalculator,
    StandardRates,
    TermTimeRates,
    WeekCostCalculator,
    WeekCostResult,
)

__all__ = [
    "CalendarClassifier",
    "CalendarWeek",
    "ChildcareError",
    "DayStatus",
    "PeriodAggregator",
    "PeriodBreakdown",
    "ReferenceData",
    "ReferenceDataError",
    "Schedule",
    "ScheduleError",
    "StandardBreakdown",
    "StandardCalculator",
    "StandardRates",
    "TermTimeRates",
    "UK_REFERENCE",
    "WeekCostCalculator",
    "WeekCostResult",
]
