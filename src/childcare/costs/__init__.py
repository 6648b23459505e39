"""
childcare.costs
~~~~~~~~~~~~~~~

Cost calculators.  WeekCostCalculator prices one week against the term and
unpaid-day calendar; PeriodAggregator folds weeks into month or year
breakdowns; StandardCalculator is the calendar-free flat-rate mode.

Basic usage::

    from datetime import date
    from childcare.costs import PeriodAggregator, Schedule, WeekCostCalculator

    schedule = Schedule(days_per_week=4, hours_per_day=11, cost_per_hour=6.5)

    week = WeekCostCalculator().week_cost(date(2025, 9, 8), schedule)
    week.total          # → 136.0  (30h funded @ £1.50 + 14h @ £6.50)

    agg = PeriodAggregator()
    agg.month_breakdown(date(2025, 8, 1), schedule).gross_cost   # → 1072.5
    agg.year_breakdown(date(2026, 1, 1), schedule)

Flat-rate mode::

    from childcare.costs import StandardCalculator
    StandardCalculator().calculate(schedule, weeks_per_year=38).net_cost

Public API
----------
Schedule            Weekly pattern and eligibility flags.
TermTimeRates       Funding rules for calendar billing.
StandardRates       Funding rules for flat-rate billing.
WeekCostCalculator  Single week cost.
PeriodAggregator    Month / year breakdowns and the month grid.
StandardCalculator  Flat annual cost.
"""

from __future__ import annotations

from childcare.costs.period import CalendarWeek, PeriodAggregator, PeriodBreakdown
from childcare.costs.rates import StandardRates, TermTimeRates
from childcare.costs.schedule import Schedule
from childcare.costs.standard import StandardBreakdown, StandardCalculator
from childcare.costs.week import Attendance, WeekCostCalculator, WeekCostResult

__all__ = [
    "Attendance",
    "CalendarWeek",
    "PeriodAggregator",
    "PeriodBreakdown",
    "Schedule",
    "StandardBreakdown",
    "StandardCalculator",
    "StandardRates",
    "TermTimeRates",
    "WeekCostCalculator",
    "WeekCostResult",
]
