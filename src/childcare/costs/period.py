from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from dateutil.relativedelta import relativedelta

from childcare.calendar._dates import DateLike, to_date

from .schedule import Schedule
from .week import WeekCostCalculator, WeekCostResult

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = 52


@dataclass(frozen=True, slots=True)
class PeriodBreakdown:
    """
    Totals for a month or a year.

    ``net_cost`` is not floored at zero.  ``billed_cost`` is the sum of the
    weekly bills (surcharge included) before any tax-free top-up.
    """

    gross_cost: float
    govt_funding_savings: float
    tax_free_savings: float
    net_cost: float
    billed_cost: float = 0.0

    @property
    def total_savings(self) -> float:
        return self.govt_funding_savings + self.tax_free_savings


@dataclass(frozen=True, slots=True)
class CalendarWeek:
    """One Monday-to-Sunday row of a month grid."""

    start: date
    days: tuple[date, ...]
    in_month: bool
    cost: WeekCostResult


def _same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month


class PeriodAggregator:
    """
    Folds week costs into month and year breakdowns.

    A month counts the grid weeks whose Monday lies inside it.  A year counts
    52 seven-day steps from 1 January, whatever weekday that is, so the last
    day or two of the year are never counted.
    """

    def __init__(self, calculator: Optional[WeekCostCalculator] = None) -> None:
        self._calculator = calculator if calculator is not None else WeekCostCalculator()

    # ── week enumeration ─────────────────────────────────────────────────

    @staticmethod
    def calendar_weeks(anchor: DateLike) -> list[list[date]]:
        month_start = to_date(anchor).replace(day=1)
        month_end = month_start + relativedelta(months=1, days=-1)
        grid_start = month_start - timedelta(days=month_start.weekday())
        grid_end = month_end + timedelta(days=6 - month_end.weekday())

        n_days = (grid_end - grid_start).days + 1
        return [
            [grid_start + timedelta(days=i + j) for j in range(7)]
            for i in range(0, n_days, 7)
        ]

    @classmethod
    def month_week_starts(cls, anchor: DateLike) -> list[date]:
        month = to_date(anchor)
        return [
            week[0] for week in cls.calendar_weeks(month)
            if _same_month(week[0], month)
        ]

    @staticmethod
    def year_week_starts(anchor: DateLike) -> list[date]:
        # 52 steps of 7 days from 1 January; not ISO weeks.
        start = date(to_date(anchor).year, 1, 1)
        return [start + timedelta(days=7 * i) for i in range(WEEKS_PER_YEAR)]

    @staticmethod
    def shift_month(anchor: DateLike, months: int) -> date:
        """First day of the month ``months`` away from ``anchor``."""
        return to_date(anchor).replace(day=1) + relativedelta(months=months)

    # ── breakdowns ───────────────────────────────────────────────────────

    def month_breakdown(self, anchor: DateLike, schedule: Schedule) -> PeriodBreakdown:
        cap = self._calculator.rates.monthly_tax_free_cap
        result = self._fold(self.month_week_starts(anchor), schedule, cap)
        logger.debug("Month %s: %s", to_date(anchor).strftime("%Y-%m"), result)
        return result

    def year_breakdown(self, anchor: DateLike, schedule: Schedule) -> PeriodBreakdown:
        cap = self._calculator.rates.tax_free_annual_cap
        result = self._fold(self.year_week_starts(anchor), schedule, cap)
        logger.debug("Year %s: %s", to_date(anchor).year, result)
        return result

    def month_view(self, anchor: DateLike, schedule: Schedule) -> list[CalendarWeek]:
        month = to_date(anchor)
        return [
            CalendarWeek(
                start=week[0],
                days=tuple(week),
                in_month=_same_month(week[0], month),
                cost=self._calculator.week_cost(week[0], schedule),
            )
            for week in self.calendar_weeks(month)
        ]

    def _fold(
        self,
        week_starts: Iterable[date],
        schedule: Schedule,
        tax_free_cap: float,
    ) -> PeriodBreakdown:
        calc = self._calculator
        rate = schedule.cost_per_hour
        surcharge = calc.rates.surcharge_per_hour

        gross = 0.0
        funding = 0.0
        billed = 0.0
        for start in week_starts:
            billed += calc.week_cost(start, schedule).total

            att = calc.attendance(start, schedule)
            if att.all_unpaid:
                continue
            gross += att.adjusted_hours * rate

            if calc.is_term_week(start) and schedule.funding_eligible:
                funding += calc.funded_hours(att) * (rate - surcharge)

        cost_after_funding = gross - funding
        tax_free = (
            min(cost_after_funding * calc.rates.tax_free_rate, tax_free_cap)
            if schedule.tax_free_eligible
            else 0.0
        )
        return PeriodBreakdown(
            gross_cost=gross,
            govt_funding_savings=funding,
            tax_free_savings=tax_free,
            net_cost=gross - funding - tax_free,
            billed_cost=billed,
        )

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def calculator(self) -> WeekCostCalculator:
        return self._calculator

    def __repr__(self) -> str:
        return f"PeriodAggregator(calculator={self._calculator!r})"
