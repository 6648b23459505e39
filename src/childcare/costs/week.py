from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import NamedTuple, Optional

import numpy as np

from childcare.calendar import CalendarClassifier
from childcare.calendar._dates import DateLike, to_date, to_days

from .rates import TermTimeRates
from .schedule import Schedule


class Attendance(NamedTuple):
    """Which of a week's selected days are actually paid for."""

    total_hours: float
    unpaid_days: float
    all_unpaid: bool
    paid_days_ratio: float
    adjusted_hours: float


@dataclass(frozen=True, slots=True)
class WeekCostResult:
    week_start: date
    total: float
    funded_hours: float
    unfunded_hours: float
    is_term_time: bool
    is_unpaid: bool
    unpaid_days: float


class WeekCostCalculator:
    """
    Cost of one week of childcare.

    The selected days are always the first ``floor(days_per_week)`` days from
    ``week_start``, plus half of the next day for a x.5 schedule.  The whole
    week is billed as term time or holiday according to ``week_start`` alone.
    """

    def __init__(
        self,
        classifier: Optional[CalendarClassifier] = None,
        rates: Optional[TermTimeRates] = None,
    ) -> None:
        self._classifier = classifier if classifier is not None else CalendarClassifier()
        self._rates = rates if rates is not None else TermTimeRates()

    # ── shared helpers ───────────────────────────────────────────────────

    def attendance(self, week_start: DateLike, schedule: Schedule) -> Attendance:
        days = schedule.days_per_week
        total_hours = schedule.hours_per_week

        full_days = math.floor(days)
        partial_day = days - full_days

        week = to_days(week_start) + np.arange(7)
        unpaid = self._classifier.is_unpaid_day(week)

        unpaid_days = float(np.count_nonzero(unpaid[:full_days]))
        if partial_day > 0 and full_days < 7 and unpaid[full_days]:
            unpaid_days += partial_day

        # Must run before the division: also catches days_per_week == 0.
        if unpaid_days >= days:
            return Attendance(total_hours, unpaid_days, True, 0.0, 0.0)

        ratio = (days - unpaid_days) / days
        return Attendance(total_hours, unpaid_days, False, ratio, total_hours * ratio)

    def funded_hours(self, attendance: Attendance) -> float:
        return min(
            self._rates.funded_hours_per_week * attendance.paid_days_ratio,
            attendance.adjusted_hours,
        )

    def is_term_week(self, week_start: DateLike) -> bool:
        return bool(self._classifier.is_term_time(week_start))

    # ── public ───────────────────────────────────────────────────────────

    def week_cost(self, week_start: DateLike, schedule: Schedule) -> WeekCostResult:
        start = to_date(week_start)
        att = self.attendance(start, schedule)

        if att.all_unpaid:
            return WeekCostResult(
                week_start=start,
                total=0.0,
                funded_hours=0.0,
                unfunded_hours=0.0,
                is_term_time=False,
                is_unpaid=True,
                unpaid_days=att.unpaid_days,
            )

        rate = schedule.cost_per_hour
        # Funding is granted on has_govt_funding alone; the income test is
        # only applied when savings are totalled.
        if self.is_term_week(start) and schedule.has_govt_funding:
            funded = self.funded_hours(att)
            unfunded = max(0.0, att.adjusted_hours - funded)
            return WeekCostResult(
                week_start=start,
                total=funded * self._rates.surcharge_per_hour + unfunded * rate,
                funded_hours=funded,
                unfunded_hours=unfunded,
                is_term_time=True,
                is_unpaid=False,
                unpaid_days=att.unpaid_days,
            )

        return WeekCostResult(
            week_start=start,
            total=att.adjusted_hours * rate,
            funded_hours=0.0,
            unfunded_hours=att.adjusted_hours,
            is_term_time=False,
            is_unpaid=False,
            unpaid_days=att.unpaid_days,
        )

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def classifier(self) -> CalendarClassifier:
        return self._classifier

    @property
    def rates(self) -> TermTimeRates:
        return self._rates

    def __repr__(self) -> str:
        return (
            f"WeekCostCalculator(classifier={self._classifier!r}, "
            f"rates={self._rates!r})"
        )
