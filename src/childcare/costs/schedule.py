from __future__ import annotations

from dataclasses import dataclass

from childcare._exceptions import ScheduleError


@dataclass(frozen=True, slots=True)
class Schedule:
    """
    A household's weekly childcare pattern and eligibility flags.

    The input layer keeps values on their slider grids (days in 0.5 steps up
    to 7, hours in 0.5 steps between 4 and 14); only values that would break
    the arithmetic are rejected here.
    """

    days_per_week: float = 4.0
    hours_per_day: float = 11.0
    cost_per_hour: float = 6.5
    has_govt_funding: bool = True
    has_tax_free_childcare: bool = True
    both_parents_under_100k: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.days_per_week <= 7.0:
            raise ScheduleError(
                f"days_per_week must be between 0 and 7; got {self.days_per_week}."
            )
        if self.hours_per_day < 0.0:
            raise ScheduleError(
                f"hours_per_day must be non-negative; got {self.hours_per_day}."
            )
        if self.cost_per_hour < 0.0:
            raise ScheduleError(
                f"cost_per_hour must be non-negative; got {self.cost_per_hour}."
            )

    @property
    def hours_per_week(self) -> float:
        return self.days_per_week * self.hours_per_day

    @property
    def funding_eligible(self) -> bool:
        return self.has_govt_funding and self.both_parents_under_100k

    @property
    def tax_free_eligible(self) -> bool:
        return self.has_tax_free_childcare and self.both_parents_under_100k
