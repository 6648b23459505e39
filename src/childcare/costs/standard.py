from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .rates import StandardRates
from .schedule import Schedule

DEFAULT_WEEKS_PER_YEAR = 38


@dataclass(frozen=True, slots=True)
class StandardBreakdown:
    weeks_per_year: int
    total_hours: float
    gross_cost: float
    funded_hours: float
    govt_funding_savings: float
    tax_free_savings: float
    net_cost: float

    def _per_week(self, amount: float) -> float:
        return amount / self.weeks_per_year if self.weeks_per_year > 0 else 0.0

    @property
    def weekly_gross(self) -> float:
        return self._per_week(self.gross_cost)

    @property
    def weekly_net(self) -> float:
        return self._per_week(self.net_cost)

    @property
    def weekly_govt_funding(self) -> float:
        return self._per_week(self.govt_funding_savings)

    @property
    def weekly_tax_free(self) -> float:
        return self._per_week(self.tax_free_savings)

    @property
    def monthly_gross(self) -> float:
        return self.gross_cost / 12

    @property
    def monthly_net(self) -> float:
        return self.net_cost / 12

    @property
    def monthly_govt_funding(self) -> float:
        return self.govt_funding_savings / 12

    @property
    def monthly_tax_free(self) -> float:
        return self.tax_free_savings / 12

    @property
    def total_savings(self) -> float:
        return self.govt_funding_savings + self.tax_free_savings

    @property
    def savings_percentage(self) -> float:
        if self.gross_cost <= 0:
            return 0.0
        return self.total_savings / self.gross_cost * 100


class StandardCalculator:
    """
    Flat-rate (stretched) costing: annual hours times rate, with funding and
    the tax-free top-up each taken off once.  No calendar is consulted, and
    funded hours are worth the full hourly rate (no surcharge).
    """

    def __init__(self, rates: Optional[StandardRates] = None) -> None:
        self._rates = rates if rates is not None else StandardRates()

    def calculate(
        self,
        schedule: Schedule,
        weeks_per_year: int = DEFAULT_WEEKS_PER_YEAR,
    ) -> StandardBreakdown:
        if weeks_per_year < 0:
            raise ValueError("weeks_per_year must be non-negative.")

        rate = schedule.cost_per_hour
        total_hours = weeks_per_year * schedule.hours_per_week
        gross = total_hours * rate

        funded_hours = 0.0
        funding = 0.0
        if schedule.funding_eligible:
            funded_hours = self._rates.funded_hours_per_year
            funding = funded_hours * rate

        tax_free = 0.0
        if schedule.tax_free_eligible:
            tax_free = min(
                (gross - funding) * self._rates.tax_free_rate,
                self._rates.tax_free_annual_cap,
            )

        return StandardBreakdown(
            weeks_per_year=weeks_per_year,
            total_hours=total_hours,
            gross_cost=gross,
            funded_hours=funded_hours,
            govt_funding_savings=funding,
            tax_free_savings=tax_free,
            net_cost=max(0.0, gross - funding - tax_free),
        )

    @property
    def rates(self) -> StandardRates:
        return self._rates

    def __repr__(self) -> str:
        return f"StandardCalculator(rates={self._rates!r})"
