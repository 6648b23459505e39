from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TermTimeRates:
    """Funding rules for term-time-only (calendar) billing."""

    funded_hours_per_week: float = 30.0
    surcharge_per_hour: float = 1.5
    tax_free_rate: float = 0.2
    tax_free_annual_cap: float = 2000.0

    @property
    def monthly_tax_free_cap(self) -> float:
        return self.tax_free_annual_cap / 12


@dataclass(frozen=True, slots=True)
class StandardRates:
    """Funding rules for stretched (flat annual) billing."""

    funded_hours_per_week: float = 30.0
    funded_weeks_per_year: int = 38
    tax_free_rate: float = 0.2
    tax_free_annual_cap: float = 2000.0

    @property
    def funded_hours_per_year(self) -> float:
        return self.funded_hours_per_week * self.funded_weeks_per_year
