"""
tests/costs/test_standard.py

Covers:
  - Flat annual cost with funding and tax-free top-up
  - Eligibility gating on the income test
  - Annual tax-free cap
  - Zero weeks (no division in per-week figures)
  - Net cost clamped at zero
  - Weekly / monthly figures and savings percentage
"""

import pytest

from childcare.costs import Schedule, StandardCalculator, StandardRates


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def calc():
    return StandardCalculator()


@pytest.fixture
def schedule():
    """4 days × 11 hours at £6.50, fully eligible."""
    return Schedule(days_per_week=4, hours_per_day=11, cost_per_hour=6.5)


# ── Annual figures ────────────────────────────────────────────────────────────

class TestAnnual:

    def test_default_38_weeks(self, calc, schedule):
        r = calc.calculate(schedule)
        assert r.weeks_per_year == 38
        assert r.total_hours == pytest.approx(1672.0)
        assert r.gross_cost == pytest.approx(10868.0)
        assert r.funded_hours == pytest.approx(1140.0)
        assert r.govt_funding_savings == pytest.approx(7410.0)
        assert r.tax_free_savings == pytest.approx(691.6)
        assert r.net_cost == pytest.approx(2766.4)

    def test_funded_hours_carry_no_surcharge(self, calc, schedule):
        r = calc.calculate(schedule)
        assert r.govt_funding_savings == pytest.approx(r.funded_hours * 6.5)

    def test_not_eligible(self, calc):
        s = Schedule(both_parents_under_100k=False)
        r = calc.calculate(s)
        assert r.funded_hours == 0.0
        assert r.govt_funding_savings == 0.0
        assert r.tax_free_savings == 0.0
        assert r.net_cost == pytest.approx(r.gross_cost)

    def test_no_funding_flag(self, calc):
        r = calc.calculate(Schedule(has_govt_funding=False))
        assert r.govt_funding_savings == 0.0
        assert r.tax_free_savings == pytest.approx(2000.0)

    def test_no_tax_free_flag(self, calc):
        r = calc.calculate(Schedule(has_tax_free_childcare=False))
        assert r.tax_free_savings == 0.0
        assert r.net_cost == pytest.approx(10868.0 - 7410.0)

    def test_tax_free_cap(self, calc):
        # 52 × 50h × £20 = 52000; after funding 29200; 20% = 5840 → capped
        s = Schedule(days_per_week=5, hours_per_day=10, cost_per_hour=20.0)
        r = calc.calculate(s, weeks_per_year=52)
        assert r.tax_free_savings == pytest.approx(2000.0)
        assert r.net_cost == pytest.approx(52000.0 - 22800.0 - 2000.0)

    def test_custom_rates(self, schedule):
        calc = StandardCalculator(StandardRates(funded_hours_per_week=15.0))
        r = calc.calculate(schedule)
        assert r.funded_hours == pytest.approx(570.0)

    def test_negative_weeks_raises(self, calc, schedule):
        with pytest.raises(ValueError):
            calc.calculate(schedule, weeks_per_year=-1)


# ── Clamping ──────────────────────────────────────────────────────────────────

class TestClamping:

    def test_zero_weeks(self, calc, schedule):
        r = calc.calculate(schedule, weeks_per_year=0)
        assert r.gross_cost == 0.0
        assert r.net_cost == 0.0
        assert r.weekly_gross == 0.0
        assert r.weekly_net == 0.0
        assert r.weekly_govt_funding == 0.0
        assert r.weekly_tax_free == 0.0
        assert r.savings_percentage == 0.0

    def test_funding_above_gross_clamps_net(self, calc, schedule):
        # 10 weeks = 440h but 1140h are funded
        r = calc.calculate(schedule, weeks_per_year=10)
        assert r.govt_funding_savings > r.gross_cost
        assert r.net_cost == 0.0

    @pytest.mark.parametrize("weeks", [0, 5, 20, 38, 52])
    @pytest.mark.parametrize("days", [0, 1.5, 4, 7])
    @pytest.mark.parametrize("rate", [0.0, 4.0, 12.5])
    def test_net_never_negative(self, calc, weeks, days, rate):
        s = Schedule(days_per_week=days, hours_per_day=8, cost_per_hour=rate)
        assert calc.calculate(s, weeks_per_year=weeks).net_cost >= 0.0


# ── Derived figures ───────────────────────────────────────────────────────────

class TestDerived:

    def test_weekly(self, calc, schedule):
        r = calc.calculate(schedule)
        assert r.weekly_gross == pytest.approx(286.0)
        assert r.weekly_net == pytest.approx(2766.4 / 38)
        assert r.weekly_govt_funding == pytest.approx(195.0)
        assert r.weekly_tax_free == pytest.approx(691.6 / 38)

    def test_monthly(self, calc, schedule):
        r = calc.calculate(schedule)
        assert r.monthly_gross == pytest.approx(10868.0 / 12)
        assert r.monthly_net == pytest.approx(2766.4 / 12)
        assert r.monthly_govt_funding == pytest.approx(7410.0 / 12)
        assert r.monthly_tax_free == pytest.approx(691.6 / 12)

    def test_savings_percentage(self, calc, schedule):
        r = calc.calculate(schedule)
        assert r.total_savings == pytest.approx(8101.6)
        assert r.savings_percentage == pytest.approx(8101.6 / 10868.0 * 100)

    def test_repr(self, calc):
        assert "StandardCalculator(rates=StandardRates(" in repr(calc)
