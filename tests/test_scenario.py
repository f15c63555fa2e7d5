"""Tests for moneyness scenario analysis and the text report."""

from bsgreeks import MarketParameters, call_price, put_price, valuate
from bsgreeks.report import format_results, format_scenarios
from bsgreeks.scenario import scenario_analysis

OPT = MarketParameters(S0=100, K=120, T=1.0, r=0.05, sigma=0.2)


class TestScenarioAnalysis:
    def test_strikes_relative_to_spot(self):
        atm, itm, otm = scenario_analysis(OPT)
        assert atm.strike == 100.0
        assert abs(itm.strike - 90.0) < 1e-12
        assert abs(otm.strike - 110.0) < 1e-12

    def test_only_atm_reports_put(self):
        atm, itm, otm = scenario_analysis(OPT)
        atm_params = OPT.with_strike(100.0)
        assert atm.call == call_price(atm_params)
        assert atm.put == put_price(atm_params)
        assert itm.put is None
        assert otm.put is None

    def test_call_value_decreases_with_strike(self):
        atm, itm, otm = scenario_analysis(OPT)
        assert itm.call > atm.call > otm.call

    def test_ignores_original_strike(self):
        other = OPT.with_strike(50.0)
        assert scenario_analysis(other) == scenario_analysis(OPT)

    def test_custom_ratios(self):
        _, itm, otm = scenario_analysis(OPT, itm_ratio=0.8, otm_ratio=1.25)
        assert abs(itm.strike - 80.0) < 1e-12
        assert otm.strike == 125.0

    def test_expired_scenarios_are_intrinsic(self):
        p = MarketParameters(S0=100, K=100, T=0.0, r=0.05, sigma=0.2)
        atm, itm, otm = scenario_analysis(p)
        assert atm.call == 0.0 and atm.put == 0.0
        assert abs(itm.call - 10.0) < 1e-12
        assert otm.call == 0.0


class TestReport:
    def test_reference_report(self):
        text = format_results(valuate(MarketParameters(100, 100, 1.0, 0.05, 0.2)))
        assert "=== Black-Scholes Option Pricing Results ===" in text
        assert "  Stock Price (S): $100.0000" in text
        assert "  Risk-free Rate (r): 5.0000%" in text
        assert "  Volatility (σ): 20.0000%" in text
        assert "  Call Price: $10.4506" in text
        assert "  Put Price: $5.5735" in text
        assert "  Call Delta: 0.6368" in text
        assert "  Put Delta: -0.3632" in text
        assert "  Gamma: 0.0188" in text
        assert "  Call Theta: -0.0176 (per day)" in text
        assert "  Vega: 0.3752 (per 1% vol change)" in text
        assert "  Call Rho: 0.5323 (per 1% rate change)" in text

    def test_precision(self):
        text = format_results(valuate(MarketParameters(100, 100, 1.0, 0.05, 0.2)), precision=2)
        assert "  Call Price: $10.45" in text
        assert "10.4506" not in text

    def test_scenario_block(self):
        text = format_scenarios(scenario_analysis(OPT))
        lines = text.splitlines()
        assert "=== Scenario Analysis ===" in lines
        assert "At-the-Money (K = S = $100.0000):" in lines
        assert "In-the-Money Call (K = $90.0000):" in lines
        assert "Out-of-the-Money Call (K = $110.0000):" in lines
        assert sum(line.startswith("  Put Price") for line in lines) == 1
        assert sum(line.startswith("  Call Price") for line in lines) == 3
