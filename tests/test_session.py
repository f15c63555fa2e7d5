"""Tests for the interactive calculator loop."""

import io
import logging

import pytest

from bsgreeks.config import Settings
from bsgreeks.session import (
    run_session, prompt_float, PROMPTS, INVALID_MSG, NUMERIC_MSG, FAREWELL,
)

VALID = "100\n100\n1\n0.05\n0.2\n"


def _run(text, settings=None):
    out = io.StringIO()
    priced = run_session(io.StringIO(text), out, settings)
    return priced, out.getvalue()


class TestPromptFloat:
    def test_reprompts_until_numeric(self):
        out = io.StringIO()
        value = prompt_float("x: ", io.StringIO("abc\n\n2.5\n"), out)
        assert value == 2.5
        assert out.getvalue().count("Please enter a number.") == 2
        assert out.getvalue().count("x: ") == 3

    def test_eof_raises(self):
        with pytest.raises(EOFError):
            prompt_float("x: ", io.StringIO(""), io.StringIO())


class TestRunSession:
    def test_single_valuation(self):
        priced, out = _run(VALID + "n\n")
        assert priced == 1
        for _, msg in PROMPTS:
            assert msg in out
        assert "Call Price: $10.4506" in out
        assert "Put Price: $5.5735" in out
        assert "=== Scenario Analysis ===" in out
        assert "Do you want to calculate another option? (y/n): " in out
        assert out.rstrip().endswith(FAREWELL)

    def test_repeat_on_yes(self):
        priced, out = _run(VALID + "Y\n" + "100\n90\n0\n0.05\n0.2\n" + "no\n")
        assert priced == 2
        assert out.count("=== Black-Scholes Option Pricing Results ===") == 2
        # second pass is at expiry: intrinsic value only
        assert "Call Price: $10.0000" in out

    def test_yes_word_is_affirmative(self):
        priced, _ = _run(VALID + "yes\n" + VALID + "n\n")
        assert priced == 2

    def test_invalid_parameters_reprompt(self, caplog):
        bad = "0\n100\n1\n0.05\n0.2\n"
        with caplog.at_level(logging.WARNING, logger="bsgreeks.session"):
            priced, out = _run(bad + VALID + "n\n")
        assert priced == 1
        assert INVALID_MSG in out
        assert out.count("=== Black-Scholes Option Pricing Calculator ===") == 2
        assert any("rejected parameters" in r.getMessage() for r in caplog.records)

    def test_zero_volatility_rejected(self):
        priced, out = _run("100\n100\n1\n0.05\n0\n")
        assert priced == 0
        assert INVALID_MSG in out
        assert "Call Price" not in out

    def test_zero_time_accepted(self):
        priced, out = _run("100\n90\n0\n0.05\n0.2\nn\n")
        assert priced == 1
        assert INVALID_MSG not in out

    def test_negative_rate_accepted(self):
        priced, _ = _run("100\n100\n1\n-0.01\n0.2\nn\n")
        assert priced == 1

    def test_malformed_number_reasks_field(self):
        priced, out = _run("100\nabc\n100\n1\n0.05\n0.2\nn\n")
        assert priced == 1
        assert "Please enter a number." in out
        assert out.count("Strike Price: $") == 2
        assert out.count("Current Stock Price: $") == 1

    def test_eof_mid_entry_ends_cleanly(self):
        priced, out = _run("100\n100\n")
        assert priced == 0
        assert out.rstrip().endswith(FAREWELL)

    def test_eof_at_again_prompt_ends_cleanly(self):
        priced, out = _run(VALID)
        assert priced == 1
        assert out.rstrip().endswith(FAREWELL)

    def test_precision_setting(self):
        _, out = _run(VALID + "n\n", Settings(precision=2))
        assert "Call Price: $10.45\n" in out

    def test_overflowing_rate_reprompts(self):
        priced, out = _run("100\n100\n1\n-800\n0.2\n" + VALID + "n\n")
        assert priced == 1
        assert NUMERIC_MSG in out
        assert "overflows" in out
        assert out.count("=== Black-Scholes Option Pricing Results ===") == 1

    def test_underflowing_volatility_reprompts(self):
        priced, out = _run("100\n100\n1e-100\n0.05\n1e-300\n")
        assert priced == 0
        assert NUMERIC_MSG in out
        assert out.rstrip().endswith(FAREWELL)

    def test_blank_answer_asks_again(self):
        priced, out = _run(VALID + "\n\ny\n" + VALID + "n\n")
        assert priced == 2
        assert out.count("Do you want to calculate another option? (y/n): ") == 4
