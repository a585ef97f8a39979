from __future__ import annotations

from datetime import date

import pytest

from app.domain.options.contracts import build_option_ticker, is_option_ticker, parse_option_ticker


def test_build_option_ticker_matches_occ_layout() -> None:
    ticker = build_option_ticker(underlying="aapl", expiration=date(2025, 12, 19), option_type="call", strike=650)

    assert ticker == "O:AAPL251219C00650000"


def test_build_option_ticker_encodes_fractional_put_strike() -> None:
    ticker = build_option_ticker(underlying="SPY", expiration=date(2026, 1, 16), option_type="PUT", strike=212.5)

    assert ticker == "O:SPY260116P00212500"


@pytest.mark.parametrize(
    ("kwargs", "code"),
    [
        ({"underlying": "", "option_type": "call", "strike": 10}, "OPTIONS_INVALID_UNDERLYING"),
        ({"underlying": "AAPL1", "option_type": "call", "strike": 10}, "OPTIONS_INVALID_UNDERLYING"),
        ({"underlying": "AAPL", "option_type": "straddle", "strike": 10}, "OPTIONS_INVALID_OPTION_TYPE"),
        ({"underlying": "AAPL", "option_type": "call", "strike": 0}, "OPTIONS_INVALID_STRIKE"),
    ],
)
def test_build_option_ticker_rejects_invalid_parts(kwargs: dict, code: str) -> None:
    with pytest.raises(ValueError, match=code):
        build_option_ticker(expiration=date(2025, 12, 19), **kwargs)


def test_parse_option_ticker_recovers_parts() -> None:
    contract = parse_option_ticker("o:msft260221p00300000")

    assert contract.underlying == "MSFT"
    assert contract.expiration == date(2026, 2, 21)
    assert contract.option_type == "put"
    assert contract.strike == 300.0
    assert contract.ticker == "O:MSFT260221P00300000"


def test_parse_option_ticker_rejects_plain_symbol() -> None:
    with pytest.raises(ValueError, match="OPTIONS_INVALID_TICKER"):
        parse_option_ticker("AAPL")


def test_is_option_ticker() -> None:
    assert is_option_ticker(" o:AAPL251219C00650000")
    assert not is_option_ticker("AAPL")
