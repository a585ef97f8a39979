from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
import re

UNDERLYING_PATTERN = re.compile(r"^[A-Z.]{1,15}$")
_OPTION_TICKER_PATTERN = re.compile(r"^O:([A-Z.]{1,15})(\d{6})([CP])(\d{8})$")
_OPTION_TYPE_CODES = {"call": "C", "put": "P"}


@dataclass(slots=True, frozen=True)
class OptionContractId:
    underlying: str
    expiration: date
    option_type: str
    strike: float

    @property
    def ticker(self) -> str:
        return build_option_ticker(
            underlying=self.underlying,
            expiration=self.expiration,
            option_type=self.option_type,
            strike=self.strike,
        )


def build_option_ticker(*, underlying: str, expiration: date, option_type: str, strike: float) -> str:
    """Encode an OCC-style identifier, e.g. ``O:AAPL251219C00650000``."""
    symbol = underlying.strip().upper()
    if not UNDERLYING_PATTERN.fullmatch(symbol):
        raise ValueError("OPTIONS_INVALID_UNDERLYING")

    type_code = _OPTION_TYPE_CODES.get(option_type.strip().lower())
    if type_code is None:
        raise ValueError("OPTIONS_INVALID_OPTION_TYPE")

    strike_thousandths = round(strike * 1000)
    if strike_thousandths <= 0 or strike_thousandths > 99_999_999:
        raise ValueError("OPTIONS_INVALID_STRIKE")

    return f"O:{symbol}{expiration:%y%m%d}{type_code}{strike_thousandths:08d}"


def parse_option_ticker(option_ticker: str) -> OptionContractId:
    normalized = option_ticker.strip().upper()
    matched = _OPTION_TICKER_PATTERN.fullmatch(normalized)
    if matched is None:
        raise ValueError("OPTIONS_INVALID_TICKER")

    underlying, expiry_raw, type_code, strike_raw = matched.groups()
    try:
        expiration = datetime.strptime(expiry_raw, "%y%m%d").date()
    except ValueError as exc:
        raise ValueError("OPTIONS_INVALID_TICKER") from exc

    return OptionContractId(
        underlying=underlying,
        expiration=expiration,
        option_type="call" if type_code == "C" else "put",
        strike=int(strike_raw) / 1000,
    )


def is_option_ticker(value: str) -> bool:
    return value.strip().upper().startswith("O:")
