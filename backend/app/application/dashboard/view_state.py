from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Generic, TypeVar

from app.domain.options.contracts import build_option_ticker
from app.domain.options.schemas import OptionAggregatesResult, OptionChart
from app.domain.stocks.schemas import StockSummary

T = TypeVar("T")


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class LoadState(Generic[T]):
    status: LoadStatus = LoadStatus.IDLE
    data: T | None = None
    error_message: str | None = None

    def start(self) -> None:
        self.status = LoadStatus.LOADING
        self.data = None
        self.error_message = None

    def succeed(self, data: T) -> None:
        self.status = LoadStatus.SUCCESS
        self.data = data
        self.error_message = None

    def fail(self, message: str) -> None:
        self.status = LoadStatus.ERROR
        self.data = None
        self.error_message = message

    def reset(self) -> None:
        self.status = LoadStatus.IDLE
        self.data = None
        self.error_message = None


@dataclass(slots=True, frozen=True)
class OptionContractTemplate:
    """Fixed contract the dashboard charts for whichever underlying is selected."""

    expiration: date = date(2025, 12, 19)
    option_type: str = "call"
    strike: float = 650.0

    def option_ticker_for(self, ticker: str) -> str:
        return build_option_ticker(
            underlying=ticker,
            expiration=self.expiration,
            option_type=self.option_type,
            strike=self.strike,
        )


@dataclass(slots=True, frozen=True)
class OptionDataRequest:
    token: int
    ticker: str
    option_ticker: str


@dataclass(slots=True)
class DashboardViewState:
    """Selection-driven state of the options dashboard.

    Option data is only requested once a ticker is selected. Every selection
    issues a new request token; results carrying an older token are dropped so
    a slow response can never overwrite the latest selection.
    """

    template: OptionContractTemplate = field(default_factory=OptionContractTemplate)
    selected_ticker: str = ""
    stocks: LoadState[list[StockSummary]] = field(default_factory=LoadState)
    option_data: LoadState[OptionAggregatesResult] = field(default_factory=LoadState)
    _latest_token: int = 0

    @property
    def option_ticker(self) -> str | None:
        if not self.selected_ticker:
            return None
        try:
            return self.template.option_ticker_for(self.selected_ticker)
        except ValueError:
            return None

    @property
    def is_loading(self) -> bool:
        return self.stocks.status is LoadStatus.LOADING or self.option_data.status is LoadStatus.LOADING

    @property
    def errors(self) -> list[str]:
        messages: list[str] = []
        if self.stocks.error_message:
            messages.append(f"Error loading stocks: {self.stocks.error_message}")
        if self.option_data.error_message:
            messages.append(f"Error loading options data: {self.option_data.error_message}")
        return messages

    @property
    def chart(self) -> OptionChart | None:
        result = self.option_data.data
        if self.option_data.status is not LoadStatus.SUCCESS or result is None or not result.chart_data:
            return None
        return OptionChart.from_point(result.chart_data[0])

    def begin_stocks_load(self) -> None:
        self.stocks.start()

    def resolve_stocks(self, stocks: list[StockSummary]) -> None:
        self.stocks.succeed(list(stocks))

    def reject_stocks(self, message: str) -> None:
        self.stocks.fail(message)

    def select(self, ticker: str) -> OptionDataRequest | None:
        normalized = ticker.strip().upper()
        self._latest_token += 1
        self.selected_ticker = normalized
        if not normalized:
            self.option_data.reset()
            return None

        try:
            option_ticker = self.template.option_ticker_for(normalized)
        except ValueError:
            self.option_data.fail(f"{normalized} is not a valid ticker")
            return None
        self.option_data.start()
        return OptionDataRequest(token=self._latest_token, ticker=normalized, option_ticker=option_ticker)

    def resolve_option_data(self, token: int, result: OptionAggregatesResult) -> bool:
        if token != self._latest_token:
            return False
        self.option_data.succeed(result)
        return True

    def reject_option_data(self, token: int, message: str) -> bool:
        if token != self._latest_token:
            return False
        self.option_data.fail(message)
        return True
