from __future__ import annotations

from dataclasses import dataclass, field

CHART_LABELS = ("Open", "High", "Low", "Close")


@dataclass(slots=True)
class OptionAggregatePoint:
    close: float = 0
    high: float = 0
    low: float = 0
    open: float = 0
    time: int = 0
    volume: float = 0
    volume_weighted: float = 0
    transactions: int = 0


@dataclass(slots=True)
class OptionAggregatesResult:
    ticker: str
    name: str
    volume: float
    chart_data: list[OptionAggregatePoint] = field(default_factory=list)

    @classmethod
    def from_points(cls, *, option_ticker: str, points: list[OptionAggregatePoint]) -> "OptionAggregatesResult":
        return cls(
            ticker=option_ticker,
            name=option_ticker,
            volume=sum(point.volume for point in points),
            chart_data=list(points),
        )


@dataclass(slots=True, frozen=True)
class OptionChart:
    labels: tuple[str, ...]
    values: tuple[float, float, float, float]

    @classmethod
    def from_point(cls, point: OptionAggregatePoint) -> "OptionChart":
        return cls(labels=CHART_LABELS, values=(point.open, point.high, point.low, point.close))
