from __future__ import annotations

from collections.abc import Iterable, Mapping
import math
from typing import Any

from app.domain.options.schemas import OptionAggregatePoint
from app.domain.stocks.schemas import ActiveStockDetail, StockSummary


def map_massive_aggregates_to_points(aggregates: Iterable[object]) -> list[OptionAggregatePoint]:
    points: list[OptionAggregatePoint] = []
    for aggregate in aggregates:
        if aggregate is None:
            continue
        points.append(
            OptionAggregatePoint(
                close=_extract_number(aggregate, "c", "close"),
                high=_extract_number(aggregate, "h", "high"),
                low=_extract_number(aggregate, "l", "low"),
                open=_extract_number(aggregate, "o", "open"),
                time=int(_extract_number(aggregate, "t", "timestamp")),
                volume=_extract_number(aggregate, "v", "volume"),
                volume_weighted=_extract_number(aggregate, "vw", "vwap"),
                transactions=int(_extract_number(aggregate, "n", "transactions")),
            )
        )
    return points


def map_ticker_results_to_summaries(payload: Mapping[str, Any]) -> list[StockSummary]:
    return [
        StockSummary(
            ticker=_extract_text(item, "ticker"),
            name=_extract_text(item, "name"),
        )
        for item in _result_items(payload)
    ]


def map_ticker_results_to_details(payload: Mapping[str, Any], *, limit: int) -> list[ActiveStockDetail]:
    details: list[ActiveStockDetail] = []
    for item in _result_items(payload)[: max(0, limit)]:
        details.append(
            ActiveStockDetail(
                ticker=_extract_text(item, "ticker"),
                name=_extract_text(item, "name"),
                market=_extract_text(item, "market"),
                locale=_extract_text(item, "locale"),
                primary_exchange=_extract_text(item, "primary_exchange"),
                type=_extract_text(item, "type"),
                active=bool(_extract_value(item, "active") or False),
                currency_name=_extract_text(item, "currency_name"),
                last_updated_utc=_extract_text(item, "last_updated_utc"),
            )
        )
    return details


def _result_items(payload: Mapping[str, Any]) -> list[object]:
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    return [item for item in results if item is not None]


def _extract_value(raw: object, *keys: str) -> object | None:
    if isinstance(raw, Mapping):
        for key in keys:
            value = raw.get(key)
            if value is not None:
                return value
        return None

    for key in keys:
        value = getattr(raw, key, None)
        if value is not None:
            return value
    return None


def _extract_number(raw: object, *keys: str) -> float:
    value = _extract_value(raw, *keys)
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return number if math.isfinite(number) else 0


def _extract_text(raw: object, key: str) -> str:
    value = _extract_value(raw, key)
    if value is None:
        return ""
    return str(value)
