from __future__ import annotations

from typing import Any

from massive import RESTClient


class MassiveClient:
    """Thin wrapper over the Massive SDK used for option aggregates."""

    def __init__(self, api_key: str, *, sdk_client: Any | None = None) -> None:
        if not api_key:
            raise ValueError("Massive API key is not configured")

        self.api_key = api_key
        self._client = sdk_client if sdk_client is not None else RESTClient(api_key, retries=0)

    def get_option_aggregates(
        self,
        *,
        option_ticker: str,
        multiplier: int,
        timespan: str,
        from_date: str,
        to_date: str,
        adjusted: bool = True,
        sort: str = "asc",
        limit: int = 50000,
    ) -> list[Any]:
        raw = self._client.get_aggs(
            option_ticker,
            multiplier,
            timespan,
            from_date,
            to_date,
            adjusted=adjusted,
            sort=sort,
            limit=limit,
        )
        if raw is None:
            return []
        if isinstance(raw, dict):
            results = raw.get("results")
            return list(results) if isinstance(results, list) else []
        return list(raw)
