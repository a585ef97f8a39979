from __future__ import annotations

from typing import Any

import httpx


class MassiveReferenceClient:
    """Reference-data endpoints called over plain HTTP with a bearer token."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.massive.com",
        timeout: float = 20.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Massive API key is not configured")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def list_tickers(
        self,
        *,
        type: str | None = "CS",
        active: bool = True,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"active": str(active).lower()}
        if type:
            params["type"] = type
        return self.get("/v3/reference/tickers", params=params)

    def list_options_contracts(self, *, ticker: str) -> dict[str, Any]:
        return self.get("/v3/reference/options/contracts", params={"ticker": ticker})

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        resp = self._http.get(
            f"{self.base_url}{path}",
            params=params,
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            return {"results": payload}
        return payload

    def close(self) -> None:
        self._http.close()
