from __future__ import annotations

from app.application.market_data.errors import (
    MarketDataInvalidRequestError,
    MarketDataNotFoundError,
    MarketDataUpstreamUnavailableError,
)


def test_active_stocks_returns_ticker_and_name(api_client) -> None:
    response = api_client.get("/api/v1/stocks/active")

    assert response.status_code == 200
    assert response.json() == [
        {"ticker": "AAPL", "name": "Apple Inc."},
        {"ticker": "MSFT", "name": "Microsoft Corp"},
    ]


def test_active_stocks_surfaces_upstream_error_text(api_client, stocks_service) -> None:
    stocks_service.active_error = MarketDataUpstreamUnavailableError(
        "Failed to fetch active stocks: connection reset by peer"
    )

    response = api_client.get("/api/v1/stocks/active")

    assert response.status_code == 502
    error = response.json()["error"]
    assert error["code"] == "MARKET_DATA_UPSTREAM_UNAVAILABLE"
    assert "connection reset by peer" in error["message"]


def test_selected_stock_passes_provider_payload_through(api_client, stocks_service) -> None:
    response = api_client.get("/api/v1/stocks/selected", params={"ticker": "AAPL"})

    assert response.status_code == 200
    assert response.json()["results"][0]["ticker"] == "O:AAPL251219C00650000"
    assert stocks_service.selected_calls == ["AAPL"]


def test_top_active_stocks_returns_details(api_client, stocks_service) -> None:
    response = api_client.get("/api/v1/stocks/top-active")

    assert response.status_code == 200
    body = response.json()
    assert body[0]["primary_exchange"] == "XNAS"
    assert body[0]["active"] is True
    assert stocks_service.top_active_calls == [None]


def test_options_data_scenario_payload(api_client, options_service) -> None:
    response = api_client.get(
        "/api/v1/stocks/options-data",
        params={"option_ticker": "O:AAPL251219C00650000", "from": "2023-01-09", "to": "2023-01-10"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "ticker": "O:AAPL251219C00650000",
        "name": "O:AAPL251219C00650000",
        "volume": 500,
        "chartData": [
            {
                "open": 10,
                "high": 12,
                "low": 9,
                "close": 11,
                "time": 169000000,
                "volume": 500,
                "volumeWeighted": 10.5,
                "transactions": 20,
            }
        ],
    }
    assert options_service.calls[0]["from_date"] == "2023-01-09"
    assert options_service.calls[0]["to_date"] == "2023-01-10"
    assert options_service.calls[0]["multiplier"] is None


def test_options_data_maps_not_found(api_client, options_service) -> None:
    options_service.error = MarketDataNotFoundError("Failed to fetch option aggregates for O:X: 404 Not Found")

    response = api_client.get("/api/v1/stocks/options-data", params={"option_ticker": "O:X"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "MARKET_DATA_NOT_FOUND"
    assert response.json()["error"]["details"] == {"option_ticker": "O:X"}


def test_options_data_maps_invalid_request(api_client, options_service) -> None:
    options_service.error = MarketDataInvalidRequestError("option_ticker must start with O:")

    response = api_client.get("/api/v1/stocks/options-data", params={"option_ticker": "AAPL"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "option_ticker must start with O:"
