from __future__ import annotations

from app.api.v1.dto.dashboard import DashboardOut, LoadStateOut
from app.api.v1.dto.options import OptionAggregatePointOut, OptionChartOut, StockDataOut
from app.api.v1.dto.stocks import ActiveStockDetailOut, StockSummaryOut
from app.application.dashboard.view_state import DashboardViewState
from app.domain.options.schemas import OptionAggregatePoint, OptionAggregatesResult, OptionChart
from app.domain.stocks.schemas import ActiveStockDetail, StockSummary


def to_stock_summary_out(stock: StockSummary) -> StockSummaryOut:
    return StockSummaryOut(ticker=stock.ticker, name=stock.name)


def to_active_stock_detail_out(stock: ActiveStockDetail) -> ActiveStockDetailOut:
    return ActiveStockDetailOut(
        ticker=stock.ticker,
        name=stock.name,
        market=stock.market,
        locale=stock.locale,
        primary_exchange=stock.primary_exchange,
        type=stock.type,
        active=stock.active,
        currency_name=stock.currency_name,
        last_updated_utc=stock.last_updated_utc,
    )


def to_option_aggregate_point_out(point: OptionAggregatePoint) -> OptionAggregatePointOut:
    return OptionAggregatePointOut(
        close=point.close,
        high=point.high,
        low=point.low,
        open=point.open,
        time=point.time,
        volume=point.volume,
        volume_weighted=point.volume_weighted,
        transactions=point.transactions,
    )


def to_stock_data_out(result: OptionAggregatesResult) -> StockDataOut:
    return StockDataOut(
        ticker=result.ticker,
        name=result.name,
        volume=result.volume,
        chart_data=[to_option_aggregate_point_out(point) for point in result.chart_data],
    )


def to_option_chart_out(chart: OptionChart) -> OptionChartOut:
    return OptionChartOut(labels=list(chart.labels), values=list(chart.values))


def to_dashboard_out(state: DashboardViewState) -> DashboardOut:
    stocks = state.stocks.data
    option_data = state.option_data.data
    chart = state.chart
    return DashboardOut(
        selected_ticker=state.selected_ticker,
        option_ticker=state.option_ticker,
        is_loading=state.is_loading,
        stocks=LoadStateOut[list[StockSummaryOut]](
            status=state.stocks.status.value,
            data=[to_stock_summary_out(stock) for stock in stocks] if stocks is not None else None,
            error_message=state.stocks.error_message,
        ),
        option_data=LoadStateOut[StockDataOut](
            status=state.option_data.status.value,
            data=to_stock_data_out(option_data) if option_data is not None else None,
            error_message=state.option_data.error_message,
        ),
        chart=to_option_chart_out(chart) if chart is not None else None,
        errors=state.errors,
    )
