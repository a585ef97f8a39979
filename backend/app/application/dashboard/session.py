from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from app.application.dashboard.view_state import DashboardViewState, OptionContractTemplate, OptionDataRequest
from app.application.market_data.errors import MarketDataApplicationError
from app.application.options.service import OptionsApplicationService
from app.application.stocks.service import StocksApplicationService

logger = logging.getLogger(__name__)

StateListener = Callable[[DashboardViewState], Awaitable[None]]


class DashboardSession:
    """Drives one dashboard view: stock list load plus selection-gated option loads."""

    def __init__(
        self,
        *,
        stocks_service: StocksApplicationService,
        options_service: OptionsApplicationService,
        template: OptionContractTemplate | None = None,
        on_change: StateListener | None = None,
    ) -> None:
        self._stocks_service = stocks_service
        self._options_service = options_service
        self._on_change = on_change
        self.state = DashboardViewState(template=template or OptionContractTemplate())
        self._stocks_task: asyncio.Task[None] | None = None
        self._option_task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._stocks_task is not None:
            return
        self.state.begin_stocks_load()
        await self._notify()
        self._stocks_task = asyncio.create_task(self._load_stocks())

    async def select(self, ticker: str) -> OptionDataRequest | None:
        await self._cancel_option_task()
        request = self.state.select(ticker)
        await self._notify()
        if request is None:
            return None
        self._option_task = asyncio.create_task(self._load_option_data(request))
        return request

    async def wait(self) -> None:
        pending = [task for task in (self._stocks_task, self._option_task) if task is not None]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def close(self) -> None:
        tasks = [task for task in (self._stocks_task, self._option_task) if task is not None]
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _cancel_option_task(self) -> None:
        task = self._option_task
        self._option_task = None
        if task is None:
            return
        if not task.done():
            task.cancel()
        (outcome,) = await asyncio.gather(task, return_exceptions=True)
        if isinstance(outcome, Exception):
            logger.warning("Previous option data task failed", extra={"error": str(outcome)})

    async def _load_stocks(self) -> None:
        try:
            stocks = await asyncio.to_thread(self._stocks_service.list_active_stocks)
        except MarketDataApplicationError as exc:
            self.state.reject_stocks(exc.message)
        except Exception as exc:
            logger.exception("Dashboard stock list load crashed")
            self.state.reject_stocks(str(exc) or exc.__class__.__name__)
        else:
            self.state.resolve_stocks(stocks)
        await self._notify()

    async def _load_option_data(self, request: OptionDataRequest) -> None:
        try:
            result = await asyncio.to_thread(
                self._options_service.get_options_data,
                option_ticker=request.option_ticker,
            )
        except asyncio.CancelledError:
            logger.debug("Option data load cancelled", extra={"option_ticker": request.option_ticker})
            raise
        except MarketDataApplicationError as exc:
            applied = self.state.reject_option_data(request.token, exc.message)
        except Exception as exc:
            logger.exception("Dashboard option data load crashed", extra={"option_ticker": request.option_ticker})
            applied = self.state.reject_option_data(request.token, str(exc) or exc.__class__.__name__)
        else:
            applied = self.state.resolve_option_data(request.token, result)

        if applied:
            await self._notify()
        else:
            logger.debug("Dropped stale option data", extra={"option_ticker": request.option_ticker})

    async def _notify(self) -> None:
        if self._on_change is not None:
            await self._on_change(self.state)
