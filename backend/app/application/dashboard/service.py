from __future__ import annotations

from app.application.dashboard.session import DashboardSession, StateListener
from app.application.dashboard.view_state import DashboardViewState, OptionContractTemplate
from app.application.options.service import OptionsApplicationService
from app.application.stocks.service import StocksApplicationService


class DashboardApplicationService:
    def __init__(
        self,
        *,
        stocks_service: StocksApplicationService,
        options_service: OptionsApplicationService,
        template: OptionContractTemplate | None = None,
    ) -> None:
        self._stocks_service = stocks_service
        self._options_service = options_service
        self._template = template or OptionContractTemplate()

    def new_session(self, *, on_change: StateListener | None = None) -> DashboardSession:
        return DashboardSession(
            stocks_service=self._stocks_service,
            options_service=self._options_service,
            template=self._template,
            on_change=on_change,
        )

    async def load(self, *, ticker: str = "") -> DashboardViewState:
        """Load the stock list and, when a ticker is given, its option data concurrently."""
        session = self.new_session()
        try:
            await session.start()
            await session.select(ticker)
            await session.wait()
        finally:
            await session.close()
        return session.state
