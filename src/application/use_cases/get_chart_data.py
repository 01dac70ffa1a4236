"""Use case to build the aggregate net worth series for charting."""

from datetime import date

from src.application.ports.balances_repository import BalancesRepositoryPort
from src.domain.models import ChartDataPoint
from src.domain.services import (
    parse_calendar_date,
    reconstruct_net_worth_series,
    validate_balance_sign,
    validate_date_range,
    validate_history_order,
)
from src.infrastructure.logging.logger import get_app_logger


class GetChartDataUseCase:
    """Reconstruct assets, liabilities and net worth per observation date."""

    def __init__(
        self,
        balances_repository: BalancesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            balances_repository: Port providing active account histories.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balances_repository = balances_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        from_date: date | str,
        to_date: date | str,
    ) -> list[ChartDataPoint]:
        """Return the series between two inclusive dates.

        Args:
            from_date: Lower bound as a date or ``YYYY-MM-DD`` string.
            to_date: Upper bound as a date or ``YYYY-MM-DD`` string.

        Returns:
            list[ChartDataPoint]: Points ascending by date.

        Raises:
            InvalidDateRangeError: If a bound is malformed or inverted.
            UnsortedHistoryError: If the store returned unordered history.
        """
        start = parse_calendar_date(from_date, "from_date")
        end = parse_calendar_date(to_date, "to_date")
        validate_date_range(start, end)

        histories = self._balances_repository.fetch_active_histories()
        validate_history_order(histories)
        for history in histories:
            validate_balance_sign(history, self._logger)

        series = reconstruct_net_worth_series(histories, start, end)
        self._logger.info(
            f"Chart data built: accounts={len(histories)}, "
            f"points={len(series)}, range={start}..{end}"
        )
        return series


__all__ = ["GetChartDataUseCase", "ChartDataPoint"]
