"""Use case to compute net worth summary statistics."""

from datetime import date

from src.application.ports.balances_repository import BalancesRepositoryPort
from src.application.use_cases.get_chart_data import GetChartDataUseCase
from src.domain.constants import DEFAULT_HISTORY_START
from src.domain.models import NetWorthStats
from src.domain.services import compute_net_worth_stats
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthStatsUseCase:
    """Compute YTD, one-year, all-time-high and average change figures."""

    def __init__(
        self,
        balances_repository: BalancesRepositoryPort,
        logger=None,
        history_start: date = DEFAULT_HISTORY_START,
    ) -> None:
        """Initialize the use case.

        Args:
            balances_repository: Port providing active account histories.
            logger: Optional logger compatible with logging.Logger-like API.
            history_start: Earliest date included in the full history.
        """
        self._logger = logger or get_app_logger()
        self._chart_data = GetChartDataUseCase(
            balances_repository,
            logger=self._logger,
        )
        self._history_start = history_start

    def execute(self, today: date | None = None) -> NetWorthStats:
        """Return statistics over the whole recorded history.

        Args:
            today: Optional reference date, defaults to the current date.

        Returns:
            NetWorthStats: Statistics snapshot, zeroed when nothing is
            recorded.
        """
        today = today or date.today()
        series = self._chart_data.execute(self._history_start, today)
        stats = compute_net_worth_stats(series, today)
        self._logger.info(
            f"Net worth stats computed: points={len(series)}, "
            f"ytd_change={stats.ytd_change}, "
            f"all_time_high={stats.all_time_high}"
        )
        return stats


__all__ = ["GetNetWorthStatsUseCase", "NetWorthStats"]
