"""CLI adapter printing net worth statistics and the chart series."""

from datetime import date
import os

from src.application.use_cases.get_chart_data import GetChartDataUseCase
from src.application.use_cases.get_net_worth_stats import (
    GetNetWorthStatsUseCase,
)
from src.domain.errors import InvalidDateRangeError
from src.infrastructure.container import (
    build_balances_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print statistics and the series between CHART_FROM_DATE/CHART_TO_DATE."""
    logger = get_app_logger()
    settings = build_settings()
    today = date.today()
    from_date = os.getenv("CHART_FROM_DATE") or settings.history_start
    to_date = os.getenv("CHART_TO_DATE") or today

    balances_repository = build_balances_repository()
    stats_use_case = GetNetWorthStatsUseCase(
        balances_repository,
        logger=logger,
        history_start=settings.history_start,
    )
    chart_use_case = GetChartDataUseCase(balances_repository, logger=logger)

    try:
        series = chart_use_case.execute(from_date, to_date)
    except InvalidDateRangeError as exc:
        logger.error(str(exc))
        print(f"Invalid date range: {exc}")
        return
    stats = stats_use_case.execute(today=today)

    print(f"Net worth statistics (currency={settings.default_currency})")
    print(
        f"YTD change: {stats.ytd_change} ({stats.ytd_change_percent}%), "
        f"1Y return: {stats.one_year_return} "
        f"({stats.one_year_return_percent}%)"
    )
    print(
        f"All-time high: {stats.all_time_high} "
        f"on {stats.all_time_high_date.isoformat()}, "
        f"average change: {stats.monthly_avg_change}"
    )
    print(f"Series ({len(series)} points)")
    for point in series:
        print(
            f"{point.date.isoformat()}: assets={point.assets}, "
            f"liabilities={point.liabilities}, net_worth={point.net_worth}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
