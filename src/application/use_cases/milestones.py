"""Use cases for chart milestones."""

from datetime import date

from src.application.ports.milestones_repository import (
    MilestonesRepositoryPort,
)
from src.domain.models import Milestone
from src.domain.services import (
    normalize_label,
    parse_calendar_date,
    validate_date_range,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import new_id, utc_timestamp


class AddMilestoneUseCase:
    """Attach a dated label to the net worth timeline."""

    def __init__(
        self,
        milestones_repository: MilestonesRepositoryPort,
        logger=None,
    ) -> None:
        self._milestones_repository = milestones_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        milestone_date: date | str,
        label: str,
        account_id: str | None = None,
    ) -> Milestone:
        """Create a milestone.

        Raises:
            ValueError: If the label is blank.
        """
        cleaned = normalize_label(label)
        if cleaned is None:
            raise ValueError("Milestone label must not be blank")
        milestone = Milestone(
            id=new_id(),
            date=parse_calendar_date(milestone_date),
            label=cleaned,
            account_id=account_id,
            created_at=utc_timestamp(),
        )
        self._milestones_repository.insert_milestone(milestone)
        self._logger.info(
            f"Milestone added: date={milestone.date.isoformat()}, "
            f"label={cleaned}"
        )
        return milestone


class GetMilestonesUseCase:
    """List milestones falling inside a date range."""

    def __init__(self, milestones_repository: MilestonesRepositoryPort) -> None:
        self._milestones_repository = milestones_repository

    def execute(
        self,
        from_date: date | str,
        to_date: date | str,
    ) -> list[Milestone]:
        start = parse_calendar_date(from_date, "from_date")
        end = parse_calendar_date(to_date, "to_date")
        validate_date_range(start, end)
        return self._milestones_repository.list_milestones(start, end)


class DeleteMilestoneUseCase:
    """Remove a milestone."""

    def __init__(
        self,
        milestones_repository: MilestonesRepositoryPort,
        logger=None,
    ) -> None:
        self._milestones_repository = milestones_repository
        self._logger = logger or get_app_logger()

    def execute(self, milestone_id: str) -> None:
        self._milestones_repository.delete_milestone(milestone_id)
        self._logger.info(f"Milestone deleted: id={milestone_id}")


__all__ = [
    "AddMilestoneUseCase",
    "GetMilestonesUseCase",
    "DeleteMilestoneUseCase",
]
