"""Port for chart milestones."""

from datetime import date
from typing import Protocol

from src.domain.models import Milestone


class MilestonesRepositoryPort(Protocol):
    """Port exposing dated milestone labels."""

    def insert_milestone(self, milestone: Milestone) -> None:
        """Persist a milestone."""

    def list_milestones(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[Milestone]:
        """Return milestones ascending by date."""

    def delete_milestone(self, milestone_id: str) -> None:
        """Delete one milestone."""


__all__ = ["MilestonesRepositoryPort"]
