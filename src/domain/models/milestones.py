"""Domain models for chart milestones."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Milestone:
    """A dated label shown on the net worth chart."""

    id: str
    date: date
    label: str
    account_id: str | None = None
    created_at: str = ""


__all__ = ["Milestone"]
