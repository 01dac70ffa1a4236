"""Domain models for balance snapshots."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class BalanceEntry:
    """A balance observed for one account on one calendar date."""

    id: str
    account_id: str
    date: date
    balance: Decimal
    notes: str | None = None
    created_at: str = ""


@dataclass(frozen=True)
class BalancePoint:
    """Date and balance pair used by the time-series reconstruction."""

    date: date
    balance: Decimal


@dataclass(frozen=True)
class AccountHistory:
    """Full ascending balance history of one active account.

    Attributes:
        account_id: Owning account identifier.
        category: ``asset`` or ``liability``.
        entries: Balance points sorted ascending by date.
    """

    account_id: str
    category: str
    entries: list[BalancePoint] = field(default_factory=list)


__all__ = ["BalanceEntry", "BalancePoint", "AccountHistory"]
