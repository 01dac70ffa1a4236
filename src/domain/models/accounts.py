"""Domain models for tracked accounts."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.policies.account_category import category_for_type


@dataclass(frozen=True)
class Account:
    """An asset or liability account whose balance is tracked over time.

    The category is derived from ``account_type`` and cannot be set
    independently.
    """

    id: str
    name: str
    account_type: str
    institution: str | None = None
    description: str | None = None
    currency: str = DEFAULT_CURRENCY
    is_active: bool = True
    created_at: str = ""
    updated_at: str = ""

    def __post_init__(self) -> None:
        category_for_type(self.account_type)

    @property
    def category(self) -> str:
        """Return ``asset`` or ``liability`` for this account."""
        return category_for_type(self.account_type)


@dataclass(frozen=True)
class AccountWithBalance:
    """Account paired with its most recent recorded balance."""

    account: Account
    current_balance: Decimal
    balance_date: date | None


__all__ = ["Account", "AccountWithBalance"]
