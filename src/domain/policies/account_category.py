"""Classification of account types into asset or liability categories."""

from src.domain.constants import (
    ASSET_ACCOUNT_TYPES,
    ASSET_CATEGORY,
    LIABILITY_ACCOUNT_TYPES,
    LIABILITY_CATEGORY,
)

_CATEGORY_BY_TYPE = {
    **{account_type: ASSET_CATEGORY for account_type in ASSET_ACCOUNT_TYPES},
    **{
        account_type: LIABILITY_CATEGORY
        for account_type in LIABILITY_ACCOUNT_TYPES
    },
}

def category_for_type(account_type: str) -> str:
    """Return the category implied by an account type.

    Args:
        account_type: One of the supported account types.

    Returns:
        str: ``asset`` or ``liability``.

    Raises:
        ValueError: If the account type is not supported.
    """
    try:
        return _CATEGORY_BY_TYPE[account_type]
    except KeyError:
        raise ValueError(f"Unknown account type: {account_type}") from None


__all__ = ["category_for_type"]
