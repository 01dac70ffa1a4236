"""Domain constants for the net worth tracker."""

from datetime import date

ASSET_CATEGORY = "asset"
LIABILITY_CATEGORY = "liability"

ASSET_ACCOUNT_TYPES = (
    "property",
    "pension",
    "investment",
    "savings",
)

LIABILITY_ACCOUNT_TYPES = (
    "mortgage",
    "loan",
    "credit_card",
)

ACCOUNT_TYPES = ASSET_ACCOUNT_TYPES + LIABILITY_ACCOUNT_TYPES

ACCOUNT_TYPE_LABELS = {
    "property": "Property",
    "pension": "Pension",
    "investment": "Investment",
    "savings": "Savings",
    "mortgage": "Mortgage",
    "loan": "Loan",
    "credit_card": "Credit Card",
}

DEFAULT_CURRENCY = "GBP"

# Earliest date considered when reconstructing the full history.
DEFAULT_HISTORY_START = date(2000, 1, 1)


__all__ = [
    "ASSET_CATEGORY",
    "LIABILITY_CATEGORY",
    "ASSET_ACCOUNT_TYPES",
    "LIABILITY_ACCOUNT_TYPES",
    "ACCOUNT_TYPES",
    "ACCOUNT_TYPE_LABELS",
    "DEFAULT_CURRENCY",
    "DEFAULT_HISTORY_START",
]
