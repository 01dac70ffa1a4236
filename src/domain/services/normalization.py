"""Domain normalization helpers."""

from src.domain.constants import DEFAULT_CURRENCY


def normalize_currency(currency: str | None) -> str:
    """Normalize a currency code, defaulting to GBP.

    Args:
        currency: Raw currency code from a form or adapter.

    Returns:
        str: Upper-cased code.
    """
    if not currency:
        return DEFAULT_CURRENCY
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else DEFAULT_CURRENCY


def normalize_label(value: str | None) -> str | None:
    """Strip optional free-text labels, mapping blanks to None.

    Args:
        value: Raw label (institution, description, notes).

    Returns:
        str | None: Cleaned label.
    """
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


__all__ = ["normalize_currency", "normalize_label"]
