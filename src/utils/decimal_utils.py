"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_CEILING, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_ceiling(value: Decimal, places: int = 0) -> Decimal:
    """Round a Decimal with ties going toward positive infinity.

    ``-2.5`` becomes ``-2`` and ``2.5`` becomes ``3``.

    Args:
        value: Amount to round.
        places: Number of decimal places to keep.

    Returns:
        Decimal: Rounded amount.
    """
    exponent = Decimal(1).scaleb(-places)
    return value.quantize(exponent, rounding=ROUND_HALF_CEILING)


__all__ = ["coerce_decimal", "round_half_ceiling"]
