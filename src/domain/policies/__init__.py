"""Domain policies package."""

from .account_category import category_for_type

__all__ = ["category_for_type"]
