"""User-facing interface adapters."""

__all__: list[str] = []
