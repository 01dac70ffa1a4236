"""CLI adapter to create or upgrade the local tracker database.

This module wires the schema migrations to the concrete database adapter
and provides a simple command-line entry point for running them.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import apply_migrations


def main() -> None:
    """Apply pending schema migrations."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()

    applied = apply_migrations(db_adapter, logger=logger)

    if applied:
        print(
            f"Applied {len(applied)} migrations "
            f"(versions {', '.join(str(version) for version in applied)})."
        )
    else:
        print("Database schema is up to date.")


if __name__ == "__main__":  # pragma: no cover
    main()
