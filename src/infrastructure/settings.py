"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

import dotenv

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_HISTORY_START
from src.domain.services import normalize_currency
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class AppSettings:
    """Settings for the local tracker.

    Attributes:
        database_url: Explicit SQLAlchemy URL, overriding database_path.
        database_path: SQLite file holding accounts and balances.
        default_currency: Currency applied to new accounts.
        history_start: Earliest date of the full history reconstruction.
    """

    database_url: str | None = None
    database_path: Path | None = None
    default_currency: str = DEFAULT_CURRENCY
    history_start: date = DEFAULT_HISTORY_START

    @property
    def resolved_database_url(self) -> str:
        """Return the SQLAlchemy URL for the configured store."""
        if self.database_url:
            return self.database_url
        path = self.database_path or self._default_database_path()
        return f"sqlite:///{path}"

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_url = os.getenv("NETWORTH_DB_URL", "").strip()
        raw_path = os.getenv("NETWORTH_DB_PATH", "").strip()
        database_path = (
            cls._normalize_path(raw_path, logger=logger)
            if raw_path
            else cls._default_database_path()
        )
        return cls(
            database_url=raw_url or None,
            database_path=database_path,
            default_currency=normalize_currency(
                os.getenv("NETWORTH_DEFAULT_CURRENCY")
            ),
            history_start=cls._parse_history_start(
                os.getenv("NETWORTH_HISTORY_START"),
                logger=logger,
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the database file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.parent.exists():
            logger.warning(
                f"Database directory does not exist yet at {path.parent}"
            )
        return path

    @staticmethod
    def _default_database_path() -> Path:
        return get_project_root() / "data" / "networth.db"

    @staticmethod
    def _parse_history_start(raw_value: str | None, logger) -> date:
        if not raw_value:
            return DEFAULT_HISTORY_START
        try:
            return date.fromisoformat(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid NETWORTH_HISTORY_START '{raw_value}'. "
                "Expected format YYYY-MM-DD."
            )
            return DEFAULT_HISTORY_START


__all__ = ["AppSettings"]
