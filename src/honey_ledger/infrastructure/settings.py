"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from honey_ledger.infrastructure.logging.logger import get_app_logger
from honey_ledger.utils.utils import get_project_root

DEFAULT_KEY_PREFIX = "honey-"
DEFAULT_CURRENCY_SYMBOL = "€"
DEFAULT_RECENT_LIMIT = 5


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for storage and presentation.

    Attributes:
        db_url: SQLAlchemy URL of the record store database.
        key_prefix: Namespace prepended to every collection key.
        currency_symbol: Symbol used when formatting amounts.
        recent_limit: Number of entries in activity feeds.
    """

    db_url: str
    key_prefix: str = DEFAULT_KEY_PREFIX
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    recent_limit: int = DEFAULT_RECENT_LIMIT

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and a ``.env`` file.

        Returns:
            LedgerSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("LEDGER_DB_URL", "").strip() or cls._default_db_url()
        key_prefix = os.getenv("LEDGER_KEY_PREFIX", DEFAULT_KEY_PREFIX)
        currency_symbol = (
            os.getenv("LEDGER_CURRENCY_SYMBOL", "").strip()
            or DEFAULT_CURRENCY_SYMBOL
        )
        recent_limit = cls._parse_positive_int(
            os.getenv("LEDGER_RECENT_LIMIT"),
            DEFAULT_RECENT_LIMIT,
            "LEDGER_RECENT_LIMIT",
            logger,
        )
        return cls(
            db_url=db_url,
            key_prefix=key_prefix,
            currency_symbol=currency_symbol,
            recent_limit=recent_limit,
        )

    @staticmethod
    def _default_db_url() -> str:
        """Return a SQLite URL under ``<project root>/data``."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'ledger.db'}"

    @staticmethod
    def _parse_positive_int(
        raw_value: str | None,
        default: int,
        name: str,
        logger,
    ) -> int:
        if not raw_value:
            return default
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(f"Invalid {name}={raw_value!r}, using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive, using {default}")
            return default
        return value


__all__ = ["LedgerSettings"]
