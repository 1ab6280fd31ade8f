"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger adapters.

    Attributes:
        table_prefix: Prefix shared by every ledger table name.
        year_start: Month (1-12) the reporting period starts in.
        code_assignment_retries: Attempts made to save an account when its
            computed code collides with a stored one.
    """

    table_prefix: str = "ifrs_"
    year_start: int = 1
    code_assignment_retries: int = 3

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        table_prefix = os.getenv("LEDGER_TABLE_PREFIX", "ifrs_").strip()
        year_start = cls._read_int(
            "LEDGER_YEAR_START",
            default=1,
            logger=logger,
        )
        if not 1 <= year_start <= 12:
            logger.warning(
                f"LEDGER_YEAR_START={year_start} is not a month, using 1"
            )
            year_start = 1
        retries = cls._read_int(
            "LEDGER_CODE_RETRIES",
            default=3,
            logger=logger,
        )
        return cls(
            table_prefix=table_prefix,
            year_start=year_start,
            code_assignment_retries=max(retries, 1),
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read an integer environment variable.

        Args:
            name: Name of the environment variable.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: {raw!r}")
            return default


__all__ = ["LedgerSettings"]
