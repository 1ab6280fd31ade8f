"""Simple CLI to validate the ledger database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the ledger database and its tables.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings

LEDGER_TABLES = (
    "accounts",
    "categories",
    "balances",
    "exchange_rates",
    "ledgers",
    "reporting_periods",
    "transactions",
)


def main() -> None:
    """Run connectivity checks against the configured ledger database."""
    adapter = build_database_adapter()
    logger = get_app_logger()
    settings = LedgerSettings.from_env()

    engine = adapter.get_ledger_engine()
    logger.info(f"Ledger DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
        for table in LEDGER_TABLES:
            conn.exec_driver_sql(
                f"SELECT 1 FROM {settings.table_prefix}{table} LIMIT 1"
            )

    logger.info(
        f"Connection is working, {len(LEDGER_TABLES)} ledger tables found."
    )


if __name__ == "__main__":
    main()
