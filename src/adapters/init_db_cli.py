"""CLI adapter to create the ledger schema and seed default taxonomies.

This module wires ensure_schema and the SeedDefaultsUseCase to the
concrete database adapter. Seeding runs only when LEDGER_OWNER_ID is set.
"""

from src.application.use_cases.seed_defaults import SeedDefaultsUseCase
from src.infrastructure.container import (
    build_database_adapter,
    build_taxonomy_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema
from src.infrastructure.settings import LedgerSettings


def main() -> None:
    """Create tables and seed defaults for the configured owner."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    ensure_schema(db_adapter)
    print("Ledger schema is up to date.")

    settings = LedgerSettings.from_env()
    if settings.owner_id is None:
        logger.warning("LEDGER_OWNER_ID is not set; skipping default seeding.")
        return

    use_case = SeedDefaultsUseCase(
        build_taxonomy_repository(db_adapter),
        logger=logger,
    )
    result = use_case.run(settings.owner_id)
    print(
        f"Seeded {result.account_types} account types, "
        f"{result.debt_types} debt types and "
        f"{result.transaction_categories} transaction categories "
        f"for owner {settings.owner_id}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
