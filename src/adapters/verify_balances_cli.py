"""CLI adapter auditing account values against their transactions."""

from src.application.use_cases.verify_balances import VerifyBalancesUseCase
from src.infrastructure.container import (
    build_accounts_repository,
    build_analytics_repository,
    build_database_adapter,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def main() -> int:
    """Print the balance audit for LEDGER_OWNER_ID.

    Returns:
        int: 0 when every balance matches, 1 otherwise.
    """
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    if settings.owner_id is None:
        logger.error("LEDGER_OWNER_ID is required to verify balances.")
        return 1

    db_adapter = build_database_adapter()
    use_case = VerifyBalancesUseCase(
        accounts_repository=build_accounts_repository(db_adapter),
        analytics_repository=build_analytics_repository(db_adapter),
        logger=logger,
    )
    report = use_case.execute(settings.owner_id)

    print(f"Checked {report.checked_count} accounts for {settings.owner_id}")
    if report.is_consistent:
        print("All balances match their transactions.")
        return 0
    for item in report.discrepancies:
        print(
            f"- {item.name} ({item.account_id}): stored={item.stored_value}, "
            f"expected={item.expected_value}, difference={item.difference}"
        )
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
