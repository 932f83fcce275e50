"""Use case auditing stored account values against their transactions."""

from decimal import Decimal

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.analytics_repository import AnalyticsRepositoryPort
from src.domain.models import BalanceAuditReport, BalanceDiscrepancy
from src.domain.services import expected_balance
from src.infrastructure.logging.logger import get_app_logger


class VerifyBalancesUseCase:
    """Recompute every account value from its opening value and live rows.

    Reads run outside any atomic unit, so a discrepancy seen while writes
    are in flight should be confirmed by a second run.
    """

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        analytics_repository: AnalyticsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port listing accounts.
            analytics_repository: Port listing per-account effects.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._analytics_repository = analytics_repository
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str) -> BalanceAuditReport:
        """Return the audit report for one owner."""
        accounts = self._accounts_repository.fetch_accounts(owner_id)
        effects: dict[str, list[tuple[str, Decimal]]] = {}
        for account_id, transaction_type, amount in (
            self._analytics_repository.fetch_account_effects(owner_id)
        ):
            effects.setdefault(account_id, []).append((transaction_type, amount))

        discrepancies = []
        for account in accounts:
            expected = expected_balance(
                account.opening_value,
                effects.get(account.id, []),
            )
            if expected != account.current_value:
                discrepancies.append(
                    BalanceDiscrepancy(
                        account_id=account.id,
                        name=account.name,
                        stored_value=account.current_value,
                        expected_value=expected,
                    )
                )
                self._logger.error(
                    f"Balance mismatch for account={account.name}: "
                    f"stored={account.current_value}, expected={expected}"
                )

        self._logger.info(
            f"Verified {len(accounts)} accounts, "
            f"{len(discrepancies)} discrepancies"
        )
        return BalanceAuditReport(
            checked_count=len(accounts),
            discrepancies=discrepancies,
        )


__all__ = ["VerifyBalancesUseCase"]
