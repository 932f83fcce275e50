"""Use case to compute net worth from accounts and debts."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.debts_repository import DebtsRepositoryPort
from src.domain.models import NetWorthSummary
from src.domain.services import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute assets, liabilities and net worth for an owner."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        debts_repository: DebtsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port listing the owner's accounts.
            debts_repository: Port listing the owner's debts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._debts_repository = debts_repository
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str) -> NetWorthSummary:
        """Return the net worth summary.

        Args:
            owner_id: Owner whose accounts and debts are summed.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        accounts = self._accounts_repository.fetch_accounts(owner_id)
        debts = self._debts_repository.fetch_debts(owner_id)
        summary = compute_net_worth_summary(accounts, debts)
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase"]
