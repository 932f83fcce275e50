"""Use case to summarize the accounts of one asset category."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.constants import ASSET_CATEGORIES
from src.domain.models import AssetCategorySummary
from src.domain.services import compute_asset_category_summary, require_choice
from src.infrastructure.logging.logger import get_app_logger


class GetAssetCategorySummaryUseCase:
    """Compute count, value, purchase value and growth for a category."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port listing accounts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str, category: str) -> AssetCategorySummary:
        """Return the summary for one asset category.

        Args:
            owner_id: Owner of the accounts.
            category: liquid, non_liquid or investment.

        Returns:
            AssetCategorySummary: Totals over the category's accounts.
        """
        require_choice(category, ASSET_CATEGORIES, "category")
        accounts = self._accounts_repository.fetch_accounts(owner_id, category)
        summary = compute_asset_category_summary(category, accounts)
        self._logger.info(
            f"Asset category {category}: {summary.count} accounts, "
            f"total={summary.total_value}"
        )
        return summary


__all__ = ["GetAssetCategorySummaryUseCase"]
