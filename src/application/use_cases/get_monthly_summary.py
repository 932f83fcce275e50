"""Use case to compute monthly income and expense totals."""

from src.application.ports.analytics_repository import AnalyticsRepositoryPort
from src.domain.models import MonthlySummary
from src.domain.services import compute_monthly_summary, validate_month
from src.infrastructure.logging.logger import get_app_logger
from src.utils.time_utils import month_bounds


class GetMonthlySummaryUseCase:
    """Sum a month's income and expense, leaving transfers out.

    Transfers are stored as ordinary expense/income pairs, so they are
    recognized by the kind of their category rather than by type.
    """

    def __init__(
        self,
        analytics_repository: AnalyticsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            analytics_repository: Port providing report rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._analytics_repository = analytics_repository
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str, year: int, month: int) -> MonthlySummary:
        """Return income and expense totals for the month.

        Args:
            owner_id: Owner whose transactions are summed.
            year: Calendar year.
            month: Calendar month (1-12).

        Returns:
            MonthlySummary: Totals for the UTC calendar month.
        """
        validate_month(year, month)
        start, end = month_bounds(year, month)
        rows = self._analytics_repository.fetch_report_rows(owner_id, start, end)
        self._logger.info(
            f"Fetched {len(rows)} report rows for {year}-{month:02d}"
        )
        return compute_monthly_summary(rows, year, month)


__all__ = ["GetMonthlySummaryUseCase"]
