"""Use case to rank a month's expense categories."""

from src.application.ports.analytics_repository import AnalyticsRepositoryPort
from src.domain.constants import TOP_CATEGORIES_LIMIT
from src.domain.models import CategorySpending
from src.domain.services import compute_top_categories, validate_month
from src.utils.time_utils import month_bounds


class GetTopCategoriesUseCase:
    """Return the expense categories with the highest totals in a month."""

    def __init__(
        self,
        analytics_repository: AnalyticsRepositoryPort,
        limit: int = TOP_CATEGORIES_LIMIT,
    ) -> None:
        self._analytics_repository = analytics_repository
        self._limit = limit

    def execute(
        self,
        owner_id: str,
        year: int,
        month: int,
    ) -> list[CategorySpending]:
        """Return at most ``limit`` categories, highest total first.

        Ties keep the order in which the label was first met in the
        newest-first listing.
        """
        validate_month(year, month)
        start, end = month_bounds(year, month)
        rows = self._analytics_repository.fetch_report_rows(owner_id, start, end)
        return compute_top_categories(rows, self._limit)


__all__ = ["GetTopCategoriesUseCase"]
