"""Use case to summarize an owner's debts."""

from src.application.ports.debts_repository import DebtsRepositoryPort
from src.domain.models import DebtSummary
from src.domain.services import compute_debt_summary


class GetDebtSummaryUseCase:
    """Aggregate debt balances and payoff progress."""

    def __init__(self, debts_repository: DebtsRepositoryPort) -> None:
        self._debts_repository = debts_repository

    def execute(self, owner_id: str) -> DebtSummary:
        return compute_debt_summary(self._debts_repository.fetch_debts(owner_id))


__all__ = ["GetDebtSummaryUseCase"]
