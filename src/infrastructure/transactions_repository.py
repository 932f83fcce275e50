"""SQLAlchemy-backed read repository for transactions."""

from datetime import datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import Transaction
from src.infrastructure.row_mappers import TRANSACTION_COLUMNS, row_to_transaction
from src.infrastructure.store_errors import translate_store_errors
from src.utils.time_utils import to_storage_instant


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy for transaction listings."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_transactions(
        self,
        owner_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Transaction]:
        """Return the owner's transactions, newest first.

        Args:
            owner_id: Owner whose transactions are listed.
            start: Inclusive lower bound on the transaction date.
            end: Exclusive upper bound on the transaction date.

        Returns:
            list[Transaction]: Matching transactions.
        """
        base_sql = f"""
        SELECT {TRANSACTION_COLUMNS}
        FROM transactions
        WHERE user_id = :owner_id
        """
        params: dict[str, str] = {"owner_id": owner_id}
        if start is not None:
            base_sql += " AND transaction_date >= :start"
            params["start"] = to_storage_instant(start)
        if end is not None:
            base_sql += " AND transaction_date < :end"
            params["end"] = to_storage_instant(end)
        base_sql += " ORDER BY transaction_date DESC, created_at DESC, id"
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("listing transactions"):
            with engine.connect() as conn:
                rows = conn.execute(text(base_sql), params).all()
        return [row_to_transaction(row) for row in rows]


__all__ = ["SqlAlchemyTransactionsRepository"]
