"""SQLAlchemy implementation of the ledger's atomic unit.

Each ``atomic()`` block maps onto one ``engine.begin()`` transaction.
Account balance writes and transaction row edits are compare-and-swap on
an integer ``version`` column, so a unit that read stale data fails with
ConflictError instead of overwriting a concurrent change.
"""

from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Iterator

from sqlalchemy import text
from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import (
    LedgerSessionPort,
    LedgerStorePort,
)
from src.domain.errors import ConflictError
from src.domain.models import Account, TaxonomyEntry, Transaction
from src.infrastructure.row_mappers import (
    ACCOUNT_COLUMNS,
    TRANSACTION_COLUMNS,
    row_to_account,
    row_to_taxonomy_entry,
    row_to_transaction,
)
from src.infrastructure.store_errors import translate_store_errors
from src.utils.decimal_utils import to_cents
from src.utils.time_utils import to_storage_instant


SELECT_ACCOUNT_SQL = text(
    f"""
    SELECT {ACCOUNT_COLUMNS}
    FROM accounts
    WHERE id = :account_id AND user_id = :owner_id
    """
)

SELECT_CATEGORY_SQL = text(
    """
    SELECT id, user_id, kind AS grp, NULL AS icon, label, is_system,
           created_at, updated_at
    FROM transaction_categories
    WHERE id = :category_id AND user_id = :owner_id
    """
)

SELECT_TRANSACTION_SQL = text(
    f"""
    SELECT {TRANSACTION_COLUMNS}
    FROM transactions
    WHERE id = :transaction_id AND user_id = :owner_id
    """
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        id, user_id, type, category_id, description, amount_cents,
        account_id, transaction_date, notes, version, created_at, updated_at
    )
    VALUES (
        :id, :user_id, :type, :category_id, :description, :amount_cents,
        :account_id, :transaction_date, :notes, :version, :created_at,
        :updated_at
    )
    """
)

UPDATE_TRANSACTION_SQL = text(
    """
    UPDATE transactions
    SET type = :type,
        category_id = :category_id,
        description = :description,
        amount_cents = :amount_cents,
        account_id = :account_id,
        transaction_date = :transaction_date,
        notes = :notes,
        version = version + 1,
        updated_at = :updated_at
    WHERE id = :id AND user_id = :user_id AND version = :expected_version
    """
)

DELETE_TRANSACTION_SQL = text(
    """
    DELETE FROM transactions
    WHERE id = :id AND user_id = :user_id AND version = :expected_version
    """
)

UPDATE_ACCOUNT_VALUE_SQL = text(
    """
    UPDATE accounts
    SET current_value_cents = :current_value_cents,
        version = version + 1,
        updated_at = :updated_at
    WHERE id = :id AND user_id = :user_id AND version = :expected_version
    """
)


def _transaction_params(transaction: Transaction) -> dict[str, object]:
    return {
        "id": transaction.id,
        "user_id": transaction.owner_id,
        "type": transaction.type,
        "category_id": transaction.category_id,
        "description": transaction.description,
        "amount_cents": to_cents(transaction.amount),
        "account_id": transaction.account_id,
        "transaction_date": to_storage_instant(transaction.transaction_date),
        "notes": transaction.notes,
        "version": transaction.version,
        "created_at": to_storage_instant(transaction.created_at),
        "updated_at": to_storage_instant(transaction.updated_at),
    }


class SqlAlchemyLedgerSession(LedgerSessionPort):
    """Ledger operations bound to one open database transaction."""

    def __init__(self, conn: Connection) -> None:
        """Initialize the session.

        Args:
            conn: Connection with an active transaction.
        """
        self._conn = conn

    def fetch_account(self, owner_id: str, account_id: str) -> Account | None:
        row = self._conn.execute(
            SELECT_ACCOUNT_SQL,
            {"account_id": account_id, "owner_id": owner_id},
        ).first()
        return row_to_account(row) if row else None

    def fetch_category(
        self,
        owner_id: str,
        category_id: str,
    ) -> TaxonomyEntry | None:
        row = self._conn.execute(
            SELECT_CATEGORY_SQL,
            {"category_id": category_id, "owner_id": owner_id},
        ).first()
        if not row:
            return None
        return row_to_taxonomy_entry(row, "transaction_category")

    def fetch_transaction(
        self,
        owner_id: str,
        transaction_id: str,
    ) -> Transaction | None:
        row = self._conn.execute(
            SELECT_TRANSACTION_SQL,
            {"transaction_id": transaction_id, "owner_id": owner_id},
        ).first()
        return row_to_transaction(row) if row else None

    def insert_transaction(self, transaction: Transaction) -> None:
        self._conn.execute(
            INSERT_TRANSACTION_SQL,
            _transaction_params(transaction),
        )

    def update_transaction(self, transaction: Transaction) -> Transaction:
        """Persist an edited transaction.

        Args:
            transaction: New state carrying the version that was read.

        Returns:
            Transaction: The stored state with its bumped version.

        Raises:
            ConflictError: If the row changed since it was read.
        """
        params = _transaction_params(transaction)
        params["expected_version"] = transaction.version
        result = self._conn.execute(UPDATE_TRANSACTION_SQL, params)
        if result.rowcount != 1:
            raise ConflictError(
                f"Transaction {transaction.id} changed concurrently"
            )
        return replace(transaction, version=transaction.version + 1)

    def delete_transaction(self, transaction: Transaction) -> None:
        result = self._conn.execute(
            DELETE_TRANSACTION_SQL,
            {
                "id": transaction.id,
                "user_id": transaction.owner_id,
                "expected_version": transaction.version,
            },
        )
        if result.rowcount != 1:
            raise ConflictError(
                f"Transaction {transaction.id} changed concurrently"
            )

    def write_account_value(
        self,
        account: Account,
        new_value: Decimal,
        updated_at: datetime,
    ) -> Account:
        """Write a new current value if the account is unchanged.

        Args:
            account: Account as read inside this unit.
            new_value: Value to store.
            updated_at: Timestamp of the write.

        Returns:
            Account: The stored state with its bumped version.

        Raises:
            ConflictError: If another unit wrote the account first.
        """
        result = self._conn.execute(
            UPDATE_ACCOUNT_VALUE_SQL,
            {
                "id": account.id,
                "user_id": account.owner_id,
                "current_value_cents": to_cents(new_value),
                "updated_at": to_storage_instant(updated_at),
                "expected_version": account.version,
            },
        )
        if result.rowcount != 1:
            raise ConflictError(f"Account {account.id} changed concurrently")
        return replace(
            account,
            current_value=new_value,
            version=account.version + 1,
            updated_at=updated_at,
        )


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store backed by SQLAlchemy transactions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    @contextmanager
    def atomic(self) -> Iterator[SqlAlchemyLedgerSession]:
        """Open one all-or-nothing unit.

        The block commits when it exits normally. Any exception, including
        business errors raised by the caller, rolls back every write made
        in the block before propagating.

        Yields:
            SqlAlchemyLedgerSession: Session bound to the open transaction.
        """
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("running a ledger unit"):
            with engine.begin() as conn:
                yield SqlAlchemyLedgerSession(conn)


__all__ = [
    "SqlAlchemyLedgerSession",
    "SqlAlchemyLedgerStore",
]
