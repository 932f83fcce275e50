"""SQLAlchemy-backed repository for asset accounts."""

from datetime import datetime

from sqlalchemy import text

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import Account
from src.infrastructure.row_mappers import ACCOUNT_COLUMNS, row_to_account
from src.infrastructure.store_errors import translate_store_errors
from src.utils.decimal_utils import optional_to_cents, to_cents
from src.utils.time_utils import to_storage_instant


INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (
        id, user_id, category, account_type_id, name, current_value_cents,
        opening_value_cents, purchase_value_cents, purchase_date, description,
        bank_name, account_number, ticker, notes, version, created_at,
        updated_at
    )
    VALUES (
        :id, :user_id, :category, :account_type_id, :name,
        :current_value_cents, :opening_value_cents, :purchase_value_cents,
        :purchase_date, :description, :bank_name, :account_number, :ticker,
        :notes, :version, :created_at, :updated_at
    )
    """
)

COUNT_ACCOUNT_TRANSACTIONS_SQL = text(
    """
    SELECT COUNT(*) AS total
    FROM transactions
    WHERE account_id = :account_id AND user_id = :owner_id
    """
)

DELETE_ACCOUNT_SQL = text(
    "DELETE FROM accounts WHERE id = :account_id AND user_id = :owner_id"
)

# Descriptive fields only: current_value is owned by the ledger.
_DETAIL_COLUMNS = {
    "name": ("name", lambda value: value),
    "purchase_value": ("purchase_value_cents", optional_to_cents),
    "purchase_date": ("purchase_date", lambda value: value.isoformat()),
    "description": ("description", lambda value: value),
    "bank_name": ("bank_name", lambda value: value),
    "account_number": ("account_number", lambda value: value),
    "ticker": ("ticker", lambda value: value),
    "notes": ("notes", lambda value: value),
}


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for asset accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_account(self, owner_id: str, account_id: str) -> Account | None:
        query = text(
            f"""
            SELECT {ACCOUNT_COLUMNS}
            FROM accounts
            WHERE id = :account_id AND user_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("reading an account"):
            with engine.connect() as conn:
                row = conn.execute(
                    query,
                    {"account_id": account_id, "owner_id": owner_id},
                ).first()
        return row_to_account(row) if row else None

    def fetch_accounts(
        self,
        owner_id: str,
        category: str | None = None,
    ) -> list[Account]:
        """Return the owner's accounts, highest current value first."""
        base_sql = f"""
        SELECT {ACCOUNT_COLUMNS}
        FROM accounts
        WHERE user_id = :owner_id
        """
        params: dict[str, str] = {"owner_id": owner_id}
        if category:
            base_sql += " AND category = :category"
            params["category"] = category
        base_sql += " ORDER BY current_value_cents DESC, name, id"
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("listing accounts"):
            with engine.connect() as conn:
                rows = conn.execute(text(base_sql), params).all()
        return [row_to_account(row) for row in rows]

    def insert_account(self, account: Account) -> None:
        payload = {
            "id": account.id,
            "user_id": account.owner_id,
            "category": account.category,
            "account_type_id": account.account_type_id,
            "name": account.name,
            "current_value_cents": to_cents(account.current_value),
            "opening_value_cents": to_cents(account.opening_value),
            "purchase_value_cents": optional_to_cents(account.purchase_value),
            "purchase_date": (
                account.purchase_date.isoformat()
                if account.purchase_date
                else None
            ),
            "description": account.description,
            "bank_name": account.bank_name,
            "account_number": account.account_number,
            "ticker": account.ticker,
            "notes": account.notes,
            "version": account.version,
            "created_at": to_storage_instant(account.created_at),
            "updated_at": to_storage_instant(account.updated_at),
        }
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("creating an account"):
            with engine.begin() as conn:
                conn.execute(INSERT_ACCOUNT_SQL, payload)

    def update_account_details(
        self,
        owner_id: str,
        account_id: str,
        fields: dict[str, object],
        updated_at: datetime,
    ) -> Account | None:
        """Update descriptive fields and return the new state.

        Args:
            owner_id: Owner of the account.
            account_id: Account to update.
            fields: Field names of AccountDetailsUpdate mapped to values.
            updated_at: Timestamp of the edit.

        Returns:
            Account | None: Updated account, or None when it does not exist.
        """
        assignments = ["updated_at = :updated_at"]
        params: dict[str, object] = {
            "account_id": account_id,
            "owner_id": owner_id,
            "updated_at": to_storage_instant(updated_at),
        }
        for field_name, value in fields.items():
            column, convert = _DETAIL_COLUMNS[field_name]
            assignments.append(f"{column} = :{column}")
            params[column] = convert(value)
        query = text(
            f"""
            UPDATE accounts
            SET {", ".join(assignments)}
            WHERE id = :account_id AND user_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("updating an account"):
            with engine.begin() as conn:
                result = conn.execute(query, params)
        if result.rowcount != 1:
            return None
        return self.fetch_account(owner_id, account_id)

    def count_transactions(self, owner_id: str, account_id: str) -> int:
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("counting account transactions"):
            with engine.connect() as conn:
                row = conn.execute(
                    COUNT_ACCOUNT_TRANSACTIONS_SQL,
                    {"account_id": account_id, "owner_id": owner_id},
                ).first()
        return int(row.total) if row else 0

    def delete_account(self, owner_id: str, account_id: str) -> Account | None:
        existing = self.fetch_account(owner_id, account_id)
        if existing is None:
            return None
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("deleting an account"):
            with engine.begin() as conn:
                conn.execute(
                    DELETE_ACCOUNT_SQL,
                    {"account_id": account_id, "owner_id": owner_id},
                )
        return existing


__all__ = ["SqlAlchemyAccountsRepository"]
