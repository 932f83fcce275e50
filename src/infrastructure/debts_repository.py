"""SQLAlchemy-backed repository for debts."""

from datetime import datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.debts_repository import DebtsRepositoryPort
from src.domain.models import Debt
from src.infrastructure.row_mappers import DEBT_COLUMNS, row_to_debt
from src.infrastructure.store_errors import translate_store_errors
from src.utils.decimal_utils import optional_to_cents, to_cents
from src.utils.time_utils import to_storage_instant


INSERT_DEBT_SQL = text(
    """
    INSERT INTO debts (
        id, user_id, debt_type_id, name, balance_cents, original_amount_cents,
        interest_rate, monthly_payment_cents, start_date, due_date, notes,
        created_at, updated_at
    )
    VALUES (
        :id, :user_id, :debt_type_id, :name, :balance_cents,
        :original_amount_cents, :interest_rate, :monthly_payment_cents,
        :start_date, :due_date, :notes, :created_at, :updated_at
    )
    """
)

DELETE_DEBT_SQL = text(
    "DELETE FROM debts WHERE id = :debt_id AND user_id = :owner_id"
)


def _optional_iso(value):
    return value.isoformat() if value is not None else None


def _optional_text(value):
    return str(value) if value is not None else None


_DEBT_COLUMNS_BY_FIELD = {
    "debt_type_id": ("debt_type_id", lambda value: value),
    "name": ("name", lambda value: value),
    "balance": ("balance_cents", to_cents),
    "original_amount": ("original_amount_cents", optional_to_cents),
    "interest_rate": ("interest_rate", _optional_text),
    "monthly_payment": ("monthly_payment_cents", optional_to_cents),
    "start_date": ("start_date", _optional_iso),
    "due_date": ("due_date", _optional_iso),
    "notes": ("notes", lambda value: value),
}


class SqlAlchemyDebtsRepository(DebtsRepositoryPort):
    """Repository backed by SQLAlchemy for debts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_debt(self, owner_id: str, debt_id: str) -> Debt | None:
        query = text(
            f"""
            SELECT {DEBT_COLUMNS}
            FROM debts
            WHERE id = :debt_id AND user_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("reading a debt"):
            with engine.connect() as conn:
                row = conn.execute(
                    query, {"debt_id": debt_id, "owner_id": owner_id}
                ).first()
        return row_to_debt(row) if row else None

    def fetch_debts(self, owner_id: str) -> list[Debt]:
        query = text(
            f"""
            SELECT {DEBT_COLUMNS}
            FROM debts
            WHERE user_id = :owner_id
            ORDER BY balance_cents DESC, name, id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("listing debts"):
            with engine.connect() as conn:
                rows = conn.execute(query, {"owner_id": owner_id}).all()
        return [row_to_debt(row) for row in rows]

    def insert_debt(self, debt: Debt) -> None:
        payload = {
            "id": debt.id,
            "user_id": debt.owner_id,
            "debt_type_id": debt.debt_type_id,
            "name": debt.name,
            "balance_cents": to_cents(debt.balance),
            "original_amount_cents": optional_to_cents(debt.original_amount),
            "interest_rate": _optional_text(debt.interest_rate),
            "monthly_payment_cents": optional_to_cents(debt.monthly_payment),
            "start_date": _optional_iso(debt.start_date),
            "due_date": _optional_iso(debt.due_date),
            "notes": debt.notes,
            "created_at": to_storage_instant(debt.created_at),
            "updated_at": to_storage_instant(debt.updated_at),
        }
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("creating a debt"):
            with engine.begin() as conn:
                conn.execute(INSERT_DEBT_SQL, payload)

    def update_debt(
        self,
        owner_id: str,
        debt_id: str,
        fields: dict[str, object],
        updated_at: datetime,
    ) -> Debt | None:
        """Update the provided fields of a debt.

        Args:
            owner_id: Owner of the debt.
            debt_id: Debt to update.
            fields: Field names of DebtChanges mapped to values.
            updated_at: Timestamp of the edit.

        Returns:
            Debt | None: Updated debt, or None when it does not exist.
        """
        assignments = ["updated_at = :updated_at"]
        params: dict[str, object] = {
            "debt_id": debt_id,
            "owner_id": owner_id,
            "updated_at": to_storage_instant(updated_at),
        }
        for field_name, value in fields.items():
            column, convert = _DEBT_COLUMNS_BY_FIELD[field_name]
            assignments.append(f"{column} = :{column}")
            params[column] = convert(value)
        query = text(
            f"""
            UPDATE debts
            SET {", ".join(assignments)}
            WHERE id = :debt_id AND user_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("updating a debt"):
            with engine.begin() as conn:
                result = conn.execute(query, params)
        if result.rowcount != 1:
            return None
        return self.fetch_debt(owner_id, debt_id)

    def delete_debt(self, owner_id: str, debt_id: str) -> Debt | None:
        existing = self.fetch_debt(owner_id, debt_id)
        if existing is None:
            return None
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("deleting a debt"):
            with engine.begin() as conn:
                conn.execute(
                    DELETE_DEBT_SQL,
                    {"debt_id": debt_id, "owner_id": owner_id},
                )
        return existing


__all__ = ["SqlAlchemyDebtsRepository"]
