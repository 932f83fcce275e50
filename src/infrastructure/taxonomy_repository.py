"""SQLAlchemy-backed repository for taxonomy entries.

Account types, debt types and transaction categories share one shape, so
a single repository serves all three. ``_TABLES`` maps a taxonomy name to
its table, the column exposed as the entry group, the icon column and the
table/column that references it.
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.taxonomy_repository import TaxonomyRepositoryPort
from src.domain.errors import ValidationError
from src.domain.models import TaxonomyEntry
from src.infrastructure.row_mappers import row_to_taxonomy_entry
from src.infrastructure.store_errors import translate_store_errors
from src.utils.time_utils import to_storage_instant


@dataclass(frozen=True)
class _TaxonomyTable:
    table: str
    group_column: str | None
    has_icon: bool
    usage_table: str
    usage_column: str

    def select_columns(self) -> str:
        group = f"{self.group_column} AS grp" if self.group_column else "NULL AS grp"
        icon = "icon" if self.has_icon else "NULL AS icon"
        return (
            f"id, user_id, {group}, {icon}, label, is_system, "
            "created_at, updated_at"
        )

    def order_by(self) -> str:
        if self.group_column:
            return f"{self.group_column}, created_at, id"
        return "created_at, id"


_TABLES = {
    "account_type": _TaxonomyTable(
        table="account_types",
        group_column="category",
        has_icon=True,
        usage_table="accounts",
        usage_column="account_type_id",
    ),
    "debt_type": _TaxonomyTable(
        table="debt_types",
        group_column=None,
        has_icon=True,
        usage_table="debts",
        usage_column="debt_type_id",
    ),
    "transaction_category": _TaxonomyTable(
        table="transaction_categories",
        group_column="kind",
        has_icon=False,
        usage_table="transactions",
        usage_column="category_id",
    ),
}


def _table_for(taxonomy: str) -> _TaxonomyTable:
    try:
        return _TABLES[taxonomy]
    except KeyError:
        raise ValidationError(f"Unknown taxonomy: {taxonomy}") from None


class SqlAlchemyTaxonomyRepository(TaxonomyRepositoryPort):
    """Repository backed by SQLAlchemy for taxonomy entries."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_entries(self, taxonomy: str, owner_id: str) -> list[TaxonomyEntry]:
        table_info = _table_for(taxonomy)
        query = text(
            f"""
            SELECT {table_info.select_columns()}
            FROM {table_info.table}
            WHERE user_id = :owner_id
            ORDER BY {table_info.order_by()}
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors(f"listing {table_info.table}"):
            with engine.connect() as conn:
                rows = conn.execute(query, {"owner_id": owner_id}).all()
        return [row_to_taxonomy_entry(row, taxonomy) for row in rows]

    def fetch_entry(
        self,
        taxonomy: str,
        owner_id: str,
        entry_id: str,
    ) -> TaxonomyEntry | None:
        table_info = _table_for(taxonomy)
        query = text(
            f"""
            SELECT {table_info.select_columns()}
            FROM {table_info.table}
            WHERE id = :entry_id AND user_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors(f"reading {table_info.table}"):
            with engine.connect() as conn:
                row = conn.execute(
                    query, {"entry_id": entry_id, "owner_id": owner_id}
                ).first()
        return row_to_taxonomy_entry(row, taxonomy) if row else None

    def insert_entries(self, entries: list[TaxonomyEntry]) -> int:
        """Insert entries of a single taxonomy.

        Args:
            entries: Entries to insert; all must share one taxonomy.

        Returns:
            int: Number of inserted rows.
        """
        if not entries:
            return 0
        table_info = _table_for(entries[0].taxonomy)
        columns = ["id", "user_id", "label", "is_system", "created_at", "updated_at"]
        if table_info.group_column:
            columns.append(table_info.group_column)
        if table_info.has_icon:
            columns.append("icon")
        query = text(
            f"""
            INSERT INTO {table_info.table} ({", ".join(columns)})
            VALUES ({", ".join(f":{column}" for column in columns)})
            """
        )
        payload = []
        for entry in entries:
            row = {
                "id": entry.id,
                "user_id": entry.owner_id,
                "label": entry.label,
                "is_system": entry.is_system,
                "created_at": to_storage_instant(entry.created_at),
                "updated_at": to_storage_instant(entry.updated_at),
            }
            if table_info.group_column:
                row[table_info.group_column] = entry.group
            if table_info.has_icon:
                row["icon"] = entry.icon
            payload.append(row)
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors(f"inserting {table_info.table}"):
            with engine.begin() as conn:
                conn.execute(query, payload)
        return len(payload)

    def update_entry(
        self,
        taxonomy: str,
        owner_id: str,
        entry_id: str,
        fields: dict[str, object],
        updated_at: datetime,
    ) -> TaxonomyEntry | None:
        table_info = _table_for(taxonomy)
        allowed = {"label"}
        if table_info.has_icon:
            allowed.add("icon")
        assignments = ["updated_at = :updated_at"]
        params: dict[str, object] = {
            "entry_id": entry_id,
            "owner_id": owner_id,
            "updated_at": to_storage_instant(updated_at),
        }
        for name, value in fields.items():
            if name not in allowed:
                raise ValidationError(f"{name} cannot be edited on {taxonomy}")
            assignments.append(f"{name} = :{name}")
            params[name] = value
        query = text(
            f"""
            UPDATE {table_info.table}
            SET {", ".join(assignments)}
            WHERE id = :entry_id AND user_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors(f"updating {table_info.table}"):
            with engine.begin() as conn:
                result = conn.execute(query, params)
        if result.rowcount != 1:
            return None
        return self.fetch_entry(taxonomy, owner_id, entry_id)

    def count_usages(self, taxonomy: str, owner_id: str, entry_id: str) -> int:
        table_info = _table_for(taxonomy)
        query = text(
            f"""
            SELECT COUNT(*) AS total
            FROM {table_info.usage_table}
            WHERE {table_info.usage_column} = :entry_id AND user_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors(f"counting {table_info.table} usages"):
            with engine.connect() as conn:
                row = conn.execute(
                    query, {"entry_id": entry_id, "owner_id": owner_id}
                ).first()
        return int(row.total) if row else 0

    def delete_entry(
        self,
        taxonomy: str,
        owner_id: str,
        entry_id: str,
    ) -> TaxonomyEntry | None:
        existing = self.fetch_entry(taxonomy, owner_id, entry_id)
        if existing is None or existing.is_system:
            return None
        table_info = _table_for(taxonomy)
        query = text(
            f"""
            DELETE FROM {table_info.table}
            WHERE id = :entry_id AND user_id = :owner_id AND is_system = :is_system
            """
        )
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors(f"deleting {table_info.table}"):
            with engine.begin() as conn:
                conn.execute(
                    query,
                    {"entry_id": entry_id, "owner_id": owner_id, "is_system": False},
                )
        return existing


__all__ = ["SqlAlchemyTaxonomyRepository"]
