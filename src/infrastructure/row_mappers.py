"""Mapping of SQL rows onto domain models."""

from datetime import date

from src.domain.models import Account, Debt, TaxonomyEntry, Transaction
from src.utils.decimal_utils import (
    coerce_decimal,
    from_cents,
    optional_from_cents,
)
from src.utils.time_utils import from_storage_instant

ACCOUNT_COLUMNS = (
    "id, user_id, category, account_type_id, name, current_value_cents, "
    "opening_value_cents, purchase_value_cents, purchase_date, description, "
    "bank_name, account_number, ticker, notes, version, created_at, updated_at"
)

TRANSACTION_COLUMNS = (
    "id, user_id, type, category_id, description, amount_cents, account_id, "
    "transaction_date, notes, version, created_at, updated_at"
)

DEBT_COLUMNS = (
    "id, user_id, debt_type_id, name, balance_cents, original_amount_cents, "
    "interest_rate, monthly_payment_cents, start_date, due_date, notes, "
    "created_at, updated_at"
)


def _optional_date(raw) -> date | None:
    if raw is None:
        return None
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw))


def row_to_account(row) -> Account:
    return Account(
        id=row.id,
        owner_id=row.user_id,
        category=row.category,
        account_type_id=row.account_type_id,
        name=row.name,
        current_value=from_cents(row.current_value_cents),
        opening_value=from_cents(row.opening_value_cents),
        version=int(row.version),
        created_at=from_storage_instant(row.created_at),
        updated_at=from_storage_instant(row.updated_at),
        purchase_value=optional_from_cents(row.purchase_value_cents),
        purchase_date=_optional_date(row.purchase_date),
        description=row.description,
        bank_name=row.bank_name,
        account_number=row.account_number,
        ticker=row.ticker,
        notes=row.notes,
    )


def row_to_transaction(row) -> Transaction:
    return Transaction(
        id=row.id,
        owner_id=row.user_id,
        type=row.type,
        category_id=row.category_id,
        description=row.description,
        amount=from_cents(row.amount_cents),
        account_id=row.account_id,
        transaction_date=from_storage_instant(row.transaction_date),
        version=int(row.version),
        created_at=from_storage_instant(row.created_at),
        updated_at=from_storage_instant(row.updated_at),
        notes=row.notes,
    )


def row_to_debt(row) -> Debt:
    return Debt(
        id=row.id,
        owner_id=row.user_id,
        debt_type_id=row.debt_type_id,
        name=row.name,
        balance=from_cents(row.balance_cents),
        created_at=from_storage_instant(row.created_at),
        updated_at=from_storage_instant(row.updated_at),
        original_amount=optional_from_cents(row.original_amount_cents),
        interest_rate=(
            coerce_decimal(row.interest_rate)
            if row.interest_rate is not None
            else None
        ),
        monthly_payment=optional_from_cents(row.monthly_payment_cents),
        start_date=_optional_date(row.start_date),
        due_date=_optional_date(row.due_date),
        notes=row.notes,
    )


def row_to_taxonomy_entry(row, taxonomy: str) -> TaxonomyEntry:
    return TaxonomyEntry(
        id=row.id,
        owner_id=row.user_id,
        taxonomy=taxonomy,
        label=row.label,
        is_system=bool(row.is_system),
        created_at=from_storage_instant(row.created_at),
        updated_at=from_storage_instant(row.updated_at),
        group=row.grp,
        icon=row.icon,
    )


__all__ = [
    "ACCOUNT_COLUMNS",
    "TRANSACTION_COLUMNS",
    "DEBT_COLUMNS",
    "row_to_account",
    "row_to_transaction",
    "row_to_debt",
    "row_to_taxonomy_entry",
]
