"""SQLite integration tests for the ledger repositories and schema."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import text

from src.application.use_cases.get_transactions import GetTransactionsUseCase
from src.domain.errors import StoreError, ValidationError
from src.domain.models import Debt
from src.infrastructure.schema import ensure_schema

OWNER_ID = "owner-1"
MARCH_15 = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def test_ensure_schema_is_repeatable(sqlite_db) -> None:
    """Running the DDL twice keeps every table."""
    ensure_schema(sqlite_db)

    with sqlite_db.get_ledger_engine().connect() as conn:
        names = {
            row[0]
            for row in conn.execute(
                text("SELECT name FROM sqlite_master WHERE type = 'table'")
            )
        }
    assert {
        "account_types",
        "debt_types",
        "transaction_categories",
        "accounts",
        "debts",
        "transactions",
    } <= names


def test_schema_rejects_non_positive_amounts(ledger_env) -> None:
    """The amount CHECK constraint backs the domain validation."""
    account = ledger_env.account("10.00")
    category = ledger_env.category("expense")
    stamp = MARCH_15.isoformat()

    with pytest.raises(StoreError):
        with ledger_env.store.atomic() as session:
            session._conn.execute(
                text(
                    "INSERT INTO transactions (id, user_id, type, "
                    "category_id, description, amount_cents, account_id, "
                    "transaction_date, created_at, updated_at) VALUES "
                    "('bad', :owner, 'expense', :category, 'x', 0, "
                    ":account, :stamp, :stamp, :stamp)"
                ),
                {
                    "owner": OWNER_ID,
                    "category": category,
                    "account": account.id,
                    "stamp": stamp,
                },
            )


def test_accounts_are_listed_by_value(ledger_env) -> None:
    """Highest value first, filtered by category on request."""
    ledger_env.account("10.00", name="Small")
    ledger_env.account("500.00", name="Large")
    ledger_env.account("80.00", name="Fund", category="investment")

    names = [a.name for a in ledger_env.accounts.fetch_accounts(OWNER_ID)]
    liquid = ledger_env.accounts.fetch_accounts(OWNER_ID, "liquid")

    assert names == ["Large", "Fund", "Small"]
    assert [a.name for a in liquid] == ["Large", "Small"]
    assert ledger_env.accounts.fetch_accounts("someone-else") == []


def test_money_round_trips_exactly(ledger_env) -> None:
    """Cents storage keeps two-digit decimals exact."""
    account = ledger_env.account("0.10")
    ledger_env.ledger.apply(
        OWNER_ID,
        ledger_env.request("income", "0.20", account.id),
    )

    assert ledger_env.value(account.id) == Decimal("0.30")


def test_debt_optional_fields_round_trip(ledger_env) -> None:
    """Dates, rates and optional money survive storage."""
    debt_type = ledger_env.taxonomy.fetch_entries("debt_type", OWNER_ID)[0]
    debt = Debt(
        id="debt-1",
        owner_id=OWNER_ID,
        debt_type_id=debt_type.id,
        name="Car",
        balance=Decimal("8000.00"),
        created_at=MARCH_15,
        updated_at=MARCH_15,
        original_amount=Decimal("12000.00"),
        interest_rate=Decimal("4.25"),
        start_date=date(2022, 6, 1),
    )
    ledger_env.debts.insert_debt(debt)

    stored = ledger_env.debts.fetch_debt(OWNER_ID, "debt-1")

    assert stored == debt
    assert ledger_env.debts.fetch_debt("someone-else", "debt-1") is None


def test_transactions_are_listed_in_half_open_range(ledger_env) -> None:
    """Start is inclusive, end is exclusive, newest first."""
    account = ledger_env.account("100.00")
    for offset, label in enumerate(["first", "second", "third"]):
        ledger_env.ledger.apply(
            OWNER_ID,
            ledger_env.request(
                "expense",
                "1.00",
                account.id,
                when=MARCH_15 + timedelta(days=offset),
                description=label,
            ),
        )
    use_case = GetTransactionsUseCase(ledger_env.transactions)

    listed = use_case.execute(
        OWNER_ID,
        MARCH_15,
        MARCH_15 + timedelta(days=2),
    )

    assert [tx.description for tx in listed] == ["second", "first"]
    assert len(use_case.execute(OWNER_ID)) == 3
    with pytest.raises(ValidationError):
        use_case.execute(OWNER_ID, MARCH_15, MARCH_15 - timedelta(days=1))


def test_report_rows_carry_category_kind(ledger_env) -> None:
    """Transfer legs are recognisable by their category kind."""
    account = ledger_env.account("100.00")
    ledger_env.ledger.apply(
        OWNER_ID,
        ledger_env.request(
            "expense",
            "25.00",
            account.id,
            category_id=ledger_env.category("transfer", "Account Transfer"),
        ),
    )

    rows = ledger_env.analytics.fetch_report_rows(
        OWNER_ID,
        datetime(2024, 3, 1, tzinfo=timezone.utc),
        datetime(2024, 4, 1, tzinfo=timezone.utc),
    )

    assert [(r.category_label, r.category_kind, r.amount) for r in rows] == [
        ("Account Transfer", "transfer", Decimal("25.00")),
    ]
    assert ledger_env.analytics.fetch_account_effects(OWNER_ID) == [
        (account.id, "expense", Decimal("25.00")),
    ]


def test_taxonomy_usage_counts(ledger_env) -> None:
    """Usage counts follow the referencing table of each taxonomy."""
    account = ledger_env.account("5.00")

    assert ledger_env.taxonomy.count_usages(
        "account_type",
        OWNER_ID,
        account.account_type_id,
    ) == 1
    assert ledger_env.taxonomy.delete_entry(
        "account_type",
        OWNER_ID,
        account.account_type_id,
    ) is None
    with pytest.raises(ValidationError):
        ledger_env.taxonomy.fetch_entries("colours", OWNER_ID)
