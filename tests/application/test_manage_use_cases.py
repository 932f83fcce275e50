"""SQLite-backed tests for account, debt and taxonomy management."""

from decimal import Decimal

import pytest

from src.application.use_cases.manage_debts import ManageDebtsUseCase
from src.application.use_cases.manage_taxonomies import ManageTaxonomiesUseCase
from src.application.use_cases.seed_defaults import SeedDefaultsUseCase
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models import (
    AccountDetailsUpdate,
    DebtChanges,
    NewAccount,
    NewDebt,
)

OWNER_ID = "owner-1"
OTHER_OWNER_ID = "owner-2"


def _debt_type_id(env, label: str = "Mortgage") -> str:
    return next(
        entry.id
        for entry in env.taxonomy.fetch_entries("debt_type", OWNER_ID)
        if entry.label == label
    )


def test_seed_defaults_is_idempotent(ledger_env) -> None:
    """A second seeding run inserts nothing."""
    seeder = SeedDefaultsUseCase(ledger_env.taxonomy, logger=ledger_env.logger)

    result = seeder.run(OWNER_ID)
    fresh = seeder.run(OTHER_OWNER_ID)

    assert (result.account_types, result.debt_types) == (0, 0)
    assert result.transaction_categories == 0
    assert fresh.account_types == 19
    assert fresh.debt_types == 8
    assert fresh.transaction_categories == 30
    entries = ledger_env.taxonomy.fetch_entries("debt_type", OTHER_OWNER_ID)
    assert all(entry.is_system for entry in entries)


def test_create_account_sets_opening_value(ledger_env) -> None:
    """Opening and current value both start at the initial value."""
    account = ledger_env.account("250.75", name="Wallet")

    stored = ledger_env.accounts.fetch_account(OWNER_ID, account.id)
    assert stored.opening_value == Decimal("250.75")
    assert stored.current_value == Decimal("250.75")
    assert stored.version == 1


def test_create_account_rejects_type_from_other_category(ledger_env) -> None:
    """An investment type cannot back a liquid account."""
    investment_type = next(
        entry
        for entry in ledger_env.taxonomy.fetch_entries("account_type", OWNER_ID)
        if entry.group == "investment"
    )

    with pytest.raises(ValidationError, match="belongs to investment"):
        ledger_env.manage_accounts.create(
            OWNER_ID,
            NewAccount(
                category="liquid",
                account_type_id=investment_type.id,
                name="Broker cash",
                initial_value=Decimal("1.00"),
            ),
        )


def test_create_account_rejects_foreign_type(ledger_env) -> None:
    """Account types of another owner are not visible."""
    with pytest.raises(NotFoundError):
        ledger_env.manage_accounts.create(
            OWNER_ID,
            NewAccount(
                category="liquid",
                account_type_id="missing",
                name="Ghost",
                initial_value=Decimal("0"),
            ),
        )


def test_update_account_keeps_balance(ledger_env) -> None:
    """Descriptive edits never touch the current value."""
    account = ledger_env.account("100.00")

    updated = ledger_env.manage_accounts.update(
        OWNER_ID,
        account.id,
        AccountDetailsUpdate(name=" Main ", bank_name="Credit Union"),
    )

    assert updated.name == "Main"
    assert updated.bank_name == "Credit Union"
    assert updated.current_value == Decimal("100.00")


def test_delete_account_with_transactions_is_rejected(ledger_env) -> None:
    """Accounts referenced by transactions stay until those are revoked."""
    account = ledger_env.account("100.00")
    tx = ledger_env.ledger.apply(
        OWNER_ID,
        ledger_env.request("expense", "10.00", account.id),
    )

    with pytest.raises(ValidationError, match="1 transaction"):
        ledger_env.manage_accounts.delete(OWNER_ID, account.id)

    ledger_env.ledger.revoke(OWNER_ID, tx.id)
    deleted = ledger_env.manage_accounts.delete(OWNER_ID, account.id)
    assert deleted.id == account.id
    assert ledger_env.accounts.fetch_account(OWNER_ID, account.id) is None


def test_debts_are_edited_by_hand(ledger_env) -> None:
    """Debts support create, partial update and delete."""
    manage = ManageDebtsUseCase(
        ledger_env.debts,
        ledger_env.taxonomy,
        logger=ledger_env.logger,
    )
    debt = manage.create(
        OWNER_ID,
        NewDebt(
            debt_type_id=_debt_type_id(ledger_env),
            name="House",
            balance=Decimal("150000.00"),
            interest_rate="3.875",
        ),
    )

    updated = manage.update(
        OWNER_ID,
        debt.id,
        DebtChanges(balance=Decimal("149000.00")),
    )

    assert updated.balance == Decimal("149000.00")
    assert updated.interest_rate == Decimal("3.875")
    assert manage.delete(OWNER_ID, debt.id).id == debt.id
    with pytest.raises(NotFoundError):
        manage.delete(OWNER_ID, debt.id)


def test_debt_rejects_negative_balance(ledger_env) -> None:
    """Balances and rates cannot be negative."""
    manage = ManageDebtsUseCase(
        ledger_env.debts,
        ledger_env.taxonomy,
        logger=ledger_env.logger,
    )
    request = NewDebt(
        debt_type_id=_debt_type_id(ledger_env),
        name="Card",
        balance=Decimal("-1.00"),
    )

    with pytest.raises(ValidationError, match="negative"):
        manage.create(OWNER_ID, request)


def test_system_taxonomy_entries_are_read_only(ledger_env) -> None:
    """Seeded entries can be neither relabelled nor deleted."""
    manage = ManageTaxonomiesUseCase(ledger_env.taxonomy, logger=ledger_env.logger)
    mortgage = _debt_type_id(ledger_env)

    with pytest.raises(ValidationError, match="cannot be edited"):
        manage.update("debt_type", OWNER_ID, mortgage, label="Home loan")
    with pytest.raises(ValidationError, match="cannot be deleted"):
        manage.delete("debt_type", OWNER_ID, mortgage)


def test_custom_category_in_use_cannot_be_deleted(ledger_env) -> None:
    """A category referenced by a transaction is protected."""
    manage = ManageTaxonomiesUseCase(ledger_env.taxonomy, logger=ledger_env.logger)
    entry = manage.create(
        "transaction_category",
        OWNER_ID,
        "Pets",
        group="expense",
        icon="🐶",
    )
    assert entry.icon is None
    account = ledger_env.account("50.00")
    tx = ledger_env.ledger.apply(
        OWNER_ID,
        ledger_env.request("expense", "5.00", account.id, category_id=entry.id),
    )

    with pytest.raises(ValidationError, match="used by 1"):
        manage.delete("transaction_category", OWNER_ID, entry.id)

    ledger_env.ledger.revoke(OWNER_ID, tx.id)
    renamed = manage.update("transaction_category", OWNER_ID, entry.id, label="Pet care")
    assert renamed.label == "Pet care"
    assert manage.delete("transaction_category", OWNER_ID, entry.id).id == entry.id


def test_taxonomy_create_validates_group(ledger_env) -> None:
    """Account types need an asset category and unknown taxonomies fail."""
    manage = ManageTaxonomiesUseCase(ledger_env.taxonomy, logger=ledger_env.logger)

    with pytest.raises(ValidationError, match="category"):
        manage.create("account_type", OWNER_ID, "Boat", group="floating")
    with pytest.raises(ValidationError, match="taxonomy"):
        manage.list_entries("colours", OWNER_ID)
