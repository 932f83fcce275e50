"""Balance arithmetic for applying and reverting transactions."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME
from src.domain.errors import ValidationError
from src.domain.models import BalanceAdjustment, Transaction


def signed_effect(transaction_type: str, amount: Decimal) -> Decimal:
    """Return the signed change a transaction makes to its account.

    Args:
        transaction_type: income or expense.
        amount: Positive transaction amount.

    Returns:
        Decimal: +amount for income, -amount for expense.

    Raises:
        ValidationError: If the type is unknown.
    """
    if transaction_type == INCOME:
        return amount
    if transaction_type == EXPENSE:
        return -amount
    raise ValidationError(f"Unknown transaction type: {transaction_type}")


def apply_effect(
    current_value: Decimal,
    transaction_type: str,
    amount: Decimal,
) -> Decimal:
    """Return the account value after applying a transaction."""
    return current_value + signed_effect(transaction_type, amount)


def revert_effect(
    current_value: Decimal,
    transaction_type: str,
    amount: Decimal,
) -> Decimal:
    """Return the account value after undoing a transaction."""
    return current_value - signed_effect(transaction_type, amount)


def plan_amendment(
    old: Transaction,
    new: Transaction,
) -> list[BalanceAdjustment]:
    """Return the per-account adjustments for editing a transaction.

    The old effect is reverted on the old account and the new effect is
    applied on the new account. When both are the same account the two
    steps collapse into one net adjustment, so the account is read and
    written once from its pre-edit value.

    Args:
        old: Transaction as stored before the edit.
        new: Transaction with the edit applied.

    Returns:
        list[BalanceAdjustment]: Non-zero adjustments, old account first.
    """
    deltas: dict[str, Decimal] = {}
    deltas[old.account_id] = -signed_effect(old.type, old.amount)
    deltas[new.account_id] = deltas.get(
        new.account_id, Decimal("0")
    ) + signed_effect(new.type, new.amount)
    return [
        BalanceAdjustment(account_id=account_id, delta=delta)
        for account_id, delta in deltas.items()
        if delta != 0
    ]


def expected_balance(
    opening_value: Decimal,
    transactions: Iterable[tuple[str, Decimal]],
) -> Decimal:
    """Recompute an account value from its opening value and live rows.

    Args:
        opening_value: Value recorded when the account was created.
        transactions: (type, amount) pairs applied to the account.

    Returns:
        Decimal: Value the account should currently hold.
    """
    total = opening_value
    for transaction_type, amount in transactions:
        total += signed_effect(transaction_type, amount)
    return total


__all__ = [
    "signed_effect",
    "apply_effect",
    "revert_effect",
    "plan_amendment",
    "expected_balance",
]
