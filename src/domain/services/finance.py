"""Domain services for finance aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    ASSET_CATEGORIES,
    EXPENSE,
    INCOME,
    TOP_CATEGORIES_LIMIT,
    TRANSFER,
    UNCATEGORIZED_LABEL,
)
from src.domain.models import (
    Account,
    AssetCategorySummary,
    CategorySpending,
    Debt,
    DebtSummary,
    MonthlySummary,
    NetWorthSummary,
    TransactionReportRow,
)


def compute_net_worth_summary(
    accounts: Iterable[Account],
    debts: Iterable[Debt],
) -> NetWorthSummary:
    """Compute net worth totals from accounts and debts.

    Args:
        accounts: Asset accounts of one owner.
        debts: Debts of the same owner.

    Returns:
        NetWorthSummary: Asset, liability and net worth totals, with the
        asset total broken down by asset category.
    """
    by_category = {category: Decimal("0") for category in ASSET_CATEGORIES}
    for account in accounts:
        by_category[account.category] = (
            by_category.get(account.category, Decimal("0"))
            + account.current_value
        )
    asset_total = sum(by_category.values(), Decimal("0"))
    liability_total = sum(
        (debt.balance for debt in debts),
        Decimal("0"),
    )
    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        assets_by_category=by_category,
    )


def compute_asset_category_summary(
    category: str,
    accounts: Iterable[Account],
) -> AssetCategorySummary:
    """Summarize the accounts of a single asset category.

    Args:
        category: Asset category to keep.
        accounts: Accounts of one owner (other categories are ignored).

    Returns:
        AssetCategorySummary: Count, totals and growth percentage.
    """
    count = 0
    total_value = Decimal("0")
    total_purchase = Decimal("0")
    for account in accounts:
        if account.category != category:
            continue
        count += 1
        total_value += account.current_value
        total_purchase += account.purchase_value or Decimal("0")
    growth = Decimal("0")
    if total_purchase > 0:
        growth = (total_value - total_purchase) / total_purchase * Decimal(
            "100"
        )
    return AssetCategorySummary(
        category=category,
        count=count,
        total_value=total_value,
        total_purchase_value=total_purchase,
        growth=growth,
    )


def compute_monthly_summary(
    rows: Iterable[TransactionReportRow],
    year: int,
    month: int,
) -> MonthlySummary:
    """Sum income and expense for a month, skipping transfer categories.

    Transfers are stored as ordinary income/expense pairs, so they can only
    be told apart by the kind of their category.

    Args:
        rows: Transactions dated within the month.
        year: Calendar year of the rows.
        month: Calendar month of the rows.

    Returns:
        MonthlySummary: Income and expense totals.
    """
    totals = {INCOME: Decimal("0"), EXPENSE: Decimal("0")}
    for row in rows:
        if row.category_kind == TRANSFER:
            continue
        if row.transaction_type in totals:
            totals[row.transaction_type] += row.amount
    return MonthlySummary(
        year=year,
        month=month,
        income=totals[INCOME],
        expense=totals[EXPENSE],
    )


def compute_top_categories(
    rows: Iterable[TransactionReportRow],
    limit: int = TOP_CATEGORIES_LIMIT,
) -> list[CategorySpending]:
    """Rank expense categories by total amount.

    Args:
        rows: Transactions in the period, in the order they were listed.
        limit: Maximum number of categories to return.

    Returns:
        list[CategorySpending]: Highest totals first; ties keep the order in
        which their label was first encountered.
    """
    totals: dict[str, Decimal] = {}
    for row in rows:
        if row.transaction_type != EXPENSE:
            continue
        label = row.category_label or UNCATEGORIZED_LABEL
        totals[label] = totals.get(label, Decimal("0")) + row.amount
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategorySpending(label=label, amount=amount)
        for label, amount in ranked[:limit]
    ]


def compute_debt_summary(debts: Iterable[Debt]) -> DebtSummary:
    """Aggregate debt balances, payments and payoff progress."""
    count = 0
    total_debt = Decimal("0")
    total_monthly = Decimal("0")
    total_original = Decimal("0")
    for debt in debts:
        count += 1
        total_debt += debt.balance
        total_monthly += debt.monthly_payment or Decimal("0")
        total_original += (
            debt.original_amount
            if debt.original_amount is not None
            else debt.balance
        )
    paid_off = total_original - total_debt
    percentage = Decimal("0")
    if total_original > 0:
        percentage = paid_off / total_original * Decimal("100")
    return DebtSummary(
        count=count,
        total_debt=total_debt,
        total_monthly_payment=total_monthly,
        total_original=total_original,
        paid_off=paid_off,
        paid_off_percentage=percentage,
    )


__all__ = [
    "compute_net_worth_summary",
    "compute_asset_category_summary",
    "compute_monthly_summary",
    "compute_top_categories",
    "compute_debt_summary",
]
