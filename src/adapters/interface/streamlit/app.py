"""Streamlit dashboard entry point.

The dashboard is read-only: it renders the aggregation use cases and the
account list for the owner configured through LEDGER_OWNER_ID.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_accounts import GetAccountsUseCase
from src.application.use_cases.get_monthly_summary import (
    GetMonthlySummaryUseCase,
)
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.application.use_cases.get_top_categories import (
    GetTopCategoriesUseCase,
)
from src.domain.constants import ASSET_CATEGORIES
from src.domain.models import (
    Account,
    CategorySpending,
    MonthlySummary,
    NetWorthSummary,
)
from src.infrastructure.container import (
    build_accounts_repository,
    build_analytics_repository,
    build_database_adapter,
    build_debts_repository,
)
from src.infrastructure.settings import LedgerSettings

CATEGORY_LABELS = {
    "liquid": "Liquid",
    "non_liquid": "Non-liquid",
    "investment": "Investment",
}


def _fetch_accounts(owner_id: str) -> Sequence[Account]:
    """Fetch the owner's accounts."""
    adapter = build_database_adapter()
    use_case = GetAccountsUseCase(build_accounts_repository(adapter))
    return use_case.execute(owner_id)


@st.cache_data(show_spinner=False)
def _load_accounts(owner_id: str) -> Sequence[Account]:
    """Cached wrapper around _fetch_accounts for Streamlit sessions."""
    return _fetch_accounts(owner_id)


def _fetch_net_worth_summary(owner_id: str) -> NetWorthSummary:
    """Fetch the net worth summary from accounts and debts."""
    adapter = build_database_adapter()
    use_case = GetNetWorthSummaryUseCase(
        accounts_repository=build_accounts_repository(adapter),
        debts_repository=build_debts_repository(adapter),
    )
    return use_case.execute(owner_id)


@st.cache_data(show_spinner=False)
def _load_net_worth_summary(owner_id: str) -> NetWorthSummary:
    """Cached wrapper around _fetch_net_worth_summary."""
    return _fetch_net_worth_summary(owner_id)


def _fetch_monthly_summary(
    owner_id: str,
    year: int,
    month: int,
) -> MonthlySummary:
    """Fetch income and expense totals for a month."""
    adapter = build_database_adapter()
    use_case = GetMonthlySummaryUseCase(build_analytics_repository(adapter))
    return use_case.execute(owner_id, year, month)


@st.cache_data(show_spinner=False)
def _load_monthly_summary(
    owner_id: str,
    year: int,
    month: int,
) -> MonthlySummary:
    """Cached wrapper around _fetch_monthly_summary."""
    return _fetch_monthly_summary(owner_id, year, month)


def _fetch_top_categories(
    owner_id: str,
    year: int,
    month: int,
) -> list[CategorySpending]:
    """Fetch the month's highest expense categories."""
    adapter = build_database_adapter()
    use_case = GetTopCategoriesUseCase(build_analytics_repository(adapter))
    return use_case.execute(owner_id, year, month)


@st.cache_data(show_spinner=False)
def _load_top_categories(
    owner_id: str,
    year: int,
    month: int,
) -> list[CategorySpending]:
    """Cached wrapper around _fetch_top_categories."""
    return _fetch_top_categories(owner_id, year, month)


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _format_percent(value: Decimal) -> str:
    return f"{value:.1f}%"


def _previous_month(year: int, month: int) -> tuple[int, int]:
    """Return the calendar month before (year, month)."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def _render_accounts(accounts: Sequence[Account]) -> None:
    """Render the accounts table with light filtering."""
    st.subheader("Accounts")
    query = st.text_input("Search by name", placeholder="Type to filter")
    category_filter = st.selectbox(
        "Filter by category",
        options=["All", *ASSET_CATEGORIES],
        index=0,
    )

    filtered = []
    query_lower = query.strip().lower()
    for account in accounts:
        if category_filter != "All" and account.category != category_filter:
            continue
        if query_lower and query_lower not in account.name.lower():
            continue
        filtered.append(account)

    st.caption(f"{len(filtered)} accounts shown")
    data = [
        {
            "Name": account.name,
            "Category": CATEGORY_LABELS.get(account.category, account.category),
            "Current value": _format_currency(account.current_value),
            "Purchase value": (
                _format_currency(account.purchase_value)
                if account.purchase_value is not None
                else "-"
            ),
            "Updated": account.updated_at.strftime("%Y-%m-%d %H:%M"),
        }
        for account in filtered
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)


def _prepare_donut_chart_data(
    amounts: dict[str, Decimal],
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data for asset totals by category.

    Args:
        amounts: Asset totals keyed by asset category.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    total_amount = sum(amounts.values(), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for category, amount in sorted(
        amounts.items(),
        key=lambda item: item[1],
        reverse=True,
    ):
        if amount == 0:
            continue
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": CATEGORY_LABELS.get(category, category),
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_asset_category_chart(
    summary: NetWorthSummary,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of asset totals by category."""
    data, _ = _prepare_donut_chart_data(summary.assets_by_category)
    if not data:
        st.info("No asset amounts available for the chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=["#1b9aaa", "#2e7d32", "#f4a261"]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.subheader("Assets by Category")
    st.altair_chart(chart, width="stretch")


def _prepare_top_categories_data(
    items: Sequence[CategorySpending],
) -> list[dict[str, str | float | int]]:
    """Return bar chart rows that keep the ranking order."""
    return [
        {
            "label": item.label,
            "amount": float(item.amount),
            "amount_label": _format_currency(item.amount),
            "rank": rank,
        }
        for rank, item in enumerate(items, start=1)
    ]


def _render_top_categories_chart(items: Sequence[CategorySpending]) -> None:
    """Render a horizontal bar chart of the top expense categories."""
    st.subheader("Top Expense Categories")
    if not items:
        st.info("No expenses recorded for this month.")
        return
    data = _prepare_top_categories_data(items)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
    ).encode(
        x=alt.X("amount:Q", title=None),
        y=alt.Y("label:N", sort=alt.SortField("rank"), title=None),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_dashboard(owner_id: str, today: date) -> None:
    """Render net worth metrics, the monthly summary and charts."""
    summary = _load_net_worth_summary(owner_id)
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric("Assets", _format_currency(summary.asset_total))
    liabilities_col.metric(
        "Liabilities",
        _format_currency(summary.liability_total),
    )
    net_worth_col.metric("Net Worth", _format_currency(summary.net_worth))

    monthly = _load_monthly_summary(owner_id, today.year, today.month)
    previous_year, previous_month = _previous_month(today.year, today.month)
    previous = _load_monthly_summary(owner_id, previous_year, previous_month)

    st.subheader(f"{today:%B %Y}")
    income_col, expense_col, net_col, rate_col = st.columns(4)
    income_col.metric(
        "Income",
        _format_currency(monthly.income),
        _format_currency(monthly.income - previous.income),
    )
    expense_col.metric(
        "Expenses",
        _format_currency(monthly.expense),
        _format_currency(monthly.expense - previous.expense),
        delta_color="inverse",
    )
    net_col.metric("Net", _format_currency(monthly.net))
    rate_col.metric("Savings rate", _format_percent(monthly.savings_rate))

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_asset_category_chart(summary)
    with chart_right:
        _render_top_categories_chart(
            _load_top_categories(owner_id, today.year, today.month)
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Ledger", layout="wide")
    st.title("Finance Ledger")

    owner_id = LedgerSettings.from_env().owner_id
    if owner_id is None:
        st.warning("Set LEDGER_OWNER_ID to choose whose ledger to display.")
        return

    page = st.sidebar.selectbox("Page", ["Dashboard", "Accounts"])
    if page == "Dashboard":
        _render_dashboard(owner_id, date.today())
        return

    accounts = _load_accounts(owner_id)
    if not accounts:
        st.warning("No accounts found. Create an account first.")
        return
    _render_accounts(accounts)


if __name__ == "__main__":  # pragma: no cover
    main()
