"""Tests for the Streamlit app module."""

from datetime import date, datetime, timezone
from decimal import Decimal
from importlib import import_module
from types import SimpleNamespace

import pytest

from src.adapters.interface.streamlit import app
from src.domain.models import (
    Account,
    CategorySpending,
    MonthlySummary,
    NetWorthSummary,
)
from src.infrastructure import settings as settings_module

NOW = datetime(2024, 3, 10, 8, 30, tzinfo=timezone.utc)


def _account(name: str, category: str, value: str) -> Account:
    return Account(
        id=name.lower(),
        owner_id="owner-1",
        category=category,
        account_type_id="type",
        name=name,
        current_value=Decimal(value),
        opening_value=Decimal(value),
        version=1,
        created_at=NOW,
        updated_at=NOW,
    )


class _Column:
    def __init__(self, owner) -> None:
        self._owner = owner

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def metric(self, label, value, delta=None, **kwargs):
        self._owner.metrics[label] = (value, delta)


class _FakeStreamlit:
    def __init__(self, page: str = "Accounts", query: str = "", category="All"):
        self.config_kwargs = None
        self.title_text = None
        self.warnings: list[str] = []
        self.infos: list[str] = []
        self.captions: list[str] = []
        self.subheaders: list[str] = []
        self.metrics: dict[str, tuple] = {}
        self.charts: list = []
        self.dataframe_payload = None
        self._query = query
        self._category = category
        self.sidebar = SimpleNamespace(selectbox=lambda label, options: page)

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def caption(self, text: str):
        self.captions.append(text)

    def subheader(self, text: str):
        self.subheaders.append(text)

    def text_input(self, label, **kwargs):
        return self._query

    def selectbox(self, label, options, index=0):
        assert self._category in options
        return self._category

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)

    def columns(self, count: int):
        return [_Column(self) for _ in range(count)]

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)


@pytest.fixture
def owner_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("LEDGER_OWNER_ID", "owner-1")


def test_interface_packages_export_nothing() -> None:
    assert import_module("src.adapters.interface").__all__ == []
    assert import_module("src.adapters.interface.streamlit").__all__ == []


def test_fetch_accounts_invokes_use_case(monkeypatch):
    """_fetch_accounts wires the repository to the listing use case."""
    captured = {}

    class _FakeUseCase:
        def __init__(self, repository):
            captured["repository"] = repository

        def execute(self, owner_id):
            captured["owner_id"] = owner_id
            return ["account"]

    monkeypatch.setattr(app, "build_database_adapter", lambda: "adapter")
    monkeypatch.setattr(
        app,
        "build_accounts_repository",
        lambda adapter: f"repo:{adapter}",
    )
    monkeypatch.setattr(app, "GetAccountsUseCase", _FakeUseCase)

    assert app._fetch_accounts("owner-1") == ["account"]
    assert captured == {"repository": "repo:adapter", "owner_id": "owner-1"}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("1234.5"), "$1,234.50"),
        (Decimal("-0.07"), "-$0.07"),
        (Decimal("0"), "$0.00"),
    ],
)
def test_format_currency(value, expected):
    assert app._format_currency(value) == expected


def test_previous_month_wraps_year():
    assert app._previous_month(2024, 1) == (2023, 12)
    assert app._previous_month(2024, 7) == (2024, 6)


def test_donut_data_skips_empty_categories():
    """Zero categories are hidden and shares are relative to the total."""
    data, total = app._prepare_donut_chart_data(
        {
            "liquid": Decimal("250.00"),
            "non_liquid": Decimal("0"),
            "investment": Decimal("750.00"),
        }
    )

    assert total == Decimal("1000.00")
    assert [row["category"] for row in data] == ["Investment", "Liquid"]
    assert data[0]["share_label"] == "75.0%"


def test_top_categories_data_keeps_rank():
    rows = app._prepare_top_categories_data(
        [
            CategorySpending(label="Home", amount=Decimal("80.00")),
            CategorySpending(label="Food & Dining", amount=Decimal("80.00")),
        ]
    )

    assert [(row["label"], row["rank"]) for row in rows] == [
        ("Home", 1),
        ("Food & Dining", 2),
    ]


def test_main_requires_owner(monkeypatch):
    """Without LEDGER_OWNER_ID nothing is loaded."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("LEDGER_OWNER_ID", raising=False)
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app.main()

    assert fake_st.title_text == "Finance Ledger"
    assert "LEDGER_OWNER_ID" in fake_st.warnings[0]


def test_accounts_page_filters_rows(monkeypatch, owner_env):
    """Search and category filters narrow the table."""
    fake_st = _FakeStreamlit(query="sav", category="liquid")
    accounts = [
        _account("Savings", "liquid", "900.00"),
        _account("Savings Bonds", "investment", "400.00"),
        _account("Checking", "liquid", "100.00"),
    ]
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_accounts", lambda owner_id: accounts)

    app.main()

    table_data, kwargs = fake_st.dataframe_payload
    assert [row["Name"] for row in table_data] == ["Savings"]
    assert table_data[0]["Current value"] == "$900.00"
    assert table_data[0]["Purchase value"] == "-"
    assert kwargs["hide_index"] is True
    assert fake_st.captions == ["1 accounts shown"]
    assert fake_st.warnings == []


def test_accounts_page_warns_when_empty(monkeypatch, owner_env):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_accounts", lambda owner_id: [])

    app.main()

    assert fake_st.warnings == ["No accounts found. Create an account first."]
    assert fake_st.dataframe_payload is None


def test_dashboard_renders_metrics_and_charts(monkeypatch, owner_env):
    """The dashboard compares the month with the previous one."""
    fake_st = _FakeStreamlit(page="Dashboard")
    summaries = {
        (2024, 3): MonthlySummary(2024, 3, Decimal("5000"), Decimal("1500")),
        (2024, 2): MonthlySummary(2024, 2, Decimal("4000"), Decimal("2000")),
    }
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_load_net_worth_summary",
        lambda owner_id: NetWorthSummary(
            asset_total=Decimal("1000"),
            liability_total=Decimal("1500"),
            net_worth=Decimal("-500"),
            assets_by_category={"liquid": Decimal("1000")},
        ),
    )
    monkeypatch.setattr(
        app,
        "_load_monthly_summary",
        lambda owner_id, year, month: summaries[(year, month)],
    )
    monkeypatch.setattr(app, "_load_top_categories", lambda *args: [])

    app._render_dashboard("owner-1", date(2024, 3, 20))

    assert fake_st.metrics["Net Worth"] == ("-$500.00", None)
    assert fake_st.metrics["Income"] == ("$5,000.00", "$1,000.00")
    assert fake_st.metrics["Expenses"] == ("$1,500.00", "-$500.00")
    assert fake_st.metrics["Savings rate"] == ("70.0%", None)
    assert "March 2024" in fake_st.subheaders
    assert len(fake_st.charts) == 1
    assert fake_st.infos == ["No expenses recorded for this month."]
