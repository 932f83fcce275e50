"""Domain services package."""

from .balance import (
    apply_effect,
    expected_balance,
    plan_amendment,
    revert_effect,
    signed_effect,
)
from .finance import (
    compute_asset_category_summary,
    compute_debt_summary,
    compute_monthly_summary,
    compute_net_worth_summary,
    compute_top_categories,
)
from .validation import (
    parse_amount,
    parse_instant,
    parse_money,
    parse_optional_date,
    parse_optional_money,
    require_choice,
    require_text,
    validate_balance_sign,
    validate_month,
)

__all__ = [
    "apply_effect",
    "expected_balance",
    "plan_amendment",
    "revert_effect",
    "signed_effect",
    "compute_asset_category_summary",
    "compute_debt_summary",
    "compute_monthly_summary",
    "compute_net_worth_summary",
    "compute_top_categories",
    "parse_amount",
    "parse_instant",
    "parse_money",
    "parse_optional_date",
    "parse_optional_money",
    "require_choice",
    "require_text",
    "validate_balance_sign",
    "validate_month",
]
