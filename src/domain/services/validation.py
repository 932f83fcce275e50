"""Domain validation helpers."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from logging import Logger

from src.domain.errors import ValidationError

_MAX_FRACTION_DIGITS = 2


def parse_money(value, field: str = "amount") -> Decimal:
    """Parse a decimal string (or number) with at most two fractional digits.

    Args:
        value: Raw value, usually a string such as ``"1250.50"``.
        field: Field name used in error messages.

    Returns:
        Decimal: Exact decimal value.

    Raises:
        ValidationError: If the value is missing, malformed, non-finite or
            has more than two fractional digits.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing required field: {field}")
    if isinstance(value, float):
        raise ValidationError(f"{field} must be a decimal string, not a float")
    try:
        parsed = value if isinstance(value, Decimal) else Decimal(
            str(value).strip()
        )
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid decimal for {field}: {value!r}") from exc
    if not parsed.is_finite():
        raise ValidationError(f"{field} must be a finite number")
    exponent = parsed.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -_MAX_FRACTION_DIGITS:
        raise ValidationError(
            f"{field} supports at most {_MAX_FRACTION_DIGITS} fractional digits"
        )
    return parsed


def parse_amount(value, field: str = "amount") -> Decimal:
    """Parse a strictly positive transaction amount."""
    amount = parse_money(value, field)
    if amount <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    return amount


def parse_optional_money(value, field: str) -> Decimal | None:
    """Parse a money field that may be omitted."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_money(value, field)


def parse_instant(value, field: str = "transaction_date") -> datetime:
    """Parse an ISO-8601 instant that carries its UTC offset.

    Args:
        value: ISO-8601 string or aware datetime.
        field: Field name used in error messages.

    Returns:
        datetime: Timezone-aware datetime.

    Raises:
        ValidationError: If the value is missing, malformed or naive.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing required field: {field}")
    if isinstance(value, datetime):
        parsed = value
    else:
        raw = str(value).strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise ValidationError(
                f"Invalid ISO-8601 instant for {field}: {value!r}"
            ) from exc
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise ValidationError(f"{field} must include a timezone offset")
    return parsed


def parse_optional_date(value, field: str) -> date | None:
    """Parse an optional calendar date (YYYY-MM-DD)."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid date for {field}: {value!r}") from exc


def require_choice(value, choices, field: str) -> str:
    """Return value when it is one of choices, else raise ValidationError."""
    if value not in choices:
        expected = ", ".join(choices)
        raise ValidationError(
            f"Invalid {field}: {value!r}. Expected one of {expected}."
        )
    return value


def require_text(value, field: str) -> str:
    """Return a stripped non-empty string, else raise ValidationError."""
    if value is None or not str(value).strip():
        raise ValidationError(f"Missing required field: {field}")
    return str(value).strip()


def validate_month(year: int, month: int) -> None:
    """Reject months outside 1..12 and implausible years."""
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month: {month}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"Invalid year: {year}")


def validate_balance_sign(
    account_name: str,
    balance: Decimal,
    logger: Logger,
) -> None:
    """Warn when an asset balance drops below zero.

    Args:
        account_name: Account display name.
        balance: Balance after the ledger write.
        logger: Logger used for warnings.
    """
    if balance < 0:
        logger.warning(
            f"Asset balance is negative for account={account_name}: {balance}"
        )


__all__ = [
    "parse_money",
    "parse_amount",
    "parse_optional_money",
    "parse_instant",
    "parse_optional_date",
    "require_choice",
    "require_text",
    "validate_month",
    "validate_balance_sign",
]
