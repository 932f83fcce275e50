"""Use case for recording and editing debts.

Debts are independent of the ledger: their balances are edited by hand
and no transaction ever adjusts them.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable

from src.application.ports.debts_repository import DebtsRepositoryPort
from src.application.ports.taxonomy_repository import TaxonomyRepositoryPort
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models import Debt, DebtChanges, NewDebt
from src.domain.services import parse_optional_money, require_text
from src.infrastructure.logging.logger import get_app_logger
from src.utils.time_utils import utc_now
from src.utils.utils import generate_id


def _parse_rate(value) -> Decimal | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, float):
        raise ValidationError("interest_rate must be a decimal string")
    try:
        rate = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid interest_rate: {value!r}") from exc
    if not rate.is_finite() or rate < 0:
        raise ValidationError("interest_rate must not be negative")
    return rate


def _non_negative(value, field: str) -> Decimal | None:
    parsed = parse_optional_money(value, field)
    if parsed is not None and parsed < 0:
        raise ValidationError(f"{field} must not be negative")
    return parsed


class ManageDebtsUseCase:
    """Create, edit and delete an owner's debts."""

    def __init__(
        self,
        debts_repository: DebtsRepositoryPort,
        taxonomy_repository: TaxonomyRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        """Initialize the use case.

        Args:
            debts_repository: Port persisting debts.
            taxonomy_repository: Port resolving debt types.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Source of the current instant.
            id_factory: Source of new debt identifiers.
        """
        self._debts_repository = debts_repository
        self._taxonomy_repository = taxonomy_repository
        self._logger = logger or get_app_logger()
        self._clock = clock
        self._id_factory = id_factory

    def create(self, owner_id: str, request: NewDebt) -> Debt:
        """Record a debt.

        Raises:
            ValidationError: If a field is missing, malformed or negative.
            NotFoundError: If the debt type is not the owner's.
        """
        name = require_text(request.name, "name")
        balance = _non_negative(request.balance, "balance")
        if balance is None:
            raise ValidationError("Missing required field: balance")
        self._require_debt_type(owner_id, request.debt_type_id)
        now = self._clock()
        debt = Debt(
            id=self._id_factory(),
            owner_id=owner_id,
            debt_type_id=request.debt_type_id,
            name=name,
            balance=balance,
            created_at=now,
            updated_at=now,
            original_amount=_non_negative(
                request.original_amount,
                "original_amount",
            ),
            interest_rate=_parse_rate(request.interest_rate),
            monthly_payment=_non_negative(
                request.monthly_payment,
                "monthly_payment",
            ),
            start_date=request.start_date,
            due_date=request.due_date,
            notes=request.notes,
        )
        self._debts_repository.insert_debt(debt)
        self._logger.info(f"Created debt {debt.id} with balance {balance}")
        return debt

    def update(self, owner_id: str, debt_id: str, changes: DebtChanges) -> Debt:
        """Apply a manual edit and return the updated debt."""
        fields = changes.changed_fields()
        if "name" in fields:
            fields["name"] = require_text(fields["name"], "name")
        for money_field in ("balance", "original_amount", "monthly_payment"):
            if money_field in fields:
                fields[money_field] = _non_negative(fields[money_field], money_field)
        if "balance" in fields and fields["balance"] is None:
            raise ValidationError("Missing required field: balance")
        if "interest_rate" in fields:
            fields["interest_rate"] = _parse_rate(fields["interest_rate"])
        if "debt_type_id" in fields:
            self._require_debt_type(owner_id, fields["debt_type_id"])
        if not fields:
            return self._require_debt(owner_id, debt_id)
        updated = self._debts_repository.update_debt(
            owner_id,
            debt_id,
            fields,
            self._clock(),
        )
        if updated is None:
            raise NotFoundError(f"Debt not found: {debt_id}")
        return updated

    def delete(self, owner_id: str, debt_id: str) -> Debt:
        deleted = self._debts_repository.delete_debt(owner_id, debt_id)
        if deleted is None:
            raise NotFoundError(f"Debt not found: {debt_id}")
        self._logger.info(f"Deleted debt {debt_id}")
        return deleted

    def _require_debt(self, owner_id: str, debt_id: str) -> Debt:
        debt = self._debts_repository.fetch_debt(owner_id, debt_id)
        if debt is None:
            raise NotFoundError(f"Debt not found: {debt_id}")
        return debt

    def _require_debt_type(self, owner_id: str, debt_type_id: str) -> None:
        entry = self._taxonomy_repository.fetch_entry(
            "debt_type",
            owner_id,
            debt_type_id,
        )
        if entry is None:
            raise NotFoundError(f"Debt type not found: {debt_type_id}")


__all__ = ["ManageDebtsUseCase"]
