"""Use case decomposing a transfer into a paired expense and income."""

from dataclasses import replace

from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases.conflict_retry import (
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_MAX_WAIT,
    run_with_conflict_retry,
)
from src.application.use_cases.transaction_ledger import (
    TransactionLedgerUseCase,
    validate_new_transaction,
)
from src.domain.constants import (
    EXPENSE,
    INCOME,
    TRANSFER,
    TRANSFER_IN_PREFIX,
    TRANSFER_OUT_PREFIX,
)
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models import NewTransaction, NewTransfer, TransferResult
from src.domain.services import require_text
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class TransferFundsUseCase:
    """Move funds between two accounts of the same owner.

    A transfer is never stored as its own transaction type. It becomes an
    expense on the source account and an income on the destination, both
    applied inside one atomic unit so neither leg can exist alone.
    """

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        ledger: TransactionLedgerUseCase,
        logger=None,
        usage_logger=None,
        retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
        retry_max_wait: float = DEFAULT_RETRY_MAX_WAIT,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_store: Port opening the shared atomic unit.
            ledger: Ledger applying each leg inside that unit.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger receiving the audit trail.
            retry_attempts: Attempts before a ConflictError surfaces.
            retry_max_wait: Maximum backoff in seconds between attempts.
        """
        self._ledger_store = ledger_store
        self._ledger = ledger
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._retry_attempts = retry_attempts
        self._retry_max_wait = retry_max_wait

    def execute(self, owner_id: str, transfer: NewTransfer) -> TransferResult:
        """Record both legs of a transfer.

        Args:
            owner_id: Owner of both accounts.
            transfer: Source, destination, amount and shared metadata.

        Returns:
            TransferResult: The outgoing expense and incoming income.

        Raises:
            ValidationError: If both accounts are the same or the input is
                malformed.
            NotFoundError: If an account or the category is not the owner's.
            ConflictError: If every retry lost a concurrent write race.
        """
        from_account_id = require_text(transfer.from_account_id, "from_account_id")
        to_account_id = require_text(transfer.to_account_id, "to_account_id")
        if from_account_id == to_account_id:
            raise ValidationError("Cannot transfer to the same account")
        description = require_text(transfer.description, "description")

        outgoing_request = validate_new_transaction(
            NewTransaction(
                type=EXPENSE,
                category_id=transfer.category_id,
                description=f"{TRANSFER_OUT_PREFIX}{description}",
                amount=transfer.amount,
                account_id=from_account_id,
                transaction_date=transfer.transaction_date,
                notes=transfer.notes,
            )
        )
        incoming_request = replace(
            outgoing_request,
            type=INCOME,
            description=f"{TRANSFER_IN_PREFIX}{description}",
            account_id=to_account_id,
        )

        def _unit() -> TransferResult:
            with self._ledger_store.atomic() as session:
                category = session.fetch_category(
                    owner_id,
                    outgoing_request.category_id,
                )
                if category is None:
                    raise NotFoundError(
                        f"Category not found: {outgoing_request.category_id}"
                    )
                if category.group != TRANSFER:
                    self._logger.warning(
                        f"Transfer uses category '{category.label}' of kind "
                        f"{category.group}; monthly summaries will count it"
                    )
                outgoing = self._ledger.apply_within(
                    session,
                    owner_id,
                    outgoing_request,
                )
                incoming = self._ledger.apply_within(
                    session,
                    owner_id,
                    incoming_request,
                )
                return TransferResult(outgoing=outgoing, incoming=incoming)

        result = run_with_conflict_retry(
            _unit,
            self._logger,
            "transfer",
            attempts=self._retry_attempts,
            max_wait=self._retry_max_wait,
        )
        self._usage_logger.info(
            f"transfer owner={owner_id} from={from_account_id} "
            f"to={to_account_id} amount={outgoing_request.amount} "
            f"out={result.outgoing.id} in={result.incoming.id}"
        )
        return result


__all__ = ["TransferFundsUseCase"]
