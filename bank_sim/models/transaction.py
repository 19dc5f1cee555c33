"""Transaction record and operation result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_sim.exceptions import ErrorKind
from bank_sim.models.enums import TransactionStatus, TransactionType


@dataclass
class Transaction:
    """One attempted credit, debit or transfer, successful or not."""

    transaction_id: str
    account_id: str
    transaction_type: TransactionType
    amount: Decimal
    status: TransactionStatus
    balance_after: Decimal
    counterparty_account_id: str | None = None  # Transfer destination
    error_kind: ErrorKind | None = None
    message: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def succeeded(self) -> bool:
        return self.status == TransactionStatus.COMPLETED


@dataclass(frozen=True)
class OperationResult:
    """Outcome of an account operation that does not raise.

    ``error_kind`` is ``None`` exactly when ``ok`` is true.
    """

    ok: bool
    balance: Decimal
    error_kind: ErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, balance: Decimal) -> OperationResult:
        return cls(ok=True, balance=balance)

    @classmethod
    def failure(cls, balance: Decimal, error_kind: ErrorKind, message: str) -> OperationResult:
        return cls(ok=False, balance=balance, error_kind=error_kind, message=message)
