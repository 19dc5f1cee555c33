"""Custom exception hierarchy for bank-sim."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    CONFIGURATION = "CONFIGURATION"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE = "DUPLICATE"


class BankSimError(Exception):
    """Base exception for all bank-sim errors."""

    kind: ErrorKind | None = None


class InvalidArgumentError(BankSimError, ValueError):
    """Raised when an amount, name, type or date is not acceptable."""

    kind = ErrorKind.INVALID_ARGUMENT


class InsufficientFundsError(BankSimError):
    """Raised when a debit or transfer exceeds the current balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(
        self,
        message: str,
        balance: Decimal | None = None,
        amount: Decimal | None = None,
    ) -> None:
        super().__init__(message)
        self.balance = balance
        self.amount = amount


class ConfigurationError(BankSimError):
    """Raised when configuration is invalid or missing."""

    kind = ErrorKind.CONFIGURATION


class EntityNotFoundError(BankSimError):
    """Raised when a referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a transaction references an unknown account."""


class DuplicateEntityError(BankSimError):
    """Raised when an entity with the same id is already stored."""

    kind = ErrorKind.DUPLICATE
