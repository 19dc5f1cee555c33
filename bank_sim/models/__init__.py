"""Domain models for the bank simulation."""

from bank_sim.models.account import Account
from bank_sim.models.enums import AccountType, TransactionStatus, TransactionType
from bank_sim.models.transaction import OperationResult, Transaction

__all__ = [
    "Account",
    "AccountType",
    "OperationResult",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
]
