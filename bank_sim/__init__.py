"""Synthetic bank account simulation."""

from bank_sim.exceptions import (
    BankSimError,
    ErrorKind,
    InsufficientFundsError,
    InvalidArgumentError,
)
from bank_sim.models import Account, AccountType

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountType",
    "BankSimError",
    "ErrorKind",
    "InsufficientFundsError",
    "InvalidArgumentError",
]
