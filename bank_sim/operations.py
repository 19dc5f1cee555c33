"""Result-returning account operations.

These wrap the :class:`~bank_sim.models.Account` mutators for callers that
would rather branch on an :class:`~bank_sim.exceptions.ErrorKind` than
catch exceptions::

    result = transfer(source, destination, "40.00")
    if not result.ok and result.error_kind is ErrorKind.INSUFFICIENT_FUNDS:
        ...

Only :class:`~bank_sim.exceptions.BankSimError` is converted; anything else
propagates.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from bank_sim.exceptions import BankSimError, ErrorKind
from bank_sim.models import Account, OperationResult
from bank_sim.money import Amount


def credit(account: Account, amount: Amount) -> OperationResult:
    """Credit ``account`` and report the outcome."""
    return _run(account, lambda: account.credit(amount))


def debit(account: Account, amount: Amount) -> OperationResult:
    """Debit ``account`` and report the outcome."""
    return _run(account, lambda: account.debit(amount))


def transfer(source: Account, destination: Account, amount: Amount) -> OperationResult:
    """Transfer from ``source`` to ``destination`` and report the outcome.

    The returned balance is the source's balance.
    """
    return _run(source, lambda: source.transfer(destination, amount))


def _run(account: Account, operation: Callable[[], Decimal]) -> OperationResult:
    try:
        # Mutators return the balance read under the account lock
        balance = operation()
    except BankSimError as exc:
        kind = exc.kind or ErrorKind.INVALID_ARGUMENT
        return OperationResult.failure(account.balance, kind, str(exc))
    return OperationResult.success(balance)
