"""Account entity: identity plus a guarded, never-negative balance."""

from __future__ import annotations

import threading
from datetime import date, datetime
from decimal import Decimal

from bank_sim.exceptions import InsufficientFundsError, InvalidArgumentError
from bank_sim.models.enums import AccountType
from bank_sim.money import MAX_AMOUNT, ZERO, Amount, to_money


class Account:
    """Bank account with credit, debit and transfer operations.

    Identity fields are fixed at construction; the balance changes only
    through :meth:`credit`, :meth:`debit` and :meth:`transfer`. All amounts
    are rounded to cents before they are validated, so comparisons against
    the balance always use the rounded value.

    Each account carries its own lock. :meth:`transfer` takes both locks
    ordered by ``(account_id, id(account))``, so concurrent transfers in
    opposite directions cannot deadlock.

    Parameters
    ----------
    account_id : str
        Unique identifier, e.g. ``"Account 7"``.
    initial_balance : Decimal | int | float | str
        Opening balance; must be ``>= 0``.
    holder_name : str
        Display name of the account holder.
    account_type : AccountType | str
        Account category. Strings are resolved by value or label.
    opened_date : date
        Opening date, never in the future.

    Raises
    ------
    InvalidArgumentError
        If any argument violates the constraints above.
    """

    __slots__ = (
        "_account_id",
        "_holder_name",
        "_account_type",
        "_opened_date",
        "_balance",
        "_lock",
    )

    def __init__(
        self,
        account_id: str,
        initial_balance: Amount,
        holder_name: str,
        account_type: AccountType | str,
        opened_date: date,
    ) -> None:
        self._account_id = _require_text("account_id", account_id)
        self._holder_name = _require_text("holder_name", holder_name)
        self._account_type = _require_account_type(account_type)
        self._opened_date = _require_past_date(opened_date)

        balance = to_money(initial_balance)
        if balance < ZERO:
            raise InvalidArgumentError(
                f"Initial balance must not be negative, got {balance}"
            )
        self._balance = balance
        self._lock = threading.Lock()

    # --- Read-only views ---

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def opened_date(self) -> date:
        return self._opened_date

    @property
    def balance(self) -> Decimal:
        return self._balance

    # --- Mutators ---

    def credit(self, amount: Amount) -> Decimal:
        """Add ``amount`` to the balance.

        A zero amount is accepted and leaves the balance unchanged.

        Returns
        -------
        Decimal
            The balance after the credit.

        Raises
        ------
        InvalidArgumentError
            If the amount is negative or not a number, or the new balance
            would exceed ``MAX_AMOUNT``.
        """
        value = _require_non_negative(amount)
        with self._lock:
            self._check_capacity(value)
            self._apply_credit(value)
            return self._balance

    def debit(self, amount: Amount) -> Decimal:
        """Subtract ``amount`` from the balance.

        Returns
        -------
        Decimal
            The balance after the debit.

        Raises
        ------
        InvalidArgumentError
            If the amount is negative or not a number.
        InsufficientFundsError
            If the amount exceeds the current balance. Nothing is debited.
        """
        value = _require_non_negative(amount)
        with self._lock:
            self._check_funds(value)
            self._apply_debit(value)
            return self._balance

    def transfer(self, destination: Account, amount: Amount) -> Decimal:
        """Move ``amount`` from this account to ``destination``.

        The transfer is all-or-nothing: funds are checked before either
        balance is touched and both balances are updated while holding
        both locks.

        Returns
        -------
        Decimal
            This account's balance after the transfer.

        Raises
        ------
        InvalidArgumentError
            If ``destination`` is this account or not an Account, or the
            amount is negative or not a number, or the destination balance
            would exceed ``MAX_AMOUNT``.
        InsufficientFundsError
            If the amount exceeds this account's balance.
        """
        if not isinstance(destination, Account):
            raise InvalidArgumentError(
                f"Transfer destination must be an Account, got {type(destination).__name__}"
            )
        if destination is self:
            raise InvalidArgumentError(
                f"Cannot transfer from {self._account_id} to itself"
            )
        value = _require_non_negative(amount)

        first, second = sorted((self, destination), key=_lock_order)
        with first._lock, second._lock:
            self._check_funds(value)
            destination._check_capacity(value)
            self._apply_debit(value)
            destination._apply_credit(value)
            return self._balance

    # --- Internals (caller holds the lock) ---

    def _check_funds(self, value: Decimal) -> None:
        if value > self._balance:
            raise InsufficientFundsError(
                f"Insufficient funds in {self._account_id}: "
                f"balance {self._balance}, requested {value}",
                balance=self._balance,
                amount=value,
            )

    def _check_capacity(self, value: Decimal) -> None:
        if self._balance + value > MAX_AMOUNT:
            raise InvalidArgumentError(
                f"Crediting {value} to {self._account_id} would exceed the maximum balance of {MAX_AMOUNT}"
            )

    def _apply_credit(self, value: Decimal) -> None:
        self._balance += value

    def _apply_debit(self, value: Decimal) -> None:
        self._balance -= value

    def __repr__(self) -> str:
        return (
            f"Account(account_id={self._account_id!r}, balance={self._balance}, "
            f"holder_name={self._holder_name!r}, account_type={self._account_type.value}, "
            f"opened_date={self._opened_date.isoformat()})"
        )


def _lock_order(account: Account) -> tuple[str, int]:
    return (account.account_id, id(account))


def _require_non_negative(amount: Amount) -> Decimal:
    value = to_money(amount)
    if value < ZERO:
        raise InvalidArgumentError(f"Amount must not be negative, got {value}")
    return value


def _require_text(field_name: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field_name} must be a non-empty string")
    return value


def _require_account_type(value: AccountType | str) -> AccountType:
    try:
        return AccountType.parse(value)
    except ValueError as exc:
        raise InvalidArgumentError(str(exc)) from exc


def _require_past_date(value: date) -> date:
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        raise InvalidArgumentError(
            f"opened_date must be a date, got {type(value).__name__}"
        )
    if value > date.today():
        raise InvalidArgumentError(
            f"opened_date {value.isoformat()} is in the future"
        )
    return value
