"""Tests for result-returning account operations."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from bank_sim import operations
from bank_sim.exceptions import ErrorKind
from bank_sim.models import Account, OperationResult


class TestCreditOperation:
    """Tests for operations.credit."""

    def test_success(self, account_a: Account) -> None:
        """Test success."""
        result = operations.credit(account_a, "5.25")

        assert result.ok is True
        assert result.error_kind is None
        assert result.balance == Decimal("105.25")

    def test_negative(self, account_a: Account) -> None:
        """Test negative."""
        result = operations.credit(account_a, -1)

        assert result.ok is False
        assert result.error_kind is ErrorKind.INVALID_ARGUMENT
        assert result.balance == Decimal("100.00")
        assert result.message


class TestDebitOperation:
    """Tests for operations.debit."""

    def test_success(self, account_a: Account) -> None:
        """Test success."""
        result = operations.debit(account_a, "40")
        assert result == OperationResult.success(Decimal("60.00"))

    def test_insufficient_funds(self, account_a: Account) -> None:
        """Test insufficient funds."""
        result = operations.debit(account_a, Decimal("150.00"))

        assert result.ok is False
        assert result.error_kind is ErrorKind.INSUFFICIENT_FUNDS
        assert result.balance == Decimal("100.00")


class TestTransferOperation:
    """Tests for operations.transfer."""

    def test_success(self, account_a: Account, account_b: Account) -> None:
        """Test success."""
        result = operations.transfer(account_a, account_b, Decimal("40.00"))

        assert result.ok is True
        assert result.balance == Decimal("60.00")
        assert account_b.balance == Decimal("60.00")

    @pytest.mark.parametrize(
        ("amount", "kind"),
        [
            (Decimal("100.01"), ErrorKind.INSUFFICIENT_FUNDS),
            (Decimal("-1"), ErrorKind.INVALID_ARGUMENT),
        ],
    )
    def test_failures_leave_balances(
        self, account_a: Account, account_b: Account, amount: Decimal, kind: ErrorKind
    ) -> None:
        """Test failures leave balances."""
        result = operations.transfer(account_a, account_b, amount)

        assert result.ok is False
        assert result.error_kind is kind
        assert account_a.balance == Decimal("100.00")
        assert account_b.balance == Decimal("20.00")

    def test_self_transfer(self, account_a: Account) -> None:
        """Test self transfer."""
        result = operations.transfer(account_a, account_a, Decimal("10.00"))

        assert result.ok is False
        assert result.error_kind is ErrorKind.INVALID_ARGUMENT
        assert account_a.balance == Decimal("100.00")


class TestOperationLimits:
    """Oversized amounts come back as results, never as raised errors."""

    def test_oversized_credit(self, account_a: Account) -> None:
        """Test a credit beyond the maximum amount is reported as invalid."""
        result = operations.credit(account_a, "1" + "0" * 26)

        assert result.ok is False
        assert result.error_kind is ErrorKind.INVALID_ARGUMENT
        assert result.balance == Decimal("100.00")

    def test_oversized_debit(self, account_a: Account) -> None:
        """Test a debit beyond the maximum amount is reported as invalid."""
        result = operations.debit(account_a, Decimal("1e27"))

        assert result.ok is False
        assert result.error_kind is ErrorKind.INVALID_ARGUMENT

    def test_oversized_transfer(self, account_a: Account, account_b: Account) -> None:
        """Test a transfer beyond the maximum amount is reported as invalid."""
        result = operations.transfer(account_a, account_b, Decimal("1e26"))

        assert result.ok is False
        assert result.error_kind is ErrorKind.INVALID_ARGUMENT
        assert account_b.balance == Decimal("20.00")


class TestResultBalance:
    """The reported balance is the one the mutator returned under its lock."""

    def test_success_uses_returned_balance(self) -> None:
        """Test the result carries the mutator's return value, not a later read."""
        account = MagicMock(spec=Account)
        account.credit.return_value = Decimal("105.00")
        account.balance = Decimal("999.00")

        result = operations.credit(account, "5")

        assert result.ok is True
        assert result.balance == Decimal("105.00")
