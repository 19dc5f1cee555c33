"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from bank_sim.models import Account, AccountType


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def opened() -> date:
    """Opening date safely in the past."""
    return date(2020, 6, 15)


@pytest.fixture
def make_account(opened: date):
    """Factory for accounts with a given id and balance."""

    def _make(account_id: str = "Account 1", balance: str = "100.00") -> Account:
        return Account(
            account_id=account_id,
            initial_balance=Decimal(balance),
            holder_name="Maria Garcia",
            account_type=AccountType.CHECKING,
            opened_date=opened,
        )

    return _make


@pytest.fixture
def account_a(make_account) -> Account:
    """Account with 100.00."""
    return make_account("Account A", "100.00")


@pytest.fixture
def account_b(make_account) -> Account:
    """Account with 20.00."""
    return make_account("Account B", "20.00")
