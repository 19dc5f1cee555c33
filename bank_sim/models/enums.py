"""Enumeration types for simulated bank entities."""

from __future__ import annotations

from enum import Enum


class AccountType(str, Enum):
    SAVINGS = "SAVINGS"
    CHECKING = "CHECKING"
    MONEY_MARKET = "MONEY_MARKET"
    CERTIFICATE_OF_DEPOSIT = "CERTIFICATE_OF_DEPOSIT"
    RETIREMENT = "RETIREMENT"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``Certificate of Deposit``."""
        return _ACCOUNT_TYPE_LABELS[self]

    @classmethod
    def parse(cls, value: "AccountType | str") -> "AccountType":
        """Resolve a member from its value, name or display label.

        Raises
        ------
        ValueError
            If nothing matches.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text in (member.value, member.label) or text.upper().replace(" ", "_") == member.value:
                return member
        raise ValueError(f"Unknown account type: {value!r}")


_ACCOUNT_TYPE_LABELS = {
    AccountType.SAVINGS: "Savings",
    AccountType.CHECKING: "Checking",
    AccountType.MONEY_MARKET: "Money Market",
    AccountType.CERTIFICATE_OF_DEPOSIT: "Certificate of Deposit",
    AccountType.RETIREMENT: "Retirement",
}


class TransactionType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    TRANSFER = "TRANSFER"


class TransactionStatus(str, Enum):
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
