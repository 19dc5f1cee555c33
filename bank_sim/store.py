"""In-memory store for simulated accounts and their transaction log."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from bank_sim.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ReferentialIntegrityError,
)
from bank_sim.models import Account, Transaction, TransactionStatus
from bank_sim.money import ZERO


@dataclass
class SimulationStore:
    """Owns the account collection and an append-only transaction log.

    Accounts keep insertion order, which is the order the simulation
    iterates them in.
    """

    accounts: dict[str, Account] = field(default_factory=dict)
    transactions: list[Transaction] = field(default_factory=list)

    _account_transactions: dict[str, list[int]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add_account(self, account: Account) -> None:
        """Add an account to the store."""
        if account.account_id in self.accounts:
            raise DuplicateEntityError(f"Account {account.account_id} already exists")

        self.accounts[account.account_id] = account
        self._account_transactions[account.account_id] = []

    def get_account(self, account_id: str) -> Account:
        """Get an account by id."""
        try:
            return self.accounts[account_id]
        except KeyError:
            raise EntityNotFoundError(f"Account {account_id} not found") from None

    def record(self, transaction: Transaction) -> None:
        """Append a transaction to the log.

        Safe to call from several threads.
        """
        if transaction.account_id not in self.accounts:
            raise ReferentialIntegrityError(f"Account {transaction.account_id} not found")
        if (
            transaction.counterparty_account_id is not None
            and transaction.counterparty_account_id not in self.accounts
        ):
            raise ReferentialIntegrityError(
                f"Account {transaction.counterparty_account_id} not found"
            )

        with self._lock:
            idx = len(self.transactions)
            self.transactions.append(transaction)
            self._account_transactions[transaction.account_id].append(idx)

    def transactions_for(self, account_id: str) -> list[Transaction]:
        """Transactions initiated by an account, in log order."""
        if account_id not in self.accounts:
            raise EntityNotFoundError(f"Account {account_id} not found")
        return [self.transactions[i] for i in self._account_transactions[account_id]]

    def failed_transactions(self) -> list[Transaction]:
        return [t for t in self.transactions if t.status == TransactionStatus.FAILED]

    def total_balance(self) -> Decimal:
        """Sum of all account balances."""
        return sum((a.balance for a in self.accounts.values()), ZERO)

    def get_stats(self) -> dict[str, Any]:
        """Counts per transaction type and status, plus total balance."""
        by_type: dict[str, int] = {}
        by_status: dict[str, int] = {}
        for tx in self.transactions:
            by_type[tx.transaction_type.value] = by_type.get(tx.transaction_type.value, 0) + 1
            by_status[tx.status.value] = by_status.get(tx.status.value, 0) + 1

        return {
            "accounts": len(self.accounts),
            "transactions": len(self.transactions),
            "by_type": by_type,
            "by_status": by_status,
            "total_balance": self.total_balance(),
        }
