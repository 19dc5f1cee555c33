"""Console sink for simulation reports."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from bank_sim.models import Account, Transaction, TransactionType
from bank_sim.money import format_currency
from bank_sim.sinks.serialization import account_to_dict, to_dict


class ConsoleSink:
    """Write transaction lines and account summaries to a text stream."""

    def __init__(self, stream: TextIO | None = None, fmt: str = "text") -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Output stream (default: ``sys.stdout`` at write time).
        fmt : str
            ``"text"`` for human-readable lines, ``"json"`` for one JSON
            object per line.
        """
        if fmt not in ("text", "json"):
            raise ValueError(f"Unknown format: {fmt!r}")
        self._stream = stream
        self.fmt = fmt
        self._counts: dict[str, int] = {}

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def write_transaction(
        self,
        transaction: Transaction,
        account: Account,
        counterparty: Account | None = None,
    ) -> None:
        """Write one transaction outcome."""
        key = transaction.transaction_type.value if transaction.succeeded else "FAILED"
        self._counts[key] = self._counts.get(key, 0) + 1

        if self.fmt == "json":
            self._emit_json({"record": "transaction", **to_dict(transaction)})
        elif not transaction.succeeded:
            label = "Transfer" if transaction.transaction_type == TransactionType.TRANSFER else "Transaction"
            self._emit(f"{label} failed: {transaction.message}")
        elif transaction.transaction_type == TransactionType.TRANSFER and counterparty is not None:
            self._emit(
                f"Transfer: {format_currency(transaction.amount)} "
                f"from {account.account_id} ({account.holder_name}, {account.account_type.label}) "
                f"to {counterparty.account_id} ({counterparty.holder_name}, {counterparty.account_type.label})"
            )
        else:
            shown = transaction.amount
            if transaction.transaction_type == TransactionType.DEBIT:
                shown = -shown
            self._emit(
                f"{transaction.transaction_type.value.title()}: {shown}, "
                f"Balance: {format_currency(transaction.balance_after)}, "
                f"Account Holder: {account.holder_name}, "
                f"Account Type: {account.account_type.label}"
            )

    def write_account_summary(self, account: Account) -> None:
        """Write the current state of an account."""
        if self.fmt == "json":
            self._emit_json({"record": "account", **account_to_dict(account)})
            return
        self._emit(
            f"Account: {account.account_id}, "
            f"Balance: {format_currency(account.balance)}, "
            f"Account Holder: {account.holder_name}, "
            f"Account Type: {account.account_type.label}"
        )

    def write_stats(self, stats: dict[str, Any]) -> None:
        """Write the end-of-run statistics."""
        if self.fmt == "json":
            self._emit_json({"record": "stats", **to_dict(stats)})
            return
        self._emit("=" * 60)
        self._emit("Simulation Summary")
        self._emit("=" * 60)
        self._emit(f"  accounts: {stats['accounts']}")
        self._emit(f"  transactions: {stats['transactions']}")
        for status, count in sorted(stats["by_status"].items()):
            self._emit(f"  {status.lower()}: {count}")
        self._emit(f"  total balance: {format_currency(stats['total_balance'])}")

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def _emit(self, line: str) -> None:
        print(line, file=self.stream)

    def _emit_json(self, data: dict) -> None:
        self._emit(json.dumps(data, ensure_ascii=False, default=str))
