"""Tests for console sink and serialization."""

import io
import json
from datetime import date, datetime
from decimal import Decimal

import pytest

from bank_sim.exceptions import ErrorKind
from bank_sim.models import Account, Transaction, TransactionStatus, TransactionType
from bank_sim.sinks import ConsoleSink
from bank_sim.sinks.serialization import account_to_dict, serialize_value, to_dict


def _tx(**kwargs) -> Transaction:
    defaults = dict(
        transaction_id="tx-1",
        account_id="Account A",
        transaction_type=TransactionType.CREDIT,
        amount=Decimal("12.50"),
        status=TransactionStatus.COMPLETED,
        balance_after=Decimal("1112.50"),
        timestamp=datetime(2024, 1, 2, 3, 4, 5),
    )
    defaults.update(kwargs)
    return Transaction(**defaults)


class TestSerialization:
    """Tests for serialization helpers."""

    def test_serialize_value(self) -> None:
        """Test serialize value."""
        assert serialize_value(Decimal("1.50")) == "1.50"
        assert serialize_value(TransactionType.DEBIT) == "DEBIT"
        assert serialize_value(date(2024, 1, 2)) == "2024-01-02"
        assert serialize_value(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05"
        assert serialize_value({"a": [Decimal("1")]}) == {"a": ["1"]}
        assert serialize_value(7) == 7

    def test_transaction_to_dict(self) -> None:
        """Test transaction to dict."""
        data = to_dict(_tx(error_kind=ErrorKind.INSUFFICIENT_FUNDS))

        assert data["transaction_type"] == "CREDIT"
        assert data["amount"] == "12.50"
        assert data["error_kind"] == "INSUFFICIENT_FUNDS"
        assert data["counterparty_account_id"] is None
        json.dumps(data)

    def test_account_to_dict(self, account_a: Account) -> None:
        """Test account to dict."""
        data = account_to_dict(account_a)

        assert data == {
            "account_id": "Account A",
            "holder_name": "Maria Garcia",
            "account_type": "CHECKING",
            "opened_date": "2020-06-15",
            "balance": "100.00",
        }
        assert to_dict(account_a) == data

    def test_other_values(self) -> None:
        """Test other values."""
        assert to_dict("plain") == {"value": "plain"}


class TestConsoleSinkText:
    """Human-readable output."""

    @pytest.fixture
    def stream(self) -> io.StringIO:
        return io.StringIO()

    def test_credit_line(self, stream: io.StringIO, make_account) -> None:
        """Test credit line."""
        account = make_account(balance="1112.50")
        ConsoleSink(stream).write_transaction(_tx(), account)

        assert stream.getvalue().strip() == (
            "Credit: 12.50, Balance: $1,112.50, Account Holder: Maria Garcia, Account Type: Checking"
        )

    def test_debit_line_shows_negative(self, stream: io.StringIO, account_a: Account) -> None:
        """Test debit line shows negative."""
        tx = _tx(transaction_type=TransactionType.DEBIT, balance_after=Decimal("87.50"))
        ConsoleSink(stream).write_transaction(tx, account_a)

        assert stream.getvalue().startswith("Debit: -12.50, Balance: $87.50")

    def test_transfer_line(self, stream: io.StringIO, account_a: Account, account_b: Account) -> None:
        """Test transfer line."""
        tx = _tx(transaction_type=TransactionType.TRANSFER, amount=Decimal("40"), counterparty_account_id="Account B")
        ConsoleSink(stream).write_transaction(tx, account_a, account_b)

        assert stream.getvalue().strip() == (
            "Transfer: $40.00 from Account A (Maria Garcia, Checking) "
            "to Account B (Maria Garcia, Checking)"
        )

    def test_failed_transaction(self, stream: io.StringIO, account_a: Account) -> None:
        """Test failed transaction."""
        tx = _tx(status=TransactionStatus.FAILED, message="Insufficient funds")
        ConsoleSink(stream).write_transaction(tx, account_a)

        assert stream.getvalue().strip() == "Transaction failed: Insufficient funds"

    def test_failed_transfer(self, stream: io.StringIO, account_a: Account) -> None:
        """Test failed transfer."""
        tx = _tx(status=TransactionStatus.FAILED, transaction_type=TransactionType.TRANSFER, message="nope")
        ConsoleSink(stream).write_transaction(tx, account_a)

        assert stream.getvalue().strip() == "Transfer failed: nope"

    def test_account_summary(self, stream: io.StringIO, account_a: Account) -> None:
        """Test account summary."""
        ConsoleSink(stream).write_account_summary(account_a)

        assert stream.getvalue().strip() == (
            "Account: Account A, Balance: $100.00, Account Holder: Maria Garcia, Account Type: Checking"
        )

    def test_counts(self, stream: io.StringIO, account_a: Account) -> None:
        """Test counts."""
        sink = ConsoleSink(stream)
        sink.write_transaction(_tx(), account_a)
        sink.write_transaction(_tx(), account_a)
        sink.write_transaction(_tx(status=TransactionStatus.FAILED), account_a)

        assert sink.counts == {"CREDIT": 2, "FAILED": 1}

    def test_stats(self, stream: io.StringIO) -> None:
        """Test stats."""
        ConsoleSink(stream).write_stats(
            {
                "accounts": 2,
                "transactions": 3,
                "by_type": {"CREDIT": 3},
                "by_status": {"COMPLETED": 2, "FAILED": 1},
                "total_balance": Decimal("1500"),
            }
        )
        out = stream.getvalue()

        assert "Simulation Summary" in out
        assert "failed: 1" in out
        assert "total balance: $1,500.00" in out

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture, account_a: Account) -> None:
        """Test defaults to stdout."""
        ConsoleSink().write_account_summary(account_a)
        assert "Account A" in capsys.readouterr().out

    def test_unknown_format(self) -> None:
        """Test unknown format."""
        with pytest.raises(ValueError):
            ConsoleSink(fmt="xml")


class TestConsoleSinkJson:
    """One JSON object per line."""

    def test_transaction(self, account_a: Account) -> None:
        """Test transaction."""
        stream = io.StringIO()
        ConsoleSink(stream, fmt="json").write_transaction(_tx(), account_a)

        data = json.loads(stream.getvalue())
        assert data["record"] == "transaction"
        assert data["amount"] == "12.50"
        assert data["status"] == "COMPLETED"

    def test_account(self, account_a: Account) -> None:
        """Test account."""
        stream = io.StringIO()
        ConsoleSink(stream, fmt="json").write_account_summary(account_a)

        data = json.loads(stream.getvalue())
        assert data["record"] == "account"
        assert data["balance"] == "100.00"

    def test_stats(self) -> None:
        """Test stats."""
        stream = io.StringIO()
        ConsoleSink(stream, fmt="json").write_stats(
            {"accounts": 1, "transactions": 0, "by_type": {}, "by_status": {}, "total_balance": Decimal("5")}
        )

        data = json.loads(stream.getvalue())
        assert data["record"] == "stats"
        assert data["total_balance"] == "5"
