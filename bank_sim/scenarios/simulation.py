"""Bank simulation scenario: create accounts, transact, then transfer."""

from __future__ import annotations

import logging
import random
import uuid
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from bank_sim.config import SimulationConfig
from bank_sim.exceptions import BankSimError
from bank_sim.generators import AccountGenerator, AmountGenerator
from bank_sim.models import Account, Transaction, TransactionStatus, TransactionType
from bank_sim.money import ZERO
from bank_sim.sinks import ConsoleSink
from bank_sim.store import SimulationStore

logger = logging.getLogger(__name__)


class BankSimulationScenario:
    """Drive a full simulation run against a set of generated accounts.

    The run has three phases:

    1. create ``num_accounts`` accounts with random attributes;
    2. apply ``transactions_per_account`` random credits/debits to each;
    3. transfer a random share of the source balance for every ordered
       pair of distinct accounts.

    A rejected operation is logged, recorded as a FAILED transaction and
    the run moves on. With the same seed the outcome is identical,
    whatever the number of workers.

    Parameters
    ----------
    config : SimulationConfig | None
        Run settings. Validated on construction.
    sink : ConsoleSink | None
        Where transaction lines and summaries are written. ``None``
        disables reporting.
    account_generator : AccountGenerator | None
        Override the account factory (mainly for tests).
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        sink: ConsoleSink | None = None,
        account_generator: AccountGenerator | None = None,
    ) -> None:
        self.config = (config or SimulationConfig()).validate()
        self.sink = sink
        self.store = SimulationStore()

        self._rng = random.Random(self.config.seed)
        self._account_gen = account_generator or AccountGenerator(
            self.config, rng=random.Random(self._rng.getrandbits(64))
        )
        self._transfer_amounts = AmountGenerator(rng=random.Random(self._rng.getrandbits(64)))

    def run(self) -> SimulationStore:
        """Run every phase and return the populated store."""
        logger.info(
            "Starting bank simulation: %d accounts, %d transactions each, seed=%s",
            self.config.num_accounts,
            self.config.transactions_per_account,
            self.config.seed,
        )

        self.create_accounts()
        self.simulate_transactions()
        if self.config.simulate_transfers:
            self.simulate_transfers()

        stats = self.store.get_stats()
        logger.info(
            "Simulation complete: %d accounts, %d transactions (%d failed), total balance %s",
            stats["accounts"],
            stats["transactions"],
            stats["by_status"].get(TransactionStatus.FAILED.value, 0),
            stats["total_balance"],
        )
        if self.sink is not None:
            self.sink.write_stats(stats)
        return self.store

    def create_accounts(self) -> list[Account]:
        """Generate and store the configured number of accounts."""
        created = []
        for number in range(1, self.config.num_accounts + 1):
            try:
                account = self._account_gen.generate(number)
                self.store.add_account(account)
            except BankSimError as exc:
                logger.warning("Account creation failed: %s", exc)
                continue
            created.append(account)

        logger.info("Created %d accounts", len(created))
        return created

    def simulate_transactions(self) -> None:
        """Apply random credits and debits to every stored account."""
        accounts = list(self.store.accounts.values())
        # Seeds are drawn up front so results do not depend on scheduling
        generators = [AmountGenerator(seed=self._rng.getrandbits(64)) for _ in accounts]

        if self.config.workers > 1 and len(accounts) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                batches = list(executor.map(self._process_account, accounts, generators))
        else:
            batches = [self._process_account(a, g) for a, g in zip(accounts, generators)]

        for account, batch in zip(accounts, batches):
            for tx in batch:
                self._record(tx, account)
            if self.sink is not None:
                self.sink.write_account_summary(account)

        logger.info(
            "Applied %d transactions across %d accounts",
            sum(len(b) for b in batches),
            len(accounts),
        )

    def simulate_transfers(self) -> None:
        """Transfer between every ordered pair of distinct accounts."""
        accounts = list(self.store.accounts.values())
        total_before = self.store.total_balance()
        count = 0

        for source in accounts:
            for destination in accounts:
                if source is destination:
                    continue
                amount = self._transfer_amounts.transfer_amount(source)
                tx = self.transfer(source, destination, amount, self._transfer_amounts)
                self._record(tx, source, destination)
                count += 1

        logger.info(
            "Attempted %d transfers, total balance %s -> %s",
            count,
            total_before,
            self.store.total_balance(),
        )

    def apply_transaction(
        self,
        account: Account,
        amount: Decimal,
        amounts: AmountGenerator,
    ) -> Transaction:
        """Credit a non-negative amount or debit the magnitude of a negative one."""
        if amount >= ZERO:
            tx_type, value, operation = TransactionType.CREDIT, amount, account.credit
        else:
            tx_type, value, operation = TransactionType.DEBIT, -amount, account.debit

        try:
            operation(value)
        except BankSimError as exc:
            return self._failed(account, tx_type, value, exc, amounts)
        return Transaction(
            transaction_id=_transaction_id(amounts),
            account_id=account.account_id,
            transaction_type=tx_type,
            amount=value,
            status=TransactionStatus.COMPLETED,
            balance_after=account.balance,
        )

    def transfer(
        self,
        source: Account,
        destination: Account,
        amount: Decimal,
        amounts: AmountGenerator,
    ) -> Transaction:
        """Attempt one transfer and describe the outcome."""
        try:
            source.transfer(destination, amount)
        except BankSimError as exc:
            return self._failed(
                source, TransactionType.TRANSFER, amount, exc, amounts, destination
            )
        return Transaction(
            transaction_id=_transaction_id(amounts),
            account_id=source.account_id,
            transaction_type=TransactionType.TRANSFER,
            amount=amount,
            status=TransactionStatus.COMPLETED,
            balance_after=source.balance,
            counterparty_account_id=destination.account_id,
        )

    def _process_account(self, account: Account, amounts: AmountGenerator) -> list[Transaction]:
        batch = []
        for _ in range(self.config.transactions_per_account):
            amount = amounts.transaction_amount(
                self.config.min_transaction_amount,
                self.config.max_transaction_amount,
            )
            batch.append(self.apply_transaction(account, amount, amounts))
        return batch

    def _failed(
        self,
        account: Account,
        tx_type: TransactionType,
        amount: Decimal,
        exc: BankSimError,
        amounts: AmountGenerator,
        destination: Account | None = None,
    ) -> Transaction:
        return Transaction(
            transaction_id=_transaction_id(amounts),
            account_id=account.account_id,
            transaction_type=tx_type,
            amount=amount,
            status=TransactionStatus.FAILED,
            balance_after=account.balance,
            counterparty_account_id=destination.account_id if destination else None,
            error_kind=exc.kind,
            message=str(exc),
        )

    def _record(
        self,
        tx: Transaction,
        account: Account,
        counterparty: Account | None = None,
    ) -> None:
        self.store.record(tx)
        if not tx.succeeded:
            label = "Transfer" if tx.transaction_type == TransactionType.TRANSFER else "Transaction"
            logger.warning("%s failed: %s", label, tx.message)
        if self.sink is not None:
            self.sink.write_transaction(tx, account, counterparty)


def _transaction_id(amounts: AmountGenerator) -> str:
    return uuid.UUID(int=amounts.rng.getrandbits(128), version=4).hex
