"""Account generator."""

from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from bank_sim.config import SimulationConfig
from bank_sim.generators.amount import AmountGenerator
from bank_sim.generators.base import BaseGenerator
from bank_sim.generators.pool import FakerPool
from bank_sim.models import Account, AccountType


class AccountGenerator(BaseGenerator):
    """Generate synthetic bank accounts.

    Account types are drawn uniformly. Opening dates fall between
    January 1st ``years_back`` years ago and yesterday.
    """

    ACCOUNT_TYPES = list(AccountType)

    def __init__(
        self,
        config: SimulationConfig | None = None,
        seed: int | None = None,
        pool: FakerPool | None = None,
        rng: random.Random | None = None,
        today: date | None = None,
    ) -> None:
        self.config = config or SimulationConfig()
        if seed is None:
            seed = self.config.seed
        super().__init__(seed, locale=self.config.locale, rng=rng)
        self.pool = pool or FakerPool(rng=self.rng, fake=self.fake)
        self.amounts = AmountGenerator(rng=self.rng)
        self._today = today

    @property
    def today(self) -> date:
        return self._today or date.today()

    def generate(self, number: int) -> Account:
        """Generate a single account.

        Parameters
        ----------
        number : int
            Sequence number; the account id is ``"Account {number}"``.

        Returns
        -------
        Account
            Generated account.
        """
        return Account(
            account_id=f"Account {number}",
            initial_balance=self.initial_balance(),
            holder_name=self.pool.name(),
            account_type=self.rng.choice(self.ACCOUNT_TYPES),
            opened_date=self.opened_date(),
        )

    def generate_batch(self, count: int, start: int = 1) -> Iterator[Account]:
        """Generate ``count`` accounts numbered from ``start``."""
        for number in range(start, start + count):
            yield self.generate(number)

    def initial_balance(self) -> Decimal:
        return self.amounts.between(
            self.config.min_initial_balance, self.config.max_initial_balance
        )

    def opened_date(self) -> date:
        """Random date in the configured window, strictly before today."""
        today = self.today
        start = date(today.year - self.config.years_back, 1, 1)
        days_range = (today - start).days
        opened = start + timedelta(days=self.rng.randrange(days_range))
        # randrange excludes days_range, so this only guards clock skew
        if opened >= today:
            opened = today - timedelta(days=1)
        return opened
