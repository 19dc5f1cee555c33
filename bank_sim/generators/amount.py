"""Monetary amount generator for transactions and transfers."""

from __future__ import annotations

import random
from decimal import Decimal

from bank_sim.generators.base import BaseGenerator
from bank_sim.models import Account
from bank_sim.money import CENT, ZERO, Amount, to_money


class AmountGenerator(BaseGenerator):
    """Generate cent-rounded amounts from an explicit random source."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        super().__init__(seed, rng=rng)

    def between(self, low: Amount, high: Amount) -> Decimal:
        """Uniform whole-cent amount in ``[low, high]``.

        Raises
        ------
        ValueError
            If ``low`` exceeds ``high``.
        """
        low_value = to_money(low)
        high_value = to_money(high)
        if low_value > high_value:
            raise ValueError(f"low ({low_value}) exceeds high ({high_value})")
        # Drawn in whole cents so the result is exact and never leaves the range
        span = int((high_value - low_value) / CENT)
        return low_value + CENT * self.rng.randint(0, span)

    def transaction_amount(self, low: Amount, high: Amount) -> Decimal:
        """Signed amount: ``>= 0`` is a credit, ``< 0`` a debit of its magnitude."""
        return self.between(low, high)

    def transfer_amount(self, account: Account) -> Decimal:
        """Uniform amount in ``[0, account.balance]``."""
        return self.between(ZERO, account.balance)
