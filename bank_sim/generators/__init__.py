"""Seedable data generators."""

from bank_sim.generators.account import AccountGenerator
from bank_sim.generators.amount import AmountGenerator
from bank_sim.generators.base import BaseGenerator
from bank_sim.generators.pool import FakerPool

__all__ = [
    "AccountGenerator",
    "AmountGenerator",
    "BaseGenerator",
    "FakerPool",
]
