"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC
from functools import cached_property

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Each generator owns its random state: a ``random.Random`` instance
    and a ``Faker`` instance seeded from it. Nothing touches the
    module-level ``random`` functions, so two generators built with the
    same seed produce the same values regardless of what else runs.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    rng : random.Random | None
        Existing random source to share. Takes precedence over ``seed``.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng or random.Random(seed)
        self.locale = locale
        self._faker_seed = self.rng.getrandbits(64)

    @cached_property
    def fake(self) -> Faker:
        """Faker instance, created on first use."""
        fake = Faker(self.locale)
        fake.seed_instance(self._faker_seed)
        return fake
