"""Pre-generated holder-name pool.

Faker calls cost a few microseconds each; the pool builds its names once
and then samples them with its own ``random.Random``::

    pool = FakerPool(seed=42)
    name = pool.name()
"""

from __future__ import annotations

import random

from faker import Faker


class FakerPool:
    """Pre-generated Faker values for fast, reproducible random selection.

    Parameters
    ----------
    locale : str
        Faker locale (default ``en_US``).
    seed : int | None
        Random seed for reproducibility.
    size : int
        Number of names to pre-generate.
    rng : random.Random | None
        Random source used for sampling. Defaults to one seeded with ``seed``.
    fake : Faker | None
        Already-seeded Faker to draw names from. ``locale`` and ``seed``
        then only affect sampling.
    """

    DEFAULT_SIZE = 500

    def __init__(
        self,
        locale: str = "en_US",
        seed: int | None = None,
        size: int = DEFAULT_SIZE,
        rng: random.Random | None = None,
        fake: Faker | None = None,
    ) -> None:
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")
        self._rng = rng or random.Random(seed)
        if fake is None:
            fake = Faker(locale)
            fake.seed_instance(seed if seed is not None else self._rng.getrandbits(64))

        self._names: list[str] = [fake.name() for _ in range(size)]

    def __len__(self) -> int:
        return len(self._names)

    def name(self) -> str:
        """Return a random full name."""
        return self._rng.choice(self._names)
