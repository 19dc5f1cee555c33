"""Configuration management for bank-sim."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal

from bank_sim.exceptions import ConfigurationError
from bank_sim.logging import LOG_LEVELS
from bank_sim.money import MAX_AMOUNT

OUTPUT_FORMATS = ("text", "json")
LOG_FORMATS = ("standard", "json")

ENV_PREFIX = "BANK_SIM_"


@dataclass
class SimulationConfig:
    """Settings for one simulation run.

    Defaults reproduce the classic run: 20 accounts opened with 10 to
    50 000, each receiving 100 transactions between -500 and 500, opened
    within the last 10 years.
    """

    num_accounts: int = 20
    transactions_per_account: int = 100
    min_initial_balance: Decimal = Decimal("10")
    max_initial_balance: Decimal = Decimal("50000")
    min_transaction_amount: Decimal = Decimal("-500")
    max_transaction_amount: Decimal = Decimal("500")
    years_back: int = 10
    seed: int | None = None
    workers: int = 1
    locale: str = "en_US"
    output_format: str = "text"
    log_level: str = "INFO"
    log_format: str = "standard"
    simulate_transfers: bool = True

    def validate(self) -> SimulationConfig:
        """Check ranges and choices.

        Returns
        -------
        SimulationConfig
            ``self``, for chaining.

        Raises
        ------
        ConfigurationError
            On the first invalid setting found.
        """
        if self.num_accounts < 0:
            raise ConfigurationError(f"num_accounts must be >= 0, got {self.num_accounts}")
        if self.transactions_per_account < 0:
            raise ConfigurationError(
                f"transactions_per_account must be >= 0, got {self.transactions_per_account}"
            )
        if self.min_initial_balance < 0:
            raise ConfigurationError(
                f"min_initial_balance must be >= 0, got {self.min_initial_balance}"
            )
        if self.min_initial_balance > self.max_initial_balance:
            raise ConfigurationError("min_initial_balance exceeds max_initial_balance")
        if self.min_transaction_amount > self.max_transaction_amount:
            raise ConfigurationError("min_transaction_amount exceeds max_transaction_amount")
        for name in (
            "min_initial_balance",
            "max_initial_balance",
            "min_transaction_amount",
            "max_transaction_amount",
        ):
            if abs(getattr(self, name)) > MAX_AMOUNT:
                raise ConfigurationError(f"{name} exceeds the maximum amount of {MAX_AMOUNT}")
        if self.years_back < 1:
            raise ConfigurationError(f"years_back must be >= 1, got {self.years_back}")
        if self.workers < 1:
            raise ConfigurationError(f"workers must be >= 1, got {self.workers}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Unknown output format: {self.output_format!r}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")
        return self

    @classmethod
    def from_env(cls) -> SimulationConfig:
        """Create config from ``BANK_SIM_*`` environment variables.

        Raises
        ------
        ConfigurationError
            If a numeric variable cannot be parsed.
        """
        defaults = cls()
        try:
            seed = _env("SEED")
            return cls(
                num_accounts=int(_env("ACCOUNTS", defaults.num_accounts)),
                transactions_per_account=int(
                    _env("TRANSACTIONS", defaults.transactions_per_account)
                ),
                min_initial_balance=Decimal(_env("MIN_BALANCE", defaults.min_initial_balance)),
                max_initial_balance=Decimal(_env("MAX_BALANCE", defaults.max_initial_balance)),
                min_transaction_amount=Decimal(
                    _env("MIN_AMOUNT", defaults.min_transaction_amount)
                ),
                max_transaction_amount=Decimal(
                    _env("MAX_AMOUNT", defaults.max_transaction_amount)
                ),
                years_back=int(_env("YEARS_BACK", defaults.years_back)),
                seed=int(seed) if seed else None,
                workers=int(_env("WORKERS", defaults.workers)),
                locale=_env("LOCALE", defaults.locale),
                output_format=_env("OUTPUT_FORMAT", defaults.output_format),
                log_level=_env("LOG_LEVEL", defaults.log_level),
                log_format=_env("LOG_FORMAT", defaults.log_format),
                simulate_transfers=_env("TRANSFERS", "true").lower() == "true",
            )
        except ArithmeticError as exc:
            raise ConfigurationError(f"Invalid decimal in environment: {exc}") from exc
        except ValueError as exc:
            raise ConfigurationError(f"Invalid value in environment: {exc}") from exc


def _env(name: str, default: object = None) -> str | None:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return None if default is None else str(default)
    return value
