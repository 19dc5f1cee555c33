"""Output sinks for simulation reports."""

from bank_sim.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
