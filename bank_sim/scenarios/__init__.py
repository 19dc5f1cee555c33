"""Simulation scenarios."""

from bank_sim.scenarios.simulation import BankSimulationScenario

__all__ = ["BankSimulationScenario"]
