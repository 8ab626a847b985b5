"""
Scenario simulators.

Each simulator turns a financial snapshot plus its scenario's parameters into
projection series and difference metrics through the shared
ScenarioSimulator protocol.

Key Components:
- protocols: The ScenarioSimulator contract
- career_change: Current salary versus a new salary
- investment_strategy: The same contribution in two vehicles
- major_purchase: Buying with a loan versus investing instead
"""

from .career_change import CareerChangeSimulator
from .investment_strategy import InvestmentStrategySimulator
from .major_purchase import MajorPurchaseSimulator
from .protocols import ScenarioSimulator

__all__ = [
    "ScenarioSimulator",
    "CareerChangeSimulator",
    "InvestmentStrategySimulator",
    "MajorPurchaseSimulator",
]
