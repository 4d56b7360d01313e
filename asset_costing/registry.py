from __future__ import annotations

import logging
from typing import Iterable

from asset_costing.calculators import AtrCalculator, QPlusPlusCalculator, ScpCalculator
from asset_costing.engine.base import BaseCalculator
from asset_costing.errors import CalculatorNotFoundError
from asset_costing.models.request import AssetCostRequest
from asset_costing.models.result import AssetCostResponse

logger = logging.getLogger(__name__)


class CalculatorRegistry:
    """Maps asset names to calculators.

    Populated once in the constructor and read-only afterwards, so a single
    instance can be shared across concurrent requests.
    """

    def __init__(self, calculators: Iterable[BaseCalculator]):
        self._calculators: dict[str, BaseCalculator] = {}
        for calculator in calculators:
            name = calculator.get_asset_name()
            if name in self._calculators:
                raise ValueError(f"Calculator already registered for asset name: {name}")
            self._calculators[name] = calculator
            logger.debug(f"Registered calculator for asset: {name}")

    def get_calculator(self, asset_name: str) -> BaseCalculator:
        calculator = self._calculators.get(asset_name)
        if calculator is None:
            raise CalculatorNotFoundError(
                f"No calculator found for asset name: {asset_name}"
            )
        return calculator

    def get_available_asset_names(self) -> list[str]:
        return list(self._calculators)

    def calculate_asset_cost(self, request: AssetCostRequest) -> AssetCostResponse:
        calculator = self.get_calculator(request.asset_name)
        return calculator.calculate_costs(request)

    def __contains__(self, asset_name: object) -> bool:
        return asset_name in self._calculators

    def __len__(self) -> int:
        return len(self._calculators)


def build_default_registry() -> CalculatorRegistry:
    """Registry with every calculator shipped in this package."""
    return CalculatorRegistry(
        [AtrCalculator(), QPlusPlusCalculator(), ScpCalculator()]
    )
