"""Tests for the calculator registry."""

import pytest

from asset_costing.calculators import AtrCalculator, QPlusPlusCalculator, ScpCalculator
from asset_costing.errors import CalculatorNotFoundError
from asset_costing.registry import CalculatorRegistry
from conftest import make_request


class TestCalculatorRegistry:
    def test_default_asset_names(self, registry):
        assert registry.get_available_asset_names() == ["ATR", "QPlusPlus", "SCP"]
        assert len(registry) == 3

    def test_get_calculator_returns_instance(self, registry):
        assert isinstance(registry.get_calculator("ATR"), AtrCalculator)
        assert isinstance(registry.get_calculator("QPlusPlus"), QPlusPlusCalculator)
        assert isinstance(registry.get_calculator("SCP"), ScpCalculator)

    def test_unknown_asset_raises_not_found(self, registry):
        with pytest.raises(CalculatorNotFoundError) as exc_info:
            registry.get_calculator("UNKNOWN")
        assert str(exc_info.value) == "No calculator found for asset name: UNKNOWN"
        assert "UNKNOWN" not in registry

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            CalculatorRegistry([AtrCalculator(), AtrCalculator()])

    def test_registration_order_preserved(self):
        registry = CalculatorRegistry([ScpCalculator(), AtrCalculator()])
        assert registry.get_available_asset_names() == ["SCP", "ATR"]

    def test_calculate_asset_cost_dispatches(self, registry, atr_request):
        response = registry.calculate_asset_cost(atr_request)
        assert response.asset_name == "ATR"

    def test_calculate_asset_cost_unknown_asset(self, registry):
        with pytest.raises(CalculatorNotFoundError):
            registry.calculate_asset_cost(make_request("NOPE"))

    def test_scp_flat_pricing(self, registry):
        response = registry.calculate_asset_cost(make_request("SCP", complexity=None))
        assert response.build_cost.total == 5000
        assert response.run_cost.total == 500
        assert response.build_cost.breakdown[0].cost_component_name == "SCP Setup"
