"""Tests for enums and result models."""

import pytest

from asset_costing.errors import PreconditionError
from asset_costing.models.enums import ComplexityLevel
from asset_costing.models.request import AssetCostRequest, CommonFields
from asset_costing.models.result import CostBreakdown


class TestComplexityLevel:
    def test_ordering(self):
        levels = list(ComplexityLevel)
        assert levels == sorted(levels)
        assert ComplexityLevel.XSMALL < ComplexityLevel.SMALL < ComplexityLevel.MEDIUM
        assert ComplexityLevel.MEDIUM < ComplexityLevel.LARGE < ComplexityLevel.XLARGE
        assert ComplexityLevel.XLARGE >= ComplexityLevel.LARGE

    @pytest.mark.parametrize("value", ["xSmall", "Small", "Medium", "Large", "xLarge"])
    def test_parse_valid_values(self, value):
        assert ComplexityLevel.parse(value).value == value

    @pytest.mark.parametrize("value", ["medium", "XL", "", None, 3])
    def test_parse_rejects_other_values(self, value):
        with pytest.raises(PreconditionError):
            ComplexityLevel.parse(value)


class TestCostBreakdown:
    def test_error_entry(self):
        entry = CostBreakdown.error("ignition", "Error calculating", "boom")
        assert entry.is_error
        assert entry.amount == 0
        assert entry.error_message == "boom"
        assert entry.effort_breakdown == []

    def test_defaults(self):
        entry = CostBreakdown("Support", 1000, "Support cost")
        assert not entry.is_error
        assert entry.error_message == ""
        assert entry.effort_hours is None


class TestAssetCostRequest:
    def test_specific_returns_none_for_missing(self):
        request = AssetCostRequest(
            asset_name="ATR",
            common_fields=CommonFields(deployment_type="cloud"),
            asset_components=[],
        )
        assert request.specific("licenseCount") is None
