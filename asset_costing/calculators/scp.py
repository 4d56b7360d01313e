"""SCP asset calculator. Flat placeholder pricing until SCP rate tables exist."""

from __future__ import annotations

from asset_costing.engine.base import BaseCalculator
from asset_costing.models.enums import CostPeriod
from asset_costing.models.request import AssetCostRequest
from asset_costing.models.result import BuildCostResult, CostBreakdown, RunCostResult

SETUP_COST = 5000
MONTHLY_MAINTENANCE_COST = 500


class ScpCalculator(BaseCalculator):
    asset_name = "SCP"
    complexity_required = False

    def calculate_build_cost(self, request: AssetCostRequest) -> BuildCostResult:
        breakdown = [
            CostBreakdown(
                cost_component_name="SCP Setup",
                amount=SETUP_COST,
                description="Initial setup cost for SCP asset",
            )
        ]
        return BuildCostResult(
            total=self.calculate_total_from_breakdown(breakdown), breakdown=breakdown
        )

    def calculate_run_cost(self, request: AssetCostRequest) -> RunCostResult:
        breakdown = [
            CostBreakdown(
                cost_component_name="SCP Monthly Maintenance",
                amount=MONTHLY_MAINTENANCE_COST,
                description="Monthly running cost for SCP asset",
            )
        ]
        return RunCostResult(
            total=self.calculate_total_from_breakdown(breakdown),
            breakdown=breakdown,
            period=CostPeriod.MONTHLY,
        )
