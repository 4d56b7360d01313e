"""QPlusPlus (Q++) asset calculator.

Complexity is optional here: the top-level value is used if present, then
``specificFields.complexity``, and anything missing or unrecognized falls
back to Medium.
"""

from __future__ import annotations

from asset_costing.engine.base import BaseCalculator
from asset_costing.models.enums import ComplexityLevel as C
from asset_costing.models.enums import CostPeriod
from asset_costing.models.request import AssetCostRequest
from asset_costing.models.result import BuildCostResult, CostBreakdown, RunCostResult

BLEND_RATES: dict[str, dict[C, float]] = {
    "Australia": {C.XSMALL: 63, C.SMALL: 63, C.MEDIUM: 65, C.LARGE: 68, C.XLARGE: 72},
    "India": {C.XSMALL: 14, C.SMALL: 14, C.MEDIUM: 15, C.LARGE: 16, C.XLARGE: 17},
    "US": {C.XSMALL: 75, C.SMALL: 75, C.MEDIUM: 80, C.LARGE: 85, C.XLARGE: 90},
    "EU": {C.XSMALL: 70, C.SMALL: 70, C.MEDIUM: 75, C.LARGE: 80, C.XLARGE: 85},
    "APAC": {C.XSMALL: 60, C.SMALL: 60, C.MEDIUM: 65, C.LARGE: 70, C.XLARGE: 75},
    "UK": {C.XSMALL: 80, C.SMALL: 80, C.MEDIUM: 85, C.LARGE: 90, C.XLARGE: 95},
    "LATAM": {C.XSMALL: 50, C.SMALL: 50, C.MEDIUM: 55, C.LARGE: 60, C.XLARGE: 65},
}

EFFORT_HOURS: dict[str, dict[C, dict[str, float]]] = {
    "Frontend": {
        C.XSMALL: {"India": 25, "US": 20, "EU": 22, "APAC": 24},
        C.SMALL: {"India": 35, "US": 30, "EU": 32, "APAC": 34},
        C.MEDIUM: {"India": 45, "US": 40, "EU": 42, "APAC": 44},
        C.LARGE: {"India": 55, "US": 50, "EU": 52, "APAC": 54},
        C.XLARGE: {"India": 65, "US": 60, "EU": 62, "APAC": 64},
    },
    "Backend": {
        C.XSMALL: {"India": 30, "US": 25, "EU": 27, "APAC": 29},
        C.SMALL: {"India": 40, "US": 35, "EU": 37, "APAC": 39},
        C.MEDIUM: {"India": 50, "US": 45, "EU": 47, "APAC": 49},
        C.LARGE: {"India": 60, "US": 55, "EU": 57, "APAC": 59},
        C.XLARGE: {"India": 70, "US": 65, "EU": 67, "APAC": 69},
    },
    "Database": {
        C.XSMALL: {"India": 15, "US": 10, "EU": 12, "APAC": 14},
        C.SMALL: {"India": 25, "US": 20, "EU": 22, "APAC": 24},
        C.MEDIUM: {"India": 35, "US": 30, "EU": 32, "APAC": 34},
        C.LARGE: {"India": 45, "US": 40, "EU": 42, "APAC": 44},
        C.XLARGE: {"India": 55, "US": 50, "EU": 52, "APAC": 54},
    },
}

DATABASE_SIZE_MULTIPLIERS = {"small": 1, "medium": 2, "large": 3}
STORAGE_SETUP_COST = {"small": 500, "medium": 1000, "large": 2000}
STORAGE_HOSTING_COST = {"small": 100, "medium": 250, "large": 500}

DATABASE_SETUP_BASE = 1000
DATABASE_HOSTING_BASE = 200
MODULE_SETUP_COST = 750
DATA_INTEGRATION_COST = 1500
MONTHLY_SERVICE_COST = 1000
USER_LICENSE_FEE = 5


class QPlusPlusCalculator(BaseCalculator):
    asset_name = "QPlusPlus"
    blend_rates = BLEND_RATES
    effort_hours = EFFORT_HOURS
    complexity_required = False

    def calculate_build_cost(self, request: AssetCostRequest) -> BuildCostResult:
        complexity = self.resolve_complexity(request)
        database_size = self.optional_choice(request, "databaseSize", DATABASE_SIZE_MULTIPLIERS)
        storage = self.optional_choice(request, "storageRequirement", STORAGE_SETUP_COST)
        modules = self.optional_str_list(request, "modules")
        integrations = self.optional_non_negative_int(request, "dataIntegrations")

        breakdown = self.calculate_effort_based_costs(
            request.asset_components, complexity
        )

        if database_size is not None:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="Database Setup",
                    amount=DATABASE_SETUP_BASE * DATABASE_SIZE_MULTIPLIERS[database_size],
                    description=f"Database setup for {database_size} size",
                )
            )
        if modules:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="Module Setup",
                    amount=MODULE_SETUP_COST * len(modules),
                    description=f"Setup for modules: {', '.join(modules)}",
                )
            )
        if integrations:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="Data Integrations",
                    amount=DATA_INTEGRATION_COST * integrations,
                    description=f"Setup for {integrations} data integrations",
                )
            )
        if storage is not None:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="Storage Setup",
                    amount=STORAGE_SETUP_COST[storage],
                    description=f"Storage provisioning for {storage} requirement",
                )
            )

        total = self.calculate_total_from_breakdown(breakdown)
        return BuildCostResult(total=total, breakdown=breakdown)

    def calculate_run_cost(self, request: AssetCostRequest) -> RunCostResult:
        database_size = self.optional_choice(request, "databaseSize", DATABASE_SIZE_MULTIPLIERS)
        storage = self.optional_choice(request, "storageRequirement", STORAGE_HOSTING_COST)
        user_count = self.optional_positive_int(request, "userCount")
        support_level = request.common_fields.support_level or "basic"

        breakdown = [
            CostBreakdown(
                cost_component_name="Monthly Service",
                amount=MONTHLY_SERVICE_COST * self.get_support_level_multiplier(request),
                description=f"Monthly operational cost with {support_level} support",
            )
        ]
        if database_size is not None:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="Database Hosting",
                    amount=DATABASE_HOSTING_BASE * DATABASE_SIZE_MULTIPLIERS[database_size],
                    description=f"Database hosting for {database_size} size",
                )
            )
        if storage is not None:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="Storage Hosting",
                    amount=STORAGE_HOSTING_COST[storage],
                    description=f"Storage hosting for {storage} requirement",
                )
            )
        if user_count is not None:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="User Licensing",
                    amount=USER_LICENSE_FEE * user_count,
                    description=f"Monthly licensing for {user_count} users",
                )
            )

        total = self.calculate_total_from_breakdown(breakdown)
        return RunCostResult(total=total, breakdown=breakdown, period=CostPeriod.MONTHLY)
