"""ATR asset calculator.

ATR is license based: run cost needs ``licenseCount`` in specificFields, and
complexity must be given explicitly at the top level of the request.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from asset_costing.engine.base import BaseCalculator
from asset_costing.models.enums import ComplexityLevel as C
from asset_costing.models.enums import CostPeriod
from asset_costing.models.request import AssetCostRequest
from asset_costing.models.result import BuildCostResult, CostBreakdown, RunCostResult

logger = logging.getLogger(__name__)

# Hourly blend rates in USD, location -> complexity -> rate
BLEND_RATES: dict[str, dict[C, float]] = {
    "Australia": {C.XSMALL: 63, C.SMALL: 63, C.MEDIUM: 65, C.LARGE: 68, C.XLARGE: 72},
    "India": {C.XSMALL: 14, C.SMALL: 14, C.MEDIUM: 15, C.LARGE: 16, C.XLARGE: 17},
}

# Nominal effort, component -> complexity -> location; scaled by working hours per day
EFFORT_HOURS: dict[str, dict[C, dict[str, float]]] = {
    "ignition": {
        C.XSMALL: {"India": 5, "Australia": 2},
        C.SMALL: {"India": 10, "Australia": 3},
        C.MEDIUM: {"India": 15, "Australia": 5},
        C.LARGE: {"India": 25, "Australia": 8},
        C.XLARGE: {"India": 40, "Australia": 12},
    },
    "automation configuration": {
        C.XSMALL: {"India": 8, "Australia": 2},
        C.SMALL: {"India": 15, "Australia": 4},
        C.MEDIUM: {"India": 25, "Australia": 6},
        C.LARGE: {"India": 40, "Australia": 10},
        C.XLARGE: {"India": 60, "Australia": 15},
    },
    "integration": {
        C.XSMALL: {"India": 4, "Australia": 2},
        C.SMALL: {"India": 8, "Australia": 3},
        C.MEDIUM: {"India": 12, "Australia": 4},
        C.LARGE: {"India": 20, "Australia": 6},
        C.XLARGE: {"India": 30, "Australia": 10},
    },
    "reporting": {
        C.XSMALL: {"India": 3, "Australia": 1},
        C.SMALL: {"India": 5, "Australia": 2},
        C.MEDIUM: {"India": 8, "Australia": 3},
        C.LARGE: {"India": 12, "Australia": 4},
        C.XLARGE: {"India": 18, "Australia": 6},
    },
}

# Monthly operational cost per location at 100% allocation
OPERATIONAL_RATES: dict[str, float] = {
    "Australia": 700,
    "India": 400,
}

MAINTENANCE_COST: dict[C, float] = {
    C.XSMALL: 250,
    C.SMALL: 500,
    C.MEDIUM: 1000,
    C.LARGE: 2000,
    C.XLARGE: 3000,
}

DEPLOYMENT_SETUP_COST = 2000
LICENSE_SETUP_COST = 500
LICENSE_MONTHLY_FEE = 100
CUSTOM_COMPONENTS_COST = 8000
BASE_SUPPORT_COST = 1000


class AtrCalculator(BaseCalculator):
    asset_name = "ATR"
    blend_rates = BLEND_RATES
    effort_hours = EFFORT_HOURS
    complexity_required = True

    def calculate_build_cost(self, request: AssetCostRequest) -> BuildCostResult:
        complexity = self.resolve_complexity(request)
        license_count = self.optional_positive_int(request, "licenseCount")
        has_custom = self.optional_bool(request, "hasCustomComponents")

        breakdown = self.calculate_effort_based_costs(
            request.asset_components, complexity
        )

        deployment_type = request.common_fields.deployment_type
        breakdown.append(
            CostBreakdown(
                cost_component_name="Deployment Setup",
                amount=DEPLOYMENT_SETUP_COST * self.get_deployment_type_multiplier(request),
                description=f"Deployment setup cost for {deployment_type} deployment",
            )
        )
        if license_count is not None:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="License Setup",
                    amount=LICENSE_SETUP_COST * license_count,
                    description=f"License setup for {license_count} licenses",
                )
            )
        if has_custom:
            breakdown.append(
                CostBreakdown(
                    cost_component_name="Custom Components",
                    amount=CUSTOM_COMPONENTS_COST,
                    description="Custom components development",
                )
            )

        total = self.calculate_total_from_breakdown(breakdown)
        return BuildCostResult(total=total, breakdown=breakdown)

    def calculate_run_cost(self, request: AssetCostRequest) -> RunCostResult:
        license_count = self.require_positive_int(request, "licenseCount")
        complexity = self.resolve_complexity(request)
        support_level = request.common_fields.support_level or "basic"

        breakdown = [
            CostBreakdown(
                cost_component_name="License Fees",
                amount=LICENSE_MONTHLY_FEE * license_count,
                description=f"Monthly license fee for {license_count} licenses",
            ),
            CostBreakdown(
                cost_component_name="Support",
                amount=BASE_SUPPORT_COST * self.get_support_level_multiplier(request),
                description=f"Support cost with {support_level} level",
            ),
        ]

        breakdown.extend(self._operational_costs(request))

        breakdown.append(
            CostBreakdown(
                cost_component_name="Maintenance",
                amount=MAINTENANCE_COST[complexity],
                description=f"Maintenance cost for {complexity.value} complexity",
            )
        )

        total = self.calculate_total_from_breakdown(breakdown)
        return RunCostResult(total=total, breakdown=breakdown, period=CostPeriod.MONTHLY)

    def _operational_costs(self, request: AssetCostRequest) -> list[CostBreakdown]:
        """Monthly operational cost per location, aggregated across all components.

        A location with no operational rate becomes an error line item.
        """
        costs: dict[str, float] = defaultdict(float)
        for component in request.asset_components:
            for resource in component.resource_model:
                costs[resource.location] += resource.allocation / 100

        breakdown: list[CostBreakdown] = []
        for location, share in costs.items():
            name = f"Operations - {location}"
            rate = OPERATIONAL_RATES.get(location)
            if rate is None:
                msg = f"No operational rate for location: {location}"
                logger.warning(msg)
                breakdown.append(
                    CostBreakdown.error(
                        name, f"Error calculating operational cost for {location}", msg
                    )
                )
                continue
            breakdown.append(
                CostBreakdown(
                    cost_component_name=name,
                    amount=rate * share,
                    description=f"Monthly operational cost for resources in {location}",
                )
            )
        return breakdown
