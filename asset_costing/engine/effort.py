"""Effort-based cost formula shared by every calculator.

For each location in a component's resource model:

    hours  = (allocation / 100) * working_hours_per_day(location) * effort_hours[location]
    amount = round2(hours * blend_rate[location][complexity])

Amounts are rounded per location before they are summed, so the per-location
figures in the breakdown add up exactly to the component total.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping

from asset_costing.errors import RateLookupError
from asset_costing.models.enums import ComplexityLevel
from asset_costing.models.request import AssetComponent
from asset_costing.models.result import CostBreakdown, EffortBreakdown

logger = logging.getLogger(__name__)

BlendRates = Mapping[str, Mapping[ComplexityLevel, float]]

# Nominal working day length per delivery location
WORKING_HOURS_PER_DAY: dict[str, float] = {
    "Australia": 8,
    "India": 9,
    "US": 8,
    "UK": 8,
    "EU": 8,
    "APAC": 8,
    "LATAM": 8,
}

_CENTS = Decimal("0.01")


def round2(value: float) -> float:
    """Round half-up to 2 decimal places on the exact binary value of the float."""
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def get_working_hours(location: str) -> float:
    hours = WORKING_HOURS_PER_DAY.get(location)
    if hours is None:
        logger.error(f"Unknown location encountered: {location}")
        raise RateLookupError(f"Unknown location: {location}")
    return hours


def calculate_effort_based_component_cost(
    component: AssetComponent,
    complexity: ComplexityLevel,
    blend_rates: BlendRates,
    effort_hours: Mapping[str, float],
) -> CostBreakdown:
    """Cost one component from its resource model, blend rates and effort hours.

    Raises RateLookupError when a blend rate, working-hours entry or effort
    hours value is missing for any location in the resource model.
    """
    logger.debug(
        f"Calculating effort-based cost for component: {component.name}, "
        f"Complexity: {complexity.value}"
    )
    total_amount = 0.0
    total_effort_hours = 0.0
    effort_breakdown: list[EffortBreakdown] = []

    for resource in component.resource_model:
        location = resource.location
        logger.debug(
            f"Processing allocation for location: {location} ({resource.allocation}%)"
        )

        blend_rate = blend_rates.get(location, {}).get(complexity)
        if blend_rate is None:
            msg = (
                f'Blend rate not found for location "{location}" '
                f'at complexity "{complexity.value}"'
            )
            logger.error(msg)
            raise RateLookupError(msg)

        working_hours = get_working_hours(location)

        nominal_hours = effort_hours.get(location)
        if nominal_hours is None:
            msg = (
                f'Effort hours not found for component "{component.name}" '
                f'at location "{location}"'
            )
            logger.error(msg)
            raise RateLookupError(msg)

        location_hours = (resource.allocation / 100) * working_hours * nominal_hours
        amount = round2(location_hours * blend_rate)

        total_amount += amount
        total_effort_hours += location_hours

        logger.debug(
            f"  Location: {location}, Hours: {location_hours:.2f}, "
            f"Rate: {blend_rate}, Amount: {amount}"
        )
        effort_breakdown.append(
            EffortBreakdown(
                delivery_location=location,
                effort_hours=location_hours,
                effort_amount=amount,
                effort_hours_description=(
                    f"{location_hours:.2f} hours in {location} at {blend_rate}/hour"
                ),
            )
        )

    logger.debug(
        f"Finished effort calculation for {component.name}. "
        f"Total Hours: {total_effort_hours:.2f}, Total Amount: {total_amount:.2f}"
    )
    return CostBreakdown(
        cost_component_name=component.name,
        amount=total_amount,
        description=(
            f"Development effort for {component.name} at {complexity.value} complexity"
        ),
        effort_hours=total_effort_hours,
        effort_hours_description=(
            f"Total: {total_effort_hours:.2f} hours across all locations"
        ),
        effort_breakdown=effort_breakdown,
    )
