"""Abstract calculator contract and the shared calculation pipeline.

Subclasses own their rate and effort tables and implement build and run cost.
Everything else (request checks, per-component error handling, totals,
multipliers and the response envelope) lives here so every asset type
behaves the same way.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from asset_costing.engine.effort import BlendRates, calculate_effort_based_component_cost
from asset_costing.engine.validation import validate_components
from asset_costing.errors import PreconditionError, RateLookupError, RequestValidationError
from asset_costing.models.enums import ComplexityLevel, DeploymentType, SupportLevel
from asset_costing.models.request import AssetComponent, AssetCostRequest
from asset_costing.models.result import (
    AssetCostResponse,
    BuildCost,
    BuildCostResult,
    CostBreakdown,
    RunCost,
    RunCostResult,
)

logger = logging.getLogger(__name__)

CURRENCY = "USD"

DEPLOYMENT_TYPE_MULTIPLIERS: dict[str, float] = {
    DeploymentType.ON_PREMISE.value: 1.2,
    DeploymentType.CLOUD.value: 1.0,
    DeploymentType.HYBRID.value: 1.3,
    DeploymentType.MANAGED.value: 1.5,
}

SUPPORT_LEVEL_MULTIPLIERS: dict[str, float] = {
    SupportLevel.BASIC.value: 1.0,
    SupportLevel.STANDARD.value: 1.2,
    SupportLevel.PREMIUM.value: 1.5,
}

DEFAULT_MULTIPLIER = 1.0

EffortTable = Mapping[str, Mapping[ComplexityLevel, Mapping[str, float]]]


class BaseCalculator(ABC):
    """Base class for every asset calculator.

    Subclasses set ``asset_name`` and, if they cost components by effort,
    ``blend_rates`` (location -> complexity -> hourly rate) and
    ``effort_hours`` (component -> complexity -> location -> nominal effort).
    """

    asset_name: str = ""
    blend_rates: BlendRates = {}
    effort_hours: EffortTable = {}
    # When False, a missing or unrecognized complexity falls back to Medium
    complexity_required: bool = True
    default_complexity: ComplexityLevel = ComplexityLevel.MEDIUM

    def get_asset_name(self) -> str:
        return self.asset_name

    @abstractmethod
    def calculate_build_cost(self, request: AssetCostRequest) -> BuildCostResult:
        """One-time setup cost."""

    @abstractmethod
    def calculate_run_cost(self, request: AssetCostRequest) -> RunCostResult:
        """Recurring operating cost."""

    def calculate_costs(self, request: AssetCostRequest) -> AssetCostResponse:
        """Validate the request, compute build and run cost, wrap the result."""
        logger.info(f"Calculating costs for asset: {request.asset_name}...")

        if request.asset_name != self.asset_name:
            msg = (
                f"Invalid asset name: {request.asset_name}. "
                f"This calculator supports: {self.asset_name}"
            )
            logger.error(msg)
            raise RequestValidationError(msg)

        validation_errors = validate_components(request.asset_components)
        if validation_errors:
            msg = f"Invalid request components: {', '.join(validation_errors)}"
            logger.error(msg)
            raise RequestValidationError(msg)

        logger.debug("Calculating build cost...")
        build = self.calculate_build_cost(request)
        logger.debug(f"Build cost calculated: {build.total}")

        logger.debug("Calculating run cost...")
        run = self.calculate_run_cost(request)
        logger.debug(f"Run cost calculated: {run.total} ({run.period.value})")

        response = AssetCostResponse(
            asset_name=self.asset_name,
            build_cost=BuildCost(
                total=build.total,
                currency=CURRENCY,
                breakdown=build.breakdown,
            ),
            run_cost=RunCost(
                total=run.total,
                currency=CURRENCY,
                period=run.period,
                breakdown=run.breakdown,
            ),
            estimation_date=datetime.now(tz=timezone.utc),
        )
        logger.info(
            f"Cost calculation finished for asset: {self.asset_name}. "
            f"Build: {response.build_cost.total}, Run: {response.run_cost.total}"
        )
        return response

    # Shared building blocks

    def resolve_complexity(self, request: AssetCostRequest) -> ComplexityLevel:
        """Read the request's complexity according to this calculator's policy."""
        raw = request.complexity
        if self.complexity_required:
            if raw is None:
                msg = f"Complexity is required for {self.asset_name} cost calculation"
                logger.error(msg)
                raise PreconditionError(msg)
            return ComplexityLevel.parse(raw)

        if raw is None:
            raw = request.specific("complexity")
        if raw is None:
            logger.debug(
                f"No complexity given, using {self.default_complexity.value}"
            )
            return self.default_complexity
        try:
            return ComplexityLevel.parse(raw)
        except PreconditionError:
            logger.warning(
                f"Unrecognized complexity {raw!r} for {self.asset_name}, "
                f"using {self.default_complexity.value}"
            )
            return self.default_complexity

    def get_effort_hours(
        self, component_name: str, complexity: ComplexityLevel
    ) -> Mapping[str, float]:
        by_complexity = self.effort_hours.get(component_name)
        if by_complexity is None:
            raise RateLookupError(
                f'No effort hours found for component "{component_name}"'
            )
        hours = by_complexity.get(complexity)
        if hours is None:
            raise RateLookupError(
                f'No effort hours found for component "{component_name}" '
                f'at complexity "{complexity.value}"'
            )
        return hours

    def calculate_effort_based_costs(
        self,
        components: Iterable[AssetComponent],
        complexity: ComplexityLevel,
    ) -> list[CostBreakdown]:
        """Cost each component; lookup failures become error line items."""
        breakdown: list[CostBreakdown] = []
        for component in components:
            try:
                effort_hours = self.get_effort_hours(component.name, complexity)
                breakdown.append(
                    calculate_effort_based_component_cost(
                        component, complexity, self.blend_rates, effort_hours
                    )
                )
            except RateLookupError as e:
                logger.warning(
                    f"Effort calculation failed for {component.name}: {e}"
                )
                breakdown.append(
                    CostBreakdown.error(
                        component.name,
                        f"Error calculating effort-based cost for {component.name}",
                        str(e),
                    )
                )
        return breakdown

    @staticmethod
    def calculate_total_from_breakdown(breakdown: Iterable[CostBreakdown]) -> float:
        return sum(item.amount for item in breakdown)

    @staticmethod
    def get_deployment_type_multiplier(request: AssetCostRequest) -> float:
        return DEPLOYMENT_TYPE_MULTIPLIERS.get(
            request.common_fields.deployment_type, DEFAULT_MULTIPLIER
        )

    @staticmethod
    def get_support_level_multiplier(request: AssetCostRequest) -> float:
        level = request.common_fields.support_level
        if level is None:
            return DEFAULT_MULTIPLIER
        return SUPPORT_LEVEL_MULTIPLIERS.get(level, DEFAULT_MULTIPLIER)

    # specificFields readers

    def require_positive_int(self, request: AssetCostRequest, key: str) -> int:
        value = request.specific(key)
        if value is None:
            msg = f"{key} is required in specificFields for {self.asset_name}"
            logger.error(msg)
            raise PreconditionError(msg)
        return self._positive_int(key, value)

    def optional_positive_int(
        self, request: AssetCostRequest, key: str
    ) -> Optional[int]:
        value = request.specific(key)
        if value is None:
            return None
        return self._positive_int(key, value)

    def optional_non_negative_int(self, request: AssetCostRequest, key: str) -> int:
        value = request.specific(key)
        if value is None:
            return 0
        if not _is_int(value) or value < 0:
            raise PreconditionError(
                f"{key} must be a non-negative integer, got {value!r}"
            )
        return int(value)

    def optional_choice(
        self, request: AssetCostRequest, key: str, choices: Mapping[str, Any]
    ) -> Optional[str]:
        value = request.specific(key)
        if value is None:
            return None
        if value not in choices:
            raise PreconditionError(
                f"{key} must be one of {', '.join(choices)}, got {value!r}"
            )
        return value

    def optional_bool(self, request: AssetCostRequest, key: str) -> bool:
        value = request.specific(key)
        if value is None:
            return False
        if not isinstance(value, bool):
            raise PreconditionError(f"{key} must be a boolean, got {value!r}")
        return value

    def optional_str_list(self, request: AssetCostRequest, key: str) -> list[str]:
        value = request.specific(key)
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise PreconditionError(f"{key} must be a list of strings, got {value!r}")
        return list(value)

    def _positive_int(self, key: str, value: Any) -> int:
        if not _is_int(value) or value <= 0:
            msg = f"{key} must be a positive integer, got {value!r}"
            logger.error(msg)
            raise PreconditionError(msg)
        return int(value)


def _is_int(value: Any) -> bool:
    # bool is an int subclass; reject it
    return isinstance(value, int) and not isinstance(value, bool)
