"""Immutable cost breakdown and response structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .enums import CostPeriod


@dataclass(frozen=True)
class EffortBreakdown:
    """Effort and cost contributed by one delivery location."""

    delivery_location: str
    effort_hours: float
    effort_amount: float
    effort_hours_description: str


@dataclass(frozen=True)
class CostBreakdown:
    """A single line item in a build or run cost breakdown.

    Error entries carry ``amount=0`` so they never distort totals.
    """

    cost_component_name: str
    amount: float
    description: str
    is_error: bool = False
    error_message: str = ""
    effort_hours: Optional[float] = None
    effort_hours_description: Optional[str] = None
    effort_breakdown: list[EffortBreakdown] = field(default_factory=list)

    @classmethod
    def error(cls, name: str, description: str, message: str) -> CostBreakdown:
        return cls(
            cost_component_name=name,
            amount=0.0,
            description=description,
            is_error=True,
            error_message=message,
        )


@dataclass(frozen=True)
class BuildCostResult:
    total: float
    breakdown: list[CostBreakdown]


@dataclass(frozen=True)
class RunCostResult:
    total: float
    breakdown: list[CostBreakdown]
    period: CostPeriod = CostPeriod.MONTHLY


@dataclass(frozen=True)
class BuildCost:
    total: float
    currency: str
    breakdown: list[CostBreakdown]


@dataclass(frozen=True)
class RunCost:
    total: float
    currency: str
    period: CostPeriod
    breakdown: list[CostBreakdown]


@dataclass(frozen=True)
class AssetCostResponse:
    """Top-level result of a cost calculation."""

    asset_name: str
    build_cost: BuildCost
    run_cost: RunCost
    estimation_date: datetime
