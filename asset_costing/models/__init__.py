from .enums import ComplexityLevel, CostPeriod, DeploymentType, SupportLevel
from .request import AssetComponent, AssetCostRequest, CommonFields, ResourceAllocation
from .result import (
    AssetCostResponse,
    BuildCost,
    BuildCostResult,
    CostBreakdown,
    EffortBreakdown,
    RunCost,
    RunCostResult,
)

__all__ = [
    "AssetComponent",
    "AssetCostRequest",
    "AssetCostResponse",
    "BuildCost",
    "BuildCostResult",
    "CommonFields",
    "ComplexityLevel",
    "CostBreakdown",
    "CostPeriod",
    "DeploymentType",
    "EffortBreakdown",
    "ResourceAllocation",
    "RunCost",
    "RunCostResult",
    "SupportLevel",
]
