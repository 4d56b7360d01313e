"""Pydantic request/response models for the HTTP layer.

JSON uses camelCase keys; the core works on the dataclasses in
``asset_costing.models``.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from asset_costing.models.enums import CostPeriod, DeploymentType, SupportLevel
from asset_costing.models.request import (
    AssetComponent,
    AssetCostRequest,
    CommonFields,
    ResourceAllocation,
)
from asset_costing.models.result import AssetCostResponse


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResourceAllocationModel(CamelModel):
    location: str = Field(min_length=1, examples=["India"])
    allocation: float = Field(ge=0, le=100, description="Allocation percentage (0-100)")


class AssetComponentModel(CamelModel):
    name: str = Field(min_length=1, examples=["ignition"])
    resource_model: list[ResourceAllocationModel] = Field(
        min_length=1,
        description="Resource allocation by location (must total 100%)",
    )


class CommonFieldsModel(CamelModel):
    deployment_type: DeploymentType
    region: Optional[str] = None
    support_level: Optional[SupportLevel] = None


class CostRequestModel(CamelModel):
    asset_name: str = Field(examples=["ATR"])
    complexity: Optional[str] = Field(
        default=None,
        description="Complexity level (xSmall, Small, Medium, Large, xLarge); required for ATR",
    )
    common_fields: CommonFieldsModel
    asset_components: list[AssetComponentModel] = Field(min_length=1)
    specific_fields: dict[str, Any] = Field(
        default_factory=dict,
        description="Asset-specific fields, e.g. licenseCount for ATR run cost",
    )

    def to_domain(self) -> AssetCostRequest:
        support = self.common_fields.support_level
        return AssetCostRequest(
            asset_name=self.asset_name,
            complexity=self.complexity,
            common_fields=CommonFields(
                deployment_type=self.common_fields.deployment_type.value,
                region=self.common_fields.region,
                support_level=support.value if support is not None else None,
            ),
            asset_components=[
                AssetComponent(
                    name=c.name,
                    resource_model=[
                        ResourceAllocation(location=r.location, allocation=r.allocation)
                        for r in c.resource_model
                    ],
                )
                for c in self.asset_components
            ],
            specific_fields=dict(self.specific_fields),
        )


class EffortBreakdownModel(CamelModel):
    delivery_location: str
    effort_hours: float
    effort_amount: float
    effort_hours_description: str


class CostBreakdownModel(CamelModel):
    cost_component_name: str
    amount: float
    description: str
    is_error: bool = False
    error_message: str = ""
    effort_hours: Optional[float] = None
    effort_hours_description: Optional[str] = None
    effort_breakdown: list[EffortBreakdownModel] = Field(default_factory=list)


class BuildCostModel(CamelModel):
    total: float
    currency: str
    breakdown: list[CostBreakdownModel]


class RunCostModel(CamelModel):
    total: float
    currency: str
    period: CostPeriod
    breakdown: list[CostBreakdownModel]


class AssetCostResponseModel(CamelModel):
    asset_name: str
    build_cost: BuildCostModel
    run_cost: RunCostModel
    estimation_date: datetime

    @classmethod
    def from_domain(cls, response: AssetCostResponse) -> AssetCostResponseModel:
        return cls.model_validate(asdict(response))


class AssetNamesResponse(CamelModel):
    asset_names: list[str]


class HealthResponse(BaseModel):
    status: str
    uptime: float
    timestamp: datetime
