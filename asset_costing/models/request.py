from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ResourceAllocation:
    """Share of a component's work (percentage, 0-100) delivered from one location."""

    location: str
    allocation: float


@dataclass
class AssetComponent:
    """A named deliverable piece of an asset and its resource model."""

    name: str
    resource_model: list[ResourceAllocation] = field(default_factory=list)


@dataclass
class CommonFields:
    """Fields shared by every asset type.

    Values are kept as plain strings so that unrecognized deployment types or
    support levels fall through to the default multiplier.
    """

    deployment_type: str
    region: Optional[str] = None
    support_level: Optional[str] = None


@dataclass
class AssetCostRequest:
    """Input to a single cost calculation.

    ``specific_fields`` is intentionally untyped: each calculator reads and
    checks the keys it needs.
    """

    asset_name: str
    common_fields: CommonFields
    asset_components: list[AssetComponent]
    specific_fields: dict[str, Any] = field(default_factory=dict)
    complexity: Optional[str] = None

    def specific(self, key: str) -> Any:
        """Return a specific field value, or None if absent."""
        return (self.specific_fields or {}).get(key)
