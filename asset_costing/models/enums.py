from __future__ import annotations

from enum import Enum

from asset_costing.errors import PreconditionError


class ComplexityLevel(str, Enum):
    XSMALL = "xSmall"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    XLARGE = "xLarge"

    @property
    def rank(self) -> int:
        return _COMPLEXITY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ComplexityLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ComplexityLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ComplexityLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ComplexityLevel):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: object) -> ComplexityLevel:
        """Return the level for ``value`` or raise PreconditionError."""
        if isinstance(value, cls):
            return value
        for level in cls:
            if level.value == value:
                return level
        valid = ", ".join(level.value for level in cls)
        raise PreconditionError(
            f"Invalid complexity level: {value!r}. Expected one of: {valid}"
        )


_COMPLEXITY_ORDER = list(ComplexityLevel)


class DeploymentType(str, Enum):
    ON_PREMISE = "onPremise"
    CLOUD = "cloud"
    HYBRID = "hybrid"
    MANAGED = "managed"


class SupportLevel(str, Enum):
    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


class CostPeriod(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"
