from .base import BaseCalculator
from .effort import calculate_effort_based_component_cost, round2
from .validation import validate_components

__all__ = [
    "BaseCalculator",
    "calculate_effort_based_component_cost",
    "round2",
    "validate_components",
]
