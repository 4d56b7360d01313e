"""Structural checks on a request's asset components."""

from __future__ import annotations

import logging
from collections import Counter

from asset_costing.models.request import AssetComponent

logger = logging.getLogger(__name__)

ALLOCATION_TOTAL = 100.0
ALLOCATION_TOLERANCE = 0.01


def validate_components(components: list[AssetComponent]) -> list[str]:
    """Return every problem found with ``components``; empty when valid."""
    logger.debug("Validating asset components...")
    errors: list[str] = []

    if not components:
        errors.append("No components specified")
        logger.warning("Validation failed: No components specified.")
        return errors

    counts = Counter(c.name for c in components)
    duplicates = [name for name, count in counts.items() if count > 1]
    if duplicates:
        msg = f"Duplicate component names found: {', '.join(duplicates)}"
        errors.append(msg)
        logger.warning(f"Validation failed: {msg}")

    for component in components:
        if not component.name:
            errors.append("Component missing name")
            logger.warning("Validation failed: Component missing name.")

        if not component.resource_model:
            comp_name = component.name or "unnamed"
            errors.append(f"Component {comp_name} has no resource allocation")
            logger.warning(
                f"Validation failed: Component {comp_name} has no resource allocation."
            )
            continue

        total_allocation = sum(r.allocation for r in component.resource_model)
        if abs(total_allocation - ALLOCATION_TOTAL) > ALLOCATION_TOLERANCE:
            errors.append(
                f"Component {component.name} resource allocations should sum to "
                f"100% (currently {total_allocation:g}%)"
            )
            logger.warning(
                f"Validation failed: Component {component.name} allocation sum "
                f"is {total_allocation:g}%."
            )

    if not errors:
        logger.debug("Component validation successful.")
    return errors
