"""Shared fixtures for the costing test suite."""

import pytest

from asset_costing.calculators import AtrCalculator, QPlusPlusCalculator, ScpCalculator
from asset_costing.models.request import (
    AssetComponent,
    AssetCostRequest,
    CommonFields,
    ResourceAllocation,
)
from asset_costing.registry import build_default_registry


def make_component(name, *allocations):
    """Build a component from (location, allocation) pairs."""
    return AssetComponent(
        name=name,
        resource_model=[ResourceAllocation(loc, alloc) for loc, alloc in allocations],
    )


def make_request(
    asset_name="ATR",
    components=None,
    complexity="Medium",
    deployment_type="cloud",
    support_level=None,
    **specific_fields,
):
    """Helper to create an AssetCostRequest with minimal boilerplate."""
    if components is None:
        components = [make_component("ignition", ("India", 100))]
    return AssetCostRequest(
        asset_name=asset_name,
        complexity=complexity,
        common_fields=CommonFields(
            deployment_type=deployment_type, support_level=support_level
        ),
        asset_components=components,
        specific_fields=specific_fields,
    )


@pytest.fixture
def atr():
    return AtrCalculator()


@pytest.fixture
def qpp():
    return QPlusPlusCalculator()


@pytest.fixture
def scp():
    return ScpCalculator()


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def atr_request():
    """ATR request with the two standard components split 90/10 India/Australia."""
    return make_request(
        "ATR",
        components=[
            make_component("ignition", ("India", 90), ("Australia", 10)),
            make_component("automation configuration", ("India", 90), ("Australia", 10)),
        ],
        complexity="Medium",
        support_level="standard",
        licenseCount=10,
    )
