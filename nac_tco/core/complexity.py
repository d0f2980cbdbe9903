"""Complexity multiplier applied to both parties' costs and deployment time."""

from __future__ import annotations

from typing import Dict

from nac_tco.schemas.calculation import ComplexityFactors

# Share of the complexity overhead the reference (cloud-native) party still pays.
REFERENCE_COMPLEXITY_DAMPENING = 0.4

BASE_COMPLEXITY_SCALE: Dict[str, float] = {"low": 0.9, "medium": 1.0, "high": 1.3}
POLICY_COMPLEXITY_LOAD: Dict[str, float] = {"low": 0.05, "medium": 0.15, "high": 0.25}

PER_LOCATION_LOAD = 0.1
MAX_LOCATION_LOAD = 1.0
COMPLEX_AUTH_LOAD = 0.15
LEGACY_DEVICE_LOAD = 0.3
CLOUD_INTEGRATION_LOAD = 0.1


def compute_complexity_multiplier(
    network_complexity: str,
    has_multiple_locations: bool,
    location_count: int,
    has_complex_auth: bool,
    has_legacy_devices: bool,
    legacy_device_percentage: float,
    has_cloud_integration: bool,
    has_custom_policies: bool,
    policy_complexity: str,
) -> float:
    """
    Map environment flags to a cost/time multiplier.

    The base network complexity scales 1.0; every other flag then adds a
    fixed load on top, so the order matters (loads are not scaled by the
    base). There is no upper bound: a busy enough environment can exceed 2x.
    Inputs are assumed validated (location_count >= 1, percentage in 0..100).
    """
    multiplier = 1.0 * BASE_COMPLEXITY_SCALE.get(network_complexity, 1.0)

    if has_multiple_locations:
        # 10% per site beyond the first, capped at +100%
        multiplier += min(PER_LOCATION_LOAD * (location_count - 1), MAX_LOCATION_LOAD)

    if has_complex_auth:
        multiplier += COMPLEX_AUTH_LOAD

    if has_legacy_devices:
        multiplier += (legacy_device_percentage / 100) * LEGACY_DEVICE_LOAD

    if has_cloud_integration:
        multiplier += CLOUD_INTEGRATION_LOAD

    if has_custom_policies:
        multiplier += POLICY_COMPLEXITY_LOAD.get(policy_complexity, 0.0)

    return multiplier


def complexity_multiplier(factors: ComplexityFactors) -> float:
    """Multiplier for a ComplexityFactors bundle."""
    return compute_complexity_multiplier(
        network_complexity=factors.networkComplexity,
        has_multiple_locations=factors.hasMultipleLocations,
        location_count=factors.locationCount,
        has_complex_auth=factors.hasComplexAuthentication,
        has_legacy_devices=factors.hasLegacyDevices,
        legacy_device_percentage=factors.percentLegacyDevices,
        has_cloud_integration=factors.hasCloudIntegration,
        has_custom_policies=factors.hasCustomPolicies,
        policy_complexity=factors.policyComplexityLevel,
    )


def dampen_multiplier(raw_multiplier: float) -> float:
    """Multiplier for the reference party: it absorbs 60% of the overhead."""
    return 1 + (raw_multiplier - 1) * REFERENCE_COMPLEXITY_DAMPENING
