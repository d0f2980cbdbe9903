from __future__ import annotations

from math import isclose

from nac_tco.core.complexity import (
    REFERENCE_COMPLEXITY_DAMPENING,
    complexity_multiplier,
    compute_complexity_multiplier,
    dampen_multiplier,
)
from nac_tco.schemas.calculation import ComplexityFactors


def multiplier(**overrides) -> float:
    args = dict(
        network_complexity="medium",
        has_multiple_locations=False,
        location_count=1,
        has_complex_auth=False,
        has_legacy_devices=False,
        legacy_device_percentage=0.0,
        has_cloud_integration=False,
        has_custom_policies=False,
        policy_complexity="medium",
    )
    args.update(overrides)
    return compute_complexity_multiplier(**args)


def test_no_flags_is_neutral():
    assert multiplier() == 1.0


def test_base_network_complexity_scales():
    assert isclose(multiplier(network_complexity="low"), 0.9)
    assert isclose(multiplier(network_complexity="high"), 1.3)


def test_busy_environment_adds_up_to_2_22():
    """
    high base (1.3) + 4 extra sites (0.4) + auth (0.15) + 40% legacy (0.12)
    + cloud (0.10) + medium policies (0.15)
    """
    value = multiplier(
        network_complexity="high",
        has_multiple_locations=True,
        location_count=5,
        has_complex_auth=True,
        has_legacy_devices=True,
        legacy_device_percentage=40,
        has_cloud_integration=True,
        has_custom_policies=True,
        policy_complexity="medium",
    )
    assert isclose(value, 2.22, abs_tol=1e-9)


def test_location_load_is_capped_and_not_scaled_by_base():
    assert isclose(multiplier(has_multiple_locations=True, location_count=11), 2.0)
    assert isclose(multiplier(has_multiple_locations=True, location_count=50), 2.0)
    assert isclose(
        multiplier(network_complexity="low", has_multiple_locations=True, location_count=3),
        0.9 + 0.2,
    )


def test_flags_off_ignore_their_amounts():
    assert multiplier(location_count=20, legacy_device_percentage=100, policy_complexity="high") == 1.0


def test_no_upper_bound():
    value = multiplier(
        network_complexity="high",
        has_multiple_locations=True,
        location_count=30,
        has_complex_auth=True,
        has_legacy_devices=True,
        legacy_device_percentage=100,
        has_cloud_integration=True,
        has_custom_policies=True,
        policy_complexity="high",
    )
    assert isclose(value, 1.3 + 1.0 + 0.15 + 0.3 + 0.1 + 0.25)
    assert value > 2.0


def test_monotonic_in_locations_legacy_and_policy_level():
    by_location = [multiplier(has_multiple_locations=True, location_count=n) for n in range(1, 20)]
    assert by_location == sorted(by_location)

    by_legacy = [multiplier(has_legacy_devices=True, legacy_device_percentage=p) for p in range(0, 101, 10)]
    assert by_legacy == sorted(by_legacy)

    by_policy = [
        multiplier(has_custom_policies=True, policy_complexity=level) for level in ("low", "medium", "high")
    ]
    assert by_policy == sorted(by_policy)
    assert by_policy[0] < by_policy[-1]


def test_bundle_wrapper_matches_function():
    factors = ComplexityFactors(
        networkComplexity="high",
        hasMultipleLocations=True,
        locationCount=5,
        hasComplexAuthentication=True,
        hasLegacyDevices=True,
        percentLegacyDevices=40,
        hasCloudIntegration=True,
        hasCustomPolicies=True,
        policyComplexityLevel="medium",
    )
    assert isclose(complexity_multiplier(factors), 2.22)
    assert complexity_multiplier(ComplexityFactors()) == 1.0


def test_dampening_keeps_forty_percent_of_overhead():
    assert REFERENCE_COMPLEXITY_DAMPENING == 0.4
    assert dampen_multiplier(1.0) == 1.0
    assert isclose(dampen_multiplier(2.22), 1.488)
    assert isclose(dampen_multiplier(0.9), 0.96)
