from __future__ import annotations

import pytest

from nac_tco.domain.reference_data import get_reference_store
from nac_tco.exceptions import ReferenceDataNotFoundError

VENDORS = ["portnox", "cisco", "aruba", "forescout", "fortinet", "securew2", "ivanti", "microsoft"]
SIZES = ["small", "medium", "large", "enterprise"]


def test_every_vendor_has_costs_and_timeline_for_every_size(store):
    assert sorted(vendor.id for vendor in store.vendors()) == sorted(VENDORS)
    for vendor_id in VENDORS:
        for size in SIZES:
            assert store.cost_factors(vendor_id, size).annualLicensingCost > 0
            assert store.implementation_timeline(vendor_id, size).planningDays > 0


def test_cost_lookup_matches_catalog(store, cisco_small, portnox_small):
    assert store.cost_factors("cisco", "small") == cisco_small
    assert store.cost_factors("portnox", "small") == portnox_small


def test_cloud_vendors_need_no_hardware(store):
    for size in SIZES:
        assert store.cost_factors("portnox", size).initialHardwareCost == 0
        assert store.cost_factors("securew2", size).initialHardwareCost == 0


@pytest.mark.parametrize(
    "lookup",
    [
        lambda s: s.vendor("juniper"),
        lambda s: s.cost_factors("juniper", "small"),
        lambda s: s.cost_factors("cisco", "huge"),
        lambda s: s.implementation_timeline("cisco", "huge"),
        lambda s: s.size_band("huge"),
        lambda s: s.industry("mining"),
        lambda s: s.roi_metric("nope"),
    ],
)
def test_unknown_keys_raise_not_found(store, lookup):
    with pytest.raises(ReferenceDataNotFoundError) as excinfo:
        lookup(store)
    assert excinfo.value.status_code == 404
    assert isinstance(excinfo.value, KeyError)


def test_tables_are_read_only(store):
    with pytest.raises(TypeError):
        store.size_bands()["tiny"] = store.size_band("small")
    with pytest.raises(Exception):
        store.cost_factors("cisco", "small").trainingCost = 0


def test_store_is_shared():
    assert get_reference_store() is get_reference_store()


def test_size_bands(store):
    medium = store.size_band("medium")
    assert (medium.min, medium.max, medium.default) == (501, 2500, 1000)
    assert list(store.size_bands()) == SIZES


def test_industry_defaults_scale_with_head_count(store):
    defaults = store.industry_defaults("healthcare", 250)

    assert defaults.deviceCount == 1300  # 250 * 5.2
    assert defaults.downtimeCostHourly == 21250  # 8500 per 100 employees
    assert defaults.iotPercentage == 45
    assert "HIPAA" in defaults.complianceNeeds
    assert defaults.recommendedVendors[0] == "portnox"


def test_industry_defaults_round_up(store):
    defaults = store.industry_defaults("government", 3)

    assert defaults.deviceCount == 9  # ceil(8.4)
    assert defaults.downtimeCostHourly == 195


def test_roi_metrics_filter_by_category(store):
    financial = store.roi_metrics("financial")

    assert {metric.id for metric in financial} >= {"costSavings", "roi", "paybackPeriod", "npv", "irr"}
    assert all(metric.category == "financial" for metric in financial)
    assert len(store.roi_metrics()) == 20
    assert store.roi_metric("npv").includedInDefaultCalc is False


def test_feature_matrix_covers_every_vendor(store):
    matrix = store.feature_comparison()

    assert len(matrix) == 15
    for ratings in matrix.values():
        assert sorted(ratings) == sorted(VENDORS)
    assert store.feature("hardwareRequired")["portnox"].value == "No"
    assert store.feature("iotSupport")["forescout"].score == 5


def test_vendor_features_is_one_column(store):
    cisco = store.vendor_features("cisco")

    assert len(cisco) == 15
    assert cisco["implementationTime"].value == "3-6 months"
    assert cisco["totalCostOfOwnership"].score == 1


def test_benchmarks(store):
    benchmarks = store.industry_benchmarks()

    assert benchmarks.incidentResponseTime.without_nac == 8.4
    assert benchmarks.complianceCosts.automated == 450
    assert store.incident_frequency("enterprise") == 35
    assert store.average_breach_cost("healthcare") == 9200000


def test_breach_cost_falls_back_to_overall(store):
    assert store.average_breach_cost("government") == 4350000
    assert store.average_breach_cost("other") == 4350000


def test_value_drivers(store):
    assert store.value_drivers("retail") == ["costSavings", "timeToImplementation", "pciCompliance", "byodSupport"]
    assert store.value_drivers("other") == []


@pytest.mark.parametrize(
    "lookup",
    [
        lambda s: s.feature("warpDrive"),
        lambda s: s.vendor_features("juniper"),
        lambda s: s.value_drivers("mining"),
        lambda s: s.average_breach_cost("mining"),
        lambda s: s.incident_frequency("huge"),
    ],
)
def test_unknown_catalog_keys_raise_not_found(store, lookup):
    with pytest.raises(ReferenceDataNotFoundError):
        lookup(store)


def test_not_found_error_carries_kind_and_key(store):
    with pytest.raises(ReferenceDataNotFoundError) as excinfo:
        store.feature("warpDrive")

    assert excinfo.value.kind == "feature"
    assert excinfo.value.key == "warpDrive"
    assert excinfo.value.to_dict() == {
        "error": "reference_data_not_found",
        "detail": "Unknown feature: 'warpDrive'",
        "kind": "feature",
        "key": "warpDrive",
    }
