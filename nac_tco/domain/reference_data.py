"""Read-only lookups over the vendor, size band, industry, benchmark and ROI metric tables."""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from nac_tco.data.benchmarks import INDUSTRY_BENCHMARKS, INDUSTRY_VALUE_DRIVERS
from nac_tco.data.features import FEATURE_COMPARISON
from nac_tco.data.industries import INDUSTRY_PROFILES
from nac_tco.data.roi_metrics import ROI_METRICS
from nac_tco.data.vendors import SIZE_BANDS, VENDOR_COSTS, VENDOR_DETAILS, VENDOR_IMPLEMENTATION
from nac_tco.exceptions import ReferenceDataNotFoundError
from nac_tco.schemas.reference import (
    CostFactors,
    FeatureRating,
    ImplementationTimeline,
    IndustryBenchmarks,
    IndustryDefaults,
    IndustryProfile,
    RoiMetric,
    SizeBand,
    VendorDetails,
)

logger = logging.getLogger(__name__)


def _freeze(table: Mapping) -> Mapping:
    return MappingProxyType(
        {key: _freeze(value) if isinstance(value, Mapping) else value for key, value in table.items()}
    )


class ReferenceDataStore:
    """
    Immutable catalog keyed by vendor id, size band, industry id and feature id.

    Records are frozen pydantic models and the tables are mapping proxies,
    so one instance can be shared between threads without locking.
    Every lookup on an unknown key raises ReferenceDataNotFoundError.
    """

    def __init__(
        self,
        vendors: Mapping[str, VendorDetails],
        costs: Mapping[str, Mapping[str, CostFactors]],
        timelines: Mapping[str, Mapping[str, ImplementationTimeline]],
        size_bands: Mapping[str, SizeBand],
        industries: Mapping[str, IndustryProfile],
        roi_metrics: Iterable[RoiMetric],
        features: Mapping[str, Mapping[str, FeatureRating]],
        benchmarks: IndustryBenchmarks,
        value_drivers: Mapping[str, Sequence[str]],
    ) -> None:
        self._vendors = _freeze(vendors)
        self._costs = _freeze(costs)
        self._timelines = _freeze(timelines)
        self._size_bands = _freeze(size_bands)
        self._industries = _freeze(industries)
        self._roi_metrics = tuple(roi_metrics)
        self._features = _freeze(features)
        self._benchmarks = benchmarks
        self._value_drivers = _freeze({key: tuple(ids) for key, ids in value_drivers.items()})

    @classmethod
    def default(cls) -> "ReferenceDataStore":
        return cls(
            vendors=VENDOR_DETAILS,
            costs=VENDOR_COSTS,
            timelines=VENDOR_IMPLEMENTATION,
            size_bands=SIZE_BANDS,
            industries=INDUSTRY_PROFILES,
            roi_metrics=ROI_METRICS,
            features=FEATURE_COMPARISON,
            benchmarks=INDUSTRY_BENCHMARKS,
            value_drivers=INDUSTRY_VALUE_DRIVERS,
        )

    # --- vendors ---

    def vendor(self, vendor_id: str) -> VendorDetails:
        try:
            return self._vendors[vendor_id]
        except KeyError:
            raise ReferenceDataNotFoundError("vendor", vendor_id) from None

    def vendors(self) -> List[VendorDetails]:
        return list(self._vendors.values())

    def cost_factors(self, vendor_id: str, size_band: str) -> CostFactors:
        """Lookup ``vendorId x sizeBand -> CostFactors``."""
        by_size = self._vendor_table(self._costs, vendor_id)
        try:
            return by_size[size_band]
        except KeyError:
            raise ReferenceDataNotFoundError("size band", size_band) from None

    def implementation_timeline(self, vendor_id: str, size_band: str) -> ImplementationTimeline:
        by_size = self._vendor_table(self._timelines, vendor_id)
        try:
            return by_size[size_band]
        except KeyError:
            raise ReferenceDataNotFoundError("size band", size_band) from None

    def _vendor_table(self, table: Mapping[str, Mapping], vendor_id: str) -> Mapping:
        try:
            return table[vendor_id]
        except KeyError:
            raise ReferenceDataNotFoundError("vendor", vendor_id) from None

    # --- size bands ---

    def size_band(self, size: str) -> SizeBand:
        try:
            return self._size_bands[size]
        except KeyError:
            raise ReferenceDataNotFoundError("size band", size) from None

    def size_bands(self) -> Mapping[str, SizeBand]:
        return self._size_bands

    # --- industries ---

    def industry(self, industry_id: str) -> IndustryProfile:
        try:
            return self._industries[industry_id]
        except KeyError:
            raise ReferenceDataNotFoundError("industry", industry_id) from None

    def industries(self) -> List[IndustryProfile]:
        return list(self._industries.values())

    def industry_defaults(self, industry_id: str, employee_count: int) -> IndustryDefaults:
        """Scale an industry's per-employee benchmarks to a head count.

        Device count uses the device-density benchmark; the downtime rate is
        quoted per 100 employees. Both round up.
        """
        profile = self.industry(industry_id)
        return IndustryDefaults(
            industry=profile.id,
            employeeCount=employee_count,
            deviceCount=math.ceil(employee_count * profile.deviceDensity),
            wirelessPercentage=profile.wirelessPercentage,
            byodPercentage=profile.byodPercentage,
            iotPercentage=profile.iotPercentage,
            downtimeCostHourly=math.ceil(profile.downtimeCostHourly * employee_count / 100),
            complianceNeeds=list(profile.complianceNeeds),
            recommendedVendors=list(profile.recommendedVendors),
        )

    def value_drivers(self, industry_id: str) -> List[str]:
        """ROI metric ids that matter most to an industry; empty when none are listed."""
        self.industry(industry_id)
        return list(self._value_drivers.get(industry_id, ()))

    # --- benchmarks ---

    def industry_benchmarks(self) -> IndustryBenchmarks:
        return self._benchmarks

    def average_breach_cost(self, industry_id: str) -> float:
        """Industry breach cost, or the cross-industry figure for unlisted industries."""
        self.industry(industry_id)
        costs = self._benchmarks.averageDataBreachCost
        return costs.get(industry_id, costs["overall"])

    def incident_frequency(self, size_band: str) -> int:
        try:
            return self._benchmarks.securityIncidentFrequency[size_band]
        except KeyError:
            raise ReferenceDataNotFoundError("size band", size_band) from None

    # --- feature matrix ---

    def feature_comparison(self) -> Mapping[str, Mapping[str, FeatureRating]]:
        return self._features

    def feature(self, feature_id: str) -> Mapping[str, FeatureRating]:
        try:
            return self._features[feature_id]
        except KeyError:
            raise ReferenceDataNotFoundError("feature", feature_id) from None

    def vendor_features(self, vendor_id: str) -> Dict[str, FeatureRating]:
        """One vendor's column of the feature matrix."""
        self.vendor(vendor_id)
        return {
            feature_id: ratings[vendor_id]
            for feature_id, ratings in self._features.items()
            if vendor_id in ratings
        }

    # --- ROI metrics ---

    def roi_metrics(self, category: Optional[str] = None) -> List[RoiMetric]:
        if category is None:
            return list(self._roi_metrics)
        return [metric for metric in self._roi_metrics if metric.category == category]

    def roi_metric(self, metric_id: str) -> RoiMetric:
        for metric in self._roi_metrics:
            if metric.id == metric_id:
                return metric
        raise ReferenceDataNotFoundError("ROI metric", metric_id)


@lru_cache
def get_reference_store() -> ReferenceDataStore:
    store = ReferenceDataStore.default()
    logger.debug(
        "Loaded reference data: %d vendors, %d industries, %d ROI metrics",
        len(store.vendors()),
        len(store.industries()),
        len(store.roi_metrics()),
    )
    return store
