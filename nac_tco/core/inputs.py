"""Resolve a user-level comparison request into fully explicit CalculationInputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nac_tco.config import Settings
from nac_tco.domain.reference_data import ReferenceDataStore
from nac_tco.schemas.calculation import CalculationInputs, ComparisonRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedRequest:
    """CalculationInputs plus the keys they were resolved from."""

    inputs: CalculationInputs
    current_solution: str
    reference_solution: str
    organization_size: str
    industry: str


def resolve_downtime_cost(
    request: ComparisonRequest,
    store: ReferenceDataStore,
    industry: str,
    settings: Settings,
) -> float:
    """Explicit rate, else the industry benchmark for the head count, else the configured default."""
    if request.downtimeCost is not None:
        return request.downtimeCost
    if request.employeeCount is not None:
        return store.industry_defaults(industry, request.employeeCount).downtimeCostHourly
    return settings.default_downtime_cost


def build_calculation_inputs(
    request: ComparisonRequest,
    store: ReferenceDataStore,
    settings: Settings,
) -> ResolvedRequest:
    """
    Look up both parties' cost factors and timelines for the request's size band.

    Raises ReferenceDataNotFoundError for an unknown vendor, size band or
    industry; the numeric engine never sees an unresolved key.
    """
    current_solution = request.currentSolution or settings.default_vendor
    reference_solution = settings.reference_vendor
    size = request.organizationSize or settings.default_organization_size
    industry = request.industry or settings.default_industry

    # fail on an unknown industry even when no benchmark is needed
    store.industry(industry)

    current_factors = store.cost_factors(current_solution, size)
    if request.customCostFactors is not None:
        overrides = request.customCostFactors.model_dump(exclude_none=True)
        if overrides:
            logger.debug("Applying %d cost overrides to %s", len(overrides), current_solution)
            current_factors = current_factors.model_copy(update=overrides)

    inputs = CalculationInputs(
        currentCostFactors=current_factors,
        referenceCostFactors=store.cost_factors(reference_solution, size),
        currentImplementation=store.implementation_timeline(current_solution, size),
        referenceImplementation=store.implementation_timeline(reference_solution, size),
        complexityFactors=request.complexityFactors,
        yearsToProject=(
            request.yearsToProject
            if request.yearsToProject is not None
            else settings.default_years_to_project
        ),
        fteCost=request.fteCost if request.fteCost is not None else settings.default_fte_cost,
        downtimeCost=resolve_downtime_cost(request, store, industry, settings),
    )
    return ResolvedRequest(
        inputs=inputs,
        current_solution=current_solution,
        reference_solution=reference_solution,
        organization_size=size,
        industry=industry,
    )
