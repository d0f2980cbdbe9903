"""Per-party cost model: one-time costs, recurring costs and TCO over a horizon."""

from __future__ import annotations

from dataclasses import dataclass

from nac_tco.schemas.reference import CostFactors, ImplementationTimeline


@dataclass(frozen=True)
class PartyCosts:
    """Multiplier-scaled cost figures for one side of a comparison."""

    multiplier: float
    initial: float
    annual: float
    total: float


def initial_costs(factors: CostFactors, multiplier: float = 1.0) -> float:
    """One-time costs: hardware, implementation services, network redesign, training."""
    return (
        factors.initialHardwareCost
        + factors.implementationServicesCost
        + factors.networkRedesignCost
        + factors.trainingCost
    ) * multiplier


def annual_costs(
    factors: CostFactors,
    fte_cost: float,
    downtime_cost: float,
    multiplier: float = 1.0,
) -> float:
    """Recurring yearly costs: maintenance, licensing, staffing and downtime."""
    return (
        factors.annualMaintenanceCost
        + factors.annualLicensingCost
        + fte_cost * factors.fteCount
        + downtime_cost * factors.estimatedAnnualDowntimeHours
    ) * multiplier


def total_cost(
    factors: CostFactors,
    fte_cost: float,
    downtime_cost: float,
    years: int,
    multiplier: float = 1.0,
) -> float:
    """TCO over ``years``. Linear: no inflation or discounting."""
    return initial_costs(factors, multiplier) + annual_costs(factors, fte_cost, downtime_cost, multiplier) * years


def party_costs(
    factors: CostFactors,
    multiplier: float,
    fte_cost: float,
    downtime_cost: float,
    years: int,
) -> PartyCosts:
    initial = initial_costs(factors, multiplier)
    annual = annual_costs(factors, fte_cost, downtime_cost, multiplier)
    return PartyCosts(
        multiplier=multiplier,
        initial=initial,
        annual=annual,
        total=initial + annual * years,
    )


def total_implementation_days(timeline: ImplementationTimeline) -> int:
    return (
        timeline.planningDays
        + timeline.deploymentDays
        + timeline.integrationDays
        + timeline.testingDays
        + timeline.staffTrainingDays
        + timeline.rolloutDays
    )
