"""Savings, ROI, payback, year-by-year series and cost breakdowns for a comparison.

Conventions:
  - The incumbent ("current") party is scaled by the raw complexity multiplier,
    the reference party by the dampened one.
  - Everything is linear in years: no inflation, compounding or discounting.
  - Nothing here raises on degenerate input. Division by zero yields NaN or
    +/-inf and is passed through for the caller to display.
"""

from __future__ import annotations

import logging
import math
from typing import List

from nac_tco.core.complexity import complexity_multiplier, dampen_multiplier
from nac_tco.core.tco import PartyCosts, party_costs, total_implementation_days
from nac_tco.schemas.calculation import (
    CalculationInputs,
    ComparisonResult,
    CostBreakdownItem,
    ImplementationResults,
    TcoResults,
    YearByYearData,
)
from nac_tco.schemas.reference import CostFactors, ImplementationTimeline

logger = logging.getLogger(__name__)

# Payback period reported when annual savings are not positive.
NO_PAYBACK = 999.0

BREAKDOWN_CATEGORIES = (
    "Hardware",
    "Network Redesign",
    "Implementation",
    "Training",
    "Maintenance",
    "Licensing",
    "IT Staff",
    "Downtime",
)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: 0/0 is NaN, x/0 is signed infinity."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def percentage(part: float, whole: float) -> float:
    return _divide(part, whole) * 100


def roi_percentage(savings: float, investment: float) -> float:
    """Savings as a percentage of the reference party's TCO. Negative ROI is kept."""
    return percentage(savings, investment)


def payback_period(initial_investment: float, annual_savings: float) -> float:
    """Years for annual savings to cover ``initial_investment``, or NO_PAYBACK."""
    if annual_savings > 0:
        return initial_investment / annual_savings
    return NO_PAYBACK


def year_by_year(current: PartyCosts, reference: PartyCosts, years: int) -> List[YearByYearData]:
    """Cumulative cost of each party at year 0 ("Initial") through ``years``."""
    initial_delta = current.initial - reference.initial
    annual_delta = current.annual - reference.annual

    rows: List[YearByYearData] = []
    for year in range(years + 1):
        current_cost = current.initial + current.annual * year
        reference_cost = reference.initial + reference.annual * year
        rows.append(
            YearByYearData(
                year="Initial" if year == 0 else f"Year {year}",
                current=current_cost,
                reference=reference_cost,
                savings=current_cost - reference_cost,
                cumulativeSavings=initial_delta + annual_delta * year,
            )
        )
    return rows


def cost_breakdown(
    factors: CostFactors,
    multiplier: float,
    fte_cost: float,
    downtime_cost: float,
    years: int,
) -> List[CostBreakdownItem]:
    """Eight fixed categories over the whole horizon; recurring ones are multiplied by years."""
    values = (
        factors.initialHardwareCost * multiplier,
        factors.networkRedesignCost * multiplier,
        factors.implementationServicesCost * multiplier,
        factors.trainingCost * multiplier,
        factors.annualMaintenanceCost * years * multiplier,
        factors.annualLicensingCost * years * multiplier,
        fte_cost * factors.fteCount * years * multiplier,
        downtime_cost * factors.estimatedAnnualDowntimeHours * years * multiplier,
    )
    return [CostBreakdownItem(name=name, value=value) for name, value in zip(BREAKDOWN_CATEGORIES, values)]


def compare_implementation(
    current: ImplementationTimeline,
    reference: ImplementationTimeline,
    current_multiplier: float,
    reference_multiplier: float,
) -> ImplementationResults:
    current_days = total_implementation_days(current) * current_multiplier
    reference_days = total_implementation_days(reference) * reference_multiplier
    saved = current_days - reference_days
    return ImplementationResults(
        currentImplTime=current_days,
        referenceImplTime=reference_days,
        implTimeSavings=saved,
        implTimeSavingsPercentage=percentage(saved, current_days),
    )


def build_comparison(inputs: CalculationInputs) -> ComparisonResult:
    """Run the full incumbent-vs-reference comparison for resolved inputs."""
    raw = complexity_multiplier(inputs.complexityFactors)
    dampened = dampen_multiplier(raw)
    years = inputs.yearsToProject

    current = party_costs(inputs.currentCostFactors, raw, inputs.fteCost, inputs.downtimeCost, years)
    reference = party_costs(inputs.referenceCostFactors, dampened, inputs.fteCost, inputs.downtimeCost, years)

    total_savings = current.total - reference.total
    annual_savings = current.annual - reference.annual

    tco = TcoResults(
        currentTCO=current.total,
        referenceTCO=reference.total,
        totalSavings=total_savings,
        savingsPercentage=percentage(total_savings, current.total),
        annualSavings=annual_savings,
        initialCostSavings=current.initial - reference.initial,
        currentTotalInitialCosts=current.initial,
        currentAnnualCosts=current.annual,
        referenceTotalInitialCosts=reference.initial,
        referenceAnnualCosts=reference.annual,
        roi=roi_percentage(total_savings, reference.total),
        paybackPeriod=payback_period(reference.initial, annual_savings),
    )
    logger.debug(
        "Comparison over %d years: multiplier %.3f/%.3f, TCO %.2f vs %.2f",
        years,
        raw,
        dampened,
        current.total,
        reference.total,
    )

    return ComparisonResult(
        tcoResults=tco,
        implementationResults=compare_implementation(
            inputs.currentImplementation,
            inputs.referenceImplementation,
            raw,
            dampened,
        ),
        yearByYearComparisonData=year_by_year(current, reference, years),
        costBreakdownCurrent=cost_breakdown(
            inputs.currentCostFactors, raw, inputs.fteCost, inputs.downtimeCost, years
        ),
        costBreakdownReference=cost_breakdown(
            inputs.referenceCostFactors, dampened, inputs.fteCost, inputs.downtimeCost, years
        ),
        complexityMultiplier=raw,
        referenceComplexityMultiplier=dampened,
    )
