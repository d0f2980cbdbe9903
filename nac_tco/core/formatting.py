"""Display helpers. Sentinel and non-finite results are rendered here, never as raw numbers.

Rounding is half away from zero on the exact binary value of the float,
the same way browser number formatting rounds, so 1234.5 shows as $1,235.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from nac_tco.core.comparison import NO_PAYBACK
from nac_tco.schemas.calculation import ComparisonDisplay, ComparisonResult

UNDEFINED = "N/A"


def _round_half_up(value: float, places: int = 0) -> Decimal:
    quantize = Decimal(10) ** -places
    return Decimal(value).quantize(quantize, rounding=ROUND_HALF_UP)


def _plain_number(value: float) -> str:
    """Shortest round-tripping form, without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_currency(value: float) -> str:
    if not math.isfinite(value):
        return UNDEFINED
    rounded = int(_round_half_up(value))
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def format_percentage(value: float) -> str:
    if not math.isfinite(value):
        return UNDEFINED
    return f"{_round_half_up(value, 1)}%"


def format_time_period(days: float) -> str:
    if not math.isfinite(days):
        return UNDEFINED
    if days < 30:
        return f"{_plain_number(days)} days"
    if days < 365:
        months = int(_round_half_up(days / 30))
        return f"{months} {'month' if months == 1 else 'months'}"
    years = _round_half_up(days / 365, 1)
    return f"{years} {'year' if years == 1 else 'years'}"


def format_payback(years: float) -> str:
    if years == NO_PAYBACK:
        return "No payback"
    if not math.isfinite(years):
        return UNDEFINED
    if years < 1:
        return f"{_round_half_up(years * 12, 1)} months"
    return f"{_round_half_up(years, 1)} years"


def summarize(result: ComparisonResult) -> ComparisonDisplay:
    tco = result.tcoResults
    return ComparisonDisplay(
        currentTCO=format_currency(tco.currentTCO),
        referenceTCO=format_currency(tco.referenceTCO),
        totalSavings=format_currency(tco.totalSavings),
        savingsPercentage=format_percentage(tco.savingsPercentage),
        roi=format_percentage(tco.roi),
        paybackPeriod=format_payback(tco.paybackPeriod),
        implTimeSavings=format_time_period(result.implementationResults.implTimeSavings),
    )
