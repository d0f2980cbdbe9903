"""Data contracts for the TCO engine and comparison builder."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from nac_tco.schemas.reference import (
    ComplexityLevel,
    CostFactorOverrides,
    CostFactors,
    ImplementationTimeline,
    SizeBandName,
)


class ComplexityFactors(BaseModel):
    """Environment characteristics that inflate cost and deployment time."""

    model_config = ConfigDict(extra="forbid")

    networkComplexity: ComplexityLevel = "medium"
    hasMultipleLocations: bool = False
    locationCount: int = Field(default=1, ge=1)
    hasComplexAuthentication: bool = False
    hasLegacyDevices: bool = False
    percentLegacyDevices: float = Field(default=0.0, ge=0, le=100)
    hasCloudIntegration: bool = False
    hasCustomPolicies: bool = False
    policyComplexityLevel: ComplexityLevel = "medium"


class CalculationInputs(BaseModel):
    """Everything the engine needs, fully resolved. No lookups happen past this point."""

    model_config = ConfigDict(extra="forbid")

    currentCostFactors: CostFactors
    referenceCostFactors: CostFactors
    currentImplementation: ImplementationTimeline
    referenceImplementation: ImplementationTimeline
    complexityFactors: ComplexityFactors = Field(default_factory=ComplexityFactors)
    yearsToProject: int = Field(ge=1)
    fteCost: float = Field(ge=0)
    downtimeCost: float = Field(ge=0)


class TcoResults(BaseModel):
    currentTCO: float
    referenceTCO: float
    totalSavings: float
    # NaN/inf when currentTCO is zero
    savingsPercentage: float
    annualSavings: float
    initialCostSavings: float
    currentTotalInitialCosts: float
    currentAnnualCosts: float
    referenceTotalInitialCosts: float
    referenceAnnualCosts: float
    roi: float
    # 999 when the reference party never pays back
    paybackPeriod: float


class ImplementationResults(BaseModel):
    currentImplTime: float
    referenceImplTime: float
    implTimeSavings: float
    implTimeSavingsPercentage: float


class YearByYearData(BaseModel):
    year: str
    current: float
    reference: float
    savings: float
    cumulativeSavings: float


class CostBreakdownItem(BaseModel):
    name: str
    value: float


class ComparisonResult(BaseModel):
    tcoResults: TcoResults
    implementationResults: ImplementationResults
    yearByYearComparisonData: List[YearByYearData]
    costBreakdownCurrent: List[CostBreakdownItem]
    costBreakdownReference: List[CostBreakdownItem]
    complexityMultiplier: float
    referenceComplexityMultiplier: float


class ComparisonRequest(BaseModel):
    """User-level request; resolved against the reference data into CalculationInputs."""

    model_config = ConfigDict(extra="forbid")

    currentSolution: Optional[str] = None
    organizationSize: Optional[SizeBandName] = None
    industry: Optional[str] = None
    yearsToProject: Optional[int] = Field(default=None, ge=1)
    employeeCount: Optional[int] = Field(default=None, ge=1)
    complexityFactors: ComplexityFactors = Field(default_factory=ComplexityFactors)
    fteCost: Optional[float] = Field(default=None, ge=0)
    downtimeCost: Optional[float] = Field(default=None, ge=0)
    customCostFactors: Optional[CostFactorOverrides] = None


class ComplexityResponse(BaseModel):
    multiplier: float
    referenceMultiplier: float


class ComparisonDisplay(BaseModel):
    """Pre-formatted strings; non-finite and sentinel values already special-cased."""

    currentTCO: str
    referenceTCO: str
    totalSavings: str
    savingsPercentage: str
    roi: str
    paybackPeriod: str
    implTimeSavings: str


class ComparisonResponse(ComparisonResult):
    currentSolution: str
    referenceSolution: str
    organizationSize: SizeBandName
    industry: str
    yearsToProject: int
    fteCost: float
    downtimeCost: float
    display: ComparisonDisplay
