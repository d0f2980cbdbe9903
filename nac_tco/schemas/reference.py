"""Data contracts for the static reference tables."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

VendorId = str
SizeBandName = Literal["small", "medium", "large", "enterprise"]
ComplexityLevel = Literal["low", "medium", "high"]
Priority = Literal["low", "medium", "high", "critical"]
MetricCategory = Literal["financial", "operational", "security", "compliance", "strategic"]
DeploymentModel = Literal["cloud", "on-premises", "hybrid", "saas", "appliance", "virtual"]


class CostFactors(BaseModel):
    """Per-vendor, per-size-band cost inputs. Currency fields share one unit."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initialHardwareCost: float = Field(ge=0)
    annualMaintenanceCost: float = Field(ge=0)
    annualLicensingCost: float = Field(ge=0)
    implementationServicesCost: float = Field(ge=0)
    trainingCost: float = Field(ge=0)
    networkRedesignCost: float = Field(ge=0)
    fteCount: float = Field(ge=0)
    estimatedAnnualDowntimeHours: float = Field(ge=0)


class CostFactorOverrides(BaseModel):
    """Partial CostFactors; unset fields keep the catalog value."""

    model_config = ConfigDict(extra="forbid")

    initialHardwareCost: Optional[float] = Field(default=None, ge=0)
    annualMaintenanceCost: Optional[float] = Field(default=None, ge=0)
    annualLicensingCost: Optional[float] = Field(default=None, ge=0)
    implementationServicesCost: Optional[float] = Field(default=None, ge=0)
    trainingCost: Optional[float] = Field(default=None, ge=0)
    networkRedesignCost: Optional[float] = Field(default=None, ge=0)
    fteCount: Optional[float] = Field(default=None, ge=0)
    estimatedAnnualDowntimeHours: Optional[float] = Field(default=None, ge=0)


class ImplementationTimeline(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    planningDays: int = Field(ge=0)
    deploymentDays: int = Field(ge=0)
    integrationDays: int = Field(ge=0)
    testingDays: int = Field(ge=0)
    staffTrainingDays: int = Field(ge=0)
    rolloutDays: int = Field(ge=0)


class SizeBand(BaseModel):
    """Device-count range for an organization size band."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min: int = Field(ge=1)
    max: int = Field(ge=1)
    default: int = Field(ge=1)


class VendorDetails(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: VendorId
    name: str
    shortName: str
    description: str
    productName: str
    deploymentModels: List[DeploymentModel]
    hasCloudOption: bool
    hasOnPremOption: bool
    foundedYear: int
    headquarters: str
    gartnerRating: Optional[float] = None
    forresterRating: Optional[float] = None
    npsScore: Optional[int] = None
    marketShare: Optional[float] = None


class IndustryProfile(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str
    keyRequirements: List[str]
    complianceNeeds: List[str]
    keyMetrics: List[str]
    recommendedVendors: List[VendorId]
    # devices per employee
    deviceDensity: float = Field(ge=0)
    wirelessPercentage: float = Field(ge=0, le=100)
    byodPercentage: float = Field(ge=0, le=100)
    iotPercentage: float = Field(ge=0, le=100)
    securityPriority: Priority
    breachImpact: Priority
    # per hour, per 100 employees
    downtimeCostHourly: float = Field(ge=0)


class IndustryDefaults(BaseModel):
    """Starting values for a calculation derived from an industry profile and head count."""

    industry: str
    employeeCount: int
    deviceCount: int
    wirelessPercentage: float
    byodPercentage: float
    iotPercentage: float
    downtimeCostHourly: float
    complianceNeeds: List[str]
    recommendedVendors: List[VendorId]


class RoiMetric(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str
    category: MetricCategory
    measurementUnit: str
    calculationMethod: str
    benchmarkData: Optional[Dict[str, float]] = None
    industryAverage: Optional[float] = None
    includedInDefaultCalc: bool


class FeatureRating(BaseModel):
    """A vendor's showing on one capability: display value plus a 1-5 score."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: str
    score: int = Field(ge=1, le=5)


class IncidentResponseTime(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # hours
    with_nac: float = Field(ge=0)
    without_nac: float = Field(ge=0)


class ComplianceCosts(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # per device, per year
    manual: float = Field(ge=0)
    automated: float = Field(ge=0)


class IndustryBenchmarks(BaseModel):
    """Cross-vendor security and compliance benchmarks.

    ``averageDataBreachCost`` is keyed by industry id with an ``overall``
    fallback; ``securityIncidentFrequency`` by size band (annual incidents
    without NAC).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    averageDataBreachCost: Dict[str, float]
    securityIncidentFrequency: Dict[SizeBandName, int]
    incidentResponseTime: IncidentResponseTime
    complianceCosts: ComplianceCosts
