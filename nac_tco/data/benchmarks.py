"""Industry benchmarks and the ROI metrics that drive value per industry."""

from nac_tco.schemas.reference import ComplianceCosts, IncidentResponseTime, IndustryBenchmarks

INDUSTRY_BENCHMARKS = IndustryBenchmarks(
    averageDataBreachCost={
        "healthcare": 9200000,
        "financial": 5850000,
        "technology": 5270000,
        "education": 3790000,
        "retail": 3280000,
        "manufacturing": 4240000,
        "overall": 4350000,
    },
    securityIncidentFrequency={
        "small": 3,
        "medium": 8,
        "large": 15,
        "enterprise": 35,
    },
    incidentResponseTime=IncidentResponseTime(with_nac=2.5, without_nac=8.4),
    complianceCosts=ComplianceCosts(manual=1200, automated=450),
)

# Some drivers (byodSupport, iotSecurity, pciCompliance) are qualitative and
# have no entry in the ROI metric catalog. "other" has no drivers.
INDUSTRY_VALUE_DRIVERS = {
    "healthcare": ("complianceImprovement", "breachRiskReduction", "incidentReduction", "auditEfficiency"),
    "financial": ("breachRiskReduction", "complianceImprovement", "auditEfficiency", "downtimeReduction"),
    "education": ("opexReduction", "fteReduction", "byodSupport", "scalabilitySavings"),
    "manufacturing": ("timeToImplementation", "maintenanceTimeReduction", "iotSecurity", "downtimeReduction"),
    "retail": ("costSavings", "timeToImplementation", "pciCompliance", "byodSupport"),
    "technology": ("timeToImplementation", "fteReduction", "scalabilitySavings", "remoteWorkEnablement"),
    "government": ("complianceImprovement", "costSavings", "auditEfficiency", "breachRiskReduction"),
}
