"""ROI metric catalog.

Only the metrics flagged ``includedInDefaultCalc`` are produced by the engine;
the rest (NPV, IRR, benchmark-driven security metrics) are descriptive.
"""

from nac_tco.schemas.reference import RoiMetric

ROI_METRICS = (
    RoiMetric(
        id="costSavings",
        name="Direct Cost Savings",
        description="Total reduction in direct costs including hardware, software, maintenance, and personnel",
        category="financial",
        measurementUnit="currency",
        calculationMethod="Current Solution TCO - Reference TCO",
        includedInDefaultCalc=True,
    ),
    RoiMetric(
        id="roi",
        name="Return on Investment",
        description="Percentage return on investment over the analysis period",
        category="financial",
        measurementUnit="percentage",
        calculationMethod="(Total Savings / Reference TCO) * 100",
        includedInDefaultCalc=True,
    ),
    RoiMetric(
        id="paybackPeriod",
        name="Payback Period",
        description="Time required to recover the initial investment",
        category="financial",
        measurementUnit="years",
        calculationMethod="Initial Investment / Annual Savings",
        includedInDefaultCalc=True,
    ),
    RoiMetric(
        id="npv",
        name="Net Present Value",
        description="Present value of future savings minus initial investment",
        category="financial",
        measurementUnit="currency",
        calculationMethod="PV(future cash flows) - initial investment",
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="irr",
        name="Internal Rate of Return",
        description="Discount rate that makes the NPV of the investment equal to zero",
        category="financial",
        measurementUnit="percentage",
        calculationMethod="Rate at which NPV = 0",
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="timeToImplementation",
        name="Implementation Time Savings",
        description="Reduction in time to implement NAC solution",
        category="operational",
        measurementUnit="days",
        calculationMethod="Current Solution Implementation Time - Reference Implementation Time",
        includedInDefaultCalc=True,
    ),
    RoiMetric(
        id="downtimeReduction",
        name="Downtime Reduction",
        description="Annual reduction in system downtime hours",
        category="operational",
        measurementUnit="hours",
        calculationMethod="Current Solution Downtime - Reference Downtime",
        benchmarkData={"small": 16, "medium": 24, "large": 32, "enterprise": 48},
        includedInDefaultCalc=True,
    ),
    RoiMetric(
        id="fteReduction",
        name="FTE Reduction",
        description="Reduction in full-time equivalent staff required for management",
        category="operational",
        measurementUnit="FTE",
        calculationMethod="Current Solution FTE - Reference FTE",
        includedInDefaultCalc=True,
    ),
    RoiMetric(
        id="opexReduction",
        name="OpEx Reduction",
        description="Reduction in operational expenditure",
        category="financial",
        measurementUnit="currency",
        calculationMethod="Current Solution Annual Costs - Reference Annual Costs",
        includedInDefaultCalc=True,
    ),
    RoiMetric(
        id="capexReduction",
        name="CapEx Elimination",
        description="Reduction in capital expenditure due to hardware elimination",
        category="financial",
        measurementUnit="currency",
        calculationMethod="Current Solution Hardware Costs",
        includedInDefaultCalc=True,
    ),
    RoiMetric(
        id="maintenanceTimeReduction",
        name="Maintenance Time Reduction",
        description="Reduction in time spent on maintenance and updates",
        category="operational",
        measurementUnit="hours/year",
        calculationMethod="Estimated based on FTE allocation",
        benchmarkData={"small": 80, "medium": 150, "large": 240, "enterprise": 480},
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="incidentReduction",
        name="Security Incident Reduction",
        description="Estimated reduction in security incidents due to improved NAC",
        category="security",
        measurementUnit="percentage",
        calculationMethod="Based on industry benchmarks and feature effectiveness",
        benchmarkData={"small": 30, "medium": 35, "large": 40, "enterprise": 45},
        industryAverage=35,
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="breachRiskReduction",
        name="Data Breach Risk Reduction",
        description="Estimated reduction in data breach risk",
        category="security",
        measurementUnit="percentage",
        calculationMethod="Based on industry benchmarks and security score improvement",
        benchmarkData={"small": 25, "medium": 30, "large": 35, "enterprise": 40},
        industryAverage=30,
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="breachCostAvoidance",
        name="Breach Cost Avoidance",
        description="Estimated financial impact of avoided breaches",
        category="security",
        measurementUnit="currency",
        calculationMethod="Average Breach Cost x Breach Risk Reduction",
        benchmarkData={"small": 120000, "medium": 250000, "large": 750000, "enterprise": 3800000},
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="complianceImprovement",
        name="Compliance Improvement",
        description="Improvement in compliance posture",
        category="compliance",
        measurementUnit="percentage",
        calculationMethod="Based on compliance automation capabilities",
        benchmarkData={"small": 40, "medium": 45, "large": 50, "enterprise": 60},
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="auditEfficiency",
        name="Audit Efficiency Improvement",
        description="Reduction in time spent on audit preparation and response",
        category="compliance",
        measurementUnit="percentage",
        calculationMethod="Based on reporting and automation capabilities",
        benchmarkData={"small": 30, "medium": 40, "large": 50, "enterprise": 60},
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="userProductivity",
        name="User Productivity Improvement",
        description="Productivity gain from simplified onboarding and fewer disruptions",
        category="operational",
        measurementUnit="percentage",
        calculationMethod="Based on user experience improvements",
        benchmarkData={"small": 2, "medium": 3, "large": 4, "enterprise": 5},
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="timeToValue",
        name="Time to Value",
        description="How quickly the solution delivers value to the organization",
        category="strategic",
        measurementUnit="days",
        calculationMethod="Implementation time + time to first measurable benefit",
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="scalabilitySavings",
        name="Scalability Cost Avoidance",
        description="Avoided costs of scaling traditional infrastructure",
        category="strategic",
        measurementUnit="currency",
        calculationMethod="Based on growth projections and hardware avoidance",
        includedInDefaultCalc=False,
    ),
    RoiMetric(
        id="remoteWorkEnablement",
        name="Remote Work Enablement Value",
        description="Business value from improved remote work capabilities",
        category="strategic",
        measurementUnit="score",
        calculationMethod="Based on remote capabilities scoring",
        includedInDefaultCalc=False,
    ),
)
