"""Research-based vendor catalog: details, cost factors and implementation timelines.

Cost rows are positional, in CostFactors field order:
hardware, maintenance, licensing, implementation, training, network redesign,
FTE count, annual downtime hours.

Timeline rows: planning, deployment, integration, testing, staff training, rollout (days).
"""

from nac_tco.schemas.reference import CostFactors, ImplementationTimeline, SizeBand, VendorDetails


def _costs(hardware, maintenance, licensing, implementation, training, redesign, fte, downtime):
    return CostFactors(
        initialHardwareCost=hardware,
        annualMaintenanceCost=maintenance,
        annualLicensingCost=licensing,
        implementationServicesCost=implementation,
        trainingCost=training,
        networkRedesignCost=redesign,
        fteCount=fte,
        estimatedAnnualDowntimeHours=downtime,
    )


def _timeline(planning, deployment, integration, testing, training, rollout):
    return ImplementationTimeline(
        planningDays=planning,
        deploymentDays=deployment,
        integrationDays=integration,
        testingDays=testing,
        staffTrainingDays=training,
        rolloutDays=rollout,
    )


SIZE_BANDS = {
    "small": SizeBand(min=1, max=500, default=250),
    "medium": SizeBand(min=501, max=2500, default=1000),
    "large": SizeBand(min=2501, max=10000, default=5000),
    "enterprise": SizeBand(min=10001, max=100000, default=25000),
}

VENDOR_DETAILS = {
    "portnox": VendorDetails(
        id="portnox",
        name="Portnox",
        shortName="Portnox",
        description="Cloud-native NAC solution with zero-trust approach, simplified deployment and minimal maintenance.",
        productName="Portnox Cloud",
        deploymentModels=["cloud", "saas"],
        hasCloudOption=True,
        hasOnPremOption=False,
        foundedYear=2007,
        headquarters="Tel Aviv, Israel",
        gartnerRating=4.4,
        forresterRating=4.3,
        npsScore=75,
        marketShare=5,
    ),
    "cisco": VendorDetails(
        id="cisco",
        name="Cisco",
        shortName="Cisco",
        description="Enterprise-grade on-premises NAC solution with comprehensive feature set and extensive integration options.",
        productName="Cisco ISE",
        deploymentModels=["on-premises", "appliance", "virtual"],
        hasCloudOption=False,
        hasOnPremOption=True,
        foundedYear=1984,
        headquarters="San Jose, CA, USA",
        gartnerRating=4.2,
        forresterRating=4.5,
        npsScore=58,
        marketShare=38,
    ),
    "aruba": VendorDetails(
        id="aruba",
        name="Aruba Networks",
        shortName="Aruba",
        description="Comprehensive NAC solution with strong integration capabilities for HP Aruba network infrastructure.",
        productName="Aruba ClearPass",
        deploymentModels=["on-premises", "appliance", "virtual"],
        hasCloudOption=False,
        hasOnPremOption=True,
        foundedYear=2002,
        headquarters="Santa Clara, CA, USA",
        gartnerRating=4.3,
        forresterRating=4.2,
        npsScore=61,
        marketShare=24,
    ),
    "forescout": VendorDetails(
        id="forescout",
        name="Forescout",
        shortName="Forescout",
        description="Agent-less NAC solution with strong IoT and OT device discovery and classification capabilities.",
        productName="Forescout Platform",
        deploymentModels=["on-premises", "appliance", "virtual", "hybrid"],
        hasCloudOption=True,
        hasOnPremOption=True,
        foundedYear=2000,
        headquarters="San Jose, CA, USA",
        gartnerRating=4.3,
        forresterRating=4.0,
        npsScore=63,
        marketShare=14,
    ),
    "fortinet": VendorDetails(
        id="fortinet",
        name="Fortinet",
        shortName="Fortinet",
        description="Integrated NAC solution as part of Fortinet security fabric with strong security ecosystem integration.",
        productName="FortiNAC",
        deploymentModels=["on-premises", "appliance", "virtual"],
        hasCloudOption=False,
        hasOnPremOption=True,
        foundedYear=2000,
        headquarters="Sunnyvale, CA, USA",
        gartnerRating=4.1,
        forresterRating=4.0,
        npsScore=54,
        marketShare=7,
    ),
    "securew2": VendorDetails(
        id="securew2",
        name="SecureW2",
        shortName="SecureW2",
        description="Cloud-based certificate and identity management solution with BYOD focus.",
        productName="SecureW2 JoinNow Suite",
        deploymentModels=["cloud", "saas"],
        hasCloudOption=True,
        hasOnPremOption=False,
        foundedYear=2010,
        headquarters="Seattle, WA, USA",
        gartnerRating=3.9,
        forresterRating=3.8,
        npsScore=67,
        marketShare=2,
    ),
    "ivanti": VendorDetails(
        id="ivanti",
        name="Ivanti",
        shortName="Ivanti",
        description="Comprehensive network security and access control solution with focus on zero trust.",
        productName="Ivanti Policy Secure",
        deploymentModels=["on-premises", "appliance", "virtual", "cloud", "hybrid"],
        hasCloudOption=True,
        hasOnPremOption=True,
        foundedYear=1985,
        headquarters="South Jordan, UT, USA",
        gartnerRating=3.8,
        forresterRating=3.9,
        npsScore=52,
        marketShare=5,
    ),
    "microsoft": VendorDetails(
        id="microsoft",
        name="Microsoft",
        shortName="Microsoft",
        description="Windows Server role providing network policy and access services integrated with Active Directory.",
        productName="Network Policy Server (NPS)",
        deploymentModels=["on-premises", "virtual"],
        hasCloudOption=False,
        hasOnPremOption=True,
        foundedYear=1975,
        headquarters="Redmond, WA, USA",
        gartnerRating=3.6,
        forresterRating=3.5,
        npsScore=45,
        marketShare=5,
    ),
}

VENDOR_COSTS = {
    "portnox": {
        "small": _costs(0, 5000, 25000, 5000, 2000, 2000, 0.25, 4),
        "medium": _costs(0, 7500, 60000, 10000, 4000, 4000, 0.5, 6),
        "large": _costs(0, 10000, 150000, 20000, 8000, 8000, 0.75, 8),
        "enterprise": _costs(0, 15000, 375000, 40000, 15000, 15000, 1, 12),
    },
    "cisco": {
        "small": _costs(75000, 25000, 40000, 35000, 10000, 15000, 1, 24),
        "medium": _costs(150000, 50000, 100000, 60000, 15000, 25000, 1.5, 36),
        "large": _costs(300000, 100000, 250000, 120000, 30000, 50000, 2, 48),
        "enterprise": _costs(600000, 200000, 625000, 250000, 60000, 100000, 3, 72),
    },
    "aruba": {
        "small": _costs(65000, 20000, 35000, 30000, 9000, 12000, 1, 20),
        "medium": _costs(130000, 45000, 90000, 50000, 12000, 20000, 1.5, 30),
        "large": _costs(280000, 90000, 225000, 100000, 25000, 40000, 2, 40),
        "enterprise": _costs(550000, 180000, 560000, 200000, 50000, 80000, 2.5, 60),
    },
    "forescout": {
        "small": _costs(70000, 22000, 38000, 32000, 8000, 10000, 1, 18),
        "medium": _costs(140000, 48000, 95000, 45000, 14000, 18000, 1.5, 28),
        "large": _costs(290000, 95000, 230000, 90000, 25000, 35000, 2, 36),
        "enterprise": _costs(580000, 190000, 575000, 180000, 45000, 70000, 2.5, 54),
    },
    "fortinet": {
        "small": _costs(60000, 18000, 32000, 25000, 7000, 8000, 0.75, 16),
        "medium": _costs(120000, 40000, 80000, 40000, 12000, 15000, 1.25, 24),
        "large": _costs(250000, 80000, 200000, 80000, 22000, 30000, 1.75, 32),
        "enterprise": _costs(500000, 160000, 500000, 160000, 40000, 60000, 2.25, 48),
    },
    "securew2": {
        "small": _costs(0, 6000, 30000, 8000, 3000, 5000, 0.5, 8),
        "medium": _costs(0, 12000, 75000, 15000, 6000, 10000, 0.75, 12),
        "large": _costs(0, 24000, 180000, 30000, 12000, 20000, 1, 16),
        "enterprise": _costs(0, 40000, 450000, 60000, 25000, 40000, 1.5, 24),
    },
    "ivanti": {
        "small": _costs(50000, 15000, 30000, 20000, 8000, 10000, 0.75, 16),
        "medium": _costs(100000, 35000, 75000, 40000, 15000, 20000, 1.25, 24),
        "large": _costs(200000, 70000, 185000, 80000, 25000, 35000, 1.75, 32),
        "enterprise": _costs(400000, 140000, 460000, 160000, 45000, 70000, 2.25, 48),
    },
    "microsoft": {
        "small": _costs(15000, 5000, 5000, 15000, 5000, 8000, 0.75, 20),
        "medium": _costs(30000, 10000, 10000, 30000, 10000, 15000, 1.25, 30),
        "large": _costs(60000, 20000, 20000, 60000, 20000, 30000, 1.75, 40),
        "enterprise": _costs(120000, 40000, 40000, 120000, 40000, 60000, 2.5, 60),
    },
}

VENDOR_IMPLEMENTATION = {
    "portnox": {
        "small": _timeline(3, 1, 2, 2, 1, 1),
        "medium": _timeline(5, 1, 3, 3, 1, 2),
        "large": _timeline(10, 1, 7, 5, 2, 5),
        "enterprise": _timeline(20, 2, 14, 10, 4, 10),
    },
    "cisco": {
        "small": _timeline(14, 10, 15, 21, 10, 30),
        "medium": _timeline(21, 15, 21, 28, 14, 45),
        "large": _timeline(30, 21, 30, 35, 21, 60),
        "enterprise": _timeline(45, 30, 45, 50, 30, 90),
    },
    "aruba": {
        "small": _timeline(10, 8, 12, 18, 8, 25),
        "medium": _timeline(14, 12, 18, 24, 12, 40),
        "large": _timeline(21, 18, 25, 30, 16, 55),
        "enterprise": _timeline(35, 25, 35, 40, 25, 80),
    },
    "forescout": {
        "small": _timeline(12, 8, 14, 16, 7, 20),
        "medium": _timeline(16, 12, 18, 20, 10, 35),
        "large": _timeline(24, 18, 24, 25, 14, 45),
        "enterprise": _timeline(40, 28, 36, 35, 20, 65),
    },
    "fortinet": {
        "small": _timeline(10, 7, 12, 14, 6, 18),
        "medium": _timeline(14, 10, 16, 18, 9, 30),
        "large": _timeline(20, 15, 22, 24, 12, 42),
        "enterprise": _timeline(35, 25, 32, 35, 18, 60),
    },
    "securew2": {
        "small": _timeline(5, 2, 4, 4, 2, 6),
        "medium": _timeline(8, 3, 6, 6, 3, 10),
        "large": _timeline(14, 4, 10, 10, 5, 20),
        "enterprise": _timeline(25, 6, 18, 18, 8, 35),
    },
    "ivanti": {
        "small": _timeline(10, 7, 12, 14, 6, 18),
        "medium": _timeline(15, 10, 16, 18, 9, 28),
        "large": _timeline(22, 15, 22, 22, 12, 40),
        "enterprise": _timeline(36, 24, 32, 30, 18, 60),
    },
    "microsoft": {
        "small": _timeline(8, 5, 10, 12, 4, 15),
        "medium": _timeline(12, 8, 14, 16, 6, 25),
        "large": _timeline(18, 12, 20, 22, 9, 35),
        "enterprise": _timeline(30, 18, 28, 30, 14, 50),
    },
}
