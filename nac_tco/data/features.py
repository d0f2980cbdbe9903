"""Capability matrix: one FeatureRating per vendor for each compared feature."""

from nac_tco.schemas.reference import FeatureRating


def _rating(value, score):
    return FeatureRating(value=value, score=score)


FEATURE_COMPARISON = {
    "deploymentModel": {
        "cisco": _rating("On-premises", 2),
        "aruba": _rating("On-premises", 2),
        "forescout": _rating("On-premises/Hybrid", 3),
        "fortinet": _rating("On-premises", 2),
        "securew2": _rating("Cloud-native", 5),
        "ivanti": _rating("On-premises/Cloud", 4),
        "microsoft": _rating("On-premises", 1),
        "portnox": _rating("Cloud-native SaaS", 5),
    },
    "hardwareRequired": {
        "cisco": _rating("Yes - Multiple appliances", 1),
        "aruba": _rating("Yes - Multiple appliances", 1),
        "forescout": _rating("Yes - Multiple appliances", 1),
        "fortinet": _rating("Yes - Dedicated appliances", 1),
        "securew2": _rating("No", 5),
        "ivanti": _rating("Yes - Can be virtualized", 2),
        "microsoft": _rating("Yes - Windows Servers", 2),
        "portnox": _rating("No", 5),
    },
    "implementationTime": {
        "cisco": _rating("3-6 months", 1),
        "aruba": _rating("2.5-5 months", 2),
        "forescout": _rating("2-4.5 months", 2),
        "fortinet": _rating("2-4 months", 2),
        "securew2": _rating("0.5-1.5 months", 4),
        "ivanti": _rating("2-4 months", 2),
        "microsoft": _rating("1.5-3 months", 3),
        "portnox": _rating("0.5-1 month", 5),
    },
    "maintenanceEffort": {
        "cisco": _rating("High", 1),
        "aruba": _rating("Medium-High", 2),
        "forescout": _rating("Medium", 3),
        "fortinet": _rating("Medium", 3),
        "securew2": _rating("Low", 4),
        "ivanti": _rating("Medium", 3),
        "microsoft": _rating("Medium-High", 2),
        "portnox": _rating("Low", 5),
    },
    "automatedUpdates": {
        "cisco": _rating("No", 1),
        "aruba": _rating("No", 1),
        "forescout": _rating("Partial", 3),
        "fortinet": _rating("Partial", 3),
        "securew2": _rating("Yes", 5),
        "ivanti": _rating("Partial", 3),
        "microsoft": _rating("No", 1),
        "portnox": _rating("Yes", 5),
    },
    "scalability": {
        "cisco": _rating("Complex", 2),
        "aruba": _rating("Moderate", 3),
        "forescout": _rating("Moderate", 3),
        "fortinet": _rating("Moderate", 3),
        "securew2": _rating("Easy", 4),
        "ivanti": _rating("Moderate", 3),
        "microsoft": _rating("Limited", 1),
        "portnox": _rating("Easy", 5),
    },
    "multiVendorSupport": {
        "cisco": _rating("Limited (Cisco-centric)", 2),
        "aruba": _rating("Good", 4),
        "forescout": _rating("Very Good", 4),
        "fortinet": _rating("Moderate", 3),
        "securew2": _rating("Good", 4),
        "ivanti": _rating("Good", 4),
        "microsoft": _rating("Limited", 2),
        "portnox": _rating("Excellent", 5),
    },
    "licensingModel": {
        "cisco": _rating("Complex tiered", 2),
        "aruba": _rating("Per device/Perpetual", 3),
        "forescout": _rating("Per device flexibility", 3),
        "fortinet": _rating("Bundle/Subscription", 3),
        "securew2": _rating("Per user subscription", 4),
        "ivanti": _rating("User/Device based", 3),
        "microsoft": _rating("Windows Server CALs", 2),
        "portnox": _rating("Simple subscription", 5),
    },
    "totalCostOfOwnership": {
        "cisco": _rating("High", 1),
        "aruba": _rating("High", 1),
        "forescout": _rating("Medium-High", 2),
        "fortinet": _rating("Medium", 3),
        "securew2": _rating("Low-Medium", 4),
        "ivanti": _rating("Medium", 3),
        "microsoft": _rating("Medium", 3),
        "portnox": _rating("Low", 5),
    },
    "automatedRemediation": {
        "cisco": _rating("Basic", 3),
        "aruba": _rating("Basic", 3),
        "forescout": _rating("Advanced", 4),
        "fortinet": _rating("Advanced", 4),
        "securew2": _rating("Limited", 2),
        "ivanti": _rating("Advanced", 4),
        "microsoft": _rating("Limited", 2),
        "portnox": _rating("Advanced", 5),
    },
    "cloudIntegration": {
        "cisco": _rating("Limited", 2),
        "aruba": _rating("Moderate", 3),
        "forescout": _rating("Moderate", 3),
        "fortinet": _rating("Moderate", 3),
        "securew2": _rating("Native", 5),
        "ivanti": _rating("Good", 4),
        "microsoft": _rating("Basic Azure Integration", 2),
        "portnox": _rating("Native", 5),
    },
    "remoteWorkSupport": {
        "cisco": _rating("Complex", 2),
        "aruba": _rating("Moderate", 3),
        "forescout": _rating("Good", 4),
        "fortinet": _rating("Good", 4),
        "securew2": _rating("Excellent", 5),
        "ivanti": _rating("Very Good", 4),
        "microsoft": _rating("Basic", 2),
        "portnox": _rating("Excellent", 5),
    },
    "deviceDiscovery": {
        "cisco": _rating("Good", 4),
        "aruba": _rating("Good", 4),
        "forescout": _rating("Excellent", 5),
        "fortinet": _rating("Very Good", 4),
        "securew2": _rating("Basic", 2),
        "ivanti": _rating("Very Good", 4),
        "microsoft": _rating("Limited", 1),
        "portnox": _rating("Very Good", 4),
    },
    "iotSupport": {
        "cisco": _rating("Moderate", 3),
        "aruba": _rating("Good", 4),
        "forescout": _rating("Excellent", 5),
        "fortinet": _rating("Very Good", 4),
        "securew2": _rating("Limited", 2),
        "ivanti": _rating("Good", 4),
        "microsoft": _rating("Poor", 1),
        "portnox": _rating("Very Good", 4),
    },
    "npsScores": {
        "cisco": _rating("58", 3),
        "aruba": _rating("61", 3),
        "forescout": _rating("63", 3),
        "fortinet": _rating("54", 3),
        "securew2": _rating("67", 4),
        "ivanti": _rating("52", 3),
        "microsoft": _rating("45", 2),
        "portnox": _rating("75", 5),
    },
}
