from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong", "referenceVendor": "portnox"}


def test_vendor_catalog(client: FlaskClient):
    response = client.get("/api/vendors")

    assert response.status_code == 200
    assert len(response.json) == 8
    assert client.get("/api/vendors/cisco").json["productName"] == "Cisco ISE"


def test_vendor_costs_and_timeline(client: FlaskClient):
    costs = client.get("/api/vendors/cisco/costs/small")
    timeline = client.get("/api/vendors/portnox/timeline/enterprise")

    assert costs.status_code == 200
    assert costs.json["initialHardwareCost"] == 75000
    assert timeline.json["rolloutDays"] == 10


def test_unknown_vendor_is_404(client: FlaskClient):
    response = client.get("/api/vendors/juniper/costs/small")

    assert response.status_code == 404
    assert response.json["error"] == "reference_data_not_found"
    assert "juniper" in response.json["detail"]


def test_industry_defaults(client: FlaskClient):
    response = client.get("/api/industries/healthcare/defaults?employees=250")

    assert response.status_code == 200
    assert response.json["deviceCount"] == 1300
    assert response.json["downtimeCostHourly"] == 21250


def test_industry_defaults_without_head_count_uses_size_band(client: FlaskClient):
    response = client.get("/api/industries/other/defaults")

    assert response.status_code == 200
    assert response.json["employeeCount"] == 1000


def test_roi_metrics_by_category(client: FlaskClient):
    response = client.get("/api/roi-metrics?category=security")

    assert response.status_code == 200
    assert {metric["id"] for metric in response.json} == {
        "incidentReduction",
        "breachRiskReduction",
        "breachCostAvoidance",
    }


def test_size_bands_and_industries(client: FlaskClient):
    assert client.get("/api/size-bands").json["enterprise"]["default"] == 25000
    assert len(client.get("/api/industries").json) == 8


def test_complexity_endpoint(client: FlaskClient):
    response = client.post(
        "/api/calc/complexity",
        json={
            "networkComplexity": "high",
            "hasMultipleLocations": True,
            "locationCount": 5,
            "hasComplexAuthentication": True,
            "hasLegacyDevices": True,
            "percentLegacyDevices": 40,
            "hasCloudIntegration": True,
            "hasCustomPolicies": True,
            "policyComplexityLevel": "medium",
        },
    )

    assert response.status_code == 200
    assert isclose(response.json["multiplier"], 2.22)
    assert isclose(response.json["referenceMultiplier"], 1.488)


def test_complexity_rejects_out_of_range_percentage(client: FlaskClient):
    response = client.post("/api/calc/complexity", json={"hasLegacyDevices": True, "percentLegacyDevices": 140})

    assert response.status_code == 422
    assert response.json["detail"][0]["loc"] == ["percentLegacyDevices"]


def test_comparison_small_cisco(client: FlaskClient):
    response = client.post(
        "/api/calc/comparison",
        json={
            "currentSolution": "cisco",
            "organizationSize": "small",
            "yearsToProject": 3,
            "fteCost": 100000,
            "downtimeCost": 5000,
        },
    )

    assert response.status_code == 200
    body = response.json
    assert body["referenceSolution"] == "portnox"
    assert body["tcoResults"]["currentTCO"] == 990000
    assert body["tcoResults"]["referenceTCO"] == 234000
    assert isclose(body["tcoResults"]["roi"], 323.08, abs_tol=0.01)
    assert len(body["yearByYearComparisonData"]) == 4
    assert [item["name"] for item in body["costBreakdownCurrent"]][-2:] == ["IT Staff", "Downtime"]
    assert body["display"]["totalSavings"] == "$756,000"
    assert body["display"]["savingsPercentage"] == "76.4%"


def test_comparison_with_zeroed_incumbent_surfaces_undefined(client: FlaskClient):
    zeroed = {
        "initialHardwareCost": 0,
        "annualMaintenanceCost": 0,
        "annualLicensingCost": 0,
        "implementationServicesCost": 0,
        "trainingCost": 0,
        "networkRedesignCost": 0,
        "fteCount": 0,
        "estimatedAnnualDowntimeHours": 0,
    }
    response = client.post(
        "/api/calc/comparison",
        json={"currentSolution": "cisco", "organizationSize": "small", "customCostFactors": zeroed},
    )

    assert response.status_code == 200
    body = response.json
    assert body["tcoResults"]["savingsPercentage"] is None
    assert body["tcoResults"]["paybackPeriod"] == 999
    assert body["display"]["savingsPercentage"] == "N/A"
    assert body["display"]["paybackPeriod"] == "No payback"


def test_comparison_validation(client: FlaskClient):
    assert client.post("/api/calc/comparison", json={"yearsToProject": 0}).status_code == 422
    assert client.post("/api/calc/comparison", json={"yearsToProject": 25}).status_code == 422
    assert client.post("/api/calc/comparison", json={"organizationSize": "huge"}).status_code == 422
    assert client.post("/api/calc/comparison", json={"unexpected": 1}).status_code == 422
    assert client.post("/api/calc/comparison", json={"currentSolution": "juniper"}).status_code == 404


def test_not_found_body_names_the_missing_key(client: FlaskClient):
    response = client.get("/api/industries/mining/value-drivers")

    assert response.status_code == 404
    assert response.json["kind"] == "industry"
    assert response.json["key"] == "mining"


def test_value_drivers_endpoint(client: FlaskClient):
    response = client.get("/api/industries/healthcare/value-drivers")

    assert response.status_code == 200
    assert response.json["valueDrivers"][0] == "complianceImprovement"


def test_benchmarks_endpoint(client: FlaskClient):
    body = client.get("/api/benchmarks").json

    assert body["averageDataBreachCost"]["overall"] == 4350000
    assert body["securityIncidentFrequency"]["small"] == 3


def test_feature_endpoints(client: FlaskClient):
    matrix = client.get("/api/features").json
    portnox = client.get("/api/vendors/portnox/features").json

    assert matrix["deploymentModel"]["cisco"] == {"value": "On-premises", "score": 2}
    assert portnox["licensingModel"]["value"] == "Simple subscription"
    assert client.get("/api/vendors/juniper/features").status_code == 404


def test_single_roi_metric(client: FlaskClient):
    response = client.get("/api/roi-metrics/paybackPeriod")

    assert response.status_code == 200
    assert response.json["measurementUnit"] == "years"
    assert client.get("/api/roi-metrics/nope").status_code == 404
