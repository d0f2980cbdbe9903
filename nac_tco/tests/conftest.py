from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from nac_tco.app import create_app
from nac_tco.config import Settings
from nac_tco.domain.reference_data import ReferenceDataStore, get_reference_store
from nac_tco.schemas.reference import CostFactors, ImplementationTimeline


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def app(settings: Settings) -> Flask:
    flask_app = create_app(settings)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def store() -> ReferenceDataStore:
    return get_reference_store()


@pytest.fixture()
def cisco_small() -> CostFactors:
    return CostFactors(
        initialHardwareCost=75000,
        annualMaintenanceCost=25000,
        annualLicensingCost=40000,
        implementationServicesCost=35000,
        trainingCost=10000,
        networkRedesignCost=15000,
        fteCount=1,
        estimatedAnnualDowntimeHours=24,
    )


@pytest.fixture()
def portnox_small() -> CostFactors:
    return CostFactors(
        initialHardwareCost=0,
        annualMaintenanceCost=5000,
        annualLicensingCost=25000,
        implementationServicesCost=5000,
        trainingCost=2000,
        networkRedesignCost=2000,
        fteCount=0.25,
        estimatedAnnualDowntimeHours=4,
    )


@pytest.fixture()
def flat_timeline() -> ImplementationTimeline:
    return ImplementationTimeline(
        planningDays=10,
        deploymentDays=10,
        integrationDays=10,
        testingDays=10,
        staffTrainingDays=10,
        rolloutDays=10,
    )
