from __future__ import annotations

from math import isclose

import pytest

from nac_tco.core.tco import (
    annual_costs,
    initial_costs,
    party_costs,
    total_cost,
    total_implementation_days,
)

FTE_COST = 100000.0
DOWNTIME_COST = 5000.0


def test_incumbent_costs_at_neutral_multiplier(cisco_small):
    assert initial_costs(cisco_small) == 135000
    assert annual_costs(cisco_small, FTE_COST, DOWNTIME_COST) == 285000
    assert total_cost(cisco_small, FTE_COST, DOWNTIME_COST, years=3) == 990000


def test_reference_costs_at_neutral_multiplier(portnox_small):
    assert initial_costs(portnox_small) == 9000
    assert annual_costs(portnox_small, FTE_COST, DOWNTIME_COST) == 75000
    assert total_cost(portnox_small, FTE_COST, DOWNTIME_COST, years=3) == 234000


@pytest.mark.parametrize("k", [0.0, 0.5, 1.3, 2.22])
def test_costs_are_linear_in_multiplier(cisco_small, k):
    base_initial = initial_costs(cisco_small, 1.0)
    base_annual = annual_costs(cisco_small, FTE_COST, DOWNTIME_COST, 1.0)

    assert isclose(initial_costs(cisco_small, k), base_initial * k)
    assert isclose(annual_costs(cisco_small, FTE_COST, DOWNTIME_COST, k), base_annual * k, abs_tol=1e-6)


@pytest.mark.parametrize("multiplier", [0.9, 1.0, 2.22])
def test_zero_years_is_initial_cost_only(cisco_small, portnox_small, multiplier):
    for factors in (cisco_small, portnox_small):
        assert total_cost(factors, FTE_COST, DOWNTIME_COST, 0, multiplier) == initial_costs(factors, multiplier)


def test_party_costs_bundle(cisco_small):
    costs = party_costs(cisco_small, 2.0, FTE_COST, DOWNTIME_COST, years=5)

    assert costs.multiplier == 2.0
    assert costs.initial == 270000
    assert costs.annual == 570000
    assert costs.total == 270000 + 570000 * 5


def test_total_implementation_days(store):
    assert total_implementation_days(store.implementation_timeline("cisco", "small")) == 100
    assert total_implementation_days(store.implementation_timeline("portnox", "small")) == 10
