"""Pytest fixtures for MedFin tests."""

import json

import pytest

from medfin.core.entities import Department, Treatment


@pytest.fixture
def two_departments() -> list:
    """A profitable and a loss-making department."""
    return [
        Department(name="A", budget=100, cost_overruns=0.0, patient_load=10, revenue_generated=150),
        Department(name="B", budget=100, cost_overruns=0.0, patient_load=10, revenue_generated=90),
    ]


@pytest.fixture
def cardiology() -> Department:
    """Department used for the end-to-end figures."""
    return Department(
        name="Cardiology",
        budget=5_000_000,
        cost_overruns=12,
        patient_load=2000,
        revenue_generated=6_000_000,
    )


@pytest.fixture
def treatments() -> list:
    """Two weighted treatments and one with the default weight."""
    return [
        Treatment(id=1, name="Angioplasty", cost=250000, gov_cost=120000, weight=2),
        Treatment(id=2, name="MRI Scan", cost=9000, gov_cost=3500, weight=1),
        Treatment(id=3, name="Normal Delivery", cost=50000, gov_cost=10000),
    ]


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding a small, valid copy of every dataset."""
    datasets = {
        "departments": [
            {"name": "Cardiology", "budget": 5000000, "costOverruns": 12,
             "patientLoad": 2000, "revenueGenerated": 6000000},
            {"name": "Pediatrics", "budget": 2000000, "costOverruns": -5,
             "patientLoad": 0, "revenueGenerated": 1500000},
        ],
        "costs": {
            "treatments": [
                {"id": 1, "name": "Angioplasty", "cost": 250000, "govCost": 120000, "weight": 3},
                {"id": 2, "name": "MRI Scan", "cost": 9000, "govCost": 3500},
            ]
        },
        "insurance": {
            "claimStats": {"total": 100, "approved": 80, "pending": 15, "rejected": 5,
                           "averageAmount": 85000, "fraudScore": 3.2},
            "claimCoverage": {"Angioplasty": 80, "MRI Scan": 60},
        },
        "metrics": {
            "totalSpending": 7000000,
            "totalRevenue": 7500000,
            "profitMargin": 6.7,
            "insuranceClaimsProcessed": 100,
        },
        "trends": {
            "yearlySpending": [{"year": 2022, "amount": 100}, {"year": 2023, "amount": 110}],
            "departmentBudget": [{"department": "Cardiology", "amount": 0.5}],
            "settlementRatios": [{"type": "Cashless", "value": 60}],
            "costBreakdown": [{"name": "Staff", "value": 45}],
        },
    }
    for name, content in datasets.items():
        (tmp_path / f"{name}.json").write_text(json.dumps(content))
    return tmp_path
