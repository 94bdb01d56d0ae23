"""Tests for static dataset loading and validation."""

import json
import logging

import pytest

from medfin.core.entities import Department, HospitalSummary, InsuranceData, TrendData
from medfin.data.loader import (
    DATASETS,
    STATIC_DATA_DIR,
    DataValidationError,
    load_dataset,
    load_departments,
    load_hospital_summary,
    load_insurance,
    load_treatments,
    load_trends,
)


def write_dataset(directory, name, content):
    """Overwrite one dataset file in a test directory."""
    (directory / f"{name}.json").write_text(json.dumps(content))


class TestBundledData:
    """The datasets shipped with the package load cleanly."""

    def test_all_files_present(self):
        """Every dataset has a bundled JSON file."""
        for name in DATASETS:
            assert (STATIC_DATA_DIR / f"{name}.json").exists()

    def test_bundled_departments(self):
        """Bundled departments are valid and uniquely named."""
        departments = load_departments()
        assert len(departments) > 0
        assert len({d.name for d in departments}) == len(departments)

    def test_bundled_treatments_have_coverage(self):
        """Every bundled treatment has an insurance coverage rate."""
        treatments = load_treatments()
        insurance = load_insurance()
        for t in treatments:
            assert t.name in insurance.claim_coverage

    def test_bundled_claims_consistent(self):
        """Bundled claim counts add up."""
        assert load_insurance().claim_stats.is_consistent

    def test_bundled_summary_and_trends(self):
        """Summary and trend files parse into records."""
        assert isinstance(load_hospital_summary(), HospitalSummary)
        trends = load_trends()
        assert isinstance(trends, TrendData)
        assert len(trends.yearly_spending) >= 2


class TestLoadDepartments:
    """Tests for department loading."""

    def test_loads_records(self, data_dir):
        """JSON camelCase keys map onto Department fields."""
        departments = load_departments(data_dir)

        assert departments[0] == Department(
            name="Cardiology",
            budget=5000000,
            cost_overruns=12,
            patient_load=2000,
            revenue_generated=6000000,
        )
        assert departments[1].patient_load == 0

    def test_accepts_string_path(self, data_dir):
        """data_dir may be a plain string."""
        assert len(load_departments(str(data_dir))) == 2

    def test_missing_field(self, data_dir):
        """A missing numeric field is rejected by name."""
        write_dataset(data_dir, "departments", [{"name": "X", "budget": 1, "costOverruns": 0,
                                                 "patientLoad": 1}])
        with pytest.raises(DataValidationError, match="revenueGenerated"):
            load_departments(data_dir)

    def test_non_numeric_field(self, data_dir):
        """Strings where numbers are expected are rejected."""
        write_dataset(data_dir, "departments", [{"name": "X", "budget": "lots", "costOverruns": 0,
                                                 "patientLoad": 1, "revenueGenerated": 1}])
        with pytest.raises(DataValidationError, match="budget"):
            load_departments(data_dir)

    def test_duplicate_names(self, data_dir):
        """Department names must be unique."""
        row = {"name": "X", "budget": 1, "costOverruns": 0, "patientLoad": 1, "revenueGenerated": 1}
        write_dataset(data_dir, "departments", [row, row])
        with pytest.raises(DataValidationError, match="duplicate"):
            load_departments(data_dir)

    def test_negative_patient_load(self, data_dir):
        """Patient load cannot be negative."""
        write_dataset(data_dir, "departments", [{"name": "X", "budget": 1, "costOverruns": 0,
                                                 "patientLoad": -1, "revenueGenerated": 1}])
        with pytest.raises(DataValidationError, match="patientLoad"):
            load_departments(data_dir)

    @pytest.mark.parametrize("key", ["budget", "revenueGenerated"])
    def test_negative_amounts(self, data_dir, key):
        """Budget and revenue cannot be negative."""
        row = {"name": "X", "budget": 1, "costOverruns": 0, "patientLoad": 1, "revenueGenerated": 1}
        row[key] = -100
        write_dataset(data_dir, "departments", [row])
        with pytest.raises(DataValidationError, match=key):
            load_departments(data_dir)

    def test_negative_overrun_allowed(self, data_dir):
        """An under-budget department has a negative overrun."""
        write_dataset(data_dir, "departments", [{"name": "X", "budget": 1, "costOverruns": -5,
                                                 "patientLoad": 1, "revenueGenerated": 1}])
        assert load_departments(data_dir)[0].cost_overruns == -5

    def test_fractional_patient_load(self, data_dir):
        """Patient load is a whole number of patients."""
        write_dataset(data_dir, "departments", [{"name": "X", "budget": 1, "costOverruns": 0,
                                                 "patientLoad": 12.5, "revenueGenerated": 1}])
        with pytest.raises(DataValidationError, match="whole number"):
            load_departments(data_dir)

    def test_not_a_list(self, data_dir):
        """departments.json must hold a list."""
        write_dataset(data_dir, "departments", {"name": "X"})
        with pytest.raises(DataValidationError):
            load_departments(data_dir)


class TestLoadTreatments:
    """Tests for treatment loading."""

    def test_loads_records(self, data_dir):
        """Weights are optional."""
        treatments = load_treatments(data_dir)

        assert treatments[0].gov_cost == 120000
        assert treatments[0].weight == 3
        assert treatments[1].weight is None

    def test_missing_treatments_key(self, data_dir):
        """costs.json needs a treatments list."""
        write_dataset(data_dir, "costs", {"items": []})
        with pytest.raises(DataValidationError, match="treatments"):
            load_treatments(data_dir)

    def test_duplicate_ids(self, data_dir):
        """Treatment ids must be unique."""
        row = {"id": 1, "name": "A", "cost": 1, "govCost": 1}
        write_dataset(data_dir, "costs", {"treatments": [row, dict(row, name="B")]})
        with pytest.raises(DataValidationError, match="duplicate"):
            load_treatments(data_dir)


class TestLoadInsurance:
    """Tests for insurance loading."""

    def test_loads_records(self, data_dir):
        """Claim stats and coverage rates are read."""
        insurance = load_insurance(data_dir)

        assert isinstance(insurance, InsuranceData)
        assert insurance.claim_stats.approved == 80
        assert insurance.claim_stats.fraud_score == 3.2
        assert insurance.coverage_for("Angioplasty") == 80
        assert insurance.coverage_for("Unknown") == 0.0

    def test_inconsistent_counts_warn(self, data_dir, caplog):
        """Counts that don't sum to total are logged, not rejected."""
        write_dataset(data_dir, "insurance", {
            "claimStats": {"total": 100, "approved": 50, "pending": 10, "rejected": 10},
        })
        with caplog.at_level(logging.WARNING, logger="medfin.data.loader"):
            insurance = load_insurance(data_dir)

        assert insurance.claim_stats.total == 100
        assert "do not sum to total" in caplog.text

    def test_missing_claim_stats(self, data_dir):
        """claimStats is required."""
        write_dataset(data_dir, "insurance", {"claimCoverage": {}})
        with pytest.raises(DataValidationError, match="claimStats"):
            load_insurance(data_dir)


class TestLoadDataset:
    """Tests for raw dataset reading."""

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_dataset("departments", tmp_path)

    def test_invalid_json(self, data_dir):
        """Broken JSON is a validation error."""
        (data_dir / "metrics.json").write_text("{not json")
        with pytest.raises(DataValidationError, match="invalid JSON"):
            load_hospital_summary(data_dir)

    def test_malformed_trends(self, data_dir):
        """Series rows missing their keys are rejected."""
        write_dataset(data_dir, "trends", {"yearlySpending": [{"year": 2023}]})
        with pytest.raises(DataValidationError, match="trends"):
            load_trends(data_dir)
