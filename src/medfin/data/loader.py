"""Static dataset loading.

Reads the JSON datasets behind the dashboard and turns them into the typed
records in ``medfin.core.entities``. Shape is validated here, once, so the
metrics engine can assume well-typed numeric fields.

Datasets (file name -> contents):
- departments.json: list of department objects
- costs.json: {"treatments": [...]}
- insurance.json: {"claimStats": {...}, "claimCoverage": {...}}
- metrics.json: headline hospital figures
- trends.json: chart series
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from medfin.core.entities import (
    ClaimStats,
    Department,
    HospitalSummary,
    InsuranceData,
    Treatment,
    TrendData,
)

logger = logging.getLogger(__name__)

STATIC_DATA_DIR = Path(__file__).parent / "static"

DATASETS = ("departments", "costs", "insurance", "metrics", "trends")

DEPARTMENT_FIELDS = ("budget", "costOverruns", "patientLoad", "revenueGenerated")
# costOverruns may be negative (under budget)
NON_NEGATIVE_DEPARTMENT_FIELDS = ("budget", "patientLoad", "revenueGenerated")
TREATMENT_FIELDS = ("cost", "govCost")
CLAIM_FIELDS = ("total", "approved", "pending", "rejected")
SUMMARY_FIELDS = (
    "totalSpending",
    "totalRevenue",
    "profitMargin",
    "insuranceClaimsProcessed",
)


class DataValidationError(ValueError):
    """A dataset is malformed or missing required fields."""


def _resolve_dir(data_dir: Optional[Union[str, Path]]) -> Path:
    return Path(data_dir) if data_dir is not None else STATIC_DATA_DIR


def load_dataset(name: str, data_dir: Optional[Union[str, Path]] = None) -> Any:
    """Read and parse one JSON dataset.

    Args:
        name: Dataset name without extension (e.g. "departments").
        data_dir: Directory to read from (bundled data if None).

    Returns:
        The parsed JSON document.

    Raises:
        FileNotFoundError: If the dataset file doesn't exist.
        DataValidationError: If the file is not valid JSON.
    """
    path = _resolve_dir(data_dir) / f"{name}.json"
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DataValidationError(f"{name}: invalid JSON ({e})") from e

    logger.debug(f"Read dataset {name} from {path}")
    return data


def _require_numeric(
    dataset: str,
    record: Dict[str, Any],
    fields: Iterable[str],
    label: str,
) -> None:
    """Check that each field is present and a non-bool number."""
    if not isinstance(record, dict):
        raise DataValidationError(f"{dataset}: {label} is not an object")
    for key in fields:
        if key not in record:
            raise DataValidationError(f"{dataset}: {label} is missing '{key}'")
        value = record[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(
                f"{dataset}: {label} field '{key}' must be a number, got {value!r}"
            )


def _require_list(dataset: str, data: Any) -> List[Any]:
    if not isinstance(data, list):
        raise DataValidationError(f"{dataset}: expected a list, got {type(data).__name__}")
    return data


def load_departments(data_dir: Optional[Union[str, Path]] = None) -> List[Department]:
    """Load department records.

    Raises:
        DataValidationError: On missing/non-numeric fields, a negative
            budget, revenue or patient load, a fractional patient load, or
            duplicate department names.
    """
    rows = _require_list("departments", load_dataset("departments", data_dir))

    departments = []
    seen = set()
    for i, row in enumerate(rows):
        _require_numeric("departments", row, DEPARTMENT_FIELDS, f"record {i}")
        name = row.get("name")
        if not isinstance(name, str) or not name.strip():
            raise DataValidationError(f"departments: record {i} has no name")
        if name in seen:
            raise DataValidationError(f"departments: duplicate department '{name}'")
        for key in NON_NEGATIVE_DEPARTMENT_FIELDS:
            if row[key] < 0:
                raise DataValidationError(
                    f"departments: '{name}' has negative {key} {row[key]}"
                )
        if not float(row["patientLoad"]).is_integer():
            raise DataValidationError(
                f"departments: '{name}' patientLoad must be a whole number, "
                f"got {row['patientLoad']}"
            )
        seen.add(name)
        departments.append(Department.from_dict(row))

    logger.info(f"Loaded {len(departments)} departments")
    return departments


def load_treatments(data_dir: Optional[Union[str, Path]] = None) -> List[Treatment]:
    """Load treatment price records from costs.json.

    Raises:
        DataValidationError: On missing fields or duplicate treatment ids.
    """
    data = load_dataset("costs", data_dir)
    if not isinstance(data, dict) or "treatments" not in data:
        raise DataValidationError("costs: missing 'treatments' list")
    rows = _require_list("costs", data["treatments"])

    treatments = []
    seen = set()
    for i, row in enumerate(rows):
        _require_numeric("costs", row, TREATMENT_FIELDS, f"treatment {i}")
        if "id" not in row or "name" not in row:
            raise DataValidationError(f"costs: treatment {i} needs 'id' and 'name'")
        if row["id"] in seen:
            raise DataValidationError(f"costs: duplicate treatment id {row['id']}")
        if row.get("weight") is not None:
            _require_numeric("costs", row, ("weight",), f"treatment {i}")
        seen.add(row["id"])
        treatments.append(Treatment.from_dict(row))

    logger.info(f"Loaded {len(treatments)} treatments")
    return treatments


def load_insurance(data_dir: Optional[Union[str, Path]] = None) -> InsuranceData:
    """Load claim statistics and coverage rates.

    Claim counts that do not add up to the total are logged, not rejected.
    """
    data = load_dataset("insurance", data_dir)
    if not isinstance(data, dict) or "claimStats" not in data:
        raise DataValidationError("insurance: missing 'claimStats'")
    _require_numeric("insurance", data["claimStats"], CLAIM_FIELDS, "claimStats")

    coverage = data.get("claimCoverage", {})
    if not isinstance(coverage, dict):
        raise DataValidationError("insurance: 'claimCoverage' must be an object")
    _require_numeric("insurance", coverage, coverage.keys(), "claimCoverage")

    insurance = InsuranceData.from_dict(data)
    stats: ClaimStats = insurance.claim_stats
    if not stats.is_consistent:
        logger.warning(
            f"Claim counts do not sum to total: {stats.approved} + {stats.pending} "
            f"+ {stats.rejected} != {stats.total}"
        )

    logger.info(
        f"Loaded insurance data: {stats.total} claims, "
        f"{len(insurance.claim_coverage)} coverage rates"
    )
    return insurance


def load_hospital_summary(data_dir: Optional[Union[str, Path]] = None) -> HospitalSummary:
    """Load headline hospital figures from metrics.json."""
    data = load_dataset("metrics", data_dir)
    _require_numeric("metrics", data, SUMMARY_FIELDS, "summary")
    return HospitalSummary.from_dict(data)


def load_trends(data_dir: Optional[Union[str, Path]] = None) -> TrendData:
    """Load the Dashboard chart series from trends.json."""
    data = load_dataset("trends", data_dir)
    if not isinstance(data, dict):
        raise DataValidationError("trends: expected an object")
    try:
        trends = TrendData.from_dict(data)
    except (KeyError, TypeError) as e:
        raise DataValidationError(f"trends: malformed series ({e})") from e

    logger.info(f"Loaded trends: {len(trends.yearly_spending)} years of spending")
    return trends
