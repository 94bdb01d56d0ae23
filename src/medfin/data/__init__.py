"""Static dataset loading and boundary validation."""

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

__all__ = [
    "DATASETS",
    "STATIC_DATA_DIR",
    "DataValidationError",
    "load_dataset",
    "load_departments",
    "load_hospital_summary",
    "load_insurance",
    "load_treatments",
    "load_trends",
]
