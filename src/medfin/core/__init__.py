"""Core record types shared across the loader, metrics and app layers."""

from medfin.core.entities import (
    ClaimStats,
    ClaimStatus,
    Department,
    HospitalSummary,
    InsuranceData,
    Treatment,
    TrendData,
)

__all__ = [
    "ClaimStats",
    "ClaimStatus",
    "Department",
    "HospitalSummary",
    "InsuranceData",
    "Treatment",
    "TrendData",
]
