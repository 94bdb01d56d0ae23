"""Financial metrics layer: per-department KPIs, aggregation, trends."""

from medfin.metrics.engine import (
    ClaimStatusRates,
    CoverageImpact,
    HospitalMetrics,
    RankedDepartment,
    TreatmentSavings,
    approval_rate,
    budget_to_revenue_ratio,
    budget_utilization,
    claim_status_rates,
    cost_efficiency,
    cost_per_patient,
    coverage_impact,
    department_efficiency,
    department_rankings,
    hospital_metrics,
    profitability,
    revenue_per_patient,
    treatment_savings,
    weighted_average_cost,
)
from medfin.metrics.trends import (
    compound_annual_growth,
    share_of_total,
    year_over_year_growth,
)

__all__ = [
    "ClaimStatusRates",
    "CoverageImpact",
    "HospitalMetrics",
    "RankedDepartment",
    "TreatmentSavings",
    "approval_rate",
    "budget_to_revenue_ratio",
    "budget_utilization",
    "claim_status_rates",
    "cost_efficiency",
    "cost_per_patient",
    "coverage_impact",
    "department_efficiency",
    "department_rankings",
    "hospital_metrics",
    "profitability",
    "revenue_per_patient",
    "treatment_savings",
    "weighted_average_cost",
    "compound_annual_growth",
    "share_of_total",
    "year_over_year_growth",
]
