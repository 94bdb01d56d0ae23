"""Healthcare financial metrics.

Pure, stateless arithmetic over department, treatment and claim records.
Every function is total: whenever a divisor would be zero the result is
0.0 rather than an infinite or undefined value.

Functions accept the typed records from ``medfin.core.entities`` or plain
mappings with the same fields (snake_case or the camelCase JSON keys).
Inputs are never mutated; derived records are freshly allocated.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from medfin.core.entities import ClaimStats, Department


# JSON key for each record attribute the engine reads
_JSON_KEYS = {
    "budget": "budget",
    "cost_overruns": "costOverruns",
    "patient_load": "patientLoad",
    "revenue_generated": "revenueGenerated",
    "cost": "cost",
    "weight": "weight",
    "name": "name",
}


def _field(record: Any, attr: str, default: Any = None) -> Any:
    """Read a field from a record or a JSON-shaped mapping."""
    if isinstance(record, Mapping):
        if attr in record:
            return record[attr]
        return record.get(_JSON_KEYS.get(attr, attr), default)
    return getattr(record, attr, default)


# ============ PER-DEPARTMENT METRICS ============

def department_efficiency(revenue: float, budget: float) -> float:
    """Efficiency score (ROI) as a signed percentage.

    Args:
        revenue: Revenue generated.
        budget: Budget allocated.

    Returns:
        ``(revenue - budget) / budget * 100``, or 0 when budget is 0.
    """
    if budget == 0:
        return 0.0
    return ((revenue - budget) / budget) * 100


def cost_per_patient(budget: float, patient_load: int) -> float:
    """Budget spent per patient treated (0 when no patients)."""
    if patient_load == 0:
        return 0.0
    return budget / patient_load


def revenue_per_patient(revenue: float, patient_load: int) -> float:
    """Revenue earned per patient treated (0 when no patients)."""
    if patient_load == 0:
        return 0.0
    return revenue / patient_load


def profitability(revenue: float, budget: float) -> float:
    """Profit margin as a signed percentage of revenue.

    Args:
        revenue: Revenue generated.
        budget: Budget allocated.

    Returns:
        ``(revenue - budget) / revenue * 100``, or 0 when revenue is 0.
    """
    if revenue == 0:
        return 0.0
    return ((revenue - budget) / revenue) * 100


def budget_utilization(budget: float, cost_overrun: float) -> float:
    """Actual spending as a percentage of budget.

    Actual spending is the budget inflated by the overrun percentage, so a
    10% overrun gives 110 and a 5% underspend gives 95.

    Args:
        budget: Budget allocated.
        cost_overrun: Overrun percentage (negative when under budget).

    Returns:
        Utilization percentage, 100 meaning exactly on budget. 0 when the
        budget is 0.
    """
    if budget == 0:
        return 0.0
    actual_spending = budget * (1 + cost_overrun / 100)
    return (actual_spending / budget) * 100


def cost_efficiency(budget: float, cost_overrun: float) -> float:
    """Share of budget left after paying for the overrun.

    ``(budget - (actual - budget)) / budget * 100``; an on-budget department
    scores 100 and each point of overrun costs one point. 0 when the budget
    is 0.
    """
    if budget == 0:
        return 0.0
    actual_spending = budget * (1 + cost_overrun / 100)
    return ((budget - (actual_spending - budget)) / budget) * 100


def budget_to_revenue_ratio(budget: float, revenue: float) -> float:
    """Budget as a percentage of revenue (0 when revenue is 0)."""
    if revenue == 0:
        return 0.0
    return (budget / revenue) * 100


# ============ TREATMENTS & CLAIMS ============

def weighted_average_cost(items: Optional[Iterable[Any]]) -> float:
    """Weighted average treatment cost.

    A missing, None or zero weight counts as 1.

    Args:
        items: Treatments or ``{"cost": ..., "weight": ...}`` mappings.

    Returns:
        ``sum(cost * weight) / sum(weight)``, or 0 for an empty input or a
        zero total weight.
    """
    if not items:
        return 0.0

    total_weighted_cost = 0.0
    total_weight = 0.0
    for item in items:
        weight = _field(item, "weight") or 1
        total_weighted_cost += _field(item, "cost") * weight
        total_weight += weight

    if total_weight == 0:
        return 0.0
    return total_weighted_cost / total_weight


def approval_rate(approved: int, total: int) -> float:
    """Percentage of claims approved (0 when there are no claims)."""
    if total == 0:
        return 0.0
    return (approved / total) * 100


@dataclass(frozen=True)
class ClaimStatusRates:
    """Claim counts by status expressed as percentages of the total."""

    approval_rate: float
    pending_rate: float
    rejection_rate: float

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "approval_rate": self.approval_rate,
            "pending_rate": self.pending_rate,
            "rejection_rate": self.rejection_rate,
        }


def claim_status_rates(stats: ClaimStats) -> ClaimStatusRates:
    """Approval, pending and rejection rates for a set of claim statistics."""
    return ClaimStatusRates(
        approval_rate=approval_rate(stats.approved, stats.total),
        pending_rate=approval_rate(stats.pending, stats.total),
        rejection_rate=approval_rate(stats.rejected, stats.total),
    )


@dataclass(frozen=True)
class TreatmentSavings:
    """Saving from choosing the government price over the private one."""

    absolute_savings: float
    percentage_savings: float
    cost_ratio: float  # government / private

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "absolute_savings": self.absolute_savings,
            "percentage_savings": self.percentage_savings,
            "cost_ratio": self.cost_ratio,
        }


def treatment_savings(private_cost: float, gov_cost: float) -> TreatmentSavings:
    """Compare private and government prices for one treatment.

    When the private cost is 0 both the percentage saving and the cost
    ratio are 0.
    """
    savings = private_cost - gov_cost
    if private_cost == 0:
        return TreatmentSavings(
            absolute_savings=savings,
            percentage_savings=0.0,
            cost_ratio=0.0,
        )
    return TreatmentSavings(
        absolute_savings=savings,
        percentage_savings=(savings / private_cost) * 100,
        cost_ratio=gov_cost / private_cost,
    )


@dataclass(frozen=True)
class CoverageImpact:
    """Split of a treatment bill between insurer and patient."""

    covered_amount: float
    out_of_pocket: float
    coverage_percent: float

    @property
    def effective_cost(self) -> float:
        """What the patient actually pays."""
        return self.out_of_pocket

    @property
    def savings(self) -> float:
        """What the insurer saves the patient."""
        return self.covered_amount

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "covered_amount": self.covered_amount,
            "out_of_pocket": self.out_of_pocket,
            "effective_cost": self.effective_cost,
            "coverage_percent": self.coverage_percent,
            "savings": self.savings,
        }


def coverage_impact(treatment_cost: float, coverage_percent: float) -> CoverageImpact:
    """Covered amount and out-of-pocket cost for an insured treatment."""
    covered_amount = (treatment_cost * coverage_percent) / 100
    return CoverageImpact(
        covered_amount=covered_amount,
        out_of_pocket=treatment_cost - covered_amount,
        coverage_percent=coverage_percent,
    )


# ============ HOSPITAL-WIDE ============

@dataclass(frozen=True)
class HospitalMetrics:
    """Hospital-wide averages across departments."""

    avg_cost_per_patient: float = 0.0
    avg_revenue_per_patient: float = 0.0
    avg_efficiency: float = 0.0
    avg_profitability: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for serialization."""
        return {
            "avg_cost_per_patient": self.avg_cost_per_patient,
            "avg_revenue_per_patient": self.avg_revenue_per_patient,
            "avg_efficiency": self.avg_efficiency,
            "avg_profitability": self.avg_profitability,
        }


def hospital_metrics(departments: Optional[List[Any]]) -> HospitalMetrics:
    """Aggregate department records into hospital-wide averages.

    Per-patient averages are pooled (total budget over total patients), while
    efficiency and profitability are simple means of the per-department
    scores.

    Args:
        departments: Department records or JSON-shaped mappings.

    Returns:
        HospitalMetrics; all zeros for an empty input.
    """
    if not departments:
        return HospitalMetrics()

    total_budget = 0.0
    total_revenue = 0.0
    total_patients = 0
    total_efficiency = 0.0
    total_profitability = 0.0

    for dept in departments:
        budget = _field(dept, "budget")
        revenue = _field(dept, "revenue_generated")
        total_budget += budget
        total_revenue += revenue
        total_patients += _field(dept, "patient_load")
        total_efficiency += department_efficiency(revenue, budget)
        total_profitability += profitability(revenue, budget)

    count = len(departments)
    return HospitalMetrics(
        avg_cost_per_patient=(
            total_budget / total_patients if total_patients > 0 else 0.0
        ),
        avg_revenue_per_patient=(
            total_revenue / total_patients if total_patients > 0 else 0.0
        ),
        avg_efficiency=total_efficiency / count,
        avg_profitability=total_profitability / count,
    )


@dataclass(frozen=True)
class RankedDepartment:
    """A department extended with its derived metrics and league position."""

    name: str
    budget: float
    cost_overruns: float
    patient_load: int
    revenue_generated: float
    efficiency: float
    profitability: float
    cost_per_patient: float
    revenue_per_patient: float
    rank: int

    @property
    def department(self) -> Department:
        """The underlying department record."""
        return Department(
            name=self.name,
            budget=self.budget,
            cost_overruns=self.cost_overruns,
            patient_load=self.patient_load,
            revenue_generated=self.revenue_generated,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "rank": self.rank,
            "name": self.name,
            "budget": self.budget,
            "cost_overruns": self.cost_overruns,
            "patient_load": self.patient_load,
            "revenue_generated": self.revenue_generated,
            "efficiency": self.efficiency,
            "profitability": self.profitability,
            "cost_per_patient": self.cost_per_patient,
            "revenue_per_patient": self.revenue_per_patient,
        }


def department_rankings(departments: Optional[List[Any]]) -> List[RankedDepartment]:
    """Rank departments by efficiency, best first.

    The sort is stable, so departments with equal efficiency keep their
    input order.

    Args:
        departments: Department records or JSON-shaped mappings.

    Returns:
        RankedDepartment list with 1-based ``rank``; empty for no input.
    """
    if not departments:
        return []

    scored = []
    for dept in departments:
        budget = _field(dept, "budget")
        revenue = _field(dept, "revenue_generated")
        patients = _field(dept, "patient_load")
        scored.append({
            "name": _field(dept, "name"),
            "budget": budget,
            "cost_overruns": _field(dept, "cost_overruns", 0.0),
            "patient_load": patients,
            "revenue_generated": revenue,
            "efficiency": department_efficiency(revenue, budget),
            "profitability": profitability(revenue, budget),
            "cost_per_patient": cost_per_patient(budget, patients),
            "revenue_per_patient": revenue_per_patient(revenue, patients),
        })

    ordered = sorted(scored, key=lambda d: d["efficiency"], reverse=True)
    return [
        RankedDepartment(rank=index + 1, **values)
        for index, values in enumerate(ordered)
    ]
