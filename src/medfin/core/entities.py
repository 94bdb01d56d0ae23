"""Core record definitions for the finance dashboard.

These are the typed, immutable shapes of the static datasets. JSON files use
camelCase keys; the records use snake_case attributes and convert at the
boundary via ``from_dict``/``to_dict``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple


class ClaimStatus(Enum):
    """Insurance claim states shown on the Insurance page."""
    APPROVED = "Approved"
    PENDING = "Pending"
    REJECTED = "Rejected"


@dataclass(frozen=True)
class Department:
    """A hospital department's financial position for the reporting year."""

    name: str
    budget: float
    cost_overruns: float  # percent; negative means under budget
    patient_load: int
    revenue_generated: float

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Department":
        return cls(
            name=d["name"],
            budget=d["budget"],
            cost_overruns=d["costOverruns"],
            patient_load=d["patientLoad"],
            revenue_generated=d["revenueGenerated"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "budget": self.budget,
            "cost_overruns": self.cost_overruns,
            "patient_load": self.patient_load,
            "revenue_generated": self.revenue_generated,
        }


@dataclass(frozen=True)
class Treatment:
    """A treatment priced in both private and government hospitals."""

    id: int
    name: str
    cost: float
    gov_cost: float
    weight: Optional[float] = None  # relative frequency, None means 1

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Treatment":
        return cls(
            id=d["id"],
            name=d["name"],
            cost=d["cost"],
            gov_cost=d["govCost"],
            weight=d.get("weight"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "cost": self.cost,
            "gov_cost": self.gov_cost,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class ClaimStats:
    """Aggregate insurance claim counts.

    ``approved + pending + rejected`` is expected to equal ``total``. The
    metrics engine does not enforce this; the loader warns when it does not
    hold.
    """

    total: int
    approved: int
    pending: int
    rejected: int
    average_amount: float = 0.0
    fraud_score: float = 0.0  # 0-10, lower is better

    @property
    def is_consistent(self) -> bool:
        """True when the status counts add up to the total."""
        return self.approved + self.pending + self.rejected == self.total

    def count_for(self, status: ClaimStatus) -> int:
        """Number of claims in a given status."""
        if status == ClaimStatus.APPROVED:
            return self.approved
        elif status == ClaimStatus.PENDING:
            return self.pending
        return self.rejected

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ClaimStats":
        return cls(
            total=d["total"],
            approved=d["approved"],
            pending=d["pending"],
            rejected=d["rejected"],
            average_amount=d.get("averageAmount", 0.0),
            fraud_score=d.get("fraudScore", 0.0),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total": self.total,
            "approved": self.approved,
            "pending": self.pending,
            "rejected": self.rejected,
            "average_amount": self.average_amount,
            "fraud_score": self.fraud_score,
        }


@dataclass(frozen=True)
class InsuranceData:
    """Claim statistics plus per-treatment coverage percentages."""

    claim_stats: ClaimStats
    claim_coverage: Dict[str, float] = field(default_factory=dict)

    def coverage_for(self, treatment_name: str) -> float:
        """Coverage percent for a treatment, 0 if the insurer lists none."""
        return self.claim_coverage.get(treatment_name, 0.0)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "InsuranceData":
        return cls(
            claim_stats=ClaimStats.from_dict(d["claimStats"]),
            claim_coverage=dict(d.get("claimCoverage", {})),
        )


@dataclass(frozen=True)
class HospitalSummary:
    """Headline figures reported for the whole hospital (metrics.json)."""

    total_spending: float
    total_revenue: float
    profit_margin: float
    insurance_claims_processed: int

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "HospitalSummary":
        return cls(
            total_spending=d["totalSpending"],
            total_revenue=d["totalRevenue"],
            profit_margin=d["profitMargin"],
            insurance_claims_processed=d["insuranceClaimsProcessed"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_spending": self.total_spending,
            "total_revenue": self.total_revenue,
            "profit_margin": self.profit_margin,
            "insurance_claims_processed": self.insurance_claims_processed,
        }


@dataclass(frozen=True)
class TrendData:
    """Series plotted on the Dashboard.

    Each series is a tuple of ``(label, value)`` pairs in display order.
    Department budgets are expressed in crore.
    """

    yearly_spending: Tuple[Tuple[int, float], ...] = ()
    department_budget: Tuple[Tuple[str, float], ...] = ()
    settlement_ratios: Tuple[Tuple[str, float], ...] = ()
    cost_breakdown: Tuple[Tuple[str, float], ...] = ()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TrendData":
        return cls(
            yearly_spending=tuple(
                (row["year"], row["amount"]) for row in d.get("yearlySpending", [])
            ),
            department_budget=tuple(
                (row["department"], row["amount"]) for row in d.get("departmentBudget", [])
            ),
            settlement_ratios=tuple(
                (row["type"], row["value"]) for row in d.get("settlementRatios", [])
            ),
            cost_breakdown=tuple(
                (row["name"], row["value"]) for row in d.get("costBreakdown", [])
            ),
        )

    @staticmethod
    def values(series: Sequence[Tuple[Any, float]]) -> List[float]:
        """Numeric values of a series, dropping labels."""
        return [value for _, value in series]

    @staticmethod
    def labels(series: Sequence[Tuple[Any, float]]) -> List[Any]:
        """Labels of a series, dropping values."""
        return [label for label, _ in series]
