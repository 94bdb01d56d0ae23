"""Analytics page: rankings, per-patient economics and insights."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import streamlit as st

from app.components.charts import (
    budget_utilization_chart,
    efficiency_profitability_chart,
    efficiency_trend_chart,
    per_patient_chart,
    rankings_table,
)
from app.components.data import get_config, get_datasets
from app.components.metric_card import render_metric_row
from medfin.metrics.engine import (
    claim_status_rates,
    department_rankings,
    hospital_metrics,
)
from medfin.results.formatting import (
    format_currency,
    format_percentage,
    format_signed_percentage,
)

st.set_page_config(page_title="Analytics - MedFin", page_icon="📈", layout="wide")

st.title("📈 Analytics & Insights")
st.caption("Advanced financial analytics and performance insights")

config = get_config()
symbol = config.get_currency_symbol()
template = config.chart_template
data = get_datasets()

departments = data["departments"]
stats = data["insurance"].claim_stats
averages = hospital_metrics(departments)
rankings = department_rankings(departments)

if not rankings:
    st.warning("No department data available for analysis.")
    st.stop()

# ===== HOSPITAL-WIDE METRICS =====
render_metric_row([
    ("Avg Cost Per Patient", format_currency(averages.avg_cost_per_patient, symbol), "Hospital-wide average"),
    ("Avg Revenue Per Patient", format_currency(averages.avg_revenue_per_patient, symbol), "Hospital-wide average"),
    ("Avg Efficiency Score", format_percentage(averages.avg_efficiency), "ROI across departments"),
    ("Avg Profitability", format_percentage(averages.avg_profitability), "Net margin average"),
])

# ===== CLAIM RATES =====
rates = claim_status_rates(stats)
render_metric_row([
    ("Claim Approval Rate", format_percentage(rates.approval_rate), f"{stats.approved:,} of {stats.total:,} claims"),
    ("Pending Claims", format_percentage(rates.pending_rate), f"{stats.pending:,} pending"),
    ("Rejection Rate", format_percentage(rates.rejection_rate), f"{stats.rejected:,} rejected"),
])

st.divider()

# ===== RANKINGS =====
st.header("🏆 Department Performance Rankings")
table = rankings_table(rankings)
st.dataframe(
    table.style.format({
        "Efficiency %": format_signed_percentage,
        "Profitability %": format_percentage,
        "Cost/Patient": lambda v: format_currency(v, symbol),
        "Revenue/Patient": lambda v: format_currency(v, symbol),
    }),
    use_container_width=True,
    hide_index=True,
)

st.divider()

# ===== CHARTS =====
col1, col2 = st.columns(2)

with col1:
    st.subheader("Department Efficiency vs Profitability")
    st.plotly_chart(efficiency_profitability_chart(rankings, template), use_container_width=True)

    st.subheader("Budget Utilization Rate")
    st.plotly_chart(budget_utilization_chart(departments, template), use_container_width=True)

with col2:
    st.subheader("Cost vs Revenue Per Patient")
    st.plotly_chart(per_patient_chart(rankings, template), use_container_width=True)

    st.subheader("Department Efficiency Trend")
    st.plotly_chart(efficiency_trend_chart(rankings, template), use_container_width=True)

st.divider()

# ===== KEY INSIGHTS =====
top = rankings[0]
bottom = rankings[-1]

col1, col2 = st.columns(2)

with col1:
    st.success(f"""
**Top Performer**

**{top.name}** leads with an efficiency score of **{format_percentage(top.efficiency)}**.

Revenue per patient: {format_currency(top.revenue_per_patient, symbol)} |
Profitability: {format_percentage(top.profitability)}
""")

with col2:
    st.warning(f"""
**Improvement Opportunity**

**{bottom.name}** has an efficiency of **{format_percentage(bottom.efficiency)}**.

Potential improvement: focus on cost optimisation and patient volume increase.
""")

# ===== FORMULAS =====
with st.expander("📖 Calculation Formulas Reference"):
    st.markdown("""
| Metric | Formula |
|---|---|
| Efficiency (ROI) | (Revenue − Budget) / Budget × 100 |
| Profitability | (Revenue − Budget) / Revenue × 100 |
| Cost per Patient | Budget / Patient Load |
| Revenue per Patient | Revenue / Patient Load |
| Budget Utilization | Budget × (1 + Overrun/100) / Budget × 100 |
| Claim Approval Rate | Approved / Total × 100 |
| Weighted Average Cost | Σ(Cost × Weight) / Σ(Weight) |

Any ratio whose denominator is zero is reported as 0.
""")
