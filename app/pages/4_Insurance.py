"""Insurance page: claim statistics and coverage estimator."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pandas as pd
import streamlit as st

from app.components.charts import share_pie_chart
from app.components.data import get_config, get_datasets
from app.components.metric_card import render_metric_row
from medfin.core.entities import ClaimStatus
from medfin.metrics.engine import coverage_impact
from medfin.results.formatting import format_currency

st.set_page_config(page_title="Insurance - MedFin", page_icon="🛡️", layout="wide")

st.title("🛡️ Insurance & Claims")
st.caption("Insurance claims management and coverage analysis")

config = get_config()
symbol = config.get_currency_symbol()
data = get_datasets()
insurance = data["insurance"]
treatments = data["treatments"]
stats = insurance.claim_stats

# ===== CLAIM COUNTS =====
render_metric_row([
    ("Total Claims", f"{stats.total:,}", None),
    ("Approved", f"{stats.approved:,}", None),
    ("Pending", f"{stats.pending:,}", None),
    ("Rejected", f"{stats.rejected:,}", None),
])

render_metric_row([
    ("Average Claim Amount", format_currency(stats.average_amount, symbol), None),
    ("Fraud Score", f"{stats.fraud_score}/10", "Lower is better"),
])

st.divider()

col1, col2 = st.columns(2)

# ===== STATUS DISTRIBUTION =====
with col1:
    st.subheader("Claim Status Distribution")
    status_series = [(status.value, stats.count_for(status)) for status in ClaimStatus]
    st.plotly_chart(
        share_pie_chart(
            status_series,
            label_name="Status",
            colors=["#10b981", "#f59e0b", "#ef4444"],
            template=config.chart_template,
        ),
        use_container_width=True,
    )

# ===== COVERAGE ESTIMATOR =====
with col2:
    with st.container(border=True):
        st.subheader("Claim Coverage Estimator")
        selected = st.selectbox(
            "Select Treatment:",
            [None] + list(treatments),
            format_func=lambda t: "Select a treatment" if t is None else t.name,
        )

        if selected is not None:
            impact = coverage_impact(selected.cost, insurance.coverage_for(selected.name))
            st.metric("Treatment Cost", format_currency(selected.cost, symbol))
            st.metric("Coverage", f"{impact.coverage_percent:g}%")
            st.metric("Covered Amount", format_currency(impact.covered_amount, symbol))
            st.metric("Out of Pocket", format_currency(impact.out_of_pocket, symbol))
            st.progress(min(max(impact.coverage_percent, 0.0), 100.0) / 100)

st.divider()

# ===== COVERAGE TABLE =====
st.subheader("Treatment Coverage Rates")
coverage_df = pd.DataFrame(
    [
        {"Treatment": name, "Coverage %": pct}
        for name, pct in insurance.claim_coverage.items()
    ]
)
st.dataframe(coverage_df, use_container_width=True, hide_index=True)
