"""Dashboard page: headline figures, hospital averages and trends."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import streamlit as st

from app.components.charts import (
    department_budget_chart,
    share_pie_chart,
    yearly_spending_chart,
)
from app.components.data import get_config, get_datasets
from app.components.metric_card import render_metric_row
from medfin.metrics.engine import hospital_metrics
from medfin.metrics.trends import compound_annual_growth, year_over_year_growth
from medfin.results.formatting import (
    format_currency,
    format_number,
    format_percentage,
    format_signed_percentage,
)

st.set_page_config(page_title="Dashboard - MedFin", page_icon="📊", layout="wide")

st.title("📊 Dashboard")
st.caption("Comprehensive financial overview and analytics")

config = get_config()
symbol = config.get_currency_symbol()
data = get_datasets()

summary = data["summary"]
trends = data["trends"]
averages = hospital_metrics(data["departments"])

# ===== HEADLINE FIGURES =====
render_metric_row([
    ("Total Spending", format_number(summary.total_spending, symbol), None),
    ("Total Revenue", format_number(summary.total_revenue, symbol), None),
    ("Profit Margin", format_percentage(summary.profit_margin), None),
    ("Claims Processed", f"{summary.insurance_claims_processed:,}", None),
])

st.divider()

# ===== HOSPITAL-WIDE AVERAGES =====
render_metric_row([
    (
        "Avg Cost Per Patient",
        format_currency(averages.avg_cost_per_patient, symbol),
        "Hospital-wide average",
    ),
    (
        "Avg Revenue Per Patient",
        format_currency(averages.avg_revenue_per_patient, symbol),
        "Hospital-wide average",
    ),
    (
        "Avg Efficiency Score",
        format_percentage(averages.avg_efficiency),
        "ROI across departments",
    ),
])

st.divider()

# ===== CHARTS =====
col1, col2 = st.columns(2)

with col1:
    st.subheader("Yearly Spending Trend")
    st.plotly_chart(
        yearly_spending_chart(trends.yearly_spending, config.chart_template),
        use_container_width=True,
    )
    growth = year_over_year_growth(trends.yearly_spending)
    if growth:
        latest_year, latest_growth = growth[-1]
        cagr = compound_annual_growth(trends.yearly_spending)
        st.caption(
            f"{latest_year}: {format_signed_percentage(latest_growth)} year on year | "
            f"CAGR {format_percentage(cagr)}"
        )

with col2:
    st.subheader("Department Budget Allocation")
    st.plotly_chart(
        department_budget_chart(trends.department_budget, config.chart_template),
        use_container_width=True,
    )

col3, col4 = st.columns(2)

with col3:
    st.subheader("Claim Settlement Ratios")
    st.plotly_chart(
        share_pie_chart(
            trends.settlement_ratios,
            label_name="Type",
            colors=config.chart_colors,
            hole=0.4,
            template=config.chart_template,
        ),
        use_container_width=True,
    )

with col4:
    st.subheader("Cost Breakdown")
    st.plotly_chart(
        share_pie_chart(
            trends.cost_breakdown,
            label_name="Category",
            colors=config.chart_colors,
            template=config.chart_template,
        ),
        use_container_width=True,
    )
