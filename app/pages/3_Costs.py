"""Treatment costs page: private vs government prices."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pandas as pd
import streamlit as st

from app.components.charts import treatment_cost_comparison_chart
from app.components.data import get_config, get_datasets
from medfin.metrics.engine import treatment_savings, weighted_average_cost
from medfin.results.formatting import format_currency, format_percentage

st.set_page_config(page_title="Costs - MedFin", page_icon="💊", layout="wide")

st.title("💊 Treatment Costs")
st.caption("Compare private and government treatment costs")

config = get_config()
symbol = config.get_currency_symbol()
treatments = get_datasets()["treatments"]

if not treatments:
    st.info("No treatments in the dataset.")
    st.stop()

# ===== SELECTED TREATMENT =====
selected = st.selectbox(
    "Select Treatment for Details:",
    treatments,
    format_func=lambda t: t.name,
)

savings = treatment_savings(selected.cost, selected.gov_cost)

col1, col2 = st.columns(2)

with col1:
    with st.container(border=True):
        st.subheader(selected.name)
        st.metric("Private Cost", format_currency(selected.cost, symbol))
        st.metric("Government Cost", format_currency(selected.gov_cost, symbol))
        st.metric("Savings", format_currency(savings.absolute_savings, symbol))
        st.metric("Savings %", format_percentage(savings.percentage_savings))
        st.caption(f"Government price is {savings.cost_ratio:.2f}x the private price")

with col2:
    st.subheader("Cost Comparison")
    st.plotly_chart(
        treatment_cost_comparison_chart([selected], config.chart_template),
        use_container_width=True,
    )

st.divider()

# ===== ALL TREATMENTS =====
st.subheader("All Treatments - Private vs Government Cost Comparison")
st.plotly_chart(
    treatment_cost_comparison_chart(treatments, config.chart_template),
    use_container_width=True,
)

avg_private = weighted_average_cost(treatments)
avg_gov = weighted_average_cost(
    [{"cost": t.gov_cost, "weight": t.weight} for t in treatments]
)
c1, c2 = st.columns(2)
c1.metric("Weighted Avg Private Cost", format_currency(avg_private, symbol))
c2.metric("Weighted Avg Government Cost", format_currency(avg_gov, symbol))

rows = []
for t in treatments:
    row_savings = treatment_savings(t.cost, t.gov_cost)
    rows.append({
        "Treatment": t.name,
        "Private Cost": format_currency(t.cost, symbol),
        "Government Cost": format_currency(t.gov_cost, symbol),
        "Savings": format_currency(row_savings.absolute_savings, symbol),
        "Savings %": format_percentage(row_savings.percentage_savings),
    })
table = pd.DataFrame(rows)
st.dataframe(table, use_container_width=True, hide_index=True)
