"""Departments page: financial card per department."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import streamlit as st

from app.components.data import get_config, get_datasets
from medfin.metrics.engine import budget_to_revenue_ratio
from medfin.results.formatting import format_number, format_percentage

st.set_page_config(page_title="Departments - MedFin", page_icon="🏥", layout="wide")

st.title("🏥 Departments")
st.caption("Financial overview of all hospital departments")

symbol = get_config().get_currency_symbol()
departments = get_datasets()["departments"]

if not departments:
    st.info("No departments in the dataset.")
    st.stop()

cols = st.columns(2)

for index, dept in enumerate(departments):
    with cols[index % 2]:
        with st.container(border=True):
            st.subheader(dept.name)

            c1, c2 = st.columns(2)
            with c1:
                st.metric("Budget", format_number(dept.budget, symbol))
                st.metric("Patient Load", f"{dept.patient_load:,}")
            with c2:
                st.metric(
                    "Cost Overruns",
                    format_percentage(dept.cost_overruns),
                    delta=f"{dept.cost_overruns:+.1f}%",
                    delta_color="inverse",
                )
                st.metric("Revenue Generated", format_number(dept.revenue_generated, symbol))

            ratio = budget_to_revenue_ratio(dept.budget, dept.revenue_generated)
            st.caption(f"Budget / Revenue: {format_percentage(ratio)}")
            st.progress(min(ratio, 100.0) / 100)
