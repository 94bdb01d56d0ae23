"""Plotly figure builders for the dashboard pages.

Plain functions returning figures so they can be tested without a
Streamlit session. Pages pass the result to ``st.plotly_chart``.
"""

from typing import List, Optional, Sequence, Tuple

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from medfin.config import DEFAULT_CHART_COLORS
from medfin.core.entities import Department, Treatment, TrendData
from medfin.metrics.engine import RankedDepartment, budget_utilization
from medfin.metrics.trends import share_of_total

CRORE = 10_000_000


def yearly_spending_chart(
    series: Sequence[Tuple[int, float]],
    template: str = "plotly_white",
) -> go.Figure:
    """Line chart of total spending per year, in crore."""
    df = pd.DataFrame({
        "Year": TrendData.labels(series),
        "Amount": TrendData.values(series),
    })
    df["Spending (Cr)"] = df["Amount"] / CRORE

    fig = px.line(
        df,
        x="Year",
        y="Spending (Cr)",
        markers=True,
        template=template,
    )
    fig.update_traces(line_color=DEFAULT_CHART_COLORS[0], line_width=3)
    fig.update_layout(yaxis_tickprefix="₹", yaxis_ticksuffix="Cr", xaxis_dtick=1)
    return fig


def department_budget_chart(
    series: Sequence[Tuple[str, float]],
    template: str = "plotly_white",
) -> go.Figure:
    """Bar chart of budget allocation per department (already in crore)."""
    df = pd.DataFrame({
        "Department": TrendData.labels(series),
        "Budget (Cr)": TrendData.values(series),
    })
    fig = px.bar(
        df,
        x="Department",
        y="Budget (Cr)",
        template=template,
        color_discrete_sequence=[DEFAULT_CHART_COLORS[1]],
    )
    fig.update_layout(yaxis_tickprefix="₹", yaxis_ticksuffix="Cr")
    return fig


def share_pie_chart(
    series: Sequence[Tuple[str, float]],
    label_name: str = "Category",
    colors: Optional[List[str]] = None,
    hole: float = 0.0,
    template: str = "plotly_white",
) -> go.Figure:
    """Pie (or doughnut, with ``hole``) of a labelled series.

    Slices are labelled with their share of the total, one decimal place.
    """
    labels = TrendData.labels(series)
    values = TrendData.values(series)
    df = pd.DataFrame({label_name: labels, "Value": values})
    slice_text = [
        f"{label}<br>{share:.1f}%"
        for label, share in zip(labels, share_of_total(values))
    ]
    fig = px.pie(
        df,
        names=label_name,
        values="Value",
        hole=hole,
        template=template,
        color_discrete_sequence=colors or DEFAULT_CHART_COLORS,
    )
    fig.update_traces(text=slice_text, textinfo="text")
    return fig


def treatment_cost_comparison_chart(
    treatments: Sequence[Treatment],
    template: str = "plotly_white",
) -> go.Figure:
    """Grouped bars of private vs government cost per treatment."""
    df = pd.DataFrame({
        "Treatment": [t.name for t in treatments],
        "Private": [t.cost for t in treatments],
        "Government": [t.gov_cost for t in treatments],
    })
    long_df = df.melt(id_vars="Treatment", var_name="Provider", value_name="Cost")

    fig = px.bar(
        long_df,
        x="Treatment",
        y="Cost",
        color="Provider",
        barmode="group",
        template=template,
        color_discrete_map={"Private": "#a855f7", "Government": "#00f0ff"},
    )
    fig.update_layout(yaxis_tickprefix="₹")
    return fig


def efficiency_profitability_chart(
    rankings: Sequence[RankedDepartment],
    template: str = "plotly_white",
) -> go.Figure:
    """Grouped bars of efficiency and profitability per department."""
    df = pd.DataFrame({
        "Department": [d.name for d in rankings],
        "Efficiency %": [round(d.efficiency, 1) for d in rankings],
        "Profitability %": [round(d.profitability, 1) for d in rankings],
    })
    long_df = df.melt(id_vars="Department", var_name="Metric", value_name="Percent")

    fig = px.bar(
        long_df,
        x="Department",
        y="Percent",
        color="Metric",
        barmode="group",
        template=template,
        color_discrete_sequence=DEFAULT_CHART_COLORS[:2],
    )
    fig.update_layout(yaxis_ticksuffix="%")
    return fig


def per_patient_chart(
    rankings: Sequence[RankedDepartment],
    template: str = "plotly_white",
) -> go.Figure:
    """Grouped bars of cost and revenue per patient."""
    df = pd.DataFrame({
        "Department": [d.name for d in rankings],
        "Cost/Patient": [round(d.cost_per_patient) for d in rankings],
        "Revenue/Patient": [round(d.revenue_per_patient) for d in rankings],
    })
    long_df = df.melt(id_vars="Department", var_name="Metric", value_name="Amount")

    fig = px.bar(
        long_df,
        x="Department",
        y="Amount",
        color="Metric",
        barmode="group",
        template=template,
        color_discrete_map={"Cost/Patient": "#ec4899", "Revenue/Patient": "#10b981"},
    )
    fig.update_layout(yaxis_tickprefix="₹")
    return fig


def budget_utilization_chart(
    departments: Sequence[Department],
    template: str = "plotly_white",
) -> go.Figure:
    """Bars of budget utilization with a reference line at 100%."""
    df = pd.DataFrame({
        "Department": [d.name for d in departments],
        "Utilization %": [
            budget_utilization(d.budget, d.cost_overruns) for d in departments
        ],
    })
    fig = px.bar(
        df,
        x="Department",
        y="Utilization %",
        template=template,
        color_discrete_sequence=["#f59e0b"],
    )
    fig.add_hline(y=100, line_dash="dash", annotation_text="On budget")
    fig.update_layout(yaxis_ticksuffix="%")
    return fig


def efficiency_trend_chart(
    rankings: Sequence[RankedDepartment],
    template: str = "plotly_white",
) -> go.Figure:
    """Line through department efficiency scores in rank order."""
    df = pd.DataFrame({
        "Department": [d.name for d in rankings],
        "Efficiency %": [round(d.efficiency, 1) for d in rankings],
    })
    fig = px.line(df, x="Department", y="Efficiency %", markers=True, template=template)
    fig.update_traces(line_color=DEFAULT_CHART_COLORS[0], line_width=3)
    fig.update_layout(yaxis_ticksuffix="%")
    return fig


def rankings_table(rankings: Sequence[RankedDepartment]) -> pd.DataFrame:
    """Rankings as a display DataFrame, one row per department."""
    return pd.DataFrame([
        {
            "Rank": d.rank,
            "Department": d.name,
            "Efficiency %": round(d.efficiency, 1),
            "Profitability %": round(d.profitability, 1),
            "Cost/Patient": round(d.cost_per_patient),
            "Revenue/Patient": round(d.revenue_per_patient),
        }
        for d in rankings
    ])
