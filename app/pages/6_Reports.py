"""Reports page: catalogue of available reports."""

import streamlit as st

st.set_page_config(page_title="Reports - MedFin", page_icon="📄", layout="wide")

st.title("📄 Reports")
st.caption("Access comprehensive financial and operational reports")

REPORTS = [
    {
        "title": "📄 Annual Financial Report",
        "description": "Comprehensive annual financial overview with all departments, costs, and revenue analysis.",
        "date": "2023",
    },
    {
        "title": "📅 Monthly Summary",
        "description": "Monthly breakdown of expenses, revenue, and key financial metrics.",
        "date": "December 2023",
    },
    {
        "title": "👥 Patient Flow Analysis",
        "description": "Detailed analysis of patient admissions, treatments, and department utilization.",
        "date": "Q4 2023",
    },
    {
        "title": "🛡️ Insurance Summary",
        "description": "Complete insurance claims report with approval rates and coverage statistics.",
        "date": "2023",
    },
]

cols = st.columns(2)
for index, report in enumerate(REPORTS):
    with cols[index % 2]:
        with st.container(border=True):
            st.subheader(report["title"])
            st.caption(report["date"])
            st.write(report["description"])

st.divider()

st.markdown("""
#### Report Generation

Reports are generated from the same datasets as the dashboard. For custom
reports or specific date ranges, please contact the administration.
""")
