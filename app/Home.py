"""MedFin - Home page."""

import sys
from pathlib import Path

import streamlit as st

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.components.data import configure_logging, get_config

st.set_page_config(
    page_title="MedFin",
    page_icon="🏥",
    layout="wide",
)

config = get_config()
configure_logging(config)

st.title("MedFin: Hospital Finance Dashboard")

st.markdown("""
## What is MedFin?

**MedFin** turns a hospital's departmental budgets, treatment prices and
insurance claim statistics into the financial indicators management asks for.

### What MedFin shows:
- Where each department's **budget** goes and what it **earns back**
- Which departments are the most **efficient** (ROI) and **profitable**
- How much patients **save** in government vs private hospitals
- How much of a bill **insurance** covers

---

**Use the sidebar** to navigate:
1. **Dashboard** - Headline figures and trends
2. **Departments** - Per-department financials
3. **Costs** - Private vs government treatment prices
4. **Insurance** - Claims and coverage estimator
5. **Analytics** - Rankings, utilization and insights
6. **Reports** - Report catalogue
7. **Contact** - Get in touch
""")

st.info(f"""
All figures are shown in **{config.currency}** ({config.get_currency_symbol()}).
Data is read from static datasets; nothing you enter is stored.
""")
