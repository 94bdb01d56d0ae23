"""
MedFin - Hospital Finance Dashboard.

Financial metrics for hospital departments, treatments and insurance
claims, presented through a Streamlit dashboard.
"""

__version__ = "0.1.0"

from medfin.metrics.engine import department_rankings, hospital_metrics

__all__ = ["department_rankings", "hospital_metrics", "__version__"]
