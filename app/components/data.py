"""Cached dataset access for the app pages.

Datasets are read once per data directory and cached by Streamlit; pages
pass the records straight into the metrics engine.
"""

import logging
from pathlib import Path
from typing import Optional

import streamlit as st
import yaml

from medfin.config import (
    DashboardConfig,
    config_from_env,
    load_dashboard_config,
    resolve_log_level,
)
from medfin.data.loader import (
    DataValidationError,
    load_departments,
    load_hospital_summary,
    load_insurance,
    load_treatments,
    load_trends,
)

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "dashboard.yaml"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_config() -> DashboardConfig:
    """Dashboard config from session state, file and environment.

    Stops the page with an error message when the config file is invalid.
    """
    if "config" not in st.session_state:
        try:
            base = load_dashboard_config(CONFIG_PATH) if CONFIG_PATH.exists() else None
        except (ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load dashboard config: {e}")
            st.error(f"Could not load dashboard config: {e}")
            st.stop()
        st.session_state.config = config_from_env(base)
    return st.session_state.config


def configure_logging(config: DashboardConfig) -> None:
    """Set the root logging level from the config.

    Stops the page with an error message when the level name is unknown.
    """
    try:
        level = resolve_log_level(config.log_level)
    except ValueError as e:
        st.error(f"Invalid logging configuration: {e}")
        st.stop()
    logging.basicConfig(level=level, format=LOG_FORMAT)


@st.cache_data
def _load_all(data_path: Optional[Path]):
    return {
        "departments": load_departments(data_path),
        "treatments": load_treatments(data_path),
        "insurance": load_insurance(data_path),
        "summary": load_hospital_summary(data_path),
        "trends": load_trends(data_path),
    }


def get_datasets() -> dict:
    """All datasets for the configured data directory.

    Stops the page with an error message when the data cannot be loaded.
    """
    config = get_config()
    try:
        return _load_all(config.data_path)
    except (FileNotFoundError, DataValidationError) as e:
        logger.error(f"Failed to load datasets: {e}")
        st.error(f"Could not load dashboard data: {e}")
        st.stop()
