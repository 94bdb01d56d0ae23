"""Dashboard configuration.

Settings can come from:
1. YAML/JSON files
2. Environment variables (for deployment)
3. Defaults baked into DashboardConfig

Example usage:
    from medfin.config import load_dashboard_config, config_from_env

    config = config_from_env(load_dashboard_config(Path("config/dashboard.yaml")))
    departments = load_departments(config.data_dir)
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import List, Optional

import yaml

from medfin.results.formatting import CURRENCY_SYMBOLS

logger = logging.getLogger(__name__)

# Environment variable -> DashboardConfig attribute
ENV_OVERRIDES = {
    "MEDFIN_CURRENCY": "currency",
    "MEDFIN_DATA_DIR": "data_dir",
    "MEDFIN_LOG_LEVEL": "log_level",
}

DEFAULT_CHART_COLORS = ["#00f0ff", "#a855f7", "#ec4899", "#10b981"]


@dataclass
class DashboardConfig:
    """Dashboard-wide settings.

    Attributes:
        currency: ISO code used for money display ("INR", "GBP", "USD", "EUR")
        data_dir: Directory holding the JSON datasets; None uses bundled data
        chart_colors: Palette cycled through by pie and bar charts
        chart_template: Plotly template name
        log_level: Root logging level for the app
    """

    currency: str = "INR"
    data_dir: Optional[str] = None
    chart_colors: List[str] = field(default_factory=lambda: list(DEFAULT_CHART_COLORS))
    chart_template: str = "plotly_white"
    log_level: str = "INFO"

    def get_currency_symbol(self) -> str:
        """Get the currency symbol for display."""
        return CURRENCY_SYMBOLS.get(self.currency, self.currency)

    @property
    def data_path(self) -> Optional[Path]:
        """data_dir as a Path, or None for bundled data."""
        return Path(self.data_dir) if self.data_dir else None


def load_dashboard_config(config_path: Path) -> DashboardConfig:
    """Load dashboard configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        DashboardConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported or a key is unknown
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        if config_path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f) or {}
        elif config_path.suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config format: {config_path.suffix}. "
                "Use .yaml, .yml, or .json"
            )

    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping: {config_path}")

    known = {attr.name for attr in fields(DashboardConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(
            f"Unknown config keys in {config_path}: {', '.join(unknown)}"
        )

    logger.info(f"Loaded dashboard config from {config_path}")
    return DashboardConfig(**data)


def save_dashboard_config(config: DashboardConfig, config_path: Path) -> None:
    """Save dashboard configuration to YAML or JSON file.

    Args:
        config: Configuration to save
        config_path: Path to save to (.yaml, .yml, or .json)

    Raises:
        ValueError: If file format is not supported
    """
    data = asdict(config)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        if config_path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        elif config_path.suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            raise ValueError(
                f"Unsupported config format: {config_path.suffix}. "
                "Use .yaml, .yml, or .json"
            )


def config_from_env(base: Optional[DashboardConfig] = None) -> DashboardConfig:
    """Overlay MEDFIN_* environment variables on a configuration.

    Args:
        base: Starting configuration (defaults if None)

    Returns:
        New DashboardConfig; ``base`` is left untouched
    """
    config = base if base is not None else DashboardConfig()

    overrides = {}
    for env_var, attr in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            overrides[attr] = value
            logger.debug(f"Config override from {env_var}: {attr}={value}")

    return replace(config, **overrides)


def resolve_log_level(name: str) -> int:
    """Numeric logging level for a level name such as "info" or "DEBUG".

    Raises:
        ValueError: If the name is not a standard logging level
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(
            f"Unknown log level: {name!r}. "
            "Use DEBUG, INFO, WARNING, ERROR or CRITICAL"
        )
    return level
