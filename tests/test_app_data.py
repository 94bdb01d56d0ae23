"""Tests for config and dataset access used by the app pages."""

import logging

import pytest

from app.components import data as app_data
from medfin.config import DashboardConfig


class PageStopped(Exception):
    """Raised in place of st.stop() so tests can observe it."""


class SessionState(dict):
    """Attribute-style dict, like st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        self[name] = value


class RecordingStreamlit:
    """Stands in for the streamlit calls made by app.components.data."""

    def __init__(self):
        self.session_state = SessionState()
        self.errors = []

    def error(self, message):
        self.errors.append(message)

    def stop(self):
        raise PageStopped()


@pytest.fixture
def fake_st(monkeypatch):
    """Route app.components.data's streamlit calls to a recorder."""
    recorder = RecordingStreamlit()
    monkeypatch.setattr(app_data, "st", recorder)
    for var in ("MEDFIN_CURRENCY", "MEDFIN_DATA_DIR", "MEDFIN_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return recorder


class TestGetConfig:
    """Tests for get_config."""

    def test_reads_file_once(self, fake_st, tmp_path, monkeypatch):
        """The config is loaded into session state and reused."""
        path = tmp_path / "dashboard.yaml"
        path.write_text("currency: GBP\n")
        monkeypatch.setattr(app_data, "CONFIG_PATH", path)

        config = app_data.get_config()
        path.write_text("currency: USD\n")

        assert config.currency == "GBP"
        assert app_data.get_config() is config

    def test_unknown_key_stops_page(self, fake_st, tmp_path, monkeypatch):
        """An unknown setting shows an error instead of a traceback."""
        path = tmp_path / "dashboard.yaml"
        path.write_text("currency: INR\nthemes: dark\n")
        monkeypatch.setattr(app_data, "CONFIG_PATH", path)

        with pytest.raises(PageStopped):
            app_data.get_config()

        assert len(fake_st.errors) == 1
        assert "themes" in fake_st.errors[0]

    def test_malformed_yaml_stops_page(self, fake_st, tmp_path, monkeypatch):
        """Unparseable YAML shows an error instead of a traceback."""
        path = tmp_path / "dashboard.yaml"
        path.write_text("currency: [INR\n")
        monkeypatch.setattr(app_data, "CONFIG_PATH", path)

        with pytest.raises(PageStopped):
            app_data.get_config()
        assert len(fake_st.errors) == 1


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_valid_level(self, fake_st, monkeypatch):
        """A known level is passed to basicConfig as a number."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        app_data.configure_logging(DashboardConfig(log_level="debug"))

        assert calls[0]["level"] == logging.DEBUG
        assert fake_st.errors == []

    def test_bad_level_stops_page(self, fake_st):
        """An unknown level shows an error instead of a traceback."""
        with pytest.raises(PageStopped):
            app_data.configure_logging(DashboardConfig(log_level="VERBOSE"))

        assert "VERBOSE" in fake_st.errors[0]


class TestGetDatasets:
    """Tests for get_datasets."""

    def test_uses_configured_directory(self, fake_st, data_dir):
        """Datasets come from the config's data directory."""
        fake_st.session_state.config = DashboardConfig(data_dir=str(data_dir))

        datasets = app_data.get_datasets()

        assert [d.name for d in datasets["departments"]] == ["Cardiology", "Pediatrics"]
        assert datasets["insurance"].claim_stats.total == 100

    def test_missing_directory_stops_page(self, fake_st, tmp_path):
        """Missing data shows an error instead of a traceback."""
        fake_st.session_state.config = DashboardConfig(data_dir=str(tmp_path / "absent"))

        with pytest.raises(PageStopped):
            app_data.get_datasets()

        assert "Dataset not found" in fake_st.errors[0]
