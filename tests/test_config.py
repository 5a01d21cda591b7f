# ==============================================
# Tests for Configuration
# ==============================================

import pytest

from anomaly_report.config import AppConfig, SQLConfig, get_config, reset_config
from anomaly_report.errors import ConfigError


class TestGetConfig:

    def test_defaults(self, monkeypatch):
        for name in ("FIXTURES_DIR", "SUBJECTS_TABLE", "OBSERVATIONS_TABLE",
                     "BIOMETRICS_TABLE", "REPORT_TITLE"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr("anomaly_report.config.load_dotenv", lambda **kwargs: False)
        config = get_config()
        assert config.fixtures.source_dir is None
        assert config.sql.subjects_table == "subjects"
        assert config.report.title == "ANOMALIES REPORT"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FIXTURES_DIR", str(tmp_path))
        monkeypatch.setenv("SUBJECTS_TABLE", "people")
        monkeypatch.setenv("REPORT_TITLE", "NIGHT SHIFT")
        config = get_config()
        assert config.fixtures.source_dir == str(tmp_path)
        assert config.sql.subjects_table == "people"
        assert config.report.title == "NIGHT SHIFT"

    def test_singleton(self):
        assert get_config() is get_config()

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first

    def test_app_config_defaults(self):
        config = AppConfig()
        assert config.sql.biometrics_table == "biometric_readings"


class TestTableNames:

    def test_injected_table_name_rejected(self, monkeypatch):
        monkeypatch.setenv("SUBJECTS_TABLE", "x; DROP TABLE y")
        with pytest.raises(ConfigError) as exc_info:
            get_config()
        assert exc_info.value.setting == "subjects_table"

    def test_trailing_newline_rejected(self):
        with pytest.raises(ConfigError):
            SQLConfig(biometrics_table="bio\n")

    def test_plain_identifiers_accepted(self):
        config = SQLConfig(subjects_table="people_2", observations_table="_cams")
        assert config.subjects_table == "people_2"
