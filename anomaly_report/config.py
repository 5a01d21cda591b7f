# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides typed config objects to all other modules.
#
# CLASSES:
# --------
# - FixtureConfig (dataclass)
#     source_dir: str | None     (default None → built-in fixture rows)
#
# - SQLConfig (dataclass)
#     subjects_table: str        (default "subjects")
#     observations_table: str    (default "camera_observations")
#     biometrics_table: str      (default "biometric_readings")
#     Names must be plain SQL identifiers, else ConfigError.
#
# - ReportConfig (dataclass)
#     title: str                 (default "ANOMALIES REPORT")
#
# - AppConfig (dataclass)
#     fixtures: FixtureConfig
#     sql: SQLConfig
#     report: ReportConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads the env.
#
# USAGE:
# ------
#   from anomaly_report.config import get_config
#   config = get_config()
#   print(config.sql.subjects_table)
#
# ==============================================

import os
import re
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from anomaly_report.errors import ConfigError


@dataclass
class FixtureConfig:
    """Where the three fixture sources come from."""
    source_dir: Optional[str] = None


# Table names go into the SQL text unquoted
TABLE_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]{0,63}")


@dataclass
class SQLConfig:
    """Table names used when rendering the SQL script."""
    subjects_table: str = "subjects"
    observations_table: str = "camera_observations"
    biometrics_table: str = "biometric_readings"

    def __post_init__(self):
        for setting in ("subjects_table", "observations_table", "biometrics_table"):
            value = getattr(self, setting)
            if not isinstance(value, str) or not TABLE_NAME_PATTERN.fullmatch(value):
                raise ConfigError(
                    setting,
                    f"Invalid table name for {setting}: {value!r}"
                )


@dataclass
class ReportConfig:
    """Report display settings."""
    title: str = "ANOMALIES REPORT"


@dataclass
class AppConfig:
    """Main application configuration."""
    fixtures: FixtureConfig = field(default_factory=FixtureConfig)
    sql: SQLConfig = field(default_factory=SQLConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.
    
    Returns:
        AppConfig: Application configuration
    """
    global _config_instance
    
    if _config_instance is not None:
        return _config_instance
    
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    fixture_config = FixtureConfig(
        source_dir=os.getenv("FIXTURES_DIR") or None
    )
    
    sql_config = SQLConfig(
        subjects_table=os.getenv("SUBJECTS_TABLE", "subjects"),
        observations_table=os.getenv("OBSERVATIONS_TABLE", "camera_observations"),
        biometrics_table=os.getenv("BIOMETRICS_TABLE", "biometric_readings")
    )
    
    report_config = ReportConfig(
        title=os.getenv("REPORT_TITLE", "ANOMALIES REPORT")
    )
    
    _config_instance = AppConfig(
        fixtures=fixture_config,
        sql=sql_config,
        report=report_config
    )
    
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration."""
    global _config_instance
    _config_instance = None
