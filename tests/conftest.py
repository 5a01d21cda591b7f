# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - sample_record     → raw mapping for an ordinary human subject
# - make_record       → factory: sample_record with overrides, as SubjectRecord
# - fixture_records   → the four built-in subjects, joined
# - fixture_dir       → the built-in sources written as JSON under tmp_path
# - app_config        → AppConfig with built-in sources
#
# ==============================================

import json

import pytest

from anomaly_report.analysis.record import SubjectRecord
from anomaly_report.config import AppConfig, reset_config
from anomaly_report.sources.fixtures import builtin_sources
from anomaly_report.sources.joiner import join_sources


@pytest.fixture
def sample_record():
    """A subject that passes every check."""
    return {
        "identifier": 10,
        "name": "Test Subject",
        "reported_gender": "Male",
        "appearance_notes": "Nothing unusual",
        "cam_front_observation": "Humanoid",
        "cam_back_observation": "Normal Back",
        "night_vision_observation": "Visible",
        "voice_pitch": "Normal",
        "has_pulse": True,
    }


@pytest.fixture
def make_record(sample_record):
    def _make(**overrides):
        return SubjectRecord.from_dict({**sample_record, **overrides})
    return _make


@pytest.fixture
def fixture_records():
    return join_sources(builtin_sources())


@pytest.fixture
def fixture_dir(tmp_path):
    sources = builtin_sources()
    (tmp_path / "subjects.json").write_text(json.dumps(sources.subjects))
    (tmp_path / "camera_observations.json").write_text(json.dumps(sources.camera_observations))
    (tmp_path / "biometric_readings.json").write_text(json.dumps(sources.biometric_readings))
    return tmp_path


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture(autouse=True)
def clean_config():
    """Never leak the config singleton between tests."""
    reset_config()
    yield
    reset_config()
