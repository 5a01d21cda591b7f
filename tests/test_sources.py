# ==============================================
# Tests for Fixture Sources, Loader and Joiner
# ==============================================

import json

import pytest

from anomaly_report.errors import FixtureError, ValidationError
from anomaly_report.sources.fixtures import SUBJECTS, FixtureSources, builtin_sources
from anomaly_report.sources.joiner import join_sources
from anomaly_report.sources.loader import load_sources


class TestBuiltinSources:

    def test_four_rows_each(self):
        assert builtin_sources().row_counts() == {
            "subjects": 4,
            "camera_observations": 4,
            "biometric_readings": 4,
        }

    def test_copies_are_independent(self):
        sources = builtin_sources()
        sources.subjects[0]["name"] = "Changed"
        sources.subjects.clear()
        assert SUBJECTS[0]["name"] == "Daniel Reyes"
        assert len(builtin_sources().subjects) == 4


class TestJoinSources:

    def test_fixture_join(self, fixture_records):
        assert [r.identifier for r in fixture_records] == [1, 2, 3, 4]
        clara = fixture_records[3]
        assert clara.name == "Clara Novak"
        assert clara.voice_pitch == "Ultra-Deep Bass"
        assert clara.cam_front_observation == "Humanoid"

    def test_inner_join_drops_unmatched(self):
        sources = builtin_sources()
        sources.camera_observations = [
            row for row in sources.camera_observations if row["subject_id"] != 2
        ]
        sources.biometric_readings = [
            row for row in sources.biometric_readings if row["subject_id"] != 4
        ]
        records = join_sources(sources)
        assert [r.identifier for r in records] == [1, 3]

    def test_orphan_observation_ignored(self):
        sources = builtin_sources()
        sources.camera_observations.append(
            {"subject_id": 99, "cam_front": "Humanoid", "cam_back": "Normal Back", "night_vision": "Visible"}
        )
        assert len(join_sources(sources)) == 4

    def test_order_follows_subjects(self):
        sources = builtin_sources()
        sources.subjects.reverse()
        assert [r.identifier for r in join_sources(sources)] == [4, 3, 2, 1]

    def test_duplicate_key_rejected(self):
        sources = builtin_sources()
        sources.biometric_readings.append(
            {"subject_id": 1, "voice_pitch": "Normal", "has_pulse": True}
        )
        with pytest.raises(ValidationError) as exc_info:
            join_sources(sources)
        assert exc_info.value.field_name == "subject_id"

    def test_duplicate_subject_rejected(self):
        sources = builtin_sources()
        sources.subjects.append(dict(sources.subjects[0]))
        with pytest.raises(ValidationError) as exc_info:
            join_sources(sources)
        assert exc_info.value.field_name == "id"

    def test_missing_key_rejected(self):
        sources = builtin_sources()
        del sources.camera_observations[0]["subject_id"]
        with pytest.raises(ValidationError) as exc_info:
            join_sources(sources)
        assert exc_info.value.field_name == "subject_id"

    def test_unhashable_key_rejected(self):
        sources = builtin_sources()
        sources.subjects[0]["id"] = [1]
        with pytest.raises(ValidationError) as exc_info:
            join_sources(sources)
        assert exc_info.value.field_name == "id"
        assert exc_info.value.details["actual"] == "list"

    def test_bool_key_rejected(self):
        sources = builtin_sources()
        sources.camera_observations[0]["subject_id"] = True
        with pytest.raises(ValidationError) as exc_info:
            join_sources(sources)
        assert exc_info.value.field_name == "subject_id"

    def test_missing_column_named_as_record_field(self):
        sources = builtin_sources()
        del sources.biometric_readings[2]["has_pulse"]
        with pytest.raises(ValidationError) as exc_info:
            join_sources(sources)
        assert exc_info.value.field_name == "has_pulse"

    def test_empty_sources(self):
        assert join_sources(FixtureSources()) == []


class TestLoadSources:

    def test_load_matches_builtin(self, fixture_dir):
        loaded = load_sources(fixture_dir)
        builtin = builtin_sources()
        assert loaded.subjects == builtin.subjects
        assert loaded.camera_observations == builtin.camera_observations
        assert loaded.biometric_readings == builtin.biometric_readings

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FixtureError):
            load_sources(tmp_path / "nowhere")

    def test_missing_file(self, fixture_dir):
        (fixture_dir / "biometric_readings.json").unlink()
        with pytest.raises(FixtureError) as exc_info:
            load_sources(fixture_dir)
        assert exc_info.value.path.endswith("biometric_readings.json")

    def test_invalid_json(self, fixture_dir):
        (fixture_dir / "subjects.json").write_text("{not json")
        with pytest.raises(FixtureError):
            load_sources(fixture_dir)

    def test_not_an_array(self, fixture_dir):
        (fixture_dir / "subjects.json").write_text(json.dumps({"id": 1}))
        with pytest.raises(FixtureError) as exc_info:
            load_sources(fixture_dir)
        assert exc_info.value.code == "FIXTURE_ERROR"

    def test_undecodable_file(self, fixture_dir):
        (fixture_dir / "subjects.json").write_bytes(b'[{"name": "\xff\xfe"}]')
        with pytest.raises(FixtureError) as exc_info:
            load_sources(fixture_dir)
        assert exc_info.value.path.endswith("subjects.json")

    def test_file_is_a_directory(self, fixture_dir):
        (fixture_dir / "subjects.json").unlink()
        (fixture_dir / "subjects.json").mkdir()
        with pytest.raises(FixtureError):
            load_sources(fixture_dir)
