# ==============================================
# Joiner
# ==============================================
#
# PURPOSE:
#   Inner join of the three fixture sources on the subject
#   identifier, producing one SubjectRecord per subject that is
#   present in all three sources.
#
#   Equivalent to:
#     FROM subjects s
#     JOIN camera_observations c ON c.subject_id = s.id
#     JOIN biometric_readings b  ON b.subject_id = s.id
#
# RULES:
# ------
#   - Output order follows the subjects source
#   - Subjects missing from either other source are dropped
#   - A duplicate key within one source raises ValidationError
#   - A row without its key, or with a non-int key, raises ValidationError
#
# ==============================================

from typing import Dict, List, Sequence

from anomaly_report.analysis.record import SubjectRecord
from anomaly_report.errors import ValidationError
from .fixtures import FixtureSources, Row


def join_sources(sources: FixtureSources) -> List[SubjectRecord]:
    """
    Join the three sources into subject records.
    
    Args:
        sources: The subjects, camera observation and biometric rows
        
    Returns:
        Joined records in subjects-source order
        
    Raises:
        ValidationError: missing key, duplicate key, or a joined record
                         with a missing or mistyped field
    """
    # Index the two observation sources by subject
    observations = _index_by_key(sources.camera_observations, "subject_id")
    biometrics = _index_by_key(sources.biometric_readings, "subject_id")
    
    # Reject duplicate subjects as well
    _index_by_key(sources.subjects, "id")
    
    records = []
    for subject in sources.subjects:
        key = subject["id"]
        observation = observations.get(key)
        biometric = biometrics.get(key)
        if observation is None or biometric is None:
            continue
        
        records.append(SubjectRecord.from_dict({
            "identifier": key,
            "name": subject.get("name"),
            "reported_gender": subject.get("reported_gender"),
            "appearance_notes": subject.get("appearance_notes"),
            "cam_front_observation": observation.get("cam_front"),
            "cam_back_observation": observation.get("cam_back"),
            "night_vision_observation": observation.get("night_vision"),
            "voice_pitch": biometric.get("voice_pitch"),
            "has_pulse": biometric.get("has_pulse"),
        }))
    
    return records


def _index_by_key(rows: Sequence[Row], key_field: str) -> Dict[int, Row]:
    index: Dict[int, Row] = {}
    for row in rows:
        if key_field not in row or row[key_field] is None:
            raise ValidationError(key_field)
        key = row[key_field]
        # bool is a subclass of int; True is not a key
        if not isinstance(key, int) or isinstance(key, bool):
            raise ValidationError(
                key_field,
                f"Key field '{key_field}' must be int, got {type(key).__name__}",
                details={"expected": "int", "actual": type(key).__name__}
            )
        if key in index:
            raise ValidationError(
                key_field,
                f"Duplicate value {key!r} for key field '{key_field}'",
                details={"value": key}
            )
        index[key] = row
    return index
