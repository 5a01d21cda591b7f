# ==============================================
# Built-in Fixture Rows
# ==============================================
#
# PURPOSE:
#   The four observed subjects, split across the three sources the
#   way they would sit in three relational tables:
#
#     subjects             (id, name, reported_gender, appearance_notes)
#     camera_observations  (subject_id, cam_front, cam_back, night_vision)
#     biometric_readings   (subject_id, voice_pitch, has_pulse)
#
#   Built once at import and never mutated. builtin_sources() hands
#   out copies.
#
# CLASS: FixtureSources (dataclass)
# ---------------------------------
#   subjects, camera_observations, biometric_readings: list[dict]
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

Row = Dict[str, Any]


SUBJECTS: Tuple[Row, ...] = (
    {"id": 1, "name": "Daniel Reyes", "reported_gender": "Male",
     "appearance_notes": "Tall, grey coat, carries a black umbrella"},
    {"id": 2, "name": "Mira Han", "reported_gender": "Female",
     "appearance_notes": "Short hair, red scarf, always smiling"},
    {"id": 3, "name": "Victor Osei", "reported_gender": "Male",
     "appearance_notes": "Pale complexion, never blinks"},
    {"id": 4, "name": "Clara Novak", "reported_gender": "Female",
     "appearance_notes": "Long braid, soft-spoken in person"},
)

CAMERA_OBSERVATIONS: Tuple[Row, ...] = (
    {"subject_id": 1, "cam_front": "Humanoid", "cam_back": "Normal Back",
     "night_vision": "Visible"},
    {"subject_id": 2, "cam_front": "Two People", "cam_back": "Normal Back",
     "night_vision": "Visible"},
    {"subject_id": 3, "cam_front": "Humanoid", "cam_back": "Normal Back",
     "night_vision": "Disappears"},
    {"subject_id": 4, "cam_front": "Humanoid", "cam_back": "Normal Back",
     "night_vision": "Visible"},
)

BIOMETRIC_READINGS: Tuple[Row, ...] = (
    {"subject_id": 1, "voice_pitch": "Normal", "has_pulse": True},
    {"subject_id": 2, "voice_pitch": "Normal", "has_pulse": True},
    {"subject_id": 3, "voice_pitch": "Normal", "has_pulse": False},
    {"subject_id": 4, "voice_pitch": "Ultra-Deep Bass", "has_pulse": True},
)


@dataclass
class FixtureSources:
    """The three fixture sources, one list of rows each."""
    subjects: List[Row] = field(default_factory=list)
    camera_observations: List[Row] = field(default_factory=list)
    biometric_readings: List[Row] = field(default_factory=list)

    def row_counts(self) -> Dict[str, int]:
        return {
            "subjects": len(self.subjects),
            "camera_observations": len(self.camera_observations),
            "biometric_readings": len(self.biometric_readings),
        }


def builtin_sources() -> FixtureSources:
    """Return a fresh copy of the built-in fixture rows."""
    return FixtureSources(
        subjects=[dict(row) for row in SUBJECTS],
        camera_observations=[dict(row) for row in CAMERA_OBSERVATIONS],
        biometric_readings=[dict(row) for row in BIOMETRIC_READINGS],
    )
