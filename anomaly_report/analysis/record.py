# ==============================================
# SubjectRecord (Data Class)
# ==============================================
#
# PURPOSE:
#   One joined, read-only row describing an observed subject:
#   what the subject reported about itself, what the cameras saw,
#   and what the biometric sensors read.
#
# CLASS: SubjectRecord (frozen dataclass)
# ---------------------------------------
#   Attributes:
#   -----------
#   - identifier: int               → Join key, unique per subject
#   - name: str
#   - reported_gender: str          → "Male", "Female", ...
#   - appearance_notes: str         → Display only, never used in rules
#   - cam_front_observation: str    → "Humanoid", "Two People", ...
#   - cam_back_observation: str     → "Normal Back", "Black Holes", ...
#   - night_vision_observation: str → "Visible", "Disappears", ...
#   - voice_pitch: str              → "Normal", "Ultra-Deep Bass", ...
#   - has_pulse: bool
#
#   Methods:
#   --------
#   - from_dict(data: Mapping) -> SubjectRecord  (classmethod)
#       Validate and build. Raises ValidationError naming the first
#       missing or mistyped field.
#   - to_dict() -> dict
#
# ==============================================

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping

from anomaly_report.errors import ValidationError


# Field name → required Python type, in declaration order
FIELD_TYPES: Dict[str, type] = {
    "identifier": int,
    "name": str,
    "reported_gender": str,
    "appearance_notes": str,
    "cam_front_observation": str,
    "cam_back_observation": str,
    "night_vision_observation": str,
    "voice_pitch": str,
    "has_pulse": bool,
}


@dataclass(frozen=True)
class SubjectRecord:
    """
    A subject as seen from all three perspectives at once.
    
    Built by the joiner from the subjects, camera observations and
    biometric readings sources; consumed by the Classifier.
    """

    # --- Reported by the subject ---
    identifier: int
    name: str
    reported_gender: str
    appearance_notes: str

    # --- Camera observations ---
    cam_front_observation: str
    cam_back_observation: str
    night_vision_observation: str

    # --- Biometric readings ---
    voice_pitch: str
    has_pulse: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SubjectRecord":
        """
        Validate a raw mapping and build a SubjectRecord from it.
        
        Args:
            data: Mapping with one key per SubjectRecord field
            
        Returns:
            A SubjectRecord instance
            
        Raises:
            ValidationError: a field is missing or has the wrong type
        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                "record",
                f"Subject record must be a mapping, got {type(data).__name__}"
            )
        
        for field_name, expected_type in FIELD_TYPES.items():
            if field_name not in data or data[field_name] is None:
                raise ValidationError(field_name)
            
            value = data[field_name]
            # bool is a subclass of int; an identifier of True is not an id
            if expected_type is int and isinstance(value, bool):
                raise _wrong_type(field_name, expected_type, value)
            if not isinstance(value, expected_type):
                raise _wrong_type(field_name, expected_type, value)
        
        return cls(**{name: data[name] for name in FIELD_TYPES})


def _wrong_type(field_name: str, expected_type: type, value: Any) -> ValidationError:
    return ValidationError(
        field_name,
        f"Field '{field_name}' must be {expected_type.__name__}, "
        f"got {type(value).__name__}",
        details={"expected": expected_type.__name__, "actual": type(value).__name__}
    )
