# ==============================================
# Rules (Labels, Classification Rules, Inclusion Checks)
# ==============================================
#
# PURPOSE:
#   The rule table that drives both the Python classifier and the
#   rendered SQL CASE / WHERE clauses. Keeping one table means the
#   two renditions cannot drift apart.
#
# ENUMS:
# ------
# - AnomalyLabel(Enum): the six display labels
#
# CLASSES:
# --------
# - ClassificationRule (frozen dataclass)
#     label, matches(record) -> bool, sql_condition, description
#
# - InclusionCheck (frozen dataclass)
#     name, matches(record) -> bool, sql_condition
#
# CONSTANTS:
# ----------
# - CLASSIFICATION_RULES: ordered, first match wins
# - DEFAULT_LABEL: used when no rule matches
# - INCLUSION_CHECKS: OR-ed together to decide report inclusion
#
# SQL conditions use the aliases s (subjects), c (camera
# observations) and b (biometric readings). Every string comparison
# is binary-collated so MySQL matches case the way Python does.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Callable, Tuple

from .record import SubjectRecord


class AnomalyLabel(Enum):
    """
    Classification labels, value is the display text.
    """
    NO_HEARTBEAT = "NO HEARTBEAT (CLASS-S)"
    VANISHING_ENTITY = "VANISHING ENTITY"
    BODY_DOUBLE = "BODY DOUBLE DETECTED"
    BACK_MUTATION = "BACK MUTATION"
    VOICE_GENDER_MISMATCH = "VOICE-GENDER MISMATCH"
    LIKELY_HUMAN = "LIKELY HUMAN"


@dataclass(frozen=True)
class ClassificationRule:
    """One WHEN branch of the classification CASE."""
    label: AnomalyLabel
    matches: Callable[[SubjectRecord], bool]
    sql_condition: str
    description: str


@dataclass(frozen=True)
class InclusionCheck:
    """One OR-ed condition of the report WHERE clause."""
    name: str
    matches: Callable[[SubjectRecord], bool]
    sql_condition: str


def has_voice_gender_mismatch(record: SubjectRecord) -> bool:
    # Case-sensitive: "deep" and "DEEP" do not count
    return record.reported_gender == "Female" and "Deep" in record.voice_pitch


# MySQL string comparisons ignore case by default; Python's do not
BINARY_COLLATION = "utf8mb4_bin"


def _binary(column: str, operator: str, literal: str) -> str:
    return f"{column} COLLATE {BINARY_COLLATION} {operator} '{literal}'"


VOICE_GENDER_SQL = (
    _binary("s.reported_gender", "=", "Female")
    + " AND "
    + _binary("b.voice_pitch", "LIKE", "%Deep%")
)


CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(
        label=AnomalyLabel.NO_HEARTBEAT,
        matches=lambda r: not r.has_pulse,
        sql_condition="b.has_pulse = FALSE",
        description="no pulse detected",
    ),
    ClassificationRule(
        label=AnomalyLabel.VANISHING_ENTITY,
        matches=lambda r: r.night_vision_observation == "Disappears",
        sql_condition=_binary("c.night_vision", "=", "Disappears"),
        description="disappears under night vision",
    ),
    ClassificationRule(
        label=AnomalyLabel.BODY_DOUBLE,
        matches=lambda r: r.cam_front_observation == "Two People",
        sql_condition=_binary("c.cam_front", "=", "Two People"),
        description="front camera sees two people",
    ),
    ClassificationRule(
        label=AnomalyLabel.BACK_MUTATION,
        matches=lambda r: r.cam_back_observation == "Black Holes",
        sql_condition=_binary("c.cam_back", "=", "Black Holes"),
        description="back camera sees black holes",
    ),
    ClassificationRule(
        label=AnomalyLabel.VOICE_GENDER_MISMATCH,
        matches=has_voice_gender_mismatch,
        sql_condition=VOICE_GENDER_SQL,
        description="reported female with a deep voice",
    ),
)

DEFAULT_LABEL = AnomalyLabel.LIKELY_HUMAN


INCLUSION_CHECKS: Tuple[InclusionCheck, ...] = (
    InclusionCheck(
        name="night_vision_not_visible",
        matches=lambda r: r.night_vision_observation != "Visible",
        sql_condition=_binary("c.night_vision", "<>", "Visible"),
    ),
    InclusionCheck(
        name="front_not_humanoid",
        matches=lambda r: r.cam_front_observation != "Humanoid",
        sql_condition=_binary("c.cam_front", "<>", "Humanoid"),
    ),
    InclusionCheck(
        name="back_not_normal",
        matches=lambda r: r.cam_back_observation != "Normal Back",
        sql_condition=_binary("c.cam_back", "<>", "Normal Back"),
    ),
    InclusionCheck(
        name="no_pulse",
        matches=lambda r: not r.has_pulse,
        sql_condition="b.has_pulse = FALSE",
    ),
    InclusionCheck(
        name="voice_gender_mismatch",
        matches=has_voice_gender_mismatch,
        sql_condition=VOICE_GENDER_SQL,
    ),
)
