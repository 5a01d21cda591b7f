# ==============================================
# SQL Statements
# ==============================================
#
# PURPOSE:
#   Render the relational version of the anomalies report as SQL
#   text: the three table schemas, the fixture INSERTs, and the
#   single SELECT that joins, classifies (CASE) and filters (WHERE).
#
#   The CASE branches and WHERE conditions come from the same rule
#   table the Python Classifier uses. Nothing here talks to a
#   database; these are strings.
#
# FUNCTIONS:
# ----------
# - render_schema(sql_config) -> str
# - render_inserts(sources, sql_config) -> str
# - render_anomaly_query(sql_config, rules, inclusion_checks) -> str
# - render_script(sources, sql_config) -> str
#
# ==============================================

from typing import Any, List, Optional, Sequence

from anomaly_report.config import SQLConfig
from anomaly_report.errors import ValidationError
from anomaly_report.analysis.rules import (
    ClassificationRule,
    InclusionCheck,
    CLASSIFICATION_RULES,
    DEFAULT_LABEL,
    INCLUSION_CHECKS,
)
from anomaly_report.sources.fixtures import FixtureSources, Row

# Column order per table, matches the fixture row keys
SUBJECT_COLUMNS = ("id", "name", "reported_gender", "appearance_notes")
OBSERVATION_COLUMNS = ("subject_id", "cam_front", "cam_back", "night_vision")
BIOMETRIC_COLUMNS = ("subject_id", "voice_pitch", "has_pulse")


def render_schema(sql_config: Optional[SQLConfig] = None) -> str:
    """
    Render the three CREATE TABLE statements.
    
    subjects owns the primary key; the two observation tables point
    at it through subject_id.
    """
    cfg = sql_config or SQLConfig()
    statements = [
        f"CREATE TABLE {cfg.subjects_table} (\n"
        f"    id INT PRIMARY KEY,\n"
        f"    name VARCHAR(100) NOT NULL,\n"
        f"    reported_gender VARCHAR(20) NOT NULL,\n"
        f"    appearance_notes TEXT NOT NULL\n"
        f");",
        f"CREATE TABLE {cfg.observations_table} (\n"
        f"    subject_id INT PRIMARY KEY,\n"
        f"    cam_front VARCHAR(50) NOT NULL,\n"
        f"    cam_back VARCHAR(50) NOT NULL,\n"
        f"    night_vision VARCHAR(50) NOT NULL,\n"
        f"    FOREIGN KEY (subject_id) REFERENCES {cfg.subjects_table}(id)\n"
        f");",
        f"CREATE TABLE {cfg.biometrics_table} (\n"
        f"    subject_id INT PRIMARY KEY,\n"
        f"    voice_pitch VARCHAR(50) NOT NULL,\n"
        f"    has_pulse BOOLEAN NOT NULL,\n"
        f"    FOREIGN KEY (subject_id) REFERENCES {cfg.subjects_table}(id)\n"
        f");",
    ]
    return "\n\n".join(statements)


def render_inserts(sources: FixtureSources, sql_config: Optional[SQLConfig] = None) -> str:
    """
    Render one INSERT statement per fixture row, subjects first so
    the foreign keys resolve. Keys outside the table's columns are
    ignored.

    Raises:
        ValidationError: a row is missing one of its table's columns
    """
    cfg = sql_config or SQLConfig()
    statements: List[str] = []
    statements.extend(_insert(cfg.subjects_table, SUBJECT_COLUMNS, row) for row in sources.subjects)
    statements.extend(_insert(cfg.observations_table, OBSERVATION_COLUMNS, row) for row in sources.camera_observations)
    statements.extend(_insert(cfg.biometrics_table, BIOMETRIC_COLUMNS, row) for row in sources.biometric_readings)
    return "\n".join(statements)


def render_anomaly_query(
    sql_config: Optional[SQLConfig] = None,
    rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES,
    inclusion_checks: Sequence[InclusionCheck] = INCLUSION_CHECKS
) -> str:
    """
    Render the anomalies SELECT.
    
    WHEN branches appear in rule order, so the first match wins
    exactly as in Classifier.classify(). The WHERE clause ORs the
    inclusion checks.
    """
    cfg = sql_config or SQLConfig()
    
    when_lines = [
        f"        WHEN {rule.sql_condition} THEN {_literal(rule.label.value)}"
        for rule in rules
    ]
    where_lines = [f"({check.sql_condition})" for check in inclusion_checks]
    
    lines = [
        "SELECT",
        "    s.id,",
        "    s.name,",
        "    s.appearance_notes,",
        "    CASE",
        *when_lines,
        f"        ELSE {_literal(DEFAULT_LABEL.value)}",
        "    END AS anomaly_label",
        f"FROM {cfg.subjects_table} s",
        f"JOIN {cfg.observations_table} c ON c.subject_id = s.id",
        f"JOIN {cfg.biometrics_table} b ON b.subject_id = s.id",
        "WHERE " + "\n   OR ".join(where_lines),
        "ORDER BY s.id;",
    ]
    return "\n".join(lines)


def render_script(sources: FixtureSources, sql_config: Optional[SQLConfig] = None) -> str:
    """Schema, fixture rows and the anomalies query as one script."""
    return "\n\n".join([
        render_schema(sql_config),
        render_inserts(sources, sql_config),
        render_anomaly_query(sql_config),
    ])


def _insert(table_name: str, columns: Sequence[str], row: Row) -> str:
    # Every column is NOT NULL; a gap in the row is a malformed source
    for column in columns:
        if row.get(column) is None:
            raise ValidationError(
                column,
                f"Row for table '{table_name}' is missing column '{column}'"
            )
    column_names = ", ".join(columns)
    values = ", ".join(_literal(row[column]) for column in columns)
    return f"INSERT INTO {table_name} ({column_names}) VALUES ({values});"


def _literal(value: Any) -> str:
    # bool before int: True is an int too
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)
    escaped = str(value).replace("'", "''")
    return f"'{escaped}'"
