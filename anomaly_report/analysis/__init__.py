# ==============================================
# CLASSIFICATION
# ==============================================
#
# This package turns joined subject records into the anomalies
# report.
#
# Modules:
# --------
# - record.py      → SubjectRecord data class + validation
# - rules.py       → Labels, ordered classification rules, inclusion checks
# - classifier.py  → Classifier: classify / is_anomalous / generate_report
# - report.py      → ReportRow and text formatting
#
# ==============================================

from .record import SubjectRecord
from .rules import AnomalyLabel, ClassificationRule, InclusionCheck
from .classifier import Classifier, classify, is_anomalous, generate_report
from .report import ReportRow, format_report

__all__ = [
    "SubjectRecord",
    "AnomalyLabel",
    "ClassificationRule",
    "InclusionCheck",
    "Classifier",
    "classify",
    "is_anomalous",
    "generate_report",
    "ReportRow",
    "format_report",
]
