# ==============================================
# Classifier
# ==============================================
#
# PURPOSE:
#   Applies the ordered rule table to subject records. Decides the
#   label for one record, whether a record belongs in the anomalies
#   report at all, and builds the report itself.
#
# CLASS: Classifier
# -----------------
#   Stateless: records in, labels out.
#
#   Constructor:
#   ------------
#   - __init__(rules=CLASSIFICATION_RULES, inclusion_checks=INCLUSION_CHECKS)
#
#   Methods:
#   --------
#   - classify(record) -> AnomalyLabel
#       Rules are applied in order (short-circuit evaluation):
#
#       RULE 1: has_pulse is False           → NO HEARTBEAT (CLASS-S)
#       RULE 2: night vision "Disappears"    → VANISHING ENTITY
#       RULE 3: front camera "Two People"    → BODY DOUBLE DETECTED
#       RULE 4: back camera "Black Holes"    → BACK MUTATION
#       RULE 5: "Female" + "Deep" in voice   → VOICE-GENDER MISMATCH
#       RULE 6: anything else                → LIKELY HUMAN
#
#       Rule 1 masks rules 2-5: a subject without a pulse is always
#       CLASS-S no matter what the cameras saw.
#
#   - is_anomalous(record) -> bool
#       OR over the inclusion checks.
#
#   - generate_report(records) -> list[ReportRow]
#       Filter by is_anomalous, then classify, input order preserved.
#
#   - explain(record) -> str
#       Human-readable reason for the label.
#
#   - get_label_distribution(rows) -> dict[str, int]
#
#   Records may be SubjectRecord instances or raw mappings; mappings
#   are validated through SubjectRecord.from_dict().
#
# ==============================================

from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union

from .record import SubjectRecord
from .report import ReportRow
from .rules import (
    AnomalyLabel,
    ClassificationRule,
    InclusionCheck,
    CLASSIFICATION_RULES,
    DEFAULT_LABEL,
    INCLUSION_CHECKS,
)

RecordLike = Union[SubjectRecord, Mapping[str, Any]]


class Classifier:
    """
    Applies the ordered classification rules and the inclusion
    predicate to subject records.
    
    The first matching rule decides the label; when none match the
    subject is labelled LIKELY HUMAN. Inclusion is a separate test:
    a record is only reported when at least one inclusion check holds.
    """

    def __init__(
        self,
        rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES,
        inclusion_checks: Sequence[InclusionCheck] = INCLUSION_CHECKS
    ):
        self.rules = tuple(rules)
        self.inclusion_checks = tuple(inclusion_checks)

    def classify(self, record: RecordLike) -> AnomalyLabel:
        """
        Return the label of the first rule the record matches.
        
        Args:
            record: SubjectRecord or raw mapping
            
        Returns:
            The matching AnomalyLabel, or LIKELY_HUMAN
            
        Raises:
            ValidationError: a raw mapping is missing a field
        """
        record = _as_record(record)
        for rule in self.rules:
            if rule.matches(record):
                return rule.label
        return DEFAULT_LABEL

    def is_anomalous(self, record: RecordLike) -> bool:
        """True when any inclusion check holds for the record."""
        record = _as_record(record)
        return any(check.matches(record) for check in self.inclusion_checks)

    def generate_report(self, records: Iterable[RecordLike]) -> List[ReportRow]:
        """
        Build the anomalies report.
        
        Every record is validated before filtering, so a malformed
        record fails the whole report even if it would not be included.
        
        Args:
            records: Subject records in display order
            
        Returns:
            One ReportRow per anomalous record, in input order
        """
        report = []
        for record in records:
            record = _as_record(record)
            if not self.is_anomalous(record):
                continue
            report.append(ReportRow(
                id=record.identifier,
                name=record.name,
                appearance_notes=record.appearance_notes,
                label=self.classify(record).value,
            ))
        return report

    def explain(self, record: RecordLike) -> str:
        """
        Describe why the record got its label.
        
        Returns:
            A one-line, human-readable reason
        """
        record = _as_record(record)
        for position, rule in enumerate(self.rules, start=1):
            if rule.matches(record):
                return (
                    f"Subject {record.identifier} ({record.name}) labelled "
                    f"'{rule.label.value}' by rule {position}: {rule.description}."
                )
        return (
            f"Subject {record.identifier} ({record.name}) matched no rule; "
            f"defaulting to '{DEFAULT_LABEL.value}'."
        )

    def get_label_distribution(self, rows: Iterable[ReportRow]) -> Dict[str, int]:
        """
        Count report rows per label.
        
        Every label is present in the result, zero when unused.
        """
        distribution = {label.value: 0 for label in AnomalyLabel}
        for row in rows:
            distribution[row.label] += 1
        return distribution


def _as_record(record: RecordLike) -> SubjectRecord:
    if isinstance(record, SubjectRecord):
        return record
    return SubjectRecord.from_dict(record)


# Shared stateless instance behind the module-level functions
_default_classifier = Classifier()


def classify(record: RecordLike) -> AnomalyLabel:
    return _default_classifier.classify(record)


def is_anomalous(record: RecordLike) -> bool:
    return _default_classifier.is_anomalous(record)


def generate_report(records: Iterable[RecordLike]) -> List[ReportRow]:
    return _default_classifier.generate_report(records)
