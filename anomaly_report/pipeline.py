# ==============================================
# AnomalyReportPipeline (Orchestrator)
# ==============================================
#
# PURPOSE:
#   The single user-facing class. Ties the three packages together:
#
#   ┌──────────────────────────────────────────────────┐
#   │               AnomalyReportPipeline              │
#   │                                                  │
#   │  sources/   builtin_sources() | load_sources()   │
#   │                 │ three lists of rows            │
#   │                 ▼                                │
#   │  sources/   join_sources() → SubjectRecord[]     │
#   │                 │                                │
#   │                 ▼                                │
#   │  analysis/  Classifier.generate_report()         │
#   │                 │                                │
#   │                 ▼                                │
#   │  analysis/  format_report()  |  sql/ render_*    │
#   └──────────────────────────────────────────────────┘
#
# CLASS: AnomalyReportPipeline
# ----------------------------
#   - __init__(config: AppConfig | None = None)
#   - load() -> list[SubjectRecord]     (cached after first call)
#   - run() -> list[ReportRow]
#   - get_summary() -> dict
#   - render() -> str
#   - get_sql_script() -> str
#
# ==============================================

from typing import List, Optional

from anomaly_report.config import AppConfig, get_config
from anomaly_report.analysis.classifier import Classifier
from anomaly_report.analysis.record import SubjectRecord
from anomaly_report.analysis.report import ReportRow, format_report
from anomaly_report.analysis.rules import DEFAULT_LABEL
from anomaly_report.sources.fixtures import FixtureSources, builtin_sources
from anomaly_report.sources.loader import load_sources
from anomaly_report.sources.joiner import join_sources
from anomaly_report.sql.statements import render_script


class AnomalyReportPipeline:
    """
    Loads the fixture sources, joins them into subject records and
    produces the anomalies report.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Args:
            config: Application configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        self._classifier = Classifier()
        self._sources: Optional[FixtureSources] = None
        self._records: Optional[List[SubjectRecord]] = None

    def load(self) -> List[SubjectRecord]:
        """
        Load and join the fixture sources.
        
        Uses the JSON directory from the config when one is set,
        the built-in rows otherwise. The result is cached.
        
        Returns:
            Joined subject records in subjects-source order
        """
        if self._records is not None:
            return list(self._records)
        
        source_dir = self._config.fixtures.source_dir
        if source_dir:
            self._sources = load_sources(source_dir)
        else:
            self._sources = builtin_sources()
        
        self._records = join_sources(self._sources)
        
        dropped = len(self._sources.subjects) - len(self._records)
        print(f"✓ Joined {len(self._records)} subject records")
        if dropped:
            print(f"⚠ {dropped} subjects missing from an observation source were dropped")
        
        return list(self._records)

    def run(self) -> List[ReportRow]:
        """
        Build the anomalies report.
        
        Returns:
            One ReportRow per anomalous subject, in subject order
        """
        report = self._classifier.generate_report(self.load())
        print(f"✓ {len(report)} anomalous subjects reported")
        return report

    def get_summary(self) -> dict:
        """
        Summarize the run.
        
        An anomalous subject can still be labelled LIKELY HUMAN, so
        likely_human_subjects counts labels over every subject while
        excluded_subjects counts the ones left out of the report.

        Returns:
            Totals plus the per-label count of reported subjects
        """
        records = self.load()
        report = self._classifier.generate_report(records)
        likely_human = sum(
            1 for record in records
            if self._classifier.classify(record) == DEFAULT_LABEL
        )
        return {
            "total_subjects": len(records),
            "anomalous_subjects": len(report),
            "excluded_subjects": len(records) - len(report),
            "likely_human_subjects": likely_human,
            "labels": self._classifier.get_label_distribution(report),
        }

    def render(self) -> str:
        """Return the report as a fixed-width text table."""
        return format_report(self.run(), title=self._config.report.title)

    def get_sql_script(self) -> str:
        """
        Return the relational version of this run: schema, the loaded
        fixture rows and the anomalies query.
        """
        self.load()
        return render_script(self._sources, self._config.sql)
