# ==============================================
# Subject Anomaly Report
# ==============================================
#
# Package Structure:
#
# anomaly_report/
# ├── sources/      # Fixture rows, JSON loader, inner join
# ├── analysis/     # SubjectRecord, rules, Classifier, report rows
# ├── sql/          # Relational rendition: schema, INSERTs, SELECT
# ├── config.py     # Configuration management
# ├── errors.py     # Exception hierarchy
# └── pipeline.py   # Orchestrator class
#
# ==============================================

__version__ = "0.1.0"
