# ==============================================
# SQL RENDERING
# ==============================================
#
# Renders the schema, fixture rows and anomalies query as SQL text.
#
# Modules:
# --------
# - statements.py → CREATE TABLE / INSERT / SELECT rendering
#
# ==============================================

from .statements import render_schema, render_inserts, render_anomaly_query, render_script

__all__ = ["render_schema", "render_inserts", "render_anomaly_query", "render_script"]
