# ==============================================
# Tests for Report Formatting
# ==============================================

from anomaly_report.analysis.report import ReportRow, format_report


class TestFormatReport:

    def test_empty_report(self):
        text = format_report([])
        assert "ANOMALIES REPORT" in text
        assert "No anomalies detected" in text

    def test_columns_aligned(self):
        rows = [
            ReportRow(2, "Mira Han", "Short hair", "BODY DOUBLE DETECTED"),
            ReportRow(13, "Al", "Tall", "NO HEARTBEAT (CLASS-S)"),
        ]
        lines = format_report(rows, title="T").splitlines()
        header, separator, first, second = lines[3:]
        assert header.startswith("ID | NAME")
        assert first.index("|") == second.index("|") == header.index("|")
        assert set(separator) <= {"-", "+"}
