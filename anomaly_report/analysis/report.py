# ==============================================
# Report Rows & Formatting
# ==============================================
#
# PURPOSE:
#   The output shape of the anomalies report and a fixed-width
#   text rendering of it for display.
#
# CLASS: ReportRow (NamedTuple)
# -----------------------------
#   (id, name, appearance_notes, label)
#
# FUNCTION:
# ---------
# - format_report(rows, title) -> str
#
# ==============================================

from typing import List, NamedTuple, Sequence


class ReportRow(NamedTuple):
    id: int
    name: str
    appearance_notes: str
    label: str


COLUMNS = ("ID", "NAME", "APPEARANCE NOTES", "ANOMALY LABEL")


def format_report(rows: Sequence[ReportRow], title: str = "ANOMALIES REPORT") -> str:
    """
    Render report rows as a fixed-width text table.
    
    Column widths fit the widest cell in each column. An empty
    report renders the banner and a single "no anomalies" line.
    
    Args:
        rows: Report rows in display order
        title: Banner title
        
    Returns:
        The rendered report, without a trailing newline
    """
    lines: List[str] = ["=" * 60, title, "=" * 60]
    
    if not rows:
        lines.append("✓ No anomalies detected")
        return "\n".join(lines)
    
    cells = [COLUMNS] + [tuple(str(value) for value in row) for row in rows]
    widths = [max(len(row[i]) for row in cells) for i in range(len(COLUMNS))]
    
    def render_line(values) -> str:
        return " | ".join(v.ljust(w) for v, w in zip(values, widths)).rstrip()
    
    lines.append(render_line(COLUMNS))
    lines.append("-+-".join("-" * w for w in widths))
    for row in cells[1:]:
        lines.append(render_line(row))
    
    return "\n".join(lines)
