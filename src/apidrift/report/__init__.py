"""Report rendering."""

from apidrift.report.formatter import HEADING, NO_CHANGES, format_json, format_lines, format_text

__all__ = ["HEADING", "NO_CHANGES", "format_json", "format_lines", "format_text"]
