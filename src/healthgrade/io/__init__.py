"""Health report input helpers."""

from .report import load_report, load_report_text, report_format_for

__all__ = ["load_report", "load_report_text", "report_format_for"]
