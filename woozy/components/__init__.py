"""Console output for woozy."""

from .report import ReportOptions, group_by_day, render_report

__all__ = ["ReportOptions", "group_by_day", "render_report"]
