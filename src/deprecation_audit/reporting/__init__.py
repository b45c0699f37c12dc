"""Report shaping for the deprecations audit.

Provides:
- ReportBuilder: Findings to scored table artifact
- table_headings: Fixed column declarations
"""

from .builder import ReportBuilder, table_headings

__all__ = ["ReportBuilder", "table_headings"]
