"""Deprecated API usage audit.

Reconciles structured deprecation issues and legacy console warnings into
findings with source-map aware locations, and builds a scored report.
"""

from .audits import AuditResult, DeprecationsAudit

__version__ = "0.1.0"

__all__ = ["AuditResult", "DeprecationsAudit", "__version__"]
