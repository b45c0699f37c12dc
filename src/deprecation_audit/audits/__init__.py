"""Audits.

Provides:
- DeprecationsAudit: Deprecated API usage audit
- AuditMeta, AuditResult: Audit identity and run outcome
"""

from .deprecations import AuditMeta, AuditResult, DeprecationsAudit

__all__ = ["AuditMeta", "AuditResult", "DeprecationsAudit"]
