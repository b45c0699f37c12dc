"""Deprecations audit: flags page use of deprecated platform APIs.

Reads the structured deprecation issues (or, for older collectors that do
not emit them, deprecation-tagged console messages), resolves each
occurrence's location through the run's bundles, and scores the result.

Provides:
- AuditMeta: Audit identity and titles
- AuditResult: ReportArtifact plus identity and chosen title
- DeprecationsAudit: Async audit entry point
"""

from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from deprecation_audit.bundles.base import BundleProvider
from deprecation_audit.bundles.index import BundleIndex
from deprecation_audit.bundles.providers import request_bundles
from deprecation_audit.core.artifacts import Artifacts
from deprecation_audit.core.config import Config, load_config
from deprecation_audit.core.messages import UIStrings
from deprecation_audit.core.output import ReportArtifact
from deprecation_audit.reconcile import DeprecationReconciler
from deprecation_audit.reporting.builder import ReportBuilder

logger = structlog.get_logger()


class AuditMeta(BaseModel):
    """Static description of an audit."""

    id: str
    title: str
    failure_title: str
    description: str
    required_artifacts: list[str]


class AuditResult(BaseModel):
    """Outcome of one audit run."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    report: ReportArtifact = Field(exclude=True)

    @property
    def score(self) -> int:
        return self.report.score

    @property
    def passed(self) -> bool:
        return self.report.score == 1

    def to_dict(self) -> dict[str, Any]:
        """Identity fields merged with the serialized report."""
        return {**self.model_dump(), **self.report.to_dict()}


class DeprecationsAudit:
    """Audit a page run for deprecated API usage.

    Args:
        config: Settings (loaded from environment by default)
    """

    meta = AuditMeta(
        id="deprecations",
        title=UIStrings.title,
        failure_title=UIStrings.failure_title,
        description=UIStrings.description,
        required_artifacts=["ConsoleMessages", "InspectorIssues", "SourceMaps", "Scripts"],
    )

    def __init__(self, config: Config | None = None):
        self.config = config or load_config()
        self.reconciler = DeprecationReconciler(
            deprecation_source=self.config.deprecation_source_tag
        )
        self.builder = ReportBuilder()

    async def audit(self, artifacts: Artifacts, bundle_provider: BundleProvider) -> AuditResult:
        """Run the audit.

        Args:
            artifacts: Collected page artifacts
            bundle_provider: Source of the run's bundle collection

        Returns:
            AuditResult

        Raises:
            BundleCollectionError: If the bundle collection cannot be obtained
        """
        log = logger.bind(audit=self.meta.id)

        bundles = await request_bundles(bundle_provider, artifacts)
        bundle_index = BundleIndex(bundles)

        findings = self.reconciler.reconcile(
            artifacts.inspector_issues.deprecation_issue,
            artifacts.console_messages,
            bundle_index,
        )
        report = self.builder.build(findings)

        log.info("audit_complete", score=report.score, findings=len(findings), bundles=len(bundle_index))
        return AuditResult(
            id=self.meta.id,
            title=self.meta.title if report.score == 1 else self.meta.failure_title,
            description=self.meta.description,
            report=report,
        )
