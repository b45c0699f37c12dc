"""Deprecation signal reconciliation.

Two upstream feeds report deprecated API use: the structured issue feed
(authoritative, carries script identity) and the legacy console feed kept
for producers that predate it. Exactly one feed is read per run; the legacy
feed is used only when the structured feed is empty, so the same event
reported through both channels is never counted twice.
"""

from typing import Sequence

import structlog

from deprecation_audit.bundles.index import BundleIndex
from deprecation_audit.core.artifacts import LegacyLogEntry, StructuredIssue
from deprecation_audit.core.output import Finding
from deprecation_audit.resolution.locations import SourceLocationResolver

logger = structlog.get_logger()

DEPRECATION_SOURCE = "deprecation"


class DeprecationReconciler:
    """Select the upstream feed and normalize it into findings.

    Args:
        resolver: Location resolver (a fresh one by default)
        deprecation_source: Console ``source`` tag marking deprecation warnings
    """

    def __init__(
        self,
        resolver: SourceLocationResolver | None = None,
        deprecation_source: str = DEPRECATION_SOURCE,
    ):
        self.resolver = resolver or SourceLocationResolver()
        self.deprecation_source = deprecation_source

    def reconcile(
        self,
        structured_issues: Sequence[StructuredIssue],
        legacy_entries: Sequence[LegacyLogEntry],
        bundle_index: BundleIndex,
    ) -> list[Finding]:
        """Produce findings in encounter order from the selected feed.

        Returns:
            Findings; empty when the selected feed has nothing to report
        """
        if structured_issues:
            findings = [
                self._from_structured_issue(issue, bundle_index)
                for issue in structured_issues
            ]
            logger.debug(
                "deprecations_reconciled",
                signal="structured_issues",
                findings=len(findings),
                ignored_console_messages=len(legacy_entries),
            )
            return findings

        findings = [
            self._from_legacy_entry(entry)
            for entry in legacy_entries
            if entry.source == self.deprecation_source
        ]
        logger.debug(
            "deprecations_reconciled",
            signal="legacy_console",
            findings=len(findings),
            console_messages=len(legacy_entries),
        )
        return findings

    def _from_structured_issue(
        self, issue: StructuredIssue, bundle_index: BundleIndex
    ) -> Finding:
        location = issue.source_code_location
        bundle = bundle_index.find(location.script_id)
        # Structured issue columns are 1-indexed.
        source = self.resolver.resolve(
            location.url,
            location.line_number,
            location.column_number - 1,
            bundle,
        )
        return Finding(value=issue.message or "", source=source)

    def _from_legacy_entry(self, entry: LegacyLogEntry) -> Finding:
        return Finding(
            value=entry.text or "",
            source=self.resolver.resolve_from_legacy_entry(entry),
        )
