"""Report builder: findings to scored table artifact.

Pure transformation with no I/O. Rows keep finding order; nothing is
sorted, grouped or deduplicated.
"""

from typing import Sequence

from deprecation_audit.core.messages import UIStrings, format_display_value
from deprecation_audit.core.output import Finding, ReportArtifact, TableDetails, TableHeading


def table_headings() -> list[TableHeading]:
    """Column declarations: message text, then source location."""
    return [
        TableHeading(key="value", item_type="text", text=UIStrings.column_deprecate),
        TableHeading(key="source", item_type="source-location", text=UIStrings.column_source),
    ]


class ReportBuilder:
    """Turn reconciled findings into a ReportArtifact."""

    def build(self, findings: Sequence[Finding]) -> ReportArtifact:
        """Score and shape the findings.

        Args:
            findings: Reconciled findings in encounter order

        Returns:
            ReportArtifact with score 1 and no display value when there are
            no findings, otherwise score 0 and a count summary
        """
        display_value = format_display_value(len(findings)) if findings else None
        return ReportArtifact(
            score=0 if findings else 1,
            display_value=display_value,
            details=TableDetails(headings=table_headings(), items=list(findings)),
        )
