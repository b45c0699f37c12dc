"""Report output types and text formatting.

Provides structured output types for the deprecations audit: resolved
source locations, findings, the two-column table payload and the scored
report artifact. Serialized keys use the camelCase names expected by
report renderers.

Provides:
- OriginalPosition: Original-source counterpart of a minified position
- SourceLocation: Display-ready, 0-indexed code position
- Finding: One deprecation occurrence (table row)
- TableHeading / TableDetails: Table payload with fixed column semantics
- ReportArtifact: Score, optional display value and table details
- format_output: Plain text rendering of a report artifact
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class OriginalPosition(BaseModel):
    """Position in the original (pre-bundling) source file."""

    url: str
    line: int
    column: int


class SourceLocation(BaseModel):
    """Resolved code location (0-indexed line and column).

    Attributes:
        url: Script URL as served to the page
        line: 0-indexed line in the served script
        column: 0-indexed column in the served script
        original_position: Mapped original-source position, when a bundle
            resolved it
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["source-location"] = "source-location"
    url: str
    url_provider: str = Field(default="network", alias="urlProvider")
    line: int
    column: int
    original_position: OriginalPosition | None = Field(
        default=None, alias="originalPosition"
    )

    def describe(self) -> str:
        """Short human-readable form, e.g. ``a.js:6:10 (src/app.ts:3:1)``.

        Line and column are shown 1-indexed.
        """
        text = f"{self.url}:{self.line + 1}:{self.column + 1}"
        if self.original_position:
            orig = self.original_position
            text += f" ({orig.url}:{orig.line + 1}:{orig.column + 1})"
        return text


class Finding(BaseModel):
    """Normalized deprecation occurrence."""

    model_config = ConfigDict(frozen=True)

    value: str
    source: SourceLocation


class TableHeading(BaseModel):
    """Column declaration for a table payload."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    item_type: str = Field(alias="itemType")
    text: str


class TableDetails(BaseModel):
    """Table payload: declared headings plus rows in finding order."""

    type: Literal["table"] = "table"
    headings: list[TableHeading]
    items: list[Finding] = Field(default_factory=list)


class ReportArtifact(BaseModel):
    """Scored report for one audit run.

    Attributes:
        score: 1 when no findings were produced, otherwise 0
        display_value: Count summary, present only when there are findings
        details: Two-column table of findings
    """

    model_config = ConfigDict(populate_by_name=True)

    score: Literal[0, 1]
    display_value: str | None = Field(default=None, alias="displayValue")
    details: TableDetails

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


def format_output(report: ReportArtifact, title: str | None = None) -> str:
    """Format a report artifact as a plain text table.

    Args:
        report: Report to format
        title: Optional heading line (audit title)

    Returns:
        Formatted multi-line string
    """
    output = []
    output.append(f"{'=' * 60}")
    if title:
        output.append(title)
    status = "PASS" if report.score == 1 else "FAIL"
    summary = f" | {report.display_value}" if report.display_value else ""
    output.append(f"Score: {report.score} ({status}){summary}")
    output.append(f"{'=' * 60}")

    headings = report.details.headings
    if report.details.items:
        output.append(" | ".join(heading.text for heading in headings))
        output.append("-" * 60)
        for idx, finding in enumerate(report.details.items, 1):
            output.append(f"{idx}. {finding.value}")
            output.append(f"   {finding.source.describe()}")

    output.append(f"{'=' * 60}")
    return "\n".join(output)
