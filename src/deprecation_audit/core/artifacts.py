"""Collected page artifacts consumed by the deprecations audit.

The audit never captures runtime signals itself: structured deprecation
issues and console messages arrive already collected, in the JSON shape
emitted by the collection layer (camelCase keys). Both variants are parsed
here into Pydantic models.

Provides:
- SourceCodeLocation: Location block of a structured issue (1-indexed column)
- StructuredIssue: Deprecation issue from the structured issue feed
- LegacyLogEntry: Console message from the legacy log feed (0-indexed column)
- Artifacts: Container for both feeds
- load_artifacts: Read and validate an artifacts JSON file
"""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from deprecation_audit.core.exceptions import ArtifactLoadError

logger = structlog.get_logger()

_LOCATION_KEYS = ("scriptId", "url", "lineNumber", "columnNumber")


class SourceCodeLocation(BaseModel):
    """Where a structured issue was raised. ``column_number`` is 1-indexed."""

    model_config = ConfigDict(populate_by_name=True)

    script_id: str | None = Field(default=None, alias="scriptId")
    url: str = ""
    line_number: int = Field(alias="lineNumber")
    column_number: int = Field(alias="columnNumber")


class StructuredIssue(BaseModel):
    """Deprecation issue reported through the structured issue feed.

    Accepts either the nested ``sourceCodeLocation`` block or the location
    fields directly on the issue.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    source_code_location: SourceCodeLocation = Field(alias="sourceCodeLocation")

    @model_validator(mode="before")
    @classmethod
    def _lift_flat_location(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if "sourceCodeLocation" in data or "source_code_location" in data:
            return data
        location = {key: data[key] for key in _LOCATION_KEYS if key in data}
        rest = {key: value for key, value in data.items() if key not in _LOCATION_KEYS}
        return {**rest, "sourceCodeLocation": location}


class LegacyLogEntry(BaseModel):
    """Console message from the legacy log feed. ``column_number`` is 0-indexed.

    ``source`` is the provenance tag; deprecation warnings carry
    ``"deprecation"``. Untagged entries are never deprecation-class.
    """

    model_config = ConfigDict(populate_by_name=True)

    source: str | None = None
    text: str | None = None
    url: str | None = None
    line_number: int | None = Field(default=None, alias="lineNumber")
    column_number: int | None = Field(default=None, alias="columnNumber")
    script_id: str | None = Field(default=None, alias="scriptId")


class InspectorIssues(BaseModel):
    """Structured issue feed, grouped by issue kind."""

    model_config = ConfigDict(populate_by_name=True)

    deprecation_issue: list[StructuredIssue] = Field(
        default_factory=list, alias="deprecationIssue"
    )


class Artifacts(BaseModel):
    """Artifacts the audit reads. Unknown artifact keys are ignored."""

    model_config = ConfigDict(populate_by_name=True)

    inspector_issues: InspectorIssues = Field(
        default_factory=InspectorIssues, alias="InspectorIssues"
    )
    console_messages: list[LegacyLogEntry] = Field(
        default_factory=list, alias="ConsoleMessages"
    )


def load_artifacts(path: str | Path) -> Artifacts:
    """Read and validate an artifacts JSON file.

    Args:
        path: Path to a JSON object with ``InspectorIssues`` and
            ``ConsoleMessages`` keys

    Returns:
        Validated Artifacts

    Raises:
        ArtifactLoadError: If the file is unreadable, not JSON, or invalid
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        artifacts = Artifacts.model_validate(raw)
    except (OSError, json.JSONDecodeError) as e:
        raise ArtifactLoadError(f"Cannot read artifacts: {e}", path=str(path)) from e
    except ValidationError as e:
        raise ArtifactLoadError(
            f"Invalid artifacts ({e.error_count()} errors)", path=str(path)
        ) from e

    logger.debug(
        "artifacts_loaded",
        path=str(path),
        deprecation_issues=len(artifacts.inspector_issues.deprecation_issue),
        console_messages=len(artifacts.console_messages),
    )
    return artifacts
