"""Core audit types.

Provides:
- Config and load_config
- Collected artifact models (StructuredIssue, LegacyLogEntry, Artifacts)
- Output types (SourceLocation, Finding, ReportArtifact) and format_output
- Exceptions (DeprecationAuditError, BundleCollectionError, ArtifactLoadError)
"""

from .artifacts import Artifacts, LegacyLogEntry, SourceCodeLocation, StructuredIssue, load_artifacts
from .config import Config, load_config
from .exceptions import ArtifactLoadError, BundleCollectionError, DeprecationAuditError
from .output import (
    Finding,
    OriginalPosition,
    ReportArtifact,
    SourceLocation,
    TableDetails,
    TableHeading,
    format_output,
)

__all__ = [
    "Artifacts",
    "LegacyLogEntry",
    "SourceCodeLocation",
    "StructuredIssue",
    "load_artifacts",
    "Config",
    "load_config",
    "ArtifactLoadError",
    "BundleCollectionError",
    "DeprecationAuditError",
    "Finding",
    "OriginalPosition",
    "ReportArtifact",
    "SourceLocation",
    "TableDetails",
    "TableHeading",
    "format_output",
]
