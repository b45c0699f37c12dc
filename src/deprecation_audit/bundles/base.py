"""Bundle records and source-map resolver protocol.

A bundle pairs one served script (by script identity) with a resolver that
maps positions in the minified script back to the original sources. The
mappings themselves are computed elsewhere; this module only queries them.

Provides:
- MappingEntry: One precomputed generated-to-original mapping segment
- SourceMapResolver: Protocol for position lookups
- MappingTableResolver: Resolver over a precomputed list of MappingEntry
- Bundle: Script identity plus optional resolver
- BundleProvider: Protocol for the asynchronous bundle collection source
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Protocol

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from deprecation_audit.core.artifacts import Artifacts


class MappingEntry(BaseModel):
    """Mapping segment: generated (line, column) to original position.

    All positions are 0-indexed. Segments without a ``source_url`` are
    unmapped (generated code with no original counterpart).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    line: int = Field(alias="lineNumber")
    column: int = Field(alias="columnNumber")
    source_url: str | None = Field(default=None, alias="sourceURL")
    source_line_number: int | None = Field(default=None, alias="sourceLineNumber")
    source_column_number: int | None = Field(default=None, alias="sourceColumnNumber")


class SourceMapResolver(Protocol):
    """Protocol for minified-to-original position lookups."""

    def find_entry(self, line: int, column: int) -> MappingEntry | None:
        """Return the mapping segment covering (line, column), if any."""
        ...


class MappingTableResolver:
    """Resolver over precomputed mapping segments.

    A position resolves to the last segment on the same line whose column is
    at or before the requested column.
    """

    def __init__(self, entries: Iterable[MappingEntry]):
        self._entries = sorted(entries, key=lambda e: (e.line, e.column))
        self._keys = [(e.line, e.column) for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def find_entry(self, line: int, column: int) -> MappingEntry | None:
        idx = bisect_right(self._keys, (line, column)) - 1
        if idx < 0:
            return None
        entry = self._entries[idx]
        if entry.line != line:
            return None
        return entry


@dataclass(frozen=True)
class Bundle:
    """Served script paired with its source-map resolver."""

    script_id: str
    url: str = ""
    resolver: SourceMapResolver | None = None


class BundleProvider(Protocol):
    """Protocol for the external bundle computation service."""

    async def request(self, artifacts: "Artifacts") -> list[Bundle]:
        """Return the bundle collection for the given artifact set."""
        ...
