"""Source location resolution with best-effort source-map enrichment.

Positions are 0-indexed on entry; callers convert 1-indexed columns before
calling ``resolve``. Resolution never raises: a missing bundle, a bundle
without a resolver, or a failed lookup all yield the raw location.
"""

import structlog

from deprecation_audit.bundles.base import Bundle, MappingEntry
from deprecation_audit.core.artifacts import LegacyLogEntry
from deprecation_audit.core.output import OriginalPosition, SourceLocation

logger = structlog.get_logger()


class SourceLocationResolver:
    """Build display-ready SourceLocation values."""

    def resolve(
        self, url: str, line: int, column: int, bundle: Bundle | None = None
    ) -> SourceLocation:
        """Resolve a served-script position, mapping it through ``bundle`` if given.

        Args:
            url: Script URL
            line: 0-indexed line
            column: 0-indexed column
            bundle: Matching bundle, if the script has one

        Returns:
            SourceLocation; ``original_position`` is set only when the bundle
            mapped the position to an original source
        """
        original = None
        if bundle is not None and bundle.resolver is not None:
            original = self._map_position(bundle, line, column)

        return SourceLocation(
            url=url,
            line=max(line, 0),
            column=max(column, 0),
            original_position=original,
        )

    def resolve_from_legacy_entry(self, entry: LegacyLogEntry) -> SourceLocation:
        """Raw location for a console message.

        Console messages carry no usable script identity, so no bundle is
        consulted.
        """
        return self.resolve(
            entry.url or "",
            entry.line_number or 0,
            entry.column_number or 0,
        )

    def _map_position(
        self, bundle: Bundle, line: int, column: int
    ) -> OriginalPosition | None:
        if line < 0 or column < 0:
            return None
        try:
            entry = bundle.resolver.find_entry(line, column)
            return _original_from_entry(entry)
        except Exception as e:
            logger.debug(
                "source_map_lookup_failed",
                script_id=bundle.script_id,
                line=line,
                column=column,
                error=str(e),
            )
            return None


def _original_from_entry(entry: MappingEntry | None) -> OriginalPosition | None:
    if entry is None or not entry.source_url:
        return None
    if entry.source_line_number is None or entry.source_column_number is None:
        return None
    return OriginalPosition(
        url=entry.source_url,
        line=entry.source_line_number,
        column=entry.source_column_number,
    )
