"""Source location resolution."""

from .locations import SourceLocationResolver

__all__ = ["SourceLocationResolver"]
