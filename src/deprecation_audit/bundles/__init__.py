"""Bundle collection and script-identity lookup.

Provides:
- Bundle, MappingEntry, MappingTableResolver: Precomputed bundle records
- SourceMapResolver, BundleProvider: Collaborator protocols
- BundleIndex: Per-run lookup by script id
- StaticBundleProvider, JsonBundleProvider, request_bundles: Bundle sources
"""

from .base import Bundle, BundleProvider, MappingEntry, MappingTableResolver, SourceMapResolver
from .index import BundleIndex
from .providers import JsonBundleProvider, StaticBundleProvider, request_bundles

__all__ = [
    "Bundle",
    "BundleProvider",
    "MappingEntry",
    "MappingTableResolver",
    "SourceMapResolver",
    "BundleIndex",
    "JsonBundleProvider",
    "StaticBundleProvider",
    "request_bundles",
]
