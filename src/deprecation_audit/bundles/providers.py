"""Bundle collection providers.

The bundle collection is requested once per audit run, before
reconciliation. Providers own any retry or caching policy; ``request_bundles``
performs a single awaited request and turns a provider failure into a
run-level ``BundleCollectionError``.

Provides:
- StaticBundleProvider: Serves an in-memory, precomputed collection
- JsonBundleProvider: Loads precomputed bundle records from a JSON file
- request_bundles: Single awaited fetch with failure propagation
"""

import asyncio
import json
from pathlib import Path
from typing import Iterable

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from deprecation_audit.bundles.base import Bundle, BundleProvider, MappingEntry, MappingTableResolver
from deprecation_audit.core.artifacts import Artifacts
from deprecation_audit.core.exceptions import ArtifactLoadError, BundleCollectionError

logger = structlog.get_logger()


class BundleRecord(BaseModel):
    """On-disk form of one precomputed bundle."""

    model_config = ConfigDict(populate_by_name=True)

    script_id: str = Field(alias="scriptId")
    url: str = ""
    entries: list[MappingEntry] | None = None

    def to_bundle(self) -> Bundle:
        resolver = MappingTableResolver(self.entries) if self.entries is not None else None
        return Bundle(script_id=self.script_id, url=self.url, resolver=resolver)


class StaticBundleProvider:
    """Provider returning a fixed bundle collection."""

    def __init__(self, bundles: Iterable[Bundle] = ()):
        self._bundles = list(bundles)

    async def request(self, artifacts: Artifacts) -> list[Bundle]:
        return list(self._bundles)


class JsonBundleProvider:
    """Provider loading precomputed bundles from a JSON file.

    The file holds a list of records::

        [{"scriptId": "S1", "url": "https://example.com/app.min.js",
          "entries": [{"lineNumber": 0, "columnNumber": 0,
                       "sourceURL": "src/app.ts",
                       "sourceLineNumber": 0, "sourceColumnNumber": 0}]}]
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def request(self, artifacts: Artifacts) -> list[Bundle]:
        text = await asyncio.to_thread(self._read)
        try:
            raw = json.loads(text)
            if not isinstance(raw, list):
                raise ArtifactLoadError("Bundle file must contain a list", path=str(self.path))
            records = [BundleRecord.model_validate(item) for item in raw]
        except json.JSONDecodeError as e:
            raise ArtifactLoadError(f"Bundle file is not JSON: {e}", path=str(self.path)) from e
        except ValidationError as e:
            raise ArtifactLoadError(
                f"Invalid bundle record ({e.error_count()} errors)", path=str(self.path)
            ) from e
        return [record.to_bundle() for record in records]

    def _read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ArtifactLoadError(f"Cannot read bundle file: {e}", path=str(self.path)) from e


async def request_bundles(provider: BundleProvider, artifacts: Artifacts) -> list[Bundle]:
    """Fetch the bundle collection once.

    Args:
        provider: Bundle collection source
        artifacts: Artifact set the bundles are computed for

    Returns:
        Bundle collection (possibly empty)

    Raises:
        BundleCollectionError: If the provider fails; no partial result
    """
    provider_name = type(provider).__name__
    log = logger.bind(provider=provider_name)

    try:
        bundles = await provider.request(artifacts)
    except Exception as e:
        log.error("bundle_request_failed", error=str(e))
        raise BundleCollectionError(
            f"Bundle collection unavailable: {e}", provider=provider_name
        ) from e

    log.debug("bundles_received", count=len(bundles))
    return list(bundles)
