"""Script-identity lookup over a run's bundle collection."""

from typing import Iterable

from deprecation_audit.bundles.base import Bundle


class BundleIndex:
    """Immutable script id to Bundle mapping, built once per audit run.

    When several records share a script id the first one wins, matching a
    find-first scan of the original collection.
    """

    def __init__(self, bundles: Iterable[Bundle] = ()):
        index: dict[str, Bundle] = {}
        for bundle in bundles:
            index.setdefault(bundle.script_id, bundle)
        self._by_script_id = index

    def __len__(self) -> int:
        return len(self._by_script_id)

    def __contains__(self, script_id: object) -> bool:
        return script_id in self._by_script_id

    def find(self, script_id: str | None) -> Bundle | None:
        """Return the bundle for ``script_id``; None when there is none."""
        if not script_id:
            return None
        return self._by_script_id.get(script_id)
