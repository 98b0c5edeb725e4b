"""
Specification metadata catalog

Serves publication metadata (version, release, working group, status) for
3GPP specifications from canned records, with every answer cached for the
configured TTL. Unknown specifications, releases and working groups get
generic placeholder records rather than errors.
"""

import json
import logging
from typing import Any, Optional

from ..config import Config
from ..utils.cache import TTLCache, get_cache
from . import records
from .errors import CatalogError
from .types import ReleaseInfo, SpecificationMetadata, WorkingGroupInfo

logger = logging.getLogger(__name__)


class MetadataCatalogClient:
    """Catalog lookups backed by the canned records in :mod:`.records`."""

    def __init__(self, cache: Optional[TTLCache] = None, max_results: Optional[int] = None):
        self.cache = cache if cache is not None else get_cache()
        self.max_results = max_results or Config.MAX_CATALOG_RESULTS

    # ─────────────────────────────────────────────────────────────
    # Lookups
    # ─────────────────────────────────────────────────────────────

    def get_specification_metadata(self, spec_id: str) -> SpecificationMetadata:
        """Metadata for one specification; placeholder values when unknown."""
        if not spec_id or not spec_id.strip():
            raise CatalogError("Specification ID cannot be empty")

        return self._cached(f"spec_meta:{spec_id}", lambda: _specification_metadata(spec_id))

    def get_release_info(self, release: str) -> ReleaseInfo:
        if not release or not release.strip():
            raise CatalogError("Release cannot be empty")

        return self._cached(f"release:{release}", lambda: _release_info(release))

    def get_working_group_info(self, wg_name: str) -> WorkingGroupInfo:
        if not wg_name or not wg_name.strip():
            raise CatalogError("Working group cannot be empty")

        return self._cached(f"wg:{wg_name}", lambda: _working_group_info(wg_name))

    def search_specifications(
        self,
        query: str,
        release: Optional[str] = None,
        working_group: Optional[str] = None,
        series: Optional[str] = None,
    ) -> list[SpecificationMetadata]:
        """Search the catalog by text, then narrow by the exact-match filters.

        The text matches case-insensitively against title, summary and
        keywords; a blank query matches everything. ``series`` matches any
        ID containing it, e.g. "32." or "33".
        """
        filters = {"release": release, "working_group": working_group, "series": series}
        key = "search:" + json.dumps({"query": query, "filters": filters}, sort_keys=True)

        return list(self._cached(key, lambda: self._search(query, release, working_group, series)))

    def _search(
        self,
        query: str,
        release: Optional[str],
        working_group: Optional[str],
        series: Optional[str],
    ) -> list[SpecificationMetadata]:
        results = [_specification_metadata(spec_id) for spec_id in records.SEARCHABLE_SPECIFICATIONS]

        if query and query.strip():
            term = query.lower()
            results = [
                spec for spec in results
                if term in spec.title.lower()
                or term in spec.summary.lower()
                or any(term in keyword.lower() for keyword in spec.keywords)
            ]

        if release:
            results = [spec for spec in results if spec.release == release]
        if working_group:
            results = [spec for spec in results if spec.working_group == working_group]
        if series:
            results = [spec for spec in results if series in spec.id]

        logger.debug(f"Catalog search '{query}' matched {len(results)} specifications")
        return results[:self.max_results]

    # ─────────────────────────────────────────────────────────────
    # Cache management
    # ─────────────────────────────────────────────────────────────

    def _cached(self, key: str, load):
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        value = load()
        self.cache.set(key, value)
        return value

    def cache_stats(self) -> dict[str, Any]:
        """Key count, hits and misses of the catalog cache."""
        stats = self.cache.stats()
        return {"keys": stats["keys"], "hits": stats["hits"], "misses": stats["misses"]}

    def clear_cache(self) -> None:
        self.cache.clear()


def _specification_metadata(spec_id: str) -> SpecificationMetadata:
    record = records.SPECIFICATION_RECORDS.get(spec_id, {})
    return SpecificationMetadata(
        id=spec_id,
        title=record.get("title", f"{spec_id} - 3GPP Technical Specification"),
        version=record.get("version", records.DEFAULT_VERSION),
        release=record.get("release", records.DEFAULT_RELEASE),
        working_group=record.get("working_group", records.DEFAULT_WORKING_GROUP),
        status=record.get("status", records.DEFAULT_STATUS),
        publication_date=record.get("publication_date", records.DEFAULT_PUBLICATION_DATE),
        summary=record.get("summary", records.DEFAULT_SUMMARY),
        dependencies=tuple(record.get("dependencies", ())),
        keywords=tuple(record.get("keywords", ())),
    )


def _release_info(release: str) -> ReleaseInfo:
    record = records.RELEASE_RECORDS.get(release)
    if record is None:
        return ReleaseInfo(release=release, freeze_date="2023-01-01", status="Unknown")
    return ReleaseInfo(
        release=release,
        freeze_date=record["freeze_date"],
        status=record["status"],
        specifications=tuple(record["specifications"]),
        major_features=tuple(record["major_features"]),
    )


def _working_group_info(wg_name: str) -> WorkingGroupInfo:
    record = records.WORKING_GROUP_RECORDS.get(wg_name)
    if record is None:
        return WorkingGroupInfo(
            name=wg_name,
            full_name=f"{wg_name} Working Group",
            focus_area="Technical specifications",
            chairperson="Unknown",
        )
    return WorkingGroupInfo(
        name=wg_name,
        full_name=record["full_name"],
        focus_area=record["focus_area"],
        specifications=tuple(record["specifications"]),
        chairperson=record["chairperson"],
    )
