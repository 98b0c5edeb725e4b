"""Specification lookup tools

Catalog search, details, comparison and implementation requirements for
specifications. Curated knowledge-graph entries are combined with catalog
metadata; a catalog failure is reported alongside the knowledge-graph answer
instead of failing the call.
"""

import logging
import re
from typing import Optional

from pydantic import ValidationError as SchemaValidationError

from ..catalog.errors import CatalogError
from ..catalog.types import SpecificationMetadata, SpecificationSearch
from ..config import Config
from ..guidance.analyzer import normalize_domain
from ..guidance.engine import GuidanceEngine
from ..guidance.types import UserQuery
from ..knowledge.store import KnowledgeGraph
from ..knowledge.types import SpecificationEntity
from ..schemas.response_schemas import SpecificationMetadataModel
from ..schemas.tool_schemas import (
    CompareSpecificationsInput,
    ImplementationInput,
    SearchSpecificationsInput,
    SpecificationInput,
)

logger = logging.getLogger(__name__)

# =============================================================================
# IMPLEMENTATION RECIPES
# =============================================================================

# (trigger keywords, ordered steps); every matching recipe contributes
IMPLEMENTATION_RECIPES = (
    (("charging",), [
        "1. Review TS 32.290 for 5G converged charging architecture",
        "2. Implement HTTP/2 REST API interfaces for CHF integration",
        "3. Ensure compliance with service-based architecture principles",
    ]),
    (("security",), [
        "1. Implement 5G-AKA authentication as per TS 33.501",
        "2. Ensure SUCI/SUPI privacy protection mechanisms",
        "3. Validate key derivation and management procedures",
    ]),
    (("handover", "mobility"), [
        "1. Configure measurement parameters according to TS 38.331",
        "2. Implement preparation and execution phases within timing constraints",
        "3. Test with various radio conditions and load scenarios",
    ]),
)
BASIC_STEP = "0. Start with fundamental concepts and basic implementation"
ADVANCED_STEP = "4. Consider advanced optimization and edge case handling"

RELEASE_NUMBER = re.compile(r"(\d+)")


def implementation_guidance(feature: str, complexity_level: str = "intermediate") -> list[str]:
    """Ordered implementation steps for a feature."""
    feature = feature.lower()
    steps = []
    for keywords, recipe in IMPLEMENTATION_RECIPES:
        if any(keyword in feature for keyword in keywords):
            steps.extend(recipe)

    if complexity_level == "basic":
        steps.insert(0, BASIC_STEP)
    elif complexity_level == "advanced":
        steps.append(ADVANCED_STEP)

    return steps


def _release_key(release: str) -> int:
    match = RELEASE_NUMBER.search(release)
    return int(match.group(1)) if match else 0


def infer_major_changes(profile: dict) -> list[str]:
    """Headline changes for a specification's release and focus."""
    keywords = [keyword.lower() for keyword in profile["keywords"]]
    changes = []

    if profile["release"] == "Rel-17":
        changes.append("Enhanced features for 5G Advanced")
    if profile["working_group"] == "SA5" and "charging" in keywords:
        changes.append("Converged charging enhancements")
    if "security" in keywords:
        changes.append("Security protocol updates")
    if profile.get("evolution_notes"):
        changes.append(profile["evolution_notes"])

    return changes


def specification_profile(
    spec_id: str,
    metadata: Optional[SpecificationMetadata],
    entity: Optional[SpecificationEntity],
) -> dict:
    """Merge catalog metadata with the curated entry; curated fields win."""
    profile = {
        "id": spec_id,
        "title": f"{spec_id} - 3GPP Technical Specification",
        "release": "Unknown",
        "working_group": "Unknown",
        "version": None,
        "publication_date": None,
        "dependencies": [],
        "keywords": [],
        "evolution_notes": None,
    }

    if metadata is not None:
        profile.update({
            "title": metadata.title,
            "release": metadata.release,
            "working_group": metadata.working_group,
            "version": metadata.version,
            "publication_date": metadata.publication_date,
            "dependencies": list(metadata.dependencies),
            "keywords": list(metadata.keywords),
        })

    if entity is not None:
        profile.update({
            "title": entity.title,
            "release": entity.release,
            "working_group": entity.working_group,
            "dependencies": list(entity.dependencies),
            "evolution_notes": entity.evolution_notes,
        })
        if not profile["keywords"]:
            profile["keywords"] = list(entity.search_keywords)

    return profile


def comparison_matrix(profiles: list[dict]) -> dict:
    return {
        "working_groups": [{"id": p["id"], "working_group": p["working_group"]} for p in profiles],
        "releases": [
            {"id": p["id"], "release": p["release"], "publication_date": p["publication_date"]}
            for p in profiles
        ],
        "dependencies": [{"id": p["id"], "dependencies": p["dependencies"]} for p in profiles],
        "focus_areas": [{"id": p["id"], "keywords": p["keywords"]} for p in profiles],
    }


def evolution_analysis(profiles: list[dict]) -> list[dict]:
    """Profiles in release order with their inferred changes."""
    ordered = sorted(profiles, key=lambda p: _release_key(p["release"]))
    return [
        {
            "specification": p["id"],
            "release": p["release"],
            "version": p["version"],
            "major_changes": infer_major_changes(p),
        }
        for p in ordered
    ]


def search_catalog(
    catalog: SpecificationSearch,
    knowledge: KnowledgeGraph,
    query: str,
    max_results: int = 5,
    series: Optional[list[str]] = None,
    releases: Optional[list[str]] = None,
    working_group: Optional[str] = None,
) -> dict:
    """Catalog matches joined with their curated knowledge-graph entries.

    Several series or releases are OR-ed: the catalog is asked once per
    (release, series) pair and the matches are merged in that order without
    duplicates. Specifications related to a match but not matched themselves
    are listed separately.

    Raises:
        CatalogError: If the catalog search fails
    """
    matches: dict[str, SpecificationMetadata] = {}
    for release in releases or [None]:
        for prefix in [f"{s}." for s in series] if series else [None]:
            found = catalog.search_specifications(
                query, release=release, working_group=working_group, series=prefix
            )
            for metadata in found:
                matches.setdefault(metadata.id, metadata)

    results = []
    for metadata in list(matches.values())[:max_results]:
        entity = knowledge.get_specification(metadata.id)
        entry = SpecificationMetadataModel(**metadata.to_dict()).model_dump()
        entry.update({
            "in_knowledge_graph": entity is not None,
            "purpose": entity.purpose if entity else None,
            "key_topics": list(entity.key_topics) if entity else [],
            "implementation_notes": list(entity.implementation_notes) if entity else [],
        })
        results.append(entry)

    listed = {entry["id"] for entry in results}
    related = []
    for entry in results:
        for spec in knowledge.related_specifications(entry["id"]):
            if spec.id in listed:
                continue
            listed.add(spec.id)
            related.append({
                "id": spec.id,
                "title": spec.title,
                "release": spec.release,
                "working_group": spec.working_group,
                "related_to": entry["id"],
            })

    return {"total_found": len(matches), "results": results, "related_specifications": related}


def register_specification_tools(mcp, engine: GuidanceEngine, catalog: SpecificationSearch):
    """Register specification lookup tools with the MCP server."""

    knowledge = engine.knowledge

    @mcp.tool()
    def search_specifications(
        query: str,
        max_results: int = 5,
        series_filter: Optional[list[str]] = None,
        release_filter: Optional[list[str]] = None,
        working_group: Optional[str] = None,
    ) -> dict:
        """Search the specification catalog

        Args:
            query: Text to match, e.g. "charging" or "handover"
            max_results: Maximum specifications to return (1-20, default: 5)
            series_filter: Series to keep, e.g. ["32", "33"]
            release_filter: Releases to keep, e.g. ["Rel-16", "Rel-17"]
            working_group: Working group to keep, e.g. "SA5"

        Returns:
            Dictionary with catalog metadata for each match joined with its
            knowledge-graph entry, plus related specifications that did not
            match themselves

        Examples:
            search_specifications("charging")
            search_specifications("5G", series_filter=["33"], release_filter=["Rel-17"])
        """
        try:
            try:
                validated = SearchSpecificationsInput(
                    query=query,
                    max_results=max_results,
                    series_filter=series_filter,
                    release_filter=release_filter,
                    working_group=working_group,
                )
            except SchemaValidationError as e:
                return {"error": f"Invalid input: {e}"}

            result = {
                "query": validated.query,
                "filters": {
                    "series": validated.series_filter or [],
                    "releases": validated.release_filter or [],
                    "working_group": validated.working_group,
                },
            }

            try:
                result.update(search_catalog(
                    catalog,
                    knowledge,
                    validated.query,
                    max_results=validated.max_results,
                    series=validated.series_filter,
                    releases=validated.release_filter,
                    working_group=validated.working_group,
                ))
            except CatalogError as e:
                logger.warning(f"Catalog search failed for '{validated.query}': {e}")
                result.update({
                    "total_found": 0,
                    "results": [],
                    "related_specifications": [],
                    "catalog_error": str(e),
                })

            logger.info(f"search_specifications '{validated.query}': {result['total_found']} matches")
            return result

        except Exception as e:
            logger.error(f"search_specifications error: {e}", exc_info=True)
            return {"error": str(e)}

    @mcp.tool()
    def get_specification_details(spec_id: str, include_related: bool = True) -> dict:
        """Get everything known about one specification

        Args:
            spec_id: Specification ID, e.g. "TS 33.501" (also accepts "33.501")
            include_related: Include related specifications and relationship edges

        Returns:
            Dictionary with the curated knowledge entry (if any), catalog
            metadata, working group and release information

        Examples:
            get_specification_details("TS 24.501")
            get_specification_details("32.290", include_related=False)
        """
        try:
            try:
                validated = SpecificationInput(spec_id=spec_id, include_related=include_related)
            except SchemaValidationError as e:
                return {"error": f"Invalid input: {e}"}

            entity = knowledge.get_specification(validated.spec_id)
            result = {
                "spec_id": validated.spec_id,
                "in_knowledge_graph": entity is not None,
                "specification": entity.to_dict() if entity else None,
            }

            try:
                metadata = catalog.get_specification_metadata(validated.spec_id)
                result["metadata"] = SpecificationMetadataModel(**metadata.to_dict()).model_dump()
                # Curated working group and release take precedence over catalog placeholders
                working_group = entity.working_group if entity else metadata.working_group
                release = entity.release if entity else metadata.release
                result["working_group"] = catalog.get_working_group_info(working_group).to_dict()
                result["release"] = catalog.get_release_info(release).to_dict()
            except CatalogError as e:
                logger.warning(f"Catalog lookup failed for {validated.spec_id}: {e}")
                result["catalog_error"] = str(e)

            if validated.include_related:
                result["related_specifications"] = [
                    {"id": spec.id, "title": spec.title, "purpose": spec.purpose}
                    for spec in knowledge.related_specifications(validated.spec_id)
                ]
                result["relationships"] = [
                    edge.to_dict() for edge in knowledge.relationships_for(validated.spec_id)
                ]

            return result

        except Exception as e:
            logger.error(f"get_specification_details error: {e}", exc_info=True)
            return {"error": str(e)}

    @mcp.tool()
    def compare_specifications(spec_ids: list[str]) -> dict:
        """Compare two to five specifications side by side

        Args:
            spec_ids: Specification IDs, e.g. ["TS 24.301", "TS 24.501"]

        Returns:
            Dictionary with per-specification profiles, a comparison matrix
            (working groups, releases, dependencies, focus areas) and, when the
            releases differ, an evolution analysis in release order

        Examples:
            compare_specifications(["TS 24.301", "TS 24.501"])
            compare_specifications(["TS 32.240", "TS 32.290", "TS 32.291"])
        """
        try:
            try:
                validated = CompareSpecificationsInput(spec_ids=spec_ids)
            except SchemaValidationError as e:
                return {"error": f"Invalid input: {e}"}

            profiles = []
            catalog_errors = {}
            for spec_id in validated.spec_ids:
                metadata = None
                try:
                    metadata = catalog.get_specification_metadata(spec_id)
                except CatalogError as e:
                    catalog_errors[spec_id] = str(e)
                profiles.append(specification_profile(spec_id, metadata, knowledge.get_specification(spec_id)))

            result = {
                "specifications": profiles,
                "comparison_matrix": comparison_matrix(profiles),
            }

            if len({p["release"] for p in profiles}) > 1:
                result["evolution_analysis"] = evolution_analysis(profiles)

            if catalog_errors:
                result["catalog_error"] = catalog_errors

            logger.info(f"compare_specifications: {', '.join(validated.spec_ids)}")
            return result

        except Exception as e:
            logger.error(f"compare_specifications error: {e}", exc_info=True)
            return {"error": str(e)}

    @mcp.tool()
    def find_implementation_requirements(
        feature: str,
        domain: Optional[str] = None,
        complexity_level: str = "intermediate",
    ) -> dict:
        """Find what an implementation of a feature has to satisfy

        Args:
            feature: Feature to implement, e.g. "5G charging" or "handover"
            domain: Optional domain to search instead of the feature text
            complexity_level: "basic", "intermediate" or "advanced"

        Returns:
            Dictionary with requirements (implementation notes of the
            matching specifications), catalog matches and ordered
            implementation guidance

        Examples:
            find_implementation_requirements("charging")
            find_implementation_requirements("handover", complexity_level="advanced")
        """
        try:
            try:
                validated = ImplementationInput(
                    feature=feature, domain=domain, complexity_level=complexity_level
                )
            except SchemaValidationError as e:
                return {"error": f"Invalid input: {e}"}

            topic = normalize_domain(validated.domain) or validated.feature
            specs = knowledge.implementation_specifications(topic)
            if not specs:
                analysis = engine.analyze_query(UserQuery(text=validated.feature))
                specs = knowledge.implementation_specifications(analysis.domain)
            specs = specs[:Config.MAX_SUGGESTIONS]

            result = {
                "feature": validated.feature,
                "complexity_level": validated.complexity_level,
                "specifications": [{"id": spec.id, "title": spec.title} for spec in specs],
                "requirements": [
                    {"source": spec.id, "description": note}
                    for spec in specs
                    for note in spec.implementation_notes
                ],
                "implementation_guidance": implementation_guidance(
                    validated.feature, validated.complexity_level
                ),
            }

            try:
                matches = catalog.search_specifications(validated.feature)
                result["related_specifications"] = [match.to_dict() for match in matches]
            except CatalogError as e:
                logger.warning(f"Catalog search failed for '{validated.feature}': {e}")
                result["catalog_error"] = str(e)

            return result

        except Exception as e:
            logger.error(f"find_implementation_requirements error: {e}", exc_info=True)
            return {"error": str(e)}
