# tgpp_guidance/knowledge/store.py
"""In-memory knowledge graph of 3GPP specifications, protocols and concepts.

The graph is built once from the static tables in :mod:`.data` and is
read-only afterwards, so one instance can be shared by every request.
"""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

from . import data
from .errors import KnowledgeBaseError
from .scoring import comparator_score, is_relevant
from .types import (
    ConceptEntity,
    ProcedureEntity,
    ProtocolEntity,
    Relationship,
    RelationshipType,
    ResearchPattern,
    SearchPattern,
    SpecificationEntity,
)

logger = logging.getLogger(__name__)

# Edge types that get a mirrored edge on the target, with the mirrored type
MIRRORED_RELATIONSHIPS = {
    RelationshipType.USES: RelationshipType.DEFINES,
    RelationshipType.REFERENCES: RelationshipType.REFERENCES,
}
REVERSE_STRENGTH_FACTOR = 0.8


class KnowledgeGraph:
    """Specification knowledge graph with lookup and suggestion helpers.

    Use :meth:`build` to construct one; the constructor expects entities
    that are already parsed.
    """

    def __init__(
        self,
        specifications: Iterable[SpecificationEntity],
        protocols: Iterable[ProtocolEntity] = (),
        concepts: Iterable[ConceptEntity] = (),
        patterns: Iterable[ResearchPattern] = (),
        relationships: Optional[Mapping[str, Iterable[Relationship]]] = None,
        search_patterns: Iterable[SearchPattern] = (),
    ):
        self._specifications = {spec.id: spec for spec in specifications}
        self._protocols = {p.name.upper(): p for p in protocols}
        self._concepts = {c.name.upper(): c for c in concepts}
        self._patterns = {p.name: p for p in patterns}
        self._relationships = {
            source: tuple(edges) for source, edges in (relationships or {}).items()
        }
        self._search_patterns = tuple(search_patterns)

    @classmethod
    def build(
        cls,
        specifications: Optional[list[dict]] = None,
        protocols: Optional[list[dict]] = None,
        concepts: Optional[list[dict]] = None,
        patterns: Optional[list[dict]] = None,
        relationships: Optional[list[tuple]] = None,
        search_patterns: Optional[list[dict]] = None,
    ) -> "KnowledgeGraph":
        """Build the graph from table rows, defaulting to the shipped tables.

        Raises:
            KnowledgeBaseError: If a table is malformed or the specification
                table is empty
        """
        tables = {
            "specifications": data.SPECIFICATIONS if specifications is None else specifications,
            "protocols": data.PROTOCOLS if protocols is None else protocols,
            "concepts": data.CONCEPTS if concepts is None else concepts,
            "patterns": data.RESEARCH_PATTERNS if patterns is None else patterns,
            "relationships": data.RELATIONSHIPS if relationships is None else relationships,
            "search_patterns": data.SEARCH_PATTERNS if search_patterns is None else search_patterns,
        }

        if not tables["specifications"]:
            raise KnowledgeBaseError("Specification table is empty", table="specifications")

        parsers = {
            "specifications": SpecificationEntity.from_dict,
            "protocols": ProtocolEntity.from_dict,
            "concepts": ConceptEntity.from_dict,
            "patterns": ResearchPattern.from_dict,
            "search_patterns": SearchPattern.from_dict,
        }
        parsed = {}
        for name, parser in parsers.items():
            try:
                parsed[name] = [parser(row) for row in tables[name]]
            except (KeyError, TypeError, AttributeError) as e:
                raise KnowledgeBaseError(f"Malformed {name} table: {e!r}", table=name) from e

        _check_unique(parsed["specifications"], lambda spec: spec.id, "specifications")
        _check_unique(parsed["protocols"], lambda p: p.name.upper(), "protocols")
        _check_unique(parsed["concepts"], lambda c: c.name.upper(), "concepts")

        try:
            edges = _build_relationships(tables["relationships"])
        except (ValueError, TypeError, AttributeError) as e:
            raise KnowledgeBaseError(f"Malformed relationships table: {e}", table="relationships") from e

        graph = cls(
            specifications=parsed["specifications"],
            protocols=parsed["protocols"],
            concepts=parsed["concepts"],
            patterns=parsed["patterns"],
            relationships=edges,
            search_patterns=parsed["search_patterns"],
        )
        logger.info(
            f"Knowledge graph built: {len(graph._specifications)} specifications, "
            f"{len(graph._protocols)} protocols, {len(graph._concepts)} concepts, "
            f"{len(graph._patterns)} patterns"
        )
        return graph

    # ─────────────────────────────────────────────────────────────
    # Lookups
    # ─────────────────────────────────────────────────────────────

    def get_specification(self, spec_id: str) -> Optional[SpecificationEntity]:
        return self._specifications.get(spec_id)

    def get_protocol(self, name: str) -> Optional[ProtocolEntity]:
        return self._protocols.get(name.upper())

    def get_concept(self, name: str) -> Optional[ConceptEntity]:
        return self._concepts.get(name.upper())

    def get_pattern(self, name: str) -> Optional[ResearchPattern]:
        return self._patterns.get(name)

    @property
    def specifications(self) -> Mapping[str, SpecificationEntity]:
        return MappingProxyType(self._specifications)

    @property
    def protocols(self) -> Mapping[str, ProtocolEntity]:
        return MappingProxyType(self._protocols)

    @property
    def concepts(self) -> Mapping[str, ConceptEntity]:
        return MappingProxyType(self._concepts)

    @property
    def patterns(self) -> Mapping[str, ResearchPattern]:
        return MappingProxyType(self._patterns)

    @property
    def search_patterns(self) -> tuple[SearchPattern, ...]:
        return self._search_patterns

    def relationships_for(self, spec_id: str) -> tuple[Relationship, ...]:
        return self._relationships.get(spec_id, ())

    def find_procedure(self, name: str) -> Optional[tuple[ProtocolEntity, ProcedureEntity]]:
        """Find the first protocol defining a procedure with this name."""
        wanted = name.strip().lower()
        for protocol in self._protocols.values():
            for procedure in protocol.procedures:
                if procedure.name.lower() == wanted:
                    return protocol, procedure
        return None

    # ─────────────────────────────────────────────────────────────
    # Guidance helpers
    # ─────────────────────────────────────────────────────────────

    def suggest_specifications(self, topic: str) -> list[SpecificationEntity]:
        """Specifications relevant to a topic, best match first.

        Ties keep table order.
        """
        candidates = [spec for spec in self._specifications.values() if is_relevant(spec, topic)]
        return sorted(candidates, key=lambda spec: comparator_score(spec, topic), reverse=True)

    def related_specifications(self, spec_id: str) -> list[SpecificationEntity]:
        """Specifications linked from ``spec_id``, strongest edge first.

        Edges to specifications outside the graph are skipped; an unknown
        ``spec_id`` yields an empty list.
        """
        resolved = []
        for edge in self._relationships.get(spec_id, ()):
            spec = self._specifications.get(edge.target)
            if spec is not None:
                resolved.append((edge.strength, spec))
        resolved.sort(key=lambda pair: pair[0], reverse=True)
        return [spec for _, spec in resolved]

    def search_pattern_for_domain(self, domain: str) -> Optional[SearchPattern]:
        """First search pattern for a domain, matched by name or keyword."""
        domain = domain.lower()
        for pattern in self._search_patterns:
            if pattern.domain.lower() == domain:
                return pattern
            if any(domain in keyword.lower() for keyword in pattern.keywords):
                return pattern
        return None

    def implementation_specifications(self, topic: str) -> list[SpecificationEntity]:
        """Suggested specifications that carry implementation notes."""
        return [spec for spec in self.suggest_specifications(topic) if spec.implementation_notes]


def _check_unique(entities: list, key, table: str) -> None:
    """Raise if two rows of a table share the same lookup key."""
    seen = set()
    for entity in entities:
        value = key(entity)
        if value in seen:
            raise KnowledgeBaseError(f"Duplicate key in {table} table: {value}", table=table)
        seen.add(value)


def _build_relationships(rows: Iterable[tuple]) -> dict[str, list[Relationship]]:
    """Turn (source, target, type, strength, description) rows into adjacency lists.

    ``uses`` and ``references`` edges are mirrored onto the target with a
    reduced strength.
    """
    edges: dict[str, list[Relationship]] = {}

    for row in rows:
        source, target, kind, strength = row[:4]
        description = row[4] if len(row) > 4 else None
        rel_type = RelationshipType.from_string(kind)
        strength = float(strength)
        if not 0.0 <= strength <= 1.0:
            raise ValueError(f"strength {strength} for {source} -> {target} is outside [0, 1]")

        edges.setdefault(source, []).append(
            Relationship(type=rel_type, target=target, strength=strength, description=description)
        )

        reverse_type = MIRRORED_RELATIONSHIPS.get(rel_type)
        if reverse_type is not None:
            edges.setdefault(target, []).append(
                Relationship(
                    type=reverse_type,
                    target=source,
                    strength=strength * REVERSE_STRENGTH_FACTOR,
                    description=f"Reverse: {description}" if description else None,
                )
            )

    return edges
