"""Specification knowledge graph"""

from typing import Optional

from .errors import KnowledgeBaseError
from .store import KnowledgeGraph
from .types import (
    ConceptEntity,
    PatternStep,
    ProcedureEntity,
    ProtocolEntity,
    Relationship,
    RelationshipType,
    ResearchPattern,
    SearchPattern,
    SpecificationEntity,
)

# Shared instance - built lazily on first use
_graph: Optional[KnowledgeGraph] = None


def get_knowledge_graph() -> KnowledgeGraph:
    """Get the shared knowledge graph, building it from the shipped tables."""
    global _graph
    if _graph is None:
        _graph = KnowledgeGraph.build()
    return _graph


__all__ = [
    "KnowledgeBaseError",
    "KnowledgeGraph",
    "get_knowledge_graph",
    "ConceptEntity",
    "PatternStep",
    "ProcedureEntity",
    "ProtocolEntity",
    "Relationship",
    "RelationshipType",
    "ResearchPattern",
    "SearchPattern",
    "SpecificationEntity",
]
