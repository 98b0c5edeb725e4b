# tgpp_guidance/guidance/engine.py
"""
Guidance engine: turns an analyzed query into ranked, rendered guidance.

The engine holds no per-request state. The knowledge graph is injected so
tests can run against small hand-built graphs.
"""

import logging
from typing import Callable, Optional

from ..knowledge.store import KnowledgeGraph
from . import analyzer
from .sections import (
    ComparisonPlan,
    EvolutionAnalysis,
    GeneralGuidance,
    ImplementationPlan,
    LearningPath,
    LearningSpecifications,
    SearchStrategy,
    Section,
    SpecificationSuggestions,
    TroubleshootingPlan,
)
from .templates import render_section
from .types import GuidanceResponse, GuidanceSection, QueryAnalysis, QueryIntent, UserQuery

logger = logging.getLogger(__name__)

# =============================================================================
# RESPONSE TABLES
# =============================================================================

BASE_CONFIDENCE = 0.8
GENERIC_CONFIDENCE = 0.6

DISCOVERY_SPEC_LIMIT = 5
LEARNING_SPEC_LIMIT = 3
IMPLEMENTATION_SPEC_LIMIT = 3
LIST_LIMIT = 4

NEXT_STEPS = {
    QueryIntent.DISCOVERY: [
        "Review suggested specifications in the recommended order",
        "Search 3GPP.org using the provided keywords",
        "Start with architectural overview documents",
    ],
    QueryIntent.LEARNING: [
        "Begin with the foundational concepts identified",
        "Progress through specifications in suggested sequence",
        "Create your own summary notes and diagrams",
    ],
    QueryIntent.IMPLEMENTATION: [
        "Study implementation requirements in detail",
        "Create technical design based on specification guidance",
        "Plan testing strategy for implementation validation",
    ],
}
DEFAULT_NEXT_STEPS = [
    "Follow the provided research strategy",
    "Dive deeper into the most relevant specifications",
    "Consider asking more specific follow-up questions",
]

RELATED_TOPICS = {
    "authentication": ["Identity management", "Key derivation", "Privacy protection", "Security architecture"],
    "mobility": ["Handover optimization", "Load balancing", "Network selection", "Roaming procedures"],
    "session_management": ["QoS management", "Bearer control", "Data routing", "Service continuity"],
    "security": ["Encryption algorithms", "Key management", "Attack mitigation", "Privacy mechanisms"],
    "protocol": ["Message flows", "State machines", "Error handling", "Interoperability"],
    "architecture": ["Network functions", "Interface design", "Deployment strategies", "Scalability"],
}
DEFAULT_RELATED_TOPICS = [
    "3GPP release evolution",
    "Implementation best practices",
    "Testing methodologies",
    "Compliance requirements",
]

# Summary fragments keyed by lower-cased section title, in append order
SUMMARY_FRAGMENTS = (
    ("relevant specifications", " with specific specification recommendations"),
    ("search strategy", " and targeted search strategy"),
    ("learning path", " including structured learning approach"),
)


class GuidanceEngine:
    """Assembles guidance responses from the knowledge graph.

    Usage:
        engine = GuidanceEngine(KnowledgeGraph.build())
        query = UserQuery(text="What is SUCI?")
        response = engine.generate_guidance(query, engine.analyze_query(query))
    """

    def __init__(self, knowledge: KnowledgeGraph):
        self.knowledge = knowledge
        self._planners: dict[QueryIntent, Callable[[UserQuery, QueryAnalysis], list[Section]]] = {
            QueryIntent.DISCOVERY: self._plan_discovery,
            QueryIntent.LEARNING: self._plan_learning,
            QueryIntent.COMPARISON: self._plan_comparison,
            QueryIntent.IMPLEMENTATION: self._plan_implementation,
            QueryIntent.TROUBLESHOOTING: self._plan_troubleshooting,
            QueryIntent.EVOLUTION: self._plan_evolution,
        }

    def analyze_query(self, query: UserQuery) -> QueryAnalysis:
        """Classify a query's intent, domain, concepts, complexity and level."""
        analysis = analyzer.analyze(query)
        logger.debug(
            f"Analyzed query: intent={analysis.intent.value} domain={analysis.domain} "
            f"concepts={analysis.concepts} complexity={analysis.complexity:.2f}"
        )
        return analysis

    def generate_guidance(self, query: UserQuery, analysis: QueryAnalysis) -> GuidanceResponse:
        """Build the guidance response for an analyzed query.

        Sections whose data is missing (no matching specifications, no
        search pattern, fewer than two comparison targets) are omitted
        rather than reported as errors.
        """
        planner = self._planners.get(analysis.intent)
        confidence = BASE_CONFIDENCE
        if planner is None:
            planner = self._plan_generic
            confidence = GENERIC_CONFIDENCE

        sections = [render_section(block) for block in planner(query, analysis)]

        return GuidanceResponse(
            summary=self._summary(sections, analysis),
            sections=sections,
            next_steps=list(NEXT_STEPS.get(analysis.intent, DEFAULT_NEXT_STEPS))[:LIST_LIMIT],
            related_topics=list(RELATED_TOPICS.get(analysis.domain, DEFAULT_RELATED_TOPICS))[:LIST_LIMIT],
            confidence=confidence,
        )

    def guide(self, query: UserQuery) -> tuple[QueryAnalysis, GuidanceResponse]:
        """Analyze and answer a query in one call."""
        analysis = self.analyze_query(query)
        return analysis, self.generate_guidance(query, analysis)

    # ─────────────────────────────────────────────────────────────
    # Intent planners
    # ─────────────────────────────────────────────────────────────

    def _plan_discovery(self, query: UserQuery, analysis: QueryAnalysis) -> list[Section]:
        sections: list[Section] = []

        specs = self.knowledge.suggest_specifications(analysis.domain)
        if specs:
            sections.append(SpecificationSuggestions(
                specs=tuple(specs[:DISCOVERY_SPEC_LIMIT]),
                domain=analysis.domain,
                level=analysis.user_level,
            ))

        pattern = self.knowledge.search_pattern_for_domain(analysis.domain)
        if pattern is not None:
            sections.append(SearchStrategy(pattern=pattern, level=analysis.user_level))

        return sections

    def _plan_learning(self, query: UserQuery, analysis: QueryAnalysis) -> list[Section]:
        sections: list[Section] = [
            LearningPath(domain=analysis.domain, concepts=analysis.concepts, level=analysis.user_level)
        ]

        specs = self.knowledge.implementation_specifications(analysis.domain)
        if specs:
            sections.append(LearningSpecifications(
                specs=tuple(specs[:LEARNING_SPEC_LIMIT]),
                level=analysis.user_level,
            ))

        return sections

    def _plan_comparison(self, query: UserQuery, analysis: QueryAnalysis) -> list[Section]:
        targets = analyzer.extract_comparison_targets(query.text)
        if len(targets) < 2:
            logger.debug(f"Comparison needs two targets, found {targets}")
            return []
        return [ComparisonPlan(targets=tuple(targets), domain=analysis.domain, level=analysis.user_level)]

    def _plan_implementation(self, query: UserQuery, analysis: QueryAnalysis) -> list[Section]:
        specs = self.knowledge.implementation_specifications(analysis.domain)
        if not specs:
            return []
        return [ImplementationPlan(
            specs=tuple(specs[:IMPLEMENTATION_SPEC_LIMIT]),
            domain=analysis.domain,
            level=analysis.user_level,
        )]

    def _plan_troubleshooting(self, query: UserQuery, analysis: QueryAnalysis) -> list[Section]:
        return [TroubleshootingPlan(
            domain=analysis.domain, concepts=analysis.concepts, level=analysis.user_level
        )]

    def _plan_evolution(self, query: UserQuery, analysis: QueryAnalysis) -> list[Section]:
        return [EvolutionAnalysis(
            domain=analysis.domain, concepts=analysis.concepts, level=analysis.user_level
        )]

    def _plan_generic(self, query: UserQuery, analysis: QueryAnalysis) -> list[Section]:
        return [GeneralGuidance(query_text=query.text, domain=analysis.domain, level=analysis.user_level)]

    # ─────────────────────────────────────────────────────────────
    # Response text
    # ─────────────────────────────────────────────────────────────

    @staticmethod
    def _summary(sections: list[GuidanceSection], analysis: QueryAnalysis) -> str:
        titles = {section.title.lower() for section in sections}
        summary = f"Research guidance for {analysis.domain}"
        for title, fragment in SUMMARY_FRAGMENTS:
            if title in titles:
                summary += fragment
        return f"{summary}. Guidance adapted for {analysis.user_level.value} level understanding."


def create_engine(knowledge: Optional[KnowledgeGraph] = None) -> GuidanceEngine:
    """Engine over the given graph, or over the shared graph built from the shipped tables."""
    if knowledge is None:
        from ..knowledge import get_knowledge_graph
        knowledge = get_knowledge_graph()
    return GuidanceEngine(knowledge)
