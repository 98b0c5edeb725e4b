"""Tests for guidance assembly."""

import pytest

from tgpp_guidance.guidance.types import ExpertiseLevel, QueryIntent, SectionType, UserQuery


def test_learning_question_about_suci(engine):
    analysis, response = engine.guide(UserQuery(text="What is SUCI and how is it different from IMSI?"))

    assert analysis.intent == QueryIntent.LEARNING
    assert response.section_titles() == ["Learning Path", "Key Specifications to Study"]
    assert response.summary == (
        "Research guidance for authentication including structured learning approach. "
        "Guidance adapted for beginner level understanding."
    )
    assert response.confidence == 0.8
    assert response.next_steps[0] == "Begin with the foundational concepts identified"
    assert response.related_topics == [
        "Identity management", "Key derivation", "Privacy protection", "Security architecture",
    ]


def test_learning_path_lists_concepts(engine):
    _, response = engine.guide(UserQuery(text="What is SUCI and how is it different from IMSI?"))

    learning_path = response.sections[0]
    assert learning_path.type == SectionType.OVERVIEW
    assert "## Learning Path for Authentication" in learning_path.content
    assert "- **SUCI**:" in learning_path.content
    assert "- **IMSI**:" in learning_path.content


def test_comparison_question_builds_comparison_section(engine):
    analysis, response = engine.guide(UserQuery(text="Compare TS 24.301 vs TS 24.501 for authentication"))

    assert analysis.intent == QueryIntent.COMPARISON
    assert response.section_titles() == ["Comparison Approach"]
    assert "## Comparison Approach: TS 24.301 vs TS 24.501" in response.sections[0].content
    assert "**Functional Scope**" in response.sections[0].content


def test_comparison_without_targets_omits_section(engine):
    analysis, response = engine.guide(UserQuery(text="Compare the two approaches"))

    assert analysis.intent == QueryIntent.COMPARISON
    assert response.sections == []
    assert response.confidence == 0.8


def test_empty_query_still_answers(engine):
    analysis, response = engine.guide(UserQuery(text=""))

    assert analysis.intent == QueryIntent.DISCOVERY
    assert response.sections == []
    assert response.summary == (
        "Research guidance for general. Guidance adapted for intermediate level understanding."
    )
    assert response.related_topics[0] == "3GPP release evolution"


def test_discovery_with_domain_override(engine):
    analysis, response = engine.guide(UserQuery(text="Find charging specifications", domain="charging"))

    assert analysis.domain == "charging"
    assert response.section_titles() == ["Relevant Specifications", "Search Strategy"]
    assert response.summary == (
        "Research guidance for charging with specific specification recommendations "
        "and targeted search strategy. Guidance adapted for intermediate level understanding."
    )


def test_discovery_suggestions_are_capped_and_ranked(engine):
    _, response = engine.guide(UserQuery(text="Find charging specifications", domain="charging"))

    content = response.sections[0].content
    assert content.count("### PRIMARY:") == 1
    assert content.count("### IMPORTANT:") == 1
    assert content.count("### REFERENCE:") <= 3


def test_implementation_without_specs_omits_section(engine):
    analysis, response = engine.guide(UserQuery(text="How to implement 5G charging?"))

    assert analysis.intent == QueryIntent.IMPLEMENTATION
    assert analysis.domain == "general"
    assert response.sections == []


def test_implementation_with_domain(engine):
    _, response = engine.guide(UserQuery(text="How to implement 5G charging?", domain="charging"))

    assert response.section_titles() == ["Implementation Approach"]
    assert response.sections[0].type == SectionType.IMPLEMENTATION
    assert response.next_steps[0] == "Study implementation requirements in detail"


def test_troubleshooting_section(engine):
    analysis, response = engine.guide(UserQuery(text="Registration is not working"))

    assert analysis.intent == QueryIntent.TROUBLESHOOTING
    assert response.section_titles() == ["Troubleshooting Approach"]
    assert response.next_steps[0] == "Follow the provided research strategy"


def test_evolution_section(engine):
    analysis, response = engine.guide(UserQuery(text="Rel-15 to Rel-16 migration"))

    assert analysis.intent == QueryIntent.EVOLUTION
    assert response.section_titles() == ["Evolution Analysis"]


def test_missing_planner_falls_back_to_generic_guidance(engine):
    engine._planners.pop(QueryIntent.EVOLUTION)

    _, response = engine.guide(UserQuery(text="Rel-15 to Rel-16 migration"))

    assert response.section_titles() == ["Research Guidance"]
    assert response.confidence == 0.6
    assert 'Research Guidance for: "Rel-15 to Rel-16 migration"' in response.sections[0].content


def test_lists_are_capped_at_four(engine):
    for text in ["What is SUCI?", "Find charging", "Registration is not working", "Rel-16 migration"]:
        _, response = engine.guide(UserQuery(text=text))
        assert len(response.next_steps) <= 4
        assert len(response.related_topics) <= 4


def test_explicit_level_shapes_rendering(engine):
    beginner = engine.guide(UserQuery(
        text="Find charging specifications", domain="charging", user_level=ExpertiseLevel.BEGINNER
    ))[1]
    expert = engine.guide(UserQuery(
        text="Find charging specifications", domain="charging", user_level=ExpertiseLevel.EXPERT
    ))[1]

    assert "Common Mistakes to Avoid" in beginner.sections[1].content
    assert "Common Mistakes to Avoid" not in expert.sections[1].content
    assert beginner.summary.endswith("Guidance adapted for beginner level understanding.")


def test_engine_works_over_injected_graph():
    from conftest import spec_row
    from tgpp_guidance.guidance.engine import GuidanceEngine
    from tgpp_guidance.knowledge import KnowledgeGraph

    graph = KnowledgeGraph.build(
        specifications=[spec_row("TS 11.111", "Charging basics", implementation_notes=["Rate events"])],
        protocols=[],
        concepts=[],
        patterns=[],
        relationships=[],
        search_patterns=[],
    )
    engine = GuidanceEngine(graph)

    _, response = engine.guide(UserQuery(text="Find charging", domain="charging"))

    assert response.section_titles() == ["Relevant Specifications"]
    assert "TS 11.111 - Charging basics" in response.sections[0].content


def test_to_dict_uses_wire_keys(engine):
    _, response = engine.guide(UserQuery(text="What is SUCI?"))

    data = response.to_dict()
    assert data["type"] == "guidance"
    assert set(data) == {"type", "summary", "sections", "nextSteps", "relatedTopics", "confidence"}
    assert data["sections"][0]["type"] == "overview"


def test_create_engine_uses_shared_graph():
    from tgpp_guidance.guidance import create_engine
    from tgpp_guidance.knowledge import get_knowledge_graph

    assert create_engine().knowledge is get_knowledge_graph()


@pytest.mark.parametrize("text", ["", "nonsense words only", "TS 99.999 vs TS 98.999"])
def test_guide_never_raises(engine, text):
    _, response = engine.guide(UserQuery(text=text))

    assert 0.0 <= response.confidence <= 1.0
