"""Tests for the knowledge graph store."""

import pytest

from conftest import spec_row


def test_build_loads_shipped_tables(knowledge):
    assert "TS 24.501" in knowledge.specifications
    assert "TS 32.290" in knowledge.specifications
    assert knowledge.get_protocol("nas") is not None
    assert knowledge.get_concept("suci") is not None
    assert knowledge.get_pattern("Protocol Analysis") is not None
    assert len(knowledge.search_patterns) > 0


def test_lookup_miss_returns_none(knowledge):
    assert knowledge.get_specification("TS 99.999") is None
    assert knowledge.get_protocol("NOPE") is None
    assert knowledge.get_concept("NOPE") is None
    assert knowledge.get_pattern("Nope Analysis") is None


def test_specification_lookup_is_exact(knowledge):
    assert knowledge.get_specification("ts 24.501") is None
    assert knowledge.get_specification("TS 24.501").title.startswith("5G System (5GS)")


def test_mappings_are_read_only(knowledge):
    with pytest.raises(TypeError):
        knowledge.specifications["TS 00.000"] = None


def test_build_empty_specification_table_is_fatal():
    from tgpp_guidance.knowledge import KnowledgeBaseError, KnowledgeGraph

    with pytest.raises(KnowledgeBaseError) as exc_info:
        KnowledgeGraph.build(specifications=[])

    assert exc_info.value.table == "specifications"


def test_build_malformed_row_is_fatal():
    from tgpp_guidance.knowledge import KnowledgeBaseError, KnowledgeGraph

    with pytest.raises(KnowledgeBaseError) as exc_info:
        KnowledgeGraph.build(specifications=[{"id": "TS 11.111"}])

    assert exc_info.value.table == "specifications"


def test_build_duplicate_specification_id_is_fatal():
    from tgpp_guidance.knowledge import KnowledgeBaseError, KnowledgeGraph

    with pytest.raises(KnowledgeBaseError) as exc_info:
        KnowledgeGraph.build(specifications=[
            spec_row("TS 32.240", "First"),
            spec_row("TS 32.240", "Second"),
        ])

    assert exc_info.value.table == "specifications"
    assert "TS 32.240" in str(exc_info.value)


def test_build_duplicate_protocol_name_ignores_case():
    from tgpp_guidance.knowledge import KnowledgeBaseError, KnowledgeGraph

    protocol = {"name": "NAS", "full_name": "Non-Access Stratum", "layer": "L3", "purpose": "Signalling"}

    with pytest.raises(KnowledgeBaseError) as exc_info:
        KnowledgeGraph.build(
            specifications=[spec_row("TS 11.111", "One")],
            protocols=[protocol, {**protocol, "name": "nas"}],
        )

    assert exc_info.value.table == "protocols"


def test_build_duplicate_concept_name_is_fatal():
    from tgpp_guidance.knowledge import KnowledgeBaseError, KnowledgeGraph

    concept = {
        "name": "SUCI",
        "full_name": "Subscription Concealed Identifier",
        "category": "identity",
        "description": "Concealed SUPI",
        "purpose": "Privacy",
    }

    with pytest.raises(KnowledgeBaseError) as exc_info:
        KnowledgeGraph.build(
            specifications=[spec_row("TS 11.111", "One")],
            concepts=[concept, {**concept, "name": "Suci"}],
        )

    assert exc_info.value.table == "concepts"


@pytest.mark.parametrize("strength", [7.5, -0.1])
def test_build_strength_outside_unit_range_is_fatal(strength):
    from tgpp_guidance.knowledge import KnowledgeBaseError, KnowledgeGraph

    with pytest.raises(KnowledgeBaseError) as exc_info:
        KnowledgeGraph.build(
            specifications=[spec_row("TS 32.240", "One"), spec_row("TS 32.290", "Two")],
            relationships=[("TS 32.240", "TS 32.290", "uses", strength)],
        )

    assert exc_info.value.table == "relationships"


def test_build_accepts_strength_bounds():
    from tgpp_guidance.knowledge import KnowledgeGraph

    graph = KnowledgeGraph.build(
        specifications=[spec_row("TS 32.240", "One"), spec_row("TS 32.290", "Two")],
        relationships=[
            ("TS 32.240", "TS 32.290", "extends", 1.0),
            ("TS 32.290", "TS 32.240", "extends", 0.0),
        ],
    )

    assert [rel.strength for rel in graph.relationships_for("TS 32.240")] == [1.0]


def test_build_unknown_relationship_type_is_fatal():
    from tgpp_guidance.knowledge import KnowledgeBaseError, KnowledgeGraph

    with pytest.raises(KnowledgeBaseError) as exc_info:
        KnowledgeGraph.build(
            specifications=[spec_row("TS 11.111", "One")],
            relationships=[("TS 11.111", "TS 22.222", "befriends", 0.5)],
        )

    assert exc_info.value.table == "relationships"


def test_related_specifications_strongest_first(knowledge):
    related = [spec.id for spec in knowledge.related_specifications("TS 24.501")]

    assert related == ["TS 33.501", "TS 23.501", "TS 24.301"]


def test_related_specifications_unknown_id_is_empty(knowledge):
    assert knowledge.related_specifications("TS 99.999") == []


def test_related_specifications_skips_targets_outside_graph(knowledge):
    # TS 33.501 extends TS 33.401, which has no entry; the mirrored
    # edge from TS 24.501 is the only resolvable one
    related = [spec.id for spec in knowledge.related_specifications("TS 33.501")]

    assert related == ["TS 24.501"]


def test_uses_edges_are_mirrored_with_reduced_strength(knowledge):
    from tgpp_guidance.knowledge import RelationshipType

    reverse = [edge for edge in knowledge.relationships_for("TS 33.501") if edge.target == "TS 24.501"]

    assert len(reverse) == 1
    assert reverse[0].type == RelationshipType.DEFINES
    assert reverse[0].strength == pytest.approx(0.9 * 0.8)
    assert reverse[0].description.startswith("Reverse: ")


def test_references_edges_mirror_as_references():
    from tgpp_guidance.knowledge import KnowledgeGraph, RelationshipType

    graph = KnowledgeGraph.build(
        specifications=[spec_row("TS 11.111", "One"), spec_row("TS 22.222", "Two")],
        relationships=[("TS 11.111", "TS 22.222", "references", 0.5)],
    )

    [edge] = graph.relationships_for("TS 22.222")
    assert edge.type == RelationshipType.REFERENCES
    assert edge.target == "TS 11.111"
    assert edge.description is None


def test_extends_edges_are_not_mirrored(knowledge):
    # TS 24.501 extends TS 24.301; nothing points back
    assert all(edge.target != "TS 24.501" for edge in knowledge.relationships_for("TS 24.301"))


def test_find_procedure_is_case_insensitive(knowledge):
    found = knowledge.find_procedure("registration")

    assert found is not None
    protocol, procedure = found
    assert protocol.name == "NAS"
    assert procedure.name == "Registration"


def test_find_procedure_unknown(knowledge):
    assert knowledge.find_procedure("Teleportation") is None


def test_suggest_specifications_is_stable(knowledge):
    first = [spec.id for spec in knowledge.suggest_specifications("charging")]
    second = [spec.id for spec in knowledge.suggest_specifications("charging")]

    assert first
    assert first == second


def test_suggest_specifications_title_match_outranks_keyword_match():
    from tgpp_guidance.knowledge import KnowledgeGraph

    graph = KnowledgeGraph.build(specifications=[
        spec_row("TS 11.111", "Session management", search_keywords=["charging"]),
        spec_row("TS 22.222", "Charging principles"),
    ])

    ranked = [spec.id for spec in graph.suggest_specifications("charging")]

    assert ranked == ["TS 22.222", "TS 11.111"]


def test_suggest_specifications_ties_keep_table_order():
    from tgpp_guidance.knowledge import KnowledgeGraph

    graph = KnowledgeGraph.build(specifications=[
        spec_row("TS 11.111", "Charging one"),
        spec_row("TS 22.222", "Charging two"),
    ])

    assert [spec.id for spec in graph.suggest_specifications("charging")] == ["TS 11.111", "TS 22.222"]


def test_suggest_specifications_no_match(knowledge):
    assert knowledge.suggest_specifications("general") == []


def test_search_pattern_for_domain_by_name(knowledge):
    pattern = knowledge.search_pattern_for_domain("Authentication")

    assert pattern is not None
    assert pattern.domain == "authentication"


def test_search_pattern_for_domain_by_keyword(knowledge):
    # "handover" is a mobility keyword, not a domain name
    pattern = knowledge.search_pattern_for_domain("handover")

    assert pattern is not None
    assert pattern.domain == "mobility"


def test_search_pattern_for_domain_missing(knowledge):
    assert knowledge.search_pattern_for_domain("general") is None


def test_implementation_specifications_require_notes():
    from tgpp_guidance.knowledge import KnowledgeGraph

    graph = KnowledgeGraph.build(specifications=[
        spec_row("TS 11.111", "Charging notes", implementation_notes=["Do the thing"]),
        spec_row("TS 22.222", "Charging without notes"),
    ])

    assert [spec.id for spec in graph.implementation_specifications("charging")] == ["TS 11.111"]


def test_entity_to_dict_round_trips_lists(knowledge):
    spec = knowledge.get_specification("TS 33.501")
    data = spec.to_dict()

    assert data["id"] == "TS 33.501"
    assert isinstance(data["key_topics"], list)
    assert "SUCI" in data["search_keywords"]


def test_get_knowledge_graph_is_shared():
    from tgpp_guidance.knowledge import get_knowledge_graph

    assert get_knowledge_graph() is get_knowledge_graph()
