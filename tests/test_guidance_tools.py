"""Tests for the research guidance MCP tools."""

from unittest.mock import MagicMock

import pytest

from conftest import capture_decorated


@pytest.fixture
def tools(engine):
    from tgpp_guidance.tools.guidance_tools import register_guidance_tools

    mcp = MagicMock()
    captured = capture_decorated(mcp, "tool")
    register_guidance_tools(mcp, engine)
    return captured


def test_registers_tools(tools):
    assert set(tools) == {
        "guide_specification_search",
        "map_requirements_to_specs",
        "generate_research_strategy",
    }


def test_guide_specification_search(tools):
    result = tools["guide_specification_search"]("What is SUCI and how is it different from IMSI?")

    assert result["query"] == "What is SUCI and how is it different from IMSI?"
    assert result["analysis"]["intent"] == "learning"
    assert result["analysis"]["user_level"] == "beginner"
    assert result["analysis"]["concepts"] == ["SUCI", "IMSI"]
    guidance = result["guidance"]
    assert guidance["type"] == "guidance"
    assert [s["title"] for s in guidance["sections"]] == ["Learning Path", "Key Specifications to Study"]
    assert "nextSteps" in guidance
    assert "relatedTopics" in guidance


def test_guide_specification_search_level_and_domain(tools):
    result = tools["guide_specification_search"](
        "What is SUCI?", user_level="Expert", domain="Charging"
    )

    assert result["analysis"]["user_level"] == "expert"
    assert result["analysis"]["domain"] == "charging"


def test_guide_specification_search_blank_query(tools):
    result = tools["guide_specification_search"]("")

    assert result["analysis"]["intent"] == "discovery"
    assert result["analysis"]["domain"] == "general"
    assert result["guidance"]["sections"] == []


def test_guide_specification_search_invalid_level(tools):
    result = tools["guide_specification_search"]("charging", user_level="guru")

    assert result["error"].startswith("Invalid input")


def test_guide_specification_search_engine_failure(engine, tools, monkeypatch):
    def boom(query):
        raise RuntimeError("engine down")

    monkeypatch.setattr(engine, "guide", boom)

    assert tools["guide_specification_search"]("charging") == {"error": "engine down"}


def test_map_requirements_to_specs(tools):
    result = tools["map_requirements_to_specs"]("Protect SUCI and SUPI identity during registration")

    assert result["analysis"]["domain"] == "authentication"
    ids = [spec["id"] for spec in result["specifications"]]
    assert "TS 33.501" in ids
    assert result["total_specifications"] == len(ids)
    assert all(spec["implementation_notes"] for spec in result["specifications"])
    assert [concept["name"] for concept in result["concepts"]] == ["SUCI", "SUPI"]


def test_map_requirements_unknown_concepts_skipped(tools):
    result = tools["map_requirements_to_specs"]("Handle IMSI attach on LTE")

    assert result["concepts"] == []


def test_map_requirements_blank(tools):
    result = tools["map_requirements_to_specs"]("   ")

    assert result["error"].startswith("Invalid input")


def test_generate_research_strategy_with_search_pattern(tools):
    result = tools["generate_research_strategy"]("handover troubleshooting")

    assert result["analysis"]["intent"] == "troubleshooting"
    assert result["search_pattern"]["domain"] == "mobility"
    assert [p["name"] for p in result["research_patterns"]] == ["Protocol Analysis"]
    assert result["guidance"]["sections"][0]["title"] == "Troubleshooting Approach"


def test_generate_research_strategy_without_search_pattern(tools):
    result = tools["generate_research_strategy"]("converged charging")

    assert result["search_pattern"] is None
    assert [p["name"] for p in result["research_patterns"]] == ["5G Charging Migration"]


def test_generate_research_strategy_blank(tools):
    result = tools["generate_research_strategy"]("")

    assert result["error"].startswith("Invalid input")


def test_pattern_matches_either_direction(knowledge):
    from tgpp_guidance.tools.guidance_tools import _pattern_matches

    pattern = knowledge.get_pattern("Charging Troubleshooting")

    assert _pattern_matches(pattern, "charging")
    assert _pattern_matches(pattern, "help with charging troubleshooting please")
    assert not _pattern_matches(pattern, "handover")
