"""Tests for the markdown knowledge resources."""

from unittest.mock import MagicMock

from conftest import capture_decorated


def _register(knowledge):
    from tgpp_guidance.tools.knowledge_resources import register_knowledge_resources

    mcp = MagicMock()
    captured = capture_decorated(mcp, "resource")
    register_knowledge_resources(mcp, knowledge)
    return mcp, captured


def test_resource_uris(knowledge):
    mcp, _ = _register(knowledge)

    uris = [call.args[0] for call in mcp.resource.call_args_list]
    assert uris == [
        "tgpp://knowledge/series",
        "tgpp://knowledge/protocols",
        "tgpp://knowledge/research-patterns",
    ]


def test_series_guide(knowledge):
    _, resources = _register(knowledge)

    content = resources["get_series_guide"]()

    assert content.startswith("# 3GPP Specification Series Guide")
    assert "**Series 38**: 5G NR" in content


def test_protocol_mapping(knowledge):
    _, resources = _register(knowledge)

    content = resources["get_protocol_mapping"]()

    assert "### Radio Resource Control (RRC)" in content
    assert "### Diameter Protocol (DIAMETER)" in content


def test_research_patterns(knowledge):
    _, resources = _register(knowledge)

    content = resources["get_research_patterns"]()

    assert "## Charging Troubleshooting" in content


def test_render_failure_returns_message(monkeypatch, knowledge):
    from tgpp_guidance.tools import knowledge_resources

    def boom(protocols):
        raise RuntimeError("bad table")

    monkeypatch.setattr(knowledge_resources, "render_protocol_mapping", boom)
    _, resources = _register(knowledge)

    assert resources["get_protocol_mapping"]() == "Error rendering protocol mapping: bad table"
