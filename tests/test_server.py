"""Tests for server assembly."""

from unittest.mock import MagicMock, patch

import pytest

from conftest import capture_decorated


@pytest.fixture
def server(knowledge, catalog):
    """create_server against a mocked FastMCP, with registered callables captured."""
    from tgpp_guidance import server as server_module
    from tgpp_guidance.config import Config

    mcp = MagicMock()
    tools = capture_decorated(mcp, "tool")
    resources = capture_decorated(mcp, "resource")
    prompts = capture_decorated(mcp, "prompt")

    with patch.object(server_module, "FastMCP", return_value=mcp) as fastmcp:
        created = server_module.create_server(knowledge=knowledge, catalog=catalog)

    fastmcp.assert_called_once_with(Config.SERVER_NAME)
    assert created is mcp
    return {"tools": tools, "resources": resources, "prompts": prompts}


def test_registers_everything(server):
    assert set(server["tools"]) == {
        "guide_specification_search",
        "map_requirements_to_specs",
        "generate_research_strategy",
        "explain_3gpp_structure",
        "get_specification_details",
        "compare_specifications",
        "find_implementation_requirements",
        "search_specifications",
        "get_cache_stats",
        "clear_cache",
    }
    assert set(server["resources"]) == {"get_series_guide", "get_protocol_mapping", "get_research_patterns"}
    assert set(server["prompts"]) == {"explain_3gpp_procedure", "compare_specifications_prompt"}


def test_cache_tools(server):
    tools = server["tools"]

    tools["get_specification_details"]("TS 33.501")
    stats = tools["get_cache_stats"]()
    assert stats["keys"] == 3
    assert stats["misses"] == 3

    cleared = tools["clear_cache"]()
    assert cleared["message"] == "Catalog cache cleared"
    assert cleared["stats"] == {"keys": 0, "hits": 0, "misses": 0}


def test_cache_stats_error_is_reported(knowledge):
    from tgpp_guidance import server as server_module

    catalog = MagicMock()
    catalog.cache_stats.side_effect = RuntimeError("stats unavailable")
    mcp = MagicMock()
    tools = capture_decorated(mcp, "tool")

    with patch.object(server_module, "FastMCP", return_value=mcp):
        server_module.create_server(knowledge=knowledge, catalog=catalog)

    assert tools["get_cache_stats"]() == {"error": "stats unavailable"}


def test_knowledge_failure_is_fatal(monkeypatch):
    from tgpp_guidance import server as server_module
    from tgpp_guidance.knowledge import KnowledgeBaseError

    def broken():
        raise KnowledgeBaseError("Specification table is empty", table="specifications")

    monkeypatch.setattr(server_module, "get_knowledge_graph", broken)

    with patch.object(server_module, "FastMCP") as fastmcp:
        with pytest.raises(KnowledgeBaseError):
            server_module.create_server()

    fastmcp.assert_not_called()


def test_invalid_config_is_fatal(monkeypatch, knowledge):
    from tgpp_guidance import server as server_module
    from tgpp_guidance.config import Config

    monkeypatch.setattr(Config, "MAX_CATALOG_RESULTS", 0)

    with pytest.raises(ValueError):
        server_module.create_server(knowledge=knowledge)


def test_main_runs_server():
    from tgpp_guidance import server as server_module

    mcp = MagicMock()
    with patch.object(server_module, "configure_logging") as configure, \
            patch.object(server_module, "create_server", return_value=mcp):
        server_module.main()

    configure.assert_called_once_with()
    mcp.run.assert_called_once()


def test_main_reraises_startup_failure():
    from tgpp_guidance import server as server_module

    with patch.object(server_module, "configure_logging"), \
            patch.object(server_module, "create_server", side_effect=RuntimeError("no tables")):
        with pytest.raises(RuntimeError):
            server_module.main()
