"""Tests for the 3GPP structure explainer."""

from unittest.mock import MagicMock

import pytest

from conftest import capture_decorated


@pytest.fixture
def explain():
    from tgpp_guidance.tools.structure_tools import register_structure_tools

    mcp = MagicMock()
    captured = capture_decorated(mcp, "tool")
    register_structure_tools(mcp)
    return captured["explain_3gpp_structure"]


def test_default_focus_is_overview(explain):
    result = explain()

    assert result["focus"] == "overview"
    assert result["content"].startswith("# 3GPP Organization Overview")


@pytest.mark.parametrize("focus,heading", [
    ("series", "# 3GPP Specification Series Detailed Guide"),
    ("WORKING_GROUPS", "# 3GPP Working Groups Structure"),
    (" releases ", "# 3GPP Release Evolution"),
])
def test_known_focus(explain, focus, heading):
    result = explain(focus)

    assert result["content"].startswith(heading)


def test_unknown_focus_falls_back_to_overview(explain):
    result = explain("politics")

    assert result["focus"] == "overview"


def test_overlong_focus_is_rejected(explain):
    result = explain("x" * 51)

    assert result["error"].startswith("Invalid input")
