"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def knowledge():
    """Knowledge graph built from the shipped tables."""
    from tgpp_guidance.knowledge import KnowledgeGraph

    return KnowledgeGraph.build()


@pytest.fixture
def engine(knowledge):
    from tgpp_guidance.guidance.engine import GuidanceEngine

    return GuidanceEngine(knowledge)


@pytest.fixture
def catalog():
    """Catalog client with its own cache so tests don't share hits."""
    from tgpp_guidance.catalog.client import MetadataCatalogClient
    from tgpp_guidance.utils.cache import TTLCache

    return MetadataCatalogClient(cache=TTLCache())


def capture_decorated(mcp: MagicMock, attribute: str) -> dict:
    """Make ``mcp.<attribute>(...)`` a decorator that records functions by name."""
    captured = {}

    def decorator(func):
        captured[func.__name__] = func
        return func

    getattr(mcp, attribute).return_value = decorator
    return captured


def spec_row(spec_id, title, **fields):
    """Minimal specification table row."""
    row = {
        "id": spec_id,
        "title": title,
        "series": spec_id.split()[1][:2],
        "release": "Rel-16",
        "working_group": "SA5",
        "purpose": "Test specification",
    }
    row.update(fields)
    return row
