"""Query analysis and guidance assembly"""

from .engine import GuidanceEngine, create_engine
from .types import (
    ExpertiseLevel,
    GuidanceResponse,
    GuidanceSection,
    QueryAnalysis,
    QueryIntent,
    SectionType,
    UserQuery,
)

__all__ = [
    "GuidanceEngine",
    "create_engine",
    "ExpertiseLevel",
    "GuidanceResponse",
    "GuidanceSection",
    "QueryAnalysis",
    "QueryIntent",
    "SectionType",
    "UserQuery",
]
