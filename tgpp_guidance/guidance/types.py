# tgpp_guidance/guidance/types.py
"""Query and response types for the guidance pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class QueryIntent(Enum):
    """What the user is trying to do."""

    DISCOVERY = "discovery"
    LEARNING = "learning"
    COMPARISON = "comparison"
    IMPLEMENTATION = "implementation"
    TROUBLESHOOTING = "troubleshooting"
    EVOLUTION = "evolution"

    @classmethod
    def from_string(cls, value: str) -> "QueryIntent":
        """Convert string to QueryIntent, defaulting to DISCOVERY."""
        value = value.lower().strip()
        for member in cls:
            if member.value == value:
                return member
        return cls.DISCOVERY


class ExpertiseLevel(Enum):
    """How much the user already knows."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"

    @classmethod
    def from_string(cls, value: str) -> "ExpertiseLevel":
        """Convert string to ExpertiseLevel, raising on unknown levels."""
        normalized = value.lower().strip()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown expertise level: {value}")


class SectionType(Enum):
    """Kind of content a rendered section carries."""

    OVERVIEW = "overview"
    SPECIFICATIONS = "specifications"
    STRATEGY = "strategy"
    KEYWORDS = "keywords"
    IMPLEMENTATION = "implementation"
    TIPS = "tips"
    EXAMPLES = "examples"


@dataclass(frozen=True)
class UserQuery:
    """A free-text research question.

    ``user_level`` and ``domain`` override inference when given.
    """

    text: str
    user_level: Optional[ExpertiseLevel] = None
    domain: Optional[str] = None
    context: Optional[str] = None


@dataclass(frozen=True)
class QueryAnalysis:
    """Classification of a query."""

    intent: QueryIntent
    domain: str
    concepts: tuple[str, ...]
    complexity: float
    user_level: ExpertiseLevel

    def to_dict(self) -> dict:
        return {
            "intent": self.intent.value,
            "domain": self.domain,
            "concepts": list(self.concepts),
            "complexity": self.complexity,
            "user_level": self.user_level.value,
        }


@dataclass(frozen=True)
class GuidanceSection:
    """A rendered section of a guidance response."""

    title: str
    content: str
    type: SectionType

    def to_dict(self) -> dict:
        return {"title": self.title, "content": self.content, "type": self.type.value}


@dataclass
class GuidanceResponse:
    """Assembled research guidance for one query."""

    summary: str
    sections: list[GuidanceSection] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)
    related_topics: list[str] = field(default_factory=list)
    confidence: float = 0.8

    def section_titles(self) -> list[str]:
        return [section.title for section in self.sections]

    def to_dict(self) -> dict:
        """Convert to the wire shape returned by the MCP tools."""
        return {
            "type": "guidance",
            "summary": self.summary,
            "sections": [section.to_dict() for section in self.sections],
            "nextSteps": list(self.next_steps),
            "relatedTopics": list(self.related_topics),
            "confidence": self.confidence,
        }
