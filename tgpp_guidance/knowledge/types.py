# tgpp_guidance/knowledge/types.py
"""Entity types for the specification knowledge graph.

Entities are frozen once built. ``from_dict`` takes a row from the static
tables in :mod:`tgpp_guidance.knowledge.data` and raises ``KeyError`` on a
missing required field; ``to_dict`` produces the JSON shape used by the
MCP tools.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RelationshipType(Enum):
    """Directed relationship kinds between specifications."""

    DEFINES = "defines"
    USES = "uses"
    EXTENDS = "extends"
    REPLACES = "replaces"
    REFERENCES = "references"
    IMPLEMENTS = "implements"
    DEPENDS_ON = "depends_on"

    @classmethod
    def from_string(cls, value: str) -> "RelationshipType":
        """Convert string to RelationshipType, raising on unknown values."""
        value = value.lower().strip()
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown relationship type: {value}")


def _strings(values) -> tuple[str, ...]:
    return tuple(str(v) for v in values)


@dataclass(frozen=True)
class SpecificationEntity:
    """A standards document."""

    id: str
    title: str
    series: str
    release: str
    working_group: str
    purpose: str
    key_topics: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    related_specs: tuple[str, ...] = ()
    search_keywords: tuple[str, ...] = ()
    common_questions: tuple[str, ...] = ()
    implementation_notes: tuple[str, ...] = ()
    evolution_notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "series": self.series,
            "release": self.release,
            "working_group": self.working_group,
            "purpose": self.purpose,
            "key_topics": list(self.key_topics),
            "dependencies": list(self.dependencies),
            "related_specs": list(self.related_specs),
            "search_keywords": list(self.search_keywords),
            "common_questions": list(self.common_questions),
            "implementation_notes": list(self.implementation_notes),
            "evolution_notes": self.evolution_notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SpecificationEntity":
        return cls(
            id=data["id"],
            title=data["title"],
            series=data["series"],
            release=data["release"],
            working_group=data["working_group"],
            purpose=data["purpose"],
            key_topics=_strings(data.get("key_topics", [])),
            dependencies=_strings(data.get("dependencies", [])),
            related_specs=_strings(data.get("related_specs", [])),
            search_keywords=_strings(data.get("search_keywords", [])),
            common_questions=_strings(data.get("common_questions", [])),
            implementation_notes=_strings(data.get("implementation_notes", [])),
            evolution_notes=data.get("evolution_notes"),
        )


@dataclass(frozen=True)
class ProcedureEntity:
    """A named protocol procedure."""

    name: str
    description: str
    trigger_conditions: tuple[str, ...] = ()
    key_steps: tuple[str, ...] = ()
    related_procedures: tuple[str, ...] = ()
    common_issues: tuple[str, ...] = ()
    debugging_tips: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "trigger_conditions": list(self.trigger_conditions),
            "key_steps": list(self.key_steps),
            "related_procedures": list(self.related_procedures),
            "common_issues": list(self.common_issues),
            "debugging_tips": list(self.debugging_tips),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProcedureEntity":
        return cls(
            name=data["name"],
            description=data["description"],
            trigger_conditions=_strings(data.get("trigger_conditions", [])),
            key_steps=_strings(data.get("key_steps", [])),
            related_procedures=_strings(data.get("related_procedures", [])),
            common_issues=_strings(data.get("common_issues", [])),
            debugging_tips=_strings(data.get("debugging_tips", [])),
        )


@dataclass(frozen=True)
class ProtocolEntity:
    """A protocol or protocol-bearing network function."""

    name: str
    full_name: str
    layer: str
    purpose: str
    defining_specs: tuple[str, ...] = ()
    related_protocols: tuple[str, ...] = ()
    procedures: tuple[ProcedureEntity, ...] = ()
    common_use_cases: tuple[str, ...] = ()
    troubleshooting_areas: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "full_name": self.full_name,
            "layer": self.layer,
            "purpose": self.purpose,
            "defining_specs": list(self.defining_specs),
            "related_protocols": list(self.related_protocols),
            "procedures": [p.to_dict() for p in self.procedures],
            "common_use_cases": list(self.common_use_cases),
            "troubleshooting_areas": list(self.troubleshooting_areas),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProtocolEntity":
        return cls(
            name=data["name"],
            full_name=data["full_name"],
            layer=data["layer"],
            purpose=data["purpose"],
            defining_specs=_strings(data.get("defining_specs", [])),
            related_protocols=_strings(data.get("related_protocols", [])),
            procedures=tuple(ProcedureEntity.from_dict(p) for p in data.get("procedures", [])),
            common_use_cases=_strings(data.get("common_use_cases", [])),
            troubleshooting_areas=_strings(data.get("troubleshooting_areas", [])),
        )


@dataclass(frozen=True)
class ConceptEntity:
    """A named technical concept such as SUCI or converged charging."""

    name: str
    full_name: str
    category: str
    description: str
    purpose: str
    related_concepts: tuple[str, ...] = ()
    specifications: tuple[str, ...] = ()
    evolution_from: Optional[str] = None
    usage_context: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "full_name": self.full_name,
            "category": self.category,
            "description": self.description,
            "purpose": self.purpose,
            "related_concepts": list(self.related_concepts),
            "specifications": list(self.specifications),
            "evolution_from": self.evolution_from,
            "usage_context": list(self.usage_context),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ConceptEntity":
        return cls(
            name=data["name"],
            full_name=data["full_name"],
            category=data["category"],
            description=data["description"],
            purpose=data["purpose"],
            related_concepts=_strings(data.get("related_concepts", [])),
            specifications=_strings(data.get("specifications", [])),
            evolution_from=data.get("evolution_from"),
            usage_context=_strings(data.get("usage_context", [])),
        )


@dataclass(frozen=True)
class PatternStep:
    """One phase of a research pattern."""

    phase: str
    tasks: tuple[str, ...] = ()
    deliverables: tuple[str, ...] = ()
    tips: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "phase": self.phase,
            "tasks": list(self.tasks),
            "deliverables": list(self.deliverables),
            "tips": list(self.tips),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PatternStep":
        return cls(
            phase=data["phase"],
            tasks=_strings(data.get("tasks", [])),
            deliverables=_strings(data.get("deliverables", [])),
            tips=_strings(data.get("tips", [])),
        )


@dataclass(frozen=True)
class ResearchPattern:
    """A reusable multi-phase research methodology."""

    name: str
    description: str
    applicable_for: tuple[str, ...] = ()
    steps: tuple[PatternStep, ...] = ()
    expected_outputs: tuple[str, ...] = ()
    common_pitfalls: tuple[str, ...] = ()
    time_estimate: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "applicable_for": list(self.applicable_for),
            "steps": [s.to_dict() for s in self.steps],
            "expected_outputs": list(self.expected_outputs),
            "common_pitfalls": list(self.common_pitfalls),
            "time_estimate": self.time_estimate,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ResearchPattern":
        return cls(
            name=data["name"],
            description=data["description"],
            applicable_for=_strings(data.get("applicable_for", [])),
            steps=tuple(PatternStep.from_dict(s) for s in data.get("steps", [])),
            expected_outputs=_strings(data.get("expected_outputs", [])),
            common_pitfalls=_strings(data.get("common_pitfalls", [])),
            time_estimate=data.get("time_estimate", ""),
        )


@dataclass(frozen=True)
class Relationship:
    """A directed, weighted edge to another specification."""

    type: RelationshipType
    target: str
    strength: float
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "target": self.target,
            "strength": self.strength,
            "description": self.description,
        }


@dataclass(frozen=True)
class SearchPattern:
    """Per-domain search advice."""

    domain: str
    keywords: tuple[str, ...] = ()
    series: tuple[str, ...] = ()
    starting_specs: tuple[str, ...] = ()
    reading_order: tuple[str, ...] = ()
    common_mistakes: tuple[str, ...] = ()
    tips: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "keywords": list(self.keywords),
            "series": list(self.series),
            "starting_specs": list(self.starting_specs),
            "reading_order": list(self.reading_order),
            "common_mistakes": list(self.common_mistakes),
            "tips": list(self.tips),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchPattern":
        return cls(
            domain=data["domain"],
            keywords=_strings(data.get("keywords", [])),
            series=_strings(data.get("series", [])),
            starting_specs=_strings(data.get("starting_specs", [])),
            reading_order=_strings(data.get("reading_order", [])),
            common_mistakes=_strings(data.get("common_mistakes", [])),
            tips=_strings(data.get("tips", [])),
        )
