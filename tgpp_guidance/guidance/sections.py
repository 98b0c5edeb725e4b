# tgpp_guidance/guidance/sections.py
"""Section variants produced by the guidance engine.

Each variant carries the data its renderer needs plus the fixed title and
section type it is published under. Rendering lives in
:mod:`tgpp_guidance.guidance.templates`.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from ..knowledge.types import SearchPattern, SpecificationEntity
from .types import ExpertiseLevel, SectionType


@dataclass(frozen=True)
class SpecificationSuggestions:
    title: ClassVar[str] = "Relevant Specifications"
    section_type: ClassVar[SectionType] = SectionType.SPECIFICATIONS

    specs: tuple[SpecificationEntity, ...]
    domain: str
    level: ExpertiseLevel


@dataclass(frozen=True)
class SearchStrategy:
    title: ClassVar[str] = "Search Strategy"
    section_type: ClassVar[SectionType] = SectionType.STRATEGY

    pattern: SearchPattern
    level: ExpertiseLevel


@dataclass(frozen=True)
class LearningPath:
    title: ClassVar[str] = "Learning Path"
    section_type: ClassVar[SectionType] = SectionType.OVERVIEW

    domain: str
    concepts: tuple[str, ...]
    level: ExpertiseLevel


@dataclass(frozen=True)
class LearningSpecifications:
    title: ClassVar[str] = "Key Specifications to Study"
    section_type: ClassVar[SectionType] = SectionType.SPECIFICATIONS

    specs: tuple[SpecificationEntity, ...]
    level: ExpertiseLevel


@dataclass(frozen=True)
class ComparisonPlan:
    title: ClassVar[str] = "Comparison Approach"
    section_type: ClassVar[SectionType] = SectionType.OVERVIEW

    targets: tuple[str, ...]
    domain: str
    level: ExpertiseLevel


@dataclass(frozen=True)
class ImplementationPlan:
    title: ClassVar[str] = "Implementation Approach"
    section_type: ClassVar[SectionType] = SectionType.IMPLEMENTATION

    specs: tuple[SpecificationEntity, ...]
    domain: str
    level: ExpertiseLevel


@dataclass(frozen=True)
class TroubleshootingPlan:
    title: ClassVar[str] = "Troubleshooting Approach"
    section_type: ClassVar[SectionType] = SectionType.TIPS

    domain: str
    concepts: tuple[str, ...]
    level: ExpertiseLevel


@dataclass(frozen=True)
class EvolutionAnalysis:
    title: ClassVar[str] = "Evolution Analysis"
    section_type: ClassVar[SectionType] = SectionType.OVERVIEW

    domain: str
    concepts: tuple[str, ...]
    level: ExpertiseLevel


@dataclass(frozen=True)
class GeneralGuidance:
    title: ClassVar[str] = "Research Guidance"
    section_type: ClassVar[SectionType] = SectionType.OVERVIEW

    query_text: str
    domain: str
    level: ExpertiseLevel


Section = Union[
    SpecificationSuggestions,
    SearchStrategy,
    LearningPath,
    LearningSpecifications,
    ComparisonPlan,
    ImplementationPlan,
    TroubleshootingPlan,
    EvolutionAnalysis,
    GeneralGuidance,
]
