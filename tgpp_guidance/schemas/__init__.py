"""Schema validation package

Tool input models validate arguments in one place; response models fix
the shape of what the tools return.
"""

from .tool_schemas import (
    GuidanceSearchInput,
    StructureInput,
    RequirementsInput,
    ResearchStrategyInput,
    SpecificationInput,
    CompareSpecificationsInput,
    SearchSpecificationsInput,
    ImplementationInput,
)

from .response_schemas import (
    QueryAnalysisModel,
    GuidanceSectionModel,
    GuidanceModel,
    GuidanceResult,
    SpecificationMetadataModel,
)

__all__ = [
    # Input schemas
    'GuidanceSearchInput',
    'StructureInput',
    'RequirementsInput',
    'ResearchStrategyInput',
    'SpecificationInput',
    'CompareSpecificationsInput',
    'SearchSpecificationsInput',
    'ImplementationInput',
    # Response schemas
    'QueryAnalysisModel',
    'GuidanceSectionModel',
    'GuidanceModel',
    'GuidanceResult',
    'SpecificationMetadataModel',
]
