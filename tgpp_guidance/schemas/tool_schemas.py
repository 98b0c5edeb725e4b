"""Tool input schemas - centralized validation

Every MCP tool validates its arguments through one of these models before
touching the knowledge graph, so bad input comes back as a single
"Invalid input" error instead of a stack trace.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.validators import (
    MAX_COMPARE_SPECS,
    MAX_SEARCH_RESULTS,
    MAX_TEXT_LENGTH,
    MIN_COMPARE_SPECS,
    ValidationError,
    normalize_release,
    normalize_series,
    normalize_spec_id,
    validate_query_text,
    validate_spec_ids,
)

UserLevel = Literal["beginner", "intermediate", "expert"]
ComplexityLevel = Literal["basic", "intermediate", "advanced"]


def _strip_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _normalize_level(value):
    if isinstance(value, str):
        return value.strip().lower() or None
    return value


def _require_text(value: str, field: str) -> str:
    try:
        return validate_query_text(value, field=field)
    except ValidationError as e:
        raise ValueError(str(e)) from e


class GuidanceSearchInput(BaseModel):
    """Schema for research guidance requests

    Used by: guide_specification_search tool
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "query": "How does 5G authentication protect subscriber identity?",
            "user_level": "beginner",
        }
    })

    # Blank queries are allowed; they produce default guidance
    query: str = Field(
        ...,
        max_length=MAX_TEXT_LENGTH,
        description="Free-text research question"
    )
    user_level: Optional[UserLevel] = Field(
        default=None,
        description="Expertise level; inferred from the question when omitted"
    )
    domain: Optional[str] = Field(
        default=None,
        max_length=100,
        description="Technical domain, e.g. 'charging' or 'mobility'"
    )

    @field_validator('user_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return _normalize_level(v)

    @field_validator('domain')
    @classmethod
    def strip_domain(cls, v):
        return _strip_optional(v)


class StructureInput(BaseModel):
    """Schema for explain_3gpp_structure"""
    focus: str = Field(
        default="overview",
        max_length=50,
        description="overview, series, working_groups or releases"
    )

    @field_validator('focus')
    @classmethod
    def normalize_focus(cls, v):
        return v.strip().lower() or "overview"


class RequirementsInput(BaseModel):
    """Schema for requirement-to-specification mapping

    Used by: map_requirements_to_specs tool
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "requirements": "Implement converged charging for 5G data sessions",
            "user_level": "intermediate",
        }
    })

    requirements: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Technical requirements in plain language"
    )
    user_level: Optional[UserLevel] = Field(default=None)

    @field_validator('requirements')
    @classmethod
    def validate_requirements(cls, v):
        return _require_text(v, "Requirements")

    @field_validator('user_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return _normalize_level(v)


class ResearchStrategyInput(BaseModel):
    """Schema for research strategy generation"""
    topic: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Research topic"
    )
    user_level: Optional[UserLevel] = Field(default=None)

    @field_validator('topic')
    @classmethod
    def validate_topic(cls, v):
        return _require_text(v, "Topic")

    @field_validator('user_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return _normalize_level(v)


class SpecificationInput(BaseModel):
    """Schema for single-specification lookups

    Used by: get_specification_details tool
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "spec_id": "TS 33.501",
            "include_related": True,
        }
    })

    spec_id: str = Field(..., description="Specification ID, e.g. 'TS 33.501'")
    include_related: bool = Field(default=True)

    @field_validator('spec_id')
    @classmethod
    def validate_spec_id(cls, v):
        try:
            return normalize_spec_id(v)
        except ValidationError as e:
            raise ValueError(str(e)) from e


class CompareSpecificationsInput(BaseModel):
    """Schema for specification comparison"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "spec_ids": ["TS 24.301", "TS 24.501"],
        }
    })

    spec_ids: list[str] = Field(
        ...,
        min_length=MIN_COMPARE_SPECS,
        max_length=MAX_COMPARE_SPECS,
        description="Two to five specification IDs"
    )

    @field_validator('spec_ids')
    @classmethod
    def validate_ids(cls, v):
        try:
            return validate_spec_ids(v)
        except ValidationError as e:
            raise ValueError(str(e)) from e


class SearchSpecificationsInput(BaseModel):
    """Schema for catalog searches

    Used by: search_specifications tool, 'search' CLI command
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "query": "charging",
            "max_results": 5,
            "series_filter": ["32"],
            "release_filter": ["Rel-17"],
        }
    })

    query: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Text matched against catalog titles, summaries and keywords"
    )
    max_results: int = Field(default=5, ge=1, le=MAX_SEARCH_RESULTS)
    series_filter: Optional[list[str]] = Field(
        default=None,
        description="Series to keep, e.g. ['32', '33']"
    )
    release_filter: Optional[list[str]] = Field(
        default=None,
        description="Releases to keep, e.g. ['Rel-16', 'Rel-17']"
    )
    working_group: Optional[str] = Field(default=None, max_length=20)

    @field_validator('query')
    @classmethod
    def validate_query(cls, v):
        return _require_text(v, "Query")

    @field_validator('series_filter')
    @classmethod
    def validate_series(cls, v):
        if not v:
            return None
        try:
            return list(dict.fromkeys(normalize_series(series) for series in v))
        except ValidationError as e:
            raise ValueError(str(e)) from e

    @field_validator('release_filter')
    @classmethod
    def validate_releases(cls, v):
        if not v:
            return None
        try:
            return list(dict.fromkeys(normalize_release(release) for release in v))
        except ValidationError as e:
            raise ValueError(str(e)) from e

    @field_validator('working_group')
    @classmethod
    def normalize_working_group(cls, v):
        v = _strip_optional(v)
        return v.upper() if v else None


class ImplementationInput(BaseModel):
    """Schema for implementation requirement lookups"""
    feature: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Feature to implement, e.g. '5G charging'"
    )
    domain: Optional[str] = Field(default=None, max_length=100)
    complexity_level: ComplexityLevel = Field(default="intermediate")

    @field_validator('feature')
    @classmethod
    def validate_feature(cls, v):
        return _require_text(v, "Feature")

    @field_validator('domain')
    @classmethod
    def strip_domain(cls, v):
        return _strip_optional(v)

    @field_validator('complexity_level', mode='before')
    @classmethod
    def normalize_complexity(cls, v):
        return v.strip().lower() if isinstance(v, str) else v
