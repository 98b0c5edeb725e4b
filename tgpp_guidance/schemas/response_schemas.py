"""Response schemas for the guidance tools

Tool results are built through these models and dumped with ``by_alias``
so the wire keys match what MCP clients already consume (``nextSteps``,
``relatedTopics``).
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class QueryAnalysisModel(BaseModel):
    """How a query was classified"""
    intent: str = Field(..., description="discovery, learning, comparison, implementation, troubleshooting or evolution")
    domain: str = Field(..., description="Technical domain, 'general' when none matched")
    concepts: list[str] = Field(default_factory=list, description="Upper-cased technical terms")
    complexity: float = Field(..., ge=0.0, le=1.0)
    user_level: str = Field(..., description="beginner, intermediate or expert")


class GuidanceSectionModel(BaseModel):
    """One rendered markdown section"""
    title: str
    content: str
    type: str


class GuidanceModel(BaseModel):
    """Assembled guidance"""
    model_config = ConfigDict(populate_by_name=True, json_schema_extra={
        "example": {
            "type": "guidance",
            "summary": "Research guidance for authentication. Guidance adapted for beginner level understanding.",
            "sections": [],
            "nextSteps": ["Begin with the foundational concepts identified"],
            "relatedTopics": ["Identity management"],
            "confidence": 0.8,
        }
    })

    type: Literal["guidance"] = "guidance"
    summary: str
    sections: list[GuidanceSectionModel] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list, alias="nextSteps")
    related_topics: list[str] = Field(default_factory=list, alias="relatedTopics")
    confidence: float = Field(..., ge=0.0, le=1.0)


class GuidanceResult(BaseModel):
    """Response from guide_specification_search"""
    query: str
    analysis: QueryAnalysisModel
    guidance: GuidanceModel


class SpecificationMetadataModel(BaseModel):
    """Catalog metadata for one specification"""
    id: str
    title: str
    version: str
    release: str
    working_group: str
    status: str
    publication_date: str
    summary: str
    dependencies: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    download_url: Optional[str] = None

