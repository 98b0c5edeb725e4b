"""Research guidance tools

Free-text questions go through the guidance engine: the query is
classified, then answered with ranked specifications, search strategy and
study advice rendered as markdown sections.
"""

import logging
from typing import Optional

from pydantic import ValidationError as SchemaValidationError

from ..config import Config
from ..guidance.engine import GuidanceEngine
from ..guidance.types import UserQuery
from ..knowledge.types import ResearchPattern
from ..schemas.response_schemas import GuidanceModel, GuidanceResult, QueryAnalysisModel
from ..schemas.tool_schemas import GuidanceSearchInput, RequirementsInput, ResearchStrategyInput
from ..utils.validators import validate_user_level

logger = logging.getLogger(__name__)


def _pattern_matches(pattern: ResearchPattern, topic: str) -> bool:
    """True when the topic and any of name/description/applicability contain one another."""
    topic = topic.lower()
    fields = [pattern.name, pattern.description, *pattern.applicable_for]
    return any(topic in field.lower() or field.lower() in topic for field in fields)


def register_guidance_tools(mcp, engine: GuidanceEngine):
    """Register research guidance tools with the MCP server."""

    knowledge = engine.knowledge

    @mcp.tool()
    def guide_specification_search(
        query: str,
        user_level: Optional[str] = None,
        domain: Optional[str] = None,
    ) -> dict:
        """Get research guidance for a 3GPP question

        Classifies the question (intent, domain, concepts, complexity) and
        returns guidance sections: which specifications to read, how to
        search for more, and how to study them.

        Args:
            query: Free-text research question
            user_level: "beginner", "intermediate" or "expert" (inferred when omitted)
            domain: Technical domain override, e.g. "charging" or "mobility"

        Returns:
            Dictionary with query, analysis and guidance (summary, sections,
            nextSteps, relatedTopics, confidence)

        Examples:
            guide_specification_search("What is SUCI and how does it protect IMSI?")
            guide_specification_search("Find charging specs", domain="charging")
        """
        try:
            try:
                validated = GuidanceSearchInput(query=query, user_level=user_level, domain=domain)
            except SchemaValidationError as e:
                return {"error": f"Invalid input: {e}"}

            analysis, response = engine.guide(UserQuery(
                text=validated.query,
                user_level=validate_user_level(validated.user_level),
                domain=validated.domain,
            ))

            result = GuidanceResult(
                query=validated.query,
                analysis=QueryAnalysisModel(**analysis.to_dict()),
                guidance=GuidanceModel.model_validate(response.to_dict()),
            )
            logger.info(
                f"guide_specification_search: intent={analysis.intent.value} "
                f"domain={analysis.domain} sections={len(response.sections)}"
            )
            return result.model_dump(by_alias=True)

        except Exception as e:
            logger.error(f"guide_specification_search error: {e}", exc_info=True)
            return {"error": str(e)}

    @mcp.tool()
    def map_requirements_to_specs(requirements: str, user_level: Optional[str] = None) -> dict:
        """Map technical requirements to the specifications that govern them

        Args:
            requirements: Requirements in plain language
            user_level: "beginner", "intermediate" or "expert" (inferred when omitted)

        Returns:
            Dictionary with the query analysis, the specifications carrying
            implementation notes for the detected domain, and the known
            concepts mentioned in the requirements

        Examples:
            map_requirements_to_specs("Protect subscriber identity with SUCI during registration")
        """
        try:
            try:
                validated = RequirementsInput(requirements=requirements, user_level=user_level)
            except SchemaValidationError as e:
                return {"error": f"Invalid input: {e}"}

            analysis = engine.analyze_query(UserQuery(
                text=validated.requirements,
                user_level=validate_user_level(validated.user_level),
            ))

            specs = knowledge.implementation_specifications(analysis.domain)[:Config.MAX_SUGGESTIONS]
            concepts = [
                concept.to_dict()
                for concept in (knowledge.get_concept(name) for name in analysis.concepts)
                if concept is not None
            ]

            return {
                "requirements": validated.requirements,
                "analysis": analysis.to_dict(),
                "specifications": [
                    {
                        "id": spec.id,
                        "title": spec.title,
                        "working_group": spec.working_group,
                        "purpose": spec.purpose,
                        "implementation_notes": list(spec.implementation_notes),
                    }
                    for spec in specs
                ],
                "concepts": concepts,
                "total_specifications": len(specs),
            }

        except Exception as e:
            logger.error(f"map_requirements_to_specs error: {e}", exc_info=True)
            return {"error": str(e)}

    @mcp.tool()
    def generate_research_strategy(topic: str, user_level: Optional[str] = None) -> dict:
        """Build a research plan for a 3GPP topic

        Combines the research methodologies that apply to the topic, the
        search pattern for its domain, and rendered guidance.

        Args:
            topic: Research topic, e.g. "5G charging implementation"
            user_level: "beginner", "intermediate" or "expert" (inferred when omitted)

        Returns:
            Dictionary with analysis, research_patterns, search_pattern and guidance

        Examples:
            generate_research_strategy("converged charging")
            generate_research_strategy("troubleshooting registration failures", user_level="expert")
        """
        try:
            try:
                validated = ResearchStrategyInput(topic=topic, user_level=user_level)
            except SchemaValidationError as e:
                return {"error": f"Invalid input: {e}"}

            analysis, response = engine.guide(UserQuery(
                text=validated.topic,
                user_level=validate_user_level(validated.user_level),
            ))

            patterns = [p for p in knowledge.patterns.values() if _pattern_matches(p, validated.topic)]
            search_pattern = knowledge.search_pattern_for_domain(analysis.domain)

            return {
                "topic": validated.topic,
                "analysis": analysis.to_dict(),
                "research_patterns": [p.to_dict() for p in patterns],
                "search_pattern": search_pattern.to_dict() if search_pattern else None,
                "guidance": response.to_dict(),
            }

        except Exception as e:
            logger.error(f"generate_research_strategy error: {e}", exc_info=True)
            return {"error": str(e)}
