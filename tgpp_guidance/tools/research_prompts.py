"""Prompt templates for explaining procedures and comparing specifications

When the knowledge graph knows the procedure or specifications named in the
arguments, a short context block is added so the model starts from the
curated facts.
"""

from ..knowledge.store import KnowledgeGraph

DEFAULT_COMPARISON_ASPECTS = "functionality, architecture, evolution"


def procedure_context(knowledge: KnowledgeGraph, procedure_name: str) -> str:
    found = knowledge.find_procedure(procedure_name)
    if found is None:
        return ""

    protocol, procedure = found
    lines = ["## Known Context", ""]
    lines.append(f"- **Protocol**: {protocol.full_name} ({protocol.name})")
    lines.append(f"- **Defined in**: {', '.join(protocol.defining_specs)}")
    lines.append(f"- **Description**: {procedure.description}")
    if procedure.key_steps:
        lines.append(f"- **Key Steps**: {', '.join(procedure.key_steps)}")
    if procedure.common_issues:
        lines.append(f"- **Common Issues**: {', '.join(procedure.common_issues)}")
    lines.append("")
    return "\n".join(lines) + "\n"


def specification_context(knowledge: KnowledgeGraph, *spec_ids: str) -> str:
    specs = [knowledge.get_specification(spec_id.strip()) for spec_id in spec_ids]
    specs = [spec for spec in specs if spec is not None]
    if not specs:
        return ""

    lines = ["## Known Context", ""]
    for spec in specs:
        lines.append(f"- **{spec.id}** ({spec.release}, {spec.working_group}): {spec.title}")
        lines.append(f"  - Purpose: {spec.purpose}")
        if spec.evolution_notes:
            lines.append(f"  - Evolution: {spec.evolution_notes}")
    lines.append("")
    return "\n".join(lines) + "\n"


def register_research_prompts(mcp, knowledge: KnowledgeGraph):
    """Register research prompt templates with the MCP server."""

    @mcp.prompt()
    def explain_3gpp_procedure(
        procedure_name: str,
        specification: str = "",
        detail_level: str = "detailed",
    ) -> str:
        """Explain a 3GPP procedure with context, flow and references

        Args:
            procedure_name: Name of the procedure, e.g. "Registration"
            specification: Relevant specification, e.g. "TS 24.501"
            detail_level: "overview", "detailed" or "implementation"

        Returns:
            A structured prompt for explaining the procedure
        """
        specification = specification or "[RELEVANT_SPEC]"

        implementation = ""
        if detail_level == "implementation":
            implementation = """
### Implementation Considerations
- Key algorithm requirements
- Performance considerations
- Common implementation challenges
- Testing and validation approaches
"""

        return f"""You are explaining the {procedure_name} procedure from 3GPP specification {specification}.

{procedure_context(knowledge, procedure_name)}Structure your explanation as follows:

## {procedure_name} Procedure Overview

### Purpose and Context
- Explain why this procedure exists
- Describe when it is triggered
- Identify the network entities involved

### High-Level Flow
- Provide step-by-step sequence
- Highlight key decision points
- Note error conditions and handling
{implementation}
### References and Related Procedures
- Reference the relevant 3GPP specifications
- Connect to related procedures
- Suggest further reading

Focus on clarity and practical understanding. Use examples where helpful."""

    @mcp.prompt(name="compare_specifications")
    def compare_specifications_prompt(
        spec_a: str,
        spec_b: str,
        comparison_aspects: str = DEFAULT_COMPARISON_ASPECTS,
    ) -> str:
        """Compare two specifications with a structured analysis

        Args:
            spec_a: First specification, e.g. "TS 24.301"
            spec_b: Second specification, e.g. "TS 24.501"
            comparison_aspects: Aspects to compare

        Returns:
            A structured prompt for comparing the two specifications
        """
        aspects = comparison_aspects or DEFAULT_COMPARISON_ASPECTS

        return f"""Compare 3GPP specifications {spec_a} and {spec_b}, focusing on: {aspects}

{specification_context(knowledge, spec_a, spec_b)}Structure your comparison as follows:

## Specification Comparison: {spec_a} vs {spec_b}

### Overview
- Brief description of each specification's purpose
- Target use cases and scope

### Key Differences
- **Functional Scope**: What each specification covers
- **Technical Approach**: Different implementation strategies
- **Architecture Impact**: How each affects system design
- **Evolution Context**: How they relate to previous/future versions

### Detailed Analysis
For each comparison aspect ({aspects}):
- **{spec_a} Approach**: [Describe approach]
- **{spec_b} Approach**: [Describe approach]
- **Trade-offs**: [Analyze advantages/disadvantages]

### Implementation Guidance
- When to use each specification
- Migration considerations
- Interoperability requirements
- Best practices for implementation

### Conclusion
- Summary of key insights
- Recommendations for different use cases

Focus on practical insights that help with implementation decisions."""
