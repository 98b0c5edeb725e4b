# tgpp_guidance/guidance/templates.py
"""
Markdown renderers for guidance sections and knowledge resources.

One renderer per section variant; ``render_section`` picks the renderer by
variant type. Renderers are pure functions of the section data.
"""

import re
from collections.abc import Iterable

from ..knowledge.types import ProtocolEntity, ResearchPattern, SpecificationEntity
from .sections import (
    ComparisonPlan,
    EvolutionAnalysis,
    GeneralGuidance,
    ImplementationPlan,
    LearningPath,
    LearningSpecifications,
    SearchStrategy,
    Section,
    SpecificationSuggestions,
    TroubleshootingPlan,
)
from .types import ExpertiseLevel, GuidanceSection

# =============================================================================
# LOOKUP TABLES
# =============================================================================

SERIES_DESCRIPTIONS = {
    "21": "Requirements and service descriptions",
    "22": "Service aspects and requirements",
    "23": "Technical realization and architecture",
    "24": "Core network protocols and procedures",
    "25": "Radio access network protocols",
    "33": "Security architecture and algorithms",
    "36": "LTE radio access technology",
    "38": "5G NR radio access technology",
}

PHASE_DESCRIPTIONS = {
    "architecture": "High-level system design and overall structure",
    "procedures": "Detailed protocol flows and message sequences",
    "implementation": "Practical coding and deployment guidance",
    "optimization": "Performance tuning and advanced features",
    "validation": "Testing strategies and compliance verification",
}

CONCEPT_DESCRIPTIONS = {
    "NAS": "Non-Access Stratum - Core network signaling protocol",
    "RRC": "Radio Resource Control - Radio access network control protocol",
    "SUCI": "Subscription Concealed Identifier - Privacy-protected subscriber ID",
    "SUPI": "Subscription Permanent Identifier - Permanent subscriber identity",
    "5G-AKA": "5G Authentication and Key Agreement - Primary 5G auth method",
    "PDU": "Protocol Data Unit - Data packet structure in network protocols",
    "QOS": "Quality of Service - Network performance guarantees",
    "HANDOVER": "Process of transferring connections between cells",
    "AUTHENTICATION": "Process of verifying user or device identity",
}

LEARNING_LEVEL_STEPS = {
    ExpertiseLevel.BEGINNER: (
        "Foundation Level Approach",
        "Start Here",
        [
            ("Understand the Basics", "Learn 3GPP organization and specification structure"),
            ("Get Context", "Understand where {domain} fits in the overall system"),
            ("Study Architecture", "Learn the high-level design before diving into details"),
            ("Focus on Use Cases", "Understand practical applications"),
        ],
    ),
    ExpertiseLevel.INTERMEDIATE: (
        "Intermediate Level Approach",
        "Building on Your Knowledge",
        [
            ("Review Prerequisites", "Ensure solid foundation in related areas"),
            ("Deep Dive into Procedures", "Study detailed protocol flows"),
            ("Understand Interactions", "Learn how {domain} integrates with other systems"),
            ("Consider Implementation", "Think about practical deployment challenges"),
        ],
    ),
    ExpertiseLevel.EXPERT: (
        "Expert Level Approach",
        "Advanced Analysis",
        [
            ("Latest Developments", "Focus on recent changes and enhancements"),
            ("Optimization Opportunities", "Identify areas for improvement"),
            ("Cross-System Impact", "Understand broader implications"),
            ("Future Evolution", "Consider upcoming changes and trends"),
        ],
    ),
}

LEARNING_FOCUS = {
    ExpertiseLevel.BEGINNER: 'Understand the basic purpose and main concepts. Focus on "what" and "why" before "how".',
    ExpertiseLevel.INTERMEDIATE: "Study detailed procedures and message flows. Understand implementation requirements.",
    ExpertiseLevel.EXPERT: "Analyze optimization opportunities, edge cases, and advanced features. Consider integration challenges.",
}

STUDY_ORDER = ("First", "Second", "Third")

COMMON_ISSUES = {
    "authentication": [
        "Authentication vector mismatches",
        "Key derivation failures",
        "Identity privacy violations",
        "Timing synchronization problems",
    ],
    "mobility": [
        "Handover failures and dropped calls",
        "Cell selection/reselection issues",
        "Tracking area update problems",
        "Load balancing inefficiencies",
    ],
    "session_management": [
        "PDU session establishment failures",
        "QoS flow configuration errors",
        "Bearer context mismatches",
        "Service continuity problems",
    ],
    "security": [
        "Encryption/decryption failures",
        "Key management errors",
        "Algorithm negotiation issues",
        "Security context corruption",
    ],
}
DEFAULT_COMMON_ISSUES = [
    "Configuration mismatches",
    "Protocol version incompatibilities",
    "Resource exhaustion problems",
    "Timing and sequence errors",
]

EVOLUTION_ASPECTS = {
    "authentication": [
        ("Privacy Enhancement", "Evolution from clear-text IMSI to encrypted SUCI for identity protection"),
        ("Algorithm Modernization", "Migration from EPS-AKA to 5G-AKA with enhanced security features"),
    ],
    "mobility": [
        ("Handover Optimization", "Enhanced handover procedures with beam management and dual connectivity"),
        ("Network Selection", "Evolution from cell-based to network slice-aware mobility"),
    ],
    "session_management": [
        ("Bearer to PDU Session", "Fundamental shift from bearer concept to more flexible PDU sessions"),
        ("QoS Evolution", "Enhanced QoS framework with flow-based management"),
    ],
}
DEFAULT_EVOLUTION_ASPECTS = [
    ("Architectural Evolution", "General evolution from previous generation technologies"),
    ("Performance Enhancement", "Improvements in efficiency, speed, and resource utilization"),
]

TECHNOLOGY_TARGETS = {"4G", "LTE", "5G", "NR"}
SPEC_TARGET = re.compile(r"TS\s*\d{2}\.\d{3}", re.IGNORECASE)
RELEASE_TARGET = re.compile(r"Rel-?\d{2}", re.IGNORECASE)

SPECS_URL = "https://www.3gpp.org/ftp/Specs/latest/"


# =============================================================================
# SMALL HELPERS
# =============================================================================

def _capitalize(text: str) -> str:
    """Upper-case the first character only."""
    return text[:1].upper() + text[1:]


def _bullets(items: Iterable[str]) -> list[str]:
    return [f"- {item}" for item in items]


def _priority_label(index: int) -> str:
    if index == 0:
        return "PRIMARY"
    if index == 1:
        return "IMPORTANT"
    return "REFERENCE"


def relevance_explanation(spec: SpecificationEntity, domain: str) -> str:
    """Why a specification was suggested for a domain."""
    needle = domain.lower()
    if any(needle in topic.lower() for topic in spec.key_topics):
        return f"Directly addresses {domain} with comprehensive coverage of key concepts and procedures."
    if needle in spec.purpose.lower():
        return f"Essential specification that defines fundamental {domain} architecture and requirements."
    return f"Provides important context and related functionality for {domain} implementations."


def phase_description(phase: str) -> str:
    return PHASE_DESCRIPTIONS.get(phase, "Study this area thoroughly")


def concept_description(concept: str) -> str:
    return CONCEPT_DESCRIPTIONS.get(concept.upper(), "Important 3GPP concept")


def comparison_areas(targets: Iterable[str]) -> list[str]:
    """Comparison criteria chosen by the kinds of targets being compared."""
    targets = list(targets)
    lines = []

    if any(t.upper() in TECHNOLOGY_TARGETS for t in targets):
        lines += [
            "- **Technology Generation**: Architecture and capability differences",
            "- **Performance Characteristics**: Speed, latency, efficiency",
            "- **Deployment Requirements**: Infrastructure and migration needs",
        ]

    if any(SPEC_TARGET.search(t) for t in targets):
        lines += [
            "- **Functional Scope**: What each specification covers",
            "- **Technical Approach**: Different implementation strategies",
            "- **Dependency Relationships**: How specifications relate to each other",
        ]

    if any(RELEASE_TARGET.search(t) for t in targets):
        lines += [
            "- **Feature Evolution**: New capabilities introduced",
            "- **Backward Compatibility**: Migration and coexistence",
            "- **Implementation Impact**: Changes to existing systems",
        ]

    return lines or [
        "- **Functional Differences**: Core capability variations",
        "- **Technical Approach**: Implementation strategies",
        "- **Use Case Suitability**: Best application scenarios",
    ]


# =============================================================================
# SECTION RENDERERS
# =============================================================================

def render_specification_suggestions(section: SpecificationSuggestions) -> str:
    """Ranked specification list with per-level detail and access notes."""
    lines = [f"Based on your interest in **{section.domain}**, I recommend these specifications:", ""]

    for index, spec in enumerate(section.specs):
        lines.append(f"### {_priority_label(index)}: {spec.id} - {spec.title}")
        lines.append(
            f"**Series:** {spec.series} | **Release:** {spec.release} | "
            f"**Working Group:** {spec.working_group}"
        )
        lines.append("")
        lines.append(f"**Purpose:** {spec.purpose}")
        lines.append("")

        if spec.key_topics:
            lines.append(f"**Key Topics:** {', '.join(spec.key_topics)}")
            lines.append("")

        if section.level == ExpertiseLevel.BEGINNER:
            if spec.common_questions:
                lines.append("**Common Questions This Spec Answers:**")
                lines += _bullets(spec.common_questions[:2])
                lines.append("")
        elif spec.implementation_notes:
            lines.append("**Implementation Considerations:**")
            lines += _bullets(spec.implementation_notes[:2])
            lines.append("")

        lines.append(f"**Why This Spec:** {relevance_explanation(spec, section.domain)}")
        lines.append("")
        lines.append("---")
        lines.append("")

    series = list(dict.fromkeys(spec.series for spec in section.specs))
    lines.append("### How to Access These Specifications:")
    lines.append(f"1. Visit [3GPP.org]({SPECS_URL})")
    lines.append(f"2. Navigate to the appropriate series ({', '.join(series)})")
    lines.append("3. Look for the latest version of each specification")
    lines.append("")

    return "\n".join(lines)


def render_search_strategy(section: SearchStrategy) -> str:
    pattern = section.pattern
    lines = [f"## Strategic Approach to {pattern.domain} Research", ""]

    lines.append("### Recommended Search Terms:")
    lines += [f'- **"{keyword}"** - Use in 3GPP document searches' for keyword in pattern.keywords]
    lines.append("")

    lines.append("### Focus Areas (Specification Series):")
    for series in pattern.series:
        description = SERIES_DESCRIPTIONS.get(series, "Various technical aspects")
        lines.append(f"- **Series {series}**: {description}")
    lines.append("")

    lines.append("### Recommended Reading Order:")
    for number, phase in enumerate(pattern.reading_order, start=1):
        lines.append(f"{number}. **{_capitalize(phase)}**: {phase_description(phase)}")
    lines.append("")

    # Experts skip the beginner pitfalls
    if section.level != ExpertiseLevel.EXPERT:
        lines.append("### Common Mistakes to Avoid:")
        lines += _bullets(pattern.common_mistakes)
        lines.append("")

    lines.append("### Pro Tips for Effective Research:")
    lines += _bullets(pattern.tips)
    lines.append("")

    return "\n".join(lines)


def render_learning_path(section: LearningPath) -> str:
    domain = section.domain
    heading, lead, steps = LEARNING_LEVEL_STEPS[section.level]

    lines = [f"## Learning Path for {_capitalize(domain)}", ""]
    lines.append(f"### {heading}:")
    lines.append("")
    lines.append(f"**{lead}:**")
    for number, (name, text) in enumerate(steps, start=1):
        lines.append(f"{number}. **{name}** - {text.format(domain=domain)}")
    lines.append("")

    if section.concepts:
        lines.append("### Key Concepts to Master:")
        for concept in section.concepts[:5]:
            lines.append(f"- **{concept}**: {concept_description(concept)}")
        lines.append("")

    lines.append("### Effective Study Methodology:")
    lines.append("1. **Create Visual Diagrams** - Draw your understanding of processes and relationships")
    lines.append("2. **Build Glossaries** - Maintain a list of terms and their definitions")
    lines.append("3. **Practice with Scenarios** - Work through realistic examples")
    lines.append("4. **Connect the Dots** - Always understand how pieces fit together")
    lines.append("")

    return "\n".join(lines)


def render_learning_specifications(section: LearningSpecifications) -> str:
    lines = ["### Learning-Focused Specifications:", ""]

    for index, spec in enumerate(section.specs):
        order = STUDY_ORDER[index] if index < len(STUDY_ORDER) else "Additional"
        lines.append(f"#### {order} Priority: {spec.id}")
        lines.append(f"**{spec.title}**")
        lines.append("")
        lines.append(f"**Learning Focus:** {LEARNING_FOCUS[section.level]}")
        lines.append("")

        if spec.key_topics:
            lines.append(f"**Essential Topics:** {', '.join(spec.key_topics[:3])}")
            lines.append("")

        lines.append("**Study Tips:**")
        if index == 0:
            lines.append("- Start with the overview sections to understand scope and purpose")
            lines.append("- Create a mind map of main concepts before diving into details")
        else:
            lines.append("- Connect concepts back to your understanding from previous specifications")
            lines.append("- Focus on how this specification interacts with others you've studied")
        lines.append("")
        lines.append("---")
        lines.append("")

    return "\n".join(lines)


def render_comparison(section: ComparisonPlan) -> str:
    targets = list(section.targets)
    lines = [f"## Comparison Approach: {' vs '.join(targets)}", ""]

    lines.append("### Systematic Comparison Strategy:")
    lines.append("")
    lines.append("**1. Preparation Phase:**")
    lines.append(f"- Gather specifications for each target: {', '.join(targets)}")
    lines.append("- Identify the specific aspects you want to compare")
    lines.append("- Create a comparison framework with key criteria")
    lines.append("")

    lines.append("**2. Analysis Framework:**")
    lines.append("- **Functional Differences**: What each does differently")
    lines.append("- **Technical Approach**: Different implementation strategies")
    lines.append("- **Performance Implications**: Speed, efficiency, resource usage")
    lines.append("- **Deployment Considerations**: Real-world implementation differences")
    if section.level != ExpertiseLevel.BEGINNER:
        lines.append("- **Evolution Path**: How one relates to or replaces the other")
        lines.append("- **Backward Compatibility**: Migration and coexistence considerations")
    lines.append("")

    lines.append("**3. Key Areas to Compare:**")
    lines += comparison_areas(targets)
    lines.append("")

    lines.append("**4. Documentation Strategy:**")
    lines.append("- Create side-by-side comparison tables")
    lines.append("- Note advantages and disadvantages of each approach")
    lines.append("- Identify use cases where one is preferred over others")
    lines.append("")

    return "\n".join(lines)


def render_implementation(section: ImplementationPlan) -> str:
    lines = [f"## Implementation Strategy for {section.domain}", ""]

    lines.append("### Implementation-Critical Specifications:")
    lines.append("")
    for spec in section.specs:
        lines.append(f"#### {spec.id} - {spec.title}")
        if spec.implementation_notes:
            lines.append("**Implementation Focus:**")
            lines += _bullets(spec.implementation_notes)
            lines.append("")

    lines.append("### Recommended Implementation Phases:")
    lines.append("")
    lines.append("**Phase 1: Architecture & Design**")
    lines.append("- Study architectural requirements from relevant specifications")
    lines.append("- Design high-level system architecture")
    lines.append("- Identify external interfaces and dependencies")
    lines.append("- Plan for scalability and performance requirements")
    lines.append("")
    lines.append("**Phase 2: Core Implementation**")
    lines.append("- Implement fundamental procedures and protocols")
    lines.append("- Focus on must-have features from specifications")
    lines.append("- Build comprehensive error handling")
    lines.append("- Create thorough unit tests")
    lines.append("")
    lines.append("**Phase 3: Integration & Testing**")
    lines.append("- Integrate with external systems and interfaces")
    lines.append("- Perform interoperability testing")
    lines.append("- Conduct performance and stress testing")
    lines.append("- Validate against specification requirements")
    lines.append("")

    if section.level != ExpertiseLevel.BEGINNER:
        lines.append("**Phase 4: Optimization & Compliance**")
        lines.append("- Optimize performance based on real-world usage")
        lines.append("- Ensure full specification compliance")
        lines.append("- Implement advanced features and edge cases")
        lines.append("- Prepare for certification and testing")
        lines.append("")

    return "\n".join(lines)


def render_troubleshooting(section: TroubleshootingPlan) -> str:
    domain = section.domain
    lines = [f"## Troubleshooting Approach for {domain}", ""]

    lines.append("### Systematic Diagnosis Strategy:")
    lines.append("")
    lines.append("**1. Problem Identification:**")
    lines.append("- Clearly define the symptoms you're observing")
    lines.append(f"- Identify which {domain} components are affected")
    lines.append("- Determine if the issue is consistent or intermittent")
    lines.append("- Gather relevant logs and trace information")
    lines.append("")

    lines.append("**2. Specification Research:**")
    lines.append("- Identify which specifications govern the problematic behavior")
    lines.append("- Look for error handling sections in relevant specs")
    lines.append("- Check for known limitations or implementation guidelines")
    lines.append("- Review conformance testing requirements")
    lines.append("")

    lines.append(f"**3. Common {domain} Issues:**")
    for issue in COMMON_ISSUES.get(domain, DEFAULT_COMMON_ISSUES):
        lines.append(f"- **{issue}**: Check specification requirements and implementation details")
    lines.append("")

    lines.append("**4. Debug Methodology:**")
    lines.append("- Start with the simplest possible explanation")
    lines.append("- Use protocol traces to understand message flows")
    lines.append("- Verify configuration against specification requirements")
    lines.append("- Test with different scenarios to isolate the problem")
    lines.append("")

    if section.level != ExpertiseLevel.BEGINNER:
        lines.append("**5. Advanced Diagnostics:**")
        lines.append("- Analyze timing and sequence issues")
        lines.append("- Check for race conditions and edge cases")
        lines.append("- Verify interoperability with different implementations")
        lines.append("- Consider performance and resource constraints")
        lines.append("")

    return "\n".join(lines)


def render_evolution(section: EvolutionAnalysis) -> str:
    domain = section.domain
    lines = [f"## Evolution Analysis: {domain}", ""]

    lines.append("### Understanding 3GPP Evolution Patterns:")
    lines.append("")
    lines.append("**Evolution Methodology:**")
    lines.append("1. **Release Timeline Analysis** - Track when features were introduced")
    lines.append("2. **Backward Compatibility** - Understand migration requirements")
    lines.append("3. **Deprecation Patterns** - Identify what gets replaced")
    lines.append("4. **Future Roadmap** - Anticipate upcoming changes")
    lines.append("")

    lines.append(f"### Key Evolution Aspects in {domain}:")
    lines.append("")
    for title, description in EVOLUTION_ASPECTS.get(domain, DEFAULT_EVOLUTION_ASPECTS):
        lines.append(f"**{title}:**")
        lines.append(description)
        lines.append("")

    lines.append("### Research Strategy for Evolution Analysis:")
    lines.append("1. **Compare Consecutive Releases** - Study Rel-N vs Rel-N+1 changes")
    lines.append("2. **Identify Driver Technologies** - Understand what motivated changes")
    lines.append("3. **Map Implementation Impact** - Consider deployment implications")
    lines.append("4. **Study Migration Guides** - Look for official migration documentation")
    lines.append("")

    if section.level != ExpertiseLevel.BEGINNER:
        lines.append("### Advanced Evolution Analysis:")
        lines.append("- **Cross-Working Group Impact** - How changes affect multiple areas")
        lines.append("- **Market Driver Analysis** - Understanding commercial motivations")
        lines.append("- **Technology Convergence** - How different tech trends merge")
        lines.append("- **Standards Competition** - How 3GPP competes with other standards")
        lines.append("")

    return "\n".join(lines)


def render_general(section: GeneralGuidance) -> str:
    lines = [f'## Research Guidance for: "{section.query_text}"', ""]

    lines.append("### Recommended Approach:")
    lines.append("")
    lines.append("**1. Clarify Your Objective:**")
    lines.append("- Are you looking to understand concepts or implement solutions?")
    lines.append("- Do you need comprehensive coverage or specific details?")
    lines.append("- What's your timeline and depth requirements?")
    lines.append("")
    lines.append("**2. Start with Architecture:**")
    lines.append("- Begin with high-level system architecture documents")
    lines.append(f"- Understand how {section.domain} fits into the bigger picture")
    lines.append("- Identify key interfaces and relationships")
    lines.append("")
    lines.append("**3. Progressive Deep Dive:**")
    lines.append("- Move from general concepts to specific procedures")
    lines.append("- Study message flows and protocol interactions")
    lines.append("- Focus on implementation-relevant details")
    lines.append("")

    lines.append("### Effective 3GPP Research Tips:")
    lines.append("- **Use Multiple Sources**: Don't rely on a single specification")
    lines.append("- **Create Visual Aids**: Draw diagrams to understand relationships")
    lines.append("- **Track Dependencies**: Understand prerequisite knowledge")
    lines.append("- **Stay Current**: Check for latest specification versions")
    lines.append("")

    return "\n".join(lines)


_RENDERERS = {
    SpecificationSuggestions: render_specification_suggestions,
    SearchStrategy: render_search_strategy,
    LearningPath: render_learning_path,
    LearningSpecifications: render_learning_specifications,
    ComparisonPlan: render_comparison,
    ImplementationPlan: render_implementation,
    TroubleshootingPlan: render_troubleshooting,
    EvolutionAnalysis: render_evolution,
    GeneralGuidance: render_general,
}


def render_section(section: Section) -> GuidanceSection:
    """Render a section variant into its published title, content and type.

    Raises:
        TypeError: If no renderer is registered for the variant
    """
    renderer = _RENDERERS.get(type(section))
    if renderer is None:
        raise TypeError(f"No renderer for section {type(section).__name__}")
    return GuidanceSection(title=section.title, content=renderer(section), type=section.section_type)


# =============================================================================
# KNOWLEDGE RESOURCE RENDERERS
# =============================================================================

def render_protocol_mapping(protocols: Iterable[ProtocolEntity]) -> str:
    """Markdown overview of protocols and how they relate."""
    lines = ["# 3GPP Protocol Relationship Mapping", ""]
    lines.append("## Protocol Stack Overview")
    lines.append("")
    lines.append("### Non-Access Stratum (NAS)")
    lines.append("- **Purpose**: Communication between UE and core network")
    lines.append("- **Key Protocols**: 5G NAS (TS 24.501), EPS NAS (TS 24.301)")
    lines.append("- **Main Functions**: Authentication, session management, mobility")
    lines.append("")
    lines.append("### Radio Resource Control (RRC)")
    lines.append("- **Purpose**: Control of radio resources and UE connections")
    lines.append("- **Key Protocols**: 5G RRC (TS 38.331), LTE RRC (TS 36.331)")
    lines.append("- **Main Functions**: Connection management, mobility, measurements")
    lines.append("")
    lines.append("## Protocol Relationships")
    lines.append("")

    for protocol in protocols:
        lines.append(f"### {protocol.full_name} ({protocol.name})")
        lines.append(f"- **Layer**: {protocol.layer}")
        lines.append(f"- **Purpose**: {protocol.purpose}")
        lines.append(f"- **Defining Specs**: {', '.join(protocol.defining_specs)}")
        lines.append(f"- **Related Protocols**: {', '.join(protocol.related_protocols)}")
        lines.append(f"- **Common Use Cases**: {', '.join(protocol.common_use_cases)}")
        lines.append("")

    return "\n".join(lines)


def render_research_patterns(patterns: Iterable[ResearchPattern]) -> str:
    """Markdown catalogue of research methodologies."""
    lines = ["# 3GPP Research Methodology Patterns", ""]
    lines.append("## Research Approach Philosophy")
    lines.append(
        "Effective 3GPP research follows systematic patterns that build understanding "
        "progressively from architecture to implementation."
    )
    lines.append("")

    for pattern in patterns:
        lines.append(f"## {pattern.name}")
        lines.append("")
        lines.append(f"**Description**: {pattern.description}")
        lines.append("")
        lines.append(f"**When to Use**: {', '.join(pattern.applicable_for)}")
        lines.append("")
        lines.append(f"**Time Estimate**: {pattern.time_estimate}")
        lines.append("")
        lines.append("### Methodology Steps:")
        for step in pattern.steps:
            lines.append(f"#### {step.phase}")
            lines.append(f"**Tasks**: {', '.join(step.tasks)}")
            lines.append(f"**Deliverables**: {', '.join(step.deliverables)}")
            lines.append(f"**Tips**: {', '.join(step.tips)}")
            lines.append("")
        lines.append(f"**Expected Outputs**: {', '.join(pattern.expected_outputs)}")
        lines.append("")
        lines.append(f"**Common Pitfalls**: {', '.join(pattern.common_pitfalls)}")
        lines.append("")
        lines.append("---")
        lines.append("")

    return "\n".join(lines)
