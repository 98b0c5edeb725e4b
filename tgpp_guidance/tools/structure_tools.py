"""3GPP organization explainer

Static reference material about how 3GPP is organized: the specification
series, working groups and release timeline.
"""

import logging

from pydantic import ValidationError as SchemaValidationError

from ..schemas.tool_schemas import StructureInput

logger = logging.getLogger(__name__)

# =============================================================================
# REFERENCE TEXT
# =============================================================================

OVERVIEW = """# 3GPP Organization Overview

## What is 3GPP?
The 3rd Generation Partnership Project (3GPP) is a global initiative that develops technical specifications for mobile telecommunications systems, including 4G LTE and 5G technologies.

## Key Components

### Working Groups
- **SA (Service and System Aspects)**: Architecture and requirements
- **CT (Core Network and Terminals)**: Core network protocols
- **RAN (Radio Access Network)**: Radio interface specifications

### Specification Process
1. **Requirements** - Define what needs to be achieved
2. **Architecture** - Design system structure
3. **Protocols** - Define detailed procedures
4. **Testing** - Ensure interoperability

### Release Cycle
3GPP follows a regular release cycle, with major releases every 2-3 years introducing significant new capabilities.

## How to Navigate 3GPP
1. Start with architecture specifications (23.xxx series)
2. Move to protocol specifications (24.xxx, 38.xxx series)
3. Understand security requirements (33.xxx series)
4. Review testing specifications (34.xxx series)

The key is progressive learning - build understanding layer by layer."""

SERIES = """# 3GPP Specification Series Detailed Guide

## Navigation Strategy
Each series serves a specific purpose in the 3GPP ecosystem:

### Requirements and Architecture (20s)
- **21.xxx**: High-level requirements and use cases
- **22.xxx**: Service requirements and capabilities
- **23.xxx**: System architecture and procedures
- **24.xxx**: Core network signaling protocols
- **25.xxx**: Radio access network protocols

### Implementation and Testing (30s)
- **31.xxx**: SIM/USIM specifications
- **32.xxx**: Network management and charging
- **33.xxx**: Security architecture and algorithms
- **34.xxx**: Protocol conformance testing
- **35.xxx**: Cryptographic algorithms

### Technology-Specific (36-38)
- **36.xxx**: LTE/4G radio access specifications
- **37.xxx**: Multi-RAT and interworking
- **38.xxx**: 5G NR radio access specifications

## Reading Strategy
1. **Architecture First**: Always start with 23.xxx specs
2. **Protocol Deep Dive**: Move to 24.xxx or 38.xxx for details
3. **Security Understanding**: Review relevant 33.xxx specs
4. **Implementation Validation**: Use 34.xxx for testing guidance

Each series builds upon others - understand the dependencies for effective research."""

WORKING_GROUPS = """# 3GPP Working Groups Structure

## Service and System Aspects (SA)
- **SA1**: Services and requirements
- **SA2**: Architecture and overall system design
- **SA3**: Security architecture and procedures
- **SA4**: Codec and media specifications
- **SA5**: Network management and orchestration
- **SA6**: Mission-critical applications

## Core Network and Terminals (CT)
- **CT1**: Core network protocols and terminal interfaces
- **CT3**: Interworking with external networks
- **CT4**: Core network protocols and charging
- **CT6**: Smart card applications and platforms

## Radio Access Network (RAN)
- **RAN1**: Physical layer specifications
- **RAN2**: Radio interface protocols and procedures
- **RAN3**: Base station and core network interfaces
- **RAN4**: Radio performance and protocol testing
- **RAN5**: Mobile terminal conformance testing

## How Working Groups Collaborate
Each working group focuses on specific aspects but coordinates closely:
- SA defines requirements and architecture
- CT develops core network solutions
- RAN creates radio access solutions
- All groups ensure consistency and interoperability

Understanding which working group owns which specifications helps navigate the standards more effectively."""

RELEASES = """# 3GPP Release Evolution

## Major Release Timeline

### 4G Era
- **Release 8** (2008): Initial LTE specifications
- **Release 9** (2009): Enhanced LTE features
- **Release 10** (2011): LTE-Advanced introduction
- **Release 11-12** (2012-2014): LTE-Advanced enhancements

### 5G Era
- **Release 15** (2018): Initial 5G NR specifications
- **Release 16** (2020): Enhanced 5G features and industrial IoT
- **Release 17** (2022): 5G evolution with new capabilities
- **Release 18** (2023): 5G-Advanced introduction

## What Each Release Brings
- **Requirements**: New use cases and performance targets
- **Architecture**: Enhanced system design and network functions
- **Protocols**: New and updated signaling procedures
- **Features**: Advanced capabilities and optimizations

## Understanding Release Impact
- **Backward Compatibility**: How new releases work with existing systems
- **Migration Path**: Steps to upgrade from previous releases
- **Implementation Timeline**: Industry adoption patterns
- **Feature Dependencies**: Which features require others

## Research Strategy by Release
When researching specific topics, always consider:
1. Which release introduced the feature
2. How it evolved in subsequent releases
3. What dependencies exist with other features
4. Current industry implementation status

This timeline perspective helps understand both current capabilities and future evolution paths."""

STRUCTURE_TOPICS = {
    "overview": OVERVIEW,
    "series": SERIES,
    "working_groups": WORKING_GROUPS,
    "releases": RELEASES,
}
DEFAULT_FOCUS = "overview"


def explain_structure(focus: str) -> tuple[str, str]:
    """Resolve a focus to (focus, markdown); unknown focuses get the overview."""
    if focus in STRUCTURE_TOPICS:
        return focus, STRUCTURE_TOPICS[focus]
    return DEFAULT_FOCUS, STRUCTURE_TOPICS[DEFAULT_FOCUS]


def register_structure_tools(mcp):
    """Register 3GPP structure tools with the MCP server."""

    @mcp.tool()
    def explain_3gpp_structure(focus: str = "overview") -> dict:
        """Explain how 3GPP is organized

        Args:
            focus: "overview", "series", "working_groups" or "releases"
                   (anything else returns the overview)

        Returns:
            Dictionary with the resolved focus and markdown content

        Examples:
            explain_3gpp_structure()
            explain_3gpp_structure("working_groups")
        """
        try:
            validated = StructureInput(focus=focus)
        except SchemaValidationError as e:
            return {"error": f"Invalid input: {e}"}

        resolved, content = explain_structure(validated.focus)
        if resolved != validated.focus:
            logger.debug(f"Unknown structure focus '{validated.focus}', using overview")

        return {"focus": resolved, "content": content}
