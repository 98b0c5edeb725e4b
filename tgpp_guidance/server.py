"""
3GPP Guidance MCP Server
FastMCP server that helps researchers find their way through 3GPP specifications

Architecture:
- Knowledge graph built once at startup and shared read-only
- Guidance engine injected into the tool modules
- Catalog metadata behind a TTL cache
- Input validation through pydantic schemas
"""

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .catalog.client import MetadataCatalogClient
from .catalog.types import SpecificationSearch
from .config import Config
from .guidance.engine import GuidanceEngine
from .knowledge import KnowledgeBaseError, get_knowledge_graph
from .knowledge.store import KnowledgeGraph
from .tools.guidance_tools import register_guidance_tools
from .tools.knowledge_resources import register_knowledge_resources
from .tools.research_prompts import register_research_prompts
from .tools.specification_tools import register_specification_tools
from .tools.structure_tools import register_structure_tools
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def create_server(
    knowledge: Optional[KnowledgeGraph] = None,
    catalog: Optional[SpecificationSearch] = None,
) -> FastMCP:
    """
    Create and configure the MCP server

    Args:
        knowledge: Knowledge graph to serve (default: built from the shipped tables)
        catalog: Specification metadata catalog (default: canned-record client)

    Returns:
        Configured FastMCP server instance
    """
    # Validate configuration
    try:
        Config.validate()
        if Config.DEBUG:
            logger.info(Config.display())
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise

    # Build knowledge graph
    try:
        knowledge = knowledge if knowledge is not None else get_knowledge_graph()
    except KnowledgeBaseError as e:
        logger.error(f"Knowledge base failed to load: {e}")
        raise

    logger.info(
        f"Knowledge graph ready: {len(knowledge.specifications)} specifications, "
        f"{len(knowledge.protocols)} protocols, {len(knowledge.concepts)} concepts"
    )

    engine = GuidanceEngine(knowledge)
    catalog = catalog if catalog is not None else MetadataCatalogClient()

    # Create server
    mcp = FastMCP(Config.SERVER_NAME)

    # Register tools (modular organization)
    logger.info("Registering tools...")
    register_guidance_tools(mcp, engine)  # Guidance, requirement mapping, research strategy
    register_structure_tools(mcp)  # 3GPP organization explainer
    register_specification_tools(mcp, engine, catalog)  # Details, comparison, implementation
    register_knowledge_resources(mcp, knowledge)
    register_research_prompts(mcp, knowledge)

    @mcp.tool()
    def get_cache_stats() -> dict:
        """Get catalog cache statistics

        Returns:
            Dictionary with keys, hits and misses

        Examples:
            get_cache_stats()
        """
        try:
            return catalog.cache_stats()
        except Exception as e:
            logger.error(f"Cache stats error: {e}", exc_info=True)
            return {"error": str(e)}

    @mcp.tool()
    def clear_cache() -> dict:
        """Clear cached catalog lookups

        Returns:
            Dictionary with confirmation and updated stats
        """
        try:
            catalog.clear_cache()
            return {"message": "Catalog cache cleared", "stats": catalog.cache_stats()}
        except Exception as e:
            logger.error(f"Clear cache error: {e}", exc_info=True)
            return {"error": str(e)}

    logger.info(f"Server '{Config.SERVER_NAME}' v{Config.SERVER_VERSION} ready")
    return mcp


def main():
    """Main entry point"""
    configure_logging()
    try:
        mcp = create_server()
        mcp.run()
    except Exception as e:
        logger.critical(f"Server failed to start: {e}")
        raise


if __name__ == "__main__":
    main()
