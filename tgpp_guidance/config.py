"""
Configuration management for the 3GPP guidance server
Environment-based configuration, read once at import time
"""

import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Server configuration with environment variable support"""

    # Server metadata
    SERVER_NAME: str = os.getenv("MCP_SERVER_NAME", "3gpp-guidance")
    SERVER_VERSION: str = os.getenv("MCP_SERVER_VERSION", "2.0.0")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

    # Guidance limits
    MAX_SUGGESTIONS: int = int(os.getenv("MAX_SUGGESTIONS", "5"))
    MAX_CATALOG_RESULTS: int = int(os.getenv("MAX_CATALOG_RESULTS", "20"))

    # Features
    ENABLE_LOGGING: bool = os.getenv("ENABLE_LOGGING", "true").lower() == "true"
    ENABLE_CACHING: bool = os.getenv("ENABLE_CACHING", "true").lower() == "true"

    # Catalog cache settings
    CATALOG_CACHE_TTL: int = int(os.getenv("CATALOG_CACHE_TTL", "7200"))  # 2 hours
    CATALOG_CACHE_MAX_KEYS: int = int(os.getenv("CATALOG_CACHE_MAX_KEYS", "1000"))

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration"""
        errors = []

        if cls.LOG_LEVEL not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {cls.LOG_LEVEL}")

        if cls.MAX_SUGGESTIONS < 1:
            errors.append(f"MAX_SUGGESTIONS must be positive: {cls.MAX_SUGGESTIONS}")

        if cls.MAX_CATALOG_RESULTS < 1:
            errors.append(f"MAX_CATALOG_RESULTS must be positive: {cls.MAX_CATALOG_RESULTS}")

        if cls.CATALOG_CACHE_TTL < 0:
            errors.append(f"CATALOG_CACHE_TTL cannot be negative: {cls.CATALOG_CACHE_TTL}")

        if cls.CATALOG_CACHE_MAX_KEYS < 1:
            errors.append(f"CATALOG_CACHE_MAX_KEYS must be positive: {cls.CATALOG_CACHE_MAX_KEYS}")

        if errors:
            raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

        return True

    @classmethod
    def display(cls) -> str:
        """Display configuration (for debugging)"""
        return f"""
3GPP Guidance Server Configuration
==================================
Server: {cls.SERVER_NAME} v{cls.SERVER_VERSION}
Environment: {cls.ENVIRONMENT}
Debug: {cls.DEBUG}
Log level: {cls.LOG_LEVEL}

Limits:
  Max suggestions: {cls.MAX_SUGGESTIONS}
  Max catalog results: {cls.MAX_CATALOG_RESULTS}

Features:
  Logging: {cls.ENABLE_LOGGING}
  Caching: {cls.ENABLE_CACHING}
  Catalog cache TTL: {cls.CATALOG_CACHE_TTL}s
  Catalog cache max keys: {cls.CATALOG_CACHE_MAX_KEYS}
==================================
"""
