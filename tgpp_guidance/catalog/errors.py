"""Catalog errors"""

from typing import Optional


class CatalogError(Exception):
    """Raised when the specification catalog cannot answer a request."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
