"""Specification metadata catalog"""

from .client import MetadataCatalogClient
from .errors import CatalogError
from .types import ReleaseInfo, SpecificationMetadata, SpecificationSearch, WorkingGroupInfo

__all__ = [
    "CatalogError",
    "MetadataCatalogClient",
    "ReleaseInfo",
    "SpecificationMetadata",
    "SpecificationSearch",
    "WorkingGroupInfo",
]
