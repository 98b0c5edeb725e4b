"""Catalog record types"""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class SpecificationMetadata:
    """Publication metadata for one specification."""

    id: str
    title: str
    version: str
    release: str
    working_group: str
    status: str
    publication_date: str
    summary: str
    dependencies: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    download_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "version": self.version,
            "release": self.release,
            "working_group": self.working_group,
            "status": self.status,
            "publication_date": self.publication_date,
            "summary": self.summary,
            "dependencies": list(self.dependencies),
            "keywords": list(self.keywords),
            "download_url": self.download_url,
        }


@dataclass(frozen=True)
class ReleaseInfo:
    release: str
    freeze_date: str
    status: str
    specifications: tuple[str, ...] = ()
    major_features: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "release": self.release,
            "freeze_date": self.freeze_date,
            "status": self.status,
            "specifications": list(self.specifications),
            "major_features": list(self.major_features),
        }


@dataclass(frozen=True)
class WorkingGroupInfo:
    name: str
    full_name: str
    focus_area: str
    specifications: tuple[str, ...] = ()
    chairperson: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "full_name": self.full_name,
            "focus_area": self.focus_area,
            "specifications": list(self.specifications),
            "chairperson": self.chairperson,
        }


class SpecificationSearch(Protocol):
    """Anything that can look up and search specification metadata."""

    def get_specification_metadata(self, spec_id: str) -> SpecificationMetadata:
        ...

    def search_specifications(
        self,
        query: str,
        release: Optional[str] = None,
        working_group: Optional[str] = None,
        series: Optional[str] = None,
    ) -> list[SpecificationMetadata]:
        ...

    def get_release_info(self, release: str) -> ReleaseInfo:
        ...

    def get_working_group_info(self, wg_name: str) -> WorkingGroupInfo:
        ...

    def cache_stats(self) -> dict:
        ...

    def clear_cache(self) -> None:
        ...
