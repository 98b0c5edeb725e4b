"""Tests for the specification metadata catalog."""

import pytest


def test_known_specification_metadata(catalog):
    metadata = catalog.get_specification_metadata("TS 32.290")

    assert metadata.version == "17.1.0"
    assert metadata.working_group == "SA5"
    assert metadata.release == "Rel-17"
    assert "chf" in metadata.keywords


def test_unknown_specification_gets_placeholder(catalog):
    metadata = catalog.get_specification_metadata("TS 99.999")

    assert metadata.title == "TS 99.999 - 3GPP Technical Specification"
    assert metadata.version == "17.0.0"
    assert metadata.working_group == "Unknown"
    assert metadata.status == "Published"
    assert metadata.dependencies == ()


def test_blank_specification_id_raises(catalog):
    from tgpp_guidance.catalog import CatalogError

    with pytest.raises(CatalogError):
        catalog.get_specification_metadata("  ")


def test_release_info(catalog):
    known = catalog.get_release_info("Rel-16")
    unknown = catalog.get_release_info("Rel-99")

    assert "TS 32.255" in known.specifications
    assert unknown.freeze_date == "2023-01-01"
    assert unknown.status == "Unknown"
    assert unknown.specifications == ()


def test_working_group_info(catalog):
    known = catalog.get_working_group_info("SA5")
    unknown = catalog.get_working_group_info("CT9")

    assert "TS 32.290" in known.specifications
    assert unknown.full_name == "CT9 Working Group"
    assert unknown.focus_area == "Technical specifications"
    assert unknown.chairperson == "Unknown"


def test_search_by_text(catalog):
    ids = [spec.id for spec in catalog.search_specifications("charging")]

    assert "TS 32.290" in ids
    assert "TS 32.240" in ids
    assert "TS 38.331" not in ids


def test_search_blank_query_matches_everything(catalog):
    from tgpp_guidance.catalog.records import SEARCHABLE_SPECIFICATIONS

    assert len(catalog.search_specifications("")) == len(SEARCHABLE_SPECIFICATIONS)


def test_search_filters(catalog):
    sa2 = catalog.search_specifications("", working_group="SA2")
    series_32 = catalog.search_specifications("", series="32.")

    assert {spec.id for spec in sa2} == {"TS 23.501", "TS 23.502"}
    assert all(spec.id.startswith("TS 32.") for spec in series_32)
    assert len(series_32) == 4


def test_search_limit():
    from tgpp_guidance.catalog.client import MetadataCatalogClient
    from tgpp_guidance.utils.cache import TTLCache

    catalog = MetadataCatalogClient(cache=TTLCache(), max_results=2)

    assert len(catalog.search_specifications("")) == 2


def test_lookups_are_cached(catalog):
    first = catalog.get_specification_metadata("TS 33.501")
    second = catalog.get_specification_metadata("TS 33.501")

    assert first is second
    stats = catalog.cache_stats()
    assert stats == {"keys": 1, "hits": 1, "misses": 1}


def test_search_cache_key_includes_filters(catalog):
    catalog.search_specifications("", release="Rel-17")
    catalog.search_specifications("", release="Rel-16")

    assert catalog.cache_stats()["keys"] == 2


def test_clear_cache(catalog):
    catalog.get_release_info("Rel-17")
    catalog.clear_cache()

    assert catalog.cache_stats() == {"keys": 0, "hits": 0, "misses": 0}


def test_metadata_to_dict(catalog):
    data = catalog.get_specification_metadata("TS 38.331").to_dict()

    assert data["id"] == "TS 38.331"
    assert data["working_group"] == "RAN2"
    assert data["download_url"] is None


def test_cached_records_cannot_be_changed_by_callers(catalog):
    first = catalog.get_specification_metadata("TS 32.290")

    with pytest.raises(AttributeError):
        first.keywords.append("tampered")

    second = catalog.get_specification_metadata("TS 32.290")
    assert second is first
    assert "tampered" not in second.keywords
    assert isinstance(catalog.get_release_info("Rel-16").specifications, tuple)


def test_search_results_are_fresh_lists(catalog):
    results = catalog.search_specifications("charging")
    results.clear()

    assert catalog.search_specifications("charging")


def test_record_to_dict_uses_lists(catalog):
    data = catalog.get_working_group_info("SA5").to_dict()

    assert isinstance(data["specifications"], list)
    assert "TS 32.290" in data["specifications"]
