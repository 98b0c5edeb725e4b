"""Tests for specification relevance scoring."""

import pytest


def _spec(**fields):
    from tgpp_guidance.knowledge.types import SpecificationEntity

    base = {
        "id": "TS 32.240",
        "title": "Charging architecture and principles",
        "series": "32",
        "release": "Rel-17",
        "working_group": "SA5",
        "purpose": "Defines common principles for charging",
    }
    base.update(fields)
    return SpecificationEntity.from_dict(base)


def test_inclusion_score_adds_every_hit():
    from tgpp_guidance.knowledge.scoring import inclusion_score

    spec = _spec(
        key_topics=["Online Charging", "Offline Charging", "CTF"],
        search_keywords=["charging", "billing"],
    )

    # title 0.8 + two topics 1.2 + one keyword 0.4 + purpose 0.5
    assert inclusion_score(spec, "charging") == pytest.approx(2.9)


def test_inclusion_score_is_case_insensitive():
    from tgpp_guidance.knowledge.scoring import inclusion_score

    spec = _spec()

    assert inclusion_score(spec, "CHARGING") == inclusion_score(spec, "charging")


def test_inclusion_score_no_match():
    from tgpp_guidance.knowledge.scoring import inclusion_score

    assert inclusion_score(_spec(), "handover") == 0.0


def test_comparator_score_uses_list_fractions():
    from tgpp_guidance.knowledge.scoring import comparator_score

    spec = _spec(
        key_topics=["Online Charging", "CTF"],
        search_keywords=["charging", "billing", "CDF", "OCS"],
    )

    # title 0.5 + 1/2 of 0.3 + 1/4 of 0.2
    assert comparator_score(spec, "charging") == pytest.approx(0.7)


def test_comparator_score_ignores_purpose_and_empty_lists():
    from tgpp_guidance.knowledge.scoring import comparator_score

    spec = _spec(title="Something else")

    assert comparator_score(spec, "charging") == 0.0


def test_comparator_score_capped_at_one():
    from tgpp_guidance.knowledge.scoring import comparator_score

    spec = _spec(key_topics=["charging"], search_keywords=["charging"])

    assert comparator_score(spec, "charging") == pytest.approx(1.0)


def test_is_relevant_threshold_is_strict():
    from tgpp_guidance.knowledge.scoring import is_relevant

    keyword_only = _spec(title="Other", purpose="Other", search_keywords=["charging"])
    nothing = _spec(title="Other", purpose="Other")

    assert is_relevant(keyword_only, "charging")
    assert not is_relevant(nothing, "charging")
