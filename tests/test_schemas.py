"""Tests for tool input and response schemas."""

import pytest
from pydantic import ValidationError


def test_guidance_search_allows_blank_query():
    from tgpp_guidance.schemas import GuidanceSearchInput

    validated = GuidanceSearchInput(query="")

    assert validated.query == ""
    assert validated.user_level is None


def test_guidance_search_normalizes_level_and_domain():
    from tgpp_guidance.schemas import GuidanceSearchInput

    validated = GuidanceSearchInput(query="charging", user_level=" Expert ", domain="  ")

    assert validated.user_level == "expert"
    assert validated.domain is None


def test_guidance_search_rejects_unknown_level():
    from tgpp_guidance.schemas import GuidanceSearchInput

    with pytest.raises(ValidationError):
        GuidanceSearchInput(query="charging", user_level="guru")


def test_guidance_search_rejects_long_query():
    from tgpp_guidance.schemas import GuidanceSearchInput

    with pytest.raises(ValidationError):
        GuidanceSearchInput(query="x" * 2001)


def test_requirements_strip_and_reject_blank():
    from tgpp_guidance.schemas import RequirementsInput

    assert RequirementsInput(requirements="  SUCI support ").requirements == "SUCI support"

    with pytest.raises(ValidationError) as exc_info:
        RequirementsInput(requirements="   ")
    assert "Requirements cannot be empty" in str(exc_info.value)


def test_structure_focus_defaults_to_overview():
    from tgpp_guidance.schemas import StructureInput

    assert StructureInput().focus == "overview"
    assert StructureInput(focus=" Series ").focus == "series"
    assert StructureInput(focus="  ").focus == "overview"


def test_specification_input_normalizes_id():
    from tgpp_guidance.schemas import SpecificationInput

    validated = SpecificationInput(spec_id="33.501")

    assert validated.spec_id == "TS 33.501"
    assert validated.include_related is True


def test_specification_input_rejects_bad_id():
    from tgpp_guidance.schemas import SpecificationInput

    with pytest.raises(ValidationError) as exc_info:
        SpecificationInput(spec_id="TR 38.913")

    assert "Invalid specification ID format" in str(exc_info.value)


def test_compare_input_bounds():
    from tgpp_guidance.schemas import CompareSpecificationsInput

    assert CompareSpecificationsInput(spec_ids=["24.301", "ts 24.501"]).spec_ids == ["TS 24.301", "TS 24.501"]

    with pytest.raises(ValidationError):
        CompareSpecificationsInput(spec_ids=["TS 24.301"])

    with pytest.raises(ValidationError):
        CompareSpecificationsInput(spec_ids=[f"TS 32.29{i}" for i in range(6)])

    with pytest.raises(ValidationError):
        CompareSpecificationsInput(spec_ids=["TS 24.301", "24.301"])


def test_implementation_input():
    from tgpp_guidance.schemas import ImplementationInput

    validated = ImplementationInput(feature=" 5G charging ", domain=" charging ", complexity_level="ADVANCED")

    assert validated.feature == "5G charging"
    assert validated.domain == "charging"
    assert validated.complexity_level == "advanced"

    with pytest.raises(ValidationError):
        ImplementationInput(feature="handover", complexity_level="extreme")


def test_guidance_model_dumps_wire_aliases():
    from tgpp_guidance.schemas import GuidanceModel

    model = GuidanceModel.model_validate({
        "summary": "Research guidance for general.",
        "nextSteps": ["Read"],
        "relatedTopics": ["Topic"],
        "confidence": 0.6,
    })

    dumped = model.model_dump(by_alias=True)
    assert dumped["nextSteps"] == ["Read"]
    assert dumped["relatedTopics"] == ["Topic"]
    assert dumped["type"] == "guidance"


def test_query_analysis_model_bounds_complexity():
    from tgpp_guidance.schemas import QueryAnalysisModel

    with pytest.raises(ValidationError):
        QueryAnalysisModel(intent="discovery", domain="general", complexity=1.5, user_level="expert")


def test_search_input_normalizes_filters():
    from tgpp_guidance.schemas import SearchSpecificationsInput

    validated = SearchSpecificationsInput(
        query=" charging ",
        series_filter=["32", "TS 32", "33."],
        release_filter=[],
        working_group=" sa5 ",
    )

    assert validated.query == "charging"
    assert validated.max_results == 5
    assert validated.series_filter == ["32", "33"]
    assert validated.release_filter is None
    assert validated.working_group == "SA5"
