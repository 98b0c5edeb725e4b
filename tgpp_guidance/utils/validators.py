"""
Input validation utilities for tool and CLI arguments
"""

import re
from typing import Optional

from ..guidance.types import ExpertiseLevel

MAX_TEXT_LENGTH = 2000
MIN_COMPARE_SPECS = 2
MAX_COMPARE_SPECS = 5
MAX_SEARCH_RESULTS = 20

SPEC_ID_PATTERN = re.compile(r'^TS\s*(\d{2})\.(\d{3})$', re.IGNORECASE)
BARE_SPEC_ID_PATTERN = re.compile(r'^(\d{2})\.(\d{3})$')
SERIES_PATTERN = re.compile(r'^(?:TS\s*)?(\d{2})\.?$', re.IGNORECASE)
RELEASE_PATTERN = re.compile(r'^(?:REL|R)?[-\s]?(\d{1,2})$', re.IGNORECASE)


class ValidationError(Exception):
    """Custom exception for validation errors"""
    pass


def normalize_spec_id(spec_id: str) -> str:
    """
    Normalize a specification ID to the canonical "TS xx.yyy" form

    Accepts "TS 24.501", "ts24.501" and the bare "24.501".

    Args:
        spec_id: Specification ID to validate

    Returns:
        Canonical specification ID

    Raises:
        ValidationError: If the ID is empty or malformed
    """
    if not spec_id or not spec_id.strip():
        raise ValidationError("Specification ID cannot be empty")

    candidate = spec_id.strip()
    match = SPEC_ID_PATTERN.match(candidate) or BARE_SPEC_ID_PATTERN.match(candidate)
    if not match:
        raise ValidationError(f"Invalid specification ID format: {spec_id} (expected e.g. TS 24.501)")

    return f"TS {match.group(1)}.{match.group(2)}"


def validate_spec_ids(spec_ids: list[str]) -> list[str]:
    """
    Validate a list of IDs for comparison

    Returns:
        Canonical IDs, duplicates removed, in the given order

    Raises:
        ValidationError: If fewer than 2 or more than 5 distinct IDs remain
    """
    normalized = list(dict.fromkeys(normalize_spec_id(spec_id) for spec_id in spec_ids))

    if len(normalized) < MIN_COMPARE_SPECS:
        raise ValidationError(f"At least {MIN_COMPARE_SPECS} distinct specifications are required")

    if len(normalized) > MAX_COMPARE_SPECS:
        raise ValidationError(f"At most {MAX_COMPARE_SPECS} specifications can be compared")

    return normalized


def normalize_series(series: str) -> str:
    """Normalize a series filter ("32", "32." or "TS 32") to its two digits"""
    match = SERIES_PATTERN.match(series.strip()) if series else None
    if not match:
        raise ValidationError(f"Invalid series: {series} (expected two digits, e.g. 32)")
    return match.group(1)


def normalize_release(release: str) -> str:
    """Normalize a release filter ("16", "rel16", "Rel-16") to "Rel-16" form"""
    match = RELEASE_PATTERN.match(release.strip()) if release else None
    if not match:
        raise ValidationError(f"Invalid release: {release} (expected e.g. Rel-16)")
    return f"Rel-{int(match.group(1))}"


def validate_query_text(text: str, field: str = "Query") -> str:
    """
    Validate free text such as a requirement, topic or feature

    Raises:
        ValidationError: If text is blank or too long
    """
    if not text or not text.strip():
        raise ValidationError(f"{field} cannot be empty")

    text = text.strip()

    if len(text) > MAX_TEXT_LENGTH:
        raise ValidationError(f"{field} too long (max: {MAX_TEXT_LENGTH} characters)")

    return text


def validate_user_level(user_level: Optional[str]) -> Optional[ExpertiseLevel]:
    """Parse an optional expertise level; blank means "infer it"."""
    if user_level is None or not user_level.strip():
        return None

    try:
        return ExpertiseLevel.from_string(user_level)
    except ValueError:
        valid = ", ".join(level.value for level in ExpertiseLevel)
        raise ValidationError(f"Invalid user level: {user_level} (expected one of: {valid})")

