# tgpp_guidance/knowledge/scoring.py
"""Relevance scoring of specifications against a topic.

Two scores are used when suggesting specifications for a topic:

- ``inclusion_score`` decides whether a specification is suggested at all
  (uncapped, compared against ``INCLUSION_THRESHOLD``);
- ``comparator_score`` orders the survivors (normalized to [0, 1]).

They weight the same fields differently and are kept separate so that the
ranking of a given knowledge base stays stable.
"""

from .types import SpecificationEntity

INCLUSION_THRESHOLD = 0.3

# Inclusion weights
TITLE_HIT = 0.8
KEY_TOPIC_HIT = 0.6
KEYWORD_HIT = 0.4
PURPOSE_HIT = 0.5

# Comparator weights
TITLE_WEIGHT = 0.5
KEY_TOPIC_WEIGHT = 0.3
KEYWORD_WEIGHT = 0.2


def _hits(values: tuple[str, ...], topic: str) -> int:
    return sum(1 for value in values if topic in value.lower())


def inclusion_score(spec: SpecificationEntity, topic: str) -> float:
    """Additive substring score used to filter candidate specifications.

    Args:
        spec: Specification to score
        topic: Free-text topic (matched case-insensitively as a substring)

    Returns:
        Score; every key topic and keyword containing the topic adds to it
    """
    topic = topic.lower()
    score = 0.0

    if topic in spec.title.lower():
        score += TITLE_HIT
    score += KEY_TOPIC_HIT * _hits(spec.key_topics, topic)
    score += KEYWORD_HIT * _hits(spec.search_keywords, topic)
    if topic in spec.purpose.lower():
        score += PURPOSE_HIT

    return score


def comparator_score(spec: SpecificationEntity, topic: str) -> float:
    """Normalized score used to order suggested specifications.

    Key topic and keyword hits count as the fraction of the list that
    matched; an empty list contributes nothing.
    """
    topic = topic.lower()
    score = 0.0

    if topic in spec.title.lower():
        score += TITLE_WEIGHT
    if spec.key_topics:
        score += _hits(spec.key_topics, topic) / len(spec.key_topics) * KEY_TOPIC_WEIGHT
    if spec.search_keywords:
        score += _hits(spec.search_keywords, topic) / len(spec.search_keywords) * KEYWORD_WEIGHT

    return min(score, 1.0)


def is_relevant(spec: SpecificationEntity, topic: str) -> bool:
    """True when the specification clears the inclusion threshold."""
    return inclusion_score(spec, topic) > INCLUSION_THRESHOLD
