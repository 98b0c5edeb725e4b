# tgpp_guidance/guidance/analyzer.py
"""Keyword classification of free-text research questions.

Intent and domain are decided by ordered rule tables: the first rule with a
keyword contained in the lower-cased text wins, so reordering a table
changes results. All matching is plain substring matching except concept
extraction, which uses word-bounded patterns.
"""

import re
from typing import Optional, TypeVar

from .types import ExpertiseLevel, QueryAnalysis, QueryIntent, UserQuery

T = TypeVar("T")

# =============================================================================
# RULE TABLES
# =============================================================================

INTENT_RULES: tuple[tuple[QueryIntent, tuple[str, ...]], ...] = (
    (QueryIntent.DISCOVERY, ("find", "search", "locate", "discover", "identify", "which spec", "what specification")),
    (QueryIntent.LEARNING, ("learn", "understand", "explain", "how does", "what is", "tutorial", "guide me")),
    (QueryIntent.COMPARISON, ("compare", "difference", "vs", "versus", "better", "choose between", "contrast")),
    (QueryIntent.IMPLEMENTATION, ("implement", "build", "develop", "code", "create", "deploy", "how to build")),
    (QueryIntent.TROUBLESHOOTING, ("debug", "fix", "problem", "issue", "error", "troubleshoot", "not working")),
    (QueryIntent.EVOLUTION, ("change", "evolution", "history", "migration", "upgrade", "from rel", "new in")),
)
DEFAULT_INTENT = QueryIntent.DISCOVERY

DOMAIN_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("authentication", ("auth", "aka", "suci", "supi", "identity", "privacy", "login")),
    ("mobility", ("handover", "mobility", "roaming", "cell", "tracking area")),
    ("session_management", ("session", "bearer", "pdu", "data", "connectivity", "qos")),
    ("security", ("security", "encryption", "key", "cipher", "protect", "crypto")),
    ("radio", ("radio", "rf", "antenna", "beam", "mimo", "physical layer")),
    ("protocol", ("protocol", "message", "signaling", "procedure", "nas", "rrc")),
    ("architecture", ("architecture", "system", "network function", "sba", "core network")),
    ("ue", ("ue", "device", "terminal", "phone", "equipment")),
    ("network", ("network", "operator", "infrastructure", "deployment")),
)
DEFAULT_DOMAIN = "general"

SPEC_ID_PATTERN = re.compile(r"\bts\s*\d{2}\.\d{3}\b", re.IGNORECASE)

CONCEPT_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b(nas|rrc|pdcp|rlc|mac|phy)\b", re.IGNORECASE),
    re.compile(r"\b(5g|lte|4g|3g|nr|eps|5gs)\b", re.IGNORECASE),
    re.compile(r"\b(suci|supi|imsi|guti|tmsi)\b", re.IGNORECASE),
    re.compile(r"\b(aka|ausf|amf|smf|upf|udm)\b", re.IGNORECASE),
    re.compile(r"\b(authentication|authorization|security)\b", re.IGNORECASE),
    re.compile(r"\b(handover|mobility|roaming)\b", re.IGNORECASE),
    re.compile(r"\b(bearer|session|pdu|qos)\b", re.IGNORECASE),
    SPEC_ID_PATTERN,
)

TECHNOLOGY_PATTERN = re.compile(r"\b(4g|5g|lte|nr|eps|5gs)\b", re.IGNORECASE)
RELEASE_PATTERN = re.compile(r"\brel-?\d{2}\b", re.IGNORECASE)

TECHNICAL_TERMS = ("implementation", "algorithm", "cryptography", "optimization", "performance")
BEGINNER_INDICATORS = ("what is", "explain", "basic", "introduction", "getting started")
EXPERT_INDICATORS = ("implementation", "optimization", "performance", "algorithm", "detailed")

BASE_COMPLEXITY = 0.3
CONCEPT_WEIGHT = 0.1
MAX_CONCEPT_CONTRIBUTION = 0.4
TECHNICAL_TERM_BONUS = 0.2
MULTI_SPEC_BONUS = 0.2
EXPERT_COMPLEXITY = 0.7


# =============================================================================
# CLASSIFIERS
# =============================================================================

def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def first_match(text: str, rules: tuple[tuple[T, tuple[str, ...]], ...], default: T) -> T:
    """Result of the first rule with a keyword contained in ``text``."""
    for result, keywords in rules:
        if _contains_any(text, keywords):
            return result
    return default


def _unique_upper(matches) -> list[str]:
    return list(dict.fromkeys(match.upper() for match in matches))


def determine_intent(text: str) -> QueryIntent:
    return first_match(text.lower(), INTENT_RULES, DEFAULT_INTENT)


def determine_domain(text: str) -> str:
    return first_match(text.lower(), DOMAIN_RULES, DEFAULT_DOMAIN)


def extract_concepts(text: str) -> tuple[str, ...]:
    """Known technical terms in ``text``, upper-cased, first occurrence order."""
    text = text.lower()
    matches = []
    for pattern in CONCEPT_PATTERNS:
        matches += [m.group(0) for m in pattern.finditer(text)]
    return tuple(_unique_upper(matches))


def assess_complexity(text: str, concepts: tuple[str, ...]) -> float:
    """Complexity in [0.3, 1.0] from concept count, technical terms and spec IDs."""
    text = text.lower()
    complexity = BASE_COMPLEXITY
    complexity += min(len(concepts) * CONCEPT_WEIGHT, MAX_CONCEPT_CONTRIBUTION)

    if _contains_any(text, TECHNICAL_TERMS):
        complexity += TECHNICAL_TERM_BONUS

    if len(SPEC_ID_PATTERN.findall(text)) > 1:
        complexity += MULTI_SPEC_BONUS

    return min(complexity, 1.0)


def infer_user_level(text: str, complexity: float) -> ExpertiseLevel:
    text = text.lower()
    if _contains_any(text, BEGINNER_INDICATORS):
        return ExpertiseLevel.BEGINNER
    if _contains_any(text, EXPERT_INDICATORS) or complexity > EXPERT_COMPLEXITY:
        return ExpertiseLevel.EXPERT
    return ExpertiseLevel.INTERMEDIATE


def normalize_domain(domain: Optional[str]) -> Optional[str]:
    """Caller-supplied domain as a table key, or None when blank."""
    if domain is None:
        return None
    normalized = "_".join(domain.strip().lower().split())
    return normalized or None


def extract_comparison_targets(text: str) -> list[str]:
    """Spec IDs, then technologies, then releases named in ``text``.

    Upper-cased and deduplicated in first-seen order.
    """
    matches = [m.group(0) for m in SPEC_ID_PATTERN.finditer(text)]
    matches += [m.group(0) for m in TECHNOLOGY_PATTERN.finditer(text)]
    matches += [m.group(0) for m in RELEASE_PATTERN.finditer(text)]
    return _unique_upper(matches)


def analyze(query: UserQuery) -> QueryAnalysis:
    """Classify a query. Never fails; empty text yields the defaults."""
    text = query.text.lower()
    concepts = extract_concepts(text)
    complexity = assess_complexity(text, concepts)

    return QueryAnalysis(
        intent=determine_intent(text),
        domain=normalize_domain(query.domain) or determine_domain(text),
        concepts=concepts,
        complexity=complexity,
        user_level=query.user_level or infer_user_level(text, complexity),
    )
