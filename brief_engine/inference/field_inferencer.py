"""
Field Inferencer

Generic scorer that runs one pattern registry against text and resolves
the best-supported value.
"""
from typing import Any, Optional

from brief_engine.inference.patterns import Registry
from brief_engine.models.base import FieldValue

# Share of a corroborating pattern's confidence added to the running score
EVIDENCE_WEIGHT = 0.2

# Aggregated scores never reach certainty
MAX_AGGREGATE_CONFIDENCE = 0.98

# Confidence given to a caller-supplied default when nothing matched
SOFT_DEFAULT_CONFIDENCE = 0.3


def saturating_add(score: float, increment: float, cap: float = MAX_AGGREGATE_CONFIDENCE) -> float:
    """Add evidence to a score, clamped to `cap`."""
    return min(cap, score + increment)


def infer_field(text: str, registry: Registry, default: Optional[Any] = None) -> FieldValue:
    """
    Score every rule in `registry` against `text`.

    The first matching rule for a value sets its score; each further rule
    voting for the same value adds EVIDENCE_WEIGHT x its confidence. The
    highest score wins and ties go to the value that matched first in
    registry order.

    Args:
        text: Text to search (case-insensitive patterns)
        registry: Ordered pattern rules for one field
        default: Value to return at low confidence when nothing matches

    Returns:
        FieldValue whose source is INFERRED only at or above the threshold
    """
    scores: dict[Any, float] = {}
    evidence: list[str] = []

    for rule in registry:
        if not rule.pattern.search(text):
            continue
        evidence.append(rule.source)
        if rule.value in scores:
            scores[rule.value] = saturating_add(scores[rule.value], rule.confidence * EVIDENCE_WEIGHT)
        else:
            scores[rule.value] = min(MAX_AGGREGATE_CONFIDENCE, rule.confidence)

    if not scores:
        if default is None:
            return FieldValue.empty()
        return FieldValue.scored(default, SOFT_DEFAULT_CONFIDENCE, inferred_from="default")

    best_value, best_score = None, 0.0
    for value, score in scores.items():
        # Strict comparison keeps the earliest-registered value on ties
        if score > best_score:
            best_value, best_score = value, score

    return FieldValue.scored(best_value, best_score, inferred_from=", ".join(evidence))
