"""Literal term matching shared by all detectors."""

from collections.abc import Iterable


def find_matches(text: str, terms: Iterable[str]) -> list[str]:
    """Find which candidate terms occur in the text.

    Matching is plain substring containment, so "lab" also matches
    "laboratory". Results keep the order of ``terms``.

    Args:
        text: Lowercased haystack text
        terms: Candidate terms

    Returns:
        Matched terms in candidate order
    """
    return [term for term in terms if term.lower() in text]
