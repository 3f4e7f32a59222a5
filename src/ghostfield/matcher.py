"""Select the best candidate for a partially typed query."""

from __future__ import annotations

import random
from collections.abc import Sequence

from ghostfield.models import WeightedCandidate


def locate(text: str, query: str, ignore_case: bool = True) -> tuple[int, int] | None:
    """Find the first occurrence of *query* inside *text*.

    Case folding is done per character so the returned span always indexes
    the original *text*, even for characters whose folded form is longer.

    Args:
        text: The string to search in.
        query: The substring to look for.
        ignore_case: Compare case-insensitively when True.

    Returns:
        A ``(start, end)`` span into *text*, or None when *query* is empty
        or does not occur.
    """
    if not query:
        return None
    if not ignore_case:
        start = text.find(query)
        return None if start < 0 else (start, start + len(query))

    folded_query = query.casefold()
    folded_chars = [ch.casefold() for ch in text]
    for start in range(len(text)):
        folded = ""
        for end in range(start, len(text)):
            folded += folded_chars[end]
            if folded == folded_query:
                return start, end + 1
            if not folded_query.startswith(folded):
                break
    return None


def contains(text: str, query: str, ignore_case: bool = True) -> bool:
    """Return True when *query* occurs in *text*."""
    if not query:
        return False
    if ignore_case:
        return query.casefold() in text.casefold()
    return query in text


def match_candidate(
    query: str,
    candidates: Sequence[WeightedCandidate],
    ignore_case: bool = True,
    randomize: bool = False,
    rng: random.Random | None = None,
) -> WeightedCandidate | None:
    """Pick the candidate to suggest for *query*.

    Candidates whose text contains *query* are kept.  With *randomize* one
    of them is drawn uniformly; otherwise the heaviest wins, ties going to
    the alphabetically smaller text.

    Args:
        query: The typed text to complete.
        candidates: Candidates to search; never modified.
        ignore_case: Compare case-insensitively when True.
        randomize: Draw a random match instead of the heaviest one.
        rng: Random generator for *randomize*; defaults to the module RNG.

    Returns:
        The chosen candidate, or None when nothing matches.
    """
    matches = [c for c in candidates if contains(c.text, query, ignore_case)]
    if not matches:
        return None
    if randomize:
        return (rng or random).choice(matches)
    return sorted(matches, key=lambda c: (-c.weight, c.text))[0]
