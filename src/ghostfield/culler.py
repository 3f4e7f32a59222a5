"""Derive the suggestion remainder drawn after the typed text."""

from __future__ import annotations

from ghostfield.matcher import locate


def cull_text(candidate_text: str, query: str, ignore_case: bool = True) -> str:
    """Remove the first occurrence of *query* from *candidate_text*.

    Args:
        candidate_text: Text of the matched candidate.
        query: The typed query.
        ignore_case: Locate *query* case-insensitively when True.

    Returns:
        The candidate text without the query, or an empty string when the
        query does not occur in it.
    """
    span = locate(candidate_text, query, ignore_case)
    if span is None:
        return ""
    start, end = span
    return candidate_text[:start] + candidate_text[end:]
