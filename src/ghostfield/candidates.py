"""Candidate sources: the built-in domain list and external providers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from ghostfield.models import WeightedCandidate

_DOMAIN_NAMES = (
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "live.com",
    "msn.com",
    "aol.com",
    "icloud.com",
    "me.com",
    "mac.com",
    "mail.com",
    "gmx.com",
    "gmx.net",
    "yandex.com",
    "zoho.com",
    "protonmail.com",
    "proton.me",
    "fastmail.com",
    "hushmail.com",
    "inbox.com",
    "comcast.net",
    "verizon.net",
    "att.net",
    "sbcglobal.net",
    "bellsouth.net",
    "yahoo.co.uk",
    "hotmail.co.uk",
    "btinternet.com",
    "web.de",
    "orange.fr",
    "free.fr",
    "libero.it",
    "qq.com",
    "163.com",
)

# Shared by every field without a candidate source.
DEFAULT_DOMAIN_NAMES: list[WeightedCandidate] = [
    WeightedCandidate(text=name) for name in _DOMAIN_NAMES
]


class CandidateSource(Protocol):
    """Anything that can supply candidates for a requesting field."""

    def provide_candidates(self, field: Any) -> Sequence[WeightedCandidate]:
        """Return the candidates to match against for *field*."""
        ...


class CandidateList:
    """A candidate source backed by a plain list of candidates."""

    def __init__(self, candidates: Sequence[WeightedCandidate] | None = None) -> None:
        self.candidates: list[WeightedCandidate] = list(candidates or [])

    @classmethod
    def from_texts(
        cls, texts: Sequence[str], usage: Mapping[str, int] | None = None
    ) -> CandidateList:
        """Build a list from candidate texts, seeding weights from *usage*.

        Args:
            texts: Candidate strings in preference order.
            usage: Optional mapping of candidate text to stored usage count.

        Returns:
            A new CandidateList with one candidate per text.
        """
        usage = usage or {}
        return cls([WeightedCandidate(text=t, weight=usage.get(t, 0)) for t in texts])

    def provide_candidates(self, field: Any) -> Sequence[WeightedCandidate]:
        return self.candidates

    def __len__(self) -> int:
        return len(self.candidates)


def resolve_candidates(
    source: CandidateSource | None, field: Any = None
) -> Sequence[WeightedCandidate]:
    """Return the candidates for *field*, falling back to the default domains."""
    if source is None:
        return DEFAULT_DOMAIN_NAMES
    return source.provide_candidates(field)


def default_domain_texts() -> list[str]:
    """Return the texts of the built-in domain list."""
    return list(_DOMAIN_NAMES)
