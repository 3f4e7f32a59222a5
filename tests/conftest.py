"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ghostfield.candidates import CandidateList
from ghostfield.models import Font, Size, WeightedCandidate


class FixedWidthMeasurer:
    """Measures every character as 10 units wide and lines as 20 units high."""

    char_width = 10
    line_height = 20

    def measure(self, text: str, constraint: Size, font: Font) -> Size:
        if not text:
            return Size(0, 0)
        return Size(min(len(text) * self.char_width, constraint.width), self.line_height)


@pytest.fixture
def measurer() -> FixedWidthMeasurer:
    """A deterministic text measurer."""
    return FixedWidthMeasurer()


@pytest.fixture
def mail_candidates() -> list[WeightedCandidate]:
    """Two weighted domains sharing the leading 'g'."""
    return [
        WeightedCandidate(text="gmail.com", weight=5),
        WeightedCandidate(text="github.com", weight=3),
    ]


@pytest.fixture
def mail_source(mail_candidates: list[WeightedCandidate]) -> CandidateList:
    """A candidate source wrapping the mail candidates."""
    return CandidateList(mail_candidates)


@pytest.fixture
def tmp_config(tmp_path, monkeypatch):
    """Point config.toml at a temporary file."""
    config_file = tmp_path / "ghostfield" / "config.toml"
    # _CONFIG_PATH is computed at import time, so we must patch it directly
    monkeypatch.setattr("ghostfield.config._CONFIG_PATH", config_file)
    return config_file
