"""Inline weighted autocompletion for text fields."""

from ghostfield.candidates import DEFAULT_DOMAIN_NAMES, CandidateList, CandidateSource
from ghostfield.controller import AutocompleteController
from ghostfield.culler import cull_text
from ghostfield.layout import CellMeasurer, TextMeasurer, compute_overlay_rect
from ghostfield.matcher import match_candidate
from ghostfield.models import (
    ActiveSuggestion,
    BorderStyle,
    ButtonViewMode,
    Font,
    Rect,
    Size,
    SuggestionState,
    WeightedCandidate,
)

__all__ = [
    "DEFAULT_DOMAIN_NAMES",
    "ActiveSuggestion",
    "AutocompleteController",
    "BorderStyle",
    "ButtonViewMode",
    "CandidateList",
    "CandidateSource",
    "CellMeasurer",
    "Font",
    "Rect",
    "Size",
    "SuggestionState",
    "TextMeasurer",
    "WeightedCandidate",
    "compute_overlay_rect",
    "cull_text",
    "match_candidate",
]
