"""Autocomplete state machine driven by text and focus events.

The controller owns no widget.  The host forwards focus and text events,
keeps ``bounds`` up to date, and renders ``suggestion`` after each call.
Committed values are reported to the callbacks registered with
:meth:`AutocompleteController.add_value_changed_callback`.
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Callable
from typing import Any

from ghostfield.candidates import CandidateSource, resolve_candidates
from ghostfield.culler import cull_text
from ghostfield.layout import CellMeasurer, TextMeasurer, compute_overlay_rect
from ghostfield.matcher import match_candidate
from ghostfield.models import (
    ActiveSuggestion,
    BorderStyle,
    Font,
    Rect,
    SuggestionState,
    WeightedCandidate,
)

log = logging.getLogger(__name__)

ValueChangedCallback = Callable[[str, WeightedCandidate], None]


class AutocompleteController:
    """Match typed text against candidates and commit the suggestion."""

    def __init__(
        self,
        source: CandidateSource | None = None,
        field: Any = None,
        *,
        ignore_case: bool = True,
        random_suggestion: bool = False,
        auto_complete_disabled: bool = False,
        clears_on_begin_editing: bool = False,
        delimiter: str | None = None,
        measurer: TextMeasurer | None = None,
        font: Font | None = None,
        border_style: BorderStyle = BorderStyle.PLAIN,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            source: Candidate source; the default domain list when None.
            field: Object handed to the source when candidates are requested.
            ignore_case: Match case-insensitively.
            random_suggestion: Suggest a random match instead of the heaviest.
            auto_complete_disabled: Turn autocompletion off entirely.
            clears_on_begin_editing: Clear the text whenever editing begins.
            delimiter: Characters splitting the input; only the last segment
                is matched.
            measurer: Text measurer for overlay layout.
            font: Font of the host field.
            border_style: Border style of the host field.
            rng: Random generator used with *random_suggestion*.
        """
        self.source = source
        self.field = field
        self.ignore_case = ignore_case
        self.random_suggestion = random_suggestion
        self.auto_complete_disabled = auto_complete_disabled
        self.clears_on_begin_editing = clears_on_begin_editing
        self.measurer: TextMeasurer = measurer or CellMeasurer()
        self.font = font or Font()
        self.border_style = border_style
        self.rng = rng
        self.bounds: Rect | None = None

        self.text = ""
        self.state = SuggestionState.IDLE
        self.overlay_visible = False
        self.suggestion: ActiveSuggestion | None = None
        self._delimiter: str | None = None
        self._callbacks: list[ValueChangedCallback] = []
        self.set_delimiter(delimiter)

    @property
    def delimiter(self) -> str | None:
        """Characters that split the input, or None."""
        return self._delimiter

    def set_delimiter(self, characters: str | None) -> None:
        """Set the delimiter characters; an empty string clears them."""
        self._delimiter = characters or None

    @property
    def remainder(self) -> str:
        """The ghost text currently shown, or an empty string."""
        if self.suggestion is None:
            return ""
        return self.suggestion.remainder

    def add_value_changed_callback(self, callback: ValueChangedCallback) -> None:
        """Register *callback* to be called with the text after each commit."""
        self._callbacks.append(callback)

    def remove_value_changed_callback(self, callback: ValueChangedCallback) -> None:
        """Unregister a callback added with :meth:`add_value_changed_callback`."""
        self._callbacks.remove(callback)

    # -- events --------------------------------------------------------------

    def focus_gained(self) -> None:
        """Begin editing: show the overlay and look for a suggestion."""
        if self.auto_complete_disabled:
            return
        self.overlay_visible = True
        if self.clears_on_begin_editing:
            self.text = ""
            self.suggestion = None
        self.state = SuggestionState.EDITING_NO_MATCH
        self._process()

    def text_changed(self, text: str) -> None:
        """Record a text edit and refresh the suggestion while editing."""
        self.text = text
        if self.auto_complete_disabled or not self.state.editing:
            return
        self._process()

    def focus_lost(self) -> None:
        """End editing: hide the overlay and commit any visible suggestion."""
        if self.auto_complete_disabled:
            return
        self.overlay_visible = False
        self.state = SuggestionState.IDLE
        self.commit()
        self.suggestion = None

    def accept(self) -> None:
        """Accept the suggestion explicitly, ending the editing session."""
        self.focus_lost()
        self.commit()

    def force_refresh(self) -> None:
        """Re-run matching without a text change, e.g. after new candidates."""
        if self.auto_complete_disabled:
            return
        self._process()

    def commit(self) -> bool:
        """Append the remainder to the text and notify observers.

        Returns:
            True when a suggestion was committed.
        """
        suggestion = self.suggestion
        if suggestion is None or not suggestion.remainder:
            return False
        self.suggestion = None
        suggestion.candidate.record_usage()
        self.text = self.text + suggestion.remainder
        if self.state is SuggestionState.EDITING_MATCHED:
            self.state = SuggestionState.EDITING_NO_MATCH
        log.debug(
            "Committed %r (weight now %d)",
            suggestion.candidate.text,
            suggestion.candidate.weight,
        )
        for callback in list(self._callbacks):
            callback(self.text, suggestion.candidate)
        return True

    # -- pipeline ------------------------------------------------------------

    def extract_query(self, text: str) -> str | None:
        """Return the part of *text* to match, or None to skip matching.

        Without a delimiter the whole text is the query.  With one, the text
        must contain exactly one delimiter occurrence and the segment after
        it is the query.
        """
        if self._delimiter is None:
            return text
        if not any(ch in self._delimiter for ch in text):
            return None
        segments = re.split(f"[{re.escape(self._delimiter)}]", text)
        if len(segments) > 2:
            return None
        return segments[-1]

    def _process(self) -> None:
        query = self.extract_query(self.text)
        if query is None:
            log.debug("Skipping suggestion for %r", self.text)
            return

        candidates = resolve_candidates(self.source, self.field)
        candidate = match_candidate(
            query,
            candidates,
            ignore_case=self.ignore_case,
            randomize=self.random_suggestion,
            rng=self.rng,
        )
        if candidate is None:
            self.suggestion = None
            if self.state.editing:
                self.state = SuggestionState.EDITING_NO_MATCH
            return

        remainder = cull_text(candidate.text, query, self.ignore_case)
        # A stale rect only fits the same ghost text.
        previous_rect = None
        if self.suggestion is not None and self.suggestion.remainder == remainder:
            previous_rect = self.suggestion.rect
        rect = None
        if self.bounds is not None:
            rect = compute_overlay_rect(
                self.bounds,
                self.text,
                remainder,
                self.font,
                self.measurer,
                self.border_style,
            )
        self.suggestion = ActiveSuggestion(
            candidate=candidate,
            query=query,
            remainder=remainder,
            rect=rect if rect is not None else previous_rect,
        )
        if self.state.editing:
            self.state = SuggestionState.EDITING_MATCHED
