"""Input widget that overlays a weighted autocomplete suggestion as ghost text."""

from __future__ import annotations

import random

from textual.events import Blur, Focus, Resize
from textual.message import Message
from textual.widgets import Input

from ghostfield.candidates import CandidateSource
from ghostfield.controller import AutocompleteController
from ghostfield.models import ActiveSuggestion, BorderStyle, Rect, WeightedCandidate


class GhostTextInput(Input):
    """An Input that shows the best matching candidate after the typed text.

    The dimmed remainder is appended to the value when the field loses
    focus, when Right is pressed at the end of the text, or when the accept
    action runs.  Every commit bumps the candidate's weight so frequently
    used completions win later matches.
    """

    class Committed(Message):
        """Posted when a suggestion has been committed into the value."""

        def __init__(
            self, input: GhostTextInput, value: str, candidate: WeightedCandidate
        ) -> None:
            super().__init__()
            self.input = input
            self.value = value
            self.candidate = candidate

        @property
        def control(self) -> GhostTextInput:
            return self.input

    def __init__(
        self,
        source: CandidateSource | None = None,
        *,
        ignore_case: bool = True,
        random_suggestion: bool = False,
        auto_complete_disabled: bool = False,
        clears_on_begin_editing: bool = False,
        delimiter: str | None = None,
        border_style: BorderStyle = BorderStyle.PLAIN,
        rng: random.Random | None = None,
        **kwargs,
    ) -> None:
        """Initialize the input.

        Args:
            source: Candidate source; the built-in domain list when None.
            ignore_case: Match case-insensitively.
            random_suggestion: Suggest a random match instead of the heaviest.
            auto_complete_disabled: Behave like a plain Input.
            clears_on_begin_editing: Clear the value whenever the field gains focus.
            delimiter: Characters splitting the value; only the last segment
                is completed.
            border_style: Border style used for overlay offset correction.
            rng: Random generator used with *random_suggestion*.
            **kwargs: Passed through to :class:`~textual.widgets.Input`.
        """
        super().__init__(**kwargs)
        self._controller = AutocompleteController(
            source,
            self,
            ignore_case=ignore_case,
            random_suggestion=random_suggestion,
            auto_complete_disabled=auto_complete_disabled,
            clears_on_begin_editing=clears_on_begin_editing,
            delimiter=delimiter,
            border_style=border_style,
            rng=rng,
        )
        self._controller.text = self.value
        self._controller.add_value_changed_callback(self._apply_commit)

    @property
    def controller(self) -> AutocompleteController:
        """The autocomplete state machine behind this input."""
        return self._controller

    @property
    def active_suggestion(self) -> ActiveSuggestion | None:
        """The suggestion currently matched, if any."""
        return self._controller.suggestion

    @property
    def candidate_source(self) -> CandidateSource | None:
        return self._controller.source

    @candidate_source.setter
    def candidate_source(self, source: CandidateSource | None) -> None:
        self._controller.source = source

    @property
    def auto_complete_disabled(self) -> bool:
        return self._controller.auto_complete_disabled

    @auto_complete_disabled.setter
    def auto_complete_disabled(self, disabled: bool) -> None:
        was_disabled = self._controller.auto_complete_disabled
        self._controller.auto_complete_disabled = disabled
        if disabled:
            self._controller.overlay_visible = False
            self._controller.suggestion = None
        elif was_disabled and self.has_focus:
            self._begin_editing()
        self._show_suggestion()

    @property
    def ignore_case(self) -> bool:
        return self._controller.ignore_case

    @ignore_case.setter
    def ignore_case(self, ignore_case: bool) -> None:
        self._controller.ignore_case = ignore_case

    @property
    def random_suggestion(self) -> bool:
        return self._controller.random_suggestion

    @random_suggestion.setter
    def random_suggestion(self, randomize: bool) -> None:
        self._controller.random_suggestion = randomize

    @property
    def clears_on_begin_editing(self) -> bool:
        return self._controller.clears_on_begin_editing

    @clears_on_begin_editing.setter
    def clears_on_begin_editing(self, clears: bool) -> None:
        self._controller.clears_on_begin_editing = clears

    @property
    def delimiter_characters(self) -> str | None:
        return self._controller.delimiter

    @delimiter_characters.setter
    def delimiter_characters(self, characters: str | None) -> None:
        self._controller.set_delimiter(characters)

    def set_delimiter(self, characters: str | None) -> None:
        """Only complete the text after one of *characters*."""
        self._controller.set_delimiter(characters)

    @property
    def field_border_style(self) -> BorderStyle:
        return self._controller.border_style

    @field_border_style.setter
    def field_border_style(self, style: BorderStyle) -> None:
        self._controller.border_style = style

    def force_refresh(self) -> None:
        """Recompute the suggestion, e.g. after the candidate source changed."""
        self._sync_bounds()
        self._controller.force_refresh()
        self._show_suggestion()

    def action_accept(self) -> None:
        """Commit the suggestion and end editing."""
        self._controller.accept()
        self._show_suggestion()
        if self.has_focus:
            self.blur()

    def action_cursor_right(self, select: bool = False) -> None:
        """Commit the suggestion when Right is pressed at the end of the text."""
        at_end = self.cursor_position >= len(self.value)
        if self._suggestion and at_end and not select:
            self._controller.commit()
            self._show_suggestion()
            return
        super().action_cursor_right(select)

    def on_focus(self, event: Focus) -> None:
        self._begin_editing()
        self._show_suggestion()

    def on_blur(self, event: Blur) -> None:
        if self.value != self._controller.text:
            # A Changed message for the latest edit is still queued.
            self._controller.text_changed(self.value)
        self._controller.focus_lost()
        self._show_suggestion()

    def on_resize(self, event: Resize) -> None:
        self._sync_bounds()
        if self.has_focus:
            self._controller.force_refresh()
            self._show_suggestion()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Feed value edits to the controller."""
        if event.input is not self:
            return
        self._sync_bounds()
        self._controller.text_changed(event.value)
        self._show_suggestion()

    def _apply_commit(self, text: str, candidate: WeightedCandidate) -> None:
        self.value = text
        self.cursor_position = len(text)
        self.post_message(self.Committed(self, text, candidate))

    def _begin_editing(self) -> None:
        self._sync_bounds()
        self._controller.text = self.value
        self._controller.focus_gained()
        if self.value != self._controller.text:
            self.value = self._controller.text

    def _sync_bounds(self) -> None:
        width, height = self.content_size
        self._controller.bounds = Rect(0, 0, width, height)

    def _show_suggestion(self) -> None:
        """Mirror the controller's ghost text into Input's suggestion slot."""
        suggestion = self._controller.suggestion
        if (
            self._controller.overlay_visible
            and suggestion is not None
            and suggestion.visible
            and self.value == self._controller.text
        ):
            self._suggestion = self.value + suggestion.remainder
        else:
            self._suggestion = ""
