"""Ghost-text input paired with an optional accept button."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.events import DescendantBlur, DescendantFocus
from textual.widget import Widget
from textual.widgets import Button

from ghostfield.candidates import CandidateSource
from ghostfield.models import ButtonViewMode
from ghostfield.widgets.ghost_text_input import GhostTextInput

DEFAULT_ACCEPT_ICON = "✓"


class GhostTextField(Widget):
    """A :class:`GhostTextInput` with an accept button on its right.

    The button stays hidden until :meth:`show_accept_button` installs it.
    Pressing it commits the current suggestion and ends editing.
    """

    DEFAULT_CSS = """
    GhostTextField {
        height: auto;
    }
    GhostTextField > Horizontal {
        height: auto;
    }
    GhostTextField GhostTextInput {
        width: 1fr;
    }
    GhostTextField .accept-button {
        min-width: 5;
        width: auto;
    }
    """

    def __init__(
        self,
        source: CandidateSource | None = None,
        *,
        value: str = "",
        placeholder: str = "",
        input_id: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        **input_options,
    ) -> None:
        """Initialize the field.

        Args:
            source: Candidate source for the inner input.
            value: Initial value.
            placeholder: Placeholder shown while empty.
            input_id: Widget id of the inner input.
            id: Widget id of the field.
            classes: CSS classes of the field.
            **input_options: Autocomplete options passed to GhostTextInput
                (``delimiter``, ``ignore_case``, ``random_suggestion``, ...).
        """
        super().__init__(id=id, classes=classes)
        self._input = GhostTextInput(
            source,
            value=value,
            placeholder=placeholder,
            id=input_id,
            **input_options,
        )
        self._button = Button(DEFAULT_ACCEPT_ICON, classes="accept-button")
        self._button.can_focus = False
        self._button.display = False
        self.button_view_mode = ButtonViewMode.NEVER

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield self._input
            yield self._button

    @property
    def input(self) -> GhostTextInput:
        """The inner ghost-text input."""
        return self._input

    @property
    def value(self) -> str:
        return self._input.value

    def show_accept_button(
        self,
        icon: str = DEFAULT_ACCEPT_ICON,
        view_mode: ButtonViewMode = ButtonViewMode.WHILE_EDITING,
    ) -> None:
        """Install the accept button.

        Args:
            icon: Label drawn on the button.
            view_mode: When the button is visible.
        """
        self._button.label = icon
        self.button_view_mode = view_mode
        self._update_button()

    def force_refresh(self) -> None:
        self._input.force_refresh()

    def _update_button(self) -> None:
        self._button.display = self.button_view_mode.is_visible(self._input.has_focus)

    def on_descendant_focus(self, event: DescendantFocus) -> None:
        self._update_button()

    def on_descendant_blur(self, event: DescendantBlur) -> None:
        self._update_button()

    @on(Button.Pressed, ".accept-button")
    def _accept(self, event: Button.Pressed) -> None:
        event.stop()
        self._input.action_accept()
