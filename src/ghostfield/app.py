"""Demo Textual application: an e-mail field with domain autocompletion."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, Label, Static

from ghostfield.candidates import CandidateList, default_domain_texts
from ghostfield.config import AutocompleteSettings, load_usage, save_usage
from ghostfield.models import ButtonViewMode
from ghostfield.widgets.ghost_text_field import GhostTextField
from ghostfield.widgets.ghost_text_input import GhostTextInput


class GhostFieldApp(App):
    """Type an address; the domain after the delimiter is completed inline."""

    TITLE = "ghostfield"

    CSS = """
    #form {
        padding: 1 2;
        height: auto;
    }
    #status-bar {
        color: $text-muted;
        padding: 0 2;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "refresh_suggestion", "Refresh", show=False),
    ]

    def __init__(
        self,
        settings: AutocompleteSettings | None = None,
        candidates: CandidateList | None = None,
        persist_usage: bool = True,
    ) -> None:
        """Initialize the app.

        Args:
            settings: Autocomplete options for the e-mail field.
            candidates: Domains to complete; the built-in list seeded with
                stored usage counts when None.
            persist_usage: Save usage counts to config.toml after each commit.
        """
        super().__init__()
        self.settings = settings or AutocompleteSettings(delimiter="@")
        self.persist_usage = persist_usage
        if candidates is None:
            usage = load_usage() if persist_usage else {}
            candidates = CandidateList.from_texts(default_domain_texts(), usage)
        self.candidates = candidates

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        with Vertical(id="form"):
            yield Label("E-mail")
            yield GhostTextField(
                self.candidates,
                placeholder="you@example.com",
                id="email-field",
                input_id="email",
                delimiter=self.settings.delimiter,
                ignore_case=self.settings.ignore_case,
                random_suggestion=self.settings.random_suggestion,
                auto_complete_disabled=self.settings.disabled,
                clears_on_begin_editing=self.settings.clears_on_begin_editing,
            )
            yield Label("Name")
            yield Input(placeholder="Your name", id="name")
        yield Static("", id="status-bar")

    def on_mount(self) -> None:
        """Install the accept button and focus the e-mail field."""
        field = self.query_one("#email-field", GhostTextField)
        field.show_accept_button(view_mode=ButtonViewMode.WHILE_EDITING)
        field.input.focus()

    def on_ghost_text_input_committed(self, event: GhostTextInput.Committed) -> None:
        """Report the committed address and persist the usage counter."""
        self.query_one("#status-bar", Static).update(
            f"Completed {event.candidate.text} (used {event.candidate.weight}x)"
        )
        if self.persist_usage:
            save_usage(self.candidates.candidates)

    def action_refresh_suggestion(self) -> None:
        """Recompute the suggestion for the e-mail field."""
        self.query_one("#email-field", GhostTextField).force_refresh()
