"""Textual widgets hosting the autocomplete controller."""

from __future__ import annotations

from ghostfield.widgets.ghost_text_field import GhostTextField
from ghostfield.widgets.ghost_text_input import GhostTextInput

__all__ = ["GhostTextField", "GhostTextInput"]
