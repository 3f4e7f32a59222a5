"""Data models for weighted candidates, suggestion state and overlay geometry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(eq=False)
class WeightedCandidate:
    """A candidate completion with a usage weight.

    Candidates compare by identity so that two entries with the same text
    remain distinct, each with its own usage counter.
    """

    text: str
    weight: int = 0

    def __setattr__(self, name: str, value) -> None:
        if name == "text" and "text" in self.__dict__:
            raise AttributeError("candidate text cannot be changed")
        super().__setattr__(name, value)

    def record_usage(self) -> None:
        """Increment the weight by one accepted suggestion."""
        self.weight += 1


class BorderStyle(Enum):
    """Border style of the host field, used to nudge the overlay position."""

    PLAIN = "plain"
    ROUNDED = "rounded"
    UNDERLINE = "underline"
    NONE = "none"

    @property
    def x_offset(self) -> float:
        """Horizontal correction applied after the caret."""
        match self:
            case BorderStyle.ROUNDED | BorderStyle.UNDERLINE:
                return 6.0
            case BorderStyle.NONE:
                return 1.0
            case _:
                return 0.0

    @property
    def y_offset(self) -> float:
        """Vertical correction subtracted from the centred position."""
        match self:
            case BorderStyle.ROUNDED | BorderStyle.UNDERLINE:
                return 0.5
            case _:
                return 0.0


class ButtonViewMode(Enum):
    """When the accept button is shown."""

    ALWAYS = "always"
    WHILE_EDITING = "while-editing"
    UNLESS_EDITING = "unless-editing"
    NEVER = "never"

    def is_visible(self, editing: bool) -> bool:
        """Return whether the button shows for the given editing state."""
        match self:
            case ButtonViewMode.ALWAYS:
                return True
            case ButtonViewMode.WHILE_EDITING:
                return editing
            case ButtonViewMode.UNLESS_EDITING:
                return not editing
            case ButtonViewMode.NEVER:
                return False


class SuggestionState(Enum):
    """Autocomplete controller state."""

    IDLE = "idle"
    EDITING_NO_MATCH = "editing-no-match"
    EDITING_MATCHED = "editing-matched"

    @property
    def editing(self) -> bool:
        """Return True while the field has focus."""
        return self is not SuggestionState.IDLE


@dataclass(frozen=True)
class Size:
    """A width and height in layout units."""

    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in layout units."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        """Return True when the rectangle has no area."""
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Font:
    """Font metrics handed to the text measurer.

    Terminal fonts are monospaced, so a cell width and a line height are
    all the measurer needs.
    """

    family: str = "monospace"
    cell_width: float = 1.0
    line_height: float = 1.0


@dataclass
class ActiveSuggestion:
    """The suggestion currently overlaid on the field."""

    candidate: WeightedCandidate
    query: str
    remainder: str
    rect: Rect | None = None

    @property
    def visible(self) -> bool:
        """Return False when the overlay collapsed to zero width."""
        if not self.remainder:
            return False
        return self.rect is None or self.rect.width > 0
