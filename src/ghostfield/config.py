"""Configuration and usage persistence for ghostfield.

Settings live in ``~/.config/ghostfield/config.toml``::

    [autocomplete]
    ignore_case = true
    random_suggestion = false
    delimiter = "@"

    [usage]
    "gmail.com" = 4

Command-line flags override the ``[autocomplete]`` table.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ghostfield.models import WeightedCandidate

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

log = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "ghostfield" / "config.toml"

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")


@dataclass
class AutocompleteSettings:
    """Autocomplete behaviour options."""

    disabled: bool = False
    ignore_case: bool = True
    random_suggestion: bool = False
    delimiter: str | None = None
    clears_on_begin_editing: bool = False


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        log.warning("Ignoring unreadable config %s: %s", _CONFIG_PATH, exc)
        return {}


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_key(key: str) -> str:
    if _BARE_KEY.fullmatch(key):
        return key
    return _format_value(key)


def _save_config_dict(data: dict) -> None:
    """Write a config dict to config.toml, preserving nested sections.

    Top-level values are written first, followed by any nested dict sections
    (e.g. ``[usage]``).  Keys that are not bare TOML keys, like domain names
    containing dots, are quoted.
    """
    _CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = []
    sections: dict[str, dict] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            sections[key] = value
        elif value is not None:
            lines.append(f"{_format_key(key)} = {_format_value(value)}")
    for section_name, section_dict in sections.items():
        lines.append(f"\n[{_format_key(section_name)}]")
        for k, v in section_dict.items():
            if v is not None:
                lines.append(f"{_format_key(k)} = {_format_value(v)}")
    _CONFIG_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")


def load_settings() -> AutocompleteSettings:
    """Load the ``[autocomplete]`` section of config.toml.

    Values of the wrong type are ignored and keep their default.

    Returns:
        The settings, with defaults for anything not configured.
    """
    section = _load_config_dict().get("autocomplete", {})
    settings = AutocompleteSettings()
    if not isinstance(section, dict):
        return settings
    for name in ("disabled", "ignore_case", "random_suggestion", "clears_on_begin_editing"):
        value = section.get(name)
        if isinstance(value, bool):
            setattr(settings, name, value)
    delimiter = section.get("delimiter")
    if isinstance(delimiter, str) and delimiter:
        settings.delimiter = delimiter
    return settings


def load_usage() -> dict[str, int]:
    """Load per-candidate usage counts from the ``[usage]`` section.

    Returns:
        A dict mapping candidate text to its stored weight.  Entries that
        are not non-negative integers are skipped.
    """
    usage = _load_config_dict().get("usage", {})
    if not isinstance(usage, dict):
        return {}
    return {
        str(text): count
        for text, count in usage.items()
        if isinstance(count, int) and not isinstance(count, bool) and count >= 0
    }


def save_usage(candidates: Iterable[WeightedCandidate]) -> None:
    """Persist the weights of used candidates to the ``[usage]`` section.

    Candidates with a zero weight are not written.  When the same text
    appears more than once the highest weight is kept.

    Args:
        candidates: Candidates whose weights should be stored.
    """
    data = _load_config_dict()
    usage: dict[str, int] = {}
    for candidate in candidates:
        if candidate.weight > 0:
            usage[candidate.text] = max(candidate.weight, usage.get(candidate.text, 0))
    data["usage"] = usage
    _save_config_dict(data)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace. Options left unset are None so that config.toml
        values can fill them in.
    """
    parser = argparse.ArgumentParser(
        prog="ghostfield",
        description="An e-mail field with inline domain autocompletion.",
    )
    parser.add_argument(
        "-d",
        "--delimiter",
        help="Characters after which the domain is completed (default '@').",
        default=None,
    )
    parser.add_argument(
        "--random",
        action="store_true",
        default=None,
        help="Suggest a random matching domain instead of the most used one.",
    )
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        default=None,
        help="Match domains case-sensitively.",
    )
    parser.add_argument(
        "--disabled",
        action="store_true",
        default=None,
        help="Turn autocompletion off.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to the Textual console.",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> AutocompleteSettings:
    """Merge command-line flags over the config.toml settings.

    Args:
        args: Namespace returned by :func:`parse_args`.

    Returns:
        The effective settings.
    """
    settings = load_settings()
    if args.delimiter is not None:
        settings.delimiter = args.delimiter or None
    elif settings.delimiter is None:
        settings.delimiter = "@"
    if args.random:
        settings.random_suggestion = True
    if args.case_sensitive:
        settings.ignore_case = False
    if args.disabled:
        settings.disabled = True
    return settings
