"""Humanization of identifier-like subdivision types.

"federal_district" -> "Federal district"

The default transform can be replaced process-wide with
``set_default_humanizer`` or per Country via its ``humanizer`` argument.
"""

from __future__ import annotations

from collections.abc import Callable

Humanizer = Callable[[str], str]


def humanize_string(value: str) -> str:
    """Replace underscores with spaces and capitalize the first character."""
    if not value:
        return value
    text = value.replace("_", " ")
    return text[0].upper() + text[1:]


_default_humanizer: Humanizer = humanize_string


def get_default_humanizer() -> Humanizer:
    """Get the process-wide humanizer."""
    return _default_humanizer


def set_default_humanizer(humanizer: Humanizer | None) -> None:
    """Replace the process-wide humanizer. None restores the built-in one."""
    global _default_humanizer
    _default_humanizer = humanizer or humanize_string
