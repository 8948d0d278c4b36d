"""Errors raised by boxfinder."""

from __future__ import annotations


class BoxfinderError(ValueError):
    """Base class for user-facing boxfinder errors."""


class DimensionParseError(BoxfinderError):
    """A dimension string is not three integers separated by 'x'."""

    def __init__(self, text: str, source: str | None = None):
        self.text = text
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f'unparseable dimension "{text}"{where}')


class SidewaysWithoutHeightError(BoxfinderError):
    """Sideways matching was requested for a target without a height."""

    def __init__(self) -> None:
        super().__init__("Height must be specified for sideways mode")
