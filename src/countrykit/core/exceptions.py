"""Exceptions raised by countrykit."""

from __future__ import annotations

from pathlib import Path


class CountryKitError(Exception):
    """Base class for countrykit errors."""

    pass


class DatasetFormatError(CountryKitError):
    """Raised when a subdivision data file cannot be read as a mapping."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid subdivision data file {self.path}: {reason}")
