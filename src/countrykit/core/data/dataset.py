"""Shared subdivision dataset.

Provides raw per-country subdivision data, indexed by alpha-2 code, from:
- In-memory registrations (checked first)
- One data file per country in a data directory: US.yaml, CA.json, ...

Files are read lazily on first request and cached.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from countrykit.core.exceptions import DatasetFormatError
from countrykit.core.geo.subdivision import Subdivision
from countrykit.core.models.config import Settings

logger = structlog.get_logger(__name__)

# Bundled sample data: src/countrykit/core/data -> src/countrykit/resources
BUNDLED_DATA_DIR = Path(__file__).parent.parent.parent / "resources" / "subdivisions"

DEFAULT_SUFFIXES = (".yaml", ".yml", ".json")


def create_subdivisions(raw: Mapping[Any, Mapping[str, Any]] | None) -> dict[str, Subdivision]:
    """Build Subdivision records from a raw payload, keeping source order."""
    if not raw:
        return {}
    return {str(code): Subdivision.from_raw(str(code), fields or {}) for code, fields in raw.items()}


class SubdivisionDataset:
    """Process-wide provider of raw subdivision data."""

    def __init__(
        self,
        data_dir: Path | str | None = None,
        suffixes: Iterable[str] = DEFAULT_SUFFIXES,
    ) -> None:
        """Initialize dataset.

        Args:
            data_dir: Directory holding <ALPHA2>.<suffix> files, or None
                for in-memory registrations only
            suffixes: File suffixes to probe, in order
        """
        self.data_dir = Path(data_dir) if data_dir is not None else None
        self.suffixes = tuple(suffixes)
        self._registered: dict[str, Mapping[str, Any]] = {}
        self._file_cache: dict[str, Mapping[str, Any]] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SubdivisionDataset:
        """Create dataset from settings, falling back to bundled data."""
        settings = settings or Settings()
        return cls(
            data_dir=settings.data_dir or BUNDLED_DATA_DIR,
            suffixes=settings.file_suffixes,
        )

    def __repr__(self) -> str:
        return f"SubdivisionDataset(data_dir={str(self.data_dir)!r})"

    def register(self, alpha2: str, raw_subdivisions: Mapping[str, Any]) -> None:
        """Register raw subdivision data for a country, replacing any previous."""
        alpha2 = alpha2.upper()
        self._registered[alpha2] = raw_subdivisions
        logger.debug("Registered subdivisions", country=alpha2, count=len(raw_subdivisions))

    def raw_subdivisions(self, alpha2: str) -> Mapping[str, Any]:
        """Get the raw subdivision payload for a country.

        Returns:
            Raw mapping code -> fields (empty for unknown countries)
        """
        alpha2 = alpha2.upper()
        if alpha2 in self._registered:
            return self._registered[alpha2]

        cached = self._file_cache.get(alpha2)
        if cached is not None:
            return cached

        with self._lock:
            if alpha2 not in self._file_cache:
                self._file_cache[alpha2] = self._load_file(alpha2)
            return self._file_cache[alpha2]

    def subdivisions(self, alpha2: str) -> dict[str, Subdivision]:
        """Build Subdivision records for a country."""
        return create_subdivisions(self.raw_subdivisions(alpha2))

    def available_countries(self) -> list[str]:
        """List alpha-2 codes with registered or on-disk data."""
        codes = set(self._registered)
        if self.data_dir is not None and self.data_dir.is_dir():
            for path in self.data_dir.iterdir():
                if path.is_file() and path.suffix in self.suffixes:
                    codes.add(path.stem.upper())
        return sorted(codes)

    def clear_cache(self) -> None:
        """Drop file-read results. Registrations are kept."""
        with self._lock:
            self._file_cache.clear()

    def _find_file(self, alpha2: str) -> Path | None:
        if self.data_dir is None:
            return None
        for suffix in self.suffixes:
            path = self.data_dir / f"{alpha2}{suffix}"
            if path.is_file():
                return path
        return None

    def _load_file(self, alpha2: str) -> Mapping[str, Any]:
        path = self._find_file(alpha2)
        if path is None:
            logger.debug("No subdivision data", country=alpha2, data_dir=str(self.data_dir))
            return {}

        try:
            content = path.read_text(encoding="utf-8")
            data = json.loads(content) if path.suffix == ".json" else yaml.safe_load(content)
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error("Failed to parse subdivision data", path=str(path), error=str(e))
            raise DatasetFormatError(path, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            logger.error(
                "Subdivision data is not a mapping",
                path=str(path),
                found=type(data).__name__,
            )
            raise DatasetFormatError(path, f"expected a mapping, got {type(data).__name__}")

        for code, fields in data.items():
            reason = _entry_error(fields)
            if reason:
                logger.error(
                    "Invalid subdivision entry",
                    path=str(path),
                    code=str(code),
                    error=reason,
                )
                raise DatasetFormatError(path, f"entry {code!r}: {reason}")

        logger.debug("Loaded subdivision data", country=alpha2, path=str(path), count=len(data))
        return data


def _entry_error(fields: Any) -> str | None:
    """Describe what is wrong with one raw entry, or None if it is usable."""
    if fields is None:
        return None
    if not isinstance(fields, Mapping):
        return f"expected a mapping, got {type(fields).__name__}"
    for key in ("translations", "geo"):
        value = fields.get(key)
        if value is not None and not isinstance(value, Mapping):
            return f"{key} must be a mapping, got {type(value).__name__}"
    return None


# ============================================================================
# DEFAULT DATASET
# ============================================================================

_default_dataset: SubdivisionDataset | None = None
_default_lock = threading.Lock()


def get_default_dataset() -> SubdivisionDataset:
    """Get the shared dataset, creating it from Settings on first use."""
    global _default_dataset
    if _default_dataset is None:
        with _default_lock:
            if _default_dataset is None:
                _default_dataset = SubdivisionDataset.from_settings()
    return _default_dataset


def set_default_dataset(dataset: SubdivisionDataset | None) -> None:
    """Replace the shared dataset. None resets it to be rebuilt from Settings."""
    global _default_dataset
    with _default_lock:
        _default_dataset = dataset
