"""Subdivision record with translation support.

A subdivision is one administrative division of a country (state, province,
region, ...) as found in the raw dataset:

    CA:
      name: California
      type: state
      translations:
        fr: Californie
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Subdivision:
    """Immutable subdivision of a country."""

    code: str
    name: str
    type: str
    translations: Mapping[str, str] = field(default_factory=dict, compare=False)
    unofficial_names: tuple[str, ...] = field(default=(), compare=False)
    geo: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Freeze the caller's dicts so the record stays read-only
        object.__setattr__(self, "translations", MappingProxyType(dict(self.translations or {})))
        object.__setattr__(self, "geo", MappingProxyType(dict(self.geo or {})))
        object.__setattr__(self, "unofficial_names", tuple(self.unofficial_names or ()))

    @classmethod
    def from_raw(cls, code: str, raw: Mapping[str, Any]) -> Subdivision:
        """Build a subdivision from one raw dataset entry.

        Args:
            code: Subdivision code (the key of the entry)
            raw: Raw fields - name, type, translations, unofficial_names, geo

        Returns:
            Subdivision record
        """
        code = str(code)
        unofficial = raw.get("unofficial_names") or ()
        if isinstance(unofficial, str):
            unofficial = (unofficial,)

        return cls(
            code=code,
            name=str(raw.get("name") or code),
            type=str(raw.get("type") or ""),
            translations={str(k): str(v) for k, v in (raw.get("translations") or {}).items()},
            unofficial_names=tuple(str(n) for n in unofficial),
            geo=raw.get("geo") or {},
        )

    def match(self, query: str) -> bool:
        """Check if query is exactly the default name or one of the translations."""
        return query == self.name or query in self.translations.values()

    def translated_name(self, locale: str) -> str:
        """Get the name for a locale, or the default name if it has no translation."""
        return self.translations.get(locale, self.name)
