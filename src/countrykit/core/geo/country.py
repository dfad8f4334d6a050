"""Country entity with subdivision lookup and query methods.

Subdivisions are built lazily from either the country's own embedded data
(``data["subdivisions"]``) or the shared dataset, then cached for the
lifetime of the Country instance.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

import structlog

from countrykit.core.data.dataset import create_subdivisions, get_default_dataset
from countrykit.core.geo.humanize import Humanizer, get_default_humanizer

if TYPE_CHECKING:
    from countrykit.core.data.dataset import SubdivisionDataset
    from countrykit.core.geo.subdivision import Subdivision

logger = structlog.get_logger(__name__)


class Country:
    """A country identified by its ISO 3166-1 alpha-2 code."""

    def __init__(
        self,
        alpha2: str,
        data: Mapping[str, Any] | None = None,
        *,
        dataset: SubdivisionDataset | None = None,
        humanizer: Humanizer | None = None,
    ) -> None:
        """Initialize country.

        Args:
            alpha2: ISO 3166-1 alpha-2 code, e.g. "US"
            data: Raw country data; an embedded "subdivisions" mapping
                takes precedence over the shared dataset
            dataset: Dataset to look subdivisions up in (default: shared one)
            humanizer: Type humanizer (default: process-wide one)
        """
        self.alpha2 = alpha2.upper()
        self.data: Mapping[str, Any] = data or {}
        self._dataset = dataset
        self._humanizer = humanizer

        self._subdivisions: dict[str, Subdivision] | None = None
        self._subdivisions_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Country(alpha2={self.alpha2!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Country):
            return NotImplemented
        return self.alpha2 == other.alpha2

    def __hash__(self) -> int:
        return hash(self.alpha2)

    # ========================================================================
    # SUBDIVISION CACHE
    # ========================================================================

    @property
    def subdivisions(self) -> dict[str, Subdivision]:
        """Subdivisions of this country keyed by code, in source order."""
        if self._subdivisions is None:
            with self._subdivisions_lock:
                if self._subdivisions is None:
                    self._subdivisions = self._build_subdivisions()
        return self._subdivisions

    def _build_subdivisions(self) -> dict[str, Subdivision]:
        embedded = self.data.get("subdivisions")
        if embedded is not None:
            result = create_subdivisions(embedded)
            source = "embedded"
        else:
            dataset = self._dataset or get_default_dataset()
            result = dataset.subdivisions(self.alpha2)
            source = "dataset"

        logger.debug(
            "Built subdivision cache",
            country=self.alpha2,
            source=source,
            count=len(result),
        )
        return result

    # ========================================================================
    # QUERIES
    # ========================================================================

    def has_subdivisions(self) -> bool:
        """True if this country has any subdivisions."""
        return bool(self.subdivisions)

    def subdivision_for_string(self, query: str) -> bool:
        """Check if query is a subdivision code or a translated subdivision name.

        The default name is not checked, only codes and translations.
        Use find_subdivision_by_name() to match default names as well.
        """
        return any(
            query == code or query in subdivision.translations.values()
            for code, subdivision in self.subdivisions.items()
        )

    def find_subdivision_by_name(self, query: str) -> Subdivision | None:
        """Find a subdivision by code, name or translated name.

        When several subdivisions match, the one whose type comes first in
        subdivision_types() wins; equal types resolve to the first in
        dataset order.

        Args:
            query: Subdivision code or name, matched exactly

        Returns:
            Matching Subdivision or None
        """
        matches = [
            subdivision
            for code, subdivision in self.subdivisions.items()
            if query == code or subdivision.match(query)
        ]
        if not matches:
            return None

        rank = {type_: index for index, type_ in enumerate(self.subdivision_types())}
        return min(matches, key=lambda s: rank[s.type])

    def subdivisions_of_types(self, types: Iterable[str]) -> dict[str, Subdivision]:
        """Get subdivisions whose type is one of types."""
        wanted = set(types)
        return {code: s for code, s in self.subdivisions.items() if s.type in wanted}

    def subdivision_types(self) -> list[str]:
        """Distinct subdivision types in order of first occurrence."""
        return list(dict.fromkeys(s.type for s in self.subdivisions.values()))

    def humanized_subdivision_types(self) -> list[str]:
        """Subdivision types in display form, e.g. "Federal district"."""
        humanize = self._humanizer or get_default_humanizer()
        return [humanize(type_) for type_ in self.subdivision_types()]

    def subdivision_names_with_codes(self, locale: str = "en") -> list[tuple[str, str]]:
        """Get (name, code) pairs with names translated to locale when possible."""
        return [(s.translated_name(locale), code) for code, s in self.subdivisions.items()]

    def subdivision_names(self, locale: str = "en") -> list[str]:
        """Get subdivision names translated to locale when possible."""
        return [s.translated_name(locale) for s in self.subdivisions.values()]
