"""Global test fixtures for countrykit."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from countrykit.core.data.dataset import SubdivisionDataset, set_default_dataset
from countrykit.core.geo.country import Country
from countrykit.core.geo.humanize import set_default_humanizer

# ============================================================================
# RAW DATA
# ============================================================================

US_RAW: dict[str, Any] = {
    "CA": {"name": "California", "type": "state"},
    "TX": {"name": "Texas", "type": "state"},
}

# Same name used at two levels, county listed first in source order but the
# state type occurs first in the type ordering
SPRINGFIELD_RAW: dict[str, Any] = {
    "IL": {"name": "Illinois", "type": "state"},
    "SPR-C": {"name": "Springfield", "type": "county"},
    "SPR-S": {
        "name": "Springfield State",
        "type": "state",
        "translations": {"fr": "Springfield"},
    },
    "SPR-X": {"name": "Springfield", "type": "county"},
}

FR_RAW: dict[str, Any] = {
    "ARA": {
        "name": "Auvergne-Rhône-Alpes",
        "type": "metropolitan_region",
        "translations": {"en": "Auvergne-Rhone-Alpes", "de": "Auvergne-Rhône-Alpes"},
    },
    "IDF": {
        "name": "Île-de-France",
        "type": "metropolitan_region",
        "translations": {"en": "Ile-de-France", "de": "Île-de-France", "es": "Isla de Francia"},
    },
    "75C": {"name": "Paris", "type": "metropolitan_collectivity_with_special_status"},
    "971": {
        "name": "Guadeloupe",
        "type": "overseas_department",
        "translations": {"en": "Guadeloupe", "de": ""},
    },
    "COR": {"name": "Corse", "type": "metropolitan_collectivity_with_special_status",
            "translations": {"en": "Corsica"}},
}


@pytest.fixture
def us_raw() -> dict[str, Any]:
    return {code: dict(fields) for code, fields in US_RAW.items()}


@pytest.fixture
def springfield_raw() -> dict[str, Any]:
    return SPRINGFIELD_RAW


@pytest.fixture
def fr_raw() -> dict[str, Any]:
    return FR_RAW


# ============================================================================
# DATASETS AND COUNTRIES
# ============================================================================


@pytest.fixture
def dataset(us_raw, fr_raw) -> SubdivisionDataset:
    """In-memory dataset with US and FR registered."""
    ds = SubdivisionDataset()
    ds.register("US", us_raw)
    ds.register("FR", fr_raw)
    return ds


@pytest.fixture
def us(dataset) -> Country:
    return Country("US", dataset=dataset)


@pytest.fixture
def fr(dataset) -> Country:
    return Country("FR", dataset=dataset)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory with one YAML and one JSON country file."""
    (tmp_path / "US.yaml").write_text(
        '"CA":\n'
        "  name: California\n"
        "  type: state\n"
        "  translations:\n"
        "    fr: Californie\n"
        '"DC":\n'
        "  name: District of Columbia\n"
        "  type: federal_district\n",
        encoding="utf-8",
    )
    (tmp_path / "DE.json").write_text(
        '{"BY": {"name": "Bayern", "type": "land", "translations": {"en": "Bavaria"}},'
        ' "BE": {"name": "Berlin", "type": "land"}}',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture(autouse=True)
def reset_defaults():
    """Keep process-wide defaults from leaking between tests."""
    yield
    set_default_dataset(None)
    set_default_humanizer(None)
