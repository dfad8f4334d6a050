"""countrykit - country subdivision lookup and queries."""

from countrykit.core.data.dataset import (
    SubdivisionDataset,
    get_default_dataset,
    set_default_dataset,
)
from countrykit.core.exceptions import CountryKitError, DatasetFormatError
from countrykit.core.geo.country import Country
from countrykit.core.geo.humanize import set_default_humanizer
from countrykit.core.geo.subdivision import Subdivision
from countrykit.core.models.config import Settings

__version__ = "0.1.0"

__all__ = [
    "Country",
    "CountryKitError",
    "DatasetFormatError",
    "Settings",
    "Subdivision",
    "SubdivisionDataset",
    "__version__",
    "get_default_dataset",
    "set_default_dataset",
    "set_default_humanizer",
]
