"""Subdivision records and humanization helpers.

Country lives in countrykit.core.geo.country; it depends on the dataset,
which in turn depends on the records exported here.
"""

from countrykit.core.geo.humanize import (
    Humanizer,
    get_default_humanizer,
    humanize_string,
    set_default_humanizer,
)
from countrykit.core.geo.subdivision import Subdivision

__all__ = [
    "Humanizer",
    "Subdivision",
    "get_default_humanizer",
    "humanize_string",
    "set_default_humanizer",
]
