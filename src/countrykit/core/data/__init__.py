"""Raw subdivision data providers."""

from countrykit.core.data.dataset import (
    BUNDLED_DATA_DIR,
    SubdivisionDataset,
    create_subdivisions,
    get_default_dataset,
    set_default_dataset,
)

__all__ = [
    "BUNDLED_DATA_DIR",
    "SubdivisionDataset",
    "create_subdivisions",
    "get_default_dataset",
    "set_default_dataset",
]
