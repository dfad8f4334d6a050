"""Core data models."""

from countrykit.core.models.config import Settings

__all__ = ["Settings"]
