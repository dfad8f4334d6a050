"""Configuration models using Pydantic."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration.

    Every field can be set from the environment, e.g.
    COUNTRYKIT_DATA_DIR=/srv/subdivisions.
    """

    model_config = SettingsConfigDict(
        env_prefix="COUNTRYKIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    data_dir: Path | None = None  # None = bundled sample data
    default_locale: str = Field(default="en", min_length=1)
    file_suffixes: list[str] = [".yaml", ".yml", ".json"]

    @field_validator("file_suffixes")
    @classmethod
    def _dotted_suffixes(cls, value: list[str]) -> list[str]:
        return [s if s.startswith(".") else f".{s}" for s in value]

    @classmethod
    def from_yaml(cls, path: Path | str) -> Settings:
        """Load configuration from YAML file."""
        import yaml

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open() as f:
            data = yaml.safe_load(f)

        return cls(**data) if data else cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create configuration from dictionary."""
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump()
