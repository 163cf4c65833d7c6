"""Configuration management for realty."""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from realty.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class InventoryConfig:
    """Main configuration for the inventory manager.

    The defaults match a bare ``realty`` run: ``properties.csv`` in the
    working directory and only warnings on the console.
    """

    data_file: Path = field(default_factory=lambda: Path("properties.csv"))
    delimiter: str = ","
    log_level: str = "WARNING"
    log_format: str = "standard"
    seed: int | None = None

    def __post_init__(self) -> None:
        self.data_file = Path(self.data_file)
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r} (expected one of {', '.join(LOG_FORMATS)})"
            )
        if len(self.delimiter) != 1:
            raise ConfigurationError(f"Delimiter must be a single character, got {self.delimiter!r}")

    @classmethod
    def from_env(cls) -> "InventoryConfig":
        """Create config from environment variables."""
        import os

        seed_str = os.getenv("REALTY_SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError:
            raise ConfigurationError(f"REALTY_SEED must be an integer, got {seed_str!r}") from None

        return cls(
            data_file=Path(os.getenv("REALTY_DATA_FILE", "properties.csv")),
            log_level=os.getenv("REALTY_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("REALTY_LOG_FORMAT", "standard"),
            seed=seed,
        )

    def with_overrides(self, **overrides: Any) -> "InventoryConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
