"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse HIGHERLOWER_SEED environment variable."""
    raw = os.getenv("HIGHERLOWER_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"HIGHERLOWER_SEED must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """Game configuration."""

    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
