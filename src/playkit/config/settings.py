"""Playground settings: roll bounds, seed, lucky number and vacation grant.

Every value has a default matching the walkthrough scripts. A PLAYGROUND_*
environment variable or a .env entry replaces it, and keyword arguments
replace both, so tests and examples can pin a seed without touching the
environment.

Usage:
    from playkit.config import PlaygroundSettings

    # Load from environment variables (PLAYGROUND_*)
    settings = PlaygroundSettings()

    # Or override with explicit values
    settings = PlaygroundSettings(roll_max=6, seed=1234)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install playkit[config]"
    ) from e


class PlaygroundSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for producers and example models.

    Attributes:
        roll_min: Smallest value a configured roller returns.
        roll_max: Largest value a configured roller returns.
        seed: Random seed for reproducible rolls (None for nondeterministic).
        lucky_number: Number pinned to the front by sort_pinned_first in examples.
        vacation_days: Default vacation allocation for new ledgers.

    Environment Variables:
        PLAYGROUND_ROLL_MIN
        PLAYGROUND_ROLL_MAX
        PLAYGROUND_SEED
        PLAYGROUND_LUCKY_NUMBER
        PLAYGROUND_VACATION_DAYS
    """

    model_config = SettingsConfigDict(
        env_prefix="PLAYGROUND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    roll_min: int = 1
    roll_max: int = 20
    seed: int | None = None
    lucky_number: int = 7
    vacation_days: int = 14
