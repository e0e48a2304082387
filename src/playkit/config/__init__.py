"""Configuration module using Pydantic Settings.

Usage:
    from playkit.config import PlaygroundSettings

    settings = PlaygroundSettings(roll_max=6)
"""

from playkit.config.settings import PlaygroundSettings

__all__ = [
    "PlaygroundSettings",
]
