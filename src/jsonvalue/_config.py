"""
Rendering configuration and environment feature flags.
"""

import os
from dataclasses import dataclass

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JSONVALUE_PROFILE" in os.environ


@dataclass(frozen=True)
class RenderConfig:
    """
    Configures JSON text rendering with immutable settings.

    The layout of the output is fixed; only character escaping varies.
    """

    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.ensure_ascii, bool):
            raise TypeError("ensure_ascii must be a boolean")


DEFAULT_RENDER_CONFIG = RenderConfig()
