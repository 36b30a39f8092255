"""Platform abstraction layer."""

from .paths import (
    clear_caches,
    home,
    user_config_dir,
)

__all__ = [
    "clear_caches",
    "home",
    "user_config_dir",
]
