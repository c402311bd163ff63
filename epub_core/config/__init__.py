"""
Configuration Management
========================

Configuration utilities for EPUB packaging.
"""

from epub_core.config.settings import (
    PackagingConfig,
    load_config,
    save_config,
    validate_config,
    configure_logging,
    get_default_config,
)

__all__ = [
    "PackagingConfig",
    "load_config",
    "save_config",
    "validate_config",
    "configure_logging",
    "get_default_config",
]
