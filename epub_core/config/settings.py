"""
Configuration Settings
======================

Configuration dataclass for EPUB packaging.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, List, Dict, Any, Union
import json
import logging
import os

import yaml

logger = logging.getLogger(__name__)

COMPRESSION_METHODS = ("stored", "deflate")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PackagingConfig:
    """
    Packaging configuration.

    Attributes:
        compression: Compression for every entry except mimetype
            ("stored" or "deflate")
        compression_level: zlib level 0-9 for "deflate"; None uses the default
        max_workers: Thread pool size for the asynchronous packager
        unix_permissions: Permission bits recorded on each archive entry
        log_level: Level applied by configure_logging()

    Example:
        config = PackagingConfig(compression="deflate")
        save_config(config, Path("epub.yaml"))
    """

    compression: str = "stored"
    compression_level: Optional[int] = None
    max_workers: int = 4
    unix_permissions: int = 0o755
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PackagingConfig':
        """Create from dictionary, ignoring unknown keys."""
        known = {name: data[name] for name in cls.__dataclass_fields__ if name in data}
        unknown = set(data) - set(known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
        return cls(**known)

    @classmethod
    def from_env(cls) -> 'PackagingConfig':
        """
        Create configuration from environment variables.

        Environment variable naming:
        - EPUB_CORE_COMPRESSION
        - EPUB_CORE_COMPRESSION_LEVEL
        - EPUB_CORE_MAX_WORKERS
        - EPUB_CORE_LOG_LEVEL
        """
        config = cls()

        if env_compression := os.environ.get("EPUB_CORE_COMPRESSION"):
            config.compression = env_compression.lower()
        if env_level := os.environ.get("EPUB_CORE_COMPRESSION_LEVEL"):
            config.compression_level = int(env_level)
        if env_workers := os.environ.get("EPUB_CORE_MAX_WORKERS"):
            config.max_workers = int(env_workers)
        if env_log_level := os.environ.get("EPUB_CORE_LOG_LEVEL"):
            config.log_level = env_log_level.upper()

        return config


def load_config(config_path: Union[str, Path]) -> PackagingConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        PackagingConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Loaded configuration from {config_path}")
    return PackagingConfig.from_dict(data)


def save_config(config: PackagingConfig, config_path: Union[str, Path]) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config: PackagingConfig to save
        config_path: Path to save config file

    Raises:
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()
    if suffix not in ['.yaml', '.yml', '.json']:
        raise ValueError(f"Unsupported config format: {suffix}")
    data = config.to_dict()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)

    logger.info(f"Saved configuration to {config_path}")


def validate_config(config: PackagingConfig) -> List[str]:
    """
    Validate configuration and return list of errors.

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if config.compression not in COMPRESSION_METHODS:
        errors.append(
            f"compression must be one of {COMPRESSION_METHODS}, got '{config.compression}'"
        )
    if config.compression_level is not None and not 0 <= config.compression_level <= 9:
        errors.append(f"compression_level must be between 0 and 9, got {config.compression_level}")
    if config.max_workers < 1:
        errors.append(f"max_workers must be at least 1, got {config.max_workers}")
    if config.log_level.upper() not in LOG_LEVELS:
        errors.append(f"log_level must be one of {LOG_LEVELS}, got '{config.log_level}'")

    return errors


def configure_logging(config: PackagingConfig) -> None:
    """Apply the configured log level to the epub_core logger hierarchy."""
    logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger("epub_core").setLevel(config.log_level.upper())


def get_default_config() -> PackagingConfig:
    """Get default configuration."""
    return PackagingConfig()
