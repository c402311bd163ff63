"""
Configuration Tests

Run with: pytest tests/test_config.py -v
"""

import logging

import pytest

from epub_core.config import (
    PackagingConfig,
    configure_logging,
    get_default_config,
    load_config,
    save_config,
    validate_config,
)


class TestPackagingConfig:
    """Tests for the configuration dataclass."""

    def test_defaults(self):
        """Defaults should describe a stored archive."""
        config = get_default_config()
        assert config.compression == "stored"
        assert config.compression_level is None
        assert config.max_workers == 4
        assert config.unix_permissions == 0o755
        assert validate_config(config) == []

    def test_from_dict_ignores_unknown_keys(self):
        """Unknown keys should be dropped."""
        config = PackagingConfig.from_dict({"compression": "deflate", "colour": "blue"})
        assert config.compression == "deflate"
        assert not hasattr(config, "colour")

    def test_from_env(self, monkeypatch):
        """EPUB_CORE_* variables should override defaults."""
        monkeypatch.setenv("EPUB_CORE_COMPRESSION", "DEFLATE")
        monkeypatch.setenv("EPUB_CORE_COMPRESSION_LEVEL", "6")
        monkeypatch.setenv("EPUB_CORE_MAX_WORKERS", "8")
        monkeypatch.setenv("EPUB_CORE_LOG_LEVEL", "debug")

        config = PackagingConfig.from_env()
        assert config.compression == "deflate"
        assert config.compression_level == 6
        assert config.max_workers == 8
        assert config.log_level == "DEBUG"


class TestConfigFiles:
    """Tests for loading and saving configuration files."""

    @pytest.mark.parametrize("filename", ["epub.json", "epub.yaml", "epub.yml"])
    def test_round_trip(self, tmp_path, filename):
        """Saved configuration should load back unchanged."""
        config = PackagingConfig(compression="deflate", compression_level=9, max_workers=2)
        path = tmp_path / "nested" / filename
        save_config(config, path)
        assert load_config(path) == config

    def test_missing_file(self, tmp_path):
        """Loading a missing file should fail."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")

    def test_unsupported_format(self, tmp_path):
        """Unknown extensions should be rejected without writing."""
        path = tmp_path / "epub.toml"
        with pytest.raises(ValueError):
            save_config(PackagingConfig(), path)
        assert not path.exists()

    def test_empty_yaml(self, tmp_path):
        """An empty YAML file should give the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == PackagingConfig()


class TestValidation:
    """Tests for validate_config."""

    def test_reports_every_problem(self):
        """All invalid fields should be reported."""
        config = PackagingConfig(compression="bzip2", compression_level=12,
                                 max_workers=0, log_level="LOUD")
        errors = validate_config(config)
        assert len(errors) == 4
        assert any("compression must be" in e for e in errors)
        assert any("max_workers" in e for e in errors)


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_sets_package_level(self):
        """The epub_core logger should get the configured level."""
        logger = logging.getLogger("epub_core")
        previous = logger.level
        try:
            configure_logging(PackagingConfig(log_level="debug"))
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
