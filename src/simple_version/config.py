"""
Package configuration management.

This module loads the few knobs simple_version exposes from multiple sources
with a clear priority order:

    1. Environment variables (highest priority) - for CI and build scripts
    2. Config file (config/simple_version.ini) - for project-wide defaults
    3. Built-in defaults (lowest priority) - sensible fallbacks

Configuration is loaded once at module import time and cached. The
VersionConfig dataclass provides typed access to all settings.

Usage:
    from simple_version.config import config

    print(config.parsing.numeric_type)
    print(config.logging.level)

Environment Variable Mapping:
    SIMPLE_VERSION_CONFIG            -> path of the INI file to read
    SIMPLE_VERSION_NUMERIC_TYPE      -> parsing.numeric_type
    SIMPLE_VERSION_LOG_LEVEL         -> logging.level
    SIMPLE_VERSION_LOG_FORMAT        -> logging.format
"""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from simple_version.numeric import IntegerType, get_numeric_type

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Config file paths
CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "simple_version.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "simple_version.example.ini"


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class ParsingSettings:
    """Integer width used by the build-metadata helpers and the CLI."""

    numeric_type: str = "u32"

    @property
    def integer_type(self) -> IntegerType:
        """Resolve ``numeric_type`` to its IntegerType."""
        return get_numeric_type(self.numeric_type)


@dataclass
class LoggingSettings:
    """Logging configuration (applied by the CLI only)."""

    level: str = "WARNING"
    format: Literal["simple", "detailed"] = "simple"


@dataclass
class VersionConfig:
    """
    Complete package configuration.

    Aggregates all settings sections. Access via the module-level `config`
    singleton.
    """

    parsing: ParsingSettings = field(default_factory=ParsingSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    source: Path | None = None


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _load_from_ini(parser: configparser.ConfigParser, cfg: VersionConfig) -> None:
    """Load configuration from parsed INI file into VersionConfig."""
    # Parsing section
    if parser.has_section("parsing"):
        if parser.has_option("parsing", "numeric_type"):
            cfg.parsing.numeric_type = parser.get("parsing", "numeric_type").strip().lower()

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in ("simple", "detailed"):
                cfg.logging.format = val  # type: ignore[assignment]


def _apply_env_overrides(cfg: VersionConfig) -> None:
    """Apply environment variable overrides to configuration."""
    if env_numeric := os.getenv("SIMPLE_VERSION_NUMERIC_TYPE"):
        cfg.parsing.numeric_type = env_numeric.strip().lower()

    if env_log := os.getenv("SIMPLE_VERSION_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()
    if env_format := os.getenv("SIMPLE_VERSION_LOG_FORMAT"):
        val = env_format.lower()
        if val in ("simple", "detailed"):
            cfg.logging.format = val  # type: ignore[assignment]


def _resolve_config_file() -> Path | None:
    """Pick the INI file to read, or None when there is none."""
    if env_path := os.getenv("SIMPLE_VERSION_CONFIG"):
        path = Path(env_path)
        return path if path.exists() else None
    if CONFIG_FILE.exists():
        return CONFIG_FILE
    if CONFIG_EXAMPLE.exists():
        # Use example as fallback for development
        return CONFIG_EXAMPLE
    return None


def load_config() -> VersionConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. $SIMPLE_VERSION_CONFIG, else config/simple_version.ini
        3. config/simple_version.example.ini (fallback for development)
        4. Built-in defaults

    Unknown numeric type names are kept as-is here and rejected when they
    are resolved (see ParsingSettings.integer_type).

    Returns:
        VersionConfig: Fully populated configuration object.
    """
    cfg = VersionConfig()

    config_file = _resolve_config_file()
    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)
        cfg.source = config_file

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "VersionConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton in place so modules
    that imported it keep seeing current values.

    Returns:
        VersionConfig: The (updated) configuration singleton.
    """
    fresh = load_config()
    config.parsing = fresh.parsing
    config.logging = fresh.logging
    config.source = fresh.source
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

# Load configuration once at module import time
config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information, printed by
    ``simple-version config``.
    """
    return {
        "config_file_path": str(config.source) if config.source else None,
        "using_example": config.source == CONFIG_EXAMPLE,
        "numeric_type": config.parsing.numeric_type,
        "log_level": config.logging.level,
        "log_format": config.logging.format,
    }
