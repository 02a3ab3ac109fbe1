"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Supports multiple sources (YAML, env vars, defaults)
- Easy to test with different configurations

User-facing preferences (durations, sound) are not stored here; they live in
the preferences document managed by CycleRepository.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class AppSettings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML config file (fills fields not given explicitly)
    3. Environment variables / constructor arguments (highest priority)
    """
    model_config = SettingsConfigDict(
        env_prefix='FOCUSTIMER_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        validate_assignment=True,
    )

    # Application paths
    app_name: str = "FocusTimer"
    config_dir: Optional[Path] = None
    data_dir: Optional[Path] = None

    # Session behaviour
    intervals_before_long_break: int = Field(default=4, gt=0)
    track_breaks: bool = Field(default=True, description="Persist break intervals as cycles too")

    # Activity sampling
    sample_interval_seconds: float = Field(default=10.0, gt=0)
    activity_tracking_enabled: bool = True

    log_level: str = "INFO"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        explicit = set(self.model_fields_set)
        self._init_config_dir()
        self._load_yaml_config(explicit)
        self._init_data_dir()

    def _init_config_dir(self):
        """Initialize default config path based on OS. Nothing is created on disk."""
        if self.config_dir is None:
            if os.name == 'nt':  # Windows
                base = Path(os.getenv('APPDATA', Path.home()))
            else:  # Linux/Mac
                base = Path.home() / '.config'
            self.config_dir = base / self.app_name.lower()

    def _init_data_dir(self):
        """Initialize default data path based on OS. The repository creates it lazily."""
        if self.data_dir is None:
            if os.name == 'nt':  # Windows
                base = Path(os.getenv('APPDATA', Path.home()))
            elif sys.platform == 'darwin':
                base = Path.home() / 'Library' / 'Application Support'
            else:  # Linux
                base = Path.home() / '.local' / 'share'
            self.data_dir = base / self.app_name.lower()

    def _load_yaml_config(self, explicit: set):
        """Load configuration from YAML file for fields not set explicitly"""
        # First check in workspace config folder
        config_file = Path("config/settings.yaml")
        if not config_file.exists():
            # Then check in user's config directory
            config_file = self.config_dir / "settings.yaml"

        if not config_file.exists():
            return

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", config_file, e)
            return

        if not isinstance(config_data, dict):
            return

        for key, value in config_data.items():
            if key in ("app_name", "config_dir"):
                continue
            if key in type(self).model_fields and key not in explicit:
                setattr(self, key, value)


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the application process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Reload settings from file"""
    global _settings
    _settings = AppSettings()
    return _settings
