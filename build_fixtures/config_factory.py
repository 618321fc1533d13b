"""
Configuration Factory - Centralized configuration management for build-fixtures
Provides type-safe configuration with validation and environment-specific settings.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from enum import Enum
from dataclasses import dataclass, field

_LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


class Environment(Enum):
    """Environment types for configuration"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"


class ConfigError(Exception):
    """Configuration-related errors"""
    pass


@dataclass
class FixtureConfig:
    """Fixture configuration with type safety and validation"""

    # Base directory that source-root paths are resolved against; the working
    # directory of the test run unless configured
    project_root: str = field(default_factory=os.getcwd)
    source_root_marker: str = 'src/'

    # Task builder naming conventions
    task_builder_dir: str = 'src/task_builders'
    task_builder_suffix: str = 'TaskBuilder'
    import_key_suffix: str = 'Mock'

    # Mock return values
    task_return_template: str = '_{name}_task_ret_'
    dest_return_value: str = '_dest_ret_'

    log_level: str = 'info'

    environment: Environment = Environment.TESTING

    def __post_init__(self):
        """Validate configuration after initialization"""
        self._validate()

    def _validate(self):
        """Validate configuration values"""
        if not self.project_root:
            raise ConfigError("Invalid project_root: value must not be empty")

        if not self.source_root_marker or not self.source_root_marker.endswith('/'):
            raise ConfigError(f"Invalid source_root_marker: {self.source_root_marker!r}")

        if not self.task_builder_dir:
            raise ConfigError("Invalid task_builder_dir: value must not be empty")

        if not self.task_builder_suffix.isidentifier():
            raise ConfigError(f"Invalid task_builder_suffix: {self.task_builder_suffix!r}")

        if not self.import_key_suffix.isidentifier():
            raise ConfigError(f"Invalid import_key_suffix: {self.import_key_suffix!r}")

        if '{name}' not in self.task_return_template:
            raise ConfigError(f"Invalid task_return_template: {self.task_return_template!r}")

        if self.log_level.lower() not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log_level: {self.log_level}")

    @property
    def project_path(self) -> Path:
        """Project root as a resolved path"""
        return Path(self.project_root).resolve()


class ConfigurationFactory:
    """
    Factory for creating and managing fixture configuration.

    Features:
    - Environment variable loading
    - Configuration validation
    - Singleton pattern for global config access
    """

    _instance: Optional['ConfigurationFactory'] = None
    _config: Optional[FixtureConfig] = None

    def __new__(cls) -> 'ConfigurationFactory':
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the configuration factory"""
        if not hasattr(self, '_initialized'):
            self._logger = logging.getLogger(__name__)
            self._env_overrides: Dict[str, Any] = {}
            self._initialized = True

    def load_from_environment(self, env_prefix: str = 'BUILD_FIXTURES_') -> FixtureConfig:
        """
        Load configuration from environment variables.

        Args:
            env_prefix: Prefix for environment variables (e.g., 'BUILD_FIXTURES_')

        Returns:
            Configured FixtureConfig instance
        """
        def get_env_var(key: str, default: Optional[str] = None) -> Optional[str]:
            """Get environment variable"""
            env_key = f"{env_prefix}{key}" if env_prefix else key
            return os.environ.get(env_key, default)

        env_name = get_env_var('ENVIRONMENT', Environment.TESTING.value)
        try:
            environment = Environment(env_name.lower())
        except ValueError:
            raise ConfigError(f"Invalid environment: {env_name}")

        config = FixtureConfig(
            project_root=get_env_var('PROJECT_ROOT', os.getcwd()),
            source_root_marker=get_env_var('SOURCE_ROOT_MARKER', 'src/'),

            task_builder_dir=get_env_var('TASK_BUILDER_DIR', 'src/task_builders'),
            task_builder_suffix=get_env_var('TASK_BUILDER_SUFFIX', 'TaskBuilder'),
            import_key_suffix=get_env_var('IMPORT_KEY_SUFFIX', 'Mock'),

            task_return_template=get_env_var('TASK_RETURN_TEMPLATE', '_{name}_task_ret_'),
            dest_return_value=get_env_var('DEST_RETURN_VALUE', '_dest_ret_'),

            log_level=get_env_var('LOG_LEVEL', 'info'),

            environment=environment
        )

        # Apply any manual overrides
        for key, value in self._env_overrides.items():
            if hasattr(config, key):
                setattr(config, key, value)
        config._validate()

        self._config = config
        self._logger.info(f"Configuration loaded for environment: {environment.value}")
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> FixtureConfig:
        """
        Load configuration from dictionary (useful for testing).

        Args:
            config_dict: Dictionary of configuration values

        Returns:
            Configured FixtureConfig instance
        """
        config_dict = dict(config_dict)
        if 'environment' in config_dict and isinstance(config_dict['environment'], str):
            config_dict['environment'] = Environment(config_dict['environment'])

        self._config = FixtureConfig(**config_dict)
        return self._config

    def override_setting(self, key: str, value: Any) -> 'ConfigurationFactory':
        """
        Override a specific configuration setting.

        Args:
            key: Configuration key to override
            value: New value for the setting

        Returns:
            Self for method chaining
        """
        self._env_overrides[key] = value

        if self._config and hasattr(self._config, key):
            setattr(self._config, key, value)
            self._config._validate()

        return self

    def get_config(self) -> FixtureConfig:
        """
        Get the current configuration.

        Returns:
            Current FixtureConfig instance

        Raises:
            ConfigError: If no configuration has been loaded
        """
        if self._config is None:
            raise ConfigError("Configuration not loaded. Call load_from_environment() or load_from_dict() first.")
        return self._config

    def is_loaded(self) -> bool:
        """Check whether a configuration has been loaded"""
        return self._config is not None

    def reset(self) -> 'ConfigurationFactory':
        """Reset the factory (useful for testing)"""
        self._config = None
        self._env_overrides.clear()
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert current configuration to dictionary"""
        if self._config is None:
            raise ConfigError("Configuration not loaded")

        config_dict = {}
        for field_info in self._config.__dataclass_fields__.values():
            value = getattr(self._config, field_info.name)
            if isinstance(value, Environment):
                config_dict[field_info.name] = value.value
            else:
                config_dict[field_info.name] = value

        return config_dict


# Global factory instance
_config_factory = ConfigurationFactory()


def get_config() -> FixtureConfig:
    """Get the global fixture configuration, loading it from the environment on first use"""
    if not _config_factory.is_loaded():
        return _config_factory.load_from_environment()
    return _config_factory.get_config()


def load_config(env_prefix: str = 'BUILD_FIXTURES_') -> FixtureConfig:
    """Load configuration from environment variables"""
    return _config_factory.load_from_environment(env_prefix)


def load_config_from_dict(config_dict: Dict[str, Any]) -> FixtureConfig:
    """Load configuration from dictionary"""
    return _config_factory.load_from_dict(config_dict)


def override_config(key: str, value: Any) -> ConfigurationFactory:
    """Override a configuration setting"""
    return _config_factory.override_setting(key, value)


def reset_config() -> ConfigurationFactory:
    """Reset configuration (for testing)"""
    return _config_factory.reset()


def configure_logging(config: Optional[FixtureConfig] = None) -> None:
    """Apply the configured log level to the root logger"""
    config = config or get_config()
    logging.basicConfig(level=getattr(logging, config.log_level.upper()))
