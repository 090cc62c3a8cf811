"""
pshell Configuration Loader

Configuration management for the shell:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from pshell.exceptions import ShellError


class ConfigError(ShellError):
    """Raised when the configuration cannot be loaded or updated."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(
            message=message,
            error_code=4000,
            context={"path": path} if path else None
        )
        self.path = path


@dataclass
class ShellConfig:
    """Read-eval loop settings."""
    prompt: str = "$ "
    skip_blank_lines: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = False


@dataclass
class ProcessConfig:
    """External program settings."""
    encoding: str = "utf-8"


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the shell.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    process: ProcessConfig = field(default_factory=ProcessConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files and providing
    runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.shell.prompt)
        $
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                path=str(config_path)
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {e}",
                path=str(config_path)
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration file: {e}",
                path=str(config_path)
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration root must be a JSON object",
                path=str(config_path)
            )

        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'shell' in data:
            shell_data = data['shell']
            config.shell = ShellConfig(
                prompt=shell_data.get('prompt', config.shell.prompt),
                skip_blank_lines=shell_data.get('skip_blank_lines', config.shell.skip_blank_lines),
            )

        if 'logging' in data:
            log_data = data['logging']
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
            )

        if 'process' in data:
            proc_data = data['process']
            config.process = ProcessConfig(
                encoding=proc_data.get('encoding', config.process.encoding),
            )

        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'shell.prompt')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        The change is not persisted to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if final_key in {f.name for f in fields(obj)}:
            setattr(obj, final_key, value)
        else:
            raise ConfigError(f"Invalid configuration key: {key}")

    def reset(self) -> None:
        """Restore the built-in defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
