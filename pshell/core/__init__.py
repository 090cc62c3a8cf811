"""
pshell Core Module

Configuration loading shared by every other subsystem.
"""

from .config_loader import (
    ConfigLoader,
    ConfigError,
    Config,
    ShellConfig,
    LoggingConfig,
    ProcessConfig,
    get_config,
)

__all__ = [
    'ConfigLoader',
    'ConfigError',
    'Config',
    'ShellConfig',
    'LoggingConfig',
    'ProcessConfig',
    'get_config',
]
