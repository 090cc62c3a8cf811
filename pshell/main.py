#!/usr/bin/env python3
"""
pshell - main entry point

Boot sequence:
1. Load configuration
2. Initialize logging
3. Build the shell
4. Run it interactively, or run a single command with ``-c``

Version: 1.0.0
"""

import argparse
import os
import sys
from typing import List, Optional

from pshell import __version__
from pshell.core.config_loader import ConfigError, ConfigLoader
from pshell.logger import Logger, LogLevel, get_logger
from pshell.process.runner import ProcessRunner
from pshell.shell.console import Console
from pshell.shell.engine import ExecutionEngine
from pshell.shell.shell import Shell


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.json')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pshell',
        description='A minimal interactive shell with quoting, builtins and redirection.'
    )
    parser.add_argument(
        '--config',
        metavar='PATH',
        help='JSON configuration file (defaults to the bundled config.json)'
    )
    parser.add_argument(
        '-c',
        dest='command',
        metavar='COMMAND',
        help='run COMMAND and exit instead of starting the interactive loop'
    )
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        help='override the configured log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def boot(config_path: Optional[str], log_level: Optional[str]) -> Shell:
    """
    Load configuration, initialize logging and build the shell.

    Raises:
        ConfigError: If an explicitly requested configuration is unusable
    """
    loader = ConfigLoader()
    if config_path is not None:
        config = loader.load(config_path)
    elif os.path.exists(DEFAULT_CONFIG_PATH):
        config = loader.load(DEFAULT_CONFIG_PATH)
    else:
        config = loader.config

    level = LogLevel.from_name(log_level or config.logging.level)
    Logger.initialize(
        level=level,
        log_file=config.logging.log_file,
        console_output=config.logging.console_output or log_level is not None,
    )

    logger = get_logger('config')
    logger.debug("Configuration loaded", context=loader.to_dict())

    console = Console(encoding=config.process.encoding)
    engine = ExecutionEngine(console, runner=ProcessRunner(encoding=config.process.encoding))
    return Shell(console=console, engine=engine, prompt=config.shell.prompt)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for pshell.

    Returns:
        Process exit status. ``exit N`` inside the shell leaves through
        SystemExit with status N instead.
    """
    args = build_parser().parse_args(argv)

    try:
        shell = boot(args.config, args.log_level)
    except (ConfigError, ValueError, OSError) as e:
        print(f"pshell: {e}", file=sys.stderr)
        return 2

    try:
        if args.command is not None:
            shell.execute_line(args.command)
            return 0
        return shell.run()
    except KeyboardInterrupt:
        shell.console.write("\n")
        return 130
    finally:
        Logger.shutdown()


if __name__ == '__main__':
    sys.exit(main())
