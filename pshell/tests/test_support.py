"""
Tests for the supporting subsystems: exceptions, logging, configuration,
executable lookup, process running and the entry point.
"""

import io
import json
import os
import stat
import sys
import tempfile
import unittest
from contextlib import redirect_stdout

from pshell.core.config_loader import Config, ConfigError, ConfigLoader, get_config
from pshell.exceptions import (
    ChangeDirectoryError,
    CommandNotFoundError,
    EmptyCommandError,
    ExecutableLaunchError,
    FilesystemError,
    InvalidArgumentsError,
    ParseError,
    ProcessError,
    ShellError,
)
from pshell.filesystem.locator import ExecutableLocator
from pshell.logger import Logger, LogLevel, get_logger
from pshell.process.runner import ProcessOutput, ProcessRunner


class TestExceptions(unittest.TestCase):
    """The exception hierarchy."""

    def test_hierarchy(self):
        self.assertTrue(issubclass(ParseError, ShellError))
        self.assertTrue(issubclass(ProcessError, ShellError))
        self.assertTrue(issubclass(FilesystemError, ShellError))
        self.assertTrue(issubclass(ExecutableLaunchError, CommandNotFoundError))

    def test_error_codes(self):
        self.assertEqual(EmptyCommandError().error_code, 1001)
        self.assertEqual(InvalidArgumentsError('cd', 1, 2).error_code, 1003)
        self.assertEqual(ExecutableLaunchError('x').error_code, 2002)
        self.assertEqual(ChangeDirectoryError('/x').error_code, 3001)

    def test_str_includes_code_and_context(self):
        exc = InvalidArgumentsError('type', expected=1, received=3)
        self.assertIn('1003', str(exc))
        self.assertIn('received=3', str(exc))
        self.assertEqual(exc.context['command'], 'type')

    def test_launch_error_message(self):
        exc = ExecutableLaunchError('prog', reason='Permission denied')
        self.assertEqual(exc.user_message, 'prog: command not found')
        self.assertEqual(exc.reason, 'Permission denied')
        self.assertEqual(exc.name, 'prog')

    def test_from_os_error(self):
        err = PermissionError(13, 'Permission denied', '/secret')
        exc = ChangeDirectoryError.from_os_error(err)
        self.assertEqual(exc.path, '/secret')
        self.assertEqual(exc.user_message, 'cd: /secret: Permission denied')


class TestLogger(unittest.TestCase):
    """The logging facade."""

    def tearDown(self):
        Logger.shutdown()

    def test_singleton_per_subsystem(self):
        self.assertIs(Logger('test1'), Logger('test1'))
        self.assertIsNot(Logger('test1'), Logger('test2'))
        self.assertEqual(get_logger('engine').subsystem, 'engine')

    def test_log_levels(self):
        self.assertTrue(LogLevel.ERROR > LogLevel.INFO)
        self.assertEqual(LogLevel.from_name('debug'), LogLevel.DEBUG)
        with self.assertRaises(ValueError):
            LogLevel.from_name('loud')

    def test_buffer_captures_records(self):
        Logger.initialize(level=LogLevel.DEBUG)
        get_logger('unit').info('hello', context={'k': 'v'})

        logs = Logger.get_recent_logs(subsystem='unit')
        self.assertEqual(logs[-1]['message'], 'hello')
        self.assertEqual(logs[-1]['context'], {'k': 'v'})

    def test_level_filters_records(self):
        Logger.initialize(level=LogLevel.ERROR)
        get_logger('unit').warning('ignored')
        self.assertEqual(Logger.get_recent_logs(subsystem='unit'), [])

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'logs', 'pshell.log')
            Logger.initialize(level=LogLevel.INFO, log_file=path)
            get_logger('unit').error('written', context={'code': 1})
            Logger.shutdown()

            with open(path, encoding='utf-8') as f:
                content = f.read()
            self.assertIn('[unit] written {code=1}', content)

    def test_nothing_written_to_stdout(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            Logger.initialize(level=LogLevel.DEBUG)
            get_logger('unit').error('quiet')
        self.assertEqual(buffer.getvalue(), '')


class TestConfig(unittest.TestCase):
    """The configuration system."""

    def setUp(self):
        ConfigLoader().reset()
        self._tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        ConfigLoader().reset()
        self._tmp.cleanup()

    def _write(self, content):
        path = os.path.join(self._tmp.name, 'config.json')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_default_config(self):
        config = Config()
        self.assertEqual(config.shell.prompt, '$ ')
        self.assertEqual(config.logging.level, 'WARNING')
        self.assertFalse(config.logging.console_output)
        self.assertEqual(config.process.encoding, 'utf-8')

    def test_loader_is_singleton(self):
        self.assertIs(ConfigLoader(), ConfigLoader())
        self.assertFalse(ConfigLoader().loaded)

    def test_load(self):
        path = self._write(json.dumps({'shell': {'prompt': '% '}, 'logging': {'level': 'DEBUG'}}))
        config = ConfigLoader().load(path)

        self.assertEqual(config.shell.prompt, '% ')
        self.assertTrue(config.shell.skip_blank_lines)
        self.assertEqual(config.logging.level, 'DEBUG')
        self.assertIs(get_config(), config)

    def test_bundled_config(self):
        import pshell
        path = os.path.join(os.path.dirname(pshell.__file__), 'config.json')
        config = ConfigLoader().load(path)
        self.assertEqual(config.shell.prompt, '$ ')

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load(os.path.join(self._tmp.name, 'absent.json'))

    def test_invalid_json(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load(self._write('{not json'))

    def test_non_object_root(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load(self._write('[1, 2]'))

    def test_get_and_set(self):
        loader = ConfigLoader()
        self.assertEqual(loader.get('shell.prompt'), '$ ')
        self.assertEqual(loader.get('shell.missing', 'dflt'), 'dflt')

        loader.set('process.encoding', 'latin-1')
        self.assertEqual(loader.get('process.encoding'), 'latin-1')

        with self.assertRaises(ConfigError):
            loader.set('shell.nope', 1)
        with self.assertRaises(ConfigError):
            loader.set('nope.prompt', 1)

    def test_to_dict(self):
        data = ConfigLoader().to_dict()
        self.assertEqual(data['shell']['prompt'], '$ ')
        self.assertIn('log_file', data['logging'])


class TestExecutableLocator(unittest.TestCase):
    """Program lookup on a search path."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.first = os.path.join(self._tmp.name, 'first')
        self.second = os.path.join(self._tmp.name, 'second')
        os.mkdir(self.first)
        os.mkdir(self.second)
        self.locator = ExecutableLocator()

    def tearDown(self):
        self._tmp.cleanup()

    def _touch(self, directory, name):
        path = os.path.join(directory, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write('#!/bin/sh\n')
        os.chmod(path, os.stat(path).st_mode | stat.S_IXUSR)
        return path

    def test_first_match_wins(self):
        self._touch(self.first, 'tool')
        self._touch(self.second, 'tool')

        found = self.locator.find(f'{self.first}:{self.second}', 'tool')
        self.assertEqual(found, os.path.join(self.first, 'tool'))

    def test_later_directory(self):
        expected = self._touch(self.second, 'only2')
        self.assertEqual(self.locator.find(f'{self.first}:{self.second}', 'only2'), expected)

    def test_not_found(self):
        self.assertIsNone(self.locator.find(f'{self.first}:{self.second}', 'ghost'))

    def test_empty_path(self):
        self.assertIsNone(self.locator.find('', 'doesnotexist123'))

    def test_result_is_absolute(self):
        self._touch(self.first, 'tool')
        found = self.locator.find(f'::{self.first}', 'tool')
        self.assertTrue(os.path.isabs(found))

    def test_missing_directory_skipped(self):
        expected = self._touch(self.second, 'tool')
        found = self.locator.find(f'{self._tmp.name}/gone:{self.second}', 'tool')
        self.assertEqual(found, expected)

    def test_split_search_path(self):
        self.assertEqual(
            ExecutableLocator.split_search_path('/a::/b:'),
            ['/a', '/b'],
        )


class TestProcessRunner(unittest.TestCase):
    """Launching real programs."""

    def setUp(self):
        self.runner = ProcessRunner()

    def test_captures_both_streams(self):
        script = 'import sys; print("out"); print("err", file=sys.stderr)'
        output = self.runner.run(sys.executable, ['-c', script])
        self.assertEqual(output.stdout, 'out\n')
        self.assertEqual(output.stderr, 'err\n')
        self.assertEqual(output.returncode, 0)

    def test_empty_streams_are_none(self):
        output = self.runner.run(sys.executable, ['-c', 'pass'])
        self.assertEqual(output, ProcessOutput(stdout=None, stderr=None, returncode=0))

    def test_nonzero_exit(self):
        output = self.runner.run(sys.executable, ['-c', 'import sys; sys.exit(3)'])
        self.assertEqual(output.returncode, 3)

    def test_stdin_is_empty(self):
        script = 'import sys; print(repr(sys.stdin.read()))'
        output = self.runner.run(sys.executable, ['-c', script])
        self.assertEqual(output.stdout, "''\n")

    def test_invalid_utf8_replaced(self):
        script = 'import sys; sys.stdout.buffer.write(b"a\\xffb")'
        output = self.runner.run(sys.executable, ['-c', script])
        self.assertEqual(output.stdout, 'a\ufffdb')

    def test_launch_failure(self):
        with self.assertRaises(ExecutableLaunchError) as ctx:
            self.runner.run('pshell-definitely-missing-binary', [])
        self.assertEqual(ctx.exception.name, 'pshell-definitely-missing-binary')


class TestMain(unittest.TestCase):
    """The command-line entry point."""

    def setUp(self):
        ConfigLoader().reset()

    def tearDown(self):
        ConfigLoader().reset()
        Logger.shutdown()

    def test_single_command(self):
        from pshell.main import main

        buffer = io.StringIO()
        with redirect_stdout(buffer):
            status = main(['-c', 'echo "hello  there"'])

        self.assertEqual(status, 0)
        self.assertEqual(buffer.getvalue(), 'hello  there\n')

    def test_bad_config(self):
        from pshell.main import main

        with tempfile.TemporaryDirectory() as tmp:
            status = main(['--config', os.path.join(tmp, 'missing.json'), '-c', 'echo x'])
        self.assertEqual(status, 2)

    def test_exit_command(self):
        from pshell.main import main

        with self.assertRaises(SystemExit) as ctx:
            main(['-c', 'exit 9'])
        self.assertEqual(ctx.exception.code, 9)


if __name__ == '__main__':
    unittest.main()
