"""Tests for directory-scoped command execution."""

import subprocess
import unittest
from unittest.mock import patch, MagicMock

from whichbroke.errors import CommandExitError, CommandStartError
from whichbroke.runner import CommandResult, run_command


class TestRunCommand(unittest.TestCase):
    """Tests for run_command()."""

    @patch('whichbroke.runner.subprocess.run')
    def test_run_success(self, mock_run):
        """run_command() runs in cwd and returns captured output."""
        mock_run.return_value = MagicMock(
            stdout='output\n',
            stderr='',
            returncode=0,
        )

        result = run_command('git', ['log'], '/path/to/repo')

        self.assertIsInstance(result, CommandResult)
        self.assertEqual(result.stdout, 'output\n')
        self.assertEqual(result.returncode, 0)
        mock_run.assert_called_once()
        self.assertEqual(mock_run.call_args[0][0], ['git', 'log'])
        self.assertEqual(mock_run.call_args[1]['cwd'], '/path/to/repo')
        self.assertTrue(mock_run.call_args[1]['check'])

    @patch('whichbroke.runner.subprocess.run')
    def test_args_are_copied(self, mock_run):
        """Arguments may be any sequence, including a tuple."""
        mock_run.return_value = MagicMock(stdout='', stderr='', returncode=0)

        run_command('hg', ('revert', '--all', '-r', '3:abc'), '/repo')

        self.assertEqual(mock_run.call_args[0][0], ['hg', 'revert', '--all', '-r', '3:abc'])

    @patch('whichbroke.runner.subprocess.run')
    def test_nonzero_exit_raises_exit_error(self, mock_run):
        """A process that ran and failed raises CommandExitError."""
        mock_run.side_effect = subprocess.CalledProcessError(
            2, ['make'], stderr='make: *** [all] Error 1'
        )

        with self.assertRaises(CommandExitError) as ctx:
            run_command('make', [], '/repo')

        self.assertEqual(ctx.exception.returncode, 2)
        self.assertEqual(ctx.exception.cmd, ['make'])
        self.assertIn('Error 1', ctx.exception.stderr)
        self.assertIn('exited with status 2', str(ctx.exception))

    @patch('whichbroke.runner.subprocess.run')
    def test_missing_program_raises_start_error(self, mock_run):
        """A process that can't be started raises CommandStartError."""
        error = FileNotFoundError(2, 'No such file or directory')
        mock_run.side_effect = error

        with self.assertRaises(CommandStartError) as ctx:
            run_command('no-such-tool', ['--help'], '/repo')

        self.assertIs(ctx.exception.__cause__, error)
        self.assertEqual(ctx.exception.reason, 'No such file or directory')
        self.assertNotIsInstance(ctx.exception, CommandExitError)

    def test_real_process_exit_status(self):
        """A real failing process is reported with its exit status."""
        with self.assertRaises(CommandExitError) as ctx:
            run_command('sh', ['-c', 'exit 3'], '.')
        self.assertEqual(ctx.exception.returncode, 3)

    @patch('whichbroke.runner.subprocess.run')
    def test_undecodable_output_is_replaced(self, mock_run):
        """Output is decoded with errors replaced instead of raising."""
        mock_run.return_value = MagicMock(stdout='', stderr='', returncode=0)

        run_command('make', [], '/repo')

        self.assertEqual(mock_run.call_args[1]['errors'], 'replace')

    def test_real_non_utf8_output(self):
        """Bytes that are not UTF-8 don't break a clean or failing run."""
        result = run_command('sh', ['-c', "printf 'caf\\351\\n'"], '.')
        self.assertTrue(result.stdout.startswith('caf'))

        with self.assertRaises(CommandExitError) as ctx:
            run_command('sh', ['-c', "printf 'caf\\351\\n' >&2; exit 1"], '.')
        self.assertTrue(ctx.exception.stderr.startswith('caf'))

    def test_real_missing_program(self):
        """A real missing program is a start error."""
        with self.assertRaises(CommandStartError):
            run_command('whichbroke-no-such-program', [], '.')


if __name__ == '__main__':
    unittest.main()
