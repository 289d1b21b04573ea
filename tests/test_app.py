# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from typing import List, Tuple
from unittest import mock

from pytermor import ReplaceSGR

from hexthing import App, ArgumentError, InvalidRangeError
from hexthing.byteio import SEPARATOR, Window
from hexthing.settings import Settings


class AppTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.input = os.path.join(self._tmp_dir.name, 'input.bin')
        with open(self.input, 'wb') as f:
            f.write(b'Hello, world!\x00\xff\x0a' * 3)

    def tearDown(self) -> None:
        self._tmp_dir.cleanup()

    def run_app(self, *args: str) -> Tuple[int, str, str]:
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as cm:
                App(list(args)).run()
        return cm.exception.code, stdout.getvalue(), stderr.getvalue()

    def test_dump_to_stdout(self):
        code, stdout, stderr = self.run_app(self.input)

        lines = ReplaceSGR('').apply(stdout).splitlines()
        self.assertEqual(code, 0)
        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[0], f' 0x00 {SEPARATOR} 48 65 6c 6c 6f 2c 20 77 6f 72 6c 64 21 00 ff 0a '
                                   f'{SEPARATOR} Hello,␣world!•×␊')
        self.assertEqual(stderr, '')

    def test_dump_no_color(self):
        code, stdout, _ = self.run_app('--no-color', '-l', '8', '-b', '0x2-0x5', self.input)

        self.assertEqual(code, 0)
        self.assertEqual(stdout, f' 0x02 {SEPARATOR} 6c 6c 6f{" " * 15} {SEPARATOR} llo\n')

    def test_dump_skip_length(self):
        code, stdout, _ = self.run_app('--no-color', '-u', '-s', '0xd', '-n', '3', self.input)

        self.assertEqual(code, 0)
        self.assertTrue(stdout.startswith(f' 0x0D {SEPARATOR} 00 FF 0A '))

    def test_dump_range_end_beyond_index_size(self):
        code, stdout, _ = self.run_app('--no-color', '-l', '16', '-b', '0x2a-0xffffffffffffffff', self.input)

        self.assertEqual(code, 0)
        self.assertEqual(stdout, f' 0x2a {SEPARATOR} 6c 64 21 00 ff 0a{" " * 10 * 3} {SEPARATOR} ld!•×␊\n')

    def test_interrupted_dump_exits_non_zero(self):
        with mock.patch('hexthing.runner.dump.DumpRunner.run', side_effect=KeyboardInterrupt):
            code, _, stderr = self.run_app(self.input)

        self.assertEqual(code, 130)
        self.assertIn('Interrupted', stderr)

    def test_round_trip_through_files(self):
        dump = os.path.join(self._tmp_dir.name, 'dump.hex')
        restored = os.path.join(self._tmp_dir.name, 'restored.bin')

        self.assertEqual(self.run_app('-o', dump, self.input)[0], 0)
        self.assertEqual(self.run_app('-r', '-o', restored, dump)[0], 0)

        with open(self.input, 'rb') as f1, open(restored, 'rb') as f2:
            self.assertEqual(f1.read(), f2.read())

    def test_output_exists_fails(self):
        dump = os.path.join(self._tmp_dir.name, 'dump.hex')
        self.run_app('-o', dump, self.input)

        code, _, stderr = self.run_app('-o', dump, self.input)

        self.assertEqual(code, 1)
        self.assertIn('OutputExistsError', stderr)

    def test_reverse_requires_output(self):
        code, _, stderr = self.run_app('-r', self.input)

        self.assertEqual(code, 1)
        self.assertIn('ArgumentError', stderr)
        self.assertIn('--help', stderr)

    def test_reverse_reports_line_number(self):
        dump = os.path.join(self._tmp_dir.name, 'dump.hex')
        with open(dump, 'wt', encoding='utf-8') as f:
            f.write('41\n4z\n')

        code, _, stderr = self.run_app('-r', '-o', os.path.join(self._tmp_dir.name, 'out.bin'), dump)

        self.assertEqual(code, 1)
        self.assertIn('InvalidHexError', stderr)
        self.assertIn('line 2', stderr)

    def test_missing_input(self):
        code, _, stderr = self.run_app(os.path.join(self._tmp_dir.name, 'missing.bin'))

        self.assertEqual(code, 1)
        self.assertIn('FileNotFoundError', stderr)

    def test_debug_prints_traceback(self):
        code, _, stderr = self.run_app('-d', '-b', '5-1', self.input)

        self.assertEqual(code, 1)
        self.assertIn('Traceback', stderr)
        self.assertIn('InvalidRangeError', stderr)

    def test_legend(self):
        code, stdout, _ = self.run_app('--legend')

        self.assertEqual(code, 0)
        for label in ['zero', 'space', 'printable', 'high', 'control']:
            self.assertIn(label, stdout)

    def test_version(self):
        code, stdout, _ = self.run_app('--version')

        self.assertEqual(code, 0)
        self.assertIn('hexthing', stdout)
        self.assertIn('pytermor', stdout)


class SettingsTestCase(unittest.TestCase):
    def make_settings(self, **kwargs) -> Settings:
        settings = Settings()
        settings.filename = 'input.bin'
        for k, v in kwargs.items():
            setattr(settings, k, v)
        return settings

    def test_defaults(self):
        config = self.make_settings().to_config()

        self.assertEqual(config.window, Window(0, None))
        self.assertEqual(config.bytes_per_line, 16)
        self.assertTrue(config.color)
        self.assertFalse(config.output_to_file)

    def test_output_disables_color(self):
        config = self.make_settings(output='out.hex').to_config()

        self.assertFalse(config.color)
        self.assertTrue(config.output_to_file)

    def test_byte_range(self):
        config = self.make_settings(byte_range='0x10-0x20').to_config()

        self.assertEqual(config.window, Window(16, 16))

    def test_skip_length(self):
        config = self.make_settings(skip='5', length='10').to_config()

        self.assertEqual(config.window, Window(5, 10))

    def test_range_with_skip_fails(self):
        with self.assertRaises(ArgumentError):
            self.make_settings(byte_range='1-2', skip='1').to_config()

    def test_inverted_range_fails(self):
        with self.assertRaises(InvalidRangeError):
            self.make_settings(byte_range='0x20-0x10').to_config()

    def test_missing_filename_fails(self):
        with self.assertRaises(ArgumentError):
            self.make_settings(filename=None).to_config()

    def test_zero_bytes_per_line_fails(self):
        with self.assertRaises(ArgumentError):
            self.make_settings(bytes_per_line=0).to_config()


if __name__ == '__main__':
    unittest.main()
