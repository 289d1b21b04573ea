# -----------------------------------------------------------------------------
# es7s/hexthing [Binary to hex/ASCII dump converter and back]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr

from hexthing.byteio import Reader, Window


class ReaderTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.filename = os.path.join(self._tmp_dir.name, 'input.bin')
        with open(self.filename, 'wb') as f:
            f.write(bytes(range(40)))
        self.chunks = []

    def tearDown(self) -> None:
        self._tmp_dir.cleanup()

    def _read(self, chunk_size: int, window: Window) -> Reader:
        reader = Reader(self.filename, chunk_size, window, lambda chunk, addr: self.chunks.append((addr, chunk)))
        reader.read()
        return reader

    def test_whole_file(self):
        reader = self._read(16, Window())

        self.assertEqual([addr for addr, _ in self.chunks], [0, 16, 32])
        self.assertEqual(b''.join(chunk for _, chunk in self.chunks), bytes(range(40)))
        self.assertEqual(reader.total_read, 40)
        self.assertEqual(reader.file_size, 40)

    def test_window_with_truncation(self):
        self._read(16, Window(5, 20))

        self.assertEqual(self.chunks, [(5, bytes(range(5, 21))), (21, bytes(range(21, 25)))])

    def test_window_aligned_to_chunks(self):
        self._read(8, Window(0, 16))

        self.assertEqual([len(chunk) for _, chunk in self.chunks], [8, 8])

    def test_window_beyond_eof(self):
        self._read(16, Window(100, None))

        self.assertEqual(self.chunks, [])

    def test_skip_beyond_index_size(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            reader = self._read(16, Window(0xffffffffffffffff, None))

        self.assertEqual(self.chunks, [])
        self.assertEqual(reader.total_read, 0)
        self.assertIn('beyond the end of file', stderr.getvalue())

    def test_huge_max_count(self):
        self._read(16, Window(32, 0xffffffffffffffff))

        self.assertEqual(self.chunks, [(32, bytes(range(32, 40)))])

    def test_interrupt_is_propagated(self):
        def interrupt(chunk: bytes, addr: int):
            raise KeyboardInterrupt

        reader = Reader(self.filename, 16, Window(), interrupt)
        with self.assertRaises(KeyboardInterrupt):
            reader.read()
        self.assertTrue(reader._io.closed)

    def test_empty_window(self):
        self._read(16, Window(10, 0))

        self.assertEqual(self.chunks, [])

    def test_window_longer_than_file(self):
        reader = self._read(16, Window(30, 100))

        self.assertEqual(self.chunks, [(30, bytes(range(30, 40)))])
        self.assertEqual(reader.total_read, 10)

    def test_file_size_requires_open(self):
        reader = Reader(self.filename, 16, Window(), lambda *args: None)
        with self.assertRaises(RuntimeError):
            _ = reader.file_size
        reader.open()
        self.assertEqual(reader.file_size, 40)
        reader.close()

    def test_missing_file(self):
        reader = Reader(os.path.join(self._tmp_dir.name, 'missing.bin'), 16, Window(), lambda *args: None)
        with self.assertRaises(FileNotFoundError):
            reader.read()


if __name__ == '__main__':
    unittest.main()
