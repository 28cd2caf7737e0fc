import os
import shutil
import tempfile
import unittest

from md5 import MD5
from md5_io import FileAccessError, read_file_bytes, to_hex_string, write_file


class TestMD5IO(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_read_file_bytes_returns_raw_bytes(self):
        path = os.path.join(self.tmpdir, 'input.bin')
        data = bytes(range(256)) + b"\r\n\x00"
        with open(path, 'wb') as f:
            f.write(data)
        self.assertEqual(read_file_bytes(path), data)

    def test_read_file_bytes_missing_file(self):
        path = os.path.join(self.tmpdir, 'missing.txt')
        with self.assertRaises(FileAccessError) as cm:
            read_file_bytes(path)
        self.assertEqual(cm.exception.path, path)
        self.assertEqual(cm.exception.message, 'Unable to open file: {}'.format(path))
        self.assertIsInstance(cm.exception.__cause__, OSError)

    def test_write_file_verbatim(self):
        path = os.path.join(self.tmpdir, 'out.txt')
        write_file(path, 'd41d8cd98f00b204e9800998ecf8427e')
        with open(path, 'rb') as f:
            self.assertEqual(f.read(), b'd41d8cd98f00b204e9800998ecf8427e')

    def test_write_file_into_missing_directory(self):
        path = os.path.join(self.tmpdir, 'nope', 'out.txt')
        with self.assertRaises(FileAccessError) as cm:
            write_file(path, 'abc')
        self.assertEqual(cm.exception.path, path)

    def test_to_hex_string(self):
        self.assertEqual(to_hex_string(b""), "")
        self.assertEqual(to_hex_string(b"\x00\x0f\xa0\xff"), "000fa0ff")
        self.assertEqual(to_hex_string([1, 171]), "01ab")

    def test_to_hex_string_matches_digest_hex(self):
        digest = MD5().digest(b"abc")
        self.assertEqual(to_hex_string(digest), MD5().hexdigest(b"abc"))


if __name__ == "__main__":
    unittest.main(verbosity=1)
