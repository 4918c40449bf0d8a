import os
import shutil
import tempfile
import unittest

from singlecs.writer import save_output


class TestSaveOutput(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.cwd = os.getcwd()

    def tearDown(self):
        os.chdir(self.cwd)
        shutil.rmtree(self.test_dir)

    def read_bytes(self, path):
        with open(path, "rb") as f:
            return f.read()

    def test_creates_missing_directories(self):
        path = os.path.join(self.test_dir, "a", "b", "app.cs")
        save_output(path, ["#:property PublishTrimmed=false", ""])
        self.assertEqual(self.read_bytes(path), b"#:property PublishTrimmed=false\n\n")

    def test_overwrites_existing_file(self):
        path = os.path.join(self.test_dir, "app.cs")
        with open(path, "w") as f:
            f.write("old content that is longer than the new one\n")
        save_output(path, ["new"])
        self.assertEqual(self.read_bytes(path), b"new\n")

    def test_utf8_without_bom(self):
        path = os.path.join(self.test_dir, "app.cs")
        save_output(path, ['Console.WriteLine("žluťoučký");'])
        data = self.read_bytes(path)
        self.assertFalse(data.startswith(b"\xef\xbb\xbf"))
        self.assertEqual(data.decode("utf-8"), 'Console.WriteLine("žluťoučký");\n')

    def test_relative_path_in_current_directory(self):
        os.chdir(self.test_dir)
        save_output("app.cs", ["x"])
        self.assertTrue(os.path.exists(os.path.join(self.test_dir, "app.cs")))

    def test_empty_document(self):
        path = os.path.join(self.test_dir, "app.cs")
        save_output(path, [])
        self.assertEqual(self.read_bytes(path), b"")

    def test_unwritable_target_raises(self):
        blocker = os.path.join(self.test_dir, "file")
        with open(blocker, "w") as f:
            f.write("x")
        with self.assertRaises(OSError):
            save_output(os.path.join(blocker, "app.cs"), ["x"])


if __name__ == "__main__":
    unittest.main()
