import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from versionstamp import generator
from versionstamp.generator import (
    VERSION_FILE_NAME,
    VersionResourceError,
    generate_version_resource,
    is_up_to_date,
    read_version_resource,
)

class TestGenerateVersionResource(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.output_dir = os.path.join(self.test_dir, "build", "generated", "resources", "sdk-version")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _read(self, path):
        with open(path, "rb") as f:
            return f.read()

    def test_writes_version_line(self):
        """Test that the file holds exactly version=<value> and a newline."""
        path = generate_version_resource("1.2.3", self.output_dir)
        self.assertEqual(os.path.basename(path), "ai.sdk-version.properties")
        self.assertEqual(path, os.path.join(self.output_dir, VERSION_FILE_NAME))
        self.assertEqual(self._read(path), b"version=1.2.3\n")
        self.assertEqual(os.listdir(self.output_dir), [VERSION_FILE_NAME])

    def test_creates_missing_parents(self):
        self.assertFalse(os.path.exists(os.path.join(self.test_dir, "build")))
        generate_version_resource("1.0", self.output_dir)
        self.assertTrue(os.path.isdir(self.output_dir))

    def test_existing_directory_is_fine(self):
        os.makedirs(self.output_dir)
        generate_version_resource("1.0", self.output_dir)
        self.assertTrue(os.path.isfile(os.path.join(self.output_dir, VERSION_FILE_NAME)))

    def test_repeated_runs_are_byte_identical(self):
        path = generate_version_resource("2.0.0-beta.1", self.output_dir)
        first = self._read(path)
        generate_version_resource("2.0.0-beta.1", self.output_dir)
        self.assertEqual(self._read(path), first)

    def test_overwrites_previous_version(self):
        path = generate_version_resource("1.0.0-SNAPSHOT-with-a-long-suffix", self.output_dir)
        generate_version_resource("1.0.1", self.output_dir)
        self.assertEqual(self._read(path), b"version=1.0.1\n")

    def test_version_is_written_verbatim(self):
        """Test that no quoting or escaping is applied to the version."""
        path = generate_version_resource("3.4.0 build=7 #x", self.output_dir)
        self.assertEqual(self._read(path), b"version=3.4.0 build=7 #x\n")

    def test_empty_version_is_rejected(self):
        with self.assertRaises(VersionResourceError):
            generate_version_resource("", self.output_dir)
        self.assertFalse(os.path.exists(self.output_dir))

    def test_file_in_place_of_directory_fails(self):
        """Test that a regular file at the output path aborts without writing anything."""
        os.makedirs(os.path.dirname(self.output_dir))
        with open(self.output_dir, "w") as f:
            f.write("not a directory")

        with self.assertRaises(OSError):
            generate_version_resource("1.2.3", self.output_dir)

        with open(self.output_dir) as f:
            self.assertEqual(f.read(), "not a directory")

    @patch("versionstamp.generator.os.replace", side_effect=PermissionError("denied"))
    def test_failed_write_keeps_previous_file(self, mock_replace):
        os.makedirs(self.output_dir)
        target = os.path.join(self.output_dir, VERSION_FILE_NAME)
        with open(target, "w") as f:
            f.write("version=0.9\n")

        with self.assertRaises(PermissionError):
            generate_version_resource("1.0", self.output_dir)

        self.assertEqual(self._read(target), b"version=0.9\n")
        self.assertEqual(os.listdir(self.output_dir), [VERSION_FILE_NAME])


class TestReadVersionResource(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_reads_generated_file(self):
        path = generate_version_resource("5.6.7", self.test_dir)
        self.assertEqual(read_version_resource(path), "5.6.7")

    def test_missing_file(self):
        self.assertIsNone(read_version_resource(os.path.join(self.test_dir, "nope.properties")))

    def test_skips_comments_and_other_keys(self):
        path = os.path.join(self.test_dir, "sdk.properties")
        with open(path, "w") as f:
            f.write("# generated\n\n!legacy\nname=sdk\nversion = 1.1\n")
        self.assertEqual(read_version_resource(path), "1.1")

    def test_trailing_whitespace_survives(self):
        """Test that a version ending in a space reads back unchanged."""
        path = generate_version_resource("1.0 ", self.test_dir)
        self.assertTrue(is_up_to_date("1.0 ", self.test_dir))
        self.assertEqual(read_version_resource(path), "1.0 ")

    def test_colon_and_whitespace_separators(self):
        path = os.path.join(self.test_dir, "sdk.properties")
        for content, expected in [
            ("version:2.0\n", "2.0"),
            ("version : 2.1\n", "2.1"),
            ("  version 2.2\n", "2.2"),
            ("version\t\t2.3-rc\n", "2.3-rc"),
            ("versionCode=7\nversion=2.4\r\n", "2.4"),
        ]:
            with open(path, "w", newline="") as f:
                f.write(content)
            self.assertEqual(read_version_resource(path), expected, content)

    def test_missing_key(self):
        path = os.path.join(self.test_dir, "sdk.properties")
        with open(path, "w") as f:
            f.write("name=sdk\n")
        self.assertIsNone(read_version_resource(path))


class TestIsUpToDate(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_missing_file_is_stale(self):
        self.assertFalse(is_up_to_date("1.0", self.test_dir))

    def test_same_version_is_up_to_date(self):
        generate_version_resource("1.0", self.test_dir)
        self.assertTrue(is_up_to_date("1.0", self.test_dir))

    def test_changed_version_is_stale(self):
        generate_version_resource("1.0", self.test_dir)
        self.assertFalse(is_up_to_date("1.1", self.test_dir))

    def test_render(self):
        self.assertEqual(generator.render_version_resource("1.2.3"), "version=1.2.3\n")

def test_example_version_file(tmp_path):
    """Test the documented example: 1.2.3 into an empty directory."""
    output_dir = tmp_path / "sdk-version"
    path = generate_version_resource("1.2.3", str(output_dir))
    assert (output_dir / VERSION_FILE_NAME).read_text() == "version=1.2.3\n"
    assert read_version_resource(path) == "1.2.3"

if __name__ == "__main__":
    unittest.main()
