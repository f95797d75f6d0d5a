"""
Tests for directory scanning.

Run: python3 -m pytest test_scanning.py -v
"""

import json
import os
import sys
import tempfile
import unittest

# Ensure project root is on sys.path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from scanning import (
    build_thumbnail_map, list_image_files, list_subdirectories,
    newest_timestamp, read_dir_safe, read_json_safe, scan_images,
)


def touch(path, data=b'x'):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'wb') as f:
        f.write(data)


class TestScanner(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        self.full = os.path.join(self.root, 'full')
        self.thumbs = os.path.join(self.root, 'thumbnails')

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_directory_is_empty(self):
        missing = os.path.join(self.root, 'nope')
        self.assertEqual(read_dir_safe(missing), [])
        self.assertEqual(list_image_files(missing), [])
        self.assertEqual(list_subdirectories(missing), [])
        self.assertEqual(scan_images(missing, missing), [])

    def test_extension_filter_is_case_insensitive(self):
        for name in ('a.JPG', 'b.jpeg', 'c.png', 'd.WebP', 'e.avif', 'f.gif', 'g.txt', 'manifest.json'):
            touch(os.path.join(self.full, name))
        os.makedirs(os.path.join(self.full, 'sub.jpg'))
        self.assertEqual(sorted(list_image_files(self.full)),
                         ['a.JPG', 'b.jpeg', 'c.png', 'd.WebP', 'e.avif'])

    def test_thumbnail_pairing(self):
        touch(os.path.join(self.full, 'Shot-01.jpg'))
        touch(os.path.join(self.full, 'shot-02.png'))
        touch(os.path.join(self.thumbs, 'shot-01.webp'))
        touch(os.path.join(self.thumbs, 'notes.txt'))

        self.assertEqual(build_thumbnail_map(self.thumbs), {'shot-01': 'shot-01.webp'})

        scanned = {s.slug: s for s in scan_images(self.full, self.thumbs)}
        self.assertEqual(set(scanned), {'Shot-01', 'shot-02'})
        self.assertEqual(scanned['Shot-01'].filename, 'Shot-01.jpg')
        self.assertEqual(scanned['Shot-01'].thumbnail_name, 'shot-01.webp')
        self.assertIsNone(scanned['shot-02'].thumbnail_name)

    def test_newest_timestamp(self):
        touch(os.path.join(self.full, 'a.jpg'))
        touch(os.path.join(self.full, 'b.jpg'))
        os.utime(os.path.join(self.full, 'a.jpg'), (1_000_000, 1_000_000))
        expected = max(max(os.stat(os.path.join(self.full, n)).st_mtime,
                           os.stat(os.path.join(self.full, n)).st_ctime)
                       for n in ('a.jpg', 'b.jpg'))
        self.assertEqual(newest_timestamp(self.full, ['a.jpg', 'b.jpg', 'gone.jpg']), expected)
        self.assertEqual(newest_timestamp(self.full, ['gone.jpg']), 0)

    def test_read_json_safe(self):
        good = os.path.join(self.root, 'good.json')
        bad = os.path.join(self.root, 'bad.json')
        with open(good, 'w') as f:
            json.dump({'title': 'x'}, f)
        with open(bad, 'w') as f:
            f.write('{not json')
        self.assertEqual(read_json_safe(good), {'title': 'x'})
        self.assertIsNone(read_json_safe(bad))
        self.assertIsNone(read_json_safe(os.path.join(self.root, 'missing.json')))


if __name__ == '__main__':
    unittest.main()
