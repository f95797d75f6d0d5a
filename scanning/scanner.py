"""
Directory scanning for Folio.

Lists image files, pairs full-size images with same-named thumbnails and
collects file timestamps. Missing or unreadable directories are treated as
empty; new categories often have no thumbnails/ or featured/ yet.
"""

import json
import os
from typing import List, NamedTuple, Optional

IMAGE_EXTENSIONS = frozenset({'.jpg', '.jpeg', '.png', '.webp', '.avif'})


class ScannedImage(NamedTuple):
    slug: str
    filename: str
    thumbnail_name: Optional[str]


def read_dir_safe(dir_path) -> List[os.DirEntry]:
    """List a directory, returning [] when it is missing or unreadable."""
    try:
        with os.scandir(dir_path) as it:
            return list(it)
    except OSError:
        return []


def is_image_name(name, extensions=IMAGE_EXTENSIONS):
    return os.path.splitext(name)[1].lower() in extensions


def _is_file(entry):
    try:
        return entry.is_file()
    except OSError:
        return False


def list_subdirectories(dir_path) -> List[str]:
    """Names of subdirectories, in listing order."""
    names = []
    for entry in read_dir_safe(dir_path):
        try:
            if entry.is_dir():
                names.append(entry.name)
        except OSError:
            continue
    return names


def list_image_files(dir_path, extensions=IMAGE_EXTENSIONS) -> List[str]:
    """Filenames of regular image files, in listing order."""
    return [
        entry.name for entry in read_dir_safe(dir_path)
        if _is_file(entry) and is_image_name(entry.name, extensions)
    ]


def build_thumbnail_map(thumb_dir, extensions=IMAGE_EXTENSIONS):
    """Map lower-cased filename stem -> thumbnail filename."""
    return {
        os.path.splitext(name)[0].lower(): name
        for name in list_image_files(thumb_dir, extensions)
    }


def scan_images(full_dir, thumb_dir, extensions=IMAGE_EXTENSIONS) -> List[ScannedImage]:
    """Scan full_dir for images and pair each with its thumbnail, if any.

    Args:
        full_dir: Directory of full-size images
        thumb_dir: Directory of thumbnails (matched by case-insensitive stem)
        extensions: Accepted lower-case extensions

    Returns:
        List of ScannedImage in full_dir listing order; thumbnail_name is
        None when no thumbnail matches.
    """
    thumb_map = build_thumbnail_map(thumb_dir, extensions)
    scanned = []
    for filename in list_image_files(full_dir, extensions):
        slug = os.path.splitext(filename)[0]
        scanned.append(ScannedImage(slug, filename, thumb_map.get(slug.lower())))
    return scanned


def newest_timestamp(dir_path, filenames):
    """Newest of mtime/ctime across files in seconds, 0 if none could be read."""
    newest = 0
    for name in filenames:
        try:
            st = os.stat(os.path.join(dir_path, name))
        except OSError:
            continue
        newest = max(newest, st.st_mtime, st.st_ctime)
    return newest


def read_json_safe(path):
    """Parse a JSON file, returning None on any read or parse failure."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError):
        return None
