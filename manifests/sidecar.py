"""
Featured-set sidecar metadata (meta.json).

The sidecar is edited by hand. Regeneration only ever adds to it: values a
human has set are kept, missing ones are filled with derived defaults, and no
key is removed, including captions for images that no longer exist.
"""

import json
import logging
import os

from scanning import read_json_safe
from titles import to_title_case

SIDECAR_NAME = 'meta.json'
STANDARD_KEYS = ('title', 'description', 'category', 'date', 'captions')

# A hand-set value of the wrong shape is moved to <key>_preserved
PRESERVED_SUFFIX = '_preserved'


def _is_empty(value):
    return value is None or value == '' or value == {}


def _free_key(meta, base, value):
    """base, or base_2, base_3... so an earlier preserved value is never replaced."""
    key, n = base, 1
    while key in meta and meta[key] != value:
        n += 1
        key = f"{base}_{n}"
    return key


def merge_sidecar(existing, defaults):
    """Merge derived defaults into existing metadata without removing keys.

    Keys with a non-empty value in existing win; keys missing or empty there
    take the default. Nested dicts (captions) merge the same way. A non-dict
    value where a dict is expected is kept under <key>_preserved and the key
    takes the default.
    """
    result = dict(existing or {})
    for key, default in defaults.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(default, dict):
            result[key] = merge_sidecar(current, default)
        elif isinstance(default, dict) and not _is_empty(current):
            preserved_key = _free_key(result, key + PRESERVED_SUFFIX, current)
            logging.warning(f"Sidecar '{key}' is not an object; keeping it as '{preserved_key}'")
            result[preserved_key] = current
            result[key] = dict(default)
        elif _is_empty(current):
            result[key] = default
    return result


def build_sidecar_defaults(set_slug, category, image_names, fallback_date):
    """Derived defaults for a set: title-cased names, one caption per image."""
    captions = {}
    for name in image_names:
        slug = os.path.splitext(name)[0]
        captions[slug] = to_title_case(slug)
    return {
        'title': to_title_case(set_slug),
        'description': '',
        'category': to_title_case(category),
        'date': fallback_date,
        'captions': captions,
    }


def read_sidecar(set_dir):
    """Load a set's sidecar; absent or malformed metadata reads as {}."""
    meta = read_json_safe(os.path.join(set_dir, SIDECAR_NAME))
    return meta if isinstance(meta, dict) else {}


def serialize_sidecar(meta):
    """Order standard keys first and sort captions for stable diffs.

    Captions that are not an object are written back unchanged.
    """
    captions = meta.get('captions')
    if _is_empty(captions):
        captions = {}
    elif isinstance(captions, dict):
        captions = {key: captions[key] for key in sorted(captions)}
    payload = {
        'title': meta.get('title', ''),
        'description': meta.get('description') or '',
        'category': meta.get('category') or '',
        'date': meta.get('date'),
        'captions': captions,
    }
    for key, value in meta.items():
        if key not in STANDARD_KEYS:
            payload[key] = value
    return payload


def write_sidecar(set_dir, meta):
    path = os.path.join(set_dir, SIDECAR_NAME)
    payload = serialize_sidecar(meta)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write('\n')
    return payload


def upsert_sidecar(set_dir, set_slug, category, image_names, fallback_date):
    """Read, merge with derived defaults and rewrite a set's meta.json.

    Returns:
        dict: The metadata as written
    """
    defaults = build_sidecar_defaults(set_slug, category, image_names, fallback_date)
    merged = merge_sidecar(read_sidecar(set_dir), defaults)
    return write_sidecar(set_dir, merged)
