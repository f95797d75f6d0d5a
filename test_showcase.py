"""
Tests for home showcase selection, projection and loading.

Run: python3 -m pytest test_showcase.py -v
"""

import asyncio
from datetime import datetime, timezone
import json
import os
import sys
import tempfile
import unittest

# Ensure project root is on sys.path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from manifests import FeaturedSet, ImageRecord
from showcase import (
    build_set_gallery_url, build_showcase_items, load_featured_sets,
    load_home_items, load_set_view, normalise_sets, resolve_set, select_for_home,
)
from utils.dates import to_iso


def iso_from_millis(millis):
    return to_iso(datetime.fromtimestamp(millis / 1000.0, tz=timezone.utc))


def make_set(slug, millis=None, title=None, cover=True, category=''):
    image = ImageRecord(slug=f"{slug}-1", title='Shot', thumbnail=f"/t/{slug}.jpg", full=f"/f/{slug}.jpg")
    return {
        'slug': slug,
        'title': title if title is not None else slug.title(),
        'description': '',
        'category': category,
        'date': iso_from_millis(millis) if millis is not None else None,
        'coverImage': image.model_dump() if cover else None,
        'images': [image.model_dump()],
    }


class TestSelectForHome(unittest.TestCase):

    def test_both_empty(self):
        self.assertEqual(select_for_home([], [], 6), [])

    def test_single_source(self):
        cosplay = [make_set(f"c{i}", 1000 * i) for i in range(1, 9)]
        selection = select_for_home(cosplay, [], 6)
        self.assertEqual(len(selection), 6)
        self.assertTrue(all(c.type == 'cosplay' for c in selection))
        self.assertEqual([c.slug for c in selection], ['c8', 'c7', 'c6', 'c5', 'c4', 'c3'])

        short = select_for_home(cosplay[:2], [], 6)
        self.assertEqual(len(short), 2)

    def test_fairness_then_recency(self):
        cosplay = [make_set('cos100', 100), make_set('cos50', 50)]
        corporate = [make_set('corp200', 200), make_set('corp10', 10)]
        selection = select_for_home(cosplay, corporate, 4)
        self.assertEqual([(c.type, c.timestamp) for c in selection], [
            ('corporate', 200), ('cosplay', 100), ('cosplay', 50), ('corporate', 10),
        ])

    def test_each_source_represented(self):
        cosplay = [make_set(f"c{i}", 10_000 + i) for i in range(6)]
        corporate = [make_set('old-corp', 1)]
        selection = select_for_home(cosplay, corporate, 6)
        self.assertEqual(len(selection), 6)
        self.assertIn('old-corp', [c.slug for c in selection])
        self.assertEqual(selection[-1].slug, 'old-corp')

    def test_refill_from_sparse_source(self):
        cosplay = [make_set('c1', 500)]
        corporate = [make_set(f"k{i}", 100 * i) for i in range(1, 6)]
        selection = select_for_home(cosplay, corporate, 4)
        self.assertEqual([c.slug for c in selection], ['c1', 'k5', 'k4', 'k3'])

    def test_ties_and_missing_dates(self):
        cosplay = [make_set('b', title='Beta'), make_set('a', title='Alpha'), make_set('z', 5000)]
        selection = select_for_home(cosplay, [], 6)
        self.assertEqual([c.slug for c in selection], ['z', 'a', 'b'])
        self.assertEqual(selection[1].timestamp, 0)

    def test_ties_ignore_case(self):
        cosplay = [make_set('b', title='Beta'), make_set('a', title='alpha'), make_set('c', title='Charlie')]
        selection = select_for_home(cosplay, [], 6)
        self.assertEqual([c.title for c in selection], ['alpha', 'Beta', 'Charlie'])

    def test_sets_without_cover_dropped(self):
        cosplay = [make_set('nocover', 100, cover=False), make_set('ok', 50)]
        self.assertEqual([c.slug for c in select_for_home(cosplay, [], 6)], ['ok'])

    def test_duplicate_slugs_within_type(self):
        cosplay = [make_set('same', 100), make_set('same', 90), make_set('other', 80)]
        selection = select_for_home(cosplay, [make_set('same', 70)], 6)
        keys = [(c.type, c.slug) for c in selection]
        self.assertEqual(len(keys), len(set(keys)))
        self.assertIn(('corporate', 'same'), keys)

    def test_accepts_models(self):
        model = FeaturedSet.model_validate(make_set('m', 100))
        selection = select_for_home([model], [], 6)
        self.assertEqual(selection[0].slug, 'm')
        self.assertEqual(selection[0].cover_image.full, '/f/m.jpg')

    def test_limit_one(self):
        selection = select_for_home([make_set('c', 100)], [make_set('k', 200)], 1)
        self.assertEqual([c.slug for c in selection], ['k'])


class TestShowcaseItems(unittest.TestCase):

    def test_projection(self):
        candidates = normalise_sets([make_set('neon-dreams', 1_704_067_200_000, category='Cosplay Series')], 'cosplay')
        item = build_showcase_items(candidates)[0]
        self.assertEqual(item.title, 'Neon-Dreams')
        self.assertEqual(item.description, 'Cosplay Series · Jan 2024')
        self.assertEqual(item.thumbnail, '/t/neon-dreams.jpg')
        self.assertEqual(item.full, '/f/neon-dreams.jpg')
        self.assertEqual(item.href, '/set-gallery?set=neon-dreams&type=cosplay')
        self.assertEqual(item.label, 'Cosplay set')
        self.assertEqual(item.date, '2024-01-01T00:00:00.000Z')
        self.assertEqual(item.type, 'cosplay')

    def test_defaults_for_corporate(self):
        data = make_set('summit', title='')
        data['coverImage']['thumbnail'] = None
        item = build_showcase_items(normalise_sets([data], 'corporate'))[0]
        self.assertEqual(item.title, 'Summit')
        self.assertEqual(item.description, 'Corporate')
        self.assertEqual(item.thumbnail, '/f/summit.jpg')
        self.assertEqual(item.label, 'Corporate event')

    def test_set_gallery_url(self):
        self.assertEqual(build_set_gallery_url('', 'cosplay'), '/set-gallery')
        self.assertEqual(build_set_gallery_url('a b&c', 'corporate'), '/set-gallery?set=a%20b%26c&type=corporate')


class TestLoader(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.images = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, payload, *parts):
        path = os.path.join(self.images, *parts)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            if isinstance(payload, str):
                f.write(payload)
            else:
                json.dump(payload, f)

    def _featured(self, set_type, sets):
        self._write({'category': set_type, 'generatedAt': '2024-01-01T00:00:00.000Z',
                     'count': len(sets), 'sets': sets}, set_type, 'featured', 'manifest.json')

    def test_missing_and_malformed_manifests(self):
        with self.assertLogs(level='WARNING'):
            self.assertEqual(load_featured_sets(self.images, 'cosplay'), [])
        self._write('{oops', 'corporate', 'featured', 'manifest.json')
        with self.assertLogs(level='WARNING'):
            self.assertEqual(load_featured_sets(self.images, 'corporate'), [])

    def test_bad_entries_skipped(self):
        self._featured('cosplay', [make_set('good', 100), {'title': 'no slug'}])
        with self.assertLogs(level='WARNING'):
            sets = load_featured_sets(self.images, 'cosplay')
        self.assertEqual([s.slug for s in sets], ['good'])

    def test_partial_image_records_kept(self):
        data = make_set('handmade', 100)
        data['coverImage'] = {'full': '/f/handmade-cover.jpg'}
        data['images'] = [{'slug': 'one', 'title': 'One', 'thumbnail': '/t/one.jpg'}]
        self._featured('cosplay', [data])

        sets = load_featured_sets(self.images, 'cosplay')
        self.assertEqual(len(sets), 1)
        self.assertEqual(sets[0].cover_image.thumbnail, '/f/handmade-cover.jpg')
        self.assertEqual(sets[0].cover_image.slug, 'handmade-cover')
        self.assertEqual(sets[0].images[0].full, '/t/one.jpg')

        item = build_showcase_items(select_for_home(sets, [], 6))[0]
        self.assertEqual(item.thumbnail, '/f/handmade-cover.jpg')

    def test_home_items_from_both_sources(self):
        self._featured('cosplay', [make_set('c1', 100)])
        self._featured('corporate', [make_set('k1', 200)])
        items = asyncio.run(load_home_items(self.images, {}))
        self.assertEqual([i.type for i in items], ['corporate', 'cosplay'])

    def test_home_items_one_source_failing(self):
        self._featured('cosplay', [make_set('c1', 100)])
        with self.assertLogs(level='WARNING'):
            items = asyncio.run(load_home_items(self.images, {}))
        self.assertEqual([i.href for i in items], ['/set-gallery?set=c1&type=cosplay'])

    def test_home_manifest_then_config_fallback(self):
        config = {'fallbacks': {'home': [{'title': 'Curated', 'thumbnail': '/t.jpg', 'full': '/f.jpg'}]}}
        with self.assertLogs(level='WARNING'):
            items = asyncio.run(load_home_items(self.images, config))
        self.assertEqual([i.title for i in items], ['Curated'])

        self._write({'category': 'home', 'generatedAt': 'x', 'count': 1, 'images': [
            {'slug': 'h', 'title': 'Home Shot', 'description': '', 'thumbnail': '/t/h.jpg', 'full': '/f/h.jpg'},
        ]}, 'home', 'manifest.json')
        with self.assertLogs(level='WARNING'):
            items = asyncio.run(load_home_items(self.images, config))
        self.assertEqual([i.title for i in items], ['Home Shot'])

    def test_resolve_set(self):
        sets = [FeaturedSet.model_validate(make_set('first', 1)), FeaturedSet.model_validate(make_set('second', 2))]
        view = resolve_set(sets, 'second', 'cosplay')
        self.assertEqual(view.slug, 'second')
        self.assertFalse(view.fallback)

        view = resolve_set(sets, 'unknown', 'corporate')
        self.assertEqual(view.slug, 'first')
        self.assertTrue(view.fallback)
        self.assertEqual(view.category, 'Corporate Events')
        self.assertEqual(view.requested, 'unknown')

        self.assertIsNone(resolve_set([], 'x', 'cosplay'))

    def test_set_view_uses_configured_fallback(self):
        config = {'fallbacks': {'sets': {'cosplay': [{'slug': 'neon', 'title': 'Neon', 'images': []}]}}}
        with self.assertLogs(level='WARNING'):
            view = load_set_view(self.images, 'cosplay', 'neon', config)
        self.assertEqual(view.slug, 'neon')
        self.assertEqual(view.category, 'Cosplay Series')


if __name__ == '__main__':
    unittest.main()
