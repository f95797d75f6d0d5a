"""
Home showcase selection.

Merges the cosplay and corporate featured sets into one bounded, recency
sorted selection that still shows both sources when both have sets.
"""

from pydantic import BaseModel

from showcase.models import CoverImage, ShowcaseCandidate
from utils.dates import ensure_iso_date, to_epoch_millis

COSPLAY = 'cosplay'
CORPORATE = 'corporate'
DEFAULT_LIMIT = 6


def _as_dict(featured_set):
    if isinstance(featured_set, BaseModel):
        return featured_set.model_dump(by_alias=True)
    if isinstance(featured_set, dict):
        return featured_set
    return None


def normalise_sets(sets, set_type):
    """Candidates for sets with a usable cover, tagged with set_type.

    Accepts FeaturedSet models or manifest dicts. Sets whose cover has neither
    a thumbnail nor a full image are dropped.
    """
    candidates = []
    for featured_set in sets or []:
        data = _as_dict(featured_set)
        if not data:
            continue
        cover = data.get('coverImage') or data.get('cover_image')
        if not isinstance(cover, dict) or not (cover.get('thumbnail') or cover.get('full')):
            continue
        iso_date = ensure_iso_date(data.get('date'))
        candidates.append(ShowcaseCandidate(
            slug=data.get('slug') or '',
            title=data.get('title'),
            description=data.get('description'),
            category=data.get('category'),
            cover_image=CoverImage(**{k: cover.get(k) for k in ('slug', 'title', 'thumbnail', 'full')}),
            iso_date=iso_date,
            timestamp=to_epoch_millis(iso_date),
            type=set_type,
        ))
    return candidates


def recency_key(candidate):
    """Newest first; ties by title (or slug) ascending, ignoring case."""
    name = candidate.title or candidate.slug or ''
    return (-candidate.timestamp, name.casefold(), name)


def _identity(candidate):
    return (candidate.type, candidate.slug)


def select_for_home(cosplay_sets, corporate_sets, limit=DEFAULT_LIMIT):
    """Select up to limit featured sets for the home page.

    The newest half of the limit is taken from each source first, then the
    remaining slots are filled from both sources by pure recency.

    Returns:
        list[ShowcaseCandidate]: Sorted by recency; [] when both sources are empty
    """
    cosplay = sorted(normalise_sets(cosplay_sets, COSPLAY), key=recency_key)
    corporate = sorted(normalise_sets(corporate_sets, CORPORATE), key=recency_key)

    if limit <= 0 or (not cosplay and not corporate):
        return []

    half = max(1, limit // 2)

    selection = []
    seen = set()
    for candidate in cosplay[:half] + corporate[:half]:
        if _identity(candidate) in seen:
            continue
        seen.add(_identity(candidate))
        selection.append(candidate)

    for candidate in sorted(cosplay + corporate, key=recency_key):
        if len(selection) >= limit:
            break
        if _identity(candidate) in seen:
            continue
        seen.add(_identity(candidate))
        selection.append(candidate)

    return sorted(selection, key=recency_key)[:limit]
