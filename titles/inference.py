"""
Filename title inference for Folio.

Turns bulk-imported filenames like '20240105-143000-comofun-lhq-12.jpg' into
display titles. Titles are defaults only; featured sets override them through
their meta.json sidecar.
"""

import os
import re

from utils.dates import parse_compact_date, format_short_date

UNTITLED = 'Untitled Event'

# keyword (lower-case substring) -> display label
EVENT_PATTERNS = {
    # Corporate events
    'jabergamo': 'JA Finals 2025',
    'mday': "Marconi's Day",
    'microsoft': 'Microsoft Event',
    'salone': 'Salone Aziendale',
    'techtint': 'Tech Tint Event',
    'aziendale': 'Corporate Event',
    'hq': 'Headquarters Session',
    'lhq': 'Low Quality Session',
    'cbg': 'Comic Book Galaxy Convention',
    'sgt': 'Salone del Giocattolo',
    'gardacon': 'GardaCon Convention',

    # Cosplay events and people
    'comofun': 'ComoFun Convention',
    'akiraflame': 'Akira Flame Cosplay Session',
    'brandy': 'Brandy Cosplay Portfolio',
    'celine': 'Celine Cosplay Session',
    'isa': 'Isa Character Study',
    'nibbo': 'Nibbo Cosplay Collection',
    'br4ndy': 'Brandy Cosplay Series',
    'cos': 'Cosplay Photography',
}

_DATE_PREFIX_RE = re.compile(r'^(\d{8})')
_TIME_RE = re.compile(r'(\d{2})(\d{2})(\d{2})')
_SEQUENCE_RE = re.compile(r'-(\d+)$')
_DATETIME_PREFIX_RE = re.compile(r'^(\d{8})-(\d{6})-')
_QUALITY_SUFFIX_RE = re.compile(r'-lhq|-hq|-lhq$|-hq$')
_YEAR_SUFFIX_RE = re.compile(r'-(\d{4})$')
_SEPARATORS_RE = re.compile(r'[-_]+')
_WORD_START_RE = re.compile(r'\b\w', re.ASCII)
_CONVENTION_RE = re.compile(r'con|galaxy|salone', re.IGNORECASE)


def _capitalize_words(value):
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), value)


def to_title_case(value):
    """'neon-dreams_vol2' -> 'Neon Dreams Vol2'."""
    return _capitalize_words(_SEPARATORS_RE.sub(' ', value or '')).strip()


def _strip_extension(filename):
    return os.path.splitext(os.path.basename(filename or ''))[0]


class TitleInferencer:
    """Infers human titles from filenames using a keyword table.

    The table is sorted once, longest keyword first, so specific keywords
    ('akiraflame') beat the generic ones they contain ('cos').
    """

    def __init__(self, patterns=None, extra_patterns=None):
        table = dict(EVENT_PATTERNS if patterns is None else patterns)
        if extra_patterns:
            table.update({k.lower(): v for k, v in extra_patterns.items()})
        # sorted() is stable, so equal lengths keep table order
        self.patterns = sorted(table.items(), key=lambda item: len(item[0]), reverse=True)

    def match_keyword(self, name):
        """Return the label of the first (longest) keyword found in name."""
        for keyword, label in self.patterns:
            if keyword and keyword in name:
                return label
        return None

    def infer(self, filename, category):
        name = _strip_extension(filename).lower()

        date_str = ''
        date_match = _DATE_PREFIX_RE.match(name)
        if date_match:
            parsed = parse_compact_date(date_match.group(1))
            if parsed:
                date_str = format_short_date(parsed)

        time_str = ''
        if not date_str:
            time_match = _TIME_RE.search(name)
            if time_match:
                time_str = f"{time_match.group(1)}:{time_match.group(2)}"

        label = self.match_keyword(name)
        if label:
            title = label
            if date_str:
                title += f" - {date_str}"
            elif time_str:
                title += f" at {time_str}"

            seq_match = _SEQUENCE_RE.search(name)
            if seq_match:
                seq = seq_match.group(1)
                # skip a year that is already part of the label
                if not (len(seq) == 4 and seq in title):
                    title += f" {seq}"
            return title or UNTITLED

        smart_name = _DATETIME_PREFIX_RE.sub('', name)
        smart_name = _QUALITY_SUFFIX_RE.sub('', smart_name, count=1)
        smart_name = _YEAR_SUFFIX_RE.sub('', smart_name)
        smart_name = _capitalize_words(smart_name.replace('-', ' ')).strip()

        if category == 'cosplay' and smart_name:
            parts = smart_name.split(' ')
            if len(parts) >= 2:
                rest = ' '.join(parts[1:])
                convention = next((p for p in parts if _CONVENTION_RE.search(p)), None)
                if convention:
                    smart_name = f"{convention} Convention - {rest}"
                else:
                    smart_name = f"{parts[0]} Cosplay - {rest}"

        if smart_name:
            title = f"{smart_name} - {date_str}" if date_str else smart_name
        else:
            title = to_title_case(name)

        return title or UNTITLED


_default_inferencer = TitleInferencer()


def infer_title(filename, category, inferencer=None):
    """Infer a display title for an image or set name. Never returns ''."""
    return (inferencer or _default_inferencer).infer(filename, category)
