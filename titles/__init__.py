"""
Folio title inference package.
"""

from titles.inference import (
    TitleInferencer, infer_title, to_title_case,
    EVENT_PATTERNS, UNTITLED,
)
