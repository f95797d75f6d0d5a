"""
Folio utilities package.

Re-exports public functions for date handling and thumbnail rendering.
"""

from utils.dates import (
    parse_date, to_iso, timestamp_to_iso, ensure_iso_date, to_epoch_millis, now_iso,
    parse_compact_date, format_short_date, format_month_label,
)
from utils.image_transforms import generate_thumbnail_file, fit_inside
