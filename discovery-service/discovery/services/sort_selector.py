"""
sort_selector.py — Sort Comparator Selector.

Maps a sort mode to an ordering rule and returns a stably sorted copy.

    date-desc     later date first
    date-asc      earlier date first
    reading-time  shorter read first
    title         locale-style, accent/case-insensitive first
    (unknown)     input order

Equal keys keep input order (sorted() is stable),
so re-sorting an already sorted list is a no-op.
Items whose date / reading time cannot be read sort after every valid
value, in input order among themselves.
"""

import logging
from typing import Callable, Dict, List, Sequence

from discovery.core.content_schema import ContentItem, SortMode
from discovery.core.utils.date_utils import safe_number, safe_timestamp
from discovery.utils.normalize import collation_key

logger = logging.getLogger(__name__)

_MISSING = (1, 0.0)


def _date_desc_key(item: ContentItem) -> tuple:
    ts = safe_timestamp(item.date)
    return _MISSING if ts is None else (0, -ts)


def _date_asc_key(item: ContentItem) -> tuple:
    ts = safe_timestamp(item.date)
    return _MISSING if ts is None else (0, ts)


def _reading_time_key(item: ContentItem) -> tuple:
    minutes = safe_number(item.reading_time)
    return _MISSING if minutes is None else (0, minutes)


def _title_key(item: ContentItem) -> tuple:
    return collation_key(item.title)


SORT_KEYS: Dict[str, Callable[[ContentItem], tuple]] = {
    SortMode.DATE_DESC.value: _date_desc_key,
    SortMode.DATE_ASC.value: _date_asc_key,
    SortMode.READING_TIME.value: _reading_time_key,
    SortMode.TITLE.value: _title_key,
}


def sort_items(items: Sequence[ContentItem], sort_by: str) -> List[ContentItem]:
    """
    Return a NEW list ordered by sort_by. The input is never reordered.

    Unrecognized modes degrade to input order instead of raising.
    """
    key = SORT_KEYS.get(_mode_value(sort_by))
    if key is None:
        logger.debug("[SORT] Unknown sort mode %r, keeping input order", sort_by)
        return list(items)
    return sorted(items, key=key)


def compare_items(a: ContentItem, b: ContentItem, sort_by: str) -> int:
    """
    Two-argument comparator behind sort_items.

    Returns:
        negative if a sorts first, positive if b sorts first, 0 if tied
        (always 0 for an unknown mode).
    """
    key = SORT_KEYS.get(_mode_value(sort_by))
    if key is None:
        return 0
    key_a, key_b = key(a), key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def _mode_value(sort_by) -> str:
    if isinstance(sort_by, SortMode):
        return sort_by.value
    return sort_by if isinstance(sort_by, str) else ""
