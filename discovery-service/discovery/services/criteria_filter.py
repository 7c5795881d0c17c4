"""
criteria_filter.py — Criteria Predicate Composer.

Narrows a collection with the user's filter criteria.

Pipeline:
    Items
        ↓
    Search stage    (skipped when search is blank)
        ↓
    Featured stage  (skipped when show_featured is False)
        ↓
    Tag stage       (skipped when no tag is selected; OR across selected tags)
        ↓
    Survivors, in input order

Stages combine with AND; every stage keeps the relative order of its input.
Sorting is sort_selector's job, never this module's.
"""

import logging
from typing import List, Sequence

from discovery.core.content_schema import ContentItem, FilterState, iter_tags
from discovery.services.field_matcher import matches

logger = logging.getLogger(__name__)


def apply_filters(items: Sequence[ContentItem], filter_state: FilterState) -> List[ContentItem]:
    """
    Apply search, featured and tag criteria to a collection.

    Args:
        items:        Source collection. Never mutated.
        filter_state: Criteria snapshot.

    Returns:
        New list of the surviving items (same objects, input order).
    """
    filtered = list(items)

    term = filter_state.normalized_search
    if term:
        filtered = _search_stage(filtered, term)

    if filter_state.show_featured:
        filtered = _featured_stage(filtered)

    if filter_state.selected_tags:
        filtered = _tag_stage(filtered, filter_state.selected_tags)

    logger.debug(
        "[FILTER] %d → %d items (search=%r, featured=%s, tags=%s)",
        len(items), len(filtered), term, filter_state.show_featured,
        list(filter_state.selected_tags),
    )
    return filtered


def _search_stage(items: List[ContentItem], term: str) -> List[ContentItem]:
    return [item for item in items if matches(item, term)]


def _featured_stage(items: List[ContentItem]) -> List[ContentItem]:
    # Truthy strings like "yes" are upstream defects, not featured items
    return [item for item in items if item.featured is True]


def _tag_stage(items: List[ContentItem], selected_tags: Sequence[str]) -> List[ContentItem]:
    """Keep items carrying AT LEAST ONE selected tag. Exact, case-sensitive."""
    wanted = set(selected_tags)
    return [item for item in items if any(tag in wanted for tag in item.tags)]


def available_tags(items: Sequence[ContentItem]) -> List[str]:
    """Sorted distinct tags across the collection (tag picker options)."""
    return sorted(set(iter_tags(items)))
