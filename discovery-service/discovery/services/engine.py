"""
engine.py — Pipeline Orchestrator.

    all_items + FilterState
        ↓
    apply_filters   (criteria_filter)
        ↓
    sort_items      (sort_selector)
        ↓
    summarize       (statistics, on the filtered-but-unsorted list)

One call computes items and stats from the same snapshot, so a caller can
never pair the list of one state with the counts of another.
Stateless: nothing is cached between calls.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from discovery.core.content_schema import ContentItem, FilterState, default_filter_state
from discovery.services.criteria_filter import apply_filters
from discovery.services.sort_selector import sort_items
from discovery.services.statistics import AggregateMetrics, SummaryStats, aggregate, summarize

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    items: List[ContentItem]
    stats: SummaryStats


@dataclass
class DashboardResult:
    items: List[ContentItem]
    stats: SummaryStats
    metrics: AggregateMetrics


def query(all_items: Sequence[ContentItem], filter_state: Optional[FilterState] = None) -> QueryResult:
    """
    Filter, order and count a collection for one filter state.

    Args:
        all_items:    Full collection, read-only.
        filter_state: Criteria; None means default_filter_state().

    Returns:
        QueryResult with the ordered survivors and summary stats.
    """
    if filter_state is None:
        filter_state = default_filter_state()

    filtered = apply_filters(all_items, filter_state)
    ordered = sort_items(filtered, filter_state.sort_by)
    stats = summarize(all_items, filtered)

    logger.debug(
        "[DISCOVER] %d/%d items shown, sort=%s",
        stats.filtered, stats.total, filter_state.sort_by,
    )
    return QueryResult(items=ordered, stats=stats)


def project_dashboard(all_items: Sequence[ContentItem], filter_state: Optional[FilterState] = None) -> DashboardResult:
    """query() plus aggregate metrics over the projects that survived the filters."""
    result = query(all_items, filter_state)
    return DashboardResult(
        items=result.items,
        stats=result.stats,
        metrics=aggregate(result.items),
    )
