"""
statistics.py — Statistics Aggregator.

Two views over a collection:

    summarize(all, filtered)  "showing N of M" counts for a result list
    aggregate(projects)       dashboard tiles: stars, forks, technologies,
                              topics, live demos (one pass)
    overview(items)           filter panel header: totals, featured count,
                              mean reading time

Distinct-value lists are case-sensitive and keep first-occurrence order, so
the same collection always yields the same list. Distinct counts are the
length of those lists, never a sum of per-item counts.
"""

import math
from dataclasses import asdict, dataclass, field
from typing import List, Sequence

from discovery.core.content_schema import ContentItem
from discovery.core.utils.date_utils import safe_count, safe_number


@dataclass
class SummaryStats:
    total: int
    filtered: int
    hidden: int
    has_results: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AggregateMetrics:
    count: int = 0
    sum_stars: int = 0
    sum_forks: int = 0
    distinct_technologies: int = 0
    technologies_list: List[str] = field(default_factory=list)
    distinct_topics: int = 0
    all_topics: List[str] = field(default_factory=list)
    items_with_demo: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class FilterOverview:
    total: int = 0
    featured: int = 0
    avg_reading_time: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def summarize(all_items: Sequence[ContentItem], filtered_items: Sequence[ContentItem]) -> SummaryStats:
    total = len(all_items)
    filtered = len(filtered_items)
    return SummaryStats(
        total=total,
        filtered=filtered,
        hidden=total - filtered,
        has_results=filtered > 0,
    )


def aggregate(items: Sequence[ContentItem]) -> AggregateMetrics:
    """
    Single pass over a project collection.

    Missing or invalid stars/forks count as 0 (the item is still counted),
    so sums and count always describe the same set of items. Items without
    project fields (plain posts) contribute only to count.
    """
    metrics = AggregateMetrics()
    seen_technologies = set()
    seen_topics = set()

    for item in items:
        metrics.count += 1
        metrics.sum_stars += safe_count(getattr(item, "stars", 0))
        metrics.sum_forks += safe_count(getattr(item, "forks", 0))

        for tech in getattr(item, "technologies", None) or []:
            if tech not in seen_technologies:
                seen_technologies.add(tech)
                metrics.technologies_list.append(tech)

        for topic in getattr(item, "topics", None) or []:
            if topic not in seen_topics:
                seen_topics.add(topic)
                metrics.all_topics.append(topic)

        if getattr(item, "has_demo", False) is True:
            metrics.items_with_demo += 1

    metrics.distinct_technologies = len(seen_technologies)
    metrics.distinct_topics = len(seen_topics)
    return metrics


def overview(items: Sequence[ContentItem]) -> FilterOverview:
    """Totals for the filter panel header. Empty collection → all zeros."""
    if not items:
        return FilterOverview()

    minutes = sum(safe_number(item.reading_time) or 0 for item in items)
    return FilterOverview(
        total=len(items),
        featured=sum(1 for item in items if item.featured is True),
        # Half rounds up, as the panel displays it
        avg_reading_time=math.floor(minutes / len(items) + 0.5),
    )
