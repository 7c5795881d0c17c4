"""
test_statistics.py - Tests for summarize(), aggregate() and overview().
"""
from discovery.core.content_schema import PostItem, ProjectItem
from discovery.services.statistics import (
    AggregateMetrics,
    SummaryStats,
    aggregate,
    overview,
    summarize,
)


# ===================================================================
# A. summarize
# ===================================================================

def test_summarize_counts(posts):
    stats = summarize(posts, posts[:2])
    assert stats == SummaryStats(total=5, filtered=2, hidden=3, has_results=True)


def test_summarize_no_results(posts):
    stats = summarize(posts, [])
    assert stats.filtered == 0
    assert stats.hidden == 5
    assert stats.has_results is False


def test_summarize_empty():
    assert summarize([], []).to_dict() == {
        "total": 0, "filtered": 0, "hidden": 0, "has_results": False,
    }


# ===================================================================
# B. aggregate
# ===================================================================

def test_aggregate_first_occurrence_technologies():
    items = [
        ProjectItem(id=1, title="a", technologies=["TS", "React"]),
        ProjectItem(id=2, title="b", technologies=["TS"]),
    ]
    metrics = aggregate(items)
    assert metrics.distinct_technologies == 2
    assert metrics.technologies_list == ["TS", "React"]


def test_aggregate_projects(projects):
    metrics = aggregate(projects)
    assert metrics.count == 3
    assert metrics.sum_stars == 16      # None stars count as 0
    assert metrics.sum_forks == 3
    assert metrics.technologies_list == ["TypeScript", "CSS", "Rust", "Shell"]
    assert metrics.distinct_technologies == 4
    assert metrics.all_topics == ["react", "vite", "cli", "rust"]
    assert metrics.distinct_topics == 4
    assert metrics.items_with_demo == 1


def test_aggregate_distinct_is_case_sensitive():
    items = [
        ProjectItem(id=1, title="a", topics=["React"]),
        ProjectItem(id=2, title="b", topics=["react", "React"]),
    ]
    metrics = aggregate(items)
    assert metrics.all_topics == ["React", "react"]
    assert metrics.distinct_topics == 2


def test_aggregate_distinct_count_not_sum():
    items = [ProjectItem(id=i, title=str(i), topics=["cli", "rust"]) for i in range(4)]
    assert aggregate(items).distinct_topics == 2


def test_aggregate_count_matches_length_with_missing_metrics():
    items = [ProjectItem(id=1, title="a", stars="lots"), ProjectItem(id=2, title="b", stars=7)]
    metrics = aggregate(items)
    assert metrics.count == 2
    assert metrics.sum_stars == 7


def test_aggregate_list_and_count_agree(projects):
    metrics = aggregate(projects)
    assert metrics.distinct_technologies == len(metrics.technologies_list)
    assert metrics.distinct_topics == len(metrics.all_topics)
    assert len(set(metrics.technologies_list)) == len(metrics.technologies_list)


def test_aggregate_empty():
    assert aggregate([]) == AggregateMetrics()


def test_aggregate_plain_posts_only_count(posts):
    metrics = aggregate(posts)
    assert metrics.count == 5
    assert metrics.sum_stars == 0
    assert metrics.technologies_list == []
    assert metrics.items_with_demo == 0


def test_aggregate_to_dict(projects):
    data = aggregate(projects[:1]).to_dict()
    assert data["technologies_list"] == ["TypeScript", "CSS"]
    assert data["items_with_demo"] == 1


# ===================================================================
# C. overview
# ===================================================================

def test_overview(posts):
    result = overview(posts)
    assert result.total == 5
    assert result.featured == 2
    assert result.avg_reading_time == 6    # 31 / 5 = 6.2


def test_overview_rounds_half_up():
    items = [PostItem(id=1, title="a", reading_time=2), PostItem(id=2, title="b", reading_time=3)]
    assert overview(items).avg_reading_time == 3


def test_overview_empty():
    assert overview([]).to_dict() == {"total": 0, "featured": 0, "avg_reading_time": 0}
