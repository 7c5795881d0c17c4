"""
content_schema.py — Content item & filter state data schemas

PURPOSE:
    One shared item shape for both content domains (blog posts and project
    listings) so the filter / sort / statistics pipeline is written once.

    ContentItem  searchable text fields + tag list + date + featured flag
    PostItem     ContentItem + slug/author (article records)
    ProjectItem  ContentItem + engagement metrics (stars, forks, demo link,
                 technologies, topics)
    FilterState  immutable snapshot of the user's current criteria

USAGE:
    1. startup.load_catalog() builds PostItem / ProjectItem via from_dict()
    2. API layer builds a FilterState per request (default_filter_state() + overrides)
    3. engine.query(items, state) runs filter → sort → summarize
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from discovery.core.config import DEFAULT_SORT_MODE
from discovery.core.utils.date_utils import safe_count, safe_number
from discovery.utils.normalize import normalize_search_term
from discovery.utils.reading_time import calculate_reading_time


# ======================================================================
# SORT MODES
# ======================================================================

class SortMode(str, Enum):
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    READING_TIME = "reading-time"
    TITLE = "title"


SORT_MODES = frozenset(mode.value for mode in SortMode)


# ======================================================================
# CONTENT ITEMS
# ======================================================================

@dataclass
class ContentItem:
    """
    Minimal searchable, taggable, datable record.

    Fields:
        id:            Stable unique identifier
        title:         Display title (searched, sorted by "title")
        description:   Short summary (searched)
        body:          Long-form text (searched)
        tags:          Ordered tag list, stored as written
        date:          ISO-8601 string or datetime/date (sorted by "date-*")
        featured:      Editorial highlight flag
        reading_time:  Estimated minutes (sorted by "reading-time")
    """
    id: Any
    title: str
    description: str = ""
    body: str = ""
    tags: List[str] = field(default_factory=list)
    date: Any = None
    featured: bool = False
    reading_time: float = 0


@dataclass
class PostItem(ContentItem):
    slug: str = ""
    author: str = ""

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "PostItem":
        """
        Build a post from a catalog record.

        Accepts a flat record or the nested {"meta": {...}, "content": ...,
        "slug": ..., "readingTime": ...} shape the markdown loader emits.
        Raises ValueError when the record has no title.
        """
        meta = record.get("meta")
        if not meta:
            meta = record
        elif not isinstance(meta, dict):
            raise ValueError(f"post meta must be an object, got {type(meta).__name__}")
        title = meta.get("title")
        if not title:
            raise ValueError(f"post record has no title: {record.get('slug') or record.get('id')!r}")

        body = record.get("content")
        if body is None:
            body = record.get("body") or ""

        slug = record.get("slug") or meta.get("slug") or ""

        reading_time = safe_number(record.get("readingTime", record.get("reading_time")))
        if reading_time is None:
            reading_time = calculate_reading_time(body)

        return cls(
            id=record.get("id") or slug or title,
            title=title,
            description=meta.get("description") or "",
            body=body,
            tags=_as_list(meta.get("tags"), "tags"),
            date=meta.get("date"),
            featured=meta.get("featured") is True,
            reading_time=reading_time,
            slug=slug,
            author=meta.get("author") or "",
        )


@dataclass
class ProjectItem(ContentItem):
    """
    Project listing with engagement metrics.

    has_demo left as None is derived from homepage (non-blank → True);
    any other value counts only when it is literally True.
    Missing or invalid stars/forks become 0.
    A project without explicit tags is tagged by its topics.
    """
    stars: int = 0
    forks: int = 0
    homepage: Optional[str] = None
    has_demo: Optional[bool] = None
    technologies: List[str] = field(default_factory=list)
    topics: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.stars = safe_count(self.stars)
        self.forks = safe_count(self.forks)
        if self.has_demo is None:
            self.has_demo = isinstance(self.homepage, str) and bool(self.homepage.strip())
        else:
            self.has_demo = self.has_demo is True
        if not self.tags and self.topics:
            self.tags = list(self.topics)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "ProjectItem":
        """
        Build a project from a catalog record.

        Understands GitHub repository payload keys (name, stargazers_count,
        forks_count, created_at, language, languages) as well as flat keys.
        Raises ValueError when the record has neither id nor name.
        """
        title = record.get("title") or record.get("name")
        if record.get("id") is None and not title:
            raise ValueError("project record has neither id nor name")

        topics = _as_list(record.get("topics"), "topics")
        has_demo = record.get("has_demo", record.get("hasDemo"))

        return cls(
            id=record["id"] if record.get("id") is not None else title,
            title=title or str(record.get("id")),
            description=record.get("description") or "",
            body=record.get("body") or record.get("readme") or "",
            tags=_as_list(record.get("tags"), "tags"),
            date=record.get("date") or record.get("created_at"),
            featured=record.get("featured") is True,
            reading_time=safe_number(record.get("reading_time")) or 0,
            stars=safe_count(record.get("stars", record.get("stargazers_count"))),
            forks=safe_count(record.get("forks", record.get("forks_count"))),
            homepage=record.get("homepage"),
            has_demo=None if has_demo is None else has_demo is True,
            technologies=_collect_technologies(record),
            topics=topics,
        )


def _as_list(value: Any, name: str) -> List[str]:
    """
    Coerce a raw string-list field. A bare string is one entry, never a
    sequence of characters. Raises ValueError for any other non-list value.
    """
    if value is None or value == "":
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ValueError(f"{name} must be a list of strings, got {type(value).__name__}")


def _collect_technologies(record: Dict[str, Any]) -> List[str]:
    """Primary language first, then the languages breakdown, first occurrence wins."""
    candidates: List[str] = []
    candidates.extend(_as_list(record.get("technologies"), "technologies"))
    if record.get("language"):
        candidates.append(record["language"])
    languages = record.get("languages")
    if isinstance(languages, dict):
        candidates.extend(languages.keys())
    else:
        candidates.extend(_as_list(languages, "languages"))

    seen = set()
    result = []
    for name in candidates:
        if name and name not in seen:
            seen.add(name)
            result.append(name)
    return result


# ======================================================================
# FILTER STATE
# ======================================================================

@dataclass(frozen=True)
class FilterState:
    """
    Immutable snapshot of the user's filter criteria, rebuilt per interaction.

    Fields:
        search:         Free text; blank means "no search"
        selected_tags:  Tags combined with OR; empty means "no tag restriction"
        show_featured:  True → featured items only; False → no restriction
        sort_by:        SortMode value; unknown strings leave order untouched
    """
    search: str = ""
    selected_tags: Tuple[str, ...] = ()
    show_featured: bool = False
    sort_by: str = SortMode.DATE_DESC.value

    def __post_init__(self):
        if not isinstance(self.selected_tags, tuple):
            object.__setattr__(self, "selected_tags", tuple(self.selected_tags or ()))
        if isinstance(self.sort_by, SortMode):
            object.__setattr__(self, "sort_by", self.sort_by.value)

    @property
    def normalized_search(self) -> str:
        return normalize_search_term(self.search)

    @property
    def has_active_filters(self) -> bool:
        """Sort mode is a view preference, not a filter."""
        return bool(self.normalized_search) or bool(self.selected_tags) or self.show_featured

    def with_search(self, search: str) -> "FilterState":
        return replace(self, search=search)

    def with_sort(self, sort_by: str) -> "FilterState":
        return replace(self, sort_by=sort_by)

    def toggle_featured(self) -> "FilterState":
        return replace(self, show_featured=not self.show_featured)

    def toggle_tag(self, tag: str) -> "FilterState":
        """Add the tag if absent, remove it if present. Selection order is kept."""
        if tag in self.selected_tags:
            tags = tuple(t for t in self.selected_tags if t != tag)
        else:
            tags = self.selected_tags + (tag,)
        return replace(self, selected_tags=tags)


def default_filter_state(**overrides) -> FilterState:
    """
    The one place filter defaults live: no search, no tags, no featured
    restriction, DEFAULT_SORT_MODE (date-desc unless configured).
    """
    sort_by = DEFAULT_SORT_MODE if DEFAULT_SORT_MODE in SORT_MODES else SortMode.DATE_DESC.value
    values = {"search": "", "selected_tags": (), "show_featured": False, "sort_by": sort_by}
    values.update(overrides)
    return FilterState(**values)


def clear_filters() -> FilterState:
    """Reset every criterion, including the sort mode."""
    return default_filter_state()


def iter_tags(items: Iterable[ContentItem]) -> Iterable[str]:
    for item in items:
        yield from item.tags
