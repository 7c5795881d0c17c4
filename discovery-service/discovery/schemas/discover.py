from pydantic import BaseModel
from typing import List, Optional

class FilterRequest(BaseModel):
    search: str = ""
    selected_tags: List[str] = []
    show_featured: bool = False
    sort_by: Optional[str] = None   # None → configured default

    class Config:
        # Allow extra fields without crashing
        extra = "ignore"

class PostOut(BaseModel):
    id: str
    title: str
    description: str = ""
    slug: str = ""
    author: str = ""
    tags: List[str] = []
    date: Optional[str] = None
    featured: bool = False
    reading_time: float = 0

class ProjectOut(BaseModel):
    id: str
    title: str
    description: str = ""
    tags: List[str] = []
    date: Optional[str] = None
    featured: bool = False
    stars: int = 0
    forks: int = 0
    homepage: Optional[str] = None
    has_demo: bool = False
    technologies: List[str] = []
    topics: List[str] = []

class SummaryOut(BaseModel):
    total: int
    filtered: int
    hidden: int
    has_results: bool

class AggregateOut(BaseModel):
    count: int
    sum_stars: int
    sum_forks: int
    distinct_technologies: int
    technologies_list: List[str]
    distinct_topics: int
    all_topics: List[str]
    items_with_demo: int

class OverviewOut(BaseModel):
    total: int
    featured: int
    avg_reading_time: int

class PostQueryResponse(BaseModel):
    items: List[PostOut]
    stats: SummaryOut

class ProjectQueryResponse(BaseModel):
    items: List[ProjectOut]
    stats: SummaryOut
    metrics: AggregateOut
