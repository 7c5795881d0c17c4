from fastapi import APIRouter
from fastapi.responses import JSONResponse
from typing import List
import logging

from discovery.core import startup
from discovery.core.content_schema import default_filter_state
from discovery.schemas.discover import (
    AggregateOut,
    FilterRequest,
    OverviewOut,
    PostQueryResponse,
    ProjectQueryResponse,
)
from discovery.services.criteria_filter import available_tags
from discovery.services.engine import project_dashboard, query
from discovery.services.statistics import aggregate, overview

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Discovery"]
)


def _filter_state(req: FilterRequest):
    overrides = {
        "search": req.search,
        "selected_tags": tuple(req.selected_tags),
        "show_featured": req.show_featured,
    }
    if req.sort_by:
        overrides["sort_by"] = req.sort_by
    return default_filter_state(**overrides)


def _date_str(value):
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _post_out(item) -> dict:
    return {
        "id": str(item.id),
        "title": item.title,
        "description": item.description,
        "slug": item.slug,
        "author": item.author,
        "tags": item.tags,
        "date": _date_str(item.date),
        "featured": item.featured is True,
        "reading_time": item.reading_time,
    }


def _project_out(item) -> dict:
    return {
        "id": str(item.id),
        "title": item.title,
        "description": item.description,
        "tags": item.tags,
        "date": _date_str(item.date),
        "featured": item.featured is True,
        "stars": item.stars,
        "forks": item.forks,
        "homepage": item.homepage,
        "has_demo": item.has_demo is True,
        "technologies": item.technologies,
        "topics": item.topics,
    }


def _unavailable(e: Exception) -> JSONResponse:
    logger.exception(f"[ERROR] Discovery request failed: {e}")
    # 503 so load balancers can tell a broken instance from a bad request
    return JSONResponse(
        status_code=503,
        content={"detail": f"Service unavailable or error: {str(e)}"}
    )


@router.post("/posts/query", response_model=PostQueryResponse)
def query_posts(req: FilterRequest):
    """Filtered, ordered posts plus "showing N of M" counts."""
    try:
        result = query(startup.POSTS, _filter_state(req))
        return {
            "items": [_post_out(item) for item in result.items],
            "stats": result.stats.to_dict(),
        }
    except Exception as e:
        return _unavailable(e)


@router.get("/posts/tags", response_model=List[str])
def post_tags():
    return available_tags(startup.POSTS)


@router.get("/posts/overview", response_model=OverviewOut)
def post_overview():
    return overview(startup.POSTS).to_dict()


@router.post("/projects/query", response_model=ProjectQueryResponse)
def query_projects(req: FilterRequest):
    """Filtered, ordered projects with counts and dashboard metrics for the survivors."""
    try:
        result = project_dashboard(startup.PROJECTS, _filter_state(req))
        return {
            "items": [_project_out(item) for item in result.items],
            "stats": result.stats.to_dict(),
            "metrics": result.metrics.to_dict(),
        }
    except Exception as e:
        return _unavailable(e)


@router.get("/projects/statistics", response_model=AggregateOut)
def project_statistics():
    return aggregate(startup.PROJECTS).to_dict()
