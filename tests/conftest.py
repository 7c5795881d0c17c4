"""
conftest.py - Pytest configuration for discovery service tests

Sets up Python path and shared sample collections.
"""
import sys
from pathlib import Path

import pytest

# Add discovery-service to path for imports
SERVICE_DIR = Path(__file__).parent.parent / "discovery-service"

if str(SERVICE_DIR) not in sys.path:
    sys.path.insert(0, str(SERVICE_DIR))

from discovery.core.content_schema import PostItem, ProjectItem


# ===================================================================
# SAMPLE COLLECTIONS
# ===================================================================

@pytest.fixture
def hooks_post():
    return PostItem(
        id="hooks", title="Hooks Guide", description="State in function components",
        body="useState and useEffect explained.", tags=["react"],
        date="2024-01-01", reading_time=5, slug="hooks",
    )


@pytest.fixture
def rust_post():
    return PostItem(
        id="rust", title="Rust Basics", description="Ownership and borrowing",
        body="Every value has a single owner.", tags=["rust"],
        date="2024-02-01", reading_time=8, slug="rust",
    )


@pytest.fixture
def scenario_posts(hooks_post, rust_post):
    return [hooks_post, rust_post]


@pytest.fixture
def posts():
    """Five posts with overlapping tags, one featured pair, one tie on date."""
    return [
        PostItem(id="p1", title="Zustand in Practice", description="Small state stores",
                 body="Global state without boilerplate.", tags=["react", "state"],
                 date="2024-03-10", featured=True, reading_time=6),
        PostItem(id="p2", title="async Rust", description="Futures and executors",
                 body="Tokio drives futures to completion.", tags=["rust", "async"],
                 date="2023-11-05", reading_time=12),
        PostItem(id="p3", title="Écrire des tests", description="Testing in French",
                 body="Les tests unitaires en pratique.", tags=["testing"],
                 date="2024-03-10", reading_time=4),
        PostItem(id="p4", title="CSS Grid Layouts", description="Two-dimensional layout",
                 body="Grid areas and template columns.", tags=["css", "frontend"],
                 date="2022-06-01", featured=True, reading_time=6),
        PostItem(id="p5", title="Astro Islands", description="Partial hydration",
                 body="Ship less JavaScript to the browser.", tags=["frontend", "React"],
                 date="2024-01-20", reading_time=3),
    ]


@pytest.fixture
def projects():
    return [
        ProjectItem(id=1, title="portfolio", description="Personal site",
                    date="2023-05-10T12:00:00Z", stars=12, forks=3,
                    homepage="https://example.com",
                    technologies=["TypeScript", "CSS"], topics=["react", "vite"]),
        ProjectItem(id=2, title="ledger-cli", description="Plain-text accounting",
                    date="2022-11-02T08:30:00Z", stars=4, forks=0, homepage="",
                    technologies=["Rust"], topics=["cli", "rust"]),
        ProjectItem(id=3, title="dotfiles", description="Shell setup",
                    date="2021-01-15T00:00:00Z", stars=None, forks=None, homepage=None,
                    technologies=["Shell", "TypeScript"], topics=["cli"], featured=True),
    ]
