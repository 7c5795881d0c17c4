import json
import logging
import os

from .config import CATALOG_PATH
from .content_schema import PostItem, ProjectItem

logger = logging.getLogger(__name__)

# Global resources (initialized in load_catalog)
POSTS = []
PROJECTS = []
LOADING_ERROR = None


def _build_items(records, factory, kind):
    """Build items from raw records, skipping (and logging) broken ones."""
    items = []
    skipped = 0
    for record in records or []:
        if not isinstance(record, dict):
            skipped += 1
            continue
        try:
            items.append(factory(record))
        except (KeyError, TypeError, ValueError) as e:
            skipped += 1
            logger.warning(f"[STARTUP] Skipping {kind} record: {e}")
    if skipped:
        logger.warning(f"[STARTUP] {skipped} {kind} record(s) skipped")
    return items


def load_catalog(path=None):
    """
    Load the pre-parsed content catalog into POSTS / PROJECTS.

    Called once from the app lifespan. Never raises: a missing or unreadable
    catalog leaves empty collections and records LOADING_ERROR.
    """
    global POSTS, PROJECTS, LOADING_ERROR

    path = path or CATALOG_PATH
    logger.info(f"[STARTUP] Loading catalog from {path}...")

    if not os.path.exists(path):
        LOADING_ERROR = f"Catalog not found at {path}"
        logger.warning(f"[STARTUP] {LOADING_ERROR}")
        POSTS, PROJECTS = [], []
        return

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:  # JSON and UTF-8 decode errors are ValueErrors
        LOADING_ERROR = f"Failed to read catalog: {e}"
        logger.error(f"[STARTUP] {LOADING_ERROR}")
        POSTS, PROJECTS = [], []
        return

    if not isinstance(raw, dict):
        LOADING_ERROR = "Catalog root must be an object with 'posts' and 'projects'"
        logger.error(f"[STARTUP] {LOADING_ERROR}")
        POSTS, PROJECTS = [], []
        return

    POSTS = _build_items(raw.get("posts"), PostItem.from_dict, "post")
    PROJECTS = _build_items(raw.get("projects"), ProjectItem.from_dict, "project")
    LOADING_ERROR = None

    logger.info(f"[STARTUP] Catalog ready: {len(POSTS)} posts, {len(PROJECTS)} projects")
