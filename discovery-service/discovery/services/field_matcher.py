"""
field_matcher.py — Single-item search match.

Plain substring containment over title, description, body and each tag.
Every field is lower-cased and tested on its own: joining fields would let
"guidereact" match "Hooks Guide" tagged "react".
"""

from discovery.core.content_schema import ContentItem


def matches(item: ContentItem, normalized_term: str) -> bool:
    """
    True if the term occurs in any searchable field of the item.

    Args:
        item:            Content item (post or project).
        normalized_term: Already lower-cased and trimmed, never empty
                         (the caller skips the search stage for blank input).
    """
    if normalized_term in (item.title or "").lower():
        return True
    if normalized_term in (item.description or "").lower():
        return True
    if normalized_term in (item.body or "").lower():
        return True
    return any(normalized_term in tag.lower() for tag in item.tags)
