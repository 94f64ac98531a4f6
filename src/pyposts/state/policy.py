"""Deterministic collection updates.

Pure functions only: the store decides *when* to apply a result, these
decide *how* the collection changes. Inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Sequence

from pyposts.models.post import Post


def is_stale(issued_generation: int, current_generation: int) -> bool:
    """A completion is stale when the store was closed after it was issued."""
    return issued_generation != current_generation


def prepend(posts: Sequence[Post], post: Post) -> list[Post]:
    return [post, *posts]


def replace_first(posts: Sequence[Post], post_id: int, replacement: Post) -> list[Post] | None:
    """Replace the first post with *post_id* in place.

    Returns ``None`` when no post matches, so the caller can skip the
    change notification.
    """
    for index, item in enumerate(posts):
        if item.id == post_id:
            updated = list(posts)
            updated[index] = replacement
            return updated
    return None


def remove_all(posts: Sequence[Post], post_id: int) -> list[Post]:
    return [item for item in posts if item.id != post_id]
