from __future__ import annotations

from pyposts.models.post import Post
from pyposts.state.policy import is_stale, prepend, remove_all, replace_first


def _post(post_id: int, title: str = "t") -> Post:
    return Post(id=post_id, user_id=1, title=title, body="b")


def test_prepend_puts_new_post_first() -> None:
    posts = [_post(1), _post(2)]
    result = prepend(posts, _post(101))
    assert [p.id for p in result] == [101, 1, 2]
    assert [p.id for p in posts] == [1, 2]


def test_replace_first_keeps_position_and_only_first_match() -> None:
    posts = [_post(1), _post(2, "old"), _post(2, "dup")]
    result = replace_first(posts, 2, _post(2, "new"))
    assert result is not None
    assert [p.title for p in result] == ["t", "new", "dup"]
    assert posts[1].title == "old"


def test_replace_first_without_match_returns_none() -> None:
    assert replace_first([_post(1)], 5, _post(5)) is None


def test_remove_all_drops_duplicates() -> None:
    posts = [_post(2), _post(1), _post(2)]
    assert [p.id for p in remove_all(posts, 2)] == [1]
    assert remove_all(posts, 9) == posts


def test_is_stale() -> None:
    assert is_stale(0, 0) is False
    assert is_stale(0, 1) is True
