#!/usr/bin/env python3
"""Dump the posts collection through :class:`pyposts.PostsStore`.

Usage
-----
Optionally point at another server and run::

    export POSTS_BASE_URL="http://localhost:3000/posts"
    python scripts/dump_posts.py

Options::

    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    --limit N            Only print the first N posts
    --create TITLE BODY  Create a post after fetching (shown first)
    -v, --verbose        Enable DEBUG logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyposts import PostsConfig, PostsStore, StoreChange  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _format_text(store: PostsStore, limit: int | None) -> str:
    posts = store.posts[:limit] if limit else store.posts
    lines = [_section(f"{len(store.posts)} posts")]
    for post in posts:
        lines.append(f"  #{post.id} (user {post.user_id}) {post.title}")
        body = post.body.replace("\n", " ")
        lines.append(f"      {body[:100]}")
    if store.error is not None:
        lines.append(_section("error"))
        lines.append(f"  {store.error.message}")
    return "\n".join(lines)


def _format_json(store: PostsStore, limit: int | None) -> str:
    posts = store.posts[:limit] if limit else store.posts
    result: dict[str, Any] = {
        "count": len(store.posts),
        "posts": [post.to_wire() for post in posts],
        "error": store.error.model_dump(mode="json") if store.error is not None else None,
    }
    return json.dumps(result, indent=2, ensure_ascii=False)


async def _run(args: argparse.Namespace) -> int:
    config = PostsConfig.from_env(fetch_on_start=False)

    def _log_change(change: StoreChange) -> None:
        logging.getLogger("dump_posts").debug("%s change after %s", change.section, change.operation)

    async with PostsStore(config) as store:
        store.subscribe(_log_change)
        await store.fetch_all()
        if args.create:
            title, body = args.create
            await store.create(title, body)

        output = _format_json(store, args.limit) if args.json else _format_text(store, args.limit)

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
    else:
        print(output)
    return 1 if store.error is not None else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump posts via pyposts")
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("--output", help="Write output to this file")
    parser.add_argument("--limit", type=int, default=None, help="Only print the first N posts")
    parser.add_argument("--create", nargs=2, metavar=("TITLE", "BODY"), help="Create a post after fetching")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
