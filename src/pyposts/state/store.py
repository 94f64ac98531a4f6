"""Observable in-memory store for posts.

This is the only component allowed to change the local post collection
or the error slot. All changes happen on the event loop the store was
started on; calls made from other threads are marshalled onto it.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from collections.abc import Callable, Coroutine
from typing import Any

import aiohttp

from pyposts.client import PostsClient
from pyposts.config import PostsConfig
from pyposts.exceptions import PostsDecodeError, PostsError
from pyposts.models.error import ErrorMessage, Operation
from pyposts.models.post import Post
from pyposts.state import policy
from pyposts.state.events import StateSection, StoreChange

_logger = logging.getLogger(__name__)

Listener = Callable[[StoreChange], None]
Dispatched = asyncio.Future[None] | concurrent.futures.Future[None]


class PostsStore:
    """Keeps a local copy of the remote posts collection.

    The four operations (:meth:`fetch_all`, :meth:`create`,
    :meth:`update`, :meth:`delete`) are fire-and-forget: each schedules
    one HTTP call and returns immediately. Outcomes are only visible
    through :attr:`posts`, :attr:`error` and subscriber notifications.
    The returned future may be awaited but never raises for API
    failures; those land in :attr:`error` instead.

    Usage::

        async with PostsStore(PostsConfig(fetch_on_start=False)) as store:
            store.subscribe(render)
            await store.fetch_all()
            store.create("Title", "Body")
    """

    def __init__(
        self,
        config: PostsConfig | None = None,
        *,
        client: PostsClient | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        if client is not None:
            self._config = client.config
        else:
            self._config = config or PostsConfig()
        self._owns_client = client is None
        self._client = client or PostsClient(self._config, session=session)
        self._posts: list[Post] = []
        self._error: ErrorMessage | None = None
        self._listeners: list[Listener] = []
        self._loop: asyncio.AbstractEventLoop | None = None
        self._generation = 0
        self._tasks: set[asyncio.Future[None]] = set()

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def posts(self) -> tuple[Post, ...]:
        return tuple(self._posts)

    @property
    def error(self) -> ErrorMessage | None:
        return self._error

    @property
    def is_running(self) -> bool:
        return self._loop is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for every state change.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, section: StateSection, operation: Operation) -> None:
        change = StoreChange(
            section=section,
            operation=operation,
            posts=tuple(self._posts),
            error=self._error,
        )
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                _logger.exception("Store listener %r failed", listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> PostsStore:
        """Bind the store to the running loop and open the HTTP client."""
        if self._loop is not None:
            return self
        await self._client.open()
        self._loop = asyncio.get_running_loop()
        if self._config.fetch_on_start:
            self.fetch_all()
        return self

    async def close(self) -> None:
        """Discard the store.

        Results of requests still in flight are dropped and the HTTP
        session is closed if the store created it.
        """
        if self._loop is None:
            return
        # Stop accepting operations before the first await.
        self._loop = None
        self._generation += 1
        current = asyncio.current_task()
        pending = [task for task in self._tasks if task is not current and not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._tasks.clear()
        if self._owns_client:
            await self._client.close()

    async def __aenter__(self) -> PostsStore:
        return await self.start()

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    def _require_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            raise PostsError("Store not started. Use 'async with PostsStore(...) as store:'")
        return self._loop

    # ------------------------------------------------------------------
    # Dispatch onto the store loop
    # ------------------------------------------------------------------

    def _on_loop_thread(self, loop: asyncio.AbstractEventLoop) -> bool:
        try:
            return asyncio.get_running_loop() is loop
        except RuntimeError:
            return False

    def _track(self, task: asyncio.Future[None]) -> None:
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(self._log_unexpected_failure)

    def _log_unexpected_failure(self, task: asyncio.Future[None]) -> None:
        # API failures are captured into the error slot; anything reaching here is a bug.
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _logger.error("Store operation failed", exc_info=exc)

    async def _run_tracked(self, factory: Callable[[], Coroutine[Any, Any, None]]) -> None:
        task = asyncio.current_task()
        if task is not None:
            self._track(task)
        await factory()

    def _dispatch(self, factory: Callable[[], Coroutine[Any, Any, None]]) -> Dispatched:
        loop = self._require_loop()
        if self._on_loop_thread(loop):
            task = loop.create_task(factory())
            self._track(task)
            return task
        return asyncio.run_coroutine_threadsafe(self._run_tracked(factory), loop)

    def _is_stale(self, generation: int, operation: Operation) -> bool:
        if policy.is_stale(generation, self._generation):
            _logger.debug("Dropping stale %s completion (generation %d)", operation, generation)
            return True
        return False

    def _fail(self, operation: Operation, prefix: str, exc: PostsError, generation: int) -> None:
        if self._is_stale(generation, operation):
            return
        self._error = ErrorMessage(message=f"{prefix}: {exc}", operation=operation)
        _logger.warning("%s", self._error.message)
        self._notify(StateSection.ERROR, operation)

    def _set_posts(self, posts: list[Post], operation: Operation) -> None:
        self._posts = posts
        self._notify(StateSection.POSTS, operation)

    # ------------------------------------------------------------------
    # Fire-and-forget operations
    # ------------------------------------------------------------------

    def fetch_all(self) -> Dispatched:
        """Replace the local collection with the remote one."""
        return self._dispatch(self.async_fetch_all)

    def create(self, title: str, body: str) -> Dispatched:
        """Create a post and prepend it to the local collection."""
        return self._dispatch(lambda: self.async_create(title, body))

    def update(self, post: Post, new_title: str, new_body: str) -> Dispatched:
        """Update a post and replace it in the local collection."""
        return self._dispatch(lambda: self.async_update(post, new_title, new_body))

    def delete(self, post: Post) -> Dispatched:
        """Delete a post and drop every local copy of it."""
        return self._dispatch(lambda: self.async_delete(post))

    def dismiss_error(self) -> None:
        """Clear the error slot."""
        loop = self._require_loop()
        if not self._on_loop_thread(loop):
            loop.call_soon_threadsafe(self._clear_error)
            return
        self._clear_error()

    def _clear_error(self) -> None:
        if self._error is None:
            return
        self._error = None
        self._notify(StateSection.ERROR, Operation.DISMISS)

    # ------------------------------------------------------------------
    # Awaitable operations
    # ------------------------------------------------------------------

    async def async_fetch_all(self) -> None:
        self._require_loop()
        generation = self._generation
        try:
            posts = await self._client.list_posts()
        except PostsError as exc:
            self._fail(Operation.FETCH, "Failed to fetch posts", exc, generation)
            return
        if self._is_stale(generation, Operation.FETCH):
            return
        _logger.info("Fetched %d posts", len(posts))
        self._set_posts(list(posts), Operation.FETCH)

    async def async_create(self, title: str, body: str) -> None:
        self._require_loop()
        generation = self._generation
        try:
            post = await self._client.create_post(title, body)
        except PostsDecodeError as exc:
            self._fail(Operation.CREATE, "Failed to decode post", exc, generation)
            return
        except PostsError as exc:
            self._fail(Operation.CREATE, "Failed to add post", exc, generation)
            return
        if self._is_stale(generation, Operation.CREATE):
            return
        _logger.info("Created post %s", post.id)
        self._set_posts(policy.prepend(self._posts, post), Operation.CREATE)

    async def async_update(self, post: Post, new_title: str, new_body: str) -> None:
        self._require_loop()
        generation = self._generation
        try:
            updated = await self._client.update_post(post, new_title, new_body)
        except PostsDecodeError as exc:
            if self._config.strict_update_decode:
                self._fail(Operation.UPDATE, "Failed to decode post", exc, generation)
            else:
                _logger.debug("Ignoring undecodable update response for post %s: %s", post.id, exc)
            return
        except PostsError as exc:
            self._fail(Operation.UPDATE, "Failed to update post", exc, generation)
            return
        if self._is_stale(generation, Operation.UPDATE):
            return
        replaced = policy.replace_first(self._posts, post.id, updated)
        if replaced is None:
            _logger.debug("Updated post %s is no longer in the local collection", post.id)
            return
        _logger.info("Updated post %s", post.id)
        self._set_posts(replaced, Operation.UPDATE)

    async def async_delete(self, post: Post) -> None:
        self._require_loop()
        generation = self._generation
        try:
            await self._client.delete_post(post)
        except PostsError as exc:
            self._fail(Operation.DELETE, "Failed to delete post", exc, generation)
            return
        if self._is_stale(generation, Operation.DELETE):
            return
        _logger.info("Deleted post %s", post.id)
        self._set_posts(policy.remove_all(self._posts, post.id), Operation.DELETE)
