"""JSON-over-HTTP transport for the posts resource."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyposts._constants import CONTENT_TYPE
from pyposts._logsummary import summarize_for_log
from pyposts.config import PostsConfig
from pyposts.exceptions import PostsDecodeError, PostsTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`JsonTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        url: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        ...


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class JsonTransport:
    """Send JSON requests and decode JSON responses.

    Any status outside ``2xx`` is a failure, even when the server sent a
    body. An empty ``2xx`` body decodes to ``None``.
    """

    def __init__(self, config: PostsConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout: aiohttp.ClientTimeout | None = None
        if config.request_timeout is not None:
            self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _headers(self, with_body: bool) -> dict[str, str]:
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if with_body:
            headers["content-type"] = CONTENT_TYPE
        return headers

    async def request(
        self,
        method: str,
        url: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        """Perform one HTTP call and return the decoded JSON body.

        Raises
        ------
        PostsTransportError
            Network failure, timeout, or non-2xx status.
        PostsDecodeError
            A 2xx response whose body is not valid JSON.
        """
        data = None if payload is None else json.dumps(payload, separators=(",", ":"))
        kwargs: dict[str, Any] = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        _logger.debug("%s %s %s", method, url, summarize_for_log(payload))

        try:
            async with self._http.request(
                method,
                url,
                data=data,
                headers=self._headers(payload is not None),
                **kwargs,
            ) as resp:
                status = resp.status
                raw = await resp.read()
        except aiohttp.ClientError as exc:
            raise PostsTransportError(
                f"{method} {url} failed: {_describe(exc)}",
                method=method,
                url=url,
            ) from exc
        except TimeoutError as exc:
            raise PostsTransportError(
                f"{method} {url} timed out",
                method=method,
                url=url,
            ) from exc

        text = raw.decode("utf-8", errors="replace")
        _logger.debug("%s %s -> HTTP %s (%d bytes)", method, url, status, len(raw))

        if not 200 <= status < 300:
            raise PostsTransportError(
                f"HTTP {status} from {method} {url}: {text[:200]}",
                status_code=status,
                method=method,
                url=url,
            )

        if not raw.strip():
            return None

        try:
            result = json.loads(raw)
        except ValueError as exc:
            raise PostsDecodeError(
                f"Invalid JSON from {method} {url}: {text[:200]}",
                url=url,
            ) from exc

        _logger.debug("%s %s response %s", method, url, summarize_for_log(result))
        return result
