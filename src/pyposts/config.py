"""Client configuration for pyposts."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyposts._constants import BASE_URL, USER_AGENT
from pyposts.exceptions import PostsConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_timeout(value: str | None) -> float | None:
    if value is None:
        return None
    stripped = value.strip()
    if not stripped or stripped.lower() == "none":
        return None
    try:
        timeout = float(stripped)
    except ValueError as exc:
        raise PostsConfigError(f"POSTS_REQUEST_TIMEOUT must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise PostsConfigError(f"POSTS_REQUEST_TIMEOUT must be positive, got {value!r}")
    return timeout


@dataclasses.dataclass(frozen=True)
class PostsConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Collection endpoint. Posts are listed and created here and
        addressed individually as ``{base_url}/{id}``.
    request_timeout : float or None
        Total per-request timeout in seconds. ``None`` keeps the
        aiohttp session defaults.
    fetch_on_start : bool
        Issue an initial ``fetch_all()`` when the store starts.
    strict_update_decode : bool
        Report an undecodable ``update`` response as an error. By default
        such responses are ignored and the local post is left untouched.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    request_timeout: float | None = None
    fetch_on_start: bool = True
    strict_update_decode: bool = False
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls, **overrides: Any) -> PostsConfig:
        """Create configuration from environment variables.

        Reads the optional ``POSTS_*`` variables. Explicit keyword
        arguments override environment values.

        Raises
        ------
        PostsConfigError
            If ``POSTS_REQUEST_TIMEOUT`` is not a positive number.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("POSTS_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url.strip()

        user_agent = env.get("POSTS_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        if "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_timeout(env.get("POSTS_REQUEST_TIMEOUT"))

        if "fetch_on_start" not in overrides:
            config_kwargs["fetch_on_start"] = _env_bool(env.get("POSTS_FETCH_ON_START"), True)

        if "strict_update_decode" not in overrides:
            config_kwargs["strict_update_decode"] = _env_bool(
                env.get("POSTS_STRICT_UPDATE_DECODE"),
                False,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
