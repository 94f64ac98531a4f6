"""pyposts - Async Python client and observable store for a posts REST API."""

from pyposts._constants import PACKAGE_VERSION as __version__
from pyposts.client import PostsClient
from pyposts.config import PostsConfig
from pyposts.exceptions import (
    InvalidEndpointError,
    PostsConfigError,
    PostsDecodeError,
    PostsError,
    PostsTransportError,
)
from pyposts.models import (
    CreatePostRequest,
    ErrorMessage,
    Operation,
    Post,
    UpdatePostRequest,
)
from pyposts.state.events import StateSection, StoreChange
from pyposts.state.store import PostsStore

__all__ = [
    "__version__",
    "CreatePostRequest",
    "ErrorMessage",
    "InvalidEndpointError",
    "Operation",
    "Post",
    "PostsClient",
    "PostsConfig",
    "PostsConfigError",
    "PostsDecodeError",
    "PostsError",
    "PostsStore",
    "PostsTransportError",
    "StateSection",
    "StoreChange",
    "UpdatePostRequest",
]
