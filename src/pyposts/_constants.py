"""Internal constants shared across the library."""

from importlib.metadata import PackageNotFoundError, version

try:
    PACKAGE_VERSION = version("pyposts")
except PackageNotFoundError:
    PACKAGE_VERSION = "0+local"

BASE_URL = "https://jsonplaceholder.typicode.com/posts"
USER_AGENT = f"pyposts/{PACKAGE_VERSION}"
CONTENT_TYPE = "application/json; charset=UTF-8"

# The demo API has no accounts; every created post is attributed to user 1.
DEFAULT_USER_ID = 1

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http", "https"})
