"""Base model for posts API payloads.

Every wire model inherits from :class:`PostsBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase API keys (``userId``) map
  automatically to snake_case fields (``user_id``).
* ``strict=True`` so values are decoded by type only: a string id or a
  float title is a validation error, not a silent coercion.
* Frozen instances; an edited post is a new object.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PostsBaseModel(BaseModel):
    """Base for posts API request and response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        strict=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize using the camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True)
