"""Data models for the posts API."""

from pyposts.models._base import PostsBaseModel
from pyposts.models.error import ErrorMessage, Operation
from pyposts.models.post import Post
from pyposts.models.requests import CreatePostRequest, UpdatePostRequest

__all__ = [
    "CreatePostRequest",
    "ErrorMessage",
    "Operation",
    "Post",
    "PostsBaseModel",
    "UpdatePostRequest",
]
