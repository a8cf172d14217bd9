"""
Resolver package for Mirror Relay.

This package bundles the declarative field extraction rules, the per-mirror
fetch plans and the resolver that turns a video id into a VideoRecord.
"""

from .errors import MissingFieldError, UpstreamFetchError, VideoFetchError
from .mirror_resolver import MirrorResolver, build_resolvers
from .mirrors import MirrorKey, MirrorPlan

__all__ = [
    "MirrorKey",
    "MirrorPlan",
    "MirrorResolver",
    "MissingFieldError",
    "UpstreamFetchError",
    "VideoFetchError",
    "build_resolvers",
]
