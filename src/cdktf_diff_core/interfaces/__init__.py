"""Public interface re-exports for cdktf_diff_core."""

from cdktf_diff_core.interfaces.command import CommandRunner
from cdktf_diff_core.interfaces.pagination import PageFetcher

__all__ = [
    "CommandRunner",
    "PageFetcher",
]
