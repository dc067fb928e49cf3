"""Error types raised by the post data build."""

from typing import Optional


class PostDataError(Exception):
    """Base class for build failures that should stop the run."""


class DuplicateShortLinkError(PostDataError):
    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Short link: {slug} already exists")


class InvalidDateError(PostDataError, ValueError):
    def __init__(self, value: str, directory: Optional[str] = None) -> None:
        self.value = value
        self.directory = directory
        where = f" in {directory}" if directory else ""
        super().__init__(f"Unparseable date{where}: {value!r}")
