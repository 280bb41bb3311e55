"""
Data models for the Selenops crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

__all__ = (
    "Link",
    "FetchResult",
    "SkipReason",
    "InvalidURL",
    "UnsupportedFileType",
    "BusinessLogic",
    "Error",
    "Visit",
    "Skip",
    "Decision",
    "VISIT",
)


@dataclass(frozen=True, slots=True)
class Link:
    """Outbound link found on a page.

    Identity is the URL alone: title and score are metadata, so a set of
    links holds one entry per destination.
    """

    url: str
    title: str = field(compare=False)
    score: Optional[float] = field(default=None, compare=False)


@dataclass(slots=True)
class FetchResult:
    """Text of a fetched page plus, optionally, the markup to mine for links."""

    content: str
    html: Optional[str] = None

    @property
    def markup(self) -> str:
        return self.content if self.html is None else self.html


class SkipReason:
    """Base class of the reasons a URL is not visited."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class InvalidURL(SkipReason):
    def __str__(self) -> str:
        return "invalid URL"


@dataclass(frozen=True, slots=True)
class UnsupportedFileType(SkipReason):
    def __str__(self) -> str:
        return "unsupported file type"


@dataclass(frozen=True, slots=True)
class BusinessLogic(SkipReason):
    """Policy-declared skip; *detail* is a free-form message."""

    detail: str

    def __str__(self) -> str:
        return self.detail


@dataclass(frozen=True, slots=True)
class Error(SkipReason):
    """Visit failed; *cause* is the exception raised while fetching."""

    cause: BaseException

    def __str__(self) -> str:
        return f"error: {self.cause}"


@dataclass(frozen=True, slots=True)
class Visit:
    pass


@dataclass(frozen=True, slots=True)
class Skip:
    reason: SkipReason


Decision = Union[Visit, Skip]

VISIT = Visit()
