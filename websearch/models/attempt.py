"""Tagged outcome of a single search attempt.

The retry loop in the Brave provider inspects ``AttemptOutcome.status``
rather than catching exception subtypes: a request helper turns the HTTP
exchange into exactly one of three outcomes and the loop decides whether
to return, back off, or raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from websearch.interfaces.web_search_provider import SearchResult
from websearch.utils.errors import SearchError


class AttemptStatus(str, Enum):
    SUCCESS = "success"
    RETRYABLE = "retryable"
    FATAL = "fatal"


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of one outbound call.

    ``results`` is only meaningful for ``SUCCESS``; ``error`` is set for the
    two failure statuses.
    """

    status: AttemptStatus
    results: tuple[SearchResult, ...] = ()
    error: SearchError | None = None

    @classmethod
    def success(cls, results: list[SearchResult]) -> AttemptOutcome:
        return cls(status=AttemptStatus.SUCCESS, results=tuple(results))

    @classmethod
    def retryable(cls, error: SearchError) -> AttemptOutcome:
        return cls(status=AttemptStatus.RETRYABLE, error=error)

    @classmethod
    def fatal(cls, error: SearchError) -> AttemptOutcome:
        return cls(status=AttemptStatus.FATAL, error=error)
