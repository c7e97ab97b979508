"""Load-time issue reporting shared by the source loaders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IssueKind(Enum):
    """Conditions a loader reports instead of raising."""
    SOURCE_NOT_FOUND = "source_not_found"
    SOURCE_READ_ERROR = "source_read_error"
    NULL_KEY = "null_key"
    EMPTY_RESPONSE = "empty_response"


@dataclass(frozen=True)
class LoadIssue:
    kind: IssueKind
    source: Path
    line_number: Optional[int] = None
    detail: str = ""

    def __str__(self) -> str:
        where = f"{self.source}:{self.line_number}" if self.line_number else str(self.source)
        return f"{self.kind.value} at {where}: {self.detail}" if self.detail else f"{self.kind.value} at {where}"


@dataclass
class LoadResult(Generic[T]):
    """A loaded structure plus every issue reported while building it."""
    value: T
    issues: List[LoadIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def kinds(self) -> List[IssueKind]:
        return [issue.kind for issue in self.issues]


def report(issues: List[LoadIssue], issue: LoadIssue) -> None:
    """Record an issue and log it. Never raises."""
    issues.append(issue)
    logger.warning("%s", issue)
