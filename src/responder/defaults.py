"""Default (fallback) response list loader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from responder.issues import IssueKind, LoadIssue, LoadResult, report

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Could you elaborate on that?"

DefaultResponseList = Tuple[str, ...]


class DefaultResponseLoader:
    """
    Reads groups of non-blank lines separated by empty lines.

    Lines are joined verbatim. Only a line that is exactly empty separates
    groups; whitespace-only lines are kept as part of a response. The result
    always holds at least one response.
    """

    def __init__(self, encoding: str = "ascii", flush_trailing_block: bool = False) -> None:
        self._encoding = encoding
        self._flush_trailing_block = flush_trailing_block

    def load(self, source: str | Path) -> LoadResult[DefaultResponseList]:
        path = Path(source)
        responses: List[str] = []
        issues: List[LoadIssue] = []
        response = ""
        line_number = 0

        try:
            with path.open("rb") as handle:
                data = handle.read()
            for line_number, raw in enumerate(data.splitlines(), start=1):
                line = raw.decode(self._encoding)
                if line == "":
                    if response:
                        responses.append(response)
                    response = ""
                else:
                    response += line.replace("\n", " ")
            if response and self._flush_trailing_block:
                responses.append(response)
            elif response:
                logger.info("Discarding unterminated default response at end of %s", path)
        except FileNotFoundError:
            report(issues, LoadIssue(IssueKind.SOURCE_NOT_FOUND, path, detail=f"unable to open {path}"))
        except (OSError, UnicodeDecodeError) as exc:
            report(
                issues,
                LoadIssue(IssueKind.SOURCE_READ_ERROR, path, line_number or None, f"problem reading {path}: {exc}"),
            )

        # Make sure we have at least one response.
        if not responses:
            responses.append(FALLBACK_RESPONSE)

        logger.info("Loaded %d default responses from %s", len(responses), path)
        return LoadResult(tuple(responses), issues)

