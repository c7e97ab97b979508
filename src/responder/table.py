"""Keyword-block response table loader.

Source format::

    key1, key2, key3
    response line 1
    response line 2

    key4
    another response

A header line lists keywords separated by ``", "``. Body lines are trimmed
and concatenated into one response. A line that is blank after trimming
closes the block.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from responder.issues import IssueKind, LoadIssue, LoadResult, report

logger = logging.getLogger(__name__)

KEY_SEPARATOR = ", "

ResponseTable = Mapping[str, str]


class ParserState(Enum):
    AWAITING_HEADER = "awaiting_header"
    ACCUMULATING_BODY = "accumulating_body"


class ResponseTableLoader:
    """Single-pass parser for the keyword-block format."""

    def __init__(self, encoding: str = "ascii", flush_trailing_block: bool = False) -> None:
        self._encoding = encoding
        self._flush_trailing_block = flush_trailing_block

    def load(self, source: str | Path) -> LoadResult[ResponseTable]:
        path = Path(source)
        table: Dict[str, str] = {}
        issues: List[LoadIssue] = []

        state = ParserState.AWAITING_HEADER
        keys: List[str] = []
        response = ""
        header_line = 0
        line_number = 0

        try:
            with path.open("rb") as handle:
                data = handle.read()
            for line_number, raw in enumerate(data.splitlines(), start=1):
                line = raw.decode(self._encoding)
                blank = not line.strip()

                if state is ParserState.AWAITING_HEADER:
                    if blank:
                        continue
                    keys = line.split(KEY_SEPARATOR)
                    header_line = line_number
                    state = ParserState.ACCUMULATING_BODY
                elif blank:
                    self._flush(path, header_line, keys, response, table, issues)
                    keys, response = [], ""
                    state = ParserState.AWAITING_HEADER
                else:
                    response += line.replace("\n", " ").strip()
        except FileNotFoundError:
            report(issues, LoadIssue(IssueKind.SOURCE_NOT_FOUND, path, detail="response file was not found"))
            return LoadResult(MappingProxyType(table), issues)
        except (OSError, UnicodeDecodeError) as exc:
            report(
                issues,
                LoadIssue(IssueKind.SOURCE_READ_ERROR, path, line_number or None, f"problem reading response file: {exc}"),
            )
            return LoadResult(MappingProxyType(table), issues)

        if state is ParserState.ACCUMULATING_BODY:
            if self._flush_trailing_block:
                self._flush(path, header_line, keys, response, table, issues)
            else:
                logger.info(
                    "Discarding unterminated block at %s:%d (%s)",
                    path, header_line, KEY_SEPARATOR.join(keys),
                )

        logger.info("Loaded %d keywords from %s", len(table), path)
        return LoadResult(MappingProxyType(table), issues)

    @staticmethod
    def validate_block(keys: List[str], response: Optional[str]) -> Optional[IssueKind]:
        """Return the first problem with a block, or None when it can be inserted."""
        for key in keys:
            if key is None or not key.strip():
                return IssueKind.NULL_KEY
        if not response:
            return IssueKind.EMPTY_RESPONSE
        return None

    def _flush(
        self,
        path: Path,
        header_line: int,
        keys: List[str],
        response: str,
        table: Dict[str, str],
        issues: List[LoadIssue],
    ) -> None:
        problem = self.validate_block(keys, response)
        if problem is IssueKind.NULL_KEY:
            report(issues, LoadIssue(problem, path, header_line, f"no key paired with the response: {response!r}"))
            return
        if problem is IssueKind.EMPTY_RESPONSE:
            report(issues, LoadIssue(problem, path, header_line, f"no response paired with {KEY_SEPARATOR.join(keys)}"))
            return
        for key in keys:
            table[key] = response
