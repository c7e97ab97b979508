"""
Responder: keyword table plus default responses.

Loads both sources once, at construction, and answers every call from the
same read-only state:

  Known keyword in the input  → its canned response
  Nothing recognised          → one of the default responses, at random

Malformed or missing sources degrade the answers but never break them.
"""

import json
import logging
import random
import uuid
from typing import Iterable, List, Optional

from responder.config import ResponderConfig
from responder.defaults import DefaultResponseList, DefaultResponseLoader
from responder.issues import LoadIssue
from responder.observability import SelectionRecord
from responder.selector import ResponseSelector
from responder.table import ResponseTable, ResponseTableLoader

logger = logging.getLogger(__name__)


class Responder:
    """
    Response generator for a set of input words.

    Construct it from a ResponderConfig (or with from_sources for ad hoc
    paths). The table and defaults never change afterwards; build a new
    Responder to pick up edited source files.
    """

    def __init__(self, config: ResponderConfig, rng: Optional[random.Random] = None):
        self.config = config
        sources = config.sources

        table_result = ResponseTableLoader(
            sources.encoding, sources.flush_trailing_block
        ).load(sources.response_map_path)
        defaults_result = DefaultResponseLoader(
            sources.encoding, sources.flush_trailing_block
        ).load(sources.default_responses_path)

        self.table: ResponseTable = table_result.value
        self.defaults: DefaultResponseList = defaults_result.value
        self.issues: List[LoadIssue] = table_result.issues + defaults_result.issues

        if rng is None:
            rng = random.Random(config.seed)
        self._selector = ResponseSelector(
            self.table, self.defaults, rng=rng, word_order=config.word_order
        )

        logger.info(
            "Responder ready: keywords=%d defaults=%d issues=%d order=%s",
            len(self.table), len(self.defaults), len(self.issues), config.word_order,
        )

    @classmethod
    def from_sources(
        cls,
        response_map_path,
        default_responses_path,
        rng: Optional[random.Random] = None,
        **overrides,
    ) -> "Responder":
        """Build a responder for two source files without a YAML config."""
        sources = dict(overrides.pop("sources", {}))
        sources.update(
            response_map_path=str(response_map_path),
            default_responses_path=str(default_responses_path),
        )
        return cls(ResponderConfig.from_dict({"sources": sources, **overrides}), rng=rng)

    def generate_response(self, words: Iterable[str]) -> str:
        """
        Generate a response from a given set of input words.
        Never throws on bad input data. Never returns empty.
        """
        words = list(words)
        selection = self._selector.select(words)
        record = SelectionRecord(
            request_id=uuid.uuid4().hex,
            layer="keyword" if selection.matched else "default",
            keyword_hit=selection.keyword,
            default_index=selection.default_index,
            word_count=len(words),
            response_length=len(selection.response),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("selection %s", json.dumps(record.to_dict()))
        return selection.response

    def get_status(self) -> str:
        """Summary of what was loaded, for the /status command."""
        sources = self.config.sources
        lines = ["Responder Status:"]
        lines.append(f"  Keywords: {len(self.table)} ({sources.response_map_path})")
        lines.append(f"  Defaults: {len(self.defaults)} ({sources.default_responses_path})")
        lines.append(f"  Word order: {self.config.word_order}")
        if self.issues:
            lines.append(f"  Load issues: {len(self.issues)}")
            for issue in self.issues:
                lines.append(f"    - {issue}")
        return "\n".join(lines)
