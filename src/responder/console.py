#!/usr/bin/env python3
"""
Responder console: interactive support session in the terminal.

Usage:
  python -m responder.console [--config config/responder.defaults.yml]

Type "bye" to end the session.
"""

import argparse
import logging
from typing import Callable, Optional

from responder.config import load_config
from responder.input_reader import InputReader
from responder.responder import Responder

logger = logging.getLogger(__name__)

WELCOME = (
    "Welcome to the Technical Support System.\n"
    "Please tell us about your problem.\n"
    "We will assist you with any problem you might have.\n"
    'Please type "bye" to exit our system.'
)
GOODBYE = "Nice talking to you. Bye..."
EXIT_WORD = "bye"


class SupportSystem:
    def __init__(
        self,
        responder: Responder,
        reader: Optional[InputReader] = None,
        write: Callable[[str], None] = print,
    ):
        self.responder = responder
        self.reader = reader or InputReader()
        self.write = write

    def start(self) -> None:
        self.write(WELCOME)
        while True:
            try:
                words = self.reader.get_input()
            except EOFError:
                break
            if EXIT_WORD in words:
                break
            self.write(self.responder.generate_response(words))
        self.write(GOODBYE)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Keyword responder support session")
    parser.add_argument(
        "--config",
        default="config/responder.defaults.yml",
        help="Path to the responder YAML config",
    )
    parser.add_argument("--verbose", action="store_true", help="Log load details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    config = load_config(args.config)
    SupportSystem(Responder(config)).start()


if __name__ == "__main__":
    main()
