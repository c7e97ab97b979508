"""Turns a typed sentence into the word set the responder works on."""

from __future__ import annotations

from typing import Callable, Optional, Set


def tokenize(text: str) -> Set[str]:
    normalized = text.strip().lower()
    return set(normalized.split())


class InputReader:
    def __init__(self, prompt: str = "> ", read: Optional[Callable[[str], str]] = None) -> None:
        self._prompt = prompt
        self._read = read

    def get_input(self) -> Set[str]:
        read = self._read or input
        return tokenize(read(self._prompt))
