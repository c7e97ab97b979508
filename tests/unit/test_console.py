#!/usr/bin/env python3
"""
Unit tests for the console support session
"""

import random
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from responder import console
from responder.console import GOODBYE, WELCOME, SupportSystem
from responder.input_reader import InputReader
from responder.responder import Responder


def scripted_reader(lines):
    remaining = list(lines)

    def _read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return InputReader(read=_read)


@pytest.fixture
def responder(tmp_path):
    table = tmp_path / "responses.txt"
    table.write_text("mac, macintosh\nAsk Apple.\n\nslow\nUpgrade.\n\n", encoding="ascii")
    defaults = tmp_path / "default.txt"
    defaults.write_text("Tell me more.\n\n", encoding="ascii")
    return Responder.from_sources(table, defaults, rng=random.Random(0))


class TestSupportSystem:

    def test_session_until_bye(self, responder):
        output = []
        system = SupportSystem(responder, scripted_reader(["my mac is slow", "weird", "Bye"]), output.append)
        system.start()

        assert output == [WELCOME, "Ask Apple.", "Tell me more.", GOODBYE]

    def test_end_of_input_ends_session(self, responder):
        output = []
        SupportSystem(responder, scripted_reader(["slow"]), output.append).start()
        assert output == [WELCOME, "Upgrade.", GOODBYE]


class TestMain:

    def test_main_reads_config(self, tmp_path, monkeypatch, capsys):
        (tmp_path / "responses.txt").write_text("slow\nUpgrade.\n\n", encoding="ascii")
        (tmp_path / "default.txt").write_text("Tell me more.\n\n", encoding="ascii")
        config = tmp_path / "responder.yml"
        config.write_text(
            "sources:\n"
            f"  response_map_path: {tmp_path / 'responses.txt'}\n"
            f"  default_responses_path: {tmp_path / 'default.txt'}\n",
            encoding="utf-8",
        )
        answers = iter(["slow", "bye"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        console.main(["--config", str(config)])

        out = capsys.readouterr().out
        assert "Technical Support System" in out
        assert "Upgrade." in out
        assert GOODBYE in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
