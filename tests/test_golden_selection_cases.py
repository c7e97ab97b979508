import random
from pathlib import Path

import pytest
import yaml

from responder.config import load_config
from responder.input_reader import tokenize
from responder.responder import Responder

ROOT = Path(__file__).parent.parent
DATA_PATH = Path(__file__).parent / "tests_data" / "golden_selection_cases.yaml"

REQUIRED_FIELDS = {"name", "input", "expected_keyword", "expected_layer"}
LAYERS = {"keyword", "default"}


@pytest.fixture
def responder(monkeypatch):
    monkeypatch.chdir(ROOT)
    return Responder(load_config("config/responder.defaults.yml"), rng=random.Random(0))


def test_golden_cases_cover_layers_and_fields():
    cases = yaml.safe_load(DATA_PATH.read_text(encoding="utf-8"))

    seen_layers = set()
    for case in cases:
        assert REQUIRED_FIELDS.issubset(case.keys()), case["name"]
        assert case["expected_layer"] in LAYERS
        seen_layers.add(case["expected_layer"])

    assert LAYERS.issubset(seen_layers), "Golden cases must cover every layer"


def test_shipped_sources_load_cleanly(responder):
    assert responder.issues == []
    assert len(responder.table) > 0
    assert len(responder.defaults) > 1


def test_responder_against_golden_cases(responder):
    cases = yaml.safe_load(DATA_PATH.read_text(encoding="utf-8"))
    for case in cases:
        response = responder.generate_response(tokenize(case["input"]))
        if case["expected_layer"] == "keyword":
            assert (
                response == responder.table[case["expected_keyword"]]
            ), f"response mismatch for {case['name']}"
        else:
            assert response in responder.defaults, f"expected a default for {case['name']}"
