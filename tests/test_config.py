import pytest

from responder.config import ResponderConfig, load_config


def test_load_config_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("word_order: given", encoding="utf-8")

    cfg = load_config(path)

    assert isinstance(cfg, ResponderConfig)
    assert cfg.word_order == "given"
    assert cfg.sources.encoding == "ascii"
    assert cfg.sources.flush_trailing_block is False
    assert cfg.seed is None


def test_env_overrides(monkeypatch, tmp_path):
    source = tmp_path / "config.yml"
    source.write_text("sources:\n  response_map_path: a.txt\n", encoding="utf-8")

    monkeypatch.setenv("RESPONDER_SEED", "7")
    monkeypatch.setenv("RESPONDER_FLUSH_TRAILING", "true")
    monkeypatch.setenv("DEFAULT_RESPONSES_PATH", "other/default.txt")

    cfg = load_config(source)

    assert cfg.seed == 7
    assert cfg.sources.flush_trailing_block is True
    assert str(cfg.sources.default_responses_path) == "other/default.txt"
    assert str(cfg.sources.response_map_path) == "a.txt"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_invalid_word_order():
    with pytest.raises(ValueError):
        ResponderConfig.from_dict({"word_order": "random"})


def test_unknown_encoding():
    with pytest.raises(ValueError, match="unknown source encoding"):
        ResponderConfig.from_dict({"sources": {"encoding": "ascii7"}})


def test_unknown_encoding_from_env(monkeypatch, tmp_path):
    source = tmp_path / "config.yml"
    source.write_text("word_order: sorted", encoding="utf-8")
    monkeypatch.setenv("RESPONSE_ENCODING", "no-such-codec")

    with pytest.raises(ValueError):
        load_config(source)


def test_quoted_flush_value_is_parsed():
    off = ResponderConfig.from_dict({"sources": {"flush_trailing_block": "false"}})
    on = ResponderConfig.from_dict({"sources": {"flush_trailing_block": "yes"}})

    assert off.sources.flush_trailing_block is False
    assert on.sources.flush_trailing_block is True


def test_yaml_flush_string(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text('sources:\n  flush_trailing_block: "no"\n', encoding="utf-8")

    assert load_config(path).sources.flush_trailing_block is False
