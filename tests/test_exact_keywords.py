from responder.table import ResponseTableLoader


def test_exact_match_only(tmp_path):
    sample = tmp_path / "responses.txt"
    sample.write_text("status\nok\n\n", encoding="ascii")

    table = ResponseTableLoader().load(sample).value

    assert table.get("status") == "ok"
    assert table.get("Status") is None
    assert table.get("status please") is None
