import logging
from functools import partial

import pytest

from casefix import cli
from casefix.lexicon import LexiconGateway
from conftest import FakeLexicon, PLACES


@pytest.fixture(autouse=True)
def fake_lexicon(monkeypatch):
    monkeypatch.setattr(cli, "LexiconGateway", partial(LexiconGateway, FakeLexicon(PLACES)))


def test_writes_corrected_file(tmp_path):
    source = tmp_path / "data.csv"
    target = tmp_path / "newdata.csv"
    source.write_bytes(b'1,"WE FLEW TO MANHATTAN. THEN AFRICA!"\r2,left alone')

    assert cli.main([str(source), str(target)]) == 0
    assert target.read_bytes() == b'1,"We flew to Manhattan. Then Africa!"\r2,"left alone"'

def test_overrides_file(tmp_path):
    source = tmp_path / "data.csv"
    target = tmp_path / "newdata.csv"
    table = tmp_path / "overrides.json"
    source.write_bytes(b"1,HIV CLINIC HOURS FOR HIV PATIENTS")
    table.write_text('{"hiv": "HIV"}', encoding="utf-8")

    assert cli.main([str(source), str(target), "--overrides", str(table)]) == 0
    assert target.read_text(encoding="utf-8") == '1,"HIV clinic hours for HIV patients"'

def test_malformed_file_exits_nonzero(tmp_path):
    source = tmp_path / "data.csv"
    target = tmp_path / "newdata.csv"
    source.write_bytes(b"1,fine\rbroken")

    assert cli.main([str(source), str(target)]) == 1
    assert not target.exists()

def test_missing_input_exits_nonzero(tmp_path):
    assert cli.main([str(tmp_path / "nope.csv"), str(tmp_path / "out.csv")]) == 1

def test_missing_wordnet_corpus_is_logged(tmp_path, monkeypatch, caplog):
    from casefix.lexicon import WordNetLexicon

    monkeypatch.setattr(cli, "LexiconGateway", LexiconGateway)
    monkeypatch.setattr(WordNetLexicon, "corpus_available", lambda self: False)
    source = tmp_path / "data.csv"
    target = tmp_path / "newdata.csv"
    source.write_bytes(b"1,WELCOME TO MANHATTAN")

    with caplog.at_level(logging.WARNING):
        assert cli.main([str(source), str(target)]) == 0

    assert "WordNet corpus not found" in caplog.text
    assert target.read_text(encoding="utf-8") == '1,"Welcome to manhattan"'
