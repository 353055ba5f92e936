from casefix.overrides import OverrideTable
from casefix.parser import parse_description
from conftest import settle


def parsed(description, overrides, gateway):
    return " ".join(settle(parse_description(description, overrides, gateway)))


def test_returns_one_result_per_word(overrides, gateway):
    words = settle(parse_description("heLLo WELcoMe tO manhattan", overrides, gateway))
    assert isinstance(words, list)
    assert len(words) == 4

def test_properly_cases_input(overrides, gateway):
    assert parsed("heLLo WELcoMe tO manhattan", overrides, gateway) == "Hello welcome to Manhattan"

def test_multi_sentence_description(overrides, gateway):
    assert parsed("hello, charlie. welcome to europe", overrides, gateway) == "Hello, charlie. Welcome to Europe"

def test_question_and_exclamation_start_sentences(overrides, gateway):
    assert parsed("WHY? BECAUSE! ok", overrides, gateway) == "Why? Because! Ok"

def test_local_table_short_circuits_lookup(gateway, lexicon):
    table = OverrideTable({
        "aaa": "AAA",
        "aarp": "AARP",
        "and": "and",
        "john": "John",
        "cards": "cards",
        "discounts": "discounts",
        "get": "get",
        "my": "my",
        "with": "with",
    })
    result = parsed("john and i get discounts with my aaa and aarp cards", table, gateway)

    assert result == "John and I get discounts with my AAA and AARP cards"
    assert lexicon.calls == []

def test_acronym_at_start_of_second_sentence(overrides, gateway):
    assert parsed("GO NOW. ER VISITS", overrides, gateway) == "Go now. ER visits"

def test_order_preserved_when_lookups_finish_out_of_order(overrides):
    from casefix.lexicon import LexiconGateway
    from conftest import FakeLexicon, PLACES

    slow_first = FakeLexicon(PLACES, delays={"africa": 0.2})
    gateway = LexiconGateway(slow_first, timeout=1.0)
    assert parsed("FLY TO AFRICA THEN EUROPE", overrides, gateway) == "Fly to Africa then Europe"
