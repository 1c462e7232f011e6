from fiocase.rules.base import Declension, in_letters, last, run_chain, word_forms

def test_last_short_word_returns_whole():
    assert last("ян", 3) == "ян"
    assert last("ян", 3, 1) == "ян"
    assert last("иванов", 3, 1) == "н"

def test_in_letters_empty_needle():
    assert in_letters("а", "аеё")
    assert not in_letters("", "аеё")

def test_word_forms_short_stem():
    # основа короче, чем нужно отрезать: окончания без основы
    assert word_forms("а", ["ы"], 2) == ("а", "ы")

def test_run_chain_first_match_wins():
    chain = (
        lambda w: None,
        lambda w: Declension((w,), 1),
        lambda w: Declension((w,), 2),
    )
    assert run_chain(chain, "x").rule == 1
    assert run_chain((), "x") is None
