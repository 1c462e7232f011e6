import logging

import pytest

from fiocase.cases import Case
from fiocase.core import VERSION, DeclensionEngine, Stage, pick_role
from fiocase.rules.base import RoleScores
from fiocase.rules.ru import RussianRules
from fiocase.words import UNCHANGED, Gender, GenderProbability, Role

IVANOV_RU = [
    "Иванов Иван Иванович",
    "Иванова Ивана Ивановича",
    "Иванову Ивану Ивановичу",
    "Иванова Ивана Ивановича",
    "Ивановым Иваном Ивановичем",
    "Иванове Иване Ивановиче",
]

def test_version():
    assert VERSION == "0.1.0"

def test_query_full_name_all_cases():
    e = DeclensionEngine("ru")
    assert e.query("Иванов Иван Иванович") == IVANOV_RU
    assert e.detect_gender() is Gender.MALE
    roles = [w.role for w in e.get_word_collection()]
    assert roles == [Role.FAMILY, Role.GIVEN, Role.PATRONYMIC]
    assert [w.rule for w in e.get_word_collection()] == [603, 203, 0]
    assert [w.position for w in e.get_word_collection()] == [1, 2, 3]

def test_query_single_case_and_aliases():
    e = DeclensionEngine()
    assert e.query("Иванов Иван Иванович", Case.GENITIVE) == "Иванова Ивана Ивановича"
    assert e.query("Иванов Иван Иванович", "datv") == "Иванову Ивану Ивановичу"
    assert e.query("Иванова Анна Сергеевна", 2) == "Ивановой Анне Сергеевне"
    assert e.detect_gender() is Gender.FEMALE

def test_whitespace_normalized():
    e = DeclensionEngine("ru")
    assert e.query("  Иванов \t Иван   Иванович ", "gent") == "Иванова Ивана Ивановича"

def test_capitalization_roundtrip():
    e = DeclensionEngine("ru")
    assert e.query("ИВАНОВ ИВАН ИВАНОВИЧ", "gent") == "ИВАНОВА ИВАНА ИВАНОВИЧА"
    assert e.query("иванов иван иванович", "gent") == "иванова ивана ивановича"

def test_forced_gender_bypasses_heuristics():
    e = DeclensionEngine("ru")
    # женских правил для таких слов нет: всё остаётся как есть
    assert e.query("Иванов Иван Иванович", gender="f") == ["Иванов Иван Иванович"] * 6
    assert e.detect_gender() is Gender.FEMALE
    assert all(w.rule == UNCHANGED for w in e.get_word_collection())

def test_query_parts():
    e = DeclensionEngine("ru")
    assert e.query_family_name("Иванова", "datv") == "Ивановой"
    assert e.detect_gender() is Gender.FEMALE
    assert e.query_given_name("Ольга", Case.DATIVE) == "Ольге"
    assert e.query_given_name("Саша", "ablt", gender="m") == "Сашой"
    assert e.query_given_name("Саша", "ablt", gender="f") == "Сашей"
    assert e.query_patronymic_name("Петрович", "gent") == "Петровича"
    assert e.query_family_name("Толстой", "ablt") == "Толстым"
    assert e.query_family_name("Толстая", "accs") == "Толстую"

def test_fallback_unchanged():
    e = DeclensionEngine("ru")
    forms = e.query_family_name("Шевченко")
    assert forms == ["Шевченко"] * 6
    assert e.get_word_collection()[0].rule == UNCHANGED

def test_setters_and_case_getters():
    e = DeclensionEngine("ru")
    e.set_family_name("Иванов").set_given_name("Иван").set_patronymic_name("Иванович")
    assert e.get_family_case(Case.INSTRUMENTAL) == "Ивановым"
    assert e.get_given_case()[1] == "Ивана"
    assert e.get_patronymic_case("loct") == "Ивановиче"
    assert len(e.get_given_case()) == e.case_count == 6

def test_set_full_name_order():
    e = DeclensionEngine("ru")
    e.set_full_name("Иванова", "Анна", "Сергеевна")
    assert [w.text for w in e.get_word_collection()] == ["Анна", "Иванова", "Сергеевна"]
    assert e.get_family_case("datv") == "Ивановой"

def test_set_last_name_alias():
    assert DeclensionEngine.set_last_name is DeclensionEngine.set_family_name

def test_missing_role_gives_empty():
    e = DeclensionEngine("ru")
    e.set_family_name("Иванов")
    assert e.get_given_case() == []
    assert e.get_given_case(Case.GENITIVE) == ""

def test_blank_setter_ignored():
    e = DeclensionEngine("ru")
    e.set_given_name("   ")
    assert len(e.get_word_collection()) == 0
    assert e.detect_gender() is Gender.UNKNOWN

def test_idempotent_and_stage():
    e = DeclensionEngine("ru")
    assert e.stage is Stage.EMPTY
    e.set_given_name("Иван")
    first = e.get_given_case()
    assert e.stage is Stage.DECLINED
    assert e.get_given_case() == first
    e.set_gender("f")
    assert e.stage is Stage.EMPTY
    assert e.get_given_case() == ["Иван"] * 6

def test_full_reset():
    e = DeclensionEngine("ru")
    e.set_given_name("Иван")
    e.full_reset()
    assert e.get_word_collection() == ()
    assert e.stage is Stage.EMPTY

def test_gender_set_before_words_propagates():
    e = DeclensionEngine("ru")
    e.set_given_name("Саша").set_gender("m").set_family_name("Петров")
    assert e.detect_gender() is Gender.MALE
    assert e.get_family_case("gent") == "Петрова"

def test_ukrainian_full_name():
    e = DeclensionEngine("ua")
    assert e.case_count == 7
    assert e.query("Шевченко Тарас Григорович", "gent") == "Шевченка Тараса Григоровича"
    assert e.query("Шевченко Тарас Григорович", "datv") == "Шевченкові Тарасові Григоровичу"
    assert e.query("Шевченко Тарас Григорович", Case.VOCATIVE) == "Шевченче Тарасе Григоровичу"
    assert len(e.query("Шевченко Тарас Григорович")) == 7

def test_ukrainian_parts():
    e = DeclensionEngine("ua")
    assert e.query_given_name("Ольга", "datv") == "Ользі"
    assert e.query_given_name("Любов", "ablt") == "Любов’ю"
    assert e.query_family_name("Орел", "gent") == "Орел"
    assert e.query_family_name("Орел", "gent", gender="m") == "Орла"
    assert e.query_patronymic_name("Петрівна", "datv") == "Петрівні"

def test_vocative_rejected_for_russian():
    with pytest.raises(ValueError, match="unsupported case"):
        DeclensionEngine("ru").query("Иван", "voct")

def test_unknown_language():
    with pytest.raises(ValueError, match="unsupported language"):
        DeclensionEngine("de")
    assert DeclensionEngine("uk").rules.code == "ua"

def test_pick_role_tie_break():
    assert pick_role(RoleScores(0, 0, 0)) is Role.GIVEN
    assert pick_role(RoleScores(0.1, 0.7, 0.7)) is Role.FAMILY
    # 0.3 + 0.4 и 0.7 считаются равными
    assert pick_role(RoleScores(0.7, 0.3 + 0.4, 0)) is Role.GIVEN
    assert pick_role(RoleScores(0, 0, 3)) is Role.PATRONYMIC

def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="fiocase.core")
    DeclensionEngine("ru").query("Иванов Иван Иванович")
    assert "gender detected: MALE" in caplog.text
    assert "by rule 603" in caplog.text

class _TinyMarginRules(RussianRules):
    def gender_probability(self, word, role):
        return GenderProbability(1e-9, 0)

def test_gender_strictly_greater_without_tolerance():
    # перевес мужского веса меньше допуска ролей всё равно даёт мужской пол
    e = DeclensionEngine(_TinyMarginRules())
    e.set_given_name("Саша")
    assert e.detect_gender() is Gender.MALE
    assert e.get_given_case("ablt") == "Сашой"
