from fiocase.rules.ua import (
    UkrainianRules, detect_2group, get_osnova, inverse_gkh, inverse_kg,
)
from fiocase.rules.base import run_chain
from fiocase.words import Gender, Role

rules = UkrainianRules()

def decline(word, gender, role):
    return run_chain(rules.chain(gender, role), word)

def test_language_meta():
    assert rules.code == "ua"
    assert rules.build == "11071222"
    assert rules.case_count == 7

def test_helpers():
    assert inverse_gkh("г") == "з" and inverse_gkh("л") == "л"
    assert inverse_kg("к") == "ч"
    assert get_osnova("нінель") == "нінел"
    assert detect_2group("тарас") == 1
    assert detect_2group("кравець") == 3

def test_olga_seven_cases():
    d = decline("ольга", Gender.FEMALE, Role.GIVEN)
    assert d.rule == 102
    assert d.forms == ("ольга", "ольги", "ользі", "ольгу", "ольгою", "ользі", "ольго")

def test_shevchenko_male_vocative_alternation():
    d = decline("шевченко", Gender.MALE, Role.FAMILY)
    assert d.forms[1] == "шевченка"
    assert d.forms[2] == "шевченкові"
    assert d.forms[6] == "шевченче"

def test_third_declension_apostrophe_and_doubling():
    assert decline("любов", Gender.FEMALE, Role.GIVEN).forms[4] == "любов’ю"
    assert decline("любов", Gender.FEMALE, Role.GIVEN).forms[3] == "любов"
    assert decline("нінель", Gender.FEMALE, Role.GIVEN).forms[4] == "нінеллю"

def test_solovei_apostrophe():
    d = decline("соловей", Gender.MALE, Role.FAMILY)
    assert d.rule == 306
    assert d.forms[1] == "солов’я" and d.forms[4] == "солов’єм" and d.forms[6] == "солов’ю"

def test_fleeting_e_and_i_to_o():
    assert decline("орел", Gender.MALE, Role.FAMILY).forms[1] == "орла"
    assert decline("ріг", Gender.MALE, Role.FAMILY).forms[1] == "рога"
    assert decline("нестір", Gender.MALE, Role.GIVEN).forms[1] == "нестора"

def test_igor_and_viktor():
    assert decline("ігор", Gender.MALE, Role.GIVEN).forms[1:3] == ("ігоря", "ігореві")
    assert decline("віктор", Gender.MALE, Role.GIVEN).forms[1] == "віктора"

def test_female_family_and_patronymic():
    # окончания ставятся прямо к основе: без смягчения "ск"
    assert decline("донская", Gender.FEMALE, Role.FAMILY).forms[1:4] == (
        "донскої", "донскій", "донскую")
    d = decline("петрівна", Gender.FEMALE, Role.PATRONYMIC)
    assert d.rule == 0 and d.forms[4] == "петрівною"
    assert decline("григорович", Gender.MALE, Role.PATRONYMIC).forms[6] == "григоровичу"

def test_role_scores_ignore_position():
    assert rules.role_scores("григорович", 1) == rules.role_scores("григорович", 3)
    assert rules.role_scores("шевченко", 1).family > 0
