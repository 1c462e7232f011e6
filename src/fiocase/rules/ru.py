"""Русские правила: определение части ФИО, пола и склонение по падежам.

Номера правил: сотни — номер правила в цепочке, единицы — вариант внутри него
(например, 203 — второе мужское правило, обычный твёрдый согласный).

Примеры (doctest):
>>> rules = RussianRules()
>>> rules.chain(Gender.MALE, Role.FAMILY)[0] is _man_rule8
True
>>> _man_rule2("павел").forms[1]
'павла'
>>> _woman_rule4("иванова").forms[2]
'ивановой'
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from fiocase.cases import RU_CASE_LABELS
from fiocase.rules.base import (
    Chains, Declension, Rule, RoleScores, in_letters, last, word_forms,
)
from fiocase.words import Gender, GenderProbability, Role

LANGUAGE_BUILD = "20180918-1"  # ГодМесяцДень-номерИзменения

VOWELS = "аеёиоуыэюя"
CONSONANTS = "бвгджзйклмнпрстфхцчшщ"

# Несклоняемые окончания
_OVO = frozenset({"ово", "аго", "яго", "ирь"})
_IH = frozenset({"их", "ых", "ко"})

# Для предпоследней буквы — последние буквы, с которыми слово НЕ похоже на фамилию
_SPLIT_SECOND_EXCLUDE: Dict[str, str] = {
    "а": "взйкмнпрстфя", "б": "а", "в": "аь", "г": "а", "д": "ар",
    "е": "бвгдйлмня", "ё": "бвгдйлмня", "ж": "", "з": "а",
    "и": "гдйклмнопрсфя", "й": "ля", "к": "аст", "л": "аилоья",
    "м": "аип", "н": "ат", "о": "вдлнпртя", "п": "п", "р": "адикпть",
    "с": "атуя", "т": "аор", "у": "дмр", "ф": "аь", "х": "а", "ц": "а",
    "ч": "", "ш": "а", "щ": "", "ъ": "", "ы": "дн", "ь": "я", "э": "",
    "ю": "", "я": "нс",
}

_NAME_EXCEPTIONS = frozenset({
    "лев", "яков", "маша", "ольга", "еремей", "исак", "исаак", "ева",
    "ирина", "элькин", "мерлин",
})
_INA_NAMES = frozenset({
    "мальвина", "антонина", "альбина", "агриппина", "фаина", "карина",
    "марина", "валентина", "калина", "аделина", "алина", "ангелина",
    "галина", "каролина", "павлина", "полина", "элина", "мина", "нина",
})
_DOUBLE_CONSONANT_NAMES = frozenset({"др", "кт", "лл", "пп", "рд", "рк", "рп", "рт", "тр"})
_SURNAME_ENDINGS_2 = frozenset({
    "ов", "ин", "ев", "ёв", "ый", "ын", "ой", "ук", "як", "ца", "ун", "ок",
    "ая", "га", "ёк", "ив", "ус", "ак", "яр", "уз", "ах", "ай",
})
_SURNAME_ENDINGS_3 = frozenset({
    "ова", "ева", "ёва", "ына", "шен", "мей", "вка", "шир", "бан", "чий",
    "кий", "бей", "чан", "ган", "ким", "кан", "мар",
})


# ===== Мужские правила =====

def _man_rule1(w: str) -> Optional[Declension]:
    """Имена на "ь", "й" — как существительные мужского рода."""
    if in_letters(last(w, 1), "ьй"):
        if last(w, 2, 1) != "и":
            return Declension(word_forms(w, ["я", "ю", "я", "ем", "е"], 1), 101)
        return Declension(word_forms(w, ["я", "ю", "я", "ем", "и"], 1), 102)
    return None


def _man_rule2(w: str) -> Optional[Declension]:
    """Имена на твёрдый согласный; Павел и Лев с беглой гласной."""
    if in_letters(last(w, 1), CONSONANTS):
        if w == "павел":
            return Declension(("павел", "павла", "павлу", "павла", "павлом", "павле"), 201)
        if w == "лев":
            return Declension(("лев", "льва", "льву", "льва", "львом", "льве"), 202)
        return Declension(word_forms(w, ["а", "у", "а", "ом", "е"]), 203)
    return None


def _man_rule3(w: str) -> Optional[Declension]:
    """Мужские имена на "а", "я"."""
    if last(w, 1) == "а":
        if not in_letters(last(w, 2, 1), "кшгх"):
            return Declension(word_forms(w, ["ы", "е", "у", "ой", "е"], 1), 301)
        return Declension(word_forms(w, ["и", "е", "у", "ой", "е"], 1), 302)
    if last(w, 1) == "я":
        return Declension(word_forms(w, ["и", "е", "ю", "ей", "е"], 1), 303)
    return None


def _man_rule4(w: str) -> Optional[Declension]:
    """Фамилии на "ь", "й"."""
    if not in_letters(last(w, 1), "ьй"):
        return None
    # Воробей
    if last(w, 3) == "бей":
        return Declension(word_forms(w, ["ья", "ью", "ья", "ьем", "ье"], 2), 400)
    if last(w, 3, 1) == "а" or in_letters(last(w, 2, 1), "ел"):
        return Declension(word_forms(w, ["я", "ю", "я", "ем", "е"], 1), 401)
    # Толстой -> Толстым
    if last(w, 2, 1) == "ы" or last(w, 3, 1) == "т":
        return Declension(word_forms(w, ["ого", "ому", "ого", "ым", "ом"], 2), 402)
    # Лесничий
    if last(w, 3) == "чий":
        return Declension(word_forms(w, ["ьего", "ьему", "ьего", "ьим", "ьем"], 2), 403)
    if not in_letters(last(w, 2, 1), VOWELS) or last(w, 2, 1) == "и":
        return Declension(word_forms(w, ["ого", "ому", "ого", "им", "ом"], 2), 404)
    return Declension(tuple([w] * 6), 405)


def _man_rule5(w: str) -> Optional[Declension]:
    """Фамилии на "к": "ок" теряет "о", "ек" — "е" с мягким знаком."""
    if last(w, 1) == "к":
        if last(w, 2, 1) == "о":
            return Declension(word_forms(w, ["ка", "ку", "ка", "ком", "ке"], 2), 501)
        if last(w, 2, 1) == "е":
            return Declension(word_forms(w, ["ька", "ьку", "ька", "ьком", "ьке"], 2), 502)
        return Declension(word_forms(w, ["а", "у", "а", "ом", "е"]), 503)
    return None


def _man_rule6(w: str) -> Optional[Declension]:
    """Фамилии на согласный: выбор между -ем, -ом и -ым."""
    if last(w, 1) == "ч":
        return Declension(word_forms(w, ["а", "у", "а", "ем", "е"]), 601)
    # "е" перед "ц" выпадает
    if last(w, 2) == "ец":
        return Declension(word_forms(w, ["ца", "цу", "ца", "цом", "це"], 2), 604)
    if in_letters(last(w, 1), "цсршмхт"):
        return Declension(word_forms(w, ["а", "у", "а", "ом", "е"]), 602)
    if in_letters(last(w, 1), CONSONANTS):
        return Declension(word_forms(w, ["а", "у", "а", "ым", "е"]), 603)
    return None


def _man_rule7(w: str) -> Optional[Declension]:
    """Фамилии на "а", "я"."""
    if last(w, 1) == "а":
        if last(w, 2, 1) == "ш":
            return Declension(word_forms(w, ["и", "е", "у", "ей", "е"], 1), 701)
        if in_letters(last(w, 2, 1), "хкг"):
            return Declension(word_forms(w, ["и", "е", "у", "ой", "е"], 1), 702)
        return Declension(word_forms(w, ["ы", "е", "у", "ой", "е"], 1), 703)
    if last(w, 1) == "я":
        return Declension(word_forms(w, ["ой", "ой", "ую", "ой", "ой"], 2), 704)
    return None


def _man_rule8(w: str) -> Optional[Declension]:
    """Несклоняемые фамилии: Дурново, Живаго, Черных, Шевченко."""
    if last(w, 3) in _OVO or last(w, 2) in _IH:
        return Declension(tuple([w] * 6), 8)
    return None


def _man_patronymic(w: str) -> Optional[Declension]:
    if w == "ильич":
        return Declension(word_forms(w, ["а", "у", "а", "ом", "е"]), 0)
    if last(w, 2) == "ич":
        return Declension(word_forms(w, ["а", "у", "а", "ем", "е"]), 0)
    return None


# ===== Женские правила =====

def _woman_rule1(w: str) -> Optional[Declension]:
    """Имена на "а" (кроме "-иа")."""
    if last(w, 1) == "а" and last(w, 2, 1) != "и":
        if not in_letters(last(w, 2, 1), "шхкг"):
            return Declension(word_forms(w, ["ы", "е", "у", "ой", "е"], 1), 101)
        # "ей" после "ш"
        if last(w, 2, 1) == "ш":
            return Declension(word_forms(w, ["и", "е", "у", "ей", "е"], 1), 102)
        return Declension(word_forms(w, ["и", "е", "у", "ой", "е"], 1), 103)
    return None


def _woman_rule2(w: str) -> Optional[Declension]:
    """Имена на "я", "ья", "ия", "ея"."""
    if last(w, 1) == "я":
        if last(w, 2, 1) != "и":
            return Declension(word_forms(w, ["и", "е", "ю", "ей", "е"], 1), 201)
        # Ия и Лия
        if w in ("ия", "лия"):
            return Declension(word_forms(w, ["и", "е", "ю", "ей", "е"], 1), 202)
        return Declension(word_forms(w, ["и", "и", "ю", "ей", "и"], 1), 202)
    return None


def _woman_rule3(w: str) -> Optional[Declension]:
    """Имена на мягкий согласный."""
    if last(w, 1) == "ь":
        return Declension(word_forms(w, ["и", "и", "ь", "ью", "и"], 1), 3)
    return None


def _woman_rule4(w: str) -> Optional[Declension]:
    """Фамилии на "а", "я"."""
    if last(w, 1) == "а":
        if in_letters(last(w, 2, 1), "гк"):
            return Declension(word_forms(w, ["и", "е", "у", "ой", "е"], 1), 401)
        if in_letters(last(w, 2, 1), "ш"):
            return Declension(word_forms(w, ["и", "е", "у", "ей", "е"], 1), 402)
        return Declension(word_forms(w, ["ой", "ой", "у", "ой", "ой"], 1), 403)
    if last(w, 1) == "я":
        return Declension(word_forms(w, ["ой", "ой", "ую", "ой", "ой"], 2), 404)
    return None


def _woman_patronymic(w: str) -> Optional[Declension]:
    if last(w, 2) == "на":
        return Declension(word_forms(w, ["ы", "е", "у", "ой", "е"], 1), 0)
    return None


CHAINS: Chains = {
    (Gender.MALE, Role.GIVEN): (_man_rule1, _man_rule2, _man_rule3),
    (Gender.MALE, Role.FAMILY): (_man_rule8, _man_rule4, _man_rule5, _man_rule6, _man_rule7),
    (Gender.MALE, Role.PATRONYMIC): (_man_patronymic,),
    (Gender.FEMALE, Role.GIVEN): (_woman_rule1, _woman_rule2, _woman_rule3),
    (Gender.FEMALE, Role.FAMILY): (_woman_rule4,),
    (Gender.FEMALE, Role.PATRONYMIC): (_woman_patronymic,),
}


# ===== Пол =====

def _gender_by_given(w: str) -> GenderProbability:
    man = woman = 0.0
    l1, l2, l3, l4 = last(w, 1), last(w, 2), last(w, 3), last(w, 4)
    # на "й" — скорее всего мужчина
    if l1 == "й":
        man += 0.9
    if l2 in ("он", "ов", "ав", "ам", "ол", "ан", "рд", "мп"):
        man += 0.3
    if in_letters(l1, CONSONANTS):
        man += 0.01
    if l1 == "ь":
        man += 0.02
    if l2 in ("вь", "фь", "ль"):
        woman += 0.1
    if l2 == "ла":
        woman += 0.04
    if l2 in ("то", "ма"):
        man += 0.01
    if l3 in ("лья", "вва", "ока", "ука", "ита"):
        man += 0.2
    if l3 == "има":
        woman += 0.15
    if l3 in ("лия", "ния", "сия", "дра", "лла", "кла", "опа"):
        woman += 0.5
    if l4 in ("льда", "фира", "нина", "лита", "алья"):
        woman += 0.5
    return GenderProbability(man, woman)


def _gender_by_family(w: str) -> GenderProbability:
    man = woman = 0.0
    if last(w, 2) in ("ов", "ин", "ев", "ий", "ёв", "ый", "ын", "ой"):
        man += 0.4
    if last(w, 3) in ("ова", "ина", "ева", "ёва", "ына", "мин"):
        woman += 0.4
    if last(w, 2) == "ая":
        woman += 0.4
    return GenderProbability(man, woman)


def _gender_by_patronymic(w: str) -> GenderProbability:
    if last(w, 2) == "ич":
        return GenderProbability(10, 0)
    if last(w, 2) == "на":
        return GenderProbability(0, 12)
    return GenderProbability()


_GENDER_BY_ROLE = {
    Role.GIVEN: _gender_by_given,
    Role.FAMILY: _gender_by_family,
    Role.PATRONYMIC: _gender_by_patronymic,
}


# ===== Часть ФИО =====

def _role_scores(w: str, position: int) -> RoleScores:
    first = surname = patr = 0.0
    l1, l2, l3 = last(w, 1), last(w, 2), last(w, 3)
    before = last(w, 2, 1)

    # похоже на отчество (но не первым словом)
    if position > 1 and l3 in ("вна", "чна", "вич", "ьич"):
        patr += 3
    if l2 == "ша":
        first += 0.5
    # буквы, на которые не оканчиваются имена
    if in_letters(l1, "еёжхцочшщъыэю"):
        surname += 0.3
    if in_letters(before, VOWELS + CONSONANTS):
        if not in_letters(l1, _SPLIT_SECOND_EXCLUDE.get(before, "")):
            surname += 0.4
    # ласкательные: Аня, Галя
    if l1 == "я" and in_letters(last(w, 3, 1), VOWELS):
        first += 0.5
    if in_letters(before, "жчщъэю"):
        surname += 0.3

    if l1 == "ь":
        # Нинель, Адель, Асель
        if last(w, 3, 2) == "ел":
            first += 0.7
        elif w in ("лазарь", "игорь", "любовь"):
            first += 10
        else:
            surname += 0.3
    elif in_letters(l1, CONSONANTS + "ь") and in_letters(before, CONSONANTS + "ь"):
        # две согласные в конце — фамилия, кроме Александр, Бенедикт и т.п.
        if l2 not in _DOUBLE_CONSONANT_NAMES:
            surname += 0.25

    if l3 == "тин" and in_letters(last(w, 4, 1), "нст"):
        first += 0.5
    if w in _NAME_EXCEPTIONS:
        first += 10
    # "-ли", кроме Натали
    if l2 == "ли" and last(w, 3, 1) != "а":
        surname += 0.4
    # "-ян", кроме Касьян, Куприян, Ян
    if l2 == "ян" and len(w) > 2 and not in_letters(last(w, 3, 1), "ьи"):
        surname += 0.4
    if l2 == "ур" and w not in ("артур", "тимур"):
        surname += 0.4
    # ласкательные на "ик"
    if l2 == "ик":
        if in_letters(last(w, 3, 1), "лшхд"):
            first += 0.3
        else:
            surname += 0.4
    if l3 == "ина":
        if last(w, 7) in ("атерина", "ристина"):
            first += 10
        elif w in _INA_NAMES:
            first += 10
        else:
            surname += 0.4
    # Николай
    if last(w, 4) == "олай":
        first += 0.6
    if l2 in _SURNAME_ENDINGS_2:
        surname += 0.4
    if l3 in _SURNAME_ENDINGS_3:
        surname += 0.4
    if last(w, 4) == "шена":
        surname += 0.4

    return RoleScores(given=first, family=surname, patronymic=patr)


class RussianRules:
    code = "ru"
    build = LANGUAGE_BUILD
    case_count = 6
    case_labels: Tuple[str, ...] = RU_CASE_LABELS
    vowels = VOWELS
    consonants = CONSONANTS

    def role_scores(self, word: str, position: int) -> RoleScores:
        return _role_scores(word, position)

    def gender_probability(self, word: str, role: Role) -> GenderProbability:
        fn = _GENDER_BY_ROLE.get(role)
        return fn(word) if fn else GenderProbability()

    def chain(self, gender: Gender, role: Role) -> Sequence[Rule]:
        return CHAINS.get((gender, role), ())
