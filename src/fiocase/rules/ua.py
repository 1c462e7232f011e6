"""Українські правила: визначення частини ПІБ, статі та відмінювання.

Сім відмінків, сьомий — кличний. Поверх суфіксних замін тут є чергування
приголосних (г к х -> з ц с перед -і; к г -> ч ж у кличному), чергування
і -> о в основі (Ріг -> Рога), випадне е (Орел -> Орла), визначення групи
другої відміни, апостроф після губних і подвоєння в орудному третьої відміни.

Приклади (doctest):
>>> _woman_rule1("ольга").forms[2]
'ользі'
>>> get_osnova("любов"), get_osnova("ольга"), detect_2group("шевченко")
('любов', 'ольг', 1)
>>> _man_rule3("орел").forms[1]
'орла'
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from fiocase.cases import UA_CASE_LABELS
from fiocase.rules.base import (
    Chains, Declension, Rule, RoleScores, in_letters, last, word_forms,
)
from fiocase.words import Gender, GenderProbability, Role

LANGUAGE_BUILD = "11071222"

VOWELS = "аеиоуіїєюя"
CONSONANTS = "бвгджзйклмнпрстфхцчшщ"
SHYPLYACHI = "жчшщ"              # шиплячі
NESHYPLYACHI = "бвгдзклмнпрстфхц"  # нешиплячі
MYAKI = "ьюяєї"                  # завжди м'які
GUBNI = "мвпбф"                  # губні
APOSTROPHE = "’"

_GKH = {"г": "з", "к": "ц", "х": "с"}
_KG = {"к": "ч", "г": "ж"}


def inverse_gkh(letter: str) -> str:
    """Чергування г к х -> з ц с."""
    return _GKH.get(letter, letter)


def inverse_kg(letter: str) -> str:
    """Чергування к г -> ч ж."""
    return _KG.get(letter, letter)


def is_apostrophe(letter: str) -> bool:
    return not in_letters(letter, " " + CONSONANTS + VOWELS)


def get_osnova(word: str) -> str:
    """Основа: відрізаємо з кінця голосні та м'який знак."""
    osnova = word
    while in_letters(last(osnova, 1), VOWELS + "ь"):
        osnova = osnova[:-1]
    return osnova


def detect_2group(word: str) -> int:
    """Група іменника 2-ї відміни: 1 — тверда, 2 — мішана, 3 — м'яка."""
    osnova = word
    stack = ""
    while in_letters(last(osnova, 1), VOWELS + "ь"):
        stack = last(osnova, 1) + stack
        osnova = osnova[:-1]
    ending = stack[0] if stack else "Z"  # Z — нульове закінчення

    osnova_end = last(osnova, 1)
    if in_letters(osnova_end, NESHYPLYACHI) and not in_letters(ending, MYAKI):
        return 1
    if in_letters(osnova_end, SHYPLYACHI) and not in_letters(ending, MYAKI):
        return 2
    return 3


def first_last_vowel(word: str, letters: str) -> str:
    """Перша з кінця літера з переліку (перша літера слова не враховується)."""
    for i in range(len(word) - 1, 0, -1):
        if word[i] in letters:
            return word[i]
    return ""


def _first_declension(w: str, before: str, rule: int) -> Declension:
    return Declension(word_forms(w, [
        before + "и", inverse_gkh(before) + "і", before + "у",
        before + "ою", inverse_gkh(before) + "і", before + "о",
    ], 2), rule)


def _first_declension_soft(w: str, before: str, rule: int) -> Declension:
    return Declension(word_forms(w, [
        before + "і", inverse_gkh(before) + "і", before + "ю",
        before + "ею", inverse_gkh(before) + "і", before + "е",
    ], 2), rule)


# ===== Чоловічі правила =====

def _man_rule1(w: str) -> Optional[Declension]:
    """Імена на -а (-я) — як іменники I відміни."""
    before = last(w, 2, 1)
    if last(w, 1) == "а":
        return _first_declension(w, before, 101)
    if last(w, 1) == "я":
        if before == "і":
            return Declension(word_forms(w, ["ї", "ї", "ю", "єю", "ї", "є"], 1), 102)
        return _first_declension_soft(w, before, 103)
    return None


def _man_rule2(w: str) -> Optional[Declension]:
    """На -р: Віктор - Віктора, але Ігор - Ігоря, Лазар - Лазаря."""
    if last(w, 1) != "р":
        return None
    if w in ("ігор", "лазар"):
        return Declension(word_forms(w, ["я", "еві", "я", "ем", "еві", "е"]), 201)
    osnova = w
    if last(osnova, 2, 1) == "і":
        osnova = osnova[:-2] + "о" + last(osnova, 1)
    return Declension(word_forms(w, ["а", "ові", "а", "ом", "ові", "е"], stem=osnova), 202)


def _man_rule3(w: str) -> Optional[Declension]:
    """На приголосний та -о — як іменники II відміни."""
    if not in_letters(last(w, 1), CONSONANTS + "оь"):
        return None
    before = last(w, 2, 1)
    group = detect_2group(w)
    osnova = get_osnova(w)
    os_last = last(osnova, 1)

    # Ріг - Рога: і лише в називному, у непрямих — о
    if (os_last != "й" and last(osnova, 2, 1) == "і"
            and last(osnova, 4) not in ("світ", "цвіт")
            and w != "гліб" and last(w, 2) not in ("ік", "іч")):
        osnova = osnova[:-2] + "о" + last(osnova, 1)

    # випадне е: Орел - Орла
    if (osnova.startswith("о") and first_last_vowel(osnova, VOWELS + "гк") == "е"
            and last(w, 2) != "сь"):
        delim = osnova.rfind("е")
        osnova = osnova[:delim] + osnova[delim + 1:]

    if group == 1:
        # тверда група
        if last(w, 2) == "ок" and last(w, 3) != "оок":
            return Declension(word_forms(w, ["ка", "кові", "ка", "ком", "кові", "че"], 2), 301)
        # російські прізвища на ов, ев, єв
        if last(w, 2) in ("ов", "ев", "єв") and w not in ("лев", "остромов"):
            return Declension(word_forms(w, [
                os_last + "а", os_last + "у", os_last + "а",
                os_last + "им", os_last + "у", inverse_kg(os_last) + "е",
            ], 1, stem=osnova), 302)
        # російські прізвища на ін
        if last(w, 2) == "ін":
            return Declension(word_forms(w, ["а", "у", "а", "ом", "у", "е"]), 303)
        return Declension(word_forms(w, [
            os_last + "а", os_last + "ові", os_last + "а",
            os_last + "ом", os_last + "ові", inverse_kg(os_last) + "е",
        ], 1, stem=osnova), 304)

    if group == 2:
        # мішана група
        return Declension(word_forms(w, ["а", "еві", "а", "ем", "еві", "е"], stem=osnova), 305)

    # м'яка група
    soft = ["я", "єві", "я", "єм", "єві", "ю"]
    # Соловей
    if last(w, 2) == "ей" and in_letters(last(w, 3, 1), GUBNI):
        return Declension(word_forms(w, soft, stem=w[:-2] + APOSTROPHE), 306)
    if last(w, 1) == "й" or before == "і":
        return Declension(word_forms(w, soft, 1), 307)
    if w == "швець":
        return Declension(word_forms(w, ["евця", "евцеві", "евця", "евцем", "евцеві", "евцю"], 4), 308)
    if last(w, 3) == "ець":
        return Declension(word_forms(w, ["ця", "цеві", "ця", "цем", "цеві", "цю"], 3), 309)
    if last(w, 3) in ("єць", "яць"):
        return Declension(word_forms(w, ["йця", "йцеві", "йця", "йцем", "йцеві", "йцю"], 3), 310)
    return Declension(word_forms(w, ["я", "еві", "я", "ем", "еві", "ю"], stem=osnova), 311)


def _man_rule4(w: str) -> Optional[Declension]:
    """На -і відмінюємо як множину."""
    if last(w, 1) == "і":
        return Declension(word_forms(w, ["их", "им", "их", "ими", "их", "і"], 1), 4)
    return None


def _man_rule5(w: str) -> Optional[Declension]:
    """На -ий, -ой."""
    if last(w, 2) in ("ий", "ой"):
        return Declension(word_forms(w, ["ого", "ому", "ого", "им", "ому", "ий"], 2), 5)
    return None


def _man_patronymic(w: str) -> Optional[Declension]:
    if last(w, 2) in ("ич", "іч"):
        return Declension(word_forms(w, ["а", "у", "а", "ем", "у", "у"]), 0)
    return None


# ===== Жіночі правила =====

def _woman_rule1(w: str) -> Optional[Declension]:
    """Імена на -а (-я): Ольга - Ользі, Палажка - Палажці, Солоха - Солосі."""
    before = last(w, 2, 1)
    # ніга -> нога
    if last(w, 4) == "ніга":
        osnova = w[:-3] + "о"
        return Declension(word_forms(w, ["ги", "зі", "гу", "гою", "зі", "го"], stem=osnova), 101)
    if last(w, 1) == "а":
        return _first_declension(w, before, 102)
    if last(w, 1) == "я":
        if in_letters(before, VOWELS) or is_apostrophe(before):
            return Declension(word_forms(w, ["ї", "ї", "ю", "єю", "ї", "є"], 1), 103)
        return _first_declension_soft(w, before, 104)
    return None


def _woman_rule2(w: str) -> Optional[Declension]:
    """Імена на приголосний — як іменники III відміни."""
    if not in_letters(last(w, 1), CONSONANTS + "ь"):
        return None
    osnova = get_osnova(w)
    os_last = last(osnova, 1)
    os_before = last(osnova, 2, 1)
    apostrophe = APOSTROPHE if in_letters(os_last, GUBNI) and in_letters(os_before, VOWELS) else ""
    duplicate = os_last if in_letters(os_last, "дтзсцлн") else ""

    if last(w, 1) == "ь":
        return Declension(word_forms(w, ["і", "і", "ь", duplicate + apostrophe + "ю", "і", "е"], stem=osnova), 201)
    return Declension(word_forms(w, ["і", "і", "", duplicate + apostrophe + "ю", "і", "е"], stem=osnova), 202)


def _woman_rule3(w: str) -> Optional[Declension]:
    """Прізвища на -ська та російські прикметникові."""
    before = last(w, 2, 1)
    # Донская
    if last(w, 2) == "ая":
        return Declension(word_forms(w, ["ої", "ій", "ую", "ою", "ій", "ая"], 2), 301)
    if last(w, 1) == "а" and (in_letters(before, "чнв") or last(w, 3, 2) == "ьк"):
        return Declension(word_forms(w, [
            before + "ої", before + "ій", before + "у",
            before + "ою", before + "ій", before + "о",
        ], 2), 302)
    return None


def _woman_patronymic(w: str) -> Optional[Declension]:
    if last(w, 3) == "вна":
        return Declension(word_forms(w, ["и", "і", "у", "ою", "і", "о"], 1), 0)
    return None


CHAINS: Chains = {
    (Gender.MALE, Role.GIVEN): (_man_rule1, _man_rule2, _man_rule3),
    (Gender.MALE, Role.FAMILY): (_man_rule5, _man_rule1, _man_rule2, _man_rule3, _man_rule4),
    (Gender.MALE, Role.PATRONYMIC): (_man_patronymic,),
    (Gender.FEMALE, Role.GIVEN): (_woman_rule1, _woman_rule2),
    (Gender.FEMALE, Role.FAMILY): (_woman_rule3, _woman_rule1),
    (Gender.FEMALE, Role.PATRONYMIC): (_woman_patronymic,),
}


# ===== Стать =====

def _gender_by_given(w: str) -> GenderProbability:
    man = woman = 0.0
    l1, l2, l3 = last(w, 1), last(w, 2), last(w, 3)
    if l1 == "й":
        man += 0.9
    if w in ("петро", "микола"):
        man += 30
    if l2 in ("он", "ов", "ав", "ам", "ол", "ан", "рд", "мп", "ко", "ло"):
        man += 0.5
    if l3 in ("бов", "нка", "яра", "ила", "опа"):
        woman += 0.5
    if in_letters(l1, CONSONANTS):
        man += 0.01
    if l1 == "ь":
        man += 0.02
    if l2 == "дь":
        woman += 0.1
    if l3 in ("ель", "бов"):
        woman += 0.4
    return GenderProbability(man, woman)


def _gender_by_family(w: str) -> GenderProbability:
    man = woman = 0.0
    if last(w, 2) in ("ов", "ин", "ев", "єв", "ін", "їн", "ий", "їв", "ів", "ой", "ей"):
        man += 0.4
    if last(w, 3) in ("ова", "ина", "ева", "єва", "іна", "мін"):
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


# ===== Частина ПІБ =====

_NAME_EXCEPTIONS = frozenset({
    "лев", "гаїна", "афіна", "антоніна", "ангеліна", "альвіна", "альбіна",
    "аліна", "павло", "олесь", "микола", "мая", "англеліна", "елькін", "мерлін",
})
_SURNAME_ENDINGS_2 = frozenset({
    "ов", "ін", "ев", "єв", "ий", "ин", "ой", "ко", "ук", "як", "ца", "их",
    "ик", "ун", "ок", "ша", "ая", "га", "єк", "аш", "ив", "юк", "ус", "це",
    "ак", "бр", "яр", "іл", "ів", "ич", "сь", "ей", "нс", "яс", "ер", "ай",
    "ян", "ах", "ць", "ющ", "іс", "ач", "уб", "ох", "юх", "ут", "ча", "ул",
    "вк", "зь", "уц", "їн", "де", "уз", "юр", "ік", "іч", "ро",
})
_SURNAME_ENDINGS_3 = frozenset({
    "ова", "ева", "єва", "тих", "рик", "вач", "аха", "шен", "мей", "арь",
    "вка", "шир", "бан", "чий", "іна", "їна", "ька", "ань", "ива", "аль",
    "ура", "ран", "ало", "ола", "кур", "оба", "оль", "нта", "зій", "ґан",
    "іло", "шта", "юпа", "рна", "бла", "еїн", "има", "мар", "кар", "оха",
    "чур", "ниш", "ета", "тна", "зур", "нір", "йма", "орж", "рба", "іла",
    "лас", "дід", "роз", "аба", "чан", "ган",
})
_SURNAME_ENDINGS_4 = frozenset({
    "ьник", "нчук", "тник", "кирь", "ский", "шена", "шина", "вина", "нина",
    "гана", "хній", "зюба", "орош", "орон", "сило", "руба", "лест", "мара",
    "обка", "рока", "сика", "одна", "нчар", "вата", "ндар", "грій",
})


def _role_scores(w: str, position: int) -> RoleScores:
    # позиція в українських правилах не враховується
    first = second = father = 0.0
    l2, l3, l4 = last(w, 2), last(w, 3), last(w, 4)

    if l3 in ("вна", "чна", "ліч") or l4 in ("ьмич", "ович"):
        father += 3
    if l3 == "тин" or l4 in ("ьмич", "юбов", "івна", "явка", "орив", "кіян"):
        first += 0.5
    if w in _NAME_EXCEPTIONS:
        first += 10
    if l2 in _SURNAME_ENDINGS_2:
        second += 0.4
    if l3 in _SURNAME_ENDINGS_3:
        second += 0.4
    if l4 in _SURNAME_ENDINGS_4:
        second += 0.4
    if last(w, 1) == "і":
        second += 0.2

    return RoleScores(given=first, family=second, patronymic=father)


class UkrainianRules:
    code = "ua"
    build = LANGUAGE_BUILD
    case_count = 7
    case_labels: Tuple[str, ...] = UA_CASE_LABELS
    vowels = VOWELS
    consonants = CONSONANTS

    def role_scores(self, word: str, position: int) -> RoleScores:
        return _role_scores(word, position)

    def gender_probability(self, word: str, role: Role) -> GenderProbability:
        fn = _GENDER_BY_ROLE.get(role)
        return fn(word) if fn else GenderProbability()

    def chain(self, gender: Gender, role: Role) -> Sequence[Rule]:
        return CHAINS.get((gender, role), ())
