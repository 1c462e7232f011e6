"""Общие строительные блоки языковых правил.

Правило — функция от слова в нижнем регистре, которая возвращает Declension
(все падежные формы и номер правила) или None, если слово ей не подходит.
Цепочка — кортеж правил, которые пробуются по порядку.

Примеры (doctest):
>>> last("иванов", 2), last("иванов", 2, 1), last("ян", 3, 1)
('ов', 'о', 'ян')
>>> word_forms("иван", ["а", "у", "а", "ом", "е"])
('иван', 'ивана', 'ивану', 'ивана', 'иваном', 'иване')
>>> word_forms("ольга", ["и", "е", "у", "ой", "е"], 1)[2]
'ольге'
"""
from __future__ import annotations

from typing import Callable, Dict, NamedTuple, Optional, Protocol, Sequence, Tuple

from fiocase.words import Gender, GenderProbability, Role


class Declension(NamedTuple):
    forms: Tuple[str, ...]
    rule: int


Rule = Callable[[str], Optional[Declension]]
Chains = Dict[Tuple[Gender, Role], Tuple[Rule, ...]]


class RoleScores(NamedTuple):
    given: float
    family: float
    patronymic: float


class LanguageRules(Protocol):
    """Что движок склонения требует от языка."""
    code: str
    build: str
    case_count: int
    case_labels: Tuple[str, ...]

    def role_scores(self, word: str, position: int) -> RoleScores: ...

    def gender_probability(self, word: str, role: Role) -> GenderProbability: ...

    def chain(self, gender: Gender, role: Role) -> Sequence[Rule]: ...


def last(word: str, length: int, stop_after: int | None = None) -> str:
    """Последние length букв; с stop_after — только stop_after из них.

    Если слово короче length, возвращается всё слово.
    """
    start = len(word) - length
    if start < 0:
        return word
    if stop_after is None:
        return word[start:]
    return word[start:start + stop_after]


def in_letters(needle: str, letters: str) -> bool:
    return needle != "" and needle in letters


def word_forms(
    word: str,
    endings: Sequence[str],
    replace_last: int = 0,
    stem: str | None = None,
) -> Tuple[str, ...]:
    """Именительный + (основа без replace_last букв + окончание) для остальных падежей."""
    base = word if stem is None else stem
    base = base[: len(base) - replace_last] if len(base) >= replace_last else ""
    return (word,) + tuple(base + e for e in endings)


def run_chain(chain: Sequence[Rule], word: str) -> Optional[Declension]:
    for rule in chain:
        res = rule(word)
        if res is not None:
            return res
    return None
