"""Падежи русского и украинского языков, их подписи и псевдонимы.

Индексы общие: 0..5 совпадают для обоих языков (предложный = місцевий),
6 — кличний відмінок (только украинский).

Примеры (doctest):
>>> resolve_case("gent")
<Case.GENITIVE: 1>
>>> resolve_case("Родовий")
<Case.GENITIVE: 1>
>>> resolve_case(6, case_count=6)
Traceback (most recent call last):
...
ValueError: unsupported case: 6
"""
from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple


class Case(IntEnum):
    NOMINATIVE = 0
    GENITIVE = 1
    DATIVE = 2
    ACCUSATIVE = 3
    INSTRUMENTAL = 4
    PREPOSITIONAL = 5
    VOCATIVE = 6


RU_CASE_LABELS: Tuple[str, ...] = (
    "Именительный", "Родительный", "Дательный",
    "Винительный", "Творительный", "Предложный",
)
RU_CASE_QUESTIONS: Tuple[str, ...] = (
    "кто? что?", "кого? чего?", "кому? чему?",
    "кого? что?", "кем? чем?", "о ком? о чём?",
)
UA_CASE_LABELS: Tuple[str, ...] = (
    "Називний", "Родовий", "Давальний", "Знахідний",
    "Орудний", "Місцевий", "Кличний",
)

# OpenCorpora-теги и английские названия -> падеж
_ALIAS_CASE: Dict[str, Case] = {
    "nomn": Case.NOMINATIVE, "gent": Case.GENITIVE, "datv": Case.DATIVE,
    "accs": Case.ACCUSATIVE, "ablt": Case.INSTRUMENTAL, "loct": Case.PREPOSITIONAL,
    "voct": Case.VOCATIVE,
    "locative": Case.PREPOSITIONAL,
}
_ALIAS_CASE.update({c.name.lower(): c for c in Case})
_ALIAS_CASE.update({label.lower(): Case(i) for i, label in enumerate(RU_CASE_LABELS)})
_ALIAS_CASE.update({label.lower(): Case(i) for i, label in enumerate(UA_CASE_LABELS)})


def resolve_case(value: Case | int | str, case_count: int = len(Case)) -> Case:
    """Падеж по Case, индексу или названию; проверяет, что он есть в языке."""
    if isinstance(value, str):
        t = value.strip().lower()
        if t.isdigit():
            value = int(t)
        elif t in _ALIAS_CASE:
            value = _ALIAS_CASE[t]
        else:
            raise ValueError(f"unsupported case: {value}")
    idx = int(value)
    if not 0 <= idx < case_count:
        raise ValueError(f"unsupported case: {value}")
    return Case(idx)
