"""Слова ФИО: роль, пол, маска регистра и падежные формы.

Каждое слово хранится в нижнем регистре; исходный регистр запоминается маской
и восстанавливается при записи падежных форм.

Примеры (doctest):
>>> w = WordRecord("Иванов")
>>> w.value, w.mask.all_upper
('иванов', False)
>>> w.cases = ["иванов", "иванова"]
>>> w.cases
['Иванов', 'Иванова']
>>> WordRecord("ПЁТР").mask.apply("пётра")
'ПЁТРА'
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

# Номер правила для слов, которые не подошли ни под одно правило
UNCHANGED = -1


class Gender(Enum):
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2


class Role(Enum):
    UNDETERMINED = 0
    GIVEN = 1
    FAMILY = 2
    PATRONYMIC = 3


_GENDER_ALIASES = {
    "m": Gender.MALE, "masc": Gender.MALE, "male": Gender.MALE, "man": Gender.MALE,
    "м": Gender.MALE, "муж": Gender.MALE, "мужской": Gender.MALE, "чоловіча": Gender.MALE,
    "f": Gender.FEMALE, "femn": Gender.FEMALE, "female": Gender.FEMALE, "woman": Gender.FEMALE,
    "ж": Gender.FEMALE, "жен": Gender.FEMALE, "женский": Gender.FEMALE, "жіноча": Gender.FEMALE,
    "": Gender.UNKNOWN, "auto": Gender.UNKNOWN, "unknown": Gender.UNKNOWN,
}


def resolve_gender(value: Gender | str | None) -> Gender:
    """Gender, строковый псевдоним или None (автоопределение)."""
    if value is None:
        return Gender.UNKNOWN
    if isinstance(value, Gender):
        return value
    g = _GENDER_ALIASES.get(str(value).strip().lower())
    if g is None:
        raise ValueError(f"unsupported gender: {value}")
    return g


@dataclass(frozen=True)
class GenderProbability:
    man: float = 0.0
    woman: float = 0.0

    def __add__(self, other: "GenderProbability") -> "GenderProbability":
        return GenderProbability(self.man + other.man, self.woman + other.woman)

    def solve(self) -> Gender:
        # при равенстве (и при 0/0) — женский
        return Gender.MALE if self.man > self.woman else Gender.FEMALE


@dataclass(frozen=True)
class LetterMask:
    """Какие буквы слова были большими. all_upper — всё слово в верхнем регистре."""
    upper: Tuple[bool, ...]
    all_upper: bool

    @classmethod
    def of(cls, word: str) -> "LetterMask":
        upper = tuple(ch != ch.lower() for ch in word)
        return cls(upper=upper, all_upper=all(upper))

    def apply(self, form: str) -> str:
        if self.all_upper:
            return form.upper()
        n = len(self.upper)
        return "".join(
            ch.upper() if i < n and self.upper[i] else ch
            for i, ch in enumerate(form)
        )


@dataclass(eq=False)
class WordRecord:
    raw: str
    role: Role = Role.UNDETERMINED
    position: int = 1
    probability: Optional[GenderProbability] = None
    rule: int = 0
    value: str = field(init=False)
    mask: LetterMask = field(init=False)
    _gender: Gender = field(default=Gender.UNKNOWN, init=False, repr=False)
    _cases: Optional[List[str]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.mask = LetterMask.of(self.raw)
        self.value = self.raw.lower()

    # ---- пол ----

    @property
    def gender(self) -> Gender:
        """Окончательный пол; если не решён — по накопленной вероятности."""
        if self._gender is Gender.UNKNOWN:
            self._gender = (self.probability or GenderProbability()).solve()
        return self._gender

    @gender.setter
    def gender(self, value: Gender) -> None:
        self._gender = value

    def is_gender_solved(self) -> bool:
        return self._gender is not Gender.UNKNOWN

    # ---- падежи ----

    @property
    def cases(self) -> Optional[List[str]]:
        return self._cases

    @cases.setter
    def cases(self, forms: List[str]) -> None:
        self._cases = [self.mask.apply(f) for f in forms]

    def get_case(self, index: int) -> str:
        return self._cases[index] if self._cases is not None else ""


class WordCollection:
    """Слова в порядке добавления с поиском по роли."""

    def __init__(self) -> None:
        self._words: List[WordRecord] = []

    def add(self, word: WordRecord) -> None:
        self._words.append(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[WordRecord]:
        return iter(self._words)

    def __getitem__(self, index: int) -> WordRecord:
        return self._words[index]

    def by_role(self, role: Role) -> WordRecord:
        """Первое слово с нужной ролью; если нет — пустая заглушка."""
        for w in self._words:
            if w.role is role:
                return w
        return WordRecord("")
