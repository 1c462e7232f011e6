"""Движок склонения ФИО.

Слова добавляются сеттерами (с известной ролью) или одной строкой через query
(роль определяется автоматически). Перед выдачей результата выполняется
подготовка, не более одного раза между изменениями:

1. определение части ФИО для слов без роли;
2. определение пола (принудительный пол побеждает эвристики);
3. склонение по цепочке правил (пол, роль) и восстановление регистра.

Экземпляр не потокобезопасен: на каждый запрос — свой движок.

Примеры (doctest):
>>> engine = DeclensionEngine("ru")
>>> engine.query("Иванов Иван Иванович", Case.GENITIVE)
'Иванова Ивана Ивановича'
>>> engine.detect_gender()
<Gender.MALE: 1>
>>> DeclensionEngine("ua").query_given_name("Ольга", "datv")
'Ользі'
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple, Union

from fiocase.cases import Case, resolve_case
from fiocase.languages import DEFAULT_LANGUAGE, get_rules
from fiocase.rules.base import LanguageRules, RoleScores, run_chain
from fiocase.words import (
    UNCHANGED, Gender, GenderProbability, Role, WordCollection, WordRecord, resolve_gender,
)

log = logging.getLogger(__name__)

VERSION = "0.1.0"

# допуск при сравнении сумм весов (0.3 + 0.4 == 0.7)
SCORE_TOLERANCE = 1e-6

CaseArg = Union[Case, int, str]
GenderArg = Union[Gender, str, None]


class Stage(Enum):
    EMPTY = 0        # есть изменения, ничего не подготовлено
    CLASSIFIED = 1   # роли и пол определены
    DECLINED = 2     # все слова просклонены


class WordView(NamedTuple):
    text: str
    role: Role
    gender: Gender
    cases: Tuple[str, ...]
    rule: int
    position: int


def pick_role(scores: RoleScores) -> Role:
    """Максимальный балл; при равенстве: имя > фамилия > отчество."""
    best = max(scores)
    for role, score in zip((Role.GIVEN, Role.FAMILY, Role.PATRONYMIC), scores):
        if math.isclose(score, best, abs_tol=SCORE_TOLERANCE):
            return role
    return Role.PATRONYMIC


class DeclensionEngine:
    def __init__(self, language: Union[str, LanguageRules] = DEFAULT_LANGUAGE):
        self.rules: LanguageRules = get_rules(language) if isinstance(language, str) else language
        self._words = WordCollection()
        self._stage = Stage.EMPTY

    @property
    def case_count(self) -> int:
        return self.rules.case_count

    @property
    def stage(self) -> Stage:
        return self._stage

    # ---- изменение состава ----

    def full_reset(self) -> "DeclensionEngine":
        """Удалить все слова; движок готов к новому ФИО."""
        self._words = WordCollection()
        self._stage = Stage.EMPTY
        return self

    def _add(self, text: str, role: Role) -> "DeclensionEngine":
        text = text.strip()
        if text:
            self._words.add(WordRecord(text, role=role))
            self._stage = Stage.EMPTY
        return self

    def set_given_name(self, text: str) -> "DeclensionEngine":
        return self._add(text, Role.GIVEN)

    def set_family_name(self, text: str) -> "DeclensionEngine":
        return self._add(text, Role.FAMILY)

    set_last_name = set_family_name

    def set_patronymic_name(self, text: str) -> "DeclensionEngine":
        return self._add(text, Role.PATRONYMIC)

    def set_full_name(self, family: str, given: str, patronymic: str) -> "DeclensionEngine":
        self.set_given_name(given)
        self.set_family_name(family)
        self.set_patronymic_name(patronymic)
        return self

    def set_gender(self, gender: GenderArg) -> "DeclensionEngine":
        """Принудительно задать пол всем текущим словам."""
        g = resolve_gender(gender)
        for w in self._words:
            w.gender = g
        self._stage = Stage.EMPTY
        return self

    def _split_full_name(self, full_name: str) -> None:
        self._words = WordCollection()
        for i, part in enumerate(full_name.split(), start=1):
            self._words.add(WordRecord(part, position=i))
        self._stage = Stage.EMPTY

    # ---- подготовка ----

    def _detect_roles(self) -> None:
        for w in self._words:
            if w.role is not Role.UNDETERMINED:
                continue
            scores = self.rules.role_scores(w.value, w.position)
            w.role = pick_role(scores)
            log.debug("role %r: %s (given=%.2f family=%.2f patronymic=%.2f)",
                      w.raw, w.role.name, scores.given, scores.family, scores.patronymic)

    def _solve_gender(self) -> None:
        # пол уже задан у какого-то слова — распространяем на все
        for w in self._words:
            if w.is_gender_solved():
                self._assign_gender(w.gender)
                log.debug("gender forced: %s", w.gender.name)
                return

        total = GenderProbability()
        for w in self._words:
            prob = self.rules.gender_probability(w.value, w.role)
            w.probability = (w.probability or GenderProbability()) + prob
            total = total + w.probability
        g = total.solve()
        log.debug("gender detected: %s (man=%.2f woman=%.2f)", g.name, total.man, total.woman)
        self._assign_gender(g)

    def _assign_gender(self, gender: Gender) -> None:
        for w in self._words:
            w.gender = gender

    def _prepare(self) -> None:
        if self._stage is Stage.EMPTY:
            self._detect_roles()
            self._solve_gender()
            self._stage = Stage.CLASSIFIED

    def _decline(self, word: WordRecord) -> None:
        res = run_chain(self.rules.chain(word.gender, word.role), word.value)
        if res is None:
            word.cases = [word.value] * self.case_count
            word.rule = UNCHANGED
        else:
            word.cases = list(res.forms)
            word.rule = res.rule
        log.debug("declined %r as %s/%s by rule %d",
                  word.raw, word.gender.name, word.role.name, word.rule)

    def _decline_all(self) -> None:
        if self._stage is not Stage.DECLINED:
            self._prepare()
            for w in self._words:
                self._decline(w)
            self._stage = Stage.DECLINED

    # ---- результаты ----

    def detect_gender(self) -> Gender:
        """Пол человека по добавленным словам."""
        self._prepare()
        if len(self._words) == 0:
            return Gender.UNKNOWN
        return self._words[0].gender

    def _part_case(self, role: Role, case: Optional[CaseArg]) -> Union[str, List[str]]:
        self._decline_all()
        word = self._words.by_role(role)
        if case is None:
            return list(word.cases or [])
        return word.get_case(resolve_case(case, self.case_count))

    def get_given_case(self, case: Optional[CaseArg] = None) -> Union[str, List[str]]:
        return self._part_case(Role.GIVEN, case)

    def get_family_case(self, case: Optional[CaseArg] = None) -> Union[str, List[str]]:
        return self._part_case(Role.FAMILY, case)

    def get_patronymic_case(self, case: Optional[CaseArg] = None) -> Union[str, List[str]]:
        return self._part_case(Role.PATRONYMIC, case)

    def _connected_case(self, index: int) -> str:
        return " ".join(w.get_case(index) for w in self._words)

    def get_word_collection(self) -> Tuple[WordView, ...]:
        """Снимок слов для диагностики."""
        return tuple(
            WordView(
                text=w.raw,
                role=w.role,
                gender=w.gender if w.is_gender_solved() else Gender.UNKNOWN,
                cases=tuple(w.cases or ()),
                rule=w.rule,
                position=w.position,
            )
            for w in self._words
        )

    # ---- склонение за один вызов ----

    def query(
        self,
        full_name: str,
        case: Optional[CaseArg] = None,
        gender: GenderArg = None,
    ) -> Union[str, List[str]]:
        """Просклонять полное имя: все падежи списком или один падеж строкой."""
        self.full_reset()
        self._split_full_name(full_name)
        g = resolve_gender(gender)
        if g is not Gender.UNKNOWN:
            self.set_gender(g)
        self._decline_all()
        if case is None:
            return [self._connected_case(i) for i in range(self.case_count)]
        return self._connected_case(resolve_case(case, self.case_count))

    def _query_part(self, text: str, role: Role, case: Optional[CaseArg],
                    gender: GenderArg) -> Union[str, List[str]]:
        self.full_reset()
        self._add(text, role)
        g = resolve_gender(gender)
        if g is not Gender.UNKNOWN:
            self.set_gender(g)
        return self._part_case(role, case)

    def query_given_name(self, text: str, case: Optional[CaseArg] = None,
                         gender: GenderArg = None) -> Union[str, List[str]]:
        return self._query_part(text, Role.GIVEN, case, gender)

    def query_family_name(self, text: str, case: Optional[CaseArg] = None,
                          gender: GenderArg = None) -> Union[str, List[str]]:
        return self._query_part(text, Role.FAMILY, case, gender)

    def query_patronymic_name(self, text: str, case: Optional[CaseArg] = None,
                              gender: GenderArg = None) -> Union[str, List[str]]:
        return self._query_part(text, Role.PATRONYMIC, case, gender)
