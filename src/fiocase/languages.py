"""Реестр языковых правил по коду языка."""
from __future__ import annotations

from typing import Callable, Dict

from fiocase.rules.base import LanguageRules
from fiocase.rules.ru import RussianRules
from fiocase.rules.ua import UkrainianRules

DEFAULT_LANGUAGE = "ru"

_LANGUAGES: Dict[str, Callable[[], LanguageRules]] = {
    "ru": RussianRules,
    "ua": UkrainianRules,
    "uk": UkrainianRules,  # ISO 639-1
}


def get_rules(code: str) -> LanguageRules:
    factory = _LANGUAGES.get(code.strip().lower())
    if factory is None:
        raise ValueError(f"unsupported language: {code}")
    return factory()
