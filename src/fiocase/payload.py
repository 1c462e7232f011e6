from __future__ import annotations
"""
Документ склонения для внешних потребителей (HTTP-адаптер, batch в CLI) и
подписанные строки для табличного вывода.

Формат документа:
{"version": "0.1.0", "languageBuild": "20180918-1", "cases": ["...", ...]}
Проверяется по schemas/declension.schema.json.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from jsonschema import validate as js_validate

from fiocase.cases import RU_CASE_QUESTIONS
from fiocase.core import VERSION, DeclensionEngine, GenderArg
from fiocase.languages import DEFAULT_LANGUAGE

SCHEMA_PATH = Path(__file__).with_name("schemas") / "declension.schema.json"


@lru_cache(maxsize=1)
def _read_schema() -> Dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    js_validate(instance=doc, schema=_read_schema())
    return doc


def build_declension_document(
    full_name: str,
    language: str = DEFAULT_LANGUAGE,
    gender: GenderArg = None,
) -> Dict[str, Any]:
    """Просклонять ФИО во все падежи и собрать документ по схеме."""
    if not full_name or not full_name.strip():
        raise ValueError("empty full name")
    engine = DeclensionEngine(language)
    cases = engine.query(full_name, gender=gender)
    doc = {
        "version": VERSION,
        "languageBuild": engine.rules.build,
        "cases": list(cases),
    }
    return validate_document(doc)


def case_labels(language: str = DEFAULT_LANGUAGE) -> List[str]:
    """Подписи падежей; для русского — с вопросами: «Родительный (кого? чего?)»."""
    engine = DeclensionEngine(language)
    labels = list(engine.rules.case_labels)
    if engine.rules.code == "ru":
        labels = [f"{label} ({q})" for label, q in zip(labels, RU_CASE_QUESTIONS)]
    return labels


def labeled_cases(
    full_name: str,
    language: str = DEFAULT_LANGUAGE,
    gender: GenderArg = None,
) -> List[Tuple[str, str]]:
    doc = build_declension_document(full_name, language, gender)
    return list(zip(case_labels(language), doc["cases"]))


def write_jsonl(docs: List[Dict[str, Any]], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        for d in docs:
            f.write(json.dumps(d, ensure_ascii=False) + "\n")
    return out_path


def decline_lines(
    lines: List[str],
    language: str = DEFAULT_LANGUAGE,
    gender: Optional[GenderArg] = None,
) -> List[Dict[str, Any]]:
    """По документу на каждую непустую строку; движок свой на каждую строку."""
    return [build_declension_document(ln, language, gender) for ln in lines if ln.strip()]
