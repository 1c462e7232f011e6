from __future__ import annotations
import json
import logging
from pathlib import Path
import typer

from fiocase.cases import resolve_case
from fiocase.core import DeclensionEngine
from fiocase.languages import DEFAULT_LANGUAGE
from fiocase.payload import build_declension_document, case_labels, decline_lines, write_jsonl

app = typer.Typer(add_completion=False, no_args_is_help=True)

PARTS = ("full", "given", "family", "patronymic")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Подробный лог (DEBUG)")):
    """Склонение ФИО по падежам (русский и украинский)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _engine(lang: str) -> DeclensionEngine:
    try:
        return DeclensionEngine(lang)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--lang")


def _check_name(name: str) -> str:
    if not name.strip():
        raise typer.BadParameter("empty full name", param_hint="NAME")
    return name


@app.command("decline")
def cmd_decline(
    name: str = typer.Argument(..., help="ФИО или отдельная часть"),
    lang: str = typer.Option(DEFAULT_LANGUAGE, "--lang", "-l"),
    case: str | None = typer.Option(None, "--case", "-c", help="gent, datv, Родительный, 1 ..."),
    gender: str | None = typer.Option(None, "--gender", "-g", help="m / f / auto"),
    part: str = typer.Option("full", "--part", "-p", help="full | given | family | patronymic"),
    as_json: bool = typer.Option(False, "--json", help="Документ {version, languageBuild, cases}"),
):
    """Просклонять ФИО: таблица падежей, один падеж или JSON-документ."""
    _check_name(name)
    engine = _engine(lang)
    if part not in PARTS:
        raise typer.BadParameter(f"unsupported part: {part}", param_hint="--part")
    if as_json:
        if part != "full":
            raise typer.BadParameter("--json works with --part full only", param_hint="--part")
        if case is not None:
            raise typer.BadParameter("--json returns all cases, drop --case", param_hint="--case")
        try:
            doc = build_declension_document(name, lang, gender)
        except ValueError as e:
            raise typer.BadParameter(str(e))
        typer.echo(json.dumps(doc, ensure_ascii=False, indent=2))
        return

    try:
        if case is not None:
            resolve_case(case, engine.case_count)
        if part == "full":
            forms = engine.query(name, case, gender)
        else:
            query = getattr(engine, f"query_{part}_name")
            forms = query(name, case, gender)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if case is not None:
        typer.echo(forms)
        return
    for label, form in zip(case_labels(lang), forms):
        typer.echo(f"{label}: {form}")


@app.command("gender")
def cmd_gender(
    name: str = typer.Argument(...),
    lang: str = typer.Option(DEFAULT_LANGUAGE, "--lang", "-l"),
):
    """Определить пол по ФИО."""
    _check_name(name)
    engine = _engine(lang)
    engine.query(name)
    typer.echo(engine.detect_gender().name.lower())


@app.command("roles")
def cmd_roles(
    name: str = typer.Argument(...),
    lang: str = typer.Option(DEFAULT_LANGUAGE, "--lang", "-l"),
    gender: str | None = typer.Option(None, "--gender", "-g"),
):
    """Показать, как распознаны слова: роль, пол, номер правила."""
    _check_name(name)
    engine = _engine(lang)
    try:
        engine.query(name, gender=gender)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--gender")
    for w in engine.get_word_collection():
        typer.echo(f"{w.position};{w.text};{w.role.name.lower()};{w.gender.name.lower()};{w.rule}")


@app.command("batch")
def cmd_batch(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    out: Path = typer.Option(Path("declensions.jsonl"), "--out", "-o"),
    lang: str = typer.Option(DEFAULT_LANGUAGE, "--lang", "-l"),
    encoding: str = typer.Option("utf-8", "--encoding"),
):
    """Просклонять ФИО построчно: один JSON-документ на непустую строку."""
    _engine(lang)
    lines = input_path.read_text(encoding=encoding).splitlines()
    docs = decline_lines(lines, lang)
    write_jsonl(docs, out)
    typer.echo(f"declined: {len(docs)}")
    typer.echo(f"written: {out}")


if __name__ == "__main__":
    app()
