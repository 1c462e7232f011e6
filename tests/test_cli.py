from pathlib import Path
import json

from typer.testing import CliRunner

from fiocase.cli import app

runner = CliRunner()

def test_decline_table():
    res = runner.invoke(app, ["decline", "Иванов Иван Иванович"])
    assert res.exit_code == 0
    assert "Родительный (кого? чего?): Иванова Ивана Ивановича" in res.output

def test_decline_single_case():
    res = runner.invoke(app, ["decline", "Ольга", "--lang", "ua", "--part", "given", "--case", "datv"])
    assert res.exit_code == 0
    assert res.output.strip() == "Ользі"

def test_decline_json():
    res = runner.invoke(app, ["decline", "Иванов Иван Иванович", "--json"])
    assert res.exit_code == 0
    doc = json.loads(res.output)
    assert doc["cases"][4] == "Ивановым Иваном Ивановичем"

def test_bad_options():
    assert runner.invoke(app, ["decline", "Иван", "--lang", "de"]).exit_code != 0
    assert runner.invoke(app, ["decline", "Иван", "--case", "voct"]).exit_code != 0
    assert runner.invoke(app, ["decline", "Иван", "--gender", "x"]).exit_code != 0
    assert runner.invoke(app, ["decline", "Иван", "--part", "nick"]).exit_code != 0

def test_gender_and_roles():
    res = runner.invoke(app, ["gender", "Иванова Анна Сергеевна"])
    assert res.output.strip() == "female"
    res = runner.invoke(app, ["roles", "Иванов Иван Иванович"])
    assert res.exit_code == 0
    assert res.output.splitlines()[0] == "1;Иванов;family;male;603"

def test_batch(tmp_path: Path):
    src = tmp_path / "names.txt"
    src.write_text("Иванов Иван Иванович\n\nИванова Анна Сергеевна\n", encoding="utf-8")
    out = tmp_path / "res.jsonl"
    res = runner.invoke(app, ["--verbose", "batch", str(src), "--out", str(out)])
    assert res.exit_code == 0
    assert "declined: 2" in res.output
    docs = [json.loads(x) for x in out.read_text(encoding="utf-8").splitlines()]
    assert docs[0]["cases"][1] == "Иванова Ивана Ивановича"

def test_blank_name_rejected():
    # пустое ФИО отклоняется до вызова движка
    for cmd in (["decline", "   "], ["decline", " ", "--case", "gent"], ["gender", "  "], ["roles", ""]):
        res = runner.invoke(app, cmd)
        assert res.exit_code != 0
        assert "unknown" not in res.output and "Родительный" not in res.output

def test_json_with_case_rejected():
    res = runner.invoke(app, ["decline", "Иванов Иван Иванович", "--json", "--case", "gent"])
    assert res.exit_code != 0
