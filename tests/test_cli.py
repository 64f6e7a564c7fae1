from twlint.cli import main
from twlint.rules import list_rules

from .conftest import jload, run_cli, write


def test_check_reports_dirty_file(tmpproj, monkeypatch, capsys):
    monkeypatch.chdir(tmpproj)
    rc = main(["check", "src", "dist/Bundle.tsx"])
    data = jload(capsys.readouterr().out)

    assert rc == 1
    by_path = {f["path"]: f for f in data["files"]}
    assert by_path["src/Clean.tsx"]["diagnostics"] == []
    (diag,) = by_path["src/Dirty.tsx"]["diagnostics"]
    assert diag["rule"] == "no-unnecessary-whitespace"
    assert diag["messageId"] == "unnecessary_whitespace"
    assert diag["fix"] == '"b a"'
    assert "toolVersion" in data


def test_directory_walk_skips_excluded(tmpproj, monkeypatch, capsys):
    monkeypatch.chdir(tmpproj)
    main(["check", "."])
    paths = [f["path"] for f in jload(capsys.readouterr().out)["files"]]
    assert not any("dist" in p for p in paths)


def test_fix_rewrites_in_place(tmpproj, monkeypatch, capsys):
    monkeypatch.chdir(tmpproj)
    rc = main(["fix", "src"])
    data = jload(capsys.readouterr().out)

    assert rc == 0
    assert (tmpproj / "src" / "Dirty.tsx").read_text(encoding="utf-8") == (
        'export const Dirty = () => <div className="b a" />;\n'
    )
    dirty = next(f for f in data["files"] if f["path"].endswith("Dirty.tsx"))
    assert dirty["fixed"] is True
    assert dirty["fixesApplied"] == {"no-unnecessary-whitespace": 1}


def test_text_format(tmpproj, monkeypatch, capsys):
    monkeypatch.chdir(tmpproj)
    main(["check", "--format", "text", "src"])
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    assert out[0].startswith("src/Dirty.tsx:1:")
    assert "no-unnecessary-whitespace" in out[0]


def test_bad_config_exits_2(tmp_path, monkeypatch, capsys):
    write(tmp_path / "twlint.yaml", "multiline:\n  group: sometimes\n")
    monkeypatch.chdir(tmp_path)
    assert main(["check", "."]) == 2
    assert "multiline.group" in capsys.readouterr().err


def test_rules_listing(capsys):
    assert main(["rules"]) == 0
    assert jload(capsys.readouterr().out)["rules"] == list_rules()


def test_stdin_fix_subprocess(tmp_path):
    cp = run_cli(tmp_path, "fix", "-", stdin='const c = cn(" a  b ");\n')
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == 'const c = cn("a b");\n'


def test_stdin_check_subprocess(tmp_path):
    cp = run_cli(tmp_path, "check", "-", "--ext", "ts", stdin='const c = cn(" a ");\n')
    assert cp.returncode == 1, cp.stderr
    data = jload(cp.stdout)
    assert data["files"][0]["path"] == "<stdin>"
    assert len(data["files"][0]["diagnostics"]) == 1
