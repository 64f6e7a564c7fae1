import json
import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from twlint.types import BoundaryMeta, TwlintConfig

REPO_ROOT = Path(__file__).resolve().parent.parent


def write(p: Path, text: str) -> Path:
    """Write text, creating parent directories."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def run_cli(root: Path, *args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "twlint.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8", input=stdin,
    )


def jload(s: str):
    return json.loads(s)


def quoted(start_column: int = 4) -> BoundaryMeta:
    """Boundaries of a standalone template literal."""
    return BoundaryMeta(start_column=start_column, opening_quote="`", closing_quote="`")


@pytest.fixture
def cfg() -> TwlintConfig:
    return TwlintConfig()


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Small project: twlint.yaml, two components, an ignored build dir."""
    root = tmp_path
    write(
        root / "twlint.yaml",
        textwrap.dedent("""
        extensions: [".tsx"]
        exclude: ["dist/"]
        multiline:
          print_width: 60
        """).strip() + "\n",
    )
    write(root / "src" / "Clean.tsx", 'export const Clean = () => <div className="flex" />;\n')
    write(root / "src" / "Dirty.tsx", 'export const Dirty = () => <div className=" b  a " />;\n')
    write(root / "dist" / "Bundle.tsx", 'export const B = () => <div className=" x  y " />;\n')
    return root
