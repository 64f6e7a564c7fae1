from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .conf import load_config
from .engine import fix_text, lint_text
from .errors import TwlintUserError
from .files import iter_source_files, read_text
from .report_schema import DiagnosticEntry, FileReport, RunReport
from .rules import list_rules
from .types import TwlintConfig
from .version import tool_version

STDIN_PATH = "-"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="twlint",
        description="Line wrapping and whitespace checks for tailwind class literals",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "paths",
            nargs="*",
            default=["."],
            help="files or directories to process; '-' reads stdin",
        )
        sp.add_argument(
            "--config",
            type=Path,
            help="path to twlint.yaml (default: searched from the current directory upwards)",
        )
        sp.add_argument(
            "--ext",
            default="tsx",
            help="grammar for stdin input (tsx, jsx, ts, js)",
        )
        sp.add_argument(
            "--verbose",
            action="store_true",
            help="debug logging to stderr",
        )

    sp_check = sub.add_parser("check", help="report diagnostics")
    add_common(sp_check)
    sp_check.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="report format",
    )

    sp_fix = sub.add_parser("fix", help="apply fixes in place; '-' writes fixed stdin to stdout")
    add_common(sp_fix)

    sub.add_parser("rules", help="list available rules (JSON)")

    return p


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("TWLINT_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s", stream=sys.stderr)


def _entries(diagnostics) -> List[DiagnosticEntry]:
    return [DiagnosticEntry.from_diagnostic(d) for d in diagnostics]


def _process_file(path: Path, cfg: TwlintConfig, *, fix: bool) -> FileReport:
    report = FileReport(path=path.as_posix())
    try:
        text = read_text(path)
        if not fix:
            report.diagnostics = _entries(lint_text(text, path.suffix, cfg))
            return report

        outcome = fix_text(text, path.suffix, cfg)
        if outcome.changed:
            path.write_text(outcome.text, encoding="utf-8", newline="")
        report.fixed = outcome.changed
        report.fixes_applied = outcome.fixes_applied
        report.diagnostics = _entries(outcome.remaining)
    except (TwlintUserError, OSError, UnicodeDecodeError) as e:
        report.error = str(e)
    return report


def _run_stdin(ns: argparse.Namespace, cfg: TwlintConfig) -> int:
    text = sys.stdin.read()
    if ns.cmd == "fix":
        outcome = fix_text(text, ns.ext, cfg)
        sys.stdout.write(outcome.text)
        return 1 if outcome.remaining else 0

    run = RunReport(toolVersion=tool_version())
    run.files.append(FileReport(path="<stdin>", diagnostics=_entries(lint_text(text, ns.ext, cfg))))
    _write_report(run, getattr(ns, "format", "json"))
    return 1 if run.diagnostic_count else 0


def _write_report(run: RunReport, fmt: str) -> None:
    if fmt == "text":
        for f in run.files:
            if f.error:
                sys.stdout.write(f"{f.path}: error: {f.error}\n")
            for d in f.diagnostics:
                sys.stdout.write(f"{f.path}:{d.line}:{d.column}  {d.rule}  {d.message}\n")
        return
    data = run.model_dump(mode="json", by_alias=True)
    sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)

    if ns.cmd == "rules":
        sys.stdout.write(json.dumps({"rules": list_rules()}) + "\n")
        return 0

    _setup_logging(ns.verbose)

    try:
        cfg = load_config(ns.config)

        if ns.paths == [STDIN_PATH]:
            return _run_stdin(ns, cfg)

        fix = ns.cmd == "fix"
        run = RunReport(toolVersion=tool_version())
        for path in iter_source_files([Path(p) for p in ns.paths], cfg):
            run.files.append(_process_file(path, cfg, fix=fix))

        _write_report(run, getattr(ns, "format", "json"))

    except TwlintUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    if run.has_errors:
        return 2
    return 1 if run.diagnostic_count else 0


if __name__ == "__main__":
    raise SystemExit(main())
