from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Set

import pathspec

from .types import TwlintConfig

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def build_ignore_spec(root: Path, exclude: Sequence[str]) -> Optional[pathspec.PathSpec]:
    """
    PathSpec from .gitignore plus configured exclude patterns.
    None when there is nothing to ignore.
    """
    lines: List[str] = []
    gitignore = root / ".gitignore"
    if gitignore.is_file():
        for ln in gitignore.read_text(encoding="utf-8", errors="ignore").splitlines():
            ln = ln.strip()
            if ln and not ln.startswith("#"):
                lines.append(ln)
    lines.extend(exclude)
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def _rel_posix(path: Path, base: Path) -> str:
    # symlinks may point outside base; match those by name only
    try:
        return path.resolve().relative_to(base).as_posix()
    except ValueError:
        return path.name


def iter_files(
    root: Path,
    *,
    extensions: Set[str],
    spec: Optional[pathspec.PathSpec],
    spec_root: Optional[Path] = None,
) -> Iterator[Path]:
    """
    Recursive file iterator with ignore-spec support and early directory pruning.
    Spec patterns are matched relative to spec_root (the walked root by default);
    yielded paths keep the form of root (relative stays relative).
    """
    base = (spec_root or root).resolve()
    if not root.resolve().is_relative_to(base):
        base = root.resolve()

    for dirpath, dirnames, filenames in os.walk(root):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")

        if spec is not None:
            keep: List[str] = []
            for d in dirnames:
                rel_dir = _rel_posix(Path(dirpath, d), base)
                if not spec.match_file(rel_dir + "/"):
                    keep.append(d)
            dirnames[:] = keep
        dirnames.sort()

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if p.suffix.lower() not in extensions:
                continue
            rel_posix = _rel_posix(p, base)
            if spec is not None and spec.match_file(rel_posix):
                continue
            yield p


def iter_source_files(paths: Iterable[Path], cfg: TwlintConfig, *, root: Optional[Path] = None) -> Iterator[Path]:
    """
    Expand CLI paths into source files.

    Explicit files are always yielded; directories are walked with the
    project's .gitignore and configured excludes.
    """
    root = (root or Path.cwd()).resolve()
    extensions = {e.lower() if e.startswith(".") else f".{e.lower()}" for e in cfg.extensions}
    spec = build_ignore_spec(root, cfg.exclude)

    for path in paths:
        if path.is_file():
            yield path
        elif path.is_dir():
            yield from iter_files(path, extensions=extensions, spec=spec, spec_root=root)
        else:
            logger.warning("path not found: %s", path)


__all__ = ["read_text", "build_ignore_spec", "iter_files", "iter_source_files"]
