"""File discovery utilities."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Iterable


DEFAULT_EXCLUDES = {"node_modules", ".git", ".hg", ".svn"}


def resolve_under(root: str | Path, relative: str) -> Path:
    """Join ``relative`` onto ``root``; a leading slash still means ``root``."""
    return Path(root) / relative.lstrip("/\\")


def iter_typescript_files(
    patterns: Iterable[str],
    root: str | Path,
    excludes: Iterable[str] | None = None,
) -> list[str]:
    root_path = Path(root)
    exclude_set = set(excludes or DEFAULT_EXCLUDES)
    matches: list[str] = []
    seen: set[str] = set()

    for pattern in patterns:
        full_pattern = str(resolve_under(root_path, pattern))
        for match in sorted(glob.glob(full_pattern, recursive=True)):
            path = Path(match)
            if not path.is_file() or path.suffix != ".ts" or path.name.endswith(".d.ts"):
                continue
            try:
                parts = path.relative_to(root_path).parts
            except ValueError:
                parts = path.parts
            if any(part in exclude_set for part in parts):
                continue
            normalized = os.path.normpath(os.path.abspath(match))
            if normalized in seen:
                continue
            seen.add(normalized)
            matches.append(normalized)

    return matches
