"""In-memory set of parsed TypeScript source files."""

from __future__ import annotations

import os
from typing import Iterable

from .extract import extract_declarations
from .models import SourceFile
from .parser import TypeScriptParser


def normalize_path(path: str | os.PathLike) -> str:
    return os.path.normpath(os.path.abspath(os.fspath(path)))


class Project:
    """Files added to the project, keyed by normalized absolute path.

    Only added files can be resolved; imports are never followed to load
    additional files.
    """

    def __init__(self, parser: TypeScriptParser | None = None) -> None:
        self._parser = parser or TypeScriptParser()
        self._files: dict[str, SourceFile] = {}

    @property
    def source_files(self) -> list[SourceFile]:
        return list(self._files.values())

    def __len__(self) -> int:
        return len(self._files)

    def add_source_file(self, path: str | os.PathLike) -> SourceFile:
        key = normalize_path(path)
        if key not in self._files:
            parsed = self._parser.parse_file(key)
            self._files[key] = extract_declarations(parsed, path=key)
        return self._files[key]

    def add_source_text(self, path: str | os.PathLike, text: str) -> SourceFile:
        key = normalize_path(path)
        parsed = self._parser.parse_text(text)
        self._files[key] = extract_declarations(parsed, path=key)
        return self._files[key]

    def add_source_files(self, paths: Iterable[str | os.PathLike]) -> list[SourceFile]:
        return [self.add_source_file(path) for path in paths]

    def get_source_file(self, path: str | os.PathLike) -> SourceFile | None:
        return self._files.get(normalize_path(path))
