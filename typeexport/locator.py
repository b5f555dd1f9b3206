"""Locate enum and type-alias declarations across loaded files."""

from __future__ import annotations

import os

from .models import ResolvedSymbol, SourceFile
from .project import Project


SOURCE_EXTENSION = ".ts"


class ResolutionError(RuntimeError):
    def __init__(self, message: str, symbol: str, kind: str) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.kind = kind


class MissingImportError(ResolutionError):
    def __init__(self, symbol: str, kind: str) -> None:
        super().__init__(
            f"Could not find import declaration for {kind} {symbol}", symbol, kind
        )


class MissingFileError(ResolutionError):
    def __init__(self, symbol: str, kind: str, specifier: str) -> None:
        super().__init__(f"could not find file at path {specifier}", symbol, kind)
        self.specifier = specifier


class SymbolLocator:
    """Find declaration text for a symbol, following at most one import.

    Lookups are side-effect free; callers decide what to do with the result.
    A symbol that is neither declared nor imported is an error, while an
    import whose target file does not declare the symbol yields ``None``.
    """

    def __init__(self, project: Project) -> None:
        self._project = project

    def locate(self, current: SourceFile, name: str, kind: str) -> ResolvedSymbol | None:
        local = current.get_declaration(name, kind)
        if local is not None:
            return ResolvedSymbol(
                kind=kind,
                name=name,
                declaration=_exported(local.text, local.exported),
                origin=current.path,
                via_import=False,
            )

        item = current.find_import(name)
        if item is None:
            raise MissingImportError(name, kind)

        specifier = item.module + SOURCE_EXTENSION
        target = self._project.get_source_file(
            os.path.join(current.directory, specifier)
        )
        if target is None:
            raise MissingFileError(name, kind, specifier)

        imported_name = item.imported_name(name) or name
        found = target.get_declaration(imported_name, kind)
        if found is None:
            return None

        return ResolvedSymbol(
            kind=kind,
            name=imported_name,
            declaration=_exported(found.text, found.exported),
            origin=target.path,
            via_import=True,
            local_name=name,
        )

    def denotes_enum(self, current: SourceFile, name: str) -> bool:
        if current.get_enum(name) is not None:
            return True
        if current.get_type_alias(name) is not None:
            return False

        item = current.find_import(name)
        if item is None:
            return False
        target = self._project.get_source_file(
            os.path.join(current.directory, item.module + SOURCE_EXTENSION)
        )
        if target is None:
            return False
        return target.get_enum(item.imported_name(name) or name) is not None


def _exported(text: str, exported: bool) -> str:
    if exported:
        return text
    return f"export {text}"
