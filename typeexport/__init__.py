"""Export TypeScript DTO classes as plain structural types."""

from .accumulator import GlobalAccumulator
from .assemble import assemble, render_raw
from .heritage import resolve_extends
from .locator import MissingFileError, MissingImportError, ResolutionError, SymbolLocator
from .parser import TypeScriptParser
from .pipeline import run
from .project import Project
from .transform import ClassTransformer, TypeExporter

__all__ = [
    "GlobalAccumulator",
    "assemble",
    "render_raw",
    "resolve_extends",
    "MissingFileError",
    "MissingImportError",
    "ResolutionError",
    "SymbolLocator",
    "TypeScriptParser",
    "run",
    "Project",
    "ClassTransformer",
    "TypeExporter",
]
