"""Turn class declarations into structural type declarations."""

from __future__ import annotations

from .accumulator import GlobalAccumulator
from .heritage import recognized_terms, resolve_extends, term_to_type
from .locator import SymbolLocator
from .models import ClassDecl, ExtendTerm, FileOutput, ResolvedSymbol, SourceFile
from .project import Project
from .properties import PropertyEmitter, format_doc


FALLBACK_TYPE = "Record<string, any>"


def structural_block(fields: list[str]) -> str:
    return "{\n" + "\n".join(fields) + "\n}"


def render_declaration(
    name: str,
    fields: list[str],
    terms: list[ExtendTerm],
    doc: str | None = None,
) -> str:
    """Render ``export type <name> = ...;`` for one class."""
    if terms:
        parts = [term_to_type(term) for term in terms]
        if fields:
            parts.append(structural_block(fields))
        body = " & ".join(parts)
    elif fields:
        body = structural_block(fields)
    else:
        body = FALLBACK_TYPE

    lines = format_doc(doc) if doc else []
    lines.append(f"export type {name} = {body};")
    return "\n".join(lines)


class ClassTransformer:
    def __init__(self, emitter: PropertyEmitter) -> None:
        self._emitter = emitter

    def transform(self, current: SourceFile, decl: ClassDecl) -> str:
        terms = recognized_terms(resolve_extends(decl.extends_clause))
        fields = self._emitter.emit(current, decl)
        return render_declaration(decl.name, fields, terms, doc=decl.doc)


class TypeExporter:
    """Run the class transformer over every class of each file.

    ``class_types`` maps class names to their generated declaration and
    ``references`` maps class names to the symbols their properties resolved.
    """

    def __init__(self, project: Project, accumulator: GlobalAccumulator | None = None) -> None:
        self.project = project
        self.accumulator = accumulator if accumulator is not None else GlobalAccumulator()
        self._emitter = PropertyEmitter(SymbolLocator(project), self.accumulator)
        self._transformer = ClassTransformer(self._emitter)
        self.class_types: dict[str, str] = {}
        self.references: dict[str, list[ResolvedSymbol]] = {}

    def export_file(self, source: SourceFile) -> FileOutput:
        chunks = [f"// {source.basename}"]
        names: list[str] = []
        for decl in source.classes:
            text = self._transformer.transform(source, decl)
            self.class_types[decl.name] = text
            self.references[decl.name] = list(self._emitter.resolved)
            names.append(decl.name)
            chunks.append(text)
        return FileOutput(
            filename=source.basename,
            path=source.path,
            content="\n\n".join(chunks) + "\n",
            class_names=tuple(names),
        )
