"""Convert class properties into structural field lines."""

from __future__ import annotations

from .accumulator import GlobalAccumulator
from .locator import SymbolLocator
from .models import KIND_ENUM, KIND_TYPE_ALIAS, ClassDecl, PropertyDecl, ResolvedSymbol, SourceFile


# Names provided by the TypeScript standard library; references to them never
# need a declaration in the generated namespace.
GLOBAL_TYPE_NAMES = frozenset(
    {
        "Array",
        "ArrayBuffer",
        "Awaited",
        "BigInt",
        "Blob",
        "Boolean",
        "Buffer",
        "Date",
        "Error",
        "Exclude",
        "Extract",
        "File",
        "Function",
        "InstanceType",
        "Map",
        "NonNullable",
        "Number",
        "Object",
        "Omit",
        "Partial",
        "Pick",
        "Promise",
        "ReadonlyArray",
        "ReadonlyMap",
        "ReadonlySet",
        "Readonly",
        "Record",
        "RegExp",
        "Required",
        "ReturnType",
        "Set",
        "String",
        "Symbol",
        "Uint8Array",
        "URL",
        "WeakMap",
        "WeakSet",
    }
)

DEFAULT_INDENT = "  "


def format_doc(doc: str, indent: str = "") -> list[str]:
    """Re-indent a JSDoc block so continuation lines align under ``/**``."""
    lines: list[str] = []
    for index, line in enumerate(doc.splitlines()):
        content = line.lstrip()
        if index == 0:
            lines.append(f"{indent}{content}")
        elif content:
            lines.append(f"{indent} {content}")
        else:
            lines.append(indent)
    return lines


class PropertyEmitter:
    def __init__(
        self,
        locator: SymbolLocator,
        accumulator: GlobalAccumulator,
        indent: str = DEFAULT_INDENT,
    ) -> None:
        self._locator = locator
        self._accumulator = accumulator
        self._indent = indent
        self.resolved: list[ResolvedSymbol] = []

    def classify(self, current: SourceFile, prop: PropertyDecl) -> str | None:
        name = prop.reference_name
        if not name:
            return None
        if prop.member_reference:
            # Only enum members are resolvable; namespace-qualified names are not.
            return KIND_ENUM if self._locator.denotes_enum(current, name) else None
        if current.get_enum(name) is not None:
            return KIND_ENUM
        if current.get_type_alias(name) is not None:
            return KIND_TYPE_ALIAS
        if current.declares_object_type(name):
            return None
        if name in GLOBAL_TYPE_NAMES and current.find_import(name) is None:
            return None
        if self._locator.denotes_enum(current, name):
            return KIND_ENUM
        return KIND_TYPE_ALIAS

    def emit(self, current: SourceFile, decl: ClassDecl) -> list[str]:
        """Return one field line per property of ``decl``.

        Enum and type-alias references are resolved on the way and added to
        the accumulator; resolution errors propagate to the caller.
        """
        self.resolved = []
        return [self._field(current, prop) for prop in decl.properties]

    def _field(self, current: SourceFile, prop: PropertyDecl) -> str:
        kind = self.classify(current, prop)
        if kind is not None:
            symbol = self._locator.locate(current, prop.reference_name, kind)
            if symbol is not None:
                self._accumulator.add(symbol)
                self.resolved.append(symbol)

        lines: list[str] = []
        if prop.doc:
            lines.extend(format_doc(prop.doc, self._indent))
        marker = "?" if prop.optional else ""
        type_text = prop.type_text or "any"
        lines.append(f"{self._indent}{prop.name}{marker}: {type_text};")
        return "\n".join(lines)
