"""Lightweight data models for extracted declarations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


KIND_ENUM = "enum"
KIND_TYPE_ALIAS = "typeAlias"

TERM_PLAIN = "plain"
TERM_PARTIAL = "partial"
TERM_UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Location:
    line: int
    column: int


@dataclass(frozen=True)
class ImportName:
    name: str
    alias: str | None = None

    @property
    def local_name(self) -> str:
        return self.alias or self.name


@dataclass(frozen=True)
class ImportItem:
    module: str
    names: tuple[ImportName, ...]
    location: Location

    @property
    def local_names(self) -> tuple[str, ...]:
        return tuple(item.local_name for item in self.names)

    def imported_name(self, local_name: str) -> str | None:
        for item in self.names:
            if item.local_name == local_name:
                return item.name
        return None


@dataclass(frozen=True)
class PropertyDecl:
    name: str
    optional: bool
    type_text: str | None
    doc: str | None
    reference_name: str | None
    location: Location
    member_reference: bool = False  # `Enum.Member` style qualified name


@dataclass(frozen=True)
class ClassDecl:
    name: str
    doc: str | None
    properties: tuple[PropertyDecl, ...]
    extends_clause: object | None  # raw tree-sitter extends_clause node
    path: str
    location: Location


@dataclass(frozen=True)
class EnumDecl:
    name: str
    text: str
    exported: bool
    path: str


@dataclass(frozen=True)
class TypeAliasDecl:
    name: str
    text: str
    exported: bool
    path: str


@dataclass(frozen=True)
class ExtendTerm:
    kind: str  # plain | partial | unrecognized
    name: str


@dataclass
class SourceFile:
    path: str
    classes: list[ClassDecl] = field(default_factory=list)
    enums: dict[str, EnumDecl] = field(default_factory=dict)
    type_aliases: dict[str, TypeAliasDecl] = field(default_factory=dict)
    interfaces: set[str] = field(default_factory=set)
    imports: list[ImportItem] = field(default_factory=list)

    @property
    def directory(self) -> str:
        return os.path.dirname(self.path)

    @property
    def basename(self) -> str:
        return os.path.basename(self.path)

    def get_enum(self, name: str) -> EnumDecl | None:
        return self.enums.get(name)

    def get_type_alias(self, name: str) -> TypeAliasDecl | None:
        return self.type_aliases.get(name)

    def get_declaration(self, name: str, kind: str) -> EnumDecl | TypeAliasDecl | None:
        if kind == KIND_ENUM:
            return self.get_enum(name)
        return self.get_type_alias(name)

    def get_class(self, name: str) -> ClassDecl | None:
        for decl in self.classes:
            if decl.name == name:
                return decl
        return None

    def declares_object_type(self, name: str) -> bool:
        """True when ``name`` is a class or interface declared in this file."""
        return name in self.interfaces or self.get_class(name) is not None

    def find_import(self, name: str) -> ImportItem | None:
        for item in self.imports:
            if name in item.local_names:
                return item
        return None


@dataclass(frozen=True)
class ResolvedSymbol:
    kind: str
    name: str
    declaration: str
    origin: str
    via_import: bool
    local_name: str | None = None

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.kind, self.name, self.origin)

    @property
    def text(self) -> str:
        if self.via_import:
            return f"// {os.path.basename(self.origin)}\n{self.declaration}"
        return self.declaration

    @property
    def alias_declaration(self) -> str | None:
        """`export type Local = Name;` for a symbol imported under another name."""
        if not self.local_name or self.local_name == self.name:
            return None
        return f"export type {self.local_name} = {self.name};"


@dataclass(frozen=True)
class FileOutput:
    filename: str
    path: str
    content: str
    class_names: tuple[str, ...] = ()
