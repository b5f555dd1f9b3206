"""Extract class, enum, type-alias and import declarations from a TypeScript Tree-sitter AST."""

from __future__ import annotations

from .models import (
    ClassDecl,
    EnumDecl,
    ImportItem,
    ImportName,
    Location,
    PropertyDecl,
    SourceFile,
    TypeAliasDecl,
)


CLASS_TYPES = {"class_declaration", "abstract_class_declaration"}
FIELD_TYPES = {"public_field_definition"}
TYPE_REFERENCE_SHAPES = {"type_identifier", "generic_type", "nested_type_identifier"}


def extract_declarations(parsed, path: str) -> SourceFile:
    """Collect the top-level declarations of one parsed file.

    Only declarations at module level (optionally wrapped in ``export``) are
    considered; classes nested in namespaces or functions are ignored.
    """
    source_bytes = parsed.source_bytes
    source = SourceFile(path=path)

    def collect(node, exported: bool) -> None:
        node_type = node.type

        if node_type == "export_statement":
            for child in node.children:
                collect(child, exported=True)
            return

        if node_type in CLASS_TYPES:
            decl = _class_decl(node, source_bytes, path)
            if decl is not None:
                source.classes.append(decl)
            return

        if node_type == "enum_declaration":
            name = _field_text(node, "name", source_bytes)
            if name is not None and name not in source.enums:
                source.enums[name] = EnumDecl(
                    name=name,
                    text=_declaration_text(node, exported, source_bytes),
                    exported=exported,
                    path=path,
                )
            return

        if node_type == "type_alias_declaration":
            name = _field_text(node, "name", source_bytes)
            if name is not None and name not in source.type_aliases:
                source.type_aliases[name] = TypeAliasDecl(
                    name=name,
                    text=_declaration_text(node, exported, source_bytes),
                    exported=exported,
                    path=path,
                )
            return

        if node_type == "interface_declaration":
            name = _field_text(node, "name", source_bytes)
            if name is not None:
                source.interfaces.add(name)
            return

        if node_type == "import_statement":
            item = _import_item(node, source_bytes)
            if item is not None:
                source.imports.append(item)

    for child in parsed.tree.root_node.children:
        collect(child, exported=False)

    return source


def _location(node) -> Location:
    line, column = node.start_point
    return Location(line=line + 1, column=column + 1)


def _node_text(node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8")


def _field_text(node, field: str, source_bytes: bytes) -> str | None:
    child = node.child_by_field_name(field)
    if child is None:
        return None
    return _node_text(child, source_bytes)


def _export_anchor(node):
    parent = node.parent
    if parent is not None and parent.type == "export_statement":
        return parent
    return node


def _declaration_text(node, exported: bool, source_bytes: bytes) -> str:
    if exported:
        return _node_text(_export_anchor(node), source_bytes)
    return _node_text(node, source_bytes)


def _jsdoc(node, source_bytes: bytes) -> str | None:
    """Return the JSDoc blocks attached to ``node``, in source order."""
    docs: list[str] = []

    sibling = node.prev_sibling
    while sibling is not None and sibling.type == "comment":
        text = _node_text(sibling, source_bytes)
        if text.startswith("/**"):
            docs.insert(0, text)
        sibling = sibling.prev_sibling

    # A comment placed between decorators and the declaration is parsed as
    # a child of the declaration itself.
    for child in node.children:
        if child.type == "comment":
            text = _node_text(child, source_bytes)
            if text.startswith("/**"):
                docs.append(text)

    if not docs:
        return None
    return "\n".join(docs)


def _class_decl(node, source_bytes: bytes, path: str) -> ClassDecl | None:
    name = _field_text(node, "name", source_bytes)
    if name is None:
        return None

    properties: list[PropertyDecl] = []
    body = node.child_by_field_name("body")
    if body is not None:
        for member in body.named_children:
            if member.type in FIELD_TYPES:
                prop = _property_decl(member, source_bytes)
                if prop is not None:
                    properties.append(prop)

    return ClassDecl(
        name=name,
        doc=_jsdoc(_export_anchor(node), source_bytes),
        properties=tuple(properties),
        extends_clause=_extends_clause(node),
        path=path,
        location=_location(node),
    )


def _extends_clause(node):
    for child in node.children:
        if child.type != "class_heritage":
            continue
        for clause in child.children:
            if clause.type == "extends_clause":
                return clause
    return None


def _property_decl(node, source_bytes: bytes) -> PropertyDecl | None:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return None

    type_node = None
    annotation = node.child_by_field_name("type")
    if annotation is not None:
        type_node = next(
            (child for child in annotation.named_children if child.type != "comment"),
            None,
        )

    reference_name = None
    member_reference = False
    if type_node is not None and type_node.type in TYPE_REFERENCE_SHAPES:
        if type_node.type == "nested_type_identifier":
            # `Status.Active` names an enum member; resolve the leftmost name.
            reference_name = _node_text(type_node, source_bytes).split(".", 1)[0].strip()
            member_reference = True
        elif type_node.type == "generic_type":
            base = type_node.child_by_field_name("name")
            if base is not None and base.type == "type_identifier":
                reference_name = _node_text(base, source_bytes)
        else:
            reference_name = _node_text(type_node, source_bytes)

    return PropertyDecl(
        name=_node_text(name_node, source_bytes),
        optional=any(child.type == "?" for child in node.children),
        type_text=_node_text(type_node, source_bytes) if type_node is not None else None,
        doc=_jsdoc(node, source_bytes),
        reference_name=reference_name,
        location=_location(name_node),
        member_reference=member_reference,
    )


def _string_value(node, source_bytes: bytes) -> str:
    for child in node.children:
        if child.type == "string_fragment":
            return _node_text(child, source_bytes)
    return _node_text(node, source_bytes).strip("'\"`")


def _import_item(node, source_bytes: bytes) -> ImportItem | None:
    source_node = node.child_by_field_name("source")
    if source_node is None:
        source_node = next((child for child in node.children if child.type == "string"), None)
    if source_node is None:
        return None

    names: list[ImportName] = []
    for clause in node.children:
        if clause.type != "import_clause":
            continue
        for named in clause.children:
            if named.type != "named_imports":
                continue
            for spec in named.named_children:
                if spec.type != "import_specifier":
                    continue
                name = _field_text(spec, "name", source_bytes)
                if name is None:
                    continue
                names.append(
                    ImportName(
                        name=name,
                        alias=_field_text(spec, "alias", source_bytes),
                    )
                )

    return ImportItem(
        module=_string_value(source_node, source_bytes),
        names=tuple(names),
        location=_location(node),
    )
