"""NetworkX graph of generated types and the declarations they depend on."""

from __future__ import annotations

from typing import Iterable

import networkx as nx

from .heritage import resolve_extends
from .models import KIND_ENUM, TERM_PARTIAL, TERM_UNRECOGNIZED, ResolvedSymbol, SourceFile


NODE_TYPE = "Type"
NODE_ENUM = "Enum"
NODE_TYPE_ALIAS = "TypeAlias"

EDGE_EXTENDS = "EXTENDS"
EDGE_REFERENCES = "REFERENCES"


def type_node_id(name: str) -> str:
    return f"type:{name}"


def symbol_node_id(symbol: ResolvedSymbol) -> str:
    prefix = "enum" if symbol.kind == KIND_ENUM else "alias"
    return f"{prefix}:{symbol.origin}:{symbol.name}"


def build_type_graph(
    sources: Iterable[SourceFile],
    class_types: dict[str, str],
    references: dict[str, list[ResolvedSymbol]],
) -> nx.DiGraph:
    graph = nx.DiGraph()
    sources = list(sources)

    for source in sources:
        for decl in source.classes:
            _ensure_node(
                graph,
                type_node_id(decl.name),
                type=NODE_TYPE,
                name=decl.name,
                path=source.path,
                declaration=class_types.get(decl.name),
            )

    for source in sources:
        for decl in source.classes:
            class_id = type_node_id(decl.name)
            for term in resolve_extends(decl.extends_clause):
                if term.kind == TERM_UNRECOGNIZED:
                    continue
                base_id = type_node_id(term.name)
                _ensure_node(
                    graph,
                    base_id,
                    type=NODE_TYPE,
                    name=term.name,
                    path=None,
                    declaration=None,
                    external=True,
                )
                graph.add_edge(
                    class_id, base_id, type=EDGE_EXTENDS, partial=term.kind == TERM_PARTIAL
                )

            for symbol in references.get(decl.name, []):
                symbol_id = symbol_node_id(symbol)
                _ensure_node(
                    graph,
                    symbol_id,
                    type=NODE_ENUM if symbol.kind == KIND_ENUM else NODE_TYPE_ALIAS,
                    name=symbol.name,
                    path=symbol.origin,
                    declaration=symbol.declaration,
                )
                graph.add_edge(class_id, symbol_id, type=EDGE_REFERENCES)

    return graph


def _ensure_node(graph: nx.DiGraph, node_id: str, **attrs) -> None:
    if node_id not in graph:
        graph.add_node(node_id, **attrs)
