"""Resolve a class ``extends`` clause into ordered type terms."""

from __future__ import annotations

from typing import Iterable

from .models import TERM_PARTIAL, TERM_PLAIN, TERM_UNRECOGNIZED, ExtendTerm


PARTIAL_CALLEE = "partialtype"


def resolve_extends(clause) -> list[ExtendTerm]:
    """Walk the immediate children of an ``extends_clause`` node.

    ``PartialType(A, B)`` yields one partial term per argument and a plain
    identifier yields a plain term. Every other shape is kept as an
    unrecognized term so callers can see what was skipped.
    """
    if clause is None:
        return []

    terms: list[ExtendTerm] = []
    for node in clause.named_children:
        if node.type == "comment":
            continue

        if node.type == "identifier":
            terms.append(ExtendTerm(kind=TERM_PLAIN, name=_text(node)))
            continue

        if node.type == "call_expression":
            callee = node.child_by_field_name("function")
            arguments = node.child_by_field_name("arguments")
            if (
                callee is not None
                and arguments is not None
                and _text(callee).lower() == PARTIAL_CALLEE
            ):
                for arg in arguments.named_children:
                    if arg.type == "comment":
                        continue
                    terms.append(ExtendTerm(kind=TERM_PARTIAL, name=_text(arg)))
                continue

        terms.append(ExtendTerm(kind=TERM_UNRECOGNIZED, name=_text(node)))

    return terms


def recognized_terms(terms: Iterable[ExtendTerm]) -> list[ExtendTerm]:
    return [term for term in terms if term.kind != TERM_UNRECOGNIZED]


def term_to_type(term: ExtendTerm) -> str:
    if term.kind == TERM_PARTIAL:
        return f"Partial<{term.name}>"
    return term.name


def _text(node) -> str:
    return node.text.decode("utf-8").strip().rstrip(",").strip()
