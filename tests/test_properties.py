from __future__ import annotations

from dataclasses import replace

from typeexport.accumulator import GlobalAccumulator
from typeexport.locator import SymbolLocator
from typeexport.models import KIND_ENUM, KIND_TYPE_ALIAS
from typeexport.project import Project
from typeexport.properties import PropertyEmitter, format_doc


SHARED = """
export enum Color { Red, Blue }
export type Tags = string[];
"""

SAMPLE = """
import { Color, Tags } from './shared';
import { Date } from './calendar';

type Local = 'a' | 'b';

interface Shape {
  x: number;
}

export class Nested {}

export class ItemDto {
  color: Color;
  tags?: Tags;
  local: Local;
  shape: Shape;
  nested: Nested;
  when: Date;
  list: Array<Color>;
  total: number;
  /**
   * Free-form note.
   */
  note = '';
}
"""


def _setup():
    project = Project()
    project.add_source_text("/virtual/shared.ts", SHARED)
    source = project.add_source_text("/virtual/item.dto.ts", SAMPLE)
    accumulator = GlobalAccumulator()
    emitter = PropertyEmitter(SymbolLocator(project), accumulator)
    return source, emitter, accumulator


def test_classify_reference_kinds():
    source, emitter, _ = _setup()
    decl = source.get_class("ItemDto")
    kinds = {prop.name: emitter.classify(source, prop) for prop in decl.properties}

    assert kinds == {
        "color": KIND_ENUM,
        "tags": KIND_TYPE_ALIAS,
        "local": KIND_TYPE_ALIAS,
        "shape": None,
        "nested": None,
        "when": KIND_TYPE_ALIAS,
        "list": None,
        "total": None,
        "note": None,
    }


def test_emit_renders_one_line_per_property():
    source, emitter, _ = _setup()
    # "when" is imported from a file that is not loaded.
    fields = emitter.emit(source, _without(source.get_class("ItemDto"), "when"))

    assert fields == [
        "  color: Color;",
        "  tags?: Tags;",
        "  local: Local;",
        "  shape: Shape;",
        "  nested: Nested;",
        "  list: Array<Color>;",
        "  total: number;",
        "  /**\n   * Free-form note.\n   */\n  note: any;",
    ]


def test_emit_accumulates_resolved_symbols():
    source, emitter, accumulator = _setup()
    emitter.emit(source, _without(source.get_class("ItemDto"), "when"))

    assert [symbol.name for symbol in accumulator.symbols] == ["Color", "Tags", "Local"]
    assert [symbol.via_import for symbol in emitter.resolved] == [True, True, False]
    assert accumulator.symbols[2].text == "export type Local = 'a' | 'b';"


def test_format_doc_realigns_continuation_lines():
    doc = "/**\n       * Some text.\n       */"

    assert format_doc(doc, "  ") == ["  /**", "   * Some text.", "   */"]


def _without(decl, name):
    return replace(decl, properties=tuple(prop for prop in decl.properties if prop.name != name))


def test_format_doc_keeps_blank_lines():
    doc = "/**\n   * First.\n\n   * Second.\n   */"

    assert format_doc(doc, "  ") == ["  /**", "   * First.", "  ", "   * Second.", "   */"]
