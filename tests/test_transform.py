from __future__ import annotations

import pytest

from typeexport.accumulator import GlobalAccumulator
from typeexport.locator import MissingImportError
from typeexport.project import Project
from typeexport.transform import TypeExporter


DTOS = """
import { Meta } from './meta';

enum Status {
  Open = 'open',
}

/** Carries nothing */
export class EmptyDto {}

export class CombinedDto extends First, Second {}

/**
 * Update payload.
 */
export class UpdateDto extends PartialType(CreateDto) {
  extra: number;
}

export class TaskDto {
  /** The id */
  id: string;
  /**
   * Optional label.
   */
  label?: string;
  status: Status;
  meta?: Meta;
  createdAt: Date;
  owner: EmptyDto;
}

export class OtherTaskDto {
  status: Status;
}
"""

META = """
export type Meta = { source: string };
"""


def _exporter() -> tuple[Project, TypeExporter]:
    project = Project()
    project.add_source_text("/virtual/src/meta.ts", META)
    project.add_source_text("/virtual/src/task.dto.ts", DTOS)
    return project, TypeExporter(project)


def test_class_without_properties_or_bases_is_a_record():
    project, exporter = _exporter()
    exporter.export_file(project.get_source_file("/virtual/src/task.dto.ts"))

    assert exporter.class_types["EmptyDto"] == (
        "/** Carries nothing */\n"
        "export type EmptyDto = Record<string, any>;"
    )


def test_plain_bases_are_intersected_without_block():
    project, exporter = _exporter()
    exporter.export_file(project.get_source_file("/virtual/src/task.dto.ts"))

    assert exporter.class_types["CombinedDto"] == "export type CombinedDto = First & Second;"


def test_partial_base_is_wrapped_and_intersected_with_fields():
    project, exporter = _exporter()
    exporter.export_file(project.get_source_file("/virtual/src/task.dto.ts"))

    assert exporter.class_types["UpdateDto"] == (
        "/**\n"
        " * Update payload.\n"
        " */\n"
        "export type UpdateDto = Partial<CreateDto> & {\n"
        "  extra: number;\n"
        "};"
    )


def test_properties_keep_order_optional_markers_and_docs():
    project, exporter = _exporter()
    exporter.export_file(project.get_source_file("/virtual/src/task.dto.ts"))

    assert exporter.class_types["TaskDto"] == (
        "export type TaskDto = {\n"
        "  /** The id */\n"
        "  id: string;\n"
        "  /**\n"
        "   * Optional label.\n"
        "   */\n"
        "  label?: string;\n"
        "  status: Status;\n"
        "  meta?: Meta;\n"
        "  createdAt: Date;\n"
        "  owner: EmptyDto;\n"
        "};"
    )


def test_referenced_enums_and_aliases_are_accumulated_once():
    project, exporter = _exporter()
    output = exporter.export_file(project.get_source_file("/virtual/src/task.dto.ts"))

    assert output.filename == "task.dto.ts"
    assert output.class_names == (
        "EmptyDto",
        "CombinedDto",
        "UpdateDto",
        "TaskDto",
        "OtherTaskDto",
    )
    assert [symbol.name for symbol in exporter.accumulator.symbols] == ["Status", "Meta"]
    assert exporter.accumulator.render() == (
        "export enum Status {\n  Open = 'open',\n}\n\n"
        "// meta.ts\nexport type Meta = { source: string };\n\n"
    )
    assert [symbol.name for symbol in exporter.references["TaskDto"]] == ["Status", "Meta"]
    assert [symbol.name for symbol in exporter.references["OtherTaskDto"]] == ["Status"]


def test_missing_import_aborts_the_file():
    project = Project()
    project.add_source_text(
        "/virtual/src/bar.dto.ts",
        "export class BarDto {\n  meta: Meta;\n}\n",
    )
    exporter = TypeExporter(project, GlobalAccumulator())

    with pytest.raises(MissingImportError, match="Meta"):
        exporter.export_file(project.get_source_file("/virtual/src/bar.dto.ts"))


ALIASED_DTO = """
import { Meta as M } from './meta';
import { Level } from './level';
import * as shapes from './shapes';

export class BarDto {
  meta: M;
  level: Level.High;
  outline: shapes.Outline;
}
"""

LEVEL = """
export enum Level {
  Low = 'low',
  High = 'high',
}
"""


def test_aliased_import_declares_the_local_name():
    project = Project()
    project.add_source_text("/virtual/src/meta.ts", META)
    project.add_source_text("/virtual/src/level.ts", LEVEL)
    source = project.add_source_text("/virtual/src/bar.dto.ts", ALIASED_DTO)
    exporter = TypeExporter(project)

    exporter.export_file(source)

    assert "  meta: M;" in exporter.class_types["BarDto"]
    rendered = exporter.accumulator.render()
    assert "// meta.ts\nexport type Meta = { source: string };\n\n" in rendered
    assert "export type M = Meta;\n\n" in rendered
    assert rendered.index("export type Meta") < rendered.index("export type M = Meta;")


def test_enum_member_reference_resolves_the_enum():
    project = Project()
    project.add_source_text("/virtual/src/meta.ts", META)
    project.add_source_text("/virtual/src/level.ts", LEVEL)
    source = project.add_source_text("/virtual/src/bar.dto.ts", ALIASED_DTO)
    exporter = TypeExporter(project)

    exporter.export_file(source)

    assert "  level: Level.High;" in exporter.class_types["BarDto"]
    assert "  outline: shapes.Outline;" in exporter.class_types["BarDto"]
    assert [symbol.name for symbol in exporter.accumulator.symbols] == ["Meta", "Level"]
    assert "// level.ts\nexport enum Level {" in exporter.accumulator.render()
