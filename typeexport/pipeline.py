"""End-to-end pipeline: DTO classes in, one namespaced type file out."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .assemble import assemble, render_raw
from .config import GeneratorConfig
from .file_walker import iter_typescript_files
from .formatting import FormatOptions, format_typescript
from .graph import build_type_graph
from .models import FileOutput
from .parser import TypeScriptParser
from .project import Project
from .storage import save_graph, write_text
from .transform import TypeExporter


BLUE = "\u001b[34m"
GREEN = "\u001b[32m"
RED = "\u001b[31m"
YELLOW = "\u001b[33m"
RESET = "\u001b[0m"


def run(config: GeneratorConfig) -> TypeExporter:
    config.validate()

    files = iter_typescript_files(config.patterns, config.cwd)
    project = Project(TypeScriptParser())
    project.add_source_files(files)

    output_directory = config.output_directory
    output_directory.mkdir(parents=True, exist_ok=True)

    options = FormatOptions()
    exporter = TypeExporter(project)
    outputs: list[FileOutput] = []

    # Artifacts are rewritten after every file so a failure leaves the
    # output of the files processed so far.
    for source in project.source_files:
        if config.verbose:
            print(f"Processing {source.path}")
        outputs.append(exporter.export_file(source))

        global_text = exporter.accumulator.render()
        write_text(config.temp_path, render_raw(global_text, outputs))

        final = assemble(config.namespace, global_text, outputs, tab_width=options.tab_width)
        if config.format_output:
            final = format_typescript(final, options)
        write_text(config.output_path, final)

    if config.meta_path is not None:
        graph = build_type_graph(
            project.source_files, exporter.class_types, exporter.references
        )
        save_graph(graph, config.meta_path)

    print(f"{BLUE}Total files scanned: {len(files)}{RESET}")
    print(
        f"{GREEN}Types have been generated successfully! "
        f"({_display_path(config.output_path, config.cwd)}){RESET}"
    )
    return exporter


def _display_path(path: Path, cwd: Path) -> str:
    try:
        return f"./{path.relative_to(cwd)}"
    except ValueError:
        return str(path)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export TypeScript DTO classes as structural types in one namespace"
    )
    parser.add_argument(
        "-p",
        "--pattern",
        dest="patterns",
        action="extend",
        nargs="+",
        default=[],
        help="Glob pattern(s) for source files, relative to the working directory",
    )
    parser.add_argument("-o", "--out-dir", "--outDir", dest="out_dir", help="Output directory")
    parser.add_argument("-f", "--out-file", "--outFile", dest="out_file", help="Output file name")
    parser.add_argument("-n", "--namespace", help="Name of the exported namespace")
    parser.add_argument(
        "--meta",
        default=None,
        help="Also write a JSON graph of generated types to this file in the output directory",
    )
    parser.add_argument(
        "--no-format",
        dest="format_output",
        action="store_false",
        help="Skip running prettier on the generated file",
    )
    parser.add_argument("--verbose", action="store_true", help="Print each processed file")
    return parser


def config_from_args(args: argparse.Namespace, cwd: Path | None = None) -> GeneratorConfig:
    return GeneratorConfig(
        patterns=tuple(args.patterns or ()),
        out_dir=args.out_dir,
        out_file=args.out_file,
        namespace=args.namespace,
        cwd=cwd or Path.cwd(),
        meta_file=args.meta,
        format_output=args.format_output,
        verbose=args.verbose,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        run(config_from_args(args))
    except Exception as exc:
        print(f"{RED}There was an error while generating types{RESET}", file=sys.stderr)
        print(f"{YELLOW}{exc}{RESET}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
