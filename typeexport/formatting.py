"""Optional pretty-printing of generated TypeScript through prettier."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass


PRETTIER_EXECUTABLE = "prettier"


class FormatterError(RuntimeError):
    def __init__(self, returncode: int, stderr: str) -> None:
        super().__init__(f"prettier failed ({returncode}): {stderr.strip()}")
        self.returncode = returncode
        self.stderr = stderr


@dataclass(frozen=True)
class FormatOptions:
    semi: bool = True
    bracket_spacing: bool = True
    tab_width: int = 2
    parser: str = "typescript"
    single_quote: bool = True


def prettier_arguments(options: FormatOptions) -> list[str]:
    args = ["--parser", options.parser, "--tab-width", str(options.tab_width)]
    if not options.semi:
        args.append("--no-semi")
    if not options.bracket_spacing:
        args.append("--no-bracket-spacing")
    if options.single_quote:
        args.append("--single-quote")
    return args


def find_prettier() -> list[str] | None:
    executable = shutil.which(PRETTIER_EXECUTABLE)
    if executable is None:
        return None
    return [executable]


def format_typescript(
    text: str,
    options: FormatOptions | None = None,
    command: list[str] | None = None,
) -> str:
    """Pipe ``text`` through prettier; return it unchanged when none is installed."""
    options = options or FormatOptions()
    command = command or find_prettier()
    if command is None:
        return text

    result = subprocess.run(
        [*command, *prettier_arguments(options)],
        input=text,
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise FormatterError(result.returncode, result.stderr)
    return result.stdout
