"""Assemble generated declarations into the final output text."""

from __future__ import annotations

from typing import Iterable

from .models import FileOutput


def render_raw(global_text: str, fragments: Iterable[FileOutput]) -> str:
    """Global declarations followed by every file fragment, in order."""
    inner = "".join(f"{fragment.content}\n" for fragment in fragments)
    return f"{global_text}{inner}".rstrip("\n") + "\n"


def indent_block(text: str, indent: str) -> str:
    lines = []
    for line in text.splitlines():
        lines.append(f"{indent}{line}" if line.strip() else "")
    return "\n".join(lines)


def assemble(
    namespace: str,
    global_text: str,
    fragments: Iterable[FileOutput],
    tab_width: int = 2,
) -> str:
    body = indent_block(render_raw(global_text, fragments), " " * tab_width)
    return f"namespace {namespace} {{\n{body}\n}}\n"
