"""Run configuration for the type exporter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .file_walker import resolve_under


DEFAULT_TEMP_FILE = "types.temp"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class GeneratorConfig:
    patterns: tuple[str, ...]
    out_dir: str | None
    out_file: str | None
    namespace: str | None
    cwd: Path
    temp_file: str = DEFAULT_TEMP_FILE
    meta_file: str | None = None
    format_output: bool = True
    verbose: bool = False

    def validate(self) -> None:
        if not self.patterns:
            raise ConfigError("Please provide --pattern for source files")
        if not self.out_dir:
            raise ConfigError("Please provide --outDir for output directory")
        if not self.out_file:
            raise ConfigError("Please provide --outFile for output filename")
        if not self.namespace:
            raise ConfigError("Please provide --namespace for exported namespace")

    @property
    def output_directory(self) -> Path:
        return resolve_under(self.cwd, self.out_dir or "")

    @property
    def output_path(self) -> Path:
        return self.output_directory / (self.out_file or "")

    @property
    def temp_path(self) -> Path:
        return self.output_directory / self.temp_file

    @property
    def meta_path(self) -> Path | None:
        if not self.meta_file:
            return None
        return self.output_directory / self.meta_file
