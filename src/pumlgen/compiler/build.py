# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""File and directory workflows for generating ``.puml`` diagrams.

Two modes are supported:

* **Single file**: one ``.cs`` file is converted into one ``.puml`` file,
  by default written next to the source.

* **Directory**: every ``.cs`` file under an input root is converted, the
  directory layout is mirrored under the output root, and an ``include.puml``
  is written that either ``!include``-s every generated file or, in
  all-in-one mode, inlines their bodies into a single diagram.

Each compilation unit is generated independently; a failure in one file is
recorded and the remaining files are still processed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from pumlgen.compiler.parser import parse
from pumlgen.diagram.emitter import DOCUMENT_CLOSE, DOCUMENT_OPEN, GeneratorOptions, generate

# ###############
# Public Interface
# ###############

PUML_SUFFIX = ".puml"
SOURCE_PATTERN = "*.cs"
EXCLUDE_FILE_NAME = ".pumlexclude"
INCLUDE_FILE_NAME = "include.puml"


class BuildError(Exception):
    """Raised when an input or output location cannot be used."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


@dataclass
class BuildResult:
    """Outcome of a directory run.

    Attributes:
        generated: Output files written, in processing order.
        skipped: Source files skipped because of an exclude path.
        failed: Source files that could not be processed, with the reason.
        include_file: Path of the written ``include.puml``.
    """

    generated: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)
    include_file: Path | None = None

    @property
    def has_failures(self) -> bool:
        """Return True if any source file could not be processed."""
        return len(self.failed) > 0


def default_output_path(input_file: Path) -> Path:
    """Return the ``.puml`` path written next to *input_file*."""
    return input_file.with_suffix(PUML_SUFFIX)


def generate_file(input_file: Path, output_file: Path | None, options: GeneratorOptions) -> Path:
    """Generate the diagram for a single source file.

    Args:
        input_file: The ``.cs`` file to convert.
        output_file: Destination path; defaults to :func:`default_output_path`.
        options: Generator settings.

    Returns:
        The path of the written ``.puml`` file.

    Raises:
        BuildError: If the input does not exist or cannot be read, the
            front end fails on it, or the output cannot be written.
    """
    if not input_file.is_file():
        raise BuildError(f'"{input_file}" does not exist.')
    target = output_file if output_file is not None else default_output_path(input_file)
    try:
        source = input_file.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(f"Cannot read '{input_file}': {exc}") from exc
    try:
        text = generate(parse(source), options)
    except Exception as exc:
        # Any front-end failure is reported against this file only.
        raise BuildError(f"Cannot generate diagram for '{input_file}': {exc}") from exc
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise BuildError(f"Cannot write '{target}': {exc}") from exc
    return target


def read_exclude_file(input_root: Path) -> list[str]:
    """Return the exclude paths listed in ``.pumlexclude`` under *input_root*.

    One path per line; blank lines are ignored and entries are stripped.
    A missing file yields an empty list.
    """
    exclude_file = input_root / EXCLUDE_FILE_NAME
    if not exclude_file.is_file():
        return []
    try:
        lines = exclude_file.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise BuildError(f"Cannot read exclude file '{exclude_file}': {exc}") from exc
    return [line.strip() for line in lines if line.strip()]


def is_excluded(source_file: Path, input_root: Path, exclude_paths: Iterable[str]) -> bool:
    """Return True if *source_file* lies under one of *exclude_paths*.

    Exclude paths are relative to *input_root* and compared as
    case-insensitive prefixes of the source file path.
    """
    candidate = source_file.as_posix().lower()
    for entry in exclude_paths:
        prefix = (input_root / entry.strip().strip("/\\")).as_posix().lower()
        if candidate.startswith(prefix):
            return True
    return False


def generate_directory(
    input_root: Path,
    output_root: Path | None,
    options: GeneratorOptions,
    *,
    exclude_paths: Iterable[str] = (),
    all_in_one: bool = False,
    on_progress: Callable[[str, Path], None] | None = None,
) -> BuildResult:
    """Generate diagrams for every ``.cs`` file under *input_root*.

    Args:
        input_root: Directory searched recursively for ``.cs`` files.
        output_root: Root of the mirrored output tree; defaults to *input_root*.
        options: Generator settings.
        exclude_paths: Paths relative to *input_root* to skip, in addition
            to those listed in the ``.pumlexclude`` file.
        all_in_one: Inline every diagram body into ``include.puml`` instead
            of writing ``!include`` directives.
        on_progress: Optional callback receiving ``("processing" | "skipped", path)``.

    Returns:
        A :class:`BuildResult` describing the run.

    Raises:
        BuildError: If *input_root* is not a directory or the output root
            cannot be created.
    """
    if not input_root.is_dir():
        raise BuildError(f'Directory "{input_root}" does not exist.')
    input_root = input_root.resolve()
    output_root = output_root.resolve() if output_root is not None else input_root
    try:
        output_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BuildError(f"Cannot create output directory '{output_root}': {exc}") from exc

    excludes = read_exclude_file(input_root) + [p.strip() for p in exclude_paths if p.strip()]
    result = BuildResult()
    include_lines = [DOCUMENT_OPEN]

    for source_file in sorted(input_root.rglob(SOURCE_PATTERN)):
        if is_excluded(source_file, input_root, excludes):
            result.skipped.append(source_file)
            if on_progress is not None:
                on_progress("skipped", source_file)
            continue
        if on_progress is not None:
            on_progress("processing", source_file)

        relative = source_file.relative_to(input_root)
        output_file = output_root / relative.with_suffix(PUML_SUFFIX)
        try:
            generate_file(source_file, output_file, options)
            if all_in_one:
                include_lines.extend(_diagram_body(output_file))
            else:
                include_lines.append(f"!include ./{relative.with_suffix(PUML_SUFFIX).as_posix()}")
        except BuildError as exc:
            result.failed.append((source_file, str(exc)))
            continue
        result.generated.append(output_file)

    include_lines.append(DOCUMENT_CLOSE)
    include_file = output_root / INCLUDE_FILE_NAME
    try:
        include_file.write_text("\n".join(include_lines) + "\n", encoding="utf-8")
    except OSError as exc:
        raise BuildError(f"Cannot write '{include_file}': {exc}") from exc
    result.include_file = include_file
    return result


# ################
# Implementation
# ################


def _diagram_body(puml_file: Path) -> list[str]:
    """Return the lines of a generated diagram without its document markers."""
    try:
        lines = puml_file.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise BuildError(f"Cannot read '{puml_file}': {exc}") from exc
    return lines[1:-1]
