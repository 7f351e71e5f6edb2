# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the puml-gen command-line interface."""

import argparse
import sys
from pathlib import Path

from pumlgen.compiler.build import BuildError, generate_directory, generate_file
from pumlgen.diagram.emitter import GeneratorOptions
from pumlgen.model.accessibility import AccessibilityError, Accessibilities, parse_accessibilities
from pumlgen.workspace.config import (
    GeneratorConfig,
    GeneratorConfigError,
    find_config_file,
    load_generator_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the puml-gen CLI."""
    parser = argparse.ArgumentParser(
        prog="puml-gen",
        description="Generate PlantUML class diagrams from C# source files.",
        allow_abbrev=False,
    )
    parser.add_argument("input", help="C# source file, or directory when --dir is given")
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output .puml file, or output directory with --dir (default: next to the input)",
    )
    parser.add_argument(
        "--dir",
        "-dir",
        action="store_true",
        help="Process every .cs file under the input directory",
    )
    visibility = parser.add_mutually_exclusive_group()
    visibility.add_argument(
        "--public",
        "-public",
        action="store_true",
        default=None,
        help="Only emit public declarations",
    )
    visibility.add_argument(
        "--ignore",
        "-ignore",
        metavar="LIST",
        default=None,
        help="Comma-separated accessibilities to omit (e.g. private,internal)",
    )
    parser.add_argument(
        "--exclude-paths",
        "-excludePaths",
        metavar="LIST",
        default=None,
        help="Comma-separated paths, relative to the input directory, to skip",
    )
    parser.add_argument(
        "--create-association",
        "-createAssociation",
        action="store_true",
        default=None,
        help="Draw associations for members that reference other declared types",
    )
    parser.add_argument(
        "--association-labels",
        action="store_true",
        default=None,
        help="Label association arrows with the member name",
    )
    parser.add_argument(
        "--all-in-one",
        "-allInOne",
        action="store_true",
        default=None,
        help="Inline every diagram into include.puml instead of !include lines",
    )
    parser.add_argument(
        "--no-cascade",
        dest="cascade_suppression",
        action="store_false",
        default=None,
        help="Keep nested types of a suppressed type, filtering each on its own",
    )
    parser.add_argument(
        "--namespace-packages",
        action="store_true",
        default=None,
        help="Wrap namespace contents in namespace blocks",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Number of spaces per nesting level (default: 4)",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="YAML configuration file (default: .pumlgen.yaml next to the input)",
    )

    args = parser.parse_args()
    sys.exit(_run(args))


# ################
# Implementation
# ################


def _run(args: argparse.Namespace) -> int:
    """Load configuration, then dispatch to file or directory mode."""
    input_path = Path(args.input)
    try:
        config = _load_config(args, input_path)
        options = _build_options(args, config)
    except (GeneratorConfigError, AccessibilityError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.dir:
        return _cmd_directory(args, input_path, options, config)
    return _cmd_file(args, input_path, options)


def _cmd_file(args: argparse.Namespace, input_path: Path, options: GeneratorOptions) -> int:
    """Handle single-file mode."""
    output = Path(args.output) if args.output else None
    try:
        written = generate_file(input_path, output, options)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f'Generated "{written}".')
    return 0


def _cmd_directory(
    args: argparse.Namespace,
    input_path: Path,
    options: GeneratorOptions,
    config: GeneratorConfig,
) -> int:
    """Handle directory mode."""
    exclude_paths = list(config.exclude_paths)
    if args.exclude_paths:
        exclude_paths += [p.strip() for p in args.exclude_paths.split(",") if p.strip()]
    all_in_one = args.all_in_one if args.all_in_one is not None else bool(config.all_in_one)

    try:
        result = generate_directory(
            input_path,
            Path(args.output) if args.output else None,
            options,
            exclude_paths=exclude_paths,
            all_in_one=all_in_one,
            on_progress=_report_progress,
        )
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result.has_failures:
        print("There were files that could not be processed:", file=sys.stderr)
        for path, reason in result.failed:
            print(f"  {path}: {reason}", file=sys.stderr)
        return 1

    print(f"Generated {len(result.generated)} diagram(s); index written to '{result.include_file}'.")
    return 0


def _report_progress(event: str, path: Path) -> None:
    if event == "skipped":
        print(f'Skipped "{path}"...')
    else:
        print(f'Processing "{path}"...')


def _load_config(args: argparse.Namespace, input_path: Path) -> GeneratorConfig:
    """Load the explicit --config file, or the one beside the input if present."""
    if args.config:
        return load_generator_config(Path(args.config))
    search_dir = input_path if args.dir else input_path.parent
    found = find_config_file(search_dir)
    return load_generator_config(found) if found is not None else GeneratorConfig()


def _build_options(args: argparse.Namespace, config: GeneratorConfig) -> GeneratorOptions:
    """Merge command-line flags over configuration file values over defaults."""
    defaults = GeneratorOptions()

    if args.public:
        ignore = Accessibilities.NON_PUBLIC
    elif args.ignore is not None:
        ignore = parse_accessibilities(args.ignore)
    elif config.public:
        ignore = Accessibilities.NON_PUBLIC
    elif config.ignore is not None:
        ignore = config.ignore
    else:
        ignore = defaults.ignore

    if args.indent is not None:
        if args.indent < 0:
            raise GeneratorConfigError("--indent must not be negative")
        indent = " " * args.indent
    else:
        indent = config.indent if config.indent is not None else defaults.indent

    return GeneratorOptions(
        indent=indent,
        ignore=ignore,
        create_association=_pick(args.create_association, config.create_association, defaults.create_association),
        association_labels=_pick(args.association_labels, config.association_labels, defaults.association_labels),
        cascade_suppression=_pick(
            args.cascade_suppression, config.cascade_suppression, defaults.cascade_suppression
        ),
        namespace_packages=_pick(args.namespace_packages, config.namespace_packages, defaults.namespace_packages),
    )


def _pick(flag: bool | None, configured: bool | None, default: bool) -> bool:
    """Return the first value that is set: flag, then configuration, then default."""
    if flag is not None:
        return flag
    if configured is not None:
        return configured
    return default


if __name__ == "__main__":
    main()
