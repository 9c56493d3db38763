"""Command-line interface for htmlchars."""

from __future__ import annotations

import argparse
import io
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from htmlchars.classes import parse_code_point
from htmlchars.errors import ScanError
from htmlchars.scanner import ERROR_CODES

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    code_points: list[int]
    output_format: str
    ignore: list[str]
    strict: bool
    sanitize: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="htmlchars",
        description="Classify code points and scan text for HTML input-stream errors",
    )
    p.add_argument("input", nargs="?", help="Input file to scan ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-c",
        "--code-point",
        action="append",
        default=[],
        metavar="CP",
        help="Code point to classify: U+HEX, 0xHEX, decimal, EOF or a character (repeatable)",
    )
    p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Report format (default: text)",
    )
    p.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="CODE",
        help="Parse error code to suppress (repeatable)",
    )
    p.add_argument("--strict", action="store_true", help="Fail on the first finding")
    p.add_argument(
        "--sanitize",
        action="store_true",
        help="Write the input with NULs and surrogates replaced by U+FFFD",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover htmlchars.toml)",
    )
    return p


def parse_code_point_arg(s: str) -> int:
    """Parse a --code-point value, raising ArgumentTypeError when malformed."""
    try:
        return parse_code_point(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_ignore_arg(s: str) -> str:
    """Validate a parse error code name."""
    code = s.strip().lower()
    if code not in ERROR_CODES:
        known = ", ".join(sorted(ERROR_CODES))
        raise argparse.ArgumentTypeError(f"unknown error code {s!r} (expected one of: {known})")
    return code


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file.

    A missing auto-discovered file yields an empty dict; a missing explicit
    config_path raises ArgumentTypeError.
    """
    if config_path is not None and not config_path.is_file():
        raise argparse.ArgumentTypeError(f"config file not found: {config_path}")
    path = config_path if config_path is not None else search_dir / "htmlchars.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    search_dir = input_file.parent if input_file is not None else Path(".")
    if not search_dir.parts:
        search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)

    cfg_scan = config.get("scan")
    if not isinstance(cfg_scan, dict):
        cfg_scan = {}
    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}

    # Ignored codes: config + CLI
    ignore: list[str] = []
    cfg_ignore = cfg_scan.get("ignore")
    if cfg_ignore is not None:
        if not isinstance(cfg_ignore, list):
            raise argparse.ArgumentTypeError(
                f"invalid scan.ignore in config (expected a list): {cfg_ignore!r}"
            )
        for c in cfg_ignore:
            code = parse_ignore_arg(str(c))
            if code not in ignore:
                ignore.append(code)
    for raw in args.ignore:
        code = parse_ignore_arg(raw)
        if code not in ignore:
            ignore.append(code)

    # Strict: config < CLI (the flag can only switch it on)
    cfg_strict = cfg_scan.get("strict", False)
    if not isinstance(cfg_strict, bool):
        raise argparse.ArgumentTypeError(f"invalid scan.strict in config: {cfg_strict!r}")
    strict = cfg_strict or args.strict

    # Format: config < CLI
    output_format = "text"
    cfg_format = cfg_output.get("format")
    if cfg_format is not None:
        if cfg_format not in OUTPUT_FORMATS:
            raise argparse.ArgumentTypeError(f"invalid output format in config: {cfg_format!r}")
        output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    code_points = [parse_code_point_arg(raw) for raw in args.code_point]

    if input_file is None and not code_points:
        raise argparse.ArgumentTypeError("nothing to do: give an input file or --code-point")
    if args.sanitize and input_file is None:
        raise argparse.ArgumentTypeError("--sanitize needs an input file")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        code_points=code_points,
        output_format=output_format,
        ignore=ignore,
        strict=strict,
        sanitize=args.sanitize,
    )


def read_source(path: Path) -> str:
    """Read UTF-8 text; undecodable bytes come through as low surrogates."""
    if str(path) == "-":
        return sys.stdin.buffer.read().decode("utf-8", "surrogateescape")
    return path.read_bytes().decode("utf-8", "surrogateescape")


def display_name(path: Path | None) -> str:
    if path is None or str(path) == "-":
        return "<stdin>"
    return str(path)


def run(options: CliOptions) -> tuple[str, int]:
    """Build the output text for options. Returns (output, exit code)."""
    from htmlchars.dump import dump_findings, dump_table, findings_to_json, table_to_json
    from htmlchars.scanner import sanitize, scan

    findings = []
    if options.input_file is not None:
        source = read_source(options.input_file)
        if options.sanitize:
            return sanitize(source), 0
        findings = scan(source, ignore=options.ignore, strict=options.strict)

    filename = display_name(options.input_file)
    if options.output_format == "json":
        payload: dict[str, Any] = {}
        if options.code_points:
            payload["code_points"] = table_to_json(options.code_points)
        if options.input_file is not None:
            payload["file"] = filename
            payload["findings"] = findings_to_json(findings)
        output = json.dumps(payload, indent=2) + "\n"
    else:
        buf = io.StringIO()
        dump_table(options.code_points, file=buf)
        dump_findings(findings, filename, file=buf)
        output = buf.getvalue()

    return output, 1 if findings else 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output, exit_code = run(options)
    except ScanError as exc:
        print(exc.format(display_name(options.input_file)), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        try:
            options.output_file.write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    else:
        sys.stdout.write(output)

    return exit_code
