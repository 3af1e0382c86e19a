"""Command-line interface for casekit."""

from __future__ import annotations

import argparse
import re
import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from casekit.errors import InvalidArgument, TemplateError

CONFIG_NAME = "casekit.toml"

_CONVERTERS = ("camel", "kebab", "snake", "capitalize", "lower", "trim")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    command: str
    text: str | None = None
    pattern: str | None = None
    candidates: list[str] = field(default_factory=list)
    flags: str | None = None
    input_file: Path | None = None
    output_file: Path | None = None
    values: dict[str, str] = field(default_factory=dict)
    null_value: str | None = None
    strict: bool = False
    debug: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="casekit",
        description="Word splitting, case conversion, wildcards and string templates",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump words or template segments to stderr")
    sub = p.add_subparsers(dest="command", required=True, metavar="COMMAND")

    sub.add_parser("words", help="Split text into words, one per line").add_argument("text")
    for name in _CONVERTERS:
        sub.add_parser(name, help=f"Convert text with {name}").add_argument("text")

    match = sub.add_parser("match", help="Test candidates against a wildcard pattern")
    match.add_argument("pattern", help="Wildcard, or /regex/flags")
    match.add_argument("candidates", nargs="+", metavar="CANDIDATE")
    match.add_argument("--flags", default=None, help="Pattern flags, e.g. 'i'")

    render = sub.add_parser("render", help="Render a template file")
    render.add_argument("input", help="Template file")
    render.add_argument("-o", "--output", help="Output file (default: stdout)")
    render.add_argument(
        "-v",
        "--value",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set placeholder value (repeatable)",
    )
    render.add_argument("--null", default=None, metavar="TEXT", help="Text for unresolved placeholders")
    render.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on malformed placeholders and keys without a value",
    )
    return p


def parse_value_arg(s: str) -> tuple[str, str]:
    """Parse a NAME=VALUE string into (name, value)."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"invalid value format (expected NAME=VALUE): {s}")
    name, _, value = s.partition("=")
    return name, value


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, base_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir if base_dir is not None else Path("."))

    cfg_template = config.get("template")
    if not isinstance(cfg_template, dict):
        cfg_template = {}
    cfg_wildcard = config.get("wildcard")
    if not isinstance(cfg_wildcard, dict):
        cfg_wildcard = {}

    command = args.command

    if command == "match":
        flags = args.flags
        if flags is None and isinstance(cfg_wildcard.get("flags"), str):
            flags = cfg_wildcard["flags"]
        return CliOptions(
            command=command,
            pattern=args.pattern,
            candidates=list(args.candidates),
            flags=flags,
            debug=args.debug,
        )

    if command == "render":
        # Placeholder values: config < CLI
        values: dict[str, str] = {}
        cfg_values = cfg_template.get("values")
        if isinstance(cfg_values, dict):
            for k, v in cfg_values.items():
                values[str(k)] = str(v)
        for raw in args.value:
            name, value = parse_value_arg(raw)
            values[name] = value

        null_value = args.null
        if null_value is None and "null" in cfg_template:
            null_value = str(cfg_template["null"])

        strict = args.strict
        if strict is None:
            strict = bool(cfg_template.get("strict", False))

        return CliOptions(
            command=command,
            input_file=Path(args.input),
            output_file=Path(args.output) if args.output else None,
            values=values,
            null_value=null_value,
            strict=strict,
            debug=args.debug,
        )

    return CliOptions(command=command, text=args.text, debug=args.debug)


def convert(options: CliOptions) -> str:
    """Run a words or case-conversion command and return its output."""
    from casekit.casing import camel_case, capitalize, kebab_case, lower_case, snake_case, trim
    from casekit.debug import dump_words
    from casekit.words import words

    text = options.text or ""
    if options.debug:
        dump_words(text, file=sys.stderr)

    if options.command == "words":
        return "\n".join(words(text))
    converters = {
        "camel": camel_case,
        "kebab": kebab_case,
        "snake": snake_case,
        "capitalize": capitalize,
        "lower": lower_case,
        "trim": trim,
    }
    return converters[options.command](text)


def match_candidates(options: CliOptions) -> tuple[str, bool]:
    """Test every candidate; return the report and whether all matched."""
    from casekit.wildcard import wildcard_to_regexp

    matcher = wildcard_to_regexp(options.pattern or "", options.flags)
    if options.debug:
        print(f"Pattern {matcher.pattern!r} flags={matcher.flags:#x}", file=sys.stderr)

    lines: list[str] = []
    all_matched = True
    for candidate in options.candidates:
        matched = matcher.search(candidate) is not None
        all_matched = all_matched and matched
        lines.append(f"{'match' if matched else 'no match'}: {candidate}")
    return "\n".join(lines), all_matched


def render_file(options: CliOptions) -> str:
    """Read, check, compile, and render a template file."""
    from casekit.debug import dump_program
    from casekit.template import CompiledTemplate, parse_template, template_object, validate_template

    if options.input_file is None:
        raise InvalidArgument("render needs a template file")
    source = options.input_file.read_text(encoding="utf-8")

    if options.strict:
        known = options.values.keys() if options.null_value is None else None
        program = validate_template(source, known_keys=known)
    else:
        program = parse_template(source)

    if options.debug:
        dump_program(program, file=sys.stderr)

    return CompiledTemplate(program).render(template_object(options.values, options.null_value))


def _emit(text: str, output_file: Path | None = None) -> None:
    if output_file:
        output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


def _line(text: str) -> str:
    return f"{text}\n" if text else ""


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        if options.command == "match":
            report, all_matched = match_candidates(options)
            _emit(_line(report))
            return 0 if all_matched else 1
        if options.command == "render":
            _emit(render_file(options), options.output_file)
            return 0
        _emit(_line(convert(options)))
    except TemplateError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except re.error as exc:
        print(f"error: invalid pattern: {exc}", file=sys.stderr)
        return 1
    except (InvalidArgument, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0
