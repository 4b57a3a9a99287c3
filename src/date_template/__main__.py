"""CLI entry-point for date_template.

Usage:
    python -m date_template build --year full --month short --day two_digits
    python -m date_template build --hours twentyfour --minutes two_digits --year short --at 2023-01-05T14:07:00Z
    python -m date_template render "yyyy-MM-dd'T'HH:mm" [--at ISO] [--tz ZONE] [--locale LOC] [--localized]
    python -m date_template recipe <recipe.yaml> [--at ISO] [--json]
    python -m date_template validate <recipe.yaml>
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

import jsonschema

from date_template import __version__
from date_template.api import load_recipe, render_recipe
from date_template.contracts.load import RecipeError, validate_file
from date_template.core.config import RenderOptions, settings
from date_template.model.steps import STYLED_OPS, Step, StepError, apply_steps
from date_template.render import render_with_options
from date_template.utils.exit_codes import ExitCode
from date_template.utils.json_norm import stable_json_dumps

logger = logging.getLogger("date_template.cli")


# ── argument helpers ────────────────────────────────────────────────


class _StepAction(argparse.Action):
    """Record a builder step, keeping command-line order."""

    def __init__(self, option_strings, dest, op: str, const: Any = None, **kwargs):
        self.op = op
        super().__init__(option_strings, dest, const=const, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        steps = list(getattr(namespace, self.dest, None) or [])
        value = self.const if self.nargs == 0 else values
        steps.append(Step(self.op, value))
        setattr(namespace, self.dest, steps)


def _choices(kind: type[Enum]) -> list[str]:
    return [m.value for m in kind]


def _parse_instant(text: str) -> datetime:
    """Parse ISO 8601; a trailing ``Z`` means UTC."""
    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 datetime: {text!r}") from None


def _add_render_options(p: argparse.ArgumentParser) -> None:
    g = p.add_argument_group("rendering")
    g.add_argument(
        "--at",
        type=_parse_instant,
        default=None,
        help="Instant to render (ISO 8601). Naive values are UTC.",
    )
    g.add_argument("--tz", dest="time_zone", default=None, help="Time zone (IANA name, UTC, local, +HH:MM).")
    g.add_argument("--locale", default=None, help="Locale identifier, e.g. it_IT.")
    g.add_argument("--calendar", default=None, help="Calendar (gregorian).")
    g.add_argument(
        "--localized",
        action="store_true",
        default=None,
        help="Let the locale choose separators and field order.",
    )


def _add_json_flag(p: argparse.ArgumentParser) -> None:
    p.add_argument("--json", action="store_true", default=False, help="Emit JSON.")


def _options_from_args(args: argparse.Namespace) -> RenderOptions:
    return RenderOptions(
        time_zone=args.time_zone,
        locale=args.locale,
        calendar=args.calendar,
        localized=args.localized,
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="date-template",
        description="Compose LDML date/time templates and render them.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    sub = p.add_subparsers(dest="command")

    # build
    build_p = sub.add_parser(
        "build",
        help="Build a template from field flags (applied in the order given).",
    )
    for op, kind in STYLED_OPS.items():
        build_p.add_argument(
            "--" + op.replace("_", "-"),
            dest="steps",
            action=_StepAction,
            op=op,
            choices=_choices(kind),
            metavar="{" + ",".join(_choices(kind)) + "}",
        )
    build_p.add_argument(
        "--fractional-seconds",
        dest="steps",
        action=_StepAction,
        op="fractional_seconds",
        type=int,
        metavar="N",
    )
    for flag, op, const, help_text in (
        ("--time", "time", False, "Hours and minutes."),
        ("--time-with-fraction", "time", True, "Hours, minutes and fractional seconds."),
        ("--time-zone", "time_zone", None, "Time zone abbreviation (z)."),
        ("--time-zone-name", "time_zone_name", None, "Time zone name (zzzz)."),
        ("--period", "period", None, "AM/PM marker (a)."),
    ):
        build_p.add_argument(
            flag, dest="steps", action=_StepAction, op=op, const=const, nargs=0, help=help_text
        )
    build_p.set_defaults(steps=None)
    _add_render_options(build_p)
    _add_json_flag(build_p)

    # render
    render_p = sub.add_parser("render", help="Render an existing template.")
    render_p.add_argument("template", help="LDML pattern, e.g. \"yyyy-MM-dd HH:mm\".")
    _add_render_options(render_p)
    _add_json_flag(render_p)

    # recipe
    recipe_p = sub.add_parser("recipe", help="Build and render a YAML/JSON recipe.")
    recipe_p.add_argument("path", help="Recipe file (.yaml, .yml or .json).")
    recipe_p.add_argument("--at", type=_parse_instant, default=None, help="Instant to render (ISO 8601).")
    _add_json_flag(recipe_p)

    # validate
    val_p = sub.add_parser("validate", help="Validate a recipe against the recipe schema.")
    val_p.add_argument("path", help="Recipe file (.yaml, .yml or .json).")

    p.set_defaults(command=None)
    return p


# ── output ──────────────────────────────────────────────────────────


def _emit(result: dict[str, Any], *, as_json: bool) -> None:
    if as_json:
        sys.stdout.write(stable_json_dumps(result))
        return
    print(result["template"])
    if "rendered" in result:
        print(result["rendered"])


def _render_into(result: dict[str, Any], instant: datetime, template: Any, options: RenderOptions) -> int:
    """Add rendering fields to *result*; ERROR when the renderer fell back."""
    resolved = options.resolved()
    rendered = render_with_options(instant, template, resolved)
    result["rendered"] = rendered
    result["instant"] = instant.isoformat()
    result["options"] = resolved.to_dict()
    if result["template"] and not rendered:
        print(f"error: could not render {result['template']!r} (see log)", file=sys.stderr)
        return ExitCode.ERROR
    return ExitCode.SUCCESS


# ── command handlers ────────────────────────────────────────────────


def _handle_build(args: argparse.Namespace) -> int:
    try:
        fmt = apply_steps(args.steps or [])
    except StepError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    result: dict[str, Any] = fmt.to_dict()
    code = ExitCode.SUCCESS
    if args.at is not None:
        code = _render_into(result, args.at, fmt, _options_from_args(args))
    _emit(result, as_json=args.json)
    return code


def _handle_render(args: argparse.Namespace) -> int:
    instant = args.at if args.at is not None else datetime.now(timezone.utc)
    result: dict[str, Any] = {"template": args.template}
    code = _render_into(result, instant, args.template, _options_from_args(args))
    _emit(result, as_json=args.json)
    return code


def _handle_recipe(args: argparse.Namespace) -> int:
    try:
        recipe = load_recipe(Path(args.path))
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (RecipeError, StepError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    result = render_recipe(recipe, args.at)
    _emit(result, as_json=args.json)
    if result["template"] and not result["rendered"]:
        print(f"error: could not render {result['template']!r} (see log)", file=sys.stderr)
        return ExitCode.ERROR
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    # Exit code contract:
    #   1 = schema violation
    #   2 = unreadable / unparsable file
    try:
        validate_file(Path(args.path))
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except RecipeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def _log_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(settings.LOG_LEVEL.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {settings.LOG_LEVEL!r} (DATE_TEMPLATE_LOG_LEVEL)")
    return level


_HANDLERS = {
    "build": _handle_build,
    "render": _handle_render,
    "recipe": _handle_recipe,
    "validate": _handle_validate,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an ``ExitCode``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        level = _log_level(args.verbose)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    logger.debug("command=%s", args.command)
    return int(handler(args))


if __name__ == "__main__":
    raise SystemExit(main())
