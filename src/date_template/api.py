"""
date_template.api
=================

Programmatic entrypoints for building and rendering date templates.

Goals:
  - No argparse / CLI dependencies
  - JSON-friendly outputs that match what the CLI prints with ``--json``

Usage::

    from date_template.api import build_format, render, load_recipe, render_recipe

    fmt = build_format([{"year": "full"}, {"month": "short"}, {"day": None}])
    render(datetime.now(timezone.utc), fmt, time_zone="Europe/Rome")

    result = render_recipe(load_recipe("formats/daily.yaml"))
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping

from date_template.contracts.load import Recipe, load_recipe as _load_recipe
from date_template.model.date_format import DateFormat
from date_template.model.steps import Step, apply_steps
from date_template.render import render, render_with_options


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


# ── build_format ────────────────────────────────────────────────────


def build_format(
    steps: Iterable[Step | Mapping[str, Any]],
    *,
    base: DateFormat | None = None,
) -> DateFormat:
    """Replay builder *steps* and return the resulting ``DateFormat``.

    Parameters
    ----------
    steps:
        ``Step`` objects or single-key mappings such as ``{"year": "full"}``.
    base:
        Format to extend; an empty ``DateFormat`` when omitted.

    Raises
    ------
    StepError
        On an unknown step name or style identifier.
    """
    return apply_steps(steps, base=base)


# ── recipes ─────────────────────────────────────────────────────────


def load_recipe(path: str | Path) -> Recipe:
    """Load and validate a YAML/JSON recipe file.

    Raises
    ------
    RecipeError
        If the file cannot be read or parsed.
    jsonschema.ValidationError
        If the document does not match the recipe schema.
    """
    return _load_recipe(_to_path(path))


def render_recipe(
    recipe: Recipe,
    instant: datetime | None = None,
) -> dict[str, Any]:
    """Render *instant* (now, UTC, by default) with a loaded recipe.

    Returns
    -------
    ``{"template", "rendered", "instant", "options", "recipe"}``
        ``rendered`` is the empty string when rendering failed; ``options``
        are the resolved ones, ``recipe`` the recipe as loaded.
    """
    when = instant if instant is not None else datetime.now(timezone.utc)
    options = recipe.options.resolved()
    return {
        "template": recipe.format.template,
        "rendered": render_with_options(when, recipe.format, options),
        "instant": when.isoformat(),
        "options": options.to_dict(),
        "recipe": recipe.to_dict(),
    }


__all__ = [
    "build_format",
    "load_recipe",
    "render",
    "render_recipe",
    "render_with_options",
]
