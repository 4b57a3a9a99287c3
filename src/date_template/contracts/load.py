"""Load and validate date-format recipes.

A recipe is a YAML or JSON document listing builder steps and, optionally,
rendering options::

    schema_version: date_format_recipe_v1
    steps:
      - year: full
      - month: short
      - day: two_digits
    render:
      time_zone: Europe/Rome
      locale: it_IT

Usage::

    from date_template.contracts.load import load_recipe, validate_instance

    recipe = load_recipe(Path("formats/daily.yaml"))
    recipe.format.template        # "yyyy-MM-dd"
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from date_template.core.config import RenderOptions
from date_template.model.date_format import DateFormat
from date_template.model.steps import apply_steps

logger = logging.getLogger(__name__)

SCHEMA_DIR = "data/schemas"
RECIPE_SCHEMA = "date_format_recipe.schema.json"
RECIPE_SCHEMA_VERSION = "date_format_recipe_v1"

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


class RecipeError(ValueError):
    """Raised when a recipe file cannot be read or parsed."""


@dataclass(frozen=True)
class Recipe:
    """A validated recipe: the built format plus its rendering options."""

    format: DateFormat
    options: RenderOptions = field(default_factory=RenderOptions)
    description: str = ""
    source: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "format": self.format.to_dict(),
            "options": self.options.to_dict(),
        }
        if self.description:
            d["description"] = self.description
        if self.source is not None:
            d["source"] = self.source.as_posix()
        return d


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/date_template/data/schemas/`` relative to this file
    2. pip-installed package data via importlib.resources
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(resources.files("date_template") / SCHEMA_DIR / name) as p:
        return p


def load_schema(name: str = RECIPE_SCHEMA) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    path = _schema_path(name)
    return json.loads(path.read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str = RECIPE_SCHEMA) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)


def read_document(path: Path) -> Any:
    """Parse a YAML or JSON file, chosen by suffix."""
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RecipeError(f"{path}: cannot read recipe: {exc}") from exc

    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        if suffix in JSON_SUFFIXES:
            return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise RecipeError(f"{path}: cannot parse recipe: {exc}") from exc

    raise RecipeError(
        f"{path}: unsupported recipe type {suffix!r} "
        f"(expected one of {', '.join(YAML_SUFFIXES + JSON_SUFFIXES)})"
    )


def recipe_from_dict(data: Any, *, source: Path | None = None) -> Recipe:
    """Validate a parsed document and build the ``Recipe`` it describes."""
    validate_instance(data, RECIPE_SCHEMA)

    fmt = apply_steps(data["steps"])
    render_cfg = data.get("render") or {}
    options = RenderOptions(
        time_zone=render_cfg.get("time_zone"),
        locale=render_cfg.get("locale"),
        calendar=render_cfg.get("calendar"),
        localized=render_cfg.get("localized"),
    )
    logger.debug("recipe %s -> %r", source or "<dict>", fmt.template)
    return Recipe(
        format=fmt,
        options=options,
        description=data.get("description", ""),
        source=source,
    )


def load_recipe(path: Path | str) -> Recipe:
    """Read, validate and build the recipe stored at *path*."""
    path = Path(path)
    return recipe_from_dict(read_document(path), source=path)


def validate_file(path: Path | str) -> None:
    """Validate the recipe at *path* without building it."""
    path = Path(path)
    validate_instance(read_document(path), RECIPE_SCHEMA)
