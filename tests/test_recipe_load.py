"""Tests for recipe loading and schema validation."""

import json
from pathlib import Path

import jsonschema
import pytest

from date_template.contracts.load import (
    RECIPE_SCHEMA,
    Recipe,
    RecipeError,
    load_recipe,
    load_schema,
    recipe_from_dict,
    validate_file,
    validate_instance,
)
from date_template.core.config import RenderOptions

DAILY_YAML = """\
schema_version: date_format_recipe_v1
description: Day stamp for log files
steps:
  - year: full
  - month: short
  - day: two_digits
  - date_separator: slash
render:
  time_zone: Europe/Rome
  locale: it_IT
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


class TestLoadRecipe:
    """Valid recipes build the described DateFormat."""

    def test_yaml_recipe(self, tmp_path):
        path = _write(tmp_path, "daily.yaml", DAILY_YAML)
        recipe = load_recipe(path)
        assert isinstance(recipe, Recipe)
        assert recipe.format.template == "yyyy/MM/dd"
        assert recipe.options == RenderOptions(time_zone="Europe/Rome", locale="it_IT")
        assert recipe.description == "Day stamp for log files"
        assert recipe.source == path

    def test_json_recipe(self, tmp_path):
        doc = {
            "steps": [
                {"hours": "twentyfour"},
                {"minutes": "two_digits"},
                {"year": "short"},
            ]
        }
        path = _write(tmp_path, "clock.json", json.dumps(doc))
        assert load_recipe(path).format.template == "HH:mm, yy"

    def test_bare_steps_in_yaml(self, tmp_path):
        text = "steps:\n  - hours: twelve\n  - minutes:\n  - period:\n  - time_zone: true\n"
        path = _write(tmp_path, "clock.yml", text)
        assert load_recipe(path).format.template == "hh:mm a:z"

    def test_accepts_str_path(self, tmp_path):
        path = _write(tmp_path, "daily.yaml", DAILY_YAML)
        assert load_recipe(str(path)).format.template == "yyyy/MM/dd"

    def test_options_default_to_unset(self):
        recipe = recipe_from_dict({"steps": [{"year": "full"}]})
        assert recipe.options == RenderOptions()
        assert recipe.source is None

    def test_to_dict(self, tmp_path):
        path = _write(tmp_path, "daily.yaml", DAILY_YAML)
        d = load_recipe(path).to_dict()
        assert d["format"]["template"] == "yyyy/MM/dd"
        assert d["options"]["locale"] == "it_IT"
        assert d["source"].endswith("daily.yaml")


class TestSchemaViolations:
    """Documents that break the schema raise ValidationError."""

    @pytest.mark.parametrize(
        "doc",
        [
            {},
            {"steps": [{"year": "long"}]},
            {"steps": [{"century": "full"}]},
            {"steps": [{"year": "full", "month": "short"}]},
            {"steps": [{"date_separator": None}]},
            {"steps": [{"fractional_seconds": "3"}]},
            {"steps": [], "render": {"localized": "yes"}},
            {"steps": [], "schema_version": "v0"},
            {"steps": [], "extra": 1},
        ],
    )
    def test_invalid(self, doc):
        with pytest.raises(jsonschema.ValidationError):
            recipe_from_dict(doc)

    def test_validate_instance_ok(self):
        validate_instance({"steps": [{"time": True}]})

    def test_schema_is_bundled(self):
        schema = load_schema(RECIPE_SCHEMA)
        assert schema["title"] == "Date format recipe"


class TestRecipeErrors:
    """Unreadable or unparsable files raise RecipeError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecipeError):
            load_recipe(tmp_path / "nope.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = _write(tmp_path, "daily.toml", "steps = []")
        with pytest.raises(RecipeError, match="unsupported"):
            load_recipe(path)

    def test_bad_yaml(self, tmp_path):
        path = _write(tmp_path, "bad.yaml", "steps: [year: full\n")
        with pytest.raises(RecipeError):
            load_recipe(path)

    def test_bad_json(self, tmp_path):
        path = _write(tmp_path, "bad.json", "{steps: }")
        with pytest.raises(RecipeError):
            load_recipe(path)


def test_validate_file(tmp_path):
    validate_file(_write(tmp_path, "daily.yaml", DAILY_YAML))
    with pytest.raises(jsonschema.ValidationError):
        validate_file(_write(tmp_path, "empty.yaml", "description: nothing\n"))
