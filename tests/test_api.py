"""Tests for the programmatic entrypoints."""

from datetime import datetime, timezone

import pytest

import date_template
from date_template.api import build_format, load_recipe, render_recipe
from date_template.contracts.load import Recipe
from date_template.core.config import RenderOptions
from date_template.model.date_format import DateFormat
from date_template.model.steps import Step, StepError

INSTANT = datetime(2023, 1, 5, 14, 7, tzinfo=timezone.utc)


class TestBuildFormat:
    def test_mappings_and_steps(self):
        fmt = build_format([{"year": "full"}, Step("month", "short"), {"day": None}])
        assert fmt.template == "yyyy-MM-dd"

    def test_base(self):
        fmt = build_format([{"minutes": None}], base=DateFormat().hours())
        assert fmt.template == "HH:mm"

    def test_error(self):
        with pytest.raises(StepError):
            build_format([{"year": "huge"}])


class TestRenderRecipe:
    def test_result_shape(self):
        recipe = Recipe(
            format=build_format([{"hours": None}, {"minutes": None}]),
            options=RenderOptions(time_zone="+01:00", locale="en_US", calendar="gregorian", localized=False),
        )
        result = render_recipe(recipe, INSTANT)
        assert result == {
            "template": "HH:mm",
            "rendered": "15:07",
            "instant": "2023-01-05T14:07:00+00:00",
            "options": {
                "time_zone": "+01:00",
                "locale": "en_US",
                "calendar": "gregorian",
                "localized": False,
            },
            "recipe": recipe.to_dict(),
        }

    def test_defaults_to_now(self):
        recipe = Recipe(format=build_format([{"year": "full"}]), options=RenderOptions(locale="en_US"))
        result = render_recipe(recipe)
        assert result["rendered"].isdigit()

    def test_from_file(self, tmp_path):
        path = tmp_path / "r.yaml"
        path.write_text("steps:\n  - weekday: full\nrender:\n  locale: en_US\n  time_zone: UTC\n", encoding="utf-8")
        assert render_recipe(load_recipe(path), INSTANT)["rendered"] == "Thursday"

    def test_includes_loaded_recipe(self, tmp_path):
        path = tmp_path / "r.yaml"
        path.write_text(
            "description: weekday only\nsteps:\n  - weekday: full\nrender:\n  time_zone: UTC\n",
            encoding="utf-8",
        )
        loaded = render_recipe(load_recipe(path), INSTANT)["recipe"]
        assert loaded["description"] == "weekday only"
        assert loaded["source"] == path.as_posix()
        assert loaded["format"]["template"] == "EEEE"
        assert loaded["options"]["time_zone"] == "UTC"
        assert loaded["options"]["locale"] is None


def test_package_exports():
    assert date_template.DateFormat is DateFormat
    assert date_template.render(INSTANT, "yyyy", locale="en_US", time_zone="UTC") == "2023"
    for name in date_template.__all__:
        assert hasattr(date_template, name)
