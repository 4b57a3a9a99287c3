"""Tests for the canonical JSON normalization layer."""

import json
from datetime import datetime, timezone
from pathlib import Path

from date_template.core.config import RenderOptions
from date_template.model import Year
from date_template.model.date_format import DateFormat
from date_template.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_normalizes_paths():
    obj = json.loads(stable_json_dumps({"p": Path("a") / "b"}))
    assert obj["p"] == "a/b"


def test_enums_and_datetimes():
    when = datetime(2023, 1, 5, 14, 7, tzinfo=timezone.utc)
    obj = json.loads(stable_json_dumps({"style": Year.FULL, "at": when}))
    assert obj == {"style": "full", "at": "2023-01-05T14:07:00+00:00"}


def test_dataclasses_use_to_dict():
    obj = json.loads(stable_json_dumps(DateFormat().year(Year.FULL)))
    assert obj["template"] == "yyyy"
    obj = json.loads(stable_json_dumps(RenderOptions(locale="en_US")))
    assert obj["locale"] == "en_US"


def test_non_ascii_kept():
    s = stable_json_dumps({"rendered": "5 févr. 2023"})
    assert "févr." in s


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
