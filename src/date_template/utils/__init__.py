"""Shared utilities for date_template."""

from date_template.utils.exit_codes import ExitCode
from date_template.utils.json_norm import stable_json_dump, stable_json_dumps
from date_template.utils.tz import normalize_tz_name, resolve_tz

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
    "normalize_tz_name",
    "resolve_tz",
]
