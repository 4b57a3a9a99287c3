"""Named builder steps.

Recipes and the CLI describe a ``DateFormat`` as an ordered list of builder
calls.  A ``Step`` names one call by its method name plus an optional value;
``apply_steps`` replays them in order::

    apply_steps([Step("year", "full"), Step("month", "short")]).template
    # "yyyy-MM"

Values arrive as plain identifiers (``"two_digits"``, ``"slash"``) and are
coerced to the matching enum here, at the boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

from . import (
    DateSeparator,
    DateTimeSeparator,
    Day,
    HourCycle,
    Minutes,
    Month,
    Quarter,
    Seconds,
    TimeSeparator,
    Weekday,
    Year,
)
from .date_format import DateFormat

logger = logging.getLogger(__name__)


class StepError(ValueError):
    """Raised for an unknown step name or an invalid step value."""


@dataclass(frozen=True, slots=True)
class Step:
    """One builder call: method name plus its argument (``None`` = default)."""

    op: str
    value: Any = None

    @classmethod
    def from_mapping(cls, item: Mapping[str, Any]) -> "Step":
        """Build from a single-key mapping such as ``{"year": "full"}``."""
        if len(item) != 1:
            raise StepError(f"step must have exactly one key, got {sorted(item)}")
        ((op, value),) = item.items()
        return cls(op=str(op), value=value)


# Ops taking a style enum: op name -> enum class.
STYLED_OPS: dict[str, type[Enum]] = {
    "year": Year,
    "quarter": Quarter,
    "month": Month,
    "day": Day,
    "weekday": Weekday,
    "hours": HourCycle,
    "minutes": Minutes,
    "seconds": Seconds,
    "date_separator": DateSeparator,
    "time_separator": TimeSeparator,
    "date_time_separator": DateTimeSeparator,
}

# Separators have no default; they always need a value.
_REQUIRES_VALUE = frozenset({"date_separator", "time_separator", "date_time_separator"})

# Ops taking no argument.
BARE_OPS = ("time_zone", "time_zone_name", "period")

ALL_OPS = tuple(STYLED_OPS) + ("fractional_seconds", "time") + BARE_OPS


def _coerce(op: str, kind: type[Enum], value: Any) -> Enum:
    if isinstance(value, kind):
        return value
    try:
        return kind(value)
    except ValueError:
        choices = ", ".join(m.value for m in kind)
        raise StepError(f"{op}: {value!r} is not one of: {choices}") from None


def _apply_one(fmt: DateFormat, step: Step) -> DateFormat:
    op, value = step.op, step.value

    if op in STYLED_OPS:
        if value is None:
            if op in _REQUIRES_VALUE:
                raise StepError(f"{op}: a separator value is required")
            return getattr(fmt, op)()
        return getattr(fmt, op)(_coerce(op, STYLED_OPS[op], value))

    if op == "fractional_seconds":
        if value is None:
            return fmt.fractional_seconds()
        if isinstance(value, bool) or not isinstance(value, int):
            raise StepError(f"fractional_seconds: expected an integer, got {value!r}")
        return fmt.fractional_seconds(value)

    if op == "time":
        if value is None:
            return fmt.time()
        if not isinstance(value, bool):
            raise StepError(f"time: expected a boolean, got {value!r}")
        return fmt.time(include_fractional_seconds=value)

    if op in BARE_OPS:
        # ``period: true`` / ``period: null`` both read naturally in YAML.
        if value is not None and value is not True:
            raise StepError(f"{op}: takes no value, got {value!r}")
        return getattr(fmt, op)()

    raise StepError(f"unknown step {op!r}; expected one of: {', '.join(ALL_OPS)}")


def apply_steps(
    steps: Iterable[Step | Mapping[str, Any]],
    base: DateFormat | None = None,
) -> DateFormat:
    """Replay *steps* onto *base* (an empty ``DateFormat`` by default)."""
    fmt = base if base is not None else DateFormat()
    for raw in steps:
        step = raw if isinstance(raw, Step) else Step.from_mapping(raw)
        fmt = _apply_one(fmt, step)
        logger.debug("step %s=%r -> %r", step.op, step.value, fmt.template)
    return fmt
