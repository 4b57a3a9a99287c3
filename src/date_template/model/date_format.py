"""DateFormat — immutable builder for LDML date/time templates.

A ``DateFormat`` keeps two independent token sequences, one for date fields
and one for time fields, and joins them into the final ``template``::

    DateFormat().year(Year.FULL).month(Month.SHORT).day(Day.TWO_DIGITS)
    # template == "yyyy-MM-dd"

Every builder method returns a new instance; nothing is mutated in place, so a
``DateFormat`` can be shared freely and reused as the base of several chains.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from . import (
    FRACTION_SYMBOL,
    PERIOD,
    TIME_ZONE_FULL,
    TIME_ZONE_SHORT,
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


def _require(value: Any, kind: type[Enum]) -> None:
    if not isinstance(value, kind):
        raise TypeError(
            f"expected {kind.__name__} member, got {type(value).__name__}: {value!r}"
        )


def _substitute(tokens: str, variants: type[Enum], new_literal: str) -> str:
    """Rewrite every literal of every *variants* member in *tokens*."""
    for variant in variants:
        tokens = tokens.replace(variant.literal, new_literal)
    return tokens


@dataclass(frozen=True, slots=True)
class DateFormat:
    """Immutable template state.

    Attributes:
        date_tokens: Date fields appended so far, joined by ``date_sep``.
        time_tokens: Time fields appended so far, joined by ``time_sep``.
        date_sep: Separator used for the next date append.
        time_sep: Separator used for the next time append.
        date_time_sep: Connector between the date and time parts.
        date_before_time: Whether the date part comes first. Decided when the
            first time token is appended.
    """

    date_tokens: str = ""
    time_tokens: str = ""
    date_sep: DateSeparator = DateSeparator.DASH
    time_sep: TimeSeparator = TimeSeparator.COLON
    date_time_sep: DateTimeSeparator = DateTimeSeparator.COMMA_SPACE
    date_before_time: bool = True

    # ── final template ──────────────────────────────────────────────

    @property
    def template(self) -> str:
        """The assembled pattern handed to the formatter."""
        if not self.date_tokens:
            return self.time_tokens
        if not self.time_tokens:
            return self.date_tokens
        connector = self.date_time_sep.literal
        if self.date_before_time:
            return f"{self.date_tokens}{connector}{self.time_tokens}"
        return f"{self.time_tokens}{connector}{self.date_tokens}"

    def __str__(self) -> str:
        return self.template

    # ── appending ───────────────────────────────────────────────────

    def _append_date(self, token: str) -> DateFormat:
        if not self.date_tokens:
            return replace(self, date_tokens=token)
        return replace(
            self, date_tokens=f"{self.date_tokens}{self.date_sep.literal}{token}"
        )

    def _append_time(self, token: str, separator: str | None = None) -> DateFormat:
        if not self.time_tokens:
            # Ordering is fixed here, on the first time token.
            return replace(
                self, time_tokens=token, date_before_time=bool(self.date_tokens)
            )
        sep = self.time_sep.literal if separator is None else separator
        return replace(self, time_tokens=f"{self.time_tokens}{sep}{token}")

    # ── date fields ─────────────────────────────────────────────────

    def year(self, style: Year = Year.SHORT) -> DateFormat:
        _require(style, Year)
        return self._append_date(style.token)

    def quarter(self, style: Quarter = Quarter.NUMERIC) -> DateFormat:
        _require(style, Quarter)
        return self._append_date(style.token)

    def month(self, style: Month = Month.NUMERIC) -> DateFormat:
        _require(style, Month)
        return self._append_date(style.token)

    def day(self, style: Day = Day.TWO_DIGITS) -> DateFormat:
        _require(style, Day)
        return self._append_date(style.token)

    def weekday(self, style: Weekday = Weekday.SHORT) -> DateFormat:
        _require(style, Weekday)
        return self._append_date(style.token)

    # ── time fields ─────────────────────────────────────────────────

    def hours(self, style: HourCycle = HourCycle.TWENTYFOUR) -> DateFormat:
        _require(style, HourCycle)
        return self._append_time(style.token)

    def minutes(self, style: Minutes = Minutes.TWO_DIGITS) -> DateFormat:
        _require(style, Minutes)
        return self._append_time(style.token)

    def seconds(self, style: Seconds = Seconds.TWO_DIGITS) -> DateFormat:
        _require(style, Seconds)
        return self._append_time(style.token)

    def fractional_seconds(self, length: int = 3) -> DateFormat:
        """Append zero-padded fractional seconds, *length* digits.

        A non-positive *length* appends nothing.
        """
        if length <= 0:
            return self
        return self._append_time(FRACTION_SYMBOL * length)

    def time_zone(self) -> DateFormat:
        """Append the time zone abbreviation (``z``)."""
        return self._append_time(TIME_ZONE_SHORT)

    def time_zone_name(self) -> DateFormat:
        """Append the full time zone name (``zzzz``)."""
        return self._append_time(TIME_ZONE_FULL)

    def period(self) -> DateFormat:
        """Append the AM/PM marker.

        The marker trails the clock fields after a plain space (``hh a``), not
        after the time separator.
        """
        return self._append_time(PERIOD, separator=TimeSeparator.SPACE.literal)

    def time(self, include_fractional_seconds: bool = False) -> DateFormat:
        """Shortcut for ``hours().minutes()``, optionally with fractional seconds."""
        fmt = self.hours().minutes()
        if include_fractional_seconds:
            fmt = fmt.fractional_seconds()
        return fmt

    # ── separators ──────────────────────────────────────────────────

    def date_separator(self, separator: DateSeparator) -> DateFormat:
        """Switch the date separator, rewriting the ones already placed."""
        _require(separator, DateSeparator)
        return replace(
            self,
            date_tokens=_substitute(self.date_tokens, DateSeparator, separator.literal),
            date_sep=separator,
        )

    def time_separator(self, separator: TimeSeparator) -> DateFormat:
        """Switch the time separator, rewriting the ones already placed."""
        _require(separator, TimeSeparator)
        return replace(
            self,
            time_tokens=_substitute(self.time_tokens, TimeSeparator, separator.literal),
            time_sep=separator,
        )

    def date_time_separator(self, separator: DateTimeSeparator) -> DateFormat:
        _require(separator, DateTimeSeparator)
        return replace(self, date_time_sep=separator)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "template": self.template,
            "date_tokens": self.date_tokens,
            "time_tokens": self.time_tokens,
            "date_separator": self.date_sep.value,
            "time_separator": self.time_sep.value,
            "date_time_separator": self.date_time_sep.value,
            "date_before_time": self.date_before_time,
        }
