"""Style enums shared by the builder, the step layer and the CLI.

Every enum value is a stable identifier (used in recipes and on the command
line).  The pattern literal a member contributes is exposed as ``.token`` for
field styles and ``.literal`` for separators.
"""

from __future__ import annotations

from enum import Enum


class Year(str, Enum):
    """Year field."""

    SHORT = "short"            # yy   -> 23
    FULL = "full"              # yyyy -> 2023

    @property
    def token(self) -> str:
        return _YEAR_TOKENS[self]


class Quarter(str, Enum):
    """Quarter field."""

    NUMERIC = "numeric"        # Q    -> 4
    SHORT = "short"            # QQQ  -> Q4
    FULL = "full"              # QQQQ -> 4th quarter

    @property
    def token(self) -> str:
        return _QUARTER_TOKENS[self]


class Month(str, Enum):
    """Month field."""

    NUMERIC = "numeric"        # M     -> 1
    SHORT = "short"            # MM    -> 01
    MEDIUM = "medium"          # MMM   -> Jan
    FULL = "full"              # MMMM  -> January
    NARROW = "narrow"          # MMMMM -> J

    @property
    def token(self) -> str:
        return _MONTH_TOKENS[self]


class Day(str, Enum):
    """Day-of-month field."""

    ONE_DIGIT = "one_digit"    # d  -> 1
    TWO_DIGITS = "two_digits"  # dd -> 01

    @property
    def token(self) -> str:
        return _DAY_TOKENS[self]


class Weekday(str, Enum):
    """Day-of-week field."""

    SHORT = "short"            # E     -> Tue
    FULL = "full"              # EEEE  -> Tuesday
    NARROW = "narrow"          # EEEEE -> T

    @property
    def token(self) -> str:
        return _WEEKDAY_TOKENS[self]


class HourCycle(str, Enum):
    """Zero-padded hour field, 12- or 24-hour cycle."""

    TWELVE = "twelve"          # hh
    TWENTYFOUR = "twentyfour"  # HH

    @property
    def token(self) -> str:
        return _HOUR_TOKENS[self]


class Minutes(str, Enum):
    """Minute field."""

    ONE_DIGIT = "one_digit"    # m  -> 5
    TWO_DIGITS = "two_digits"  # mm -> 05

    @property
    def token(self) -> str:
        return _MINUTE_TOKENS[self]


class Seconds(str, Enum):
    """Second field."""

    ONE_DIGIT = "one_digit"    # s  -> 5
    TWO_DIGITS = "two_digits"  # ss -> 05

    @property
    def token(self) -> str:
        return _SECOND_TOKENS[self]


class DateSeparator(str, Enum):
    """Separator placed between date tokens."""

    DASH = "dash"
    SLASH = "slash"
    SPACE = "space"

    @property
    def literal(self) -> str:
        return _DATE_SEPARATORS[self]


class TimeSeparator(str, Enum):
    """Separator placed between time tokens."""

    COLON = "colon"
    DOT = "dot"
    SPACE = "space"

    @property
    def literal(self) -> str:
        return _TIME_SEPARATORS[self]


class DateTimeSeparator(str, Enum):
    """Connector placed between the date part and the time part."""

    COMMA_SPACE = "comma_space"
    SPACE = "space"
    ISO_T = "iso_t"            # quoted so the formatter prints a literal T

    @property
    def literal(self) -> str:
        return _DATE_TIME_SEPARATORS[self]


# ── symbol tables ───────────────────────────────────────────────────

_YEAR_TOKENS = {Year.SHORT: "yy", Year.FULL: "yyyy"}

_QUARTER_TOKENS = {
    Quarter.NUMERIC: "Q",
    Quarter.SHORT: "QQQ",
    Quarter.FULL: "QQQQ",
}

_MONTH_TOKENS = {
    Month.NUMERIC: "M",
    Month.SHORT: "MM",
    Month.MEDIUM: "MMM",
    Month.FULL: "MMMM",
    Month.NARROW: "MMMMM",
}

_DAY_TOKENS = {Day.ONE_DIGIT: "d", Day.TWO_DIGITS: "dd"}

_WEEKDAY_TOKENS = {
    Weekday.SHORT: "E",
    Weekday.FULL: "EEEE",
    Weekday.NARROW: "EEEEE",
}

_HOUR_TOKENS = {HourCycle.TWELVE: "hh", HourCycle.TWENTYFOUR: "HH"}

_MINUTE_TOKENS = {Minutes.ONE_DIGIT: "m", Minutes.TWO_DIGITS: "mm"}

_SECOND_TOKENS = {Seconds.ONE_DIGIT: "s", Seconds.TWO_DIGITS: "ss"}

_DATE_SEPARATORS = {
    DateSeparator.DASH: "-",
    DateSeparator.SLASH: "/",
    DateSeparator.SPACE: " ",
}

_TIME_SEPARATORS = {
    TimeSeparator.COLON: ":",
    TimeSeparator.DOT: ".",
    TimeSeparator.SPACE: " ",
}

_DATE_TIME_SEPARATORS = {
    DateTimeSeparator.COMMA_SPACE: ", ",
    DateTimeSeparator.SPACE: " ",
    DateTimeSeparator.ISO_T: "'T'",
}

FRACTION_SYMBOL = "S"
TIME_ZONE_SHORT = "z"
TIME_ZONE_FULL = "zzzz"
PERIOD = "a"

__all__ = [
    "Year",
    "Quarter",
    "Month",
    "Day",
    "Weekday",
    "HourCycle",
    "Minutes",
    "Seconds",
    "DateSeparator",
    "TimeSeparator",
    "DateTimeSeparator",
    "FRACTION_SYMBOL",
    "TIME_ZONE_SHORT",
    "TIME_ZONE_FULL",
    "PERIOD",
]
