"""Render an instant with a built template.

Formatting itself is delegated to Babel (CLDR data).  Two modes:

* verbatim — the template is applied as an LDML pattern, exactly as built;
* localized — only the *fields* of the template are kept (a skeleton) and the
  locale picks its preferred pattern for them, including separators and the
  order of the date and time parts.

``render`` never raises.  Anything that goes wrong (unknown locale, bad zone,
unsupported calendar, a skeleton the locale cannot match) is logged and the
fallback string is returned instead.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Any

from babel import Locale, default_locale
from babel.dates import (
    get_datetime_format,
    match_skeleton,
    parse_pattern,
    tokenize_pattern,
    untokenize_pattern,
)

from date_template.core.config import FALLBACK_LOCALE, RenderOptions
from date_template.model.date_format import DateFormat
from date_template.utils.tz import resolve_tz

logger = logging.getLogger(__name__)

FALLBACK = ""

SUPPORTED_CALENDARS = ("gregorian",)

# LDML field letters by part; anything else in a skeleton is a time field.
DATE_FIELDS = frozenset("GyYuUrQqMLlwWdDFgEec")

# Glue pattern used to join localized date and time parts.
DATETIME_GLUE = "medium"

# Fields whose width in a locale pattern is rewritten to the requested width,
# keyed by letter and mapped to the field they stand for.  Hour, minute,
# second, period and zone fields keep the locale's width.
WIDTH_FIELDS = {
    "G": "G",
    "y": "y",
    "Y": "y",
    "u": "y",
    "Q": "Q",
    "q": "Q",
    "M": "M",
    "L": "M",
    "d": "d",
    "E": "E",
    "c": "E",
    "e": "E",
}

# Below this width M/L and Q/q are numeric, from it on they are names.
_TEXT_WIDTH = 3


def resolve_locale(locale: Any) -> Locale:
    """Turn an identifier (``it_IT``, ``en-US``) or ``Locale`` into a ``Locale``."""
    if isinstance(locale, Locale):
        return locale
    ident = str(locale) if locale else (default_locale("LC_TIME") or FALLBACK_LOCALE)
    return Locale.parse(ident, sep="-" if "-" in ident else "_")


def split_skeleton(pattern: str) -> tuple[str, str]:
    """Return the (date, time) skeletons of *pattern*, literals dropped."""
    date_part: list[str] = []
    time_part: list[str] = []
    for kind, value in tokenize_pattern(pattern):
        if kind != "field":
            continue
        char, width = value
        (date_part if char in DATE_FIELDS else time_part).append(char * width)
    return "".join(date_part), "".join(time_part)


def _adjusted_width(char: str, width: int, wanted: int) -> int:
    field = WIDTH_FIELDS[char]
    if field in ("M", "Q") and (width >= _TEXT_WIDTH) != (wanted >= _TEXT_WIDTH):
        # Never turn a name into a number or the other way round.
        return width
    if field == "E" and char != "E":
        # c/e below three letters are numeric weekdays.
        return max(wanted, _TEXT_WIDTH)
    return wanted


def adjust_field_widths(pattern: str, skeleton: str) -> str:
    """Rewrite the fields of *pattern* to the widths asked for in *skeleton*.

    >>> adjust_field_widths("E, MMM d, y", "EEEEMMMMdyyyy")
    'EEEE, MMMM d, yyyy'
    """
    wanted: dict[str, int] = {}
    for kind, value in tokenize_pattern(skeleton):
        if kind == "field" and value[0] in WIDTH_FIELDS:
            wanted[WIDTH_FIELDS[value[0]]] = value[1]

    tokens = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field" and value[0] in WIDTH_FIELDS:
            char, width = value
            field = WIDTH_FIELDS[char]
            if field in wanted:
                value = (char, _adjusted_width(char, width, wanted[field]))
        tokens.append((kind, value))
    return untokenize_pattern(tokens)


def best_pattern(skeleton: str, locale: Locale) -> str:
    """The locale's pattern for *skeleton*, with the requested field widths.

    Raises ``ValueError`` when the locale has no pattern with those fields.
    """
    patterns = locale.datetime_skeletons
    key = skeleton if skeleton in patterns else match_skeleton(skeleton, patterns)
    if key is None:
        raise ValueError(f"locale {locale} has no pattern for skeleton {skeleton!r}")
    return adjust_field_widths(patterns[key].pattern, skeleton)


def _render_localized(instant: datetime, pattern: str, locale: Locale) -> str:
    date_skeleton, time_skeleton = split_skeleton(pattern)
    date_text = (
        parse_pattern(best_pattern(date_skeleton, locale)).apply(instant, locale)
        if date_skeleton
        else ""
    )
    time_text = (
        parse_pattern(best_pattern(time_skeleton, locale)).apply(instant, locale)
        if time_skeleton
        else ""
    )
    if date_text and time_text:
        glue = get_datetime_format(DATETIME_GLUE, locale=locale).replace("'", "")
        return glue.replace("{0}", time_text).replace("{1}", date_text)
    return date_text or time_text


def _render(instant: datetime, pattern: str, options: RenderOptions) -> str:
    if not isinstance(instant, datetime):
        raise TypeError(f"expected a datetime, got {type(instant).__name__}")

    calendar = str(options.calendar).lower()
    if calendar not in SUPPORTED_CALENDARS:
        raise ValueError(f"unsupported calendar {options.calendar!r}")

    tz = resolve_tz(options.time_zone)
    locale = resolve_locale(options.locale)

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    local = instant.astimezone(tz)

    if options.localized:
        return _render_localized(local, pattern, locale)
    return parse_pattern(pattern).apply(local, locale)


def render_with_options(
    instant: datetime,
    template: DateFormat | str,
    options: RenderOptions | None = None,
) -> str:
    """Render *instant*; unset *options* fields come from the global settings."""
    pattern = template.template if isinstance(template, DateFormat) else str(template)
    if not pattern:
        return FALLBACK

    resolved = (options or RenderOptions()).resolved()
    try:
        return _render(instant, pattern, resolved)
    except Exception as exc:
        logger.warning("cannot render %r with %s: %s", pattern, resolved.to_dict(), exc)
        return FALLBACK


def render(
    instant: datetime,
    template: DateFormat | str,
    *,
    localized: bool | None = None,
    time_zone: str | tzinfo | None = None,
    locale: Any = None,
    calendar: str | None = None,
) -> str:
    """Format *instant* with *template*.

    Naive datetimes are taken as UTC.  See ``RenderOptions`` for the option
    semantics; returns ``FALLBACK`` instead of raising.
    """
    options = RenderOptions(
        time_zone=time_zone,
        locale=locale,
        calendar=calendar,
        localized=localized,
    )
    return render_with_options(instant, template, options)
