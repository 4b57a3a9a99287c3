"""
Rendering defaults.
Environment variables (``DATE_TEMPLATE_<FIELD>``) override defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from datetime import tzinfo
from typing import Any

ENV_PREFIX = "DATE_TEMPLATE_"

DEFAULT_CALENDAR = "gregorian"
FALLBACK_LOCALE = "en_US_POSIX"


@dataclass
class Settings:
    """Process-wide rendering defaults."""

    # Empty -> Babel's LC_TIME default, then FALLBACK_LOCALE
    LOCALE: str = ""
    TIME_ZONE: str = "local"
    CALENDAR: str = DEFAULT_CALENDAR
    LOCALIZED: bool = False

    # CLI
    LOG_LEVEL: str = "WARNING"

    def __post_init__(self):
        """Load from environment variables"""
        for f in fields(self):
            env_value = os.getenv(ENV_PREFIX + f.name)
            if env_value is None:
                continue
            if f.type in (bool, "bool"):
                setattr(self, f.name, env_value.lower() in ("true", "1", "yes", "on"))
            else:
                setattr(self, f.name, env_value)


# Global settings instance
settings = Settings()


@dataclass(frozen=True)
class RenderOptions:
    """Per-call rendering options; ``None`` means "use the settings default"."""

    time_zone: str | tzinfo | None = None
    locale: Any = None          # str or babel.Locale
    calendar: str | None = None
    localized: bool | None = None

    def resolved(self, base: Settings | None = None) -> "RenderOptions":
        """Fill unset fields from *base* (the global ``settings`` by default)."""
        s = base if base is not None else settings
        return replace(
            self,
            time_zone=self.time_zone if self.time_zone is not None else s.TIME_ZONE,
            locale=self.locale if self.locale is not None else (s.LOCALE or None),
            calendar=self.calendar if self.calendar is not None else s.CALENDAR,
            localized=self.localized if self.localized is not None else s.LOCALIZED,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "time_zone": None if self.time_zone is None else str(self.time_zone),
            "locale": None if self.locale is None else str(self.locale),
            "calendar": self.calendar,
            "localized": self.localized,
        }
