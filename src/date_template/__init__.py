"""date_template — compose LDML date/time templates and render them."""

__all__ = [
    "__version__",
    "DateFormat",
    "build_format",
    "load_recipe",
    "render",
    "render_recipe",
    # Styles
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
]
__version__ = "0.1.0"

from date_template.model import (  # noqa: E402, F401
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
from date_template.model.date_format import DateFormat  # noqa: E402, F401

# Programmatic entrypoints
from date_template.api import (  # noqa: E402, F401
    build_format,
    load_recipe,
    render,
    render_recipe,
)
