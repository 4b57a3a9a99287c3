"""Tests for named builder steps."""

import pytest

from date_template.model import DateSeparator, Day, Month, Year
from date_template.model.date_format import DateFormat
from date_template.model.steps import ALL_OPS, Step, StepError, apply_steps


class TestApplySteps:
    """Replaying steps matches the equivalent builder chain."""

    def test_matches_builder_chain(self):
        steps = [
            Step("year", "full"),
            Step("month", "short"),
            Step("day", "two_digits"),
            Step("date_separator", "slash"),
        ]
        expected = (
            DateFormat()
            .year(Year.FULL)
            .month(Month.SHORT)
            .day(Day.TWO_DIGITS)
            .date_separator(DateSeparator.SLASH)
        )
        assert apply_steps(steps) == expected
        assert expected.template == "yyyy/MM/dd"

    def test_accepts_single_key_mappings(self):
        fmt = apply_steps([{"hours": "twelve"}, {"minutes": None}, {"period": True}])
        assert fmt.template == "hh:mm a"

    def test_none_means_default_style(self):
        fmt = apply_steps([Step("year"), Step("quarter"), Step("weekday")])
        assert fmt.template == "yy-Q-E"

    def test_enum_values_pass_through(self):
        assert apply_steps([Step("year", Year.FULL)]).template == "yyyy"

    def test_time_and_fraction(self):
        assert apply_steps([Step("time", True)]).template == "HH:mm:SSS"
        assert apply_steps([Step("time", False)]).template == "HH:mm"
        assert apply_steps([Step("time")]).template == "HH:mm"
        assert apply_steps([Step("seconds"), Step("fractional_seconds", 2)]).template == "ss:SS"

    def test_time_first_ordering_preserved(self):
        fmt = apply_steps([{"hours": None}, {"minutes": None}, {"year": "short"}])
        assert fmt.template == "HH:mm, yy"

    def test_extends_base(self):
        base = DateFormat().year()
        assert apply_steps([Step("month", "medium")], base=base).template == "yy-MMM"

    def test_empty_steps(self):
        assert apply_steps([]) == DateFormat()


class TestStepErrors:
    """Bad steps raise StepError, a ValueError."""

    def test_unknown_op(self):
        with pytest.raises(StepError, match="unknown step"):
            apply_steps([Step("century", "full")])

    def test_unknown_style(self):
        with pytest.raises(StepError, match="not one of"):
            apply_steps([Step("year", "long")])

    def test_separator_requires_value(self):
        with pytest.raises(StepError):
            apply_steps([Step("date_separator")])

    def test_bare_op_rejects_value(self):
        with pytest.raises(StepError):
            apply_steps([Step("period", "pm")])

    @pytest.mark.parametrize("value", [1, 1.0, 0, False])
    def test_bare_op_rejects_numbers_equal_to_bools(self, value):
        with pytest.raises(StepError, match="takes no value"):
            apply_steps([Step("time_zone", value)])

    @pytest.mark.parametrize("value", [None, True])
    def test_bare_op_accepts_null_and_true(self, value):
        assert apply_steps([Step("time_zone", value)]).template == "z"

    @pytest.mark.parametrize("value", ["3", 2.5, True])
    def test_fraction_requires_int(self, value):
        with pytest.raises(StepError):
            apply_steps([Step("fractional_seconds", value)])

    def test_time_requires_bool(self):
        with pytest.raises(StepError):
            apply_steps([Step("time", "yes")])

    def test_mapping_must_have_one_key(self):
        with pytest.raises(StepError):
            apply_steps([{"year": "full", "month": "short"}])

    def test_is_value_error(self):
        assert issubclass(StepError, ValueError)


def test_all_ops_are_builder_methods():
    for op in ALL_OPS:
        assert callable(getattr(DateFormat, op))
