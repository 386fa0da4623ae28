# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for the cron field model and field grammar."""

from __future__ import annotations

import pytest

from cronmath.expression.fields import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    HOUR,
    MINUTE,
    MONTH,
    AnyField,
    ListField,
    RangeField,
    SingleField,
    StepField,
    field_from_values,
    parse_field,
)
from cronmath.kernel.exceptions import CronParseException


class TestFieldDomain:
    def test_sizes(self):
        assert MINUTE.size == 60
        assert HOUR.size == 24
        assert DAY_OF_MONTH.size == 31
        assert MONTH.size == 12
        assert DAY_OF_WEEK.size == 7

    def test_contains(self):
        assert 0 in MINUTE
        assert 59 in MINUTE
        assert 60 not in MINUTE
        assert 0 not in DAY_OF_MONTH
        assert 7 not in DAY_OF_WEEK


class TestParseField:
    def test_any(self):
        assert parse_field("*", MINUTE) == AnyField(MINUTE)

    def test_single(self):
        assert parse_field("9", HOUR) == SingleField(HOUR, 9)

    def test_range(self):
        assert parse_field("9-17", HOUR) == RangeField(HOUR, 9, 17)

    def test_list_is_sorted_and_deduplicated(self):
        field = parse_field("30,0,30,15", MINUTE)
        assert field == ListField(MINUTE, (0, 15, 30))

    def test_list_collapsing_to_one_value_is_single(self):
        assert parse_field("5,5", MINUTE) == SingleField(MINUTE, 5)

    def test_star_step(self):
        field = parse_field("*/15", MINUTE)
        assert isinstance(field, StepField)
        assert field.values() == (0, 15, 30, 45)

    def test_base_step_runs_to_domain_max(self):
        field = parse_field("5/20", MINUTE)
        assert field.values() == (5, 25, 45)

    def test_range_step(self):
        field = parse_field("10-30/10", MINUTE)
        assert field.values() == (10, 20, 30)

    def test_star_step_on_day_of_month_starts_at_one(self):
        assert parse_field("*/10", DAY_OF_MONTH).values() == (1, 11, 21, 31)

    @pytest.mark.parametrize(
        "token",
        [
            "", "a", "60", "-1", "1-", "5-3", "*/0", "1,,2", ",1", "1,", "1-3,5", "1.5", "**", "*/x", "61/5", "7-70/5",
            "٣٠", "5\n", "1-5\n", "*/5\n", "1,2\n",
        ],
    )
    def test_invalid_minute_tokens(self, token):
        with pytest.raises(CronParseException):
            parse_field(token, MINUTE)

    def test_out_of_range_reports_field_context(self):
        with pytest.raises(CronParseException, match="hour value 24 out of range 0-23") as exc_info:
            parse_field("24", HOUR)
        assert exc_info.value.context == {"field": "hour", "token": "24"}
        assert exc_info.value.code == "CRON_PARSE"

    def test_zero_stride(self):
        with pytest.raises(CronParseException, match="step must be at least 1"):
            parse_field("*/0", HOUR)

    def test_inverted_range(self):
        with pytest.raises(CronParseException, match="not ascending"):
            parse_field("17-9", HOUR)

    def test_empty_list_element(self):
        with pytest.raises(CronParseException, match="empty list element"):
            parse_field("1,,2", HOUR)

    def test_day_of_week_seven_is_out_of_range(self):
        with pytest.raises(CronParseException):
            parse_field("7", DAY_OF_WEEK)


class TestCanonicalEmission:
    @pytest.mark.parametrize(
        ("token", "domain", "expected"),
        [
            ("*", MINUTE, "*"),
            ("5", MINUTE, "5"),
            ("9-17", HOUR, "9-17"),
            ("0,30", MINUTE, "0,30"),
            ("1,2,3", MINUTE, "1-3"),
            ("3,1,2,5", MINUTE, "1,2,3,5"),
            ("5-5", MINUTE, "5"),
            ("0-23", HOUR, "*"),
            ("0-59", MINUTE, "*"),
            ("*/1", MINUTE, "*"),
            ("*/15", MINUTE, "*/15"),
            ("0-59/15", MINUTE, "*/15"),
            ("5/15", MINUTE, "5/15"),
            ("10-30/10", MINUTE, "10-30/10"),
            ("10-35/10", MINUTE, "10-30/10"),
            ("10-20/1", MINUTE, "10-20"),
            ("59/15", MINUTE, "59"),
            ("*/2", DAY_OF_WEEK, "*/2"),
        ],
    )
    def test_canonical_form(self, token, domain, expected):
        assert str(parse_field(token, domain)) == expected

    def test_canonical_form_reparses_to_same_set(self):
        for token in ["*/15", "5/15", "10-35/10", "3,1,2,5", "0-23"]:
            field = parse_field(token, MINUTE)
            again = parse_field(str(field), MINUTE)
            assert again.values() == field.values()

    def test_canonical_is_idempotent(self):
        field = parse_field("10-35/10", MINUTE).canonical()
        assert field.canonical() == field


class TestFieldFromValues:
    def test_full_domain_is_any(self):
        assert field_from_values(DAY_OF_WEEK, range(7)) == AnyField(DAY_OF_WEEK)

    def test_contiguous_is_range(self):
        assert field_from_values(HOUR, [12, 10, 11]) == RangeField(HOUR, 10, 12)

    def test_scattered_is_list(self):
        assert field_from_values(MONTH, [1, 6, 12]) == ListField(MONTH, (1, 6, 12))

    def test_rejects_out_of_domain(self):
        with pytest.raises(ValueError):
            field_from_values(MONTH, [0, 1])

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            field_from_values(MONTH, [])


class TestTranslate:
    def test_step_translate_keeps_stride(self):
        field = parse_field("*/15", MINUTE).translate(5)
        assert field.values() == (5, 20, 35, 50)
        assert str(field) == "5/15"

    def test_range_translate(self):
        assert parse_field("9-17", HOUR).translate(1) == RangeField(HOUR, 10, 18)

    def test_any_translate_is_identity(self):
        field = AnyField(HOUR)
        assert field.translate(5) is field
