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
"""Tests for CronExpression parsing and emission."""

from __future__ import annotations

import pytest
from croniter import croniter

from cronmath.expression.cron import CronExpression, parse_expression
from cronmath.expression.fields import HOUR, AnyField, RangeField, SingleField
from cronmath.kernel.exceptions import CronParseException


class TestParseExpression:
    def test_parses_five_fields(self):
        expr = parse_expression("0 9-17 * * 1-5")
        assert expr.minute == SingleField(expr.minute.domain, 0)
        assert expr.hour == RangeField(HOUR, 9, 17)
        assert expr.day_of_month.is_any
        assert expr.month.is_any
        assert expr.day_of_week == RangeField(expr.day_of_week.domain, 1, 5)

    def test_whitespace_runs_are_collapsed(self):
        assert str(parse_expression("  0   9\t*  * *  ")) == "0 9 * * *"

    @pytest.mark.parametrize("text", ["", "* * * *", "* * * * * *", "0 9 * *"])
    def test_wrong_field_count(self, text):
        with pytest.raises(CronParseException, match="expected 5 fields"):
            parse_expression(text)

    @pytest.mark.parametrize("text", ["@hourly", "@reboot", "@daily"])
    def test_macros_rejected(self, text):
        with pytest.raises(CronParseException, match="macros"):
            parse_expression(text)

    def test_comment_rejected(self):
        with pytest.raises(CronParseException, match="comments"):
            parse_expression("# 0 9 * * *")

    def test_field_error_carries_expression_context(self):
        with pytest.raises(CronParseException) as exc_info:
            parse_expression("0 24 * * *")
        assert exc_info.value.context["field"] == "hour"
        assert exc_info.value.context["expression"] == "0 24 * * *"

    def test_named_months_are_not_supported(self):
        with pytest.raises(CronParseException):
            parse_expression("0 9 * JAN *")

    def test_classmethod_parse(self):
        assert CronExpression.parse("*/5 * * * *") == parse_expression("*/5 * * * *")


class TestCronExpression:
    def test_fields_in_positional_order(self):
        expr = parse_expression("1 2 3 4 5")
        assert [f.values() for f in expr.fields] == [(1,), (2,), (3,), (4,), (5,)]

    def test_rejects_field_in_wrong_position(self):
        expr = parse_expression("0 9 * * *")
        with pytest.raises(ValueError, match="position"):
            expr.replace(minute=AnyField(HOUR))

    def test_str_is_canonical(self):
        assert str(parse_expression("0,1,2 0-23 1-31 */1 0-6")) == "0-2 * * * *"

    @pytest.mark.parametrize(
        "text",
        ["0 9 * * *", "*/15 9-17 * * 1-5", "0,30 */2 1,15 * *", "5 4 * 1-6 0", "10-40/10 0 * * *"],
    )
    def test_emitted_form_is_valid_for_croniter(self, text):
        assert croniter.is_valid(str(parse_expression(text)))
