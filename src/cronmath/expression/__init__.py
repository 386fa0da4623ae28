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
"""cronmath Expression — field model, shifter and the CronMath facade."""

from cronmath.expression.cron import CronExpression, parse_expression
from cronmath.expression.duration import Duration, hours, minutes
from cronmath.expression.facade import CronMath
from cronmath.expression.fields import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DOMAINS,
    HOUR,
    MINUTE,
    MONTH,
    AnyField,
    CronField,
    FieldDomain,
    ListField,
    RangeField,
    SingleField,
    StepField,
    field_from_values,
    parse_field,
)
from cronmath.expression.shifter import OffsetParts, shift_expression, shift_field

__all__ = [
    # Facade
    "CronMath",
    "Duration",
    "hours",
    "minutes",
    # Expression
    "CronExpression",
    "parse_expression",
    # Fields
    "AnyField",
    "CronField",
    "FieldDomain",
    "ListField",
    "RangeField",
    "SingleField",
    "StepField",
    "field_from_values",
    "parse_field",
    "DOMAINS",
    "MINUTE",
    "HOUR",
    "DAY_OF_MONTH",
    "MONTH",
    "DAY_OF_WEEK",
    # Shifter
    "OffsetParts",
    "shift_expression",
    "shift_field",
]
