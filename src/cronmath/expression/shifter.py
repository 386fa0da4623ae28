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
"""Shifter — translates a cron expression by a signed minute offset.

The offset is split into days, hours and minutes with floored division,
then applied field by field from minutes to months. Each field shift
returns a carry (how many times its members wrapped around the domain)
that is folded into the next field.

A shift is only representable when every member of a field wraps the same
number of times: the result is then a pure translation of the original set
and the carry is a single integer. A ``*`` field absorbs any delta only
when every field its carries would reach is also ``*``; otherwise it is
checked like any other field, which refuses a partial wrap.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from cronmath.expression.cron import CronExpression
from cronmath.expression.duration import MINUTES_PER_DAY, MINUTES_PER_HOUR, Duration
from cronmath.expression.fields import CronField
from cronmath.kernel.exceptions import NonRepresentableShiftException

logger = structlog.get_logger("cronmath.shifter")


@dataclass(frozen=True)
class OffsetParts:
    """An offset in minutes decomposed as ``days * 1440 + hours * 60 + minutes``.

    ``hours`` and ``minutes`` are always non-negative; ``days`` carries the sign.
    """

    days: int
    hours: int
    minutes: int

    @classmethod
    def from_minutes(cls, offset: int) -> OffsetParts:
        days, remainder = divmod(offset, MINUTES_PER_DAY)
        hours, minutes = divmod(remainder, MINUTES_PER_HOUR)
        return cls(days=days, hours=hours, minutes=minutes)


@dataclass(frozen=True)
class FieldShift:
    field: CronField
    carry: int


def shift_field(field: CronField, delta: int, absorb: bool = True) -> FieldShift:
    """Move every member of *field* by *delta*, wrapping within its domain.

    With *absorb* a ``*`` field is returned unchanged with carry 0.

    Raises:
        NonRepresentableShiftException: If members would wrap a different
            number of times.
    """
    if delta == 0 or (field.is_any and absorb):
        return FieldShift(field, 0)

    domain = field.domain
    members = field.values()
    carries = sorted({(value + delta - domain.minimum) // domain.size for value in members})
    if len(carries) != 1:
        raise NonRepresentableShiftException(
            f"{domain.name} values {list(members)} shifted by {delta} wrap unevenly "
            f"(carries {', '.join(str(c) for c in carries)})",
            context={"field": domain.name, "values": list(members), "delta": delta, "carries": carries},
        )

    carry = carries[0]
    shifted = field.translate(delta - carry * domain.size).canonical()
    return FieldShift(shifted, carry)


def shift_expression(expression: CronExpression, offset: int | Duration) -> CronExpression:
    """Return *expression* with its firings moved by *offset* minutes.

    Pure function: the input expression is never modified.

    Raises:
        NonRepresentableShiftException: If no single cron expression expresses
            the shifted firings.
    """
    total = offset.total_minutes if isinstance(offset, Duration) else offset
    source = expression.canonical()
    if total == 0:
        return source

    parts = OffsetParts.from_minutes(total)
    # A wrapping "*" hands mixed carries upward; only "*" fields above can take them.
    days_any = source.day_of_month.is_any and source.month.is_any and source.day_of_week.is_any
    hours_any = source.hour.is_any and days_any
    try:
        minute = shift_field(source.minute, parts.minutes, absorb=hours_any)
        hour = shift_field(source.hour, parts.hours + minute.carry, absorb=days_any)
        day_delta = parts.days + hour.carry
        day = shift_field(source.day_of_month, day_delta, absorb=source.month.is_any)
        month = shift_field(source.month, day.carry)
        # An any-month absorbs its carry; anything left would cross into another year.
        if month.carry != 0:
            raise NonRepresentableShiftException(
                f"shift by {total} minutes carries {month.carry} year(s) past month field '{source.month}'",
                context={"field": "month", "carry": month.carry},
            )
        # Day-of-week is shifted on its own; weeks carry into nothing.
        weekday = shift_field(source.day_of_week, day_delta)
    except NonRepresentableShiftException as exc:
        exc.context.setdefault("expression", str(source))
        exc.context.setdefault("offset", total)
        logger.debug("cron_shift_refused", expression=str(source), offset=total, error=str(exc))
        raise

    result = CronExpression(minute.field, hour.field, day.field, month.field, weekday.field)
    logger.debug(
        "cron_shift_applied",
        expression=str(source),
        offset=total,
        days=parts.days,
        hours=parts.hours,
        minutes=parts.minutes,
        result=str(result),
    )
    return result
