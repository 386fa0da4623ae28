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
"""Five-field cron expression value object and its parser."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import structlog

from cronmath.expression.fields import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DOMAINS,
    HOUR,
    MINUTE,
    MONTH,
    CronField,
    parse_field,
)
from cronmath.kernel.exceptions import CronParseException

logger = structlog.get_logger("cronmath.expression")


@dataclass(frozen=True)
class CronExpression:
    """Parsed cron expression: ``minute hour day-of-month month day-of-week``."""

    minute: CronField
    hour: CronField
    day_of_month: CronField
    month: CronField
    day_of_week: CronField

    def __post_init__(self) -> None:
        for field, domain in zip(self.fields, DOMAINS, strict=True):
            if field.domain != domain:
                raise ValueError(f"{domain.name} position holds a {field.domain.name} field")

    @classmethod
    def parse(cls, text: str) -> CronExpression:
        return parse_expression(text)

    @property
    def fields(self) -> tuple[CronField, ...]:
        return (self.minute, self.hour, self.day_of_month, self.month, self.day_of_week)

    def canonical(self) -> CronExpression:
        return CronExpression(*(field.canonical() for field in self.fields))

    def replace(self, **changes: CronField) -> CronExpression:
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        return " ".join(str(field) for field in self.fields)


def parse_expression(text: str) -> CronExpression:
    """Parse a standard 5-field cron string.

    Runs of whitespace separate fields; leading and trailing whitespace is
    ignored. ``@`` macros and comments are rejected.

    Raises:
        CronParseException: If the string is not a valid 5-field expression.
    """
    stripped = text.strip()
    if stripped.startswith("@"):
        raise _parse_failed(f"cron macros are not supported: '{stripped}'", text)
    if stripped.startswith("#"):
        raise _parse_failed("comments are not cron expressions", text)

    tokens = stripped.split()
    if len(tokens) != len(DOMAINS):
        raise _parse_failed(
            f"expected {len(DOMAINS)} fields (minute hour day month weekday), got {len(tokens)}",
            text,
        )

    try:
        minute, hour, day, month, weekday = (
            parse_field(token, domain)
            for token, domain in zip(tokens, (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK), strict=True)
        )
    except CronParseException as exc:
        exc.context.setdefault("expression", text)
        logger.debug("cron_parse_failed", expression=text, error=str(exc))
        raise

    expression = CronExpression(minute, hour, day, month, weekday)
    logger.debug("cron_expression_parsed", expression=text, canonical=str(expression))
    return expression


def _parse_failed(message: str, text: str) -> CronParseException:
    logger.debug("cron_parse_failed", expression=text, error=message)
    return CronParseException(message, context={"expression": text})
