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
"""Loosely typed add/sub operations as supplied by configuration or the CLI.

The core only accepts typed :class:`~cronmath.expression.duration.Duration`
values; this module maps unit and operation strings onto it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Literal

import structlog
from pydantic import BaseModel, ConfigDict

from cronmath.expression.duration import Duration, hours, minutes
from cronmath.expression.facade import CronMath
from cronmath.kernel.exceptions import InvalidOperationException, InvalidUnitException

logger = structlog.get_logger("cronmath.adapters")

MINUTE_UNITS = frozenset({"minutes", "minute", "min", "m"})
HOUR_UNITS = frozenset({"hours", "hour", "hr", "h"})

Unit = Literal["minutes", "hours"]


def resolve_unit(unit: str) -> Unit:
    """Map a unit alias onto ``"minutes"`` or ``"hours"``.

    Raises:
        InvalidUnitException: For anything other than the accepted aliases.
    """
    if unit in MINUTE_UNITS:
        return "minutes"
    if unit in HOUR_UNITS:
        return "hours"
    raise InvalidUnitException(
        f"Unit must be 'minutes' or 'hours', got '{unit}'",
        context={"unit": unit},
    )


class Operation(BaseModel):
    """One ``add``/``sub`` step: ``{"type": "add", "value": 30, "unit": "minutes"}``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str
    value: int
    unit: str

    def duration(self) -> Duration:
        if resolve_unit(self.unit) == "hours":
            return hours(self.value)
        return minutes(self.value)

    def apply_to(self, cm: CronMath) -> CronMath:
        """Apply this operation to *cm* and return it.

        Raises:
            InvalidUnitException: If the unit is not recognised.
            InvalidOperationException: If the type is neither ``add`` nor ``sub``.
        """
        duration = self.duration()
        if self.type == "add":
            return cm.add(duration)
        if self.type == "sub":
            return cm.sub(duration)
        raise InvalidOperationException(
            f"Operation type must be 'add' or 'sub', got '{self.type}'",
            context={"type": self.type},
        )


def coerce_operations(operations: Iterable[Operation | dict]) -> list[Operation]:
    return [op if isinstance(op, Operation) else Operation.model_validate(op) for op in operations]


def apply_operations(expression: str, operations: Sequence[Operation]) -> CronMath:
    """Build a :class:`CronMath` for *expression* and apply *operations* in order.

    Errors from the expression itself stay deferred on the returned object;
    adapter errors (bad unit or type) raise immediately.
    """
    logger.debug("processing_cron_expression", input=expression, operations_count=len(operations))
    cm = CronMath(expression)
    for index, op in enumerate(operations):
        logger.debug("applying_operation", index=index, type=op.type, value=op.value, unit=op.unit)
        cm = op.apply_to(cm)
    return cm
