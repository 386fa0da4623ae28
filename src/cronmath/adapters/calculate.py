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
"""One-shot calculation: input expression + operations -> shifted expression."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from cronmath.adapters.operations import Operation, apply_operations, coerce_operations

logger = structlog.get_logger("cronmath.adapters")


@dataclass(frozen=True)
class CalculationResult:
    input: str
    result: str
    operations_count: int

    @property
    def id(self) -> str:
        return f"{self.input}-{self.operations_count}"


def calculate(input: str, operations: Iterable[Operation | dict] = ()) -> CalculationResult:
    """Apply *operations* to the cron expression *input*.

    Operations may be :class:`Operation` instances or plain dicts with
    ``type``, ``value`` and ``unit`` keys.

    Raises:
        CronParseException: If *input* is not a valid cron expression.
        NonRepresentableShiftException: If the net shift cannot be expressed.
        InvalidUnitException / InvalidOperationException: For bad operations.
    """
    ops = coerce_operations(operations)
    cm = apply_operations(input, ops).raise_for_error()
    result = CalculationResult(input=input, result=cm.string(), operations_count=len(ops))
    logger.debug("cron_calculation_complete", input=input, result=result.result)
    return result
