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
"""CronMath — chainable cron arithmetic with sticky, deferred errors.

Usage::

    cm = CronMath("0 9 * * *").add(minutes(30)).sub(hours(1))
    if cm.error() is None:
        print(cm.string())  # "30 8 * * *"

``add``/``sub`` only accumulate a signed minute total; the shift is
computed once against that total when the string or the error is read.
"""

from __future__ import annotations

from cronmath.expression.cron import CronExpression, parse_expression
from cronmath.expression.duration import Duration
from cronmath.expression.shifter import shift_expression
from cronmath.kernel.exceptions import CronMathException, NonRepresentableShiftException

ERROR_SENTINEL = ""


class CronMath:
    """A parsed cron expression plus a pending offset.

    Errors never raise out of the chainable methods. A parse failure or an
    unrepresentable shift is stored and returned by :meth:`error`; once set
    it is never cleared, ``add``/``sub`` become no-ops and :meth:`string`
    returns an empty string.

    Not safe for concurrent mutation; separate instances share nothing.
    """

    def __init__(self, expression: str) -> None:
        self._source = expression
        self._expression: CronExpression | None = None
        self._offset = 0
        self._error: CronMathException | None = None
        self._materialized: tuple[int, str] | None = None
        try:
            self._expression = parse_expression(expression)
        except CronMathException as exc:
            self._error = exc

    @property
    def source(self) -> str:
        return self._source

    @property
    def offset(self) -> int:
        """Pending offset in minutes."""
        return self._offset

    def add(self, duration: Duration) -> CronMath:
        if self._error is None:
            self._offset += duration.total_minutes
        return self

    def sub(self, duration: Duration) -> CronMath:
        return self.add(-duration)

    def string(self) -> str:
        """Return the shifted expression, or ``""`` if in an error state."""
        self._materialize()
        if self._error is not None or self._materialized is None:
            return ERROR_SENTINEL
        return self._materialized[1]

    def error(self) -> CronMathException | None:
        """Return the stored error, materializing the pending shift first."""
        self._materialize()
        return self._error

    def raise_for_error(self) -> CronMath:
        """Raise the stored error, if any; otherwise return ``self``."""
        error = self.error()
        if error is not None:
            raise error
        return self

    def _materialize(self) -> None:
        if self._error is not None or self._expression is None:
            return
        if self._materialized is not None and self._materialized[0] == self._offset:
            return
        try:
            shifted = shift_expression(self._expression, self._offset)
        except NonRepresentableShiftException as exc:
            self._error = exc
            return
        self._materialized = (self._offset, str(shifted))

    def __str__(self) -> str:
        return self.string()

    def __repr__(self) -> str:
        return f"CronMath({self._source!r}, offset={self._offset}, error={self._error!r})"
