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
"""Exception hierarchy for cronmath.

All library exceptions inherit from CronMathException so callers can catch
one type, or a specific subclass for targeted handling.

Categories:
- CronParseException: malformed cron input
- NonRepresentableShiftException: a shift no single cron expression can express
- InvalidUnitException / InvalidOperationException: adapter-level input errors
"""

from __future__ import annotations


class CronMathException(Exception):
    """Base exception for all cronmath errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CRON_PARSE").
        context: Arbitrary key-value pairs describing the failing input.
    """

    default_code: str | None = None

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code if code is not None else self.default_code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Core Exceptions
# =============================================================================


class CronParseException(CronMathException):
    """Input is not a valid 5-field cron expression."""

    default_code = "CRON_PARSE"


class NonRepresentableShiftException(CronMathException):
    """The requested offset cannot be expressed as a single cron expression."""

    default_code = "CRON_NON_REPRESENTABLE"


# =============================================================================
# Adapter Exceptions
# =============================================================================


class AdapterException(CronMathException):
    """Errors raised while translating loosely typed operations into durations."""


class InvalidUnitException(AdapterException):
    """Unit string is not one of the accepted minute or hour aliases."""

    default_code = "INVALID_UNIT"


class InvalidOperationException(AdapterException):
    """Operation type is neither 'add' nor 'sub'."""

    default_code = "INVALID_OPERATION"
