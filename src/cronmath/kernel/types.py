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
"""Error classification and the diagnostic record surfaced by adapters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cronmath.kernel.exceptions import (
    CronMathException,
    CronParseException,
    InvalidOperationException,
    InvalidUnitException,
    NonRepresentableShiftException,
)


class ErrorCategory(Enum):
    """Classifies an error by where it originates."""

    PARSE = "PARSE"
    NON_REPRESENTABLE = "NON_REPRESENTABLE"
    ADAPTER = "ADAPTER"
    UNKNOWN = "UNKNOWN"


_SUMMARIES: dict[type[CronMathException], tuple[str, ErrorCategory]] = {
    InvalidUnitException: ("Invalid Unit", ErrorCategory.ADAPTER),
    InvalidOperationException: ("Invalid Operation", ErrorCategory.ADAPTER),
    CronParseException: ("Calculation Error", ErrorCategory.PARSE),
    NonRepresentableShiftException: ("Calculation Error", ErrorCategory.NON_REPRESENTABLE),
}


@dataclass(frozen=True)
class Diagnostic:
    """A labelled error for display: a short summary plus the error text verbatim."""

    summary: str
    detail: str
    category: ErrorCategory = ErrorCategory.UNKNOWN

    @classmethod
    def from_exception(cls, exc: CronMathException) -> Diagnostic:
        for exc_type, (summary, category) in _SUMMARIES.items():
            if isinstance(exc, exc_type):
                return cls(summary=summary, detail=str(exc), category=category)
        return cls(summary="Calculation Error", detail=str(exc))

    def to_dict(self) -> dict[str, str]:
        return {
            "summary": self.summary,
            "detail": self.detail,
            "category": self.category.value,
        }
