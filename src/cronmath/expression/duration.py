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
"""Signed time offsets applied to cron expressions."""

from __future__ import annotations

from dataclasses import dataclass

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


@dataclass(frozen=True)
class Duration:
    """A signed whole number of minutes."""

    total_minutes: int

    def __post_init__(self) -> None:
        _require_int(self.total_minutes)

    @classmethod
    def of_minutes(cls, n: int) -> Duration:
        return cls(_require_int(n))

    @classmethod
    def of_hours(cls, n: int) -> Duration:
        return cls(_require_int(n) * MINUTES_PER_HOUR)

    def __neg__(self) -> Duration:
        return Duration(-self.total_minutes)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.total_minutes + other.total_minutes)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.total_minutes - other.total_minutes)

    def __str__(self) -> str:
        return f"{self.total_minutes}m"


def minutes(n: int) -> Duration:
    """Duration of *n* minutes (may be negative)."""
    return Duration.of_minutes(n)


def hours(n: int) -> Duration:
    """Duration of *n* hours, i.e. ``minutes(60 * n)``."""
    return Duration.of_hours(n)


def _require_int(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"duration magnitude must be an int, got {type(n).__name__}")
    return n
