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
"""Cron field model: positional domains, field variants and the field grammar.

A cron field is a constrained set of integers drawn from its positional
domain. The variants below keep the syntactic shape of the source token
(``*``, ``5``, ``1,3``, ``9-17``, ``*/15``) while exposing the same
set-semantics through :meth:`CronField.values`.

Canonical emission rules (see :meth:`CronField.canonical`):

- a field covering its whole domain emits ``*``
- a field with exactly one member emits the bare integer
- a contiguous run of two or more members emits ``lo-hi``
- a step whose progression runs off the end of the domain emits ``*/k``
  or ``base/k``; a bounded step emits ``lo-hi/k``
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from cronmath.kernel.exceptions import CronParseException

_INT_RE = re.compile(r"[0-9]+")
_RANGE_RE = re.compile(r"([0-9]+)-([0-9]+)")
_STEP_RE = re.compile(r"(\*|[0-9]+|[0-9]+-[0-9]+)/([0-9]+)")


@dataclass(frozen=True)
class FieldDomain:
    """Inclusive integer domain of one positional cron field."""

    name: str
    minimum: int
    maximum: int

    @property
    def size(self) -> int:
        return self.maximum - self.minimum + 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.minimum <= value <= self.maximum

    def values(self) -> range:
        return range(self.minimum, self.maximum + 1)


MINUTE = FieldDomain("minute", 0, 59)
HOUR = FieldDomain("hour", 0, 23)
DAY_OF_MONTH = FieldDomain("day_of_month", 1, 31)
MONTH = FieldDomain("month", 1, 12)
DAY_OF_WEEK = FieldDomain("day_of_week", 0, 6)  # 0 = Sunday

DOMAINS: tuple[FieldDomain, ...] = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)


# =============================================================================
# Field variants
# =============================================================================


@dataclass(frozen=True)
class CronField:
    """Base for all field variants. Subclasses are immutable value objects."""

    domain: FieldDomain

    def values(self) -> tuple[int, ...]:
        """Return the members of the field in ascending order."""
        raise NotImplementedError

    def emit(self) -> str:
        """Render the field in its variant's source form."""
        raise NotImplementedError

    def translate(self, offset: int) -> CronField:
        """Return the same shape moved by *offset*.

        The caller guarantees every moved member stays inside the domain.
        """
        raise NotImplementedError

    @property
    def is_any(self) -> bool:
        return False

    def canonical(self) -> CronField:
        """Return the canonical variant for this field's value-set."""
        members = self.values()
        if len(members) == self.domain.size:
            return AnyField(self.domain)
        if len(members) == 1:
            return SingleField(self.domain, members[0])
        if _is_contiguous(members):
            return RangeField(self.domain, members[0], members[-1])
        return self._canonical_shape(members)

    def _canonical_shape(self, members: tuple[int, ...]) -> CronField:
        return ListField(self.domain, members)

    def __str__(self) -> str:
        return self.canonical().emit()

    def __len__(self) -> int:
        return len(self.values())


@dataclass(frozen=True)
class AnyField(CronField):
    """``*``: every value of the domain."""

    def values(self) -> tuple[int, ...]:
        return tuple(self.domain.values())

    def emit(self) -> str:
        return "*"

    def translate(self, offset: int) -> CronField:
        return self

    @property
    def is_any(self) -> bool:
        return True

    def canonical(self) -> CronField:
        return self


@dataclass(frozen=True)
class SingleField(CronField):
    """A single bare integer."""

    value: int

    def values(self) -> tuple[int, ...]:
        return (self.value,)

    def emit(self) -> str:
        return str(self.value)

    def translate(self, offset: int) -> CronField:
        return SingleField(self.domain, self.value + offset)


@dataclass(frozen=True)
class ListField(CronField):
    """``a,b,c``: an ascending, duplicate-free set of values."""

    members: tuple[int, ...]

    def values(self) -> tuple[int, ...]:
        return self.members

    def emit(self) -> str:
        return ",".join(str(v) for v in self.members)

    def translate(self, offset: int) -> CronField:
        return ListField(self.domain, tuple(v + offset for v in self.members))


@dataclass(frozen=True)
class RangeField(CronField):
    """``lo-hi``: a contiguous inclusive subrange."""

    low: int
    high: int

    def values(self) -> tuple[int, ...]:
        return tuple(range(self.low, self.high + 1))

    def emit(self) -> str:
        return f"{self.low}-{self.high}"

    def translate(self, offset: int) -> CronField:
        return RangeField(self.domain, self.low + offset, self.high + offset)


@dataclass(frozen=True)
class StepField(CronField):
    """``*/k``, ``base/k`` or ``lo-hi/k``: an arithmetic progression.

    ``end`` bounds the progression; for the unbounded source forms it is the
    domain maximum.
    """

    start: int
    step: int
    end: int

    def values(self) -> tuple[int, ...]:
        return tuple(range(self.start, self.end + 1, self.step))

    def emit(self) -> str:
        last = self.values()[-1]
        if last + self.step > self.domain.maximum:
            if self.start == self.domain.minimum:
                return f"*/{self.step}"
            return f"{self.start}/{self.step}"
        return f"{self.start}-{last}/{self.step}"

    def translate(self, offset: int) -> CronField:
        last = self.values()[-1]
        return StepField(self.domain, self.start + offset, self.step, last + offset)

    def _canonical_shape(self, members: tuple[int, ...]) -> CronField:
        return StepField(self.domain, members[0], self.step, members[-1])


def _is_contiguous(members: tuple[int, ...]) -> bool:
    return members[-1] - members[0] == len(members) - 1


def field_from_values(domain: FieldDomain, values: Iterable[int]) -> CronField:
    """Build the canonical field for an arbitrary set of in-domain values."""
    members = tuple(sorted(set(values)))
    if not members:
        raise ValueError(f"{domain.name} field cannot be empty")
    outside = [v for v in members if v not in domain]
    if outside:
        raise ValueError(f"{domain.name} values {outside} outside {domain.minimum}-{domain.maximum}")
    return ListField(domain, members).canonical()


# =============================================================================
# Grammar
# =============================================================================


def parse_field(token: str, domain: FieldDomain) -> CronField:
    """Parse a single field token against its positional domain.

    Grammar, applied in order: ``*``; ``*/k``, ``a/k`` or ``a-b/k``;
    ``a-b``; ``a,b,...``; a bare integer.

    Raises:
        CronParseException: On an unknown token shape, an out-of-domain
            integer, an inverted range, a zero stride or an empty list element.
    """
    if token == "*":
        return AnyField(domain)

    step_match = _STEP_RE.fullmatch(token)
    if step_match:
        base, step_text = step_match.groups()
        step = int(step_text)
        if step < 1:
            raise _error(f"{domain.name} step must be at least 1 in '{token}'", token, domain)
        if base == "*":
            return StepField(domain, domain.minimum, step, domain.maximum)
        range_match = _RANGE_RE.fullmatch(base)
        if range_match:
            low, high = _parse_bounds(range_match, token, domain)
            return StepField(domain, low, step, high)
        return StepField(domain, _parse_value(base, token, domain), step, domain.maximum)

    range_match = _RANGE_RE.fullmatch(token)
    if range_match:
        low, high = _parse_bounds(range_match, token, domain)
        return RangeField(domain, low, high)

    if "," in token:
        parts = token.split(",")
        if any(part == "" for part in parts):
            raise _error(f"empty list element in {domain.name} field '{token}'", token, domain)
        members = sorted({_parse_value(part, token, domain) for part in parts})
        if len(members) == 1:
            return SingleField(domain, members[0])
        return ListField(domain, tuple(members))

    return SingleField(domain, _parse_value(token, token, domain))


def _parse_bounds(match: re.Match[str], token: str, domain: FieldDomain) -> tuple[int, int]:
    low = _parse_value(match.group(1), token, domain)
    high = _parse_value(match.group(2), token, domain)
    if low > high:
        raise _error(f"{domain.name} range '{token}' is not ascending", token, domain)
    return low, high


def _parse_value(text: str, token: str, domain: FieldDomain) -> int:
    if not _INT_RE.fullmatch(text):
        raise _error(f"invalid {domain.name} field '{token}'", token, domain)
    value = int(text)
    if value not in domain:
        raise _error(
            f"{domain.name} value {value} out of range {domain.minimum}-{domain.maximum}",
            token,
            domain,
        )
    return value


def _error(message: str, token: str, domain: FieldDomain) -> CronParseException:
    return CronParseException(message, context={"field": domain.name, "token": token})
