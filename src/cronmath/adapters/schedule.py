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
"""Named cron schedules defined as a base expression plus adjustments."""

from __future__ import annotations

import structlog
from pydantic import BaseModel, ConfigDict, Field

from cronmath.adapters.operations import Operation, apply_operations

logger = structlog.get_logger("cronmath.adapters")


class CronSchedule(BaseModel):
    """A schedule such as "nightly backup, 30 minutes after the base job".

    Usage::

        schedule = CronSchedule(
            name="backup",
            base_cron="0 2 * * *",
            adjustments=[{"type": "add", "value": 30, "unit": "minutes"}],
        )
        schedule.final_cron()  # "30 2 * * *"
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    base_cron: str
    description: str | None = None
    adjustments: list[Operation] = Field(default_factory=list)

    @property
    def id(self) -> str:
        return f"cron_{self.name}"

    def final_cron(self) -> str:
        """Recompute the adjusted expression.

        Raises:
            CronMathException: If the base expression, an adjustment or the
                resulting shift is invalid.
        """
        cm = apply_operations(self.base_cron, self.adjustments).raise_for_error()
        final = cm.string()
        logger.debug("cron_schedule_calculated", id=self.id, base_cron=self.base_cron, final_cron=final)
        return final

    def to_state(self) -> dict[str, object]:
        """Return the schedule as a flat record including the computed fields."""
        state = self.model_dump()
        state["id"] = self.id
        state["final_cron"] = self.final_cron()
        return state
