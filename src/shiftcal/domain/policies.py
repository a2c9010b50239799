"""Policy definitions for deriving default schedules.

Days without user edits get a deterministic baseline: a rotating set of
colleagues and an occasional synthetic task. The generators are kept
separate from the deriver so they can be swapped or disabled and tested
independently. Determinism is the only hard requirement: the same date and
the same pool must always produce the same output.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Sequence

from shiftcal.domain.models import Task


class ColleagueRotation(ABC):
    """Abstract base class for colleague rotation policies."""

    @abstractmethod
    def colleagues_for(self, day: date, pool: Sequence[str]) -> list[str]:
        """Pick the colleagues working alongside the user on ``day``.

        Args:
            day: The calendar date.
            pool: Current colleague pool (duplicate-free, ordered).

        Returns:
            Deterministic list of names drawn from the pool.
        """
        pass


class TaskGenerator(ABC):
    """Abstract base class for synthetic default task generators."""

    @abstractmethod
    def tasks_for(self, key: str, day: date) -> list[Task]:
        """Get the default tasks for a day without stored tasks."""
        pass


@dataclass
class DefaultColleagueRotation(ColleagueRotation):
    """Circular rotation through the pool.

    Rotation size is ``short_size`` on days divisible by ``short_day_modulus``
    and ``long_size`` otherwise. The start index is
    ``(day_of_month * start_step) % len(pool)``; selection wraps around the
    end of the pool. A pool shorter than the rotation size yields each name
    once.
    """

    short_day_modulus: int = 4
    short_size: int = 2
    long_size: int = 3
    start_step: int = 2

    def colleagues_for(self, day: date, pool: Sequence[str]) -> list[str]:
        if not pool:
            return []

        day_of_month = day.day
        if day_of_month % self.short_day_modulus == 0:
            count = self.short_size
        else:
            count = self.long_size
        start_index = (day_of_month * self.start_step) % len(pool)

        picked: list[str] = []
        for offset in range(min(count, len(pool))):
            name = pool[(start_index + offset) % len(pool)]
            if name not in picked:
                picked.append(name)
        return picked


@dataclass
class NoColleagueRotation(ColleagueRotation):
    """Never derive colleagues."""

    def colleagues_for(self, day: date, pool: Sequence[str]) -> list[str]:
        return []


@dataclass
class PeriodicTaskGenerator(TaskGenerator):
    """Inject a handover-log task every ``period`` days of the month.

    Task ids are ``"{key}-task"`` so they stay unique within the day and
    stable across calls.
    """

    period: int = 6
    title: str = "更新交接日志"
    time_range: Optional[str] = "18:30"
    description: Optional[str] = "确保上一班遗留问题有处理反馈。"

    def tasks_for(self, key: str, day: date) -> list[Task]:
        if self.period <= 0 or day.day % self.period != 0:
            return []
        return [
            Task(
                id=f"{key}-task",
                title=self.title,
                time_range=self.time_range,
                description=self.description,
            )
        ]


@dataclass
class NoTaskGenerator(TaskGenerator):
    """Never derive tasks."""

    def tasks_for(self, key: str, day: date) -> list[Task]:
        return []


# Factory colleague pool. Empty in the shipped configuration.
FACTORY_COLLEAGUES: tuple[str, ...] = ()

DEMO_COLLEAGUES: tuple[str, ...] = (
    "李晓",
    "张明华",
    "王思雅",
    "蔡敏",
    "骆晓丹",
    "吴大雨",
    "诸葛靓",
    "庞觉",
    "陈意航",
    "周启航",
)

# Illustrative fixture dates. Keys follow the override field names.
DEMO_SEED_SCHEDULE: dict[str, dict[str, Any]] = {
    "2025-09-02": {
        "tasks": [
            Task(
                id="task-2025-09-02-1",
                title="复盘晨会纪要",
                time_range="09:00",
                description="整理班前会重点提醒内容。",
            ),
        ],
    },
    "2025-09-08": {
        "colleagues": ["李晓", "张明华", "王思雅", "蔡敏"],
        "notes": "今天整体排班较轻松，记得巡场时顺手检查物资。",
    },
    "2025-09-09": {
        "colleagues": ["骆晓丹", "吴大雨", "诸葛靓", "庞觉"],
        "tasks": [
            Task(
                id="task-1",
                title="校对字幕单",
                time_range="10:00 - 13:00",
                description="确保活动厅字幕模板全部更新，交接给下个班次。",
            ),
            Task(
                id="task-2",
                title="潜睡一会醒来继续鏖战",
                time_range="14:00 - 15:00",
                description="补充精力后梳理夜班值守 FAQ。",
            ),
            Task(
                id="task-3",
                title="喝水并远眺",
                time_range="19:00 - 20:00",
                description="伸展肩颈，缓解久坐疲劳。",
            ),
        ],
    },
    "2025-09-15": {
        "notes": "轮休日，去做一直想预约的体检。",
    },
    "2025-09-22": {
        "tasks": [
            Task(
                id="task-2025-09-22-1",
                title="月末库存盘点",
                time_range="17:00",
                description="与仓储组核对耗材数量。",
            ),
        ],
    },
}

# Years covered by the demo seed data
DEMO_SEED_YEARS: tuple[int, ...] = (2025,)
