from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from nansi.errors import NansiError


@dataclass(frozen=True)
class TaskDescriptor:
    program: str
    label: str = ""
    arguments: tuple[str, ...] = ()
    report_status: bool = True
    report_output: bool = False
    prerequisites: tuple[str, ...] = ()

    def reference(self, position: int) -> str:
        if self.label:
            return f"[{position}][{self.label}]"
        return f"[{position}]"


@dataclass(frozen=True)
class TaskList:
    tasks: tuple[TaskDescriptor, ...] = field(default_factory=tuple)
    source: str = ""

    def __iter__(self):
        yield from self.tasks

    def __len__(self):
        return len(self.tasks)

    def labels(self) -> list[str]:
        return [task.label for task in self.tasks if task.label]

    def duplicate_labels(self) -> list[str]:
        counts = Counter(self.labels())
        return sorted(label for label, n in counts.items() if n > 1)


class ConfigError(NansiError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
