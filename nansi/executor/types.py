from __future__ import annotations

from dataclasses import dataclass

from nansi.config import TaskDescriptor
from nansi.errors import NansiError
from nansi.report import Status


@dataclass(frozen=True)
class TaskOutcome:
    position: int
    task: TaskDescriptor
    status: Status
    arguments: tuple[str, ...] = ()
    returncode: int | None = None
    output: str = ""
    duration_s: float = 0.0


@dataclass(frozen=True)
class RunResult:
    source: str
    outcomes: list[TaskOutcome]
    duplicates: list[str]
    succeeded_labels: list[str]

    @property
    def failed(self) -> list[int]:
        return [o.position for o in self.outcomes if o.status is Status.FAIL]

    @property
    def skipped(self) -> list[int]:
        return [o.position for o in self.outcomes if o.status is Status.SKIP]


class ExecutionError(NansiError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class OutputDecodeError(ExecutionError):
    def __init__(self, reference: str, program: str, exc: UnicodeDecodeError):
        super().__init__(f"Output of item {reference} ({program}) is not valid UTF-8: {exc}")
        self.reference = reference
        self.program = program
