from __future__ import annotations

import json

from rich.console import Console
from rich.text import Text

from nansi.config import TaskDescriptor, TaskList

from .types import Status

DUPLICATES_WARNING = (
    "The following aliases are duplicated which may cause issues with conditional execution:"
)


class Reporter:
    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def _write(self, text: str) -> None:
        self.console.file.write(text + "\n")
        self.console.file.flush()

    def _token(self, status: Status, rest: str) -> None:
        # Only the token goes through Rich; the rest is written verbatim
        self.console.print(
            Text.assemble("[", (status.token, status.style), "]"),
            end="",
            soft_wrap=True,
            highlight=False,
        )
        self._write(" " + rest)

    def source(self, path: str) -> None:
        self._write(f"Using NansiFile: {path}")

    def duplicates(self, labels: list[str]) -> None:
        self._token(Status.WARN, DUPLICATES_WARNING)
        self._write(json.dumps(labels, ensure_ascii=False))

    def status(self, position: int, task: TaskDescriptor, status: Status) -> None:
        self._token(status, describe(position, task))

    def unmet(self, position: int, task: TaskDescriptor) -> None:
        self._write(f"Prerequisites for item {task.reference(position)} are not met.")

    def output(self, text: str) -> None:
        self._write(text)

    def plan(self, task_list: TaskList) -> None:
        self.source(task_list.source)
        for position, task in enumerate(task_list, start=1):
            line = describe(position, task)
            if task.prerequisites:
                line += f" (requires: {', '.join(task.prerequisites)})"
            self._write(line)


def describe(position: int, task: TaskDescriptor) -> str:
    return f"{task.reference(position)} {task.program} {' '.join(task.arguments)}"
