import logging
import subprocess
import time
from typing import Mapping

from nansi.config import TaskDescriptor, TaskList
from nansi.report import Reporter, Status
from nansi.templating import render_argument

from .types import OutputDecodeError, RunResult, TaskOutcome

logger = logging.getLogger(__name__)


def spawn_error_text(exc: OSError | ValueError) -> str:
    if not isinstance(exc, OSError) or exc.errno is None or exc.strerror is None:
        return str(exc)
    return f"{exc.strerror} (os error {exc.errno})"


class Executor:
    def __init__(
        self,
        reporter: Reporter | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.reporter = reporter or Reporter()
        self.environ = environ

    def run(self, task_list: TaskList) -> RunResult:
        self.reporter.source(task_list.source)

        duplicates = task_list.duplicate_labels()
        if duplicates:
            self.reporter.duplicates(duplicates)

        outcomes: list[TaskOutcome] = []
        succeeded: list[str] = []
        succeeded_set: set[str] = set()

        for position, task in enumerate(task_list, start=1):
            if not all(prereq in succeeded_set for prereq in task.prerequisites):
                logger.debug("skipping %s, succeeded so far: %s", task.reference(position), succeeded)
                outcomes.append(TaskOutcome(position, task, Status.SKIP))
                if task.report_status:
                    self.reporter.status(position, task, Status.SKIP)
                self.reporter.unmet(position, task)
                continue

            outcome = self._run_task(position, task)
            outcomes.append(outcome)

            if outcome.status is Status.OK and task.label and task.label not in succeeded_set:
                succeeded.append(task.label)
                succeeded_set.add(task.label)

            if task.report_status:
                self.reporter.status(position, task, outcome.status)

            if task.report_output:
                self.reporter.output(outcome.output)

        return RunResult(task_list.source, outcomes, duplicates, succeeded)

    def _run_task(self, position: int, task: TaskDescriptor) -> TaskOutcome:
        arguments = tuple(render_argument(arg, self.environ) for arg in task.arguments)
        argv = [task.program, *arguments]
        logger.debug("spawning %s: %s", task.reference(position), argv)

        start = time.monotonic()
        try:
            result = subprocess.run(argv, capture_output=True)
        except (OSError, ValueError) as exc:
            duration = time.monotonic() - start
            logger.debug("could not spawn %s: %r", task.program, exc)
            return TaskOutcome(
                position,
                task,
                Status.FAIL,
                arguments,
                returncode=None,
                output=spawn_error_text(exc),
                duration_s=duration,
            )
        duration = time.monotonic() - start

        logger.debug(
            "%s exited with %d after %.3fs", task.reference(position), result.returncode, duration
        )

        if result.returncode == 0:
            status, stream = Status.OK, result.stdout
        else:
            status, stream = Status.FAIL, result.stderr

        try:
            output = stream.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise OutputDecodeError(task.reference(position), task.program, exc) from exc

        return TaskOutcome(
            position,
            task,
            status,
            arguments,
            returncode=result.returncode,
            output=output,
            duration_s=duration,
        )
