"""Nansi - run a NansiFile's commands in order, gated on earlier successes."""

__version__ = "0.1.0"

from nansi.config import TaskDescriptor, TaskList, load_task_list
from nansi.errors import NansiError
from nansi.executor import Executor, RunResult, Status
from nansi.templating import render_argument

__all__ = [
    "__version__",
    "Executor",
    "NansiError",
    "RunResult",
    "Status",
    "TaskDescriptor",
    "TaskList",
    "load_task_list",
    "render_argument",
]
