from .executor import Executor
from .types import ExecutionError, OutputDecodeError, RunResult, Status, TaskOutcome

__all__ = [
    "Executor",
    "ExecutionError",
    "OutputDecodeError",
    "RunResult",
    "Status",
    "TaskOutcome",
]
