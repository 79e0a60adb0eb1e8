from .loader import load_task_list
from .types import ConfigError, TaskDescriptor, TaskList, UnsupportedConfigFormatError

__all__ = [
    "load_task_list",
    "TaskDescriptor",
    "TaskList",
    "ConfigError",
    "UnsupportedConfigFormatError",
]
