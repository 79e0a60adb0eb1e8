from .reporter import DUPLICATES_WARNING, Reporter, describe
from .types import Status

__all__ = ["DUPLICATES_WARNING", "Reporter", "Status", "describe"]
