from .args import build_parser
from .commands import main, run_cli

__all__ = ["build_parser", "main", "run_cli"]
