from .render import render_argument, scan_references
from .types import TemplateError, UnbalancedReferenceError, UndefinedVariableError

__all__ = [
    "render_argument",
    "scan_references",
    "TemplateError",
    "UnbalancedReferenceError",
    "UndefinedVariableError",
]
