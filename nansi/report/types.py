from enum import Enum


class Status(Enum):
    OK = ("OK", "bright_green")
    FAIL = ("FAIL", "bright_red")
    WARN = ("WARN", "bright_yellow")
    SKIP = ("SKIP", "yellow")

    def __init__(self, token: str, style: str) -> None:
        self.token = token
        self.style = style
