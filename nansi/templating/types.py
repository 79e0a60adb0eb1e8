from nansi.errors import NansiError


class TemplateError(NansiError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnbalancedReferenceError(TemplateError):
    def __init__(self, raw: str, offset: int):
        super().__init__(f"Incorrect number of {{ in argument {raw!r} at offset {offset}")
        self.raw = raw
        self.offset = offset


class UndefinedVariableError(TemplateError):
    def __init__(self, name: str, raw: str):
        super().__init__(f"Environment variable {name!r} referenced by {raw!r} is not defined")
        self.name = name
        self.raw = raw
