class TuraError(Exception):
    """Base class for every fatal error raised while loading or running a machine."""


class ArgumentError(TuraError):
    pass


class TuraIOError(TuraError):
    def __init__(self, path, cause):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"could not read file {self.path}: {cause}")


class ConfigError(TuraError, ValueError):
    pass


class ParseError(TuraError):
    pass


class UnexpectedEof(ParseError):
    def __init__(self, position):
        self.position = position
        super().__init__(f"expected symbol, but reached end of input after {position} tokens")


class InvalidStep(ParseError):
    def __init__(self, found, position):
        self.found = found
        self.position = position
        super().__init__(f"expected R or L, but got {found} (token {position})")


class EmptyTapeError(TuraError):
    def __init__(self):
        super().__init__("tape is empty")


class OutOfBoundsError(TuraError):
    def __init__(self, head, step):
        self.head = head
        self.step = step
        super().__init__(f"head moved out of bounds (head={head}, step={step.value})")
