from enum import IntEnum, auto


class ProgrammingLanguage(IntEnum):
    """Programming language enum."""
    UNKNOWN = -1
    PYTHON = auto()
    TEXT = auto()
