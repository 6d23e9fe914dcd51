"""Severity levels for conlog."""

from enum import Enum


class Severity(Enum):
    """The seven fixed logging levels, each carrying its 3-letter label."""

    DEBUG = "dbg"
    INFO = "inf"
    IMPORTANT = "imp"
    WARNING = "war"
    ERROR = "err"
    FATAL = "!!!"
    SUCCESS = "+++"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Look up a severity by name or label, case-insensitively.

        Examples:
            "error" -> Severity.ERROR
            "war" -> Severity.WARNING
        """
        key = name.strip()
        try:
            return cls[key.upper()]
        except KeyError:
            pass
        for level in cls:
            if level.label == key.lower():
                return level
        raise ValueError(f"Unknown severity: {name!r}")
