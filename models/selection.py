from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from services.errors import InvalidParameterError


class Mode(str, Enum):
    """Generation strategy requested from the datasource."""

    PARTIAL = "partial"
    RANDOM = "random"
    COMPLETE = "complete"

    @classmethod
    def parse(cls, value: Union["Mode", str, None]) -> "Mode":
        if isinstance(value, cls):
            return value
        for member in cls:
            if value == member.value:
                return member
        raise InvalidParameterError("mode", value, [m.value for m in cls])


class Size(str, Enum):
    """Result-set size tier. Meaningless for Mode.COMPLETE."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def parse(cls, value: Union["Size", str, None]) -> Optional["Size"]:
        """Return the matching tier, or None when the value is blank."""
        if isinstance(value, cls):
            return value
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        for member in cls:
            if value == member.value:
                return member
        raise InvalidParameterError("size", value, [s.value for s in cls])


DEFAULT_SIZE = Size.SMALL
