"""Enum conversion utilities"""

from enum import Enum
from typing import Any, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


class EnumHelper:
    """
    Parse user / config / API strings back to enum members.

    Both member names and string values match, ignoring case and
    surrounding whitespace:
        EnumHelper.from_string(PatternID, " Police ")   # PatternID.POLICE
        EnumHelper.from_string(LogLevel, "warn")        # LogLevel.WARN
    """

    @staticmethod
    def from_string(enum_class: Type[E], name: Any, default: Optional[E] = None) -> E:
        """
        Args:
            enum_class: Enum class to parse into
            name: Member name or string value
            default: Returned when nothing matches (None = raise)

        Raises:
            ValueError: No member matches and no default was given
        """
        key = str(name).strip().lower()

        for member in enum_class:
            if member.name.lower() == key:
                return member
            if isinstance(member.value, str) and member.value.lower() == key:
                return member

        if default is not None:
            return default
        raise ValueError(f"Invalid {enum_class.__name__}: {name!r}")
