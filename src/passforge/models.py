from __future__ import annotations

import string
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Iterable


MIN_LENGTH = 4
MAX_LENGTH = 50

SYMBOL_CHARS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class CharacterCategory(Enum):
    """Character classes in the fixed order they are consulted for coverage."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digits"
    SYMBOL = "symbols"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]


_ALPHABETS = {
    CharacterCategory.UPPERCASE: string.ascii_uppercase,
    CharacterCategory.LOWERCASE: string.ascii_lowercase,
    CharacterCategory.DIGIT: string.digits,
    CharacterCategory.SYMBOL: SYMBOL_CHARS,
}


@dataclass(frozen=True)
class GenerationOptions:
    length: int
    uppercase: bool = False
    lowercase: bool = False
    digits: bool = False
    symbols: bool = False

    @property
    def categories(self) -> tuple[CharacterCategory, ...]:
        return tuple(category for category in CharacterCategory if self.is_enabled(category))

    def is_enabled(self, category: CharacterCategory) -> bool:
        return bool(getattr(self, category.value))

    def with_length(self, length: int) -> "GenerationOptions":
        return replace(self, length=length)

    def with_category(self, category: CharacterCategory, enabled: bool) -> "GenerationOptions":
        return replace(self, **{category.value: enabled})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "GenerationOptions":
        length = payload["length"]
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError(f"length must be an integer, got {length!r}")
        flags = {}
        for category in CharacterCategory:
            value = payload.get(category.value, False)
            if not isinstance(value, bool):
                raise ValueError(f"{category.value} must be true or false, got {value!r}")
            flags[category.value] = value
        return cls(length=length, **flags)

    @classmethod
    def from_categories(cls, length: int, categories: Iterable[CharacterCategory]) -> "GenerationOptions":
        flags = {category.value: True for category in categories}
        return cls(length=length, **flags)


DEFAULT_OPTIONS = GenerationOptions(length=10, uppercase=True, lowercase=True, digits=True, symbols=False)


@dataclass(frozen=True)
class StrengthResult:
    level: int
    label: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
