from __future__ import annotations

from typing import MutableSequence, TypeVar

from .errors import EntropySourceUnavailable, InvalidLength, NoCategorySelected
from .models import MAX_LENGTH, MIN_LENGTH, CharacterCategory, GenerationOptions
from .randomness import RandomSource, SystemRandomSource


T = TypeVar("T")


def clamp_length(value: int) -> int:
    return max(MIN_LENGTH, min(MAX_LENGTH, int(value)))


def validate_options(options: GenerationOptions) -> tuple[CharacterCategory, ...]:
    categories = options.categories
    if not categories:
        raise NoCategorySelected()
    if options.length < MIN_LENGTH or options.length > MAX_LENGTH:
        raise InvalidLength(options.length)
    return categories


def combined_alphabet(categories: tuple[CharacterCategory, ...]) -> str:
    return "".join(category.alphabet for category in categories)


def draw_index(source: RandomSource, upper: int) -> int:
    index = source.randbelow(upper)
    if not 0 <= index < upper:
        raise EntropySourceUnavailable(f"Random source returned {index!r}, expected a value in [0, {upper}).")
    return index


def fisher_yates_shuffle(items: MutableSequence[T], source: RandomSource) -> MutableSequence[T]:
    """Shuffle ``items`` in place and return it."""
    for i in range(len(items) - 1, 0, -1):
        j = draw_index(source, i + 1)
        items[i], items[j] = items[j], items[i]
    return items


class PasswordGenerator:
    def __init__(self, source: RandomSource | None = None) -> None:
        self.source = source if source is not None else SystemRandomSource()

    def generate(self, options: GenerationOptions) -> str:
        """Build a password of ``options.length`` characters.

        One character is taken from each of the first ``min(k, length)``
        enabled categories in Uppercase, Lowercase, Digit, Symbol order; the
        remaining slots are filled from the union of the enabled alphabets and
        the whole sequence is shuffled.
        """
        categories = validate_options(options)
        pool = combined_alphabet(categories)
        required_count = min(len(categories), options.length)

        required = [self._pick(category.alphabet) for category in categories[:required_count]]
        fisher_yates_shuffle(required, self.source)

        filler = [self._pick(pool) for _ in range(options.length - required_count)]
        chars = fisher_yates_shuffle(required + filler, self.source)
        return "".join(chars)

    def _pick(self, alphabet: str) -> str:
        return alphabet[draw_index(self.source, len(alphabet))]


def generate_password(options: GenerationOptions, source: RandomSource | None = None) -> str:
    return PasswordGenerator(source).generate(options)
