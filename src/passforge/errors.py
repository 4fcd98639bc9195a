from __future__ import annotations

from .models import MAX_LENGTH, MIN_LENGTH


class GenerationError(Exception):
    pass


class InvalidLength(GenerationError, ValueError):
    def __init__(self, length: int, minimum: int = MIN_LENGTH, maximum: int = MAX_LENGTH) -> None:
        self.length = length
        self.min = minimum
        self.max = maximum
        super().__init__(f"Password length must be between {minimum} and {maximum} characters (got {length}).")


class NoCategorySelected(GenerationError, ValueError):
    def __init__(self) -> None:
        super().__init__("No character types selected.")


class EntropySourceUnavailable(GenerationError, RuntimeError):
    """The secure random source failed; no password may be produced."""
