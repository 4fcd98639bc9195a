from __future__ import annotations

from typing import Sized

from .models import GenerationOptions, StrengthResult


STRENGTH_LABELS = ("TOO WEAK", "WEAK", "MEDIUM", "STRONG", "VERY STRONG")


def variety_count(options: GenerationOptions) -> int:
    return len(options.categories)


def strength_level(length: int, variety: int) -> int:
    if length < 6:
        level = 0
    elif length < 8:
        level = 1 if variety >= 2 else 0
    elif length < 12:
        if variety >= 3:
            level = 2
        elif variety >= 2:
            level = 1
        else:
            level = 0
    elif length < 16:
        level = 3 if variety >= 3 else 2
    elif variety == 4:
        level = 4
    else:
        level = 3 if variety >= 3 else 2
    return max(0, min(level, len(STRENGTH_LABELS) - 1))


def score_length(length: int, options: GenerationOptions) -> StrengthResult:
    level = strength_level(length, variety_count(options))
    return StrengthResult(level=level, label=STRENGTH_LABELS[level])


def score_password(password: Sized, options: GenerationOptions) -> StrengthResult:
    """Rate a password by its length and the categories enabled in ``options``.

    Character content is not inspected; any length and any category set
    yields a result.
    """
    return score_length(len(password), options)
