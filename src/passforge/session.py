from __future__ import annotations

import logging

from .errors import InvalidLength, NoCategorySelected
from .models import DEFAULT_OPTIONS, GenerationOptions, StrengthResult
from .passwords import PasswordGenerator, clamp_length
from .strength import score_password


LOGGER = logging.getLogger(__name__)


class PasswordSession:
    """Current options, password and strength for an interactive caller."""

    def __init__(self, options: GenerationOptions = DEFAULT_OPTIONS, generator: PasswordGenerator | None = None) -> None:
        self.generator = generator or PasswordGenerator()
        self.options = options.with_length(clamp_length(options.length))
        self.password = ""

    @property
    def strength(self) -> StrengthResult | None:
        if not self.password:
            return None
        return score_password(self.password, self.options)

    def update_options(self, options: GenerationOptions, regenerate: bool = False) -> GenerationOptions:
        self.options = options.with_length(clamp_length(options.length))
        if regenerate:
            self.regenerate()
        return self.options

    def regenerate(self) -> str:
        try:
            self.password = self.generator.generate(self.options)
        except (InvalidLength, NoCategorySelected) as exc:
            LOGGER.error("Failed to generate password: %s", exc)
            self.password = ""
        return self.password
