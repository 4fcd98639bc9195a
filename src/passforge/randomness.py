from __future__ import annotations

import os
from typing import Callable, Protocol

from .errors import EntropySourceUnavailable


MAX_DRAW_ATTEMPTS = 256


class RandomSource(Protocol):
    def randbelow(self, upper: int) -> int:
        """Return a uniformly distributed integer in [0, upper)."""
        ...


class SystemRandomSource:
    """Unbiased bounded integers drawn from the operating system CSPRNG.

    Each draw reads just enough bytes to cover ``upper - 1``, masks off the
    excess high bits and rejects values that land at or above ``upper``.
    Any failure of the byte reader is reported as ``EntropySourceUnavailable``.
    """

    def __init__(self, read_bytes: Callable[[int], bytes] = os.urandom) -> None:
        self._read_bytes = read_bytes

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper bound must be positive")
        if upper == 1:
            return 0
        bits = (upper - 1).bit_length()
        size = (bits + 7) // 8
        mask = (1 << bits) - 1
        for _ in range(MAX_DRAW_ATTEMPTS):
            value = int.from_bytes(self._read(size), "big") & mask
            if value < upper:
                return value
        raise EntropySourceUnavailable(f"Random source produced no value below {upper} after {MAX_DRAW_ATTEMPTS} draws.")

    def _read(self, size: int) -> bytes:
        try:
            chunk = self._read_bytes(size)
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceUnavailable(f"Secure random source unavailable: {exc}") from exc
        if len(chunk) != size:
            raise EntropySourceUnavailable(f"Secure random source returned {len(chunk)} of {size} bytes.")
        return chunk
