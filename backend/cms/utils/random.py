"""
Random test data.

Names are machine-safe (lowercase letters and digits, starting with a
letter) so they can double as content type or user names. With unique=True
a generator never returns the same value twice.
"""

import random as _random
import string as _string
from typing import Optional, Set

MAXIMUM_TRIES = 100

_NAME_FIRST = _string.ascii_lowercase
_NAME_REST = _string.ascii_lowercase + _string.digits
# Printable ASCII, space included
_PRINTABLE = "".join(chr(code) for code in range(32, 127))

_WORDS = (
    "abbas", "abdo", "abico", "abigo", "abluo", "accumsan", "acsi", "ad", "adipiscing", "aliquam",
    "aliquip", "amet", "antehabeo", "appellatio", "aptent", "at", "augue", "autem", "bene", "blandit",
    "brevitas", "caecus", "camur", "capto", "causa", "cogo", "comis", "commodo", "commoveo", "consectetuer",
    "consequat", "conventio", "cui", "damnum", "decet", "defui", "diam", "dignissim", "distineo", "dolor",
    "dolore", "dolus", "duis", "ea", "eligo", "elit", "enim", "erat", "eros", "esca",
    "esse", "et", "eu", "euismod", "eum", "ex", "exerci", "exputo", "facilisi", "facilisis",
)


class RandomGenerationError(RuntimeError):
    """Raised when a unique value cannot be produced within MAXIMUM_TRIES"""

    pass


class Random:
    def __init__(self, seed: Optional[int] = None):
        self._rng = _random.Random(seed)
        self._names: Set[str] = set()
        self._strings: Set[str] = set()

    def _unique(self, seen: Set[str], make) -> str:
        for _ in range(MAXIMUM_TRIES):
            value = make()
            if value not in seen:
                seen.add(value)
                return value
        raise RandomGenerationError(f"Unable to generate a unique random value after {MAXIMUM_TRIES} tries")

    def name(self, length: int = 8, unique: bool = False) -> str:
        """Random machine name of the given length"""
        if length < 1:
            raise ValueError("length must be >= 1")

        def make() -> str:
            first = self._rng.choice(_NAME_FIRST)
            return first + "".join(self._rng.choice(_NAME_REST) for _ in range(length - 1))

        if unique:
            return self._unique(self._names, make)
        return make()

    def string(self, length: int = 8, unique: bool = False) -> str:
        """Random printable ASCII string without leading or trailing spaces"""

        def make() -> str:
            chars = [self._rng.choice(_PRINTABLE) for _ in range(length)]
            # Keep the ends non-blank so the value survives trimming
            for index in (0, length - 1):
                if length and chars[index] == " ":
                    chars[index] = self._rng.choice(_NAME_REST)
            return "".join(chars)

        if unique:
            return self._unique(self._strings, make)
        return make()

    def sentences(self, min_words: int, capitalize: bool = True) -> str:
        """Space separated filler words ending in a period"""
        words = [self._rng.choice(_WORDS) for _ in range(max(min_words, 1))]
        text = " ".join(words)
        if capitalize:
            text = text[0].upper() + text[1:]
        return text + "."
