"""Archive naming: human-traceable names with a short random suffix."""
from __future__ import annotations

import random
import re
import string
from typing import Optional, Protocol, Sequence

from constants import Constants

NAME_ALPHABET = string.ascii_lowercase + string.digits

_INVALID_CHARS = re.compile(r"[^-a-z0-9]")
_LEADING_NON_ALPHA = re.compile(r"^[^a-z]+")
_TRAILING_NON_ALNUM = re.compile(r"[^a-z0-9]+$")


class RandomStringProvider(Protocol):
    """Source of random alphanumeric suffixes."""

    def random_string(self, length: int) -> str:
        ...


class DefaultRandom:
    """Unseeded provider; suffixes only avoid collisions, they are not secrets."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def random_string(self, length: int) -> str:
        return "".join(self._rng.choice(NAME_ALPHABET) for _ in range(length))


class SeededRandom(DefaultRandom):
    """Deterministic provider for tests and reproducible runs."""

    def __init__(self, seed: int):
        super().__init__(random.Random(seed))


_default_provider = DefaultRandom()


def kubify_name(old: str) -> str:
    """Turn an arbitrary path into a lowercase DNS-label-safe name.

    >>> kubify_name("./fn.zip")
    'fn-zip'
    """
    name = _INVALID_CHARS.sub("-", old.lower())
    name = _LEADING_NON_ALPHA.sub("", name)
    name = _TRAILING_NON_ALNUM.sub("", name)
    return name[:Constants.NAME_MAX_LEN]


def archive_name(
    hint: Optional[str],
    inputs: Sequence[str],
    rng: Optional[RandomStringProvider] = None,
) -> str:
    """Name an archive.

    The hint wins, then the first input; with neither the name is purely random.
    Not idempotent: a fresh suffix is drawn on every call.
    """
    rng = rng or _default_provider
    if hint:
        return f"{hint}-{rng.random_string(Constants.NAME_SUFFIX_LEN)}"
    if not inputs:
        return rng.random_string(Constants.NAME_RANDOM_LEN)
    return f"{kubify_name(inputs[0])}-{rng.random_string(Constants.NAME_SUFFIX_LEN)}"
