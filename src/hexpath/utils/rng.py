"""Seedable random sources for hexpath.

Path reconstruction breaks ties between equally cheap predecessors by
shuffling candidates. To keep query results reproducible the random source
is injected rather than taken from the process-wide generator:

- Reproducibility: the same seed always yields the same shuffles
- Isolation: every pathfinder owns its generator, nothing is shared between
  threads unless the caller shares it
- Bug reproduction: a reported path can be replayed from its seed

Examples:
    >>> rng = seeded_random(generate_seed("skirmish", "layer-0"))
    >>> shuffle([1, 2, 3, 4, 5], rng)  # doctest: +SKIP
    [4, 1, 5, 3, 2]
"""

import hashlib
import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def generate_seed(*parts: object) -> str:
    """Generate a deterministic seed string from its components.

    Format: "part1:part2:..."

    Args:
        *parts: Components identifying the random stream (map name, purpose...)

    Returns:
        Seed string usable with :func:`seeded_random`

    Examples:
        >>> generate_seed("skirmish", 3)
        'skirmish:3'

    Raises:
        ValueError: If no parts are given
    """
    if not parts:
        raise ValueError("at least one seed part is required")
    return ":".join(str(part) for part in parts)


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    # Use first 8 bytes for a 64-bit integer
    return int.from_bytes(digest[:8], "big", signed=False)


def seeded_random(seed: str | None = None) -> random.Random:
    """Return a private random generator.

    Args:
        seed: Seed string; ``None`` seeds from operating system entropy

    Returns:
        A new ``random.Random`` instance
    """
    if seed is None:
        return random.Random()
    return random.Random(_seed_to_int(seed))


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``.

    The input is left untouched.

    Args:
        items: Sequence to permute
        rng: Random source; a fresh entropy-seeded generator when omitted

    Returns:
        New list holding the same items in random order
    """
    shuffled = list(items)
    (rng or seeded_random()).shuffle(shuffled)
    return shuffled
