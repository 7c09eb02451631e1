from __future__ import annotations

import random
import secrets
from typing import Protocol, Sequence

from loguru import logger

from passforge.charset import category_subset
from passforge.entities import CharacterCategory, GenerationParams


class RandomSource(Protocol):
    """Uniform range sampling plus in-place shuffling, advanced as one stream."""

    def randrange(self, stop: int) -> int: ...

    def shuffle(self, x: list) -> None: ...


def make_rng(seed: int | None = None) -> RandomSource:
    """Seeded `random.Random` for reproducible output, otherwise the OS CSPRNG."""
    if seed is not None:
        return random.Random(seed)
    return secrets.SystemRandom()


def _pick(pool: Sequence[int], rng: RandomSource) -> int:
    return pool[rng.randrange(len(pool))]


def _as_text(values: Sequence[int]) -> str:
    return bytes(values).decode("latin-1")


def generate_password_from_pattern(
    char_set: bytes,
    pattern: Sequence[CharacterCategory],
    rng: RandomSource,
) -> str:
    """
    One character per pattern position, drawn from the matching category.

    A category missing from `char_set` falls back to the whole character set
    rather than failing.
    """
    subsets = {
        category: category_subset(char_set, category) for category in CharacterCategory
    }

    chars: list[int] = []
    for category in pattern:
        pool = subsets[category] or char_set
        chars.append(_pick(pool, rng))

    return _as_text(chars)


def generate_password_with_minimums(
    char_set: bytes,
    length: int,
    min_capitals: int | None,
    min_numerals: int | None,
    min_symbols: int | None,
    rng: RandomSource,
) -> str:
    """
    Satisfy the minimums first, fill up to `length` from the whole set, then shuffle.

    Minimums win over `length`: if they add up to more than `length` the
    password is that long instead. A minimum whose category is absent from
    `char_set` contributes nothing.
    """
    requirements: list[tuple[CharacterCategory, int | None]] = [
        (CharacterCategory.UPPERCASE, min_capitals),
        (CharacterCategory.NUMERIC, min_numerals),
        (CharacterCategory.SYMBOL, min_symbols),
    ]

    chars: list[int] = []
    for category, minimum in requirements:
        if not minimum:
            continue
        pool = category_subset(char_set, category)
        if not pool:
            logger.warning(
                f"Minimum of {minimum} {category} characters cannot be met: "
                "none are in the character set"
            )
            continue
        chars.extend(_pick(pool, rng) for _ in range(minimum))

    while len(chars) < length:
        chars.append(_pick(char_set, rng))

    rng.shuffle(chars)

    return _as_text(chars)


def generate_passwords(
    char_set: bytes,
    params: GenerationParams,
    rng: RandomSource,
) -> list[str]:
    """Generate `params.count` passwords sequentially from a single `rng` stream."""
    logger.debug(
        f"Generating {params.count} passwords "
        f"({'pattern' if params.uses_pattern else 'minimums'} mode) "
        f"from {len(char_set)} characters"
    )

    passwords: list[str] = []
    for _ in range(params.count):
        if params.pattern is not None:
            password = generate_password_from_pattern(char_set, params.pattern, rng)
        else:
            password = generate_password_with_minimums(
                char_set,
                params.length,
                params.min_capitals,
                params.min_numerals,
                params.min_symbols,
                rng,
            )
        passwords.append(password)

    return passwords
