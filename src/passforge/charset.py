"""Character-set construction: token/range parsing, category classification
and the alphabet builder."""

from typing import Iterable

from loguru import logger

from passforge.entities import (
    CharacterCategory,
    EmptyCharacterSetError,
    InvalidRangeError,
    PasswordArgs,
)


LOWERCASE_RANGE = range(ord("a"), ord("z") + 1)
UPPERCASE_RANGE = range(ord("A"), ord("Z") + 1)
NUMERAL_RANGE = range(ord("0"), ord("9") + 1)
SYMBOL_RANGES: tuple[range, ...] = (
    range(33, 48),  # ! .. /
    range(58, 65),  # : .. @
    range(91, 97),  # [ .. `
    range(123, 127),  # { .. ~
)

PRINTABLE_FIRST = 32
PRINTABLE_LAST = 126


def classify_byte(value: int) -> CharacterCategory:
    if value in LOWERCASE_RANGE:
        return CharacterCategory.LOWERCASE
    if value in UPPERCASE_RANGE:
        return CharacterCategory.UPPERCASE
    if value in NUMERAL_RANGE:
        return CharacterCategory.NUMERIC
    return CharacterCategory.SYMBOL


def category_subset(alphabet: bytes, category: CharacterCategory) -> bytes:
    """
    Return the bytes of `alphabet` belonging to `category`.

    Letters and digits are enumerated over their fixed ASCII range, so the
    result is in range order and free of duplicates. Symbols are taken from
    the alphabet itself in alphabet order, keeping any duplicates.
    """
    match category:
        case CharacterCategory.LOWERCASE:
            return bytes(b for b in LOWERCASE_RANGE if b in alphabet)
        case CharacterCategory.UPPERCASE:
            return bytes(b for b in UPPERCASE_RANGE if b in alphabet)
        case CharacterCategory.NUMERIC:
            return bytes(b for b in NUMERAL_RANGE if b in alphabet)
        case CharacterCategory.SYMBOL:
            return bytes(
                b for b in alphabet if classify_byte(b) == CharacterCategory.SYMBOL
            )
        case _:
            raise ValueError(f"Unknown CharacterCategory: {category}")


def _range_endpoints(token: str) -> tuple[int, int] | None:
    # Multi-byte characters never form a range.
    if len(token) != 3 or token[1] != "-" or not token.isascii():
        return None
    return ord(token[0]), ord(token[2])


def parse_exclude_chars(tokens: Iterable[str]) -> list[str]:
    """
    Expand raw exclusion/inclusion tokens into an ordered list of characters.

    A token of the form ``X-Y`` with both endpoints printable ASCII expands to
    every character from X to Y inclusive. Anything else is split into its
    characters, skipping ones already collected.

    Raises:
        InvalidRangeError: for a range-shaped token whose start is after its end.
    """
    chars: list[str] = []

    for token in tokens:
        endpoints = _range_endpoints(token)
        if endpoints is not None:
            start, end = endpoints
            if start <= end and start >= PRINTABLE_FIRST and end <= PRINTABLE_LAST:
                chars.extend(chr(b) for b in range(start, end + 1))
                continue
            if start > end:
                raise InvalidRangeError(token, token[0], token[2])

        for c in token:
            if c not in chars:
                chars.append(c)

    return chars


def _to_byte(char: str) -> int:
    # Single-byte alphabet; wider code points keep their low byte.
    return ord(char) & 0xFF


def _default_alphabet(args: PasswordArgs) -> list[int]:
    chars: list[int] = list(LOWERCASE_RANGE)

    if not args.capitals_off:
        chars.extend(UPPERCASE_RANGE)

    if not args.numerals_off:
        chars.extend(NUMERAL_RANGE)

    if not args.symbols_off:
        for symbol_range in SYMBOL_RANGES:
            chars.extend(symbol_range)

    return chars


def build_char_set(args: PasswordArgs) -> bytes:
    """Build the alphabet for `args`, raising EmptyCharacterSetError if nothing is left."""
    if args.include_chars:
        chars = [_to_byte(c) for c in args.include_chars]
    else:
        chars = _default_alphabet(args)

    exclude_set: set[str] = set(args.exclude_chars)
    alphabet = bytes(b for b in chars if chr(b) not in exclude_set)

    if not alphabet:
        raise EmptyCharacterSetError()

    logger.debug(f"Built character set of {len(alphabet)} characters")
    return alphabet

