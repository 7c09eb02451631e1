from passforge.entities import CharacterCategory, InvalidPatternCharacterError


PATTERN_LETTERS: dict[str, CharacterCategory] = {
    "l": CharacterCategory.LOWERCASE,
    "u": CharacterCategory.UPPERCASE,
    "n": CharacterCategory.NUMERIC,
    "s": CharacterCategory.SYMBOL,
}


def parse_pattern(pattern: str) -> list[CharacterCategory]:
    """Compile e.g. ``"LLUNNS"`` into one CharacterCategory per position (case-insensitive)."""
    result: list[CharacterCategory] = []
    for c in pattern:
        category = PATTERN_LETTERS.get(c.lower())
        if category is None:
            raise InvalidPatternCharacterError(c)
        result.append(category)
    return result
