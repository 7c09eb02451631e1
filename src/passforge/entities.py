from enum import StrEnum

from pydantic import BaseModel


class PasswordError(Exception):
    "Base class for every password generation failure."


class InvalidLengthError(PasswordError):
    def __str__(self) -> str:
        return "Error: Password length must be greater than 0."


class InvalidLengthTooLongError(PasswordError):
    def __str__(self) -> str:
        return "Error: Password length exceeds maximum of 10,000 characters."


class InvalidCountError(PasswordError):
    def __str__(self) -> str:
        return "Error: Password count must be greater than 0."


class EmptyCharacterSetError(PasswordError):
    def __str__(self) -> str:
        return (
            "Error: All characters have been excluded or disabled. Cannot generate passwords.\n"
            "Hint: Try removing some character exclusions or enabling character types."
        )


class AllTypesDisabledError(EmptyCharacterSetError):
    def __str__(self) -> str:
        return (
            "Error: All character types are disabled and/or all remaining characters are excluded.\n"
            "Hint: At least one character type must be enabled. "
            "Try removing --capitals-off, --numerals-off, or --symbols-off."
        )


class InvalidRangeError(PasswordError, ValueError):
    """Raised for a range token such as ``z-a`` whose start sorts after its end."""

    def __init__(self, token: str, start: str, end: str):
        self.token = token
        self.start = start
        self.end = end
        super().__init__(
            f"Invalid range '{token}': start character '{start}' "
            f"is greater than end character '{end}'"
        )


class InvalidPatternCharacterError(PasswordError, ValueError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"Invalid pattern character: '{char}'. "
            "Use L (lowercase), U (uppercase), N (numeric), S (symbol)"
        )


class CharacterCategory(StrEnum):
    """Category of a single alphabet byte. SYMBOL is anything not in the other three."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMERIC = "numeric"
    SYMBOL = "symbol"


class GenerationParams(BaseModel):
    length: int
    count: int
    min_capitals: int | None = None
    min_numerals: int | None = None
    min_symbols: int | None = None
    pattern: list[CharacterCategory] | None = None

    @property
    def uses_pattern(self) -> bool:
        return self.pattern is not None


class PasswordArgs(BaseModel):
    capitals_off: bool = False
    numerals_off: bool = False
    symbols_off: bool = False
    exclude_chars: list[str] = []
    include_chars: list[str] | None = None
    min_capitals: int | None = None
    min_numerals: int | None = None
    min_symbols: int | None = None
    pattern: list[CharacterCategory] | None = None
    length: int = 16
    password_count: int = 1

    @property
    def all_types_disabled(self) -> bool:
        return self.capitals_off and self.numerals_off and self.symbols_off

    def generation_params(self) -> GenerationParams:
        return GenerationParams(
            length=self.length,
            count=self.password_count,
            min_capitals=self.min_capitals,
            min_numerals=self.min_numerals,
            min_symbols=self.min_symbols,
            pattern=self.pattern,
        )
