from loguru import logger

from passforge.charset import build_char_set
from passforge.entities import (
    AllTypesDisabledError,
    EmptyCharacterSetError,
    InvalidCountError,
    InvalidLengthError,
    InvalidLengthTooLongError,
    PasswordArgs,
)


MAX_PASSWORD_LENGTH = 10_000


def validate_args(args: PasswordArgs) -> None:
    """
    Check bounds before any generation happens.

    Raises:
        InvalidLengthError: length is below 1
        InvalidLengthTooLongError: length is above MAX_PASSWORD_LENGTH
        InvalidCountError: password_count is below 1
        AllTypesDisabledError: capitals, numerals and symbols are all off and
            every lowercase letter is excluded too
    """
    if args.length < 1:
        raise InvalidLengthError()

    if args.length > MAX_PASSWORD_LENGTH:
        raise InvalidLengthTooLongError()

    if args.password_count < 1:
        raise InvalidCountError()

    if args.all_types_disabled:
        try:
            build_char_set(args)
        except EmptyCharacterSetError as e:
            raise AllTypesDisabledError() from e

    logger.debug(
        f"Validated request: length={args.length}, count={args.password_count}"
    )
