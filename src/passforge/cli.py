import argparse
import sys

from loguru import logger

from passforge.charset import build_char_set, parse_exclude_chars
from passforge.config import config
from passforge.entities import PasswordArgs, PasswordError
from passforge.generator import generate_passwords, make_rng
from passforge.output import (
    column_count,
    copy_to_clipboard,
    print_columns,
    render_json,
)
from passforge.pattern import parse_pattern
from passforge.validation import validate_args


BANNER = f"""
==============================================
  passforge {config.software_version} - random password generator
=============================================="""

EXAMPLES = """Examples:
  passforge 5                               # Generate 5 passwords
  passforge 10 --length 20                  # Generate 10 passwords of length 20
  passforge 25 --table                      # Generate 25 passwords in table format
  passforge 5 --capitals-off                # Generate without capital letters
  passforge 5 --exclude-chars a-z,0-9       # Exclude ranges of characters
  passforge 5 --exclude-chars a,b,c         # Exclude specific characters
  passforge 5 --numerals-off --symbols-off  # Only alphabetic characters
  passforge 3 --pattern LLUUNNSS            # Fixed positional layout"""


def _comma_separated(values: list[str] | None) -> list[str]:
    tokens: list[str] = []
    for value in values or []:
        tokens.extend(value.split(","))
    return tokens


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="A fast and customizable password generator",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {config.software_version}"
    )
    parser.add_argument("password_count", type=int, help="Number of passwords to generate")
    parser.add_argument("-c", "--capitals-off", action="store_true", help="Disable capital letters")
    parser.add_argument("-n", "--numerals-off", action="store_true", help="Disable numerals")
    parser.add_argument("-s", "--symbols-off", action="store_true", help="Disable symbols")
    parser.add_argument(
        "-e",
        "--exclude-chars",
        action="append",
        help="Exclude specific characters or ranges (repeatable, comma-separated)",
    )
    parser.add_argument(
        "--include-chars",
        action="append",
        help="Include only these characters or ranges (overrides character type flags)",
    )
    parser.add_argument("--min-capitals", type=_non_negative_int, help="Minimum number of capital letters")
    parser.add_argument("--min-numerals", type=_non_negative_int, help="Minimum number of numerals")
    parser.add_argument("--min-symbols", type=_non_negative_int, help="Minimum number of symbols")
    parser.add_argument(
        "-l", "--length", type=int, default=config.default_length, help="Length of the password"
    )
    parser.add_argument("-t", "--table", action="store_true", help="Print passwords in a table format")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress header output")
    parser.add_argument("--seed", type=int, help="Seed for reproducible passwords")
    parser.add_argument(
        "--format", choices=["text", "json"], default=config.default_format, help="Output format"
    )
    parser.add_argument("--copy", action="store_true", help="Copy first password to clipboard")
    parser.add_argument(
        "--pattern",
        help="Pattern for generation (L=lowercase, U=uppercase, N=numeric, S=symbol), e.g. LLLNNNSSS",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if not args.quiet and args.format != "json":
        print(BANNER)

    try:
        exclude_chars = parse_exclude_chars(_comma_separated(args.exclude_chars))
    except PasswordError as e:
        print(f"Error parsing exclude characters: {e}", file=sys.stderr)
        return 1

    include_chars = None
    if args.include_chars:
        try:
            include_chars = parse_exclude_chars(_comma_separated(args.include_chars))
        except PasswordError as e:
            print(f"Error parsing include characters: {e}", file=sys.stderr)
            return 1

    pattern = None
    if args.pattern is not None:
        try:
            pattern = parse_pattern(args.pattern)
        except PasswordError as e:
            print(f"Error parsing pattern: {e}", file=sys.stderr)
            return 1

    effective_length = len(pattern) if pattern is not None else args.length

    password_args = PasswordArgs(
        capitals_off=args.capitals_off,
        numerals_off=args.numerals_off,
        symbols_off=args.symbols_off,
        exclude_chars=exclude_chars,
        include_chars=include_chars,
        min_capitals=args.min_capitals,
        min_numerals=args.min_numerals,
        min_symbols=args.min_symbols,
        pattern=pattern,
        length=effective_length,
        password_count=args.password_count,
    )

    try:
        validate_args(password_args)
        char_set = build_char_set(password_args)
    except PasswordError as e:
        logger.debug(f"Rejected request: {type(e).__name__}")
        print(e, file=sys.stderr)
        return 1

    rng = make_rng(args.seed)
    passwords = generate_passwords(char_set, password_args.generation_params(), rng)

    if args.copy and passwords:
        copy_to_clipboard(passwords[0], quiet=args.quiet)

    if args.format == "json":
        print(render_json(passwords, effective_length, len(char_set)))
    elif args.table:
        print_columns(passwords, column_count(args.password_count), show_header=not args.quiet)
    else:
        print_columns(passwords, 1, show_header=False)

    return 0


if __name__ == "__main__":
    sys.exit(main())
