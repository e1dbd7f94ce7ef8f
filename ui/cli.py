# ui/cli.py
from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from core.config import load_settings
from core.errors import PasswordError, RandomSourceUnavailable
from core.log_utils import setup_logging
from core.password_utils import GenerationRequest, generate_batch, selected_classes
from core.strength_utils import score_password


def build_parser(default_length: int) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="spg",
        description="Generate random passwords from the OS secure random source.",
    )
    ap.add_argument("-l", "--length", type=int, default=default_length, help=f"password length (default {default_length})")
    ap.add_argument("-n", "--count", type=int, default=1, help="how many passwords to print")
    ap.add_argument("--no-lower", action="store_true", help="leave out a-z")
    ap.add_argument("--no-upper", action="store_true", help="leave out A-Z")
    ap.add_argument("--no-digits", action="store_true", help="leave out 0-9")
    ap.add_argument("--symbols", action="store_true", help="include symbols")
    ap.add_argument("--allow-ambiguous", action="store_true", help="keep look-alike characters (i l 1 L o 0 O)")
    ap.add_argument("--strength", action="store_true", help="print the strength score next to each password")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"spg: configuration error: {e}", file=sys.stderr)
        return 2
    setup_logging(settings.log_level, settings.log_file)

    args = build_parser(settings.default_length).parse_args(argv)
    if not 1 <= args.count <= settings.max_quantity:
        print(f"spg: --count must be between 1 and {settings.max_quantity}", file=sys.stderr)
        return 2

    classes = selected_classes(
        use_lower=not args.no_lower,
        use_upper=not args.no_upper,
        use_digits=not args.no_digits,
        use_symbols=args.symbols,
    )
    request = GenerationRequest(args.length, classes, exclude_ambiguous=not args.allow_ambiguous)

    try:
        passwords = generate_batch(
            request,
            args.count,
            min_length=settings.min_length,
            max_length=settings.max_length,
        )
    except RandomSourceUnavailable as e:
        print(f"spg: {e}", file=sys.stderr)
        return 1
    except PasswordError as e:
        print(f"spg: {e}", file=sys.stderr)
        return 2

    for p in passwords:
        if args.strength:
            s = score_password(p)
            print(f"{p}\t{s.label} ({s.score}/100)")
        else:
            print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
