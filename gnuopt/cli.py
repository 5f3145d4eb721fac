"""A small command that exercises the option scanner and echoes what it finds.

It scans short options with the option string ``abc:d:0123456789`` in
POSIX order and prints one line per option. Digits given in more than one
argument element are reported. Whatever is left after the options is
printed as a list of non-option elements.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from .parser import Getopt

__all__ = ["main", "OPTSTRING"]

OPTSTRING = "abc:d:0123456789"
_DEFAULT_PROG = "gnuopt"


def _describe(key: object, optarg: Optional[str]) -> Optional[str]:
    if key in ("a", "b"):
        return f"option {key}"
    if key == "c":
        return f"option c with value '{optarg}'"
    if key == "?":
        return None
    code = ord(key) if isinstance(key, str) else int(key)
    return f"?? getopt returned character code 0{code:o} ??"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Scan ARGV (the arguments after the program name) and print the options."""
    if argv is None:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else _DEFAULT_PROG
        args = list(sys.argv[1:])
    else:
        prog = _DEFAULT_PROG
        args = list(argv)

    scanner = Getopt([prog, *args], OPTSTRING, posixly_correct=True)
    digit_optind = 0

    while True:
        this_option_optind = scanner.optind or 1
        result = scanner.next_option()
        if result is None:
            break
        key, optarg = result

        if isinstance(key, str) and key.isdigit() and len(key) == 1:
            if digit_optind != 0 and digit_optind != this_option_optind:
                print("digits occur in two different argv-elements.")
            digit_optind = this_option_optind
            print(f"option {key}")
            continue

        line = _describe(key, optarg)
        if line is not None:
            print(line)

    operands = scanner.operands()
    if operands:
        print("non-option ARGV-elements: " + "".join(f"{arg} " for arg in operands))

    return 0


if __name__ == "__main__":
    sys.exit(main())