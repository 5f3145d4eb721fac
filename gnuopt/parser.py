"""Command-line option scanning in the GNU style.

Options may be interleaved with operands. By default the scanner permutes
its copy of the argument vector so that all options come first and the
operands follow. A leading '+' in the option string (or POSIX mode) stops
at the first operand, and a leading '-' reports each operand in place.

Short options are described by an option string: a character followed by
':' takes a required argument, by '::' an optional one, and "W;" makes
``-W name`` stand for ``--name``. A leading ':' (after any '+' or '-')
silences diagnostics and makes a missing argument report ':' instead of
'?'. Long options are described by :class:`~gnuopt.longopts.LongOption`.

Each call to :meth:`Getopt.next_option` reports one item as a pair
``(key, optarg)``:

* a short option character, with its argument or None;
* a long option's ``val``, or 0 when the option stores its value in
  :attr:`Getopt.flags`;
* 1 with the operand itself, for operands reported in place;
* '?' for an unknown option or a misused argument, or ':' for a missing
  argument when the option string starts with ':'.

When scanning is over it returns None, and :attr:`Getopt.optind` is the
index of the first operand.
"""

from __future__ import annotations

import enum
import os
import sys
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, TextIO, Tuple

from .longopts import (
    AmbiguousOptionError,
    HasArg,
    LongOption,
    match_long_option,
    split_name_value,
)

__all__ = ["Ordering", "Getopt", "getopt"]

Result = Tuple[Any, Optional[str]]


class Ordering(enum.Enum):
    """How operands mixed with options are handled."""

    REQUIRE_ORDER = "require"
    PERMUTE = "permute"
    RETURN_IN_ORDER = "in-order"


class Getopt:
    """A stateful scanner over one argument vector.

    ``argv[0]`` is the program name and is never scanned. The scanner works
    on its own copy of ``argv``, available as :attr:`argv`, which it
    permutes as it goes.
    """

    def __init__(
        self,
        argv: Iterable[str],
        optstring: str,
        longopts: Optional[Iterable[LongOption]] = None,
        long_only: bool = False,
        posixly_correct: bool = False,
        opterr: bool = True,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.argv: List[str] = list(argv)
        self.longopts: Optional[Tuple[LongOption, ...]] = (
            None if longopts is None else tuple(longopts)
        )
        self.long_only = long_only
        self.posixly_correct = posixly_correct
        self.opterr = opterr
        self.stderr = stderr

        self.optind = 1
        self.optarg: Optional[str] = None
        self.optopt: Any = "?"
        self.longind: Optional[int] = None
        self.flags: Dict[Hashable, Any] = {}

        self._raw_optstring = optstring
        self._optstring = optstring
        self._nextchar: Optional[str] = None
        self._first_nonopt = 1
        self._last_nonopt = 1
        self.ordering = Ordering.PERMUTE
        self._initialize()

    # -- setup -----------------------------------------------------------

    def _initialize(self) -> None:
        self._first_nonopt = self._last_nonopt = self.optind
        self._nextchar = None
        posix = self.posixly_correct or "POSIXLY_CORRECT" in os.environ
        optstring = self._raw_optstring
        if optstring.startswith("-"):
            self.ordering = Ordering.RETURN_IN_ORDER
            optstring = optstring[1:]
        elif optstring.startswith("+"):
            self.ordering = Ordering.REQUIRE_ORDER
            optstring = optstring[1:]
        elif posix:
            self.ordering = Ordering.REQUIRE_ORDER
        else:
            self.ordering = Ordering.PERMUTE
        self._optstring = optstring

    # -- helpers ---------------------------------------------------------

    def _error(self, enabled: bool, message: str) -> None:
        if enabled:
            stream = self.stderr if self.stderr is not None else sys.stderr
            stream.write(message)

    @property
    def _prog(self) -> str:
        return self.argv[0]

    def _is_nonoption(self, index: int) -> bool:
        arg = self.argv[index]
        return not arg.startswith("-") or arg == "-"

    def _exchange(self) -> None:
        """Move the options scanned since the skipped operands before them."""
        first, last, top = self._first_nonopt, self._last_nonopt, self.optind
        self.argv[first:top] = self.argv[last:top] + self.argv[first:last]
        self._first_nonopt += top - last
        self._last_nonopt = top

    def _missing_code(self) -> str:
        return ":" if self._optstring.startswith(":") else "?"

    def _finish_long(self, option: LongOption, index: int) -> Result:
        self._nextchar = ""
        self.longind = index
        if option.flag is not None:
            self.flags[option.flag] = option.val
            return 0, self.optarg
        return option.val, self.optarg

    # -- scanning --------------------------------------------------------

    def next_option(self) -> Optional[Result]:
        """Scan the next item; return ``(key, optarg)`` or None at the end."""
        argv = self.argv
        argc = len(argv)
        if argc < 1:
            return None
        self.optarg = None

        if self.optind == 0:
            self.optind = 1
            self._initialize()
        optstring = self._optstring
        print_errors = self.opterr and not optstring.startswith(":")

        if not self._nextchar:
            if self._last_nonopt > self.optind:
                self._last_nonopt = self.optind
            if self._first_nonopt > self.optind:
                self._first_nonopt = self.optind

            if self.ordering is Ordering.PERMUTE:
                if (
                    self._first_nonopt != self._last_nonopt
                    and self._last_nonopt != self.optind
                ):
                    self._exchange()
                elif self._last_nonopt != self.optind:
                    self._first_nonopt = self.optind
                while self.optind < argc and self._is_nonoption(self.optind):
                    self.optind += 1
                self._last_nonopt = self.optind

            if self.optind != argc and argv[self.optind] == "--":
                self.optind += 1
                if (
                    self._first_nonopt != self._last_nonopt
                    and self._last_nonopt != self.optind
                ):
                    self._exchange()
                elif self._first_nonopt == self._last_nonopt:
                    self._first_nonopt = self.optind
                self._last_nonopt = argc
                self.optind = argc

            if self.optind == argc:
                if self._first_nonopt != self._last_nonopt:
                    self.optind = self._first_nonopt
                return None

            if self._is_nonoption(self.optind):
                if self.ordering is Ordering.REQUIRE_ORDER:
                    return None
                self.optarg = argv[self.optind]
                self.optind += 1
                return 1, self.optarg

            arg = argv[self.optind]
            skip = 2 if self.longopts is not None and arg[1] == "-" else 1
            self._nextchar = arg[skip:]

        arg = argv[self.optind]
        if self.longopts is not None and (
            arg[1] == "-"
            or (self.long_only and (len(arg) > 2 or arg[1] not in optstring))
        ):
            result = self._scan_long(arg, print_errors)
            if result is not None:
                return result

        return self._scan_short(print_errors)

    def _scan_long(self, arg: str, print_errors: bool) -> Optional[Result]:
        assert self.longopts is not None and self._nextchar is not None
        argv = self.argv
        nextchar = self._nextchar
        name, value = split_name_value(nextchar)
        try:
            match = match_long_option(self.longopts, name, self.long_only)
        except AmbiguousOptionError as exc:
            listed = "".join(f" '--{option.name}'" for option in exc.candidates)
            self._error(
                print_errors,
                f"{self._prog}: option '{arg}' is ambiguous; possibilities:{listed}\n",
            )
            self._nextchar = ""
            self.optind += 1
            self.optopt = 0
            return "?", None

        if match is not None:
            option = match.option
            self.optind += 1
            if value is not None:
                if option.has_arg:
                    self.optarg = value
                else:
                    used = argv[self.optind - 1]
                    if used[1] == "-":
                        shown = f"--{option.name}"
                    else:
                        shown = f"{used[0]}{option.name}"
                    self._error(
                        print_errors,
                        f"{self._prog}: option '{shown}' doesn't allow an argument\n",
                    )
                    self._nextchar = ""
                    self.optopt = option.val
                    return "?", None
            elif option.has_arg == HasArg.REQUIRED:
                if self.optind < len(argv):
                    self.optarg = argv[self.optind]
                    self.optind += 1
                else:
                    self._error(
                        print_errors,
                        f"{self._prog}: option '--{option.name}' requires an argument\n",
                    )
                    self._nextchar = ""
                    self.optopt = option.val
                    return self._missing_code(), None
            return self._finish_long(option, match.index)

        if (
            not self.long_only
            or arg[1] == "-"
            or not nextchar
            or nextchar[0] not in self._optstring
        ):
            if arg[1] == "-":
                shown = f"--{nextchar}"
            else:
                shown = f"{arg[0]}{nextchar}"
            self._error(print_errors, f"{self._prog}: unrecognized option '{shown}'\n")
            self._nextchar = ""
            self.optind += 1
            self.optopt = 0
            return "?", None
        return None

    def _scan_short(self, print_errors: bool) -> Result:
        argv = self.argv
        argc = len(argv)
        optstring = self._optstring
        assert self._nextchar
        c = self._nextchar[0]
        self._nextchar = self._nextchar[1:]
        pos = optstring.find(c)

        if not self._nextchar:
            self.optind += 1

        if pos < 0 or c in ":;":
            self._error(print_errors, f"{self._prog}: invalid option -- '{c}'\n")
            self.optopt = c
            return "?", None

        spec = optstring[pos + 1 : pos + 3]
        if c == "W" and spec.startswith(";"):
            return self._scan_w(c, print_errors)

        if spec.startswith(":"):
            if spec == "::":
                if self._nextchar:
                    self.optarg = self._nextchar
                    self.optind += 1
                else:
                    self.optarg = None
            else:
                if self._nextchar:
                    self.optarg = self._nextchar
                    self.optind += 1
                elif self.optind == argc:
                    self._error(
                        print_errors,
                        f"{self._prog}: option requires an argument -- '{c}'\n",
                    )
                    self.optopt = c
                    c = self._missing_code()
                else:
                    self.optarg = argv[self.optind]
                    self.optind += 1
            self._nextchar = None
        return c, self.optarg

    def _scan_w(self, c: str, print_errors: bool) -> Result:
        argv = self.argv
        argc = len(argv)
        if self.longopts is None:
            self._nextchar = None
            return "W", self.optarg

        if self._nextchar:
            self.optarg = self._nextchar
            self.optind += 1
        elif self.optind == argc:
            self._error(
                print_errors,
                f"{self._prog}: option requires an argument -- '{c}'\n",
            )
            self.optopt = c
            return self._missing_code(), None
        else:
            self.optarg = argv[self.optind]
            self.optind += 1

        word = self.optarg
        self._nextchar = word
        name, value = split_name_value(word)
        try:
            match = match_long_option(self.longopts, name, self.long_only)
        except AmbiguousOptionError:
            self._error(print_errors, f"{self._prog}: option '-W {word}' is ambiguous\n")
            self._nextchar = ""
            self.optind += 1
            return "?", None

        if match is None:
            self._nextchar = None
            return "W", self.optarg

        option = match.option
        if value is not None:
            if option.has_arg:
                self.optarg = value
            else:
                self._error(
                    print_errors,
                    f"{self._prog}: option '-W {option.name}' doesn't allow an argument\n",
                )
                self._nextchar = ""
                return "?", None
        elif option.has_arg == HasArg.REQUIRED:
            if self.optind < argc:
                self.optarg = argv[self.optind]
                self.optind += 1
            else:
                self._error(
                    print_errors,
                    f"{self._prog}: option '-W {option.name}' requires an argument\n",
                )
                self._nextchar = ""
                return self._missing_code(), None
        else:
            self.optarg = None
        return self._finish_long(option, match.index)

    # -- conveniences ----------------------------------------------------

    def __iter__(self) -> Iterator[Result]:
        while True:
            result = self.next_option()
            if result is None:
                return
            yield result

    def operands(self) -> List[str]:
        """The arguments from :attr:`optind` on: the operands once scanning ends."""
        return list(self.argv[self.optind :])


def getopt(argv: Iterable[str], optstring: str) -> Tuple[List[Result], List[str]]:
    """Scan short options in POSIX order; return the options and the operands."""
    scanner = Getopt(argv, optstring, posixly_correct=True)
    options = list(scanner)
    return options, scanner.operands()