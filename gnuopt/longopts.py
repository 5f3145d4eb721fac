"""Long option descriptions and the rules for matching them by name.

A long option may be given in full or abbreviated to any prefix that
selects it unambiguously. A prefix that matches several options is only
ambiguous when those options would behave differently: options that share
the same argument policy, flag and value are interchangeable, and the
first of them is taken. In long-only mode every additional prefix match
counts as ambiguous.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Hashable, Iterable, Optional, Sequence, Tuple

__all__ = [
    "HasArg",
    "LongOption",
    "LongMatch",
    "AmbiguousOptionError",
    "split_name_value",
    "match_long_option",
]


class HasArg(enum.IntEnum):
    """Whether a long option takes an argument."""

    NO = 0
    REQUIRED = 1
    OPTIONAL = 2


@dataclass(frozen=True)
class LongOption:
    """One long option.

    ``val`` is what the parser reports when the option is found. When
    ``flag`` is set, the parser stores ``val`` under that key instead and
    reports 0.
    """

    name: str
    has_arg: HasArg = HasArg.NO
    val: Hashable = None
    flag: Optional[Hashable] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("a long option needs a non-empty name")
        object.__setattr__(self, "has_arg", HasArg(self.has_arg))

    def behaves_like(self, other: "LongOption") -> bool:
        """True when OTHER would be handled exactly like this option."""
        return (
            self.has_arg == other.has_arg
            and self.flag == other.flag
            and self.val == other.val
        )


@dataclass(frozen=True)
class LongMatch:
    """The option a name selected, its position in the table, and whether
    the name was spelled out in full."""

    option: LongOption
    index: int
    exact: bool


class AmbiguousOptionError(ValueError):
    """A name is a prefix of several options that behave differently."""

    def __init__(self, name: str, candidates: Sequence[LongOption]) -> None:
        self.name = name
        self.candidates: Tuple[LongOption, ...] = tuple(candidates)
        listed = " ".join(f"'--{option.name}'" for option in self.candidates)
        super().__init__(f"option '{name}' is ambiguous; possibilities: {listed}")


def split_name_value(text: str) -> Tuple[str, Optional[str]]:
    """Split ``name=value`` at the first '='.

    The value is None when there is no '=', and may be the empty string
    when the '=' ends the text.
    """
    name, sep, value = text.partition("=")
    return name, (value if sep else None)


def match_long_option(
    longopts: Iterable[LongOption], name: str, long_only: bool = False
) -> Optional[LongMatch]:
    """Find the option that NAME selects, exactly or as a prefix.

    Returns None when no option starts with NAME and raises
    AmbiguousOptionError when the prefix cannot be resolved. The error
    lists the first match followed by the conflicting ones, latest first.
    """
    found: Optional[LongOption] = None
    found_index = -1
    conflicting: list[LongOption] = []

    for index, option in enumerate(longopts):
        if not option.name.startswith(name):
            continue
        if len(option.name) == len(name):
            return LongMatch(option, index, True)
        if found is None:
            found, found_index = option, index
        elif long_only or not found.behaves_like(option):
            conflicting.append(option)

    if conflicting:
        assert found is not None
        raise AmbiguousOptionError(name, [found, *reversed(conflicting)])
    if found is None:
        return None
    return LongMatch(found, found_index, False)