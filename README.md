# gnuopt

GNU-style command-line option parsing for Python.

`gnuopt.parser.Getopt` scans an argument vector by the GNU rules:

- options and operands may be mixed; by default the scanner permutes its
  copy of the arguments so that all options come first;
- a leading `+` in the option string, `posixly_correct=True`, or a
  `POSIXLY_CORRECT` environment variable stops at the first operand;
- a leading `-` in the option string reports each operand in place, with
  the key `1`;
- `--` ends option processing;
- `x:` marks an option that requires an argument, `x::` one whose
  argument is optional, and `W;` makes `-W name` mean `--name`;
- long options may be abbreviated to any unambiguous prefix and take
  their argument as `--name=value` or in the next argument; with
  `long_only=True` a single `-` may also introduce them.

## Installing

```
pip install gnuopt
```

## Short options

`getopt` scans short options in POSIX order (stopping at the first
operand) and returns the options found and the remaining operands:

```python
from gnuopt.parser import getopt

options, operands = getopt(["prog", "-a", "-c", "value", "file"], "abc:")
# options  == [("a", None), ("c", "value")]
# operands == ["file"]
```

## Long options

```python
from gnuopt.longopts import HasArg, LongOption
from gnuopt.parser import Getopt

longopts = [
    LongOption("verbose", HasArg.NO, "v"),
    LongOption("output", HasArg.REQUIRED, "o"),
]
parser = Getopt(["prog", "--verb", "in.txt", "--output=out.txt"],
                "vo:", longopts)
for key, arg in parser:
    ...                    # ("v", None), then ("o", "out.txt")
print(parser.operands())   # ['in.txt']
```

Each call to `Getopt.next_option()` returns one `(key, optarg)` pair, or
`None` once scanning is over; `Getopt.optind` is then the index of the
first operand in `Getopt.argv`. The key is:

- the short option character;
- a long option's `val`, or `0` when the option has a `flag`, in which
  case `val` is stored in `Getopt.flags[flag]`;
- `1` for an operand reported in place;
- `"?"` for an unknown option, an ambiguous abbreviation or a misused
  argument, or `":"` for a missing argument when the option string
  starts with `:`.

After an error, `Getopt.optopt` holds the offending option; after a long
option, `Getopt.longind` holds its position in the table.

Diagnostics are written to the `stderr` stream given to `Getopt`
(standard error by default) and can be turned off with `opterr=False` or
a leading `:` in the option string.

## Helpers

- `gnuopt.longopts.match_long_option(longopts, name, long_only)` resolves
  a possibly abbreviated long option name, returning a `LongMatch` or
  `None`, and raising `AmbiguousOptionError` when the prefix selects
  options that behave differently. `split_name_value` splits `name=value`.
- `gnuopt.charclass` offers ASCII-only character classification and
  case mapping (`is_alpha`, `is_space`, `is_xdigit`, `to_upper`, …); each
  function takes an integer code point or a one-character string.
- `gnuopt.i18n` provides message lookup with plural forms and message
  contexts (`ngettext`, `pgettext`, `npgettext`, `context_key`,
  `gettext_noop`) over a plain mapping of translations. It does not read
  compiled message catalogs; without a mapping, or for a missing
  message, the original text is returned.

## Demo command

```
gnuopt-demo -a -c value -12 file1 file2
```

This scans its arguments with the option string `abc:d:0123456789` in
POSIX order, prints a line for each option it finds (and a note when
digits occur in two different argument elements), then lists the
remaining non-option elements.