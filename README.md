# tmplfuncs

Function namespaces meant to be exposed to a template engine. Each namespace
is a small class whose methods accept loosely typed values (strings, numbers,
booleans, `None`) and coerce them the way a template author would expect.
Most string functions take the subject text as their *last* argument, so they
read naturally when values are piped through a template.

## Installation

```
pip install tmplfuncs
```

## Namespaces

| Module | Classes / functions | What it offers |
| --- | --- | --- |
| `tmplfuncs.encoding` | `Base64Funcs`, `EncodeFuncs`, `CryptoFuncs` | base64 encode/decode, URL query escaping, SHA-1, SHA-224/256/384/512, SHA-512/224 and SHA-512/256 digests as hex or bytes |
| `tmplfuncs.paths` | `PathFuncs`, `FilePathFuncs` | lexical path handling: slash-separated (`PathFuncs`) or following the host OS (`FilePathFuncs`), including glob `match` and `rel` |
| `tmplfuncs.mathfuncs` | `MathFuncs` | arithmetic that stays integral unless a float is involved, `seq`, `min`/`max`, `ceil`/`floor`/`round` |
| `tmplfuncs.checks` | `CheckFuncs`, `CheckError` | `assert_that`, `fail`, `required`, `ternary`, `kind`, `is_kind` |
| `tmplfuncs.timefuncs` | `TimeFuncs`, `parse_num` | local zone name and offset, Unix times, duration constructors, `parse_duration`, `since`/`until` |
| `tmplfuncs.uuidfuncs` | `UUIDFuncs` | version 1 and 4 UUIDs, the nil UUID, validation and parsing |
| `tmplfuncs.refuncs` | `ReFuncs` | `find`, `find_all`, `match`, `quote_meta`, `replace`, `replace_literal`, `split` |
| `tmplfuncs.strfuncs` | `StringFuncs` | abbreviation, indentation, quoting, shell quoting, slugs, trimming, splitting, case changes |

Lower-level helpers:

- `tmplfuncs.values`: `to_string`, `to_bytes`, `to_int`, `to_float`,
  `to_bool`, `is_true` and `interface_slice`. Conversions to numbers give `0`
  for values that are not numeric; integer strings may carry `0x`, `0o`, `0b`
  or a leading-`0` octal prefix.
- `tmplfuncs.iohelpers`: `LazyReader` and `LazyWriter` (open the wrapped
  stream on first use), `EmptySkipper` (opens its target only once
  non-whitespace is written), `SameSkipper` (opens its target only once the
  output differs from existing content), `all_whitespace`,
  `normalize_file_mode` and `windows_file_mode`.

## Examples

```python
from tmplfuncs.mathfuncs import MathFuncs
from tmplfuncs.strfuncs import StringFuncs
from tmplfuncs.refuncs import ReFuncs
from tmplfuncs.encoding import CryptoFuncs
from tmplfuncs.checks import CheckFuncs, CheckError

m = MathFuncs()
m.add(1, 1, 2, 3, 5)      # 12
m.mul(14, "2")            # 28
m.seq(0, 4, 2)            # [0, 2, 4]
m.round(-4.5)             # -5.0

s = StringFuncs()
s.indent(3, "-", "foo\nbar")   # "---foo\n---bar"
s.squote("it's its")           # "'it''s its'"
s.slug("Hello, World!")        # "hello-world"
s.abbrev(6, 9, "foobarbazquxquux")  # "...baz..."

r = ReFuncs()
r.replace("i", "ello", "hi world")          # "hello world"
r.find_all(r"[a-z]+", 2, "foo bar baz")     # ["foo", "bar"]

CryptoFuncs().sha256("abc")
# "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

try:
    CheckFuncs().required("a value is needed", None)
except CheckError as err:
    print(err)                 # a value is needed
```

An output writer that only creates the file when there is something worth
writing:

```python
from tmplfuncs.iohelpers import EmptySkipper

with EmptySkipper(lambda: open("out.txt", "wb")) as writer:
    writer.write(b"   \n")     # only whitespace: out.txt is never opened
```

## Errors

Failures are raised as exceptions: `CheckError` from `CheckFuncs`,
`ZeroDivisionError` from `MathFuncs.div`, `re.error` for malformed regular
expressions, `ValueError` for bad base64, URL escapes, glob patterns, UUIDs,
durations and numbers, and `TypeError` for wrong argument counts or types in
`ReFuncs`, `StringFuncs.indent` and `StringFuncs.sort`.

## What this package does not do

It provides the functions only; it does not parse or render templates, and it
has no command-line tool. There are no namespaces here for data formats (JSON,
YAML, CSV, TOML), collections, random values or Kubernetes resources.

## Running the tests

```
pip install tmplfuncs[test]
pytest
```