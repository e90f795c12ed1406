# sqlproc

Text-handling building blocks for a SQL query processor. The package has
string helpers, an exception hierarchy for query errors, and conversions
between UTF-8, UTF-16 and UTF-32 code units.

## What it does not do

The package does not parse or execute SQL, load CSV tables, or store data,
and it has no interactive shell or command. The exception classes in
`sqlproc.errors` are defined here so that code built on top can raise them.
Nothing in this package raises them itself.

## `sqlproc.strings`

These helpers treat case as ASCII-only and whitespace as the six C
whitespace characters (space, `\t`, `\n`, `\v`, `\f`, `\r`).

- `trim(text)`, `trim_left(text)`, `trim_right(text)` strip that whitespace.
- `to_lower(text)` and `to_upper(text)` change ASCII letters only.
- `iequals(a, b)` compares two strings ignoring ASCII case.
- `split(text, delimiters=" ", keep_empty=False)` splits on any single
  character of `delimiters`. Empty pieces are dropped unless `keep_empty` is
  true. An empty `delimiters` returns `[text]`, or `[]` if `text` is empty
  and `keep_empty` is false.
- `join(parts, delimiter=", ")` joins strings.
- `starts_with(text, prefix)` and `ends_with(text, suffix)` test the start
  and the end of a string.
- `replace_all(text, old, new)` replaces every non-overlapping `old`. An empty
  `old` leaves the text unchanged.

## `sqlproc.errors`

`QueryError` derives from `RuntimeError` and is the base class. Three classes
derive from it, and each prefixes its message:

| Class | Message prefix |
| --- | --- |
| `QuerySyntaxError` | `"Syntax error: "` |
| `SemanticError` | `"Semantic error: "` |
| `QueryIOError` | `"I/O error: "` |

## Code-unit conversion

`sqlproc.conversion` holds the shared types:

- `ConversionResult` has four values: `OK`, `SOURCE_EXHAUSTED`,
  `TARGET_EXHAUSTED` and `SOURCE_ILLEGAL`.
- `ConversionFlags` has two values. `STRICT` rejects lone surrogates.
  `LENIENT` turns them into U+FFFD.
- `Conversion` is a frozen dataclass with three fields:
  - `result`: the outcome.
  - `units`: a tuple of the target code units produced.
  - `consumed`: how many source units were used.

  Its `ok` property is true when `result` is `OK`.
- The module also defines the constants `REPLACEMENT_CHAR`, `MAX_BMP`,
  `MAX_UTF16`, `MAX_UTF32` and `MAX_LEGAL_UTF32`, and the surrogate range
  bounds.

The conversion functions are split across two modules:

- `sqlproc.utf16`: `utf32_to_utf16`, `utf16_to_utf32`, `utf16_to_utf8`.
- `sqlproc.utf8`: `utf8_to_utf16`, `utf32_to_utf8`, `utf8_to_utf32`, and
  `is_legal_utf8_sequence(source)`. `is_legal_utf8_sequence` checks the single
  sequence that begins at the first byte of `source`. It raises `ValueError`
  if `source` is empty.

Every conversion takes `(source, flags=ConversionFlags.STRICT, capacity=None)`:

- `source` is any iterable of integer code units. A bytes object works for
  UTF-8.
- `capacity` limits how many target units may be written. `None` means no
  limit.
- A unit outside the range of its encoding raises `ValueError`.

Conversion stops at the first problem and reports it in `result`, keeping the
units converted before that point. `utf32_to_utf8` and `utf8_to_utf32` behave
differently for code points above U+10FFFF: they write U+FFFD, mark the result
`SOURCE_ILLEGAL`, and go on converting.

```python
from sqlproc.conversion import ConversionFlags, ConversionResult
from sqlproc.utf8 import utf8_to_utf32
from sqlproc.utf16 import utf16_to_utf8

conv = utf8_to_utf32(b"h\xc3\xa9", ConversionFlags.STRICT)
assert conv.result is ConversionResult.OK
assert conv.units == (0x68, 0xE9)
assert conv.consumed == 3

partial = utf16_to_utf8([0x41, 0xD800])
assert partial.result is ConversionResult.SOURCE_EXHAUSTED
assert partial.units == (0x41,)
assert partial.consumed == 1
```

## Installing for development

```
pip install -e .[test]
pytest
```