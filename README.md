# rexgram

`rexgram` reads a regular-expression pattern and builds a syntax tree for it.
It has two stages:

- `rexgram.tokens` splits the pattern into terminal tokens.
- `rexgram.parser` turns those tokens into a list of branches of elements:
  sequences, character sets, groups and quantified objects.

The tree is made of the classes in `rexgram.syntax`.

## Installing

```
pip install rexgram
```

There are no runtime dependencies. Python 3.10 or later is required.

## Usage

Parse a pattern in one step:

```python
from rexgram.parser import parse

regexp = parse("^(abcd)|efg|()")
print(len(regexp))  # 3 branches
```

Or tokenize first and then parse the tokens:

```python
from rexgram.tokens import tokenize, token_name
from rexgram.parser import produce

tokens = tokenize("123{3,7}")
print([token_name(t.kind) for t in tokens])
# ['CHAR', 'CHAR', 'CHAR', 'BEGIN_QUANTIFIER', 'NUMBER', 'COMMA',
#  'NUMBER', 'END_QUANTIFIER', 'TERMINATOR']
regexp = produce(tokens)
```

A pattern that the grammar does not accept raises `ParseError`, a subclass of
`ValueError`. Its `position` attribute is the index of the offending token and
`token` is that token, if there was one:

```python
from rexgram.parser import ParseError, parse

try:
    parse("(abcd[(sdcc)])")
except ParseError as err:
    print("rejected at token", err.position)
```

## Tokens

`tokenize(text)` accepts `str` (encoded as UTF-8) or `bytes` and reads up to
the first NUL byte. It returns a list of `Terminal` objects, each with a
`kind` (a `TokenType`) and a `value`; the list always ends with a
`TERMINATOR`.

- `[ ( { , ] ) } - ^ | + ? *` are operator tokens with value 0.
- Between `{` and `}`, a run of the digits `0` to `8` becomes one `NUMBER`
  token; the value is kept in 24 bits and wraps around above 16777215.
- Every other byte is a `CHAR` whose value is the byte.

`token_name(kind)` returns the name of a kind, given as a `TokenType` member
or its integer value.

## Grammar in brief

- `|` separates branches; an empty pattern, or an empty group `()`, gives an
  empty list of branches.
- Consecutive plain characters form one sequence element.
- `[...]` is a character set holding characters, `a-z` ranges and nested
  sets; `^` inside a set moves the next character or nested set to the
  inverse side.
- `(...)` is a group; `^` in front of a character, set or group inverts it.
- `?`, `+`, `*`, `{n}` and `{n,m}` quantify the preceding object. They map to
  `Quantifier(0, 1)`, `Quantifier(1, 0)`, `Quantifier(0, 0)`,
  `Quantifier(n, n)` and `Quantifier(n, m)`; a maximum of `0` means unbounded.
  Bounds are kept in 16 bits.

## The syntax tree

`parse` and `produce` return a list of branches; a branch is a list of
`Element` objects. An `Element` has a `kind` (a `Kind`), an `inverse` flag and
a `target`:

| kind               | target                                    |
|--------------------|-------------------------------------------|
| `Kind.SEQUENCE`    | a `str` of the characters                 |
| `Kind.CHAR`        | a single `str` character (after `^`)      |
| `Kind.CHARSET`     | a `Charset`                               |
| `Kind.GROUP`       | a `Group`, whose `regexp` is a branch list |
| `Kind.QUANTIFIED`  | a `Quantified` with `quantifier` and `element` |

A `Charset` has a `normal` and an `inverse` `CharsetPart`, each with a list
of `plains` (characters) and a list of `ranges` (`Range(min, max)`).
Characters already present are not added twice. A range that overlaps an
existing one is merged into it (`update_ranges`); otherwise it is appended.
`Charset.from_units` builds a set from `Unit` objects, and `extend_unique`
appends the items not already in a list.

## What it does not do

`rexgram` only builds the syntax tree. It does not compile patterns, and it
does not match them against text.

## Running the tests

```
pip install -e .[test]
pytest
```