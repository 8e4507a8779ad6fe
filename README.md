# miniprintf

A small formatter with no dependencies, modelled on C's `printf`. It supports
a fixed set of conversions. It has no flags, field widths or precision.

| Spec | Argument             | Output                                                    |
|------|----------------------|-----------------------------------------------------------|
| `%c` | one-char str or code | that character; an integer code is taken modulo 256       |
| `%s` | str                  | the string as given; any other type raises `TypeError`    |
| `%p` | address or `None`    | `0x`-prefixed lower-case hex; `(nil)` for `None` or 0     |
| `%d` | integer              | signed decimal, wrapped to 32 bits                        |
| `%i` | integer              | signed decimal, wrapped to 32 bits                        |
| `%u` | integer              | unsigned decimal, wrapped to 32 bits                      |
| `%x` | integer              | lower-case hex, wrapped to 32 bits                        |
| `%X` | integer              | upper-case hex, wrapped to 32 bits                        |
| `%%` | none                 | a literal `%`                                             |

Addresses given to `%p` are wrapped to 64 bits.

An unknown conversion character produces no output and takes no argument. The
character after `%` is always consumed, so a trailing `%` produces nothing.
If the format asks for more arguments than were given, `TypeError` is raised.
Extra arguments are ignored.

## Installation

```
pip install .
```

## Usage

```python
from miniprintf.printf import printf, sprintf

text = sprintf("%s has %d items (0x%X)", "cart", 42, 42)
# 'cart has 42 items (0x2A)'

count = printf("%u%%\n", 100)   # writes "100%\n" to stdout, returns 5
```

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args, file=None)`
writes it to standard output, or to the text stream given as `file`. It
returns the number of characters written.

`convert(spec, args)` renders a single conversion. It takes its argument, if
it needs one, from the iterator `args`. `Conversion` is an enum of the
supported specifiers. Each member has a `takes_argument` property and a
`render(value)` method.

The individual renderers are in `miniprintf.conversions`:

```python
from miniprintf.conversions import (
    format_hex, format_pointer, format_signed, format_unsigned, to_base,
)

format_hex(255, uppercase=True)   # 'FF'
format_pointer(0xDEADBEEF)        # '0xdeadbeef'
format_pointer(None)              # '(nil)'
format_unsigned(-1)               # '4294967295'
format_signed(2**31)              # '-2147483648'
to_base(10, "01")                 # '1010'
```

`to_base` raises `ValueError` for a negative value, for fewer than two digits,
or for repeated digits.

## Running the tests

```
pip install .[test]
pytest
```