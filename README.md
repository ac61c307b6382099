# textstack

Build text a piece at a time: HTML pages, SQL statements, log reports and
anything else with nested, indented structure. The package also has string
helpers and a small array type for lists of text pieces.

It is a library only. It has no command-line tool and does not read or write
files. Output goes to a string, and `represent` can also print it to
standard output.

## Install

```
pip install textstack
```

## Modules

- `textstack.stack`: `TextStack`, the `Tag` enum of common HTML tag names,
  and the `LINE_BREAKER` (`"\n"`) and `SEPARATOR` (three spaces) defaults.
- `textstack.array`: `TextArray`, an ordered list of `TextStack` objects.
- `textstack.textops`: the string helpers as plain functions on `str`, plus
  the `ValueType` enum.
- `textstack.formatting`: `format_text` and `format_double`.

## Building markup

A `TextStack` holds its text in `rendered_text`, together with a line breaker,
an indentation separator and an indentation level (`ident_level`). Use
`str(stack)` to read the text and `len(stack)` to get its length. `segment()`
starts a new line and indents it to the current level. Opening a tag raises
the level by one, and closing a tag lowers it by one.

```python
from textstack.stack import TextStack, Tag

s = TextStack("\n", "   ")
s.open_format(Tag.HTML, 'lang="%s"', "en")
s.open(Tag.HEAD)
s.close(Tag.HEAD)
s.open(Tag.BODY)
s.open(Tag.H1)
s.segment_text("This is a text")
s.close(Tag.H1)
s.close(Tag.BODY)
s.close(Tag.HTML)
print(s)
assert s.ident_level == 0  # every tag was closed
```

`scope` and `scope_format` are context managers. They open the tag when the
block starts and close it when the block ends normally:

```python
s = TextStack("\n", "   ")
with s.scope_format(Tag.HTML, 'lang="%s"', "en"):
    with s.scope(Tag.BODY):
        with s.scope(Tag.P):
            s.segment_format("Hello %s", "world")
```

If the tag passed to `open`, `close` or `scope` is `None`, only the
indentation level changes. This is useful for text that is not markup:

```python
s = TextStack()
s.format("INSERT INTO '%s' (", "users")
s.open(None)
s.segment_format("'%s'", "name")
s.format(",'%s'", "email")
s.segment_text(")")
s.close(None)
```

Two more methods write a tag without changing the level.
`only_open_format` writes an opening tag and nothing else.
`auto_close_format` writes a self-closing tag:

```python
s.only_open_format(Tag.META, 'name="%s"', "viewport")   # <meta name="viewport">
s.auto_close_format(Tag.IMG, 'src="%s"', "img.com")      # <img src="img.com"/>
```

Passing an empty line breaker and separator gives minified output.

## Creating and copying stacks

- `TextStack.from_string(text)`, `TextStack.from_format(fmt, *args)` and
  `TextStack.empty()` create stacks with an empty line breaker and separator.
- `clone()` returns an independent copy, including the indentation level.
- `restart()` clears the text and the indentation level.
- `represent()` prints the text and a newline, and returns what it printed.

## Format directives

`format`, `segment_format`, `from_format` and the `*_format` methods all use
`textstack.formatting.format_text`. It understands these directives:

| Directive | Meaning |
|-----------|---------|
| `%d`, `%i`, `%ld` | integer |
| `%f`, `%lf` | float, with trailing zeros removed (at least one decimal kept) |
| `%c` | a character, given as an `int` code point or a string |
| `%b` | `true` or `false` |
| `%s`, `%sc` | string; `None` renders nothing |
| `%t`, `%tc` | any object rendered with `str()`, for example another stack; `None` renders nothing |

Any other text, including a lone `%`, is copied unchanged. If there are too
few arguments, a `TypeError` is raised. `format_double(1.81)` returns
`"1.81"` and `format_double(26)` returns `"26.0"`.

## String helpers

Every transformation comes in two forms. The plain form returns a new stack
with the same layout settings. The `self_` form changes the stack in place.

```python
s = TextStack.from_string("my string")
s.substr(0, 2)          # "my"
s.pop(1, 2)             # "mtring"  (both ends inclusive)
s.insert_at(2, "aaa")   # "myaaa string"
s.self_upper()          # s is now "MY STRING"
```

Index handling:

- Indexes past the end are clamped to the length.
- Negative indexes count from the end, and `-1` means the end of the text.
  So `substr(3, -1)` runs to the end.

The transformations are:

- `substr`, `pop`, `insert_at`
- `replace`, `replace_long`, `replace_double`
- `lower`, `upper` and `capitalize` (ASCII letters only)
- `reverse`
- `trim` (removes tabs, carriage returns, newlines and spaces; text made only
  of these is left as it is)

The queries are `index_of`, `index_of_char`, `starts_with`, `ends_with` and
`equal`.

Type sniffing:

- `typeof()` returns a `ValueType`: `LONG`, `DOUBLE`, `BOOL` or `STRING`.
- `typeof_in_str()` returns its name.
- `is_a_num()` tells whether the text holds a number.
- `parse_to_bool()` returns true only for the exact text `"true"`.
- `parse_to_integer()` and `parse_to_double()` read a leading number. They
  raise `ValueError` when there is none.

The same helpers also work on plain strings through `textstack.textops`.

## Arrays

```python
from textstack.array import TextArray
from textstack.stack import TextStack

arr = TextArray()
arr.append_string("aaa")
arr.append_string("123")
nums = arr.filter(TextStack.is_a_num)     # copies of matching elements
upper = arr.map(TextStack.upper)          # new array of results
arr.foreach(TextStack.self_upper)         # in place
print(upper.join(","))                    # AAA,123
arr.includes("123")                       # True
parts = TextArray.split("a,b,c", ",")     # ["a", "b", "c"]
```

A `TextArray` supports `len()`, iteration and indexing. Use `append` to add a
stack and `represent` to print each element on its own line.

`split` ignores an empty target. When the target is longer than one
character, only its first character is dropped at each match. The rest of the
target begins the next piece.