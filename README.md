# clifkit

Small building blocks for terminal programs, using only the standard library:

- **Terminal width** detection (`clifkit.term`)
- **Text wrapping** that understands ANSI colour sequences (`clifkit.wrap`)
- **Parameters**: command line arguments and options with validation and typed access (`clifkit.parameter`, `clifkit.validators`)
- **Registry**: a name-keyed container of objects (`clifkit.registry`)
- **Progress bars**, single or as a live-rendered pool (`clifkit.progress_style`, `clifkit.progress_bar`, `clifkit.progress`)
- **Tables** with borders, column sizing and wrapping (`clifkit.table`, `clifkit.table_style`, `clifkit.table_row`, `clifkit.table_col`)

## Installation

```
pip install clifkit
```

## Terminal width

`term_width()` returns the width of the terminal on standard input, less a
small right margin, and raises `OSError` when there is none.
`current_width()` returns the same, or 78 (`DEFAULT_WIDTH`) when the width
cannot be determined.

## Wrapping text

```python
from clifkit.wrap import Wrapper, TrimMode, WhitespaceMode, wrap, visible_length

print(wrap("foo bar baz foo bar baz", 12))
# foo bar baz
# foo bar baz

wrapper = Wrapper(8, break_words=True)
wrapper.trim_mode = TrimMode.BOTH
print(wrapper.wrap("  Line 1  \n  Line 2  "))
# Line 1
# Line 2
```

A `Wrapper` has these settings:

- `limit`: the maximum visible length of a line
- `break_words`: split words longer than the limit (default `False`)
- `keep_empty_lines`: keep lines that hold only whitespace (default `False`)
- `trim_mode`: `TrimMode.NONE`, `RIGHT` (default), `LEFT` or `BOTH`
- `whitespace_mode`: `WhitespaceMode.CONTRACT` (default) collapses runs of
  spaces, `WhitespaceMode.KEEP` keeps them

Colour sequences (`ESC[...m`) do not count towards the line length. A colour
that is still open at a line break is closed at the end of the line and
reopened on the next one. `visible_length(text)` counts the characters of
`text` without its colour sequences.

## Parameters

```python
from clifkit.parameter import Argument, Option, ParameterError
from clifkit.validators import is_int

count = Argument("count", usage="How many", parse=is_int)
count.assign("10")
count.as_int()        # 10

verbose = Option.make_flag("verbose", "v", "Talk more", False)
verbose.flag          # True
```

`Argument` and `Option` share the fields of `Parameter`: `name`, `usage`,
`default`, `required`, `multiple`, `description`, `env`, `parse` and `regex`
(a pattern or a string that is compiled). `Option` adds `alias` and `flag`.

`assign(value)` checks the value against `regex` and passes it through the
`parse` callback, whose return value is stored instead. It raises
`ParameterError` when the regex does not match, when the callback raises
`ValueError`, or when a second value is given to a parameter that is not
`multiple`.

Values are read back with `as_string`, `as_int`, `as_float`, `as_bool`,
`as_time(fmt)` and `as_json`, and in their plural forms (`as_strings`,
`as_ints`, ...) for all values. Numbers and booleans that cannot be parsed
come back as `0`, `0.0` or `False`. `as_time` uses `"%Y-%m-%d %H:%M:%S"` by
default and returns a UTC datetime; `as_time` and `as_json` raise
`ValueError` for values that do not parse. `provided()` and `count()` tell
whether and how many values were assigned.

`clifkit.validators` offers `is_int` (positive integers without leading
zeros), `is_float` (non-negative decimals), and `is_any(*validators)` /
`is_all(*validators)` to combine callbacks.

## Registry

```python
from clifkit.registry import Registry

registry = Registry()
registry.alias("answer", 42)
registry.register(object())          # stored as "builtins.object"
registry.names()                     # ['answer', 'builtins.object']
registry.reduce(lambda name, value: isinstance(value, int))   # [42]
```

`register(value)` stores an object under its module-qualified type name,
`alias(name, value)` under a name of your choice. `get` returns `None` for an
unknown name. `reduce` runs a callback over all objects in name order;
`reduce_async` runs it in threads and yields the selected objects in no
particular order.

## Progress bars

```python
from clifkit.progress_bar import ProgressBar, OutOfBoundsError
from clifkit.progress_style import ascii_style, Addon

bar = ProgressBar(200)
bar.style = ascii_style()
bar.style.count = Addon.PREPEND
bar.render_width = 60
bar.set(50)
print(bar.render())
```

A bar moves with `set`, `increase`, `increment` and `finish`; positions below
zero or beyond the size raise `OutOfBoundsError`. `render()` returns exactly
`render_width` characters of text, including the count, elapsed time,
estimate and percentage addons that the style places before
(`Addon.PREPEND`) or after (`Addon.APPEND`) the bar. `utf8_style()` and
`ascii_style()` return fresh styles; `ProgressBarStyle.copy()` copies one.
`render_fixed_size_duration(seconds)` renders a duration as six characters.

Several bars are rendered together with `clifkit.progress.ProgressBarPool`:

```python
from clifkit.progress import ProgressBarPool

pool = ProgressBarPool()
pool.init("download", 100)
pool.init("unpack", 100)
pool.start()
pool.increment("download", "unpack")
pool.finish().wait()
```

The pool redraws all bars on its output stream (standard output unless given)
every 50 milliseconds until `finish`, which moves every bar to its end and
returns an event that is set once the last rendering is written.
`use_style` and `use_width` change all bars and raise `RuntimeError` while the
pool is running. Unknown bar names raise `KeyError`.

## Tables

```python
from clifkit.table import Table
from clifkit.table_style import open_table_style

table = Table(["Name", "Size"])
table.add_row(["alpha", "10"])
table.add_row(["beta", "200"])
print(table.render(60))

table.style = open_table_style()
print(table.render(60))
```

Column widths are shared out in proportion to their content, and cell content
is wrapped to fit. A width of `0` means the terminal width.

Rows are added with `add_row`, `add_rows`, `set_row` and `set_column`; they
raise `TableError` when headers are missing, the column count does not match
or an index is out of range. With `allow_empty_fill` set, `set_row` beyond the
last row inserts empty rows in between. `reset()` removes all rows.

Styles come from `clifkit.table_style`: `closed_table_style()` (the default,
also `default_table_style()`), `open_table_style()` and their `_light`
variants, each a new `TableStyle` whose fields and `header_renderer` /
`content_renderer` can be changed freely.

## What this package does not do

There is no command runner: nothing reads `sys.argv`, matches it against
arguments and options or calls commands. A parameter's `default` and `env`
are stored for such a runner but are not applied by `assign`. There is also
no markup for colours; text is wrapped and measured with raw ANSI sequences.

## Running the tests

From a checkout of the package:

```
pip install -e ".[test]"
python -m pytest
```