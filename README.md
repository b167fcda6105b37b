# glibkit

General-purpose data structures and string helpers in plain Python, with
no dependencies outside the standard library.

## Modules

### `glibkit.slist`

`SList` is a singly linked list. You can build it from any iterable. It
supports `len()`, iteration and `in`, and it has these methods:

- `append`, `prepend` and `insert(data, position)`. A negative position
  appends. A position past the end also appends.
- `concat(other)` moves every item of `other` onto the end and leaves
  `other` empty. Passing the list itself raises `ValueError`.
- `remove(data)` drops the first equal item. It returns whether one was
  found.
- `copy`, `reverse` and `last`. `last` raises `IndexError` on an empty
  list.
- `nth(n)` raises `IndexError` when `n` is out of range. `index(data)`
  raises `ValueError` when `data` is missing.
- `find_custom(data, func)` returns the first item for which
  `func(item, data)` is zero, or `None`.
- `insert_sorted(data, func)` places an item before the first element it
  does not compare greater than.
- `sort(func)` is a stable merge sort. It is driven by a three-way compare
  function.

### `glibkit.timer`

`Timer` is a stopwatch based on the monotonic clock. It starts running as
soon as it is created.

- `start()` restarts timing from now.
- `stop()` freezes the elapsed time.
- `reset()` moves the start point to now without changing whether the
  timer runs.
- `elapsed()` returns seconds as a float. The result is never negative.

### `glibkit.relation`

`Relation(fields)` is an in-memory set of fixed-width tuples. Only
two-field relations are supported. Any other width raises `ValueError`.

- `index(field)` adds an index on a field. This is only allowed while the
  relation is empty.
- `insert(*values)` adds a tuple and `exists(*values)` tests whether one is
  present. Both raise `TypeError` if given the wrong number of values.
- `select(key, field)` returns the matching tuples as a list.
  `count(key, field)` returns how many there are.
- `delete(key, field)` removes every matching tuple from the relation and
  from all indexes. It returns how many were removed. These three methods
  need the field to be indexed and raise `ValueError` otherwise.
- `dump()` returns lines that describe every tuple and index. It also logs
  those lines at INFO level.
- `len()` gives the number of tuples.

### `glibkit.gstring`

- `str_hash(key)` is the 32-bit `h * 31 + c` string hash. It works on
  `str`, which is UTF-8 encoded first, and on `bytes`.
- `str_equal(a, b)` tests two strings for equality.
- `StringChunk(default_size)` stores strings. `insert` always stores a new
  copy. `insert_const` returns the copy already stored for an equal string,
  so repeated calls give back the same object.
- `StringBuffer(init=None)` is a mutable string. Every editing method
  returns the buffer, so calls can be chained. The editing methods are:
  - `assign`, `append` and `prepend`
  - `insert(pos, value)` and `erase(pos, length)`, which raise
    `IndexError` on a bad range
  - `truncate(length)`
  - `up` and `down`, which change the case of ASCII letters only
  - `sprintf` and `sprintfa`, which use `%` formatting and replace or
    append respectively

  `str()`, `len()` and `==`, against another buffer or a `str`, are
  supported.

### `glibkit.strfuncs`

These are C-style string helpers:

- `strndup(string, n)` and `strnfill(length, fill_char)`.
- `strdown`, `strup` and `strreverse`.
- `strcasecmp` and `strncasecmp` compare while ignoring ASCII case. They
  return a negative, zero or positive integer.
- `strdelimit(string, delimiters=None, new_delim="_")` replaces delimiter
  characters. The default set is `STR_DELIMITERS`.
- `strescape` doubles backslashes.
- `strchug` strips leading whitespace and `strchomp` strips trailing
  whitespace.
- `strsplit(string, delimiter, max_tokens=0)` splits on at most
  `max_tokens` delimiters, or on all of them when `max_tokens` is below 1.
  An empty trailing piece is dropped.
- `strjoinv(separator, strings)` and `strjoin(separator, *strings)`.
- `strtod(text)` parses a leading number in the C locale. It handles
  decimal, hex floats, `inf` and `nan`. It returns
  `(value, index_after_number)`, or `(0.0, 0)` when nothing parses.
- `strerror(errnum)` and `strsignal(signum)` return the system description
  of a number. For an unknown number they return `"unknown error (N)"` or
  `"unknown signal (N)"`.

### `glibkit.printf_bound`

`printf_string_upper_bound(format, *args)` returns a length that a
printf-style format, expanded with the given arguments, cannot exceed. The
terminating NUL is counted. The function reads the arguments without
formatting anything. It raises `TypeError` when there are too few
arguments. It logs a warning for constructs it cannot size exactly:
positional parameters, long doubles, wide strings and unknown conversions.

## Examples

```python
from glibkit.slist import SList

items = SList([8, 9, 7, 0, 3])
items.sort(lambda a, b: a - b)
print(list(items))          # [0, 3, 7, 8, 9]

from glibkit.relation import Relation

rel = Relation(2)
rel.index(0)
rel.index(1)
rel.insert(1, 2)
rel.insert(1, 0)
print(rel.count(1, 0))      # 2
print(rel.exists(1, 2))     # True
rel.delete(1, 0)
print(len(rel))             # 0

from glibkit.gstring import StringBuffer

buf = StringBuffer("hi pete!")
buf.append("!").up()
print(str(buf))             # HI PETE!!

from glibkit.strfuncs import strsplit, strjoinv

print(strsplit("a,b,,c", ",", 0))   # ['a', 'b', '', 'c']
print(strjoinv("-", ["x", "y"]))    # x-y
```

## Limitations

- The library has no thread primitives of its own. For locks, conditions
  and thread-local data, use the standard `threading` module.
- `Relation` handles two-field tuples only.
- The package has no command-line interface.

## Running the tests

```
pip install "glibkit[test]"
pytest
```