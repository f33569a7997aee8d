# glibcore

A small toolkit of general-purpose building blocks, written in plain Python
with no dependencies outside the standard library.

## Modules

- **`glibcore.arrays`**: `Array`, a growable element array. It supports
  `append_vals`, `prepend_vals`, `insert_vals`, `set_size`, `remove_index`
  and `remove_index_fast`, which moves the last element into the freed slot.
  `ByteArray` is an array of byte values (0-255) with `append`, `prepend`
  and `bytes()` conversion. `PtrArray` is an array of object references with
  `add`, `set_size`, `remove`, `remove_fast` and the index-based removals.
- **`glibcore.hashtable`**: `HashTable`, which takes an optional hash function
  and key-equality function, or compares keys by identity when given
  `identity=True`. It offers `lookup`, `lookup_extended` (which returns the
  stored key and its value), `insert` (an existing key object is kept),
  `remove`, `foreach`, `foreach_remove`, and `freeze`/`thaw`.
- **`glibcore.linkedlist`**: `LinkedList` of `ListNode` objects. Nodes can be
  held and detached (`remove_link`). The list also offers positional
  insertion, `insert_sorted`, `concat`, `reverse`, `find`/`find_custom`,
  `index`/`position`, and two sorts: a top-down merge sort (`sort`) and a
  merge of ascending runs (`sort_runs`).
- **`glibcore.completion`**: `Completion`, which does prefix completion over a
  set of items, optionally through a function that maps each item to its
  string. `complete(prefix)` returns the matching items together with the
  longest prefix they all share, or `None` when nothing matches. The last
  result is cached and reused when the next prefix extends it.
- **`glibcore.cache`**: `Cache`, a reference-counted cache. `insert(key)`
  creates a value from a duplicate of the key the first time and otherwise
  returns the shared value. `remove(value)` drops one reference and destroys
  the key and the value on the last one.
- **`glibcore.date`**: `Date`, a mutable calendar date that holds
  day/month/year, a day count from 1 January of year 1, or both. It supports
  day, month and year arithmetic, Monday- and Sunday-based week numbers,
  comparison, `to_struct_tm` and `strftime`. The module also has the helpers
  `valid_dmy`, `is_leap_year`, `days_in_month`, `monday_weeks_in_year`,
  `sunday_weeks_in_year`, and `Weekday`.
- **`glibcore.dateparse`**: `DateParser`, `parse_date` and `set_parse`. They
  read free-form date text using the month names and the day/month/year order
  of the current `LC_TIME` locale. Text that is not a date gives an invalid
  `Date`.
- **`glibcore.iochannel`**: `IOChannel`, a reference-counted channel over a
  binary stream with `read`, `write`, `seek` (`SeekType.SET`/`CUR`/`END`) and
  `close`. Failures raise `ChannelError`, whose `kind` is `AGAIN`, `INVAL` or
  `UNKNOWN`.
- **`glibcore.unixchannel`**: `UnixIOChannel`, the same interface over a raw
  file descriptor (`fileno()` returns it).

## Installation

```
pip install glibcore
```

For running the test suite:

```
pip install "glibcore[test]"
pytest
```

## Examples

Dates:

```python
from glibcore.date import Date, is_leap_year, days_in_month

d = Date.from_dmy(4, 7, 1976)
d.add_months(8)
print(d.day(), d.month(), d.year())   # 4 3 1977
print(d.weekday())
print(is_leap_year(2000), days_in_month(2, 1900))   # True 28
```

Completion:

```python
from glibcore.completion import Completion

completion = Completion()
completion.add_items(["cat", "catalog", "dog"])
matches, longest = completion.complete("ca")
print(sorted(matches), longest)   # ['cat', 'catalog'] cat
```

Object arrays:

```python
from glibcore.arrays import PtrArray

items = PtrArray()
for word in ("alpha", "beta", "gamma"):
    items.add(word)
items.remove_fast("alpha")   # the last element moves into the freed slot
print(list(items))           # ['gamma', 'beta']
```

## Command line

`glibcore-complete` reads candidate lines from a file and completes each
prefix given after it:

```
glibcore-complete words.txt ca do
```

For each prefix it prints `COMPLETING: <prefix>`, then every matching line,
then `LONG MATCH: <longest common prefix>`. If nothing matches, it prints
`(null)` in place of the longest common prefix.

## What it does not do

The package does not provide interned-string identifiers or keyed data lists
attached to objects. It has no callback hook lists, and it does not handle
fatal errors, for example by prompting or printing a stack trace. Its I/O
channels only read, write and seek. They do not register with any event loop,
and they do not watch descriptors for readiness.