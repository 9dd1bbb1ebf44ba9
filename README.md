# libftplus

A small collection of classic low-level utility routines with predictable,
well-defined edge cases: character tests, integer parsing with fixed-width
wrapping, byte-buffer operations, string helpers, a singly linked list,
writing to file descriptors, a line-at-a-time descriptor reader and a
minimal `printf`.

It is a library only; it installs no commands.

## Installation

```
pip install libftplus
```

To run the test suite:

```
pip install "libftplus[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `libftplus.chars` | `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`, `to_upper`; each takes an integer code or a one-character string |
| `libftplus.conversions` | `atoi` (32-bit result), `atoi_longlong` (64-bit result), `itoa` (32-bit signed input, `OverflowError` otherwise) |
| `libftplus.memory` | `calloc`, `bzero`, `memset`, `memchr`, `memcmp`, `memcpy`, `memmove` on bytes-like buffers; writing functions need a writable buffer such as a `bytearray` |
| `libftplus.strings` | `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy`, `strlcat` |
| `libftplus.linked_list` | `Node` and `LinkedList` |
| `libftplus.output` | `put_char`, `put_str`, `put_endl`, `put_nbr`, which write to a file descriptor (standard output by default) |
| `libftplus.printf` | `sprintf` and `printf` for the `%c %s %p %d %i %u %x %X %%` conversions |
| `libftplus.line_reader` | `LineReader` and `get_next_line`, which read a descriptor one line at a time |

Search functions such as `strchr`, `strnstr` and `memchr` return an index,
or `None` when nothing is found. `strlcpy` and `strlcat` work on writable
byte buffers holding NUL-terminated data.

## Examples

```python
from libftplus.conversions import atoi, itoa
from libftplus.strings import split, strtrim
from libftplus.printf import sprintf

atoi("   -42abc")               # -42
itoa(-2147483648)               # "-2147483648"
split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"
sprintf("%s is %x", "255", 255) # "255 is ff"
sprintf("%p", 0)                # "(nil)"
```

Linked lists:

```python
from libftplus.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
items.add_back(4)
len(items)                                # 5
list(items.map(lambda x: x * 10, None))   # [0, 10, 20, 30, 40]
```

`LinkedList.map` builds a new list; if the mapping function raises, the
values produced so far are passed to the optional `delete` callback and the
exception propagates.

Reading lines from a descriptor:

```python
import os
from libftplus.line_reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 10):
    print(line.decode("utf-8"), end="")
os.close(fd)
```

Lines are returned as `bytes`, each with its trailing newline except for a
final unterminated line. `get_next_line(fd)` does the same with a fixed
buffer of 10 bytes, and keeps unread data in one buffer shared by all calls,
whatever the descriptor; use a `LineReader` per descriptor to keep them apart.