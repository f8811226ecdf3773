# wirekit

A small toolkit of low-level text and drawing helpers with C-library style
behaviour:

- `wirekit.text`: string routines `split`, `strchr`, `strrchr`, `strnstr`,
  `strncmp`, `same_string`, `strlcpy`, `strlcat`, `strmapi` and `striteri`.
  Searches return an index or `None`; `strlcpy` and `strlcat` return the
  resulting string together with the length the full result would have had.
- `wirekit.output`: write to a text stream or a raw file descriptor with
  `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`.
- `wirekit.linereader`: read a file descriptor one line at a time with
  `LineReader.next_line` or the module-level `get_next_line`. Lines come back
  as `bytes` with their newline; `None` means end of input or a read error.
  `LineReader.forget` discards what is buffered for a descriptor.
- `wirekit.printf`: `sprintf` and `printf` with the `c s p d i u x X %`
  conversions, the `- 0 . # + ` (space) flags and a field width. The parsing,
  conversion and flag steps are available on their own in
  `wirekit.printf_spec`, `wirekit.printf_convert` and `wirekit.printf_flags`.
- `wirekit.raster`: an in-memory RGBA `Image` and an anti-aliased line drawer,
  `draw_line`, that works from a `DrawTargets` description.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Splitting text:

```python
from wirekit.text import split, strchr

split("  a b  c ", " ")      # ['a', 'b', 'c']
strchr("hello", "l")         # 2
strchr("hello", "z")         # None
```

Formatting:

```python
from wirekit.printf import sprintf

sprintf("%5d|%-5s|%#x", 42, "ab", 255)   # '   42|ab   |0xff'
```

`sprintf` raises `ValueError` for a `%` with no conversion character after it
and `TypeError` when there are fewer arguments than conversions. `printf`
writes the same text to standard output and returns its length.

Reading lines:

```python
import os
from wirekit.linereader import LineReader

reader = LineReader(4096)
fd = os.open("data.txt", os.O_RDONLY)
while (line := reader.next_line(fd)) is not None:
    print(line.decode(), end="")
os.close(fd)
```

Drawing a line:

```python
from wirekit.raster import Image, draw_line, targets_at_center

image = Image(64, 64)
targets = targets_at_center(32, 32)
targets.x1, targets.y1 = 60, 40
draw_line(image, targets)
image.get_pixel(40, 34)      # 32-bit RGBA colour of that pixel
```

## What it does not do

- There is no command-line program; everything is used as a library.
- `wirekit.raster` only draws into an in-memory `Image`. It does not open a
  window, show the image, or save it to a file, and it does not load or
  project maps or models: you supply the line endpoints yourself.